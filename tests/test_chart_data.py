"""Test per lttb_chart/chart_data.py - gate di downsampling lato grafico."""
from __future__ import annotations

import logging

import pytest

from lttb_chart.chart_data import prepare_chart_data
from lttb_chart.config import ChartConfig
from lttb_chart.errors import InvalidArgumentError
from lttb_chart.lttb import downsample


def test_flag_off_returns_raw_series(noisy_points):
    result = prepare_chart_data(noisy_points, downsample=False, config=ChartConfig())
    assert result == noisy_points
    assert result is not noisy_points


def test_flag_on_uses_config_count(noisy_points):
    cfg = ChartConfig(output_samples_count=150)
    result = prepare_chart_data(noisy_points, config=cfg)
    assert result == downsample(noisy_points, 150)


def test_explicit_arguments_override_config(noisy_points):
    cfg = ChartConfig(output_samples_count=150, downsample=False)
    result = prepare_chart_data(noisy_points, downsample=True, output_samples_count=40, config=cfg)
    assert len(result) == 40


def test_config_flag_off(noisy_points):
    cfg = ChartConfig(downsample=False)
    assert len(prepare_chart_data(noisy_points, config=cfg)) == len(noisy_points)


def test_logs_input_and_output_counts(noisy_points, lttb_caplog):
    lttb_caplog.set_level(logging.INFO)
    prepare_chart_data(noisy_points, output_samples_count=100, config=ChartConfig())
    messages = [r.getMessage() for r in lttb_caplog.records if r.name == "lttb_chart.chart_data"]
    assert "Input 2000, Output 100" in messages
    assert any(m.startswith("prepare_chart_data:") and m.endswith(" ms") for m in messages)


def test_contract_errors_propagate(zigzag_points):
    with pytest.raises(InvalidArgumentError):
        prepare_chart_data(zigzag_points, output_samples_count=2, config=ChartConfig())
    with pytest.raises(InvalidArgumentError):
        prepare_chart_data([], config=ChartConfig())


@pytest.fixture
def chart_data_logger():
    logger = logging.getLogger("lttb_chart.chart_data")
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def test_explicit_config_does_not_touch_logger_level(noisy_points, chart_data_logger):
    chart_data_logger.setLevel(logging.INFO)
    prepare_chart_data(noisy_points, config=ChartConfig(log_level="ERROR"))
    prepare_chart_data(noisy_points, config=ChartConfig(log_level="DEBUG"))
    assert chart_data_logger.level == logging.INFO


def test_file_config_sets_logger_level(noisy_points, chart_data_logger, write_config, monkeypatch):
    path = write_config({"log_level": "warning", "output_samples_count": 50})
    monkeypatch.setattr("lttb_chart.config.CONFIG_PATH", path)
    result = prepare_chart_data(noisy_points)
    assert len(result) == 50
    assert chart_data_logger.level == logging.WARNING
