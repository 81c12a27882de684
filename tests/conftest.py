"""Configurazione pytest e fixtures condivise."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Iterator, List, Tuple

import pytest

from tests.fixtures.synthetic_signals import as_points, generate_noisy_sine


@pytest.fixture
def zigzag_points() -> List[Tuple[int, int]]:
    """Serie a dente di sega: 0 e 5 alternati su x = 0..6."""
    return [(0, 0), (1, 5), (2, 0), (3, 5), (4, 0), (5, 5), (6, 0)]


@pytest.fixture
def noisy_points() -> List[Tuple[float, float]]:
    """Sinusoide rumorosa da 2000 punti (seed fisso)."""
    t, signal = generate_noisy_sine(fs=1000.0, duration=2.0)
    return as_points(t, signal)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[object], Path]:
    """Scrive un config.json temporaneo e ne restituisce il path."""
    def _write(content: object) -> Path:
        path = tmp_path / "config.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def lttb_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """caplog collegato al logger 'lttb_chart' (che non propaga al root)."""
    base = logging.getLogger("lttb_chart")
    base.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        base.removeHandler(caplog.handler)
