from __future__ import annotations

import time
from typing import List, Optional, Sequence

from .config import ChartConfig, load_config
from .logger import LogManager
from .lttb import downsample as lttb_downsample
from .selector import Point

__all__ = ["prepare_chart_data"]

log = LogManager("chart_data").get_logger()


def prepare_chart_data(
    points: Sequence[Point],
    *,
    downsample: Optional[bool] = None,
    output_samples_count: Optional[int] = None,
    config: Optional[ChartConfig] = None,
) -> List[Point]:
    """
    Prepara i dati da passare al grafico a linee.

    - downsample: se False restituisce la serie grezza; None = valore da config.
    - output_samples_count: cardinalità richiesta; None = valore da config.
    - config: ChartConfig esplicito; None = load_config(), il cui log_level
      viene applicato al logger 'lttb_chart.chart_data'.

    Gli errori di contratto (serie vuota, cardinalità < 3, punti non numerici)
    vengono propagati: decide il chiamante se mostrare i dati grezzi.
    """
    if config is None:
        cfg = load_config()
        LogManager("chart_data").get_logger(cfg.log_level)
    else:
        cfg = config

    enabled = cfg.downsample if downsample is None else downsample
    if not enabled:
        return list(points)

    target = cfg.output_samples_count if output_samples_count is None else output_samples_count

    started = time.perf_counter()
    data_to_downsample = list(points)
    downsampled = lttb_downsample(data_to_downsample, target)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    log.info("prepare_chart_data: %.3f ms", elapsed_ms)
    log.info("Input %d, Output %d", len(data_to_downsample), len(downsampled))
    return downsampled
