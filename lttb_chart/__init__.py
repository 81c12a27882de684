"""
Downsampling LTTB (Largest-Triangle-Three-Buckets) per grafici a linee.

API principale:
- downsample / downsample_indices: algoritmo su sequenze di coppie (x, y)
- downsample_series: adattatore pandas
- prepare_chart_data: gate lato grafico (flag + cardinalità da config)
"""
from .buckets import bucket_bounds, partition
from .chart_data import prepare_chart_data
from .config import ChartConfig, load_config
from .downsampling import DownsampleResult, downsample_series
from .errors import DownsampleError, InvalidArgumentError
from .logger import LogManager
from .lttb import MIN_OUTPUT_SAMPLES, downsample, downsample_indices
from .selector import bucket_average, select_index, select_representative, triangle_area

__all__ = [
    "ChartConfig",
    "DownsampleError",
    "DownsampleResult",
    "InvalidArgumentError",
    "LogManager",
    "MIN_OUTPUT_SAMPLES",
    "bucket_average",
    "bucket_bounds",
    "downsample",
    "downsample_indices",
    "downsample_series",
    "load_config",
    "partition",
    "prepare_chart_data",
    "select_index",
    "select_representative",
    "triangle_area",
]
