from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np
import pandas as pd

from .errors import InvalidArgumentError
from .logger import LogManager
from .lttb import MIN_OUTPUT_SAMPLES, downsample_indices

__all__ = ["DownsampleMethod", "DownsampleResult", "downsample_series"]

log = LogManager("downsampling").get_logger()

DownsampleMethod = Literal["lttb", "identity"]


@dataclass(slots=True)
class DownsampleResult:
    y: pd.Series
    x: Optional[pd.Series]
    indices: np.ndarray
    method: DownsampleMethod
    original_count: int
    sampled_count: int

    @property
    def reduction_ratio(self) -> float:
        if self.sampled_count == 0:
            return np.inf
        return self.original_count / self.sampled_count

    def summary(self) -> str:
        return (
            f"{self.original_count:,} → {self.sampled_count:,} "
            f"({self.reduction_ratio:.1f}x, {self.method})"
        )


def _as_numeric_x(values: pd.Series) -> np.ndarray:
    if isinstance(values.dtype, pd.DatetimeTZDtype):
        values = values.dt.tz_convert(None)
    arr = values.to_numpy()
    if np.issubdtype(arr.dtype, np.datetime64) or np.issubdtype(arr.dtype, np.timedelta64):
        # ns come float a prescindere dalla risoluzione; NaT -> NaN (altrimenti int64 minimo)
        unit = "datetime64[ns]" if np.issubdtype(arr.dtype, np.datetime64) else "timedelta64[ns]"
        out = arr.astype(unit).astype("int64").astype("float64")
        out[pd.isna(arr)] = np.nan
        return out
    try:
        return arr.astype("float64")
    except (TypeError, ValueError):
        cast = pd.to_numeric(values, errors="coerce")
        return cast.to_numpy(dtype=np.float64, na_value=np.nan)


def _identity(y: pd.Series, x: Optional[pd.Series], positions: np.ndarray, original_count: int) -> DownsampleResult:
    return DownsampleResult(
        y=y.iloc[positions],
        x=x.iloc[positions] if x is not None else None,
        indices=y.index.to_numpy()[positions],
        method="identity",
        original_count=original_count,
        sampled_count=len(positions),
    )


def downsample_series(
    y: pd.Series,
    x: Optional[pd.Series] = None,
    *,
    max_points: int,
) -> DownsampleResult:
    """
    Riduce una serie pandas a `max_points` punti con LTTB.

    - y: valori misurati; x: timestamp/ascissa allineata per indice (None = posizione).
    - Le righe con NaN in y (o in x) vengono scartate prima del campionamento.
    - Se i dati stanno già in `max_points` il risultato è 'identity'.
    - La selezione è posizionale: etichette duplicate nell'indice non moltiplicano i punti.
    """
    if isinstance(max_points, bool) or not isinstance(max_points, (int, np.integer)) or max_points < MIN_OUTPUT_SAMPLES:
        msg = f"max_points deve essere un intero >= {MIN_OUTPUT_SAMPLES} (ricevuto {max_points!r})."
        log.error(msg)
        raise InvalidArgumentError(msg)
    max_points = int(max_points)

    original_count = len(y)
    if original_count <= max_points:
        return DownsampleResult(
            y=y,
            x=x,
            indices=y.index.to_numpy(),
            method="identity",
            original_count=original_count,
            sampled_count=original_count,
        )

    work_y = pd.to_numeric(y, errors="coerce").to_numpy(dtype=np.float64, na_value=np.nan)
    valid = np.isfinite(work_y)
    x_aligned: Optional[pd.Series] = None
    if x is not None:
        # stesso indice -> allineamento posizionale (ammette etichette duplicate)
        x_aligned = x if x.index.equals(y.index) else x.reindex(y.index)
        x_values = _as_numeric_x(x_aligned)
        valid &= np.isfinite(x_values)
    keep = np.flatnonzero(valid)

    dropped = original_count - len(keep)
    if dropped:
        log.info("Scartate %d righe con NaN/Inf prima del downsampling.", dropped)

    if len(keep) <= max_points:
        return _identity(y, x_aligned, keep, original_count)

    kept_y = work_y[keep]
    kept_x = x_values[keep] if x_aligned is not None else np.arange(len(keep), dtype=np.float64)

    points = list(zip(kept_x.tolist(), kept_y.tolist()))
    positions = keep[downsample_indices(points, max_points)]

    y_down = y.iloc[positions]
    x_down = x_aligned.iloc[positions] if x_aligned is not None else None

    result = DownsampleResult(
        y=y_down,
        x=x_down,
        indices=y.index.to_numpy()[positions],
        method="lttb",
        original_count=original_count,
        sampled_count=len(y_down),
    )
    log.debug("Downsampling serie '%s': %s", y.name, result.summary())
    return result
