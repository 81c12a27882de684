"""
Largest-Triangle-Three-Buckets (LTTB).

Riduce una serie ordinata (x, y) a `output_samples_count` punti mantenendone
la forma visiva. Il primo e l'ultimo punto sono ancore fisse; i punti interni
vengono divisi in `output_samples_count - 2` bucket e da ciascuno si sceglie
il punto che forma il triangolo di area massima con il punto selezionato in
precedenza e la media del bucket successivo.

Riferimento: Sveinn Steinarsson, "Downsampling Time Series for Visual
Representation" (2013), sezione 4.2.
"""
from __future__ import annotations

import math
from numbers import Integral, Real
from typing import List, NoReturn, Sequence

from .buckets import bucket_bounds
from .errors import InvalidArgumentError
from .logger import LogManager
from .selector import Point, bucket_average, select_index

__all__ = ["MIN_OUTPUT_SAMPLES", "downsample", "downsample_indices"]

log = LogManager("lttb").get_logger()

# primo punto + almeno un bucket interno + ultimo punto
MIN_OUTPUT_SAMPLES = 3


def _fail(msg: str) -> NoReturn:
    log.error(msg)
    raise InvalidArgumentError(msg)


def _is_real(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _validate(series: Sequence[Point], output_samples_count: int) -> None:
    if not isinstance(output_samples_count, Integral) or isinstance(output_samples_count, bool):
        _fail(f"output_samples_count deve essere un intero (ricevuto {output_samples_count!r}).")
    if output_samples_count < MIN_OUTPUT_SAMPLES:
        _fail(
            f"output_samples_count deve essere >= {MIN_OUTPUT_SAMPLES} "
            f"(ricevuto {output_samples_count})."
        )

    try:
        length = len(series)
    except TypeError:
        _fail(f"La serie deve essere una sequenza ordinata, ricevuto {type(series).__name__}.")
    if length == 0:
        _fail("Serie vuota: nessun punto da campionare.")

    for i in range(length):
        point = series[i]
        try:
            pair_ok = len(point) == 2
        except TypeError:
            pair_ok = False
        if not pair_ok:
            _fail(f"Punto {i} non valido: atteso (x, y), ricevuto {point!r}.")
        x, y = point[0], point[1]
        if not (_is_real(x) and _is_real(y)):
            _fail(f"Punto {i} non numerico: {point!r}.")
        if not (math.isfinite(x) and math.isfinite(y)):
            _fail(f"Punto {i} non finito (NaN/Inf): {point!r}.")


def downsample_indices(series: Sequence[Point], output_samples_count: int) -> List[int]:
    """
    Posizioni (crescenti) dei punti di `series` scelti da LTTB.

    Se la serie ha già al più `output_samples_count` punti restituisce tutte
    le posizioni: nessuna espansione, nessun bucket vuoto.

    Raises:
        InvalidArgumentError: serie vuota o non numerica, output_samples_count < 3
    """
    _validate(series, output_samples_count)

    n = len(series)
    if n <= output_samples_count:
        return list(range(n))

    last = n - 1
    # bucket sui soli punti interni, riportati a posizioni assolute
    bounds = [(start + 1, end + 1) for start, end in bucket_bounds(n - 2, output_samples_count - 2)]

    indices = [0]
    previous = series[0]
    for i, (start, end) in enumerate(bounds):
        if i + 1 < len(bounds):
            next_start, next_end = bounds[i + 1]
            next_average = bucket_average(series[next_start:next_end])
        else:
            next_average = bucket_average(series[last:])

        chosen = start + select_index(previous, series[start:end], next_average)
        indices.append(chosen)
        previous = series[chosen]

    indices.append(last)
    log.debug("LTTB: %d -> %d punti (%d bucket).", n, len(indices), len(bounds))
    return indices


def downsample(series: Sequence[Point], output_samples_count: int) -> List[Point]:
    """
    Serie ridotta con LTTB: primo e ultimo punto sempre presenti, ordine
    invariato, ogni punto restituito è lo stesso oggetto dell'input.
    """
    return [series[i] for i in downsample_indices(series, output_samples_count)]
