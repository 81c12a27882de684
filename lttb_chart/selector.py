"""
Geometria per la selezione LTTB: area del triangolo, media del bucket,
scelta del punto rappresentativo.

Le somme sono eseguite da sinistra a destra (come scritte): l'addizione
float non è associativa e i risultati devono essere riproducibili bit a bit.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from .errors import InvalidArgumentError
from .logger import LogManager

__all__ = ["triangle_area", "bucket_average", "select_index", "select_representative"]

log = LogManager("selector").get_logger()

Point = Sequence[float]


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Area (non negativa) del triangolo abc con la formula shoelace. Punti collineari -> 0.0."""
    return abs(a[0] * (b[1] - c[1]) + b[0] * (c[1] - a[1]) + c[0] * (a[1] - b[1])) / 2


def bucket_average(bucket: Sequence[Point]) -> Tuple[float, float]:
    """Punto medio (x, y) del bucket. È un'ancora sintetica, non un punto della serie."""
    count = len(bucket)
    if count == 0:
        msg = "Impossibile calcolare la media di un bucket vuoto."
        log.error(msg)
        raise InvalidArgumentError(msg)

    sum_x = 0.0
    sum_y = 0.0
    for point in bucket:
        sum_x += point[0]
        sum_y += point[1]
    return sum_x / count, sum_y / count


def select_index(previous: Point, bucket: Sequence[Point], next_average: Point) -> int:
    """
    Posizione, dentro `bucket`, del punto con area massima rispetto a
    `previous` e `next_average`. A parità di area vince il primo incontrato.
    """
    count = len(bucket)
    if count == 0:
        msg = "Bucket vuoto: nessun punto da selezionare."
        log.error(msg)
        raise InvalidArgumentError(msg)
    if count == 1:
        return 0

    best = 0
    best_area = triangle_area(previous, bucket[0], next_average)
    for j in range(1, count):
        area = triangle_area(previous, bucket[j], next_average)
        if area > best_area:
            best_area = area
            best = j
    return best


def select_representative(previous: Point, bucket: Sequence[Point], next_average: Point) -> Point:
    """Restituisce il punto rappresentativo del bucket (lo stesso oggetto dell'input)."""
    return bucket[select_index(previous, bucket, next_average)]
