from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from .errors import InvalidArgumentError
from .logger import LogManager

__all__ = ["bucket_bounds", "partition"]

log = LogManager("buckets").get_logger()

T = TypeVar("T")


def bucket_bounds(length: int, bucket_count: int) -> List[Tuple[int, int]]:
    """
    Calcola i limiti (start, end) semiaperti dei bucket su `length` elementi.

    - Se `length` è divisibile per `bucket_count`, tutti i bucket hanno la stessa dimensione.
    - Altrimenti regola greedy: ogni bucket prende ceil(rimanenti / bucket_rimanenti)
      elementi. Le dimensioni risultano non crescenti e tutti i bucket vengono riempiti.

    Esempio: 8 elementi in 3 bucket -> dimensioni [3, 3, 2].

    Raises:
        InvalidArgumentError: se bucket_count <= 0 oppure bucket_count > length
    """
    if bucket_count <= 0:
        msg = f"bucket_count deve essere positivo (ricevuto {bucket_count})."
        log.error(msg)
        raise InvalidArgumentError(msg)
    if bucket_count > length:
        msg = f"bucket_count={bucket_count} supera il numero di punti disponibili ({length})."
        log.error(msg)
        raise InvalidArgumentError(msg)

    bounds: List[Tuple[int, int]] = []
    start = 0

    if length % bucket_count == 0:
        size = length // bucket_count
        while start < length:
            bounds.append((start, start + size))
            start += size
        return bounds

    remaining_buckets = bucket_count
    while start < length:
        # ceil intero, senza passare da float
        size = -(-(length - start) // remaining_buckets)
        bounds.append((start, start + size))
        start += size
        remaining_buckets -= 1

    return bounds


def partition(points: Sequence[T], bucket_count: int) -> List[Sequence[T]]:
    """Divide `points` in `bucket_count` bucket contigui (slice dell'input, ordine invariato)."""
    return [points[start:end] for start, end in bucket_bounds(len(points), bucket_count)]
