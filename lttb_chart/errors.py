"""Eccezioni del downsampling LTTB."""
from __future__ import annotations


class DownsampleError(ValueError):
    """Errore base per il downsampling."""
    pass


class InvalidArgumentError(DownsampleError):
    """Argomento non valido: serie vuota, punti non numerici, cardinalità < 3, bucket incoerenti."""
    pass
