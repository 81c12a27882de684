from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

from .logger import LogManager

__all__ = ["ChartConfig", "load_config", "CONFIG_PATH"]

log = LogManager("config").get_logger()

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.json"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ChartConfig:
    """Parametri di deployment del grafico (non fanno parte dell'algoritmo)."""
    output_samples_count: int = 1000
    downsample: bool = True
    log_level: str = "INFO"


def _valid_value(key: str, value) -> bool:
    if key == "output_samples_count":
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return value >= 3
    if key == "downsample":
        return isinstance(value, bool)
    if key == "log_level":
        return isinstance(value, str) and value.strip().upper() in _LOG_LEVELS
    return False


def load_config(path: Optional[Union[str, Path]] = None) -> ChartConfig:
    """Carica config.json (root del progetto o `path`) se presente; applica default robusti."""
    defaults = ChartConfig()
    cfg_path = Path(path) if path is not None else CONFIG_PATH
    if not cfg_path.exists():
        return defaults

    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Config non valida (%s). Uso defaults.", e)
        return defaults

    if not isinstance(data, dict):
        log.warning("Config non valida (atteso oggetto JSON, trovato %s). Uso defaults.", type(data).__name__)
        return defaults

    updates = {}
    for f in fields(ChartConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        if not _valid_value(f.name, value):
            log.warning("Valore '%s' non valido per '%s'. Uso default %r.", value, f.name, getattr(defaults, f.name))
            continue
        updates[f.name] = value.strip().upper() if f.name == "log_level" else value

    log.info("Config caricata: %s", cfg_path)
    return replace(defaults, **updates)
