from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


class LogManager:
    """
    Gestisce un logger gerarchico 'lttb_chart.*' con:
    - cartella logs/ creata accanto alla root del progetto,
    - file UTF-8 giornaliero 'lttb_chart_YYYYMMDD.log',
    - StreamHandler su console,
    - prevenzione handler duplicati,
    - livello default INFO (configurabile, anche come nome: "DEBUG", "WARNING"...).
    """

    _configured: bool = False
    _base_logger_name: str = "lttb_chart"
    _logfile_path: Optional[Path] = None

    def __init__(self, component: str = "app", level: Union[int, str] = logging.INFO) -> None:
        self.component = component.strip() or "app"
        self.level = self._parse_level(level)
        self._ensure_configured()

    @staticmethod
    def _parse_level(level: Union[int, str]) -> int:
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).strip().upper())
        return resolved if isinstance(resolved, int) else logging.INFO

    @classmethod
    def _project_root(cls) -> Path:
        # .../lttb_chart/logger.py -> project_root = parent of 'lttb_chart'
        return Path(__file__).resolve().parents[1]

    @classmethod
    def _ensure_configured(cls) -> None:
        if cls._configured:
            return

        base_logger = logging.getLogger(cls._base_logger_name)
        base_logger.setLevel(logging.INFO)
        base_logger.propagate = False  # Evita doppie stampe sul root

        common_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        file_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(lineno)d | %(message)s"

        logs_dir = cls._project_root() / "logs"
        log_name = f"lttb_chart_{datetime.now():%Y%m%d}.log"
        dir_error: Optional[OSError] = None
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            cls._logfile_path = logs_dir / log_name
        except OSError as exc:
            # Installazione in sola lettura: solo console
            cls._logfile_path = None
            dir_error = exc

        existing_file = any(
            isinstance(h, logging.FileHandler)
            and getattr(h, "baseFilename", None) == str(cls._logfile_path)
            for h in base_logger.handlers
        )
        existing_stream = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in base_logger.handlers
        )

        if cls._logfile_path is not None and not existing_file:
            fh = logging.FileHandler(cls._logfile_path, encoding="utf-8")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(file_fmt))
            base_logger.addHandler(fh)

        if not existing_stream:
            sh = logging.StreamHandler()
            sh.setLevel(logging.INFO)
            sh.setFormatter(logging.Formatter(common_fmt))
            base_logger.addHandler(sh)

        cls._configured = True
        if dir_error is not None:
            base_logger.warning("Cartella log non disponibile (%s). Solo console.", dir_error)
        else:
            base_logger.info("Logger configurato. File: %s", cls._logfile_path)

    def get_logger(self, level: Optional[Union[int, str]] = None) -> Logger:
        base = logging.getLogger(self._base_logger_name)
        logger = base.getChild(self.component)
        logger.setLevel(self._parse_level(level) if level is not None else self.level)
        return logger

    @classmethod
    def logfile_path(cls) -> Optional[Path]:
        return cls._logfile_path
