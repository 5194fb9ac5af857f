# path: src/simple_beam/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "simple_beam"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _file_handler_for(logger: logging.Logger, log_path: str):
    target = os.path.abspath(log_path)
    for h in logger.handlers:
        if isinstance(h, RotatingFileHandler) and os.path.abspath(h.baseFilename) == target:
            return h
    return None


def setup_logging(
    log_dir: str = "logs",
    log_name: str = "simple_beam.log",
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Logger del paquete ("simple_beam"), padre de los loggers del motor.

    Política:
      - archivo rotativo: todo desde `level` (con DEBUG quedan ΣP, ΣM_A, Ra/Rb y
        residuales de cada análisis)
      - consola: solo desde `console_level` (notas de normalización y casos no
        resueltos: apoyos != 2 o coincidentes)

    Llamar de nuevo con el mismo archivo no duplica handlers; con otro archivo
    se agrega un handler más.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(level, console_level))

    if _file_handler_for(logger, log_path) is not None:
        return logger

    fmt = logging.Formatter(LOG_FORMAT)

    fh = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    # una sola consola aunque haya varios archivos
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        sh = logging.StreamHandler()
        sh.setLevel(console_level)
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    logger.info("Logging inicializado. Archivo: %s (nivel %s)", log_path, logging.getLevelName(level))
    return logger
