import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler

import pytest

from simple_beam.domain.cases import default_case
from simple_beam.engine.analysis import analyze_beam
from simple_beam.services.logging_setup import LOGGER_NAME, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    saved_level = logger.level
    for h in saved:
        logger.removeHandler(h)
    try:
        yield logger
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        for h in saved:
            logger.addHandler(h)
        logger.setLevel(saved_level)


def _read(path):
    for h in logging.getLogger(LOGGER_NAME).handlers:
        h.flush()
    with open(path, encoding="utf-8") as f:
        return f.read()


def test_setup_logging_is_idempotent_per_file(clean_logger):
    with tempfile.TemporaryDirectory() as td:
        lg = setup_logging(log_dir=td, log_name="test.log")
        assert lg is clean_logger
        assert len(lg.handlers) == 2
        assert setup_logging(log_dir=td, log_name="test.log") is lg
        assert len(lg.handlers) == 2

        # otro archivo: un handler de archivo más, la consola no se repite
        setup_logging(log_dir=td, log_name="other.log")
        files = [h for h in lg.handlers if isinstance(h, RotatingFileHandler)]
        consoles = [h for h in lg.handlers if type(h) is logging.StreamHandler]
        assert len(files) == 2
        assert len(consoles) == 1


def test_console_only_shows_warnings(clean_logger):
    with tempfile.TemporaryDirectory() as td:
        lg = setup_logging(log_dir=td, log_name="test.log")
        console = [h for h in lg.handlers if type(h) is logging.StreamHandler][0]
        assert console.level == logging.WARNING

        logging.getLogger("simple_beam.engine.analysis").info("hola")
        assert "hola" in _read(os.path.join(td, "test.log"))


def test_debug_file_records_reaction_details(clean_logger):
    with tempfile.TemporaryDirectory() as td:
        setup_logging(log_dir=td, log_name="debug.log", level=logging.DEBUG)
        analyze_beam(default_case())
        text = _read(os.path.join(td, "debug.log"))
        assert "Reacciones (L=10 m)" in text
        assert "simple_beam.engine.equilibrium" in text
