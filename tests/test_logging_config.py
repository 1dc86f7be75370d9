# MIT License (see LICENSE)
import logging

from fall_sim.logging_config import LOGGER_NAME, setup_logging


def _close(logger):
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "sim.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 2
        setup_logging(logging.INFO)
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
    finally:
        _close(logger)
        logger.setLevel(logging.NOTSET)


def test_file_handler_receives_records(tmp_path):
    log_file = tmp_path / "sim.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    try:
        logging.getLogger("fall_sim.controller").info("Simulation reset")
    finally:
        _close(logger)
        logger.setLevel(logging.NOTSET)
    assert "fall_sim.controller - INFO - Simulation reset" in log_file.read_text(encoding="utf-8")
