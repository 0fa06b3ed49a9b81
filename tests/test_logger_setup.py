"""Tests for the application logger setup."""
import json
import logging

import pytest

import logger_setup


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "run_id": "test_run",
        "logging": {"level": "DEBUG", "format": "%(levelname)s - %(message)s"},
    }))
    yield str(path)
    logger = logging.getLogger(logger_setup.LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_creates_run_log_file(config_file, tmp_path):
    logger = logger_setup.setup_logging(config_file)
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    log_file = tmp_path / "runs" / "test_run" / "simulation.log"
    assert log_file.exists()
    assert "hello" in log_file.read_text()


def test_dedicated_logger(config_file):
    logger = logger_setup.setup_logging(config_file)
    assert logger.name == "doppler_galaxy"
    assert logger.propagate is False
    assert logger.level == logging.DEBUG


def test_repeated_setup_does_not_duplicate_handlers(config_file):
    logger_setup.setup_logging(config_file)
    logger = logger_setup.setup_logging(config_file)
    assert len(logger.handlers) == 2


def test_missing_keys_fail_fast(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logging": {"level": "INFO", "format": "%(message)s"}}))
    with pytest.raises(KeyError):
        logger_setup.setup_logging(str(path))
