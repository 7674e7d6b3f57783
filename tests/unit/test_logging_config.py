"""
Tests de la configuration loguru et de la redirection des loggers stdlib.
"""

import json
import logging
from pathlib import Path

import pytest
from loguru import logger

from anidesk.logging_config import STDLIB_LOGGERS, configure_logging


@pytest.fixture
def log_file(tmp_path: Path):
    """Fichier JSON de test ; restaure loguru et les loggers stdlib ensuite."""
    yield tmp_path / "logs" / "anidesk.log"
    logger.remove()
    for name in STDLIB_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True
        stdlib_logger.setLevel(logging.NOTSET)


def _records(log_file: Path) -> list[dict]:
    # remove() vide la file d'attente et ferme le fichier
    logger.remove()
    return [json.loads(line)["record"] for line in log_file.read_text().splitlines()]


class TestConfigureLogging:
    def test_creates_parent_directory(self, log_file):
        configure_logging(log_file=log_file)

        assert log_file.parent.is_dir()

    def test_application_logs_are_json(self, log_file):
        configure_logging(log_level="WARNING", log_file=log_file)
        logger.debug("Requete amont", url="https://hianime.test/home")

        records = _records(log_file)

        upstream = next(r for r in records if r["message"] == "Requete amont")
        assert upstream["extra"]["url"] == "https://hianime.test/home"


class TestStdlibInterception:
    def test_uvicorn_errors_reach_json_file(self, log_file):
        configure_logging(log_level="WARNING", log_file=log_file)

        logging.getLogger("uvicorn.error").error("[Errno 98] address already in use")

        records = _records(log_file)
        error = next(r for r in records if r["message"] == "[Errno 98] address already in use")
        assert error["level"]["name"] == "ERROR"
        assert error["extra"]["stdlib_logger"] == "uvicorn.error"

    def test_httpx_request_noise_is_filtered(self, log_file):
        configure_logging(log_file=log_file)

        logging.getLogger("httpx").info("HTTP Request: GET https://hianime.test/home")
        logging.getLogger("httpx").warning("connection pool full")

        messages = [r["message"] for r in _records(log_file)]
        assert "HTTP Request: GET https://hianime.test/home" not in messages
        assert "connection pool full" in messages

    def test_stdlib_loggers_do_not_propagate(self, log_file):
        configure_logging(log_file=log_file)

        for name in STDLIB_LOGGERS:
            assert logging.getLogger(name).propagate is False
