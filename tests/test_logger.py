import json
import logging

from daraza_core.config import DarazaConfig
from daraza_core.logger import configure_logging, get_logger, resolve_level


def test_structured_line_carries_source(capsys):
    log = get_logger("daraza.test.structured", level="INFO")
    log.info("hello")
    line = capsys.readouterr().out.strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["msg"] == "hello"
    assert rec["source"] == "daraza-payments"
    assert rec["name"] == "daraza.test.structured"


def test_handlers_added_once():
    a = get_logger("daraza.test.once")
    b = get_logger("daraza.test.once")
    assert a is b
    assert len(a.handlers) == 1


def test_file_handler(tmp_path):
    path = tmp_path / "logs" / "daraza.log"
    log = get_logger("daraza.test.file", to_file=str(path))
    log.warning("to disk")
    for h in log.handlers:
        h.flush()
    assert "to disk" in path.read_text()


def test_unknown_env_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("DARAZA_LOG_LEVEL", "verbose")
    log = get_logger("daraza.test.badlevel")
    assert log.level == logging.INFO


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(None) == logging.INFO


def test_configure_logging_reaches_existing_and_new_loggers():
    existing = get_logger("daraza.test.existing")
    configure_logging(DarazaConfig(auth_salt="a", secure_auth_salt="b", log_level="WARNING"))
    assert existing.level == logging.WARNING
    assert get_logger("daraza.test.later").level == logging.WARNING
