import json
import logging
from kontrol_core.logger import JsonFormatter, get_logger


def _record(msg):
    return logging.LogRecord("kontrol.test", logging.INFO, __file__, 1, msg, None, None)


def test_messages_with_quotes_stay_valid_json():
    line = JsonFormatter().format(_record('key "h1" said \\ hi'))
    entry = json.loads(line)
    assert entry["msg"] == 'key "h1" said \\ hi'
    assert entry["level"] == "INFO"
    assert entry["name"] == "kontrol.test"
    assert entry["ts"].endswith("Z")


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("KONTROL_LOG_LEVEL", "verbose")
    log = get_logger("kontrol.test.verbose")
    assert log.level == logging.INFO


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("KONTROL_LOG_LEVEL", "debug")
    log = get_logger("kontrol.test.debug")
    assert log.level == logging.DEBUG


def test_writes_to_file(tmp_path):
    path = tmp_path / "logs" / "kontrol.log"
    log = get_logger("kontrol.test.file", to_file=str(path))
    log.info("hello")
    for h in log.handlers:
        h.flush()
    assert json.loads(path.read_text().splitlines()[0])["msg"] == "hello"
