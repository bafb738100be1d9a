import json
import logging

from replyclipboard.config import Config, default_platform
from replyclipboard.logging_ import JsonFormatter


def test_defaults():
    cfg = Config()
    assert cfg.request_timeout == 120.0
    assert cfg.max_toasts == 5
    assert cfg.manifest_platform == default_platform()
    assert cfg.manifest_platform in ("macOS", "windows", "linux")


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    Config(check_for_updates_on_launch=False, max_toasts=3).save(path)
    loaded = Config.load(path)
    assert loaded.check_for_updates_on_launch is False
    assert loaded.max_toasts == 3


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "light", "server_port": 2580}), encoding="utf-8")
    loaded = Config.load(path)
    assert loaded.theme == "light"


def test_load_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert Config.load(path) == Config()


def test_load_missing_file_gives_defaults(tmp_path):
    assert Config.load(tmp_path / "absent.json") == Config()


def test_json_formatter():
    record = logging.LogRecord("replyclipboard.backup", logging.WARNING, __file__, 12,
                               "restored %d items", (3,), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["msg"] == "restored 3 items"
    assert payload["logger"] == "replyclipboard.backup"
    assert payload["ts"].endswith("Z")
