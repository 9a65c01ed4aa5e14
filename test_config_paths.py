import json
import tempfile
from pathlib import Path

import config_paths


def _with_config(tmp, monkeypatch, payload=None, raw=None):
    cfg_dir = Path(tmp) / "fastdata"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    cfg_path = cfg_dir / "config.json"
    if payload is not None:
        cfg_path.write_text(json.dumps(payload))
    elif raw is not None:
        cfg_path.write_text(raw)
    monkeypatch.setattr(config_paths, "CONFIG_DIR", str(cfg_dir))
    monkeypatch.setattr(config_paths, "CONFIG_JSON", str(cfg_path))
    monkeypatch.delenv(config_paths.LOG_ENV_VAR, raising=False)


def test_load_config_defaults_without_json(monkeypatch):
    with tempfile.TemporaryDirectory() as tmp:
        _with_config(tmp, monkeypatch)
        cfg = config_paths.load_config()
        assert cfg["FIXED_COLUMN_WIDTH"] == 15
        assert cfg["POLL_TIMEOUT_MS"] == 100
        assert cfg["LOG_FILE"] is None
        assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_reads_json_overrides(monkeypatch):
    with tempfile.TemporaryDirectory() as tmp:
        _with_config(
            tmp,
            monkeypatch,
            payload={
                "fixed_column_width": 20,
                "poll_timeout_ms": 250,
                "log_file": "/tmp/fastdata.log",
                "log_level": "debug",
            },
        )
        cfg = config_paths.load_config()
        assert cfg["FIXED_COLUMN_WIDTH"] == 20
        assert cfg["POLL_TIMEOUT_MS"] == 250
        assert cfg["LOG_FILE"] == "/tmp/fastdata.log"
        assert cfg["LOG_LEVEL"] == "DEBUG"


def test_invalid_values_are_ignored(monkeypatch):
    with tempfile.TemporaryDirectory() as tmp:
        _with_config(
            tmp,
            monkeypatch,
            payload={"fixed_column_width": 0, "poll_timeout_ms": "fast", "log_level": "LOUD"},
        )
        cfg = config_paths.load_config()
        assert cfg["FIXED_COLUMN_WIDTH"] == 15
        assert cfg["POLL_TIMEOUT_MS"] == 100
        assert cfg["LOG_LEVEL"] == "WARNING"


def test_broken_json_falls_back_to_defaults(monkeypatch):
    with tempfile.TemporaryDirectory() as tmp:
        _with_config(tmp, monkeypatch, raw="{not json")
        cfg = config_paths.load_config()
        assert cfg["FIXED_COLUMN_WIDTH"] == 15


def test_env_overrides_log_file(monkeypatch):
    with tempfile.TemporaryDirectory() as tmp:
        _with_config(tmp, monkeypatch, payload={"log_file": "/tmp/a.log"})
        monkeypatch.setenv(config_paths.LOG_ENV_VAR, "/tmp/b.log")
        cfg = config_paths.load_config()
        assert cfg["LOG_FILE"] == "/tmp/b.log"
