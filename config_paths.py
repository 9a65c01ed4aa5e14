import json
import logging
import os

log = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "fastdata")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

LOG_ENV_VAR = "FASTDATA_LOG"

# default settings
FIXED_COLUMN_WIDTH_DEFAULT = 15
POLL_TIMEOUT_MS_DEFAULT = 100
LOG_FILE_DEFAULT = None
LOG_LEVEL_DEFAULT = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _positive_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_config():
    cfg = {
        "FIXED_COLUMN_WIDTH": FIXED_COLUMN_WIDTH_DEFAULT,
        "POLL_TIMEOUT_MS": POLL_TIMEOUT_MS_DEFAULT,
        "LOG_FILE": LOG_FILE_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("ignoring unreadable config %s: %s", CONFIG_JSON, exc)
            data = None

        if isinstance(data, dict):
            width = _positive_int(data.get("fixed_column_width"))
            if width is not None:
                cfg["FIXED_COLUMN_WIDTH"] = width
            elif "fixed_column_width" in data:
                log.warning("invalid fixed_column_width: %r", data["fixed_column_width"])

            timeout = _positive_int(data.get("poll_timeout_ms"))
            if timeout is not None:
                cfg["POLL_TIMEOUT_MS"] = timeout
            elif "poll_timeout_ms" in data:
                log.warning("invalid poll_timeout_ms: %r", data["poll_timeout_ms"])

            log_file = data.get("log_file")
            if isinstance(log_file, str) and log_file.strip():
                cfg["LOG_FILE"] = os.path.expanduser(log_file.strip())

            level = data.get("log_level")
            if isinstance(level, str) and level.upper() in _LOG_LEVELS:
                cfg["LOG_LEVEL"] = level.upper()

    env_log = os.environ.get(LOG_ENV_VAR)
    if env_log:
        cfg["LOG_FILE"] = os.path.expanduser(env_log)

    return cfg
