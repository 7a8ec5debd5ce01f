import codecs
import copy
import json
import os

CONFIG_ENV_VAR = "COURSE_ADVISOR_CONFIG"

DEFAULT_CONFIG = {
    "data_paths": {
        "courses": "",
    },
    "request_timeout": 10,
    "encoding": "utf-8",
}


class ConfigError(Exception):
    pass


def load_config(path=None):
    """Load the advisor config, merged over DEFAULT_CONFIG.

    The path falls back to $COURSE_ADVISOR_CONFIG; with neither, defaults are used.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    if not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a JSON object")

    data_paths = data.pop("data_paths", {})
    if not isinstance(data_paths, dict):
        raise ConfigError("Config 'data_paths' must be an object")
    config["data_paths"].update(data_paths)
    config.update(data)

    timeout = config["request_timeout"]
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"'request_timeout' must be a positive number, got {timeout!r}")

    encoding = config["encoding"]
    if not isinstance(encoding, str):
        raise ConfigError(f"'encoding' must be a codec name, got {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"Unknown encoding in config file {path}: {encoding}") from e

    return config


def courses_path(config):
    return config["data_paths"].get("courses") or ""
