"""Configuration loader for Favlink."""
import importlib.util
from pathlib import Path
from typing import Any, Dict

DEFAULT_CONFIG_FILENAME = "favlink.config.py"


def load_config(path: Path | str | None = None) -> Dict[str, Any]:
    """
    Load configuration from a python file.

    If path is provided, loads from there.
    Otherwise, looks for favlink.config.py in the current working directory.

    Returns a dictionary of CLI option names built from the uppercase
    variables found in the config module.
    """
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    else:
        path = Path(path)

    if not path.exists():
        return {}

    try:
        spec = importlib.util.spec_from_file_location("favlink_config", path)
        if spec is None or spec.loader is None:
            return {}

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        config = {}
        for key in dir(module):
            if key.isupper():
                config[key] = getattr(module, key)

        # HOST -> host
        # PORT -> port
        # DEBUG -> debug
        # CONTENT_DIR -> content_dir
        # LOG_LEVEL -> log_level
        mapped_config: Dict[str, Any] = {}
        if "HOST" in config:
            mapped_config["host"] = config["HOST"]
        if "PORT" in config:
            mapped_config["port"] = config["PORT"]
        if "DEBUG" in config:
            mapped_config["debug"] = bool(config["DEBUG"])
        if "CONTENT_DIR" in config:
            mapped_config["content_dir"] = str(config["CONTENT_DIR"])
        if "LOG_LEVEL" in config:
            mapped_config["log_level"] = str(config["LOG_LEVEL"]).lower()

        return mapped_config

    except Exception as e:
        print(f"Warning: Failed to load config from {path}: {e}")
        return {}
