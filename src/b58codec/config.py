import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "B58CODEC_CONFIG"
FORMATS = ("raw", "hex")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CliConfig:
    input_format: str = "raw"
    output_format: str = "raw"
    log_level: str = "WARNING"


def _load_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as config_fh:
        return json.load(config_fh)


def _format_value(raw: Dict[str, Any], key: str) -> str:
    value = str(raw.get(key) or "raw").lower()
    if value not in FORMATS:
        raise ValueError(f"Unsupported {key} {value!r}; expected one of {', '.join(FORMATS)}")
    return value


def _log_level_value(raw: Dict[str, Any]) -> str:
    value = raw.get("log_level") or "WARNING"
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ValueError(
            f"Unsupported log_level {value!r}; expected one of {', '.join(LOG_LEVELS)}"
        )
    return value.upper()


def load_config(path: str) -> CliConfig:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Configuration file does not exist: {path}")

    raw = _load_json(path)
    if not isinstance(raw, dict):
        raise ValueError("Configuration must be a JSON object")

    return CliConfig(
        input_format=_format_value(raw, "input_format"),
        output_format=_format_value(raw, "output_format"),
        log_level=_log_level_value(raw),
    )


def config_path(explicit_path: Optional[str] = None) -> Optional[str]:
    if explicit_path:
        return explicit_path
    return os.environ.get(CONFIG_ENV_VAR) or None


def resolve_config(explicit_path: Optional[str] = None) -> CliConfig:
    path = config_path(explicit_path)
    if not path:
        return CliConfig()

    logger.debug("Loading b58codec config from %s", path)
    return load_config(path)
