"""
Commissioning settings.

Defaults, optionally overridden by a YAML config file, then by environment
variables (HPCR_TEMPLATE, HPCR_LOG_LEVEL, HPCR_LOG_FILE).
"""

import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

ENV_TEMPLATE = "HPCR_TEMPLATE"
ENV_LOG_LEVEL = "HPCR_LOG_LEVEL"
ENV_LOG_FILE = "HPCR_LOG_FILE"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    template_path: Optional[str] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _read_config_file(config_path: str) -> Dict[str, Any]:
    path = Path(config_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def load_settings(config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Resolve settings for this run.

    Args:
        config_path: Optional YAML file with template_path / log_level / log_file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the config file is invalid or the log level is unknown
    """
    environ = os.environ if environ is None else environ
    settings = Settings()

    if config_path:
        data = _read_config_file(config_path)
        for key in ("template_path", "log_level", "log_file"):
            if data.get(key) is not None:
                setattr(settings, key, str(data[key]))

    if environ.get(ENV_TEMPLATE):
        settings.template_path = environ[ENV_TEMPLATE]
    if environ.get(ENV_LOG_LEVEL):
        settings.log_level = environ[ENV_LOG_LEVEL]
    if environ.get(ENV_LOG_FILE):
        settings.log_file = environ[ENV_LOG_FILE]

    settings.log_level = settings.log_level.upper()
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {settings.log_level}")

    return settings
