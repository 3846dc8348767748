"""Locate and load the tool configuration file."""

import json
import os
from pathlib import Path
from typing import Optional, Tuple

from .models import SharingConfig

DEFAULT_CONFIG_FILENAME = "secret-sharing.json"
CONFIG_ENV_VAR = "SECRET_SHARING_CONFIG"


def resolve_config_path(explicit: Optional[Path] = None) -> Path:
    """
    Resolve the configuration path.

    An explicit path wins, then the SECRET_SHARING_CONFIG environment variable,
    then secret-sharing.json in the current directory.
    """
    if explicit is not None:
        return Path(explicit).resolve()
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return (Path.cwd() / DEFAULT_CONFIG_FILENAME).resolve()


def load_config(explicit: Optional[Path] = None) -> Tuple[SharingConfig, Path]:
    """
    Load the tool configuration.

    Returns:
        (config, resolved_path)

    Raises:
        ValueError: if the JSON is invalid or holds invalid values.
        FileNotFoundError: if an explicit path does not exist.
    """
    path = resolve_config_path(explicit)
    if not path.exists():
        if explicit is not None:
            raise FileNotFoundError(f"Config file not found at {path}")
        return SharingConfig(), path
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid config JSON at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config at {path} must be a JSON object")
    return SharingConfig.from_dict(data), path
