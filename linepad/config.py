"""User configuration for the editor.

Configuration is read from a JSON file in the OS-appropriate config
directory (or the path named by the LINEPAD_CONFIG environment variable).
A missing file means defaults; a broken file is reported and ignored.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

# Smallest accepted value per setting; one column leaves no room to type
MINIMUM_SIZES = {'max_rows': 1, 'max_width': 2}


@dataclass
class EditorConfig:
    """Settings that shape the buffer."""
    max_rows: int = EditorConstants.MAX_ROWS
    max_width: int = EditorConstants.MAX_WIDTH


def default_config_path() -> Path:
    """Return the config file path, honouring the environment override."""
    override = os.environ.get(EditorConstants.CONFIG_ENV_VAR)
    if override:
        return Path(override)
    config_dir = Path(platformdirs.user_config_dir(EditorConstants.CONFIG_APP_NAME))
    return config_dir / EditorConstants.CONFIG_FILE_NAME


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Config file {path} has invalid format (not a dict), ignoring")
        return {}
    return data


def load_config(path: Optional[Path] = None) -> EditorConfig:
    """Load the editor configuration.

    Args:
        path: Config file to read; defaults to default_config_path()

    Returns:
        EditorConfig with every valid setting applied
    """
    if path is None:
        path = default_config_path()
    data = _read_config_file(path)
    config = EditorConfig()
    for key, minimum in MINIMUM_SIZES.items():
        if key not in data:
            continue
        value = data[key]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            logger.warning(f"Ignoring invalid {key} in {path}: {value!r}")
            continue
        setattr(config, key, value)
    unknown = set(data) - set(MINIMUM_SIZES)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in {path}: {', '.join(sorted(unknown))}")
    return config
