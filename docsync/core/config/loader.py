"""
Configuration loader — reads docsync.yml into a SyncConfig.

The file is optional: without one, the current directory is the root
and every setting takes its default.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docsync.core.models.config import SyncConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "docsync.yml"


class ConfigError(Exception):
    """Raised when sync configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for docsync.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to docsync.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> SyncConfig:
    """Load and validate sync configuration.

    Args:
        path: Explicit path to docsync.yml. If None, searches upward and
            falls back to defaults rooted at the current directory.

    Returns:
        Validated SyncConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return SyncConfig(root=Path.cwd())

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading sync config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "docsync" key or be flat
    section = data.get("docsync", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected a mapping under 'docsync' in {path}")

    try:
        config = SyncConfig.model_validate({**section, "root": path.parent.resolve()})
    except ValidationError as e:
        raise ConfigError(f"Invalid sync configuration: {e}") from e

    logger.info(
        "Loaded config: scratch=%s target=%s (%d protected)",
        config.scratch_dir,
        config.target_dir,
        len(config.protected_files),
    )
    return config
