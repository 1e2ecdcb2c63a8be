"""Engine settings and the JSON theme configuration loader."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from stylescale.model.theme import ThemeConfiguration

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "theme.config.json"


@dataclass(frozen=True)
class StyleScaleConfig:
    dark_prefix: str = "dark:"
    fallback_color: str = "gray-500"  # palette fragment for unknown color literals
    strict_rules: bool = False  # raise on malformed rules instead of skipping them


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> ThemeConfiguration | None:
    """Read a JSON theme configuration from *path*.

    Returns None (and logs a warning) when the file does not exist; callers
    treat that as an empty configuration.
    """
    full_path = Path(path).resolve()
    if not full_path.is_file():
        logger.warning("Theme configuration not found at %s", full_path)
        return None
    return ThemeConfiguration.from_json(full_path.read_text(encoding="utf-8"))
