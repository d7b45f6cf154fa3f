from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from csv_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserConfig:
    """
    Settings read from <config root>/global.json.

    - preferences_dir: where column preferences are stored;
      None keeps them in memory for the lifetime of the process
    """
    ui_title: str = "CSV Browser"
    page_size: int = 10
    max_rows: int = 5000
    default_visible_columns: int = 10
    encoding: str = "utf-8"
    delimiter: str = ","
    preferences_dir: Optional[Path] = None


def _positive_int(raw: Dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def load_config(root: Path | str) -> BrowserConfig:
    """
    Load configuration from a config directory. A missing global.json means defaults.
    """
    root = Path(root)
    global_path = root / "global.json"
    logger.info("Loading config", extra={"config_root": str(root)})

    if not global_path.is_file():
        logger.warning(f"No global.json found in {root}, using defaults")
        return BrowserConfig()

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to read {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = BrowserConfig()

    # Resolve preferences_dir relative to the config root
    prefs_raw = raw.get("preferences_dir")
    prefs_dir = Path(prefs_raw) if prefs_raw else None
    if prefs_dir and not prefs_dir.is_absolute():
        prefs_dir = (root / prefs_dir).resolve()

    delimiter = raw.get("delimiter", defaults.delimiter)
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ConfigError(f"'delimiter' must be a single character, got {delimiter!r}")

    return BrowserConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        page_size=_positive_int(raw, "page_size", defaults.page_size),
        max_rows=_positive_int(raw, "max_rows", defaults.max_rows),
        default_visible_columns=_positive_int(
            raw, "default_visible_columns", defaults.default_visible_columns
        ),
        encoding=raw.get("encoding", defaults.encoding),
        delimiter=delimiter,
        preferences_dir=prefs_dir,
    )
