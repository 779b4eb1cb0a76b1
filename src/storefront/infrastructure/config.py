"""Runtime settings for the command line.

Values come from the root CLI options, which fall back to the
``STOREFRONT_DATA_DIR`` and ``STOREFRONT_LOG_LEVEL`` environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL
