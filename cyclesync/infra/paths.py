from pathlib import Path

from cyclesync.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized data directory (single source of truth; tests patch it)
DATA_DIR: Path = _CONFIGURED_DATA_DIR

__all__ = ['DATA_DIR']
