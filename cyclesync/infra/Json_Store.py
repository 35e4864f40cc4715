"""Key/value store persisting each key as one JSON file."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)

_FILE_LOCK = Lock()


class JsonFileStore:
    """Whole-value JSON persistence: ``load`` returns a key's full value, ``save`` overwrites it."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def exists(self, key: str) -> bool:
        return self.path_for(key).exists()

    def load(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or ``default`` if the key was never written or is unreadable."""
        path = self.path_for(key)
        with _FILE_LOCK:
            if not self.exists(key):
                return default
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    return json.load(f)
            except ValueError as e:
                logger.warning(f"Invalid JSON in {path.name}: {e}")
                return default
            except OSError as e:
                logger.warning(f"Failed to read {path.name}: {e}")
                return default

    def save(self, key: str, value: Any) -> None:
        """Atomically replace the stored value for ``key``."""
        path = self.path_for(key)
        with _FILE_LOCK:
            try:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                        json.dump(value, tmp, indent=2, ensure_ascii=False)
                    shutil.move(tmp_path, path)
                finally:
                    if os.path.exists(tmp_path):
                        os.remove(tmp_path)
            except OSError as e:
                logger.error(f"Failed to save {path.name}: {e}")
                raise
