"""JSON document collection persisted as a single file (one list of documents per file)."""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import RLock
from typing import Dict, List

from garden.domain.errors import StorageError

logger = logging.getLogger(__name__)

# One lock per collection file, shared by every store instance in the process
_locks: Dict[str, RLock] = {}
_locks_guard = RLock()


def _lock_for(path: Path) -> RLock:
    key = str(Path(path).resolve())
    with _locks_guard:
        return _locks.setdefault(key, RLock())


class DocumentStore:
    def __init__(self, path: Path):
        self.path = Path(path)
        self.lock = _lock_for(self.path)

    def load(self) -> List[dict]:
        """Read every document; a missing file is an empty collection."""
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                docs = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {self.path.name}: {e}")
            raise StorageError(f"Collection {self.path.stem} is corrupt", str(e)) from e
        except OSError as e:
            logger.error(f"Error reading {self.path}: {e}")
            raise StorageError(f"Collection {self.path.stem} is unreadable", str(e)) from e
        if not isinstance(docs, list):
            raise StorageError(f"Collection {self.path.stem} is corrupt", "expected a JSON list")
        return docs

    def save(self, docs: List[dict]) -> None:
        """Replace the collection atomically (temp file + move)."""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.stem}_", suffix=".json"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(docs, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error writing {self.path}: {e}")
            raise StorageError(f"Collection {self.path.stem} could not be written", str(e)) from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
