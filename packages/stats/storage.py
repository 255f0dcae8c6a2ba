"""
Durable key-value backends for the statistics store.

Contract (duck-typed, see KeyValueStore):
  get(key) -> str | None     None when the key was never written; raises
                             PersistenceFailure when the backend is unreadable
  set(key, text) -> bool     False when the write failed

No locking: two processes sharing one file race and the last write wins.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from packages.engine.errors import PersistenceFailure


class KeyValueStore:
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError("Override in subclass")

    def set(self, key: str, text: str) -> bool:
        raise NotImplementedError("Override in subclass")


class MemoryStore(KeyValueStore):
    """Process-local store; also the test double."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, text: str) -> bool:
        self.data[key] = text
        return True


class JsonFileStore(KeyValueStore):
    """
    All keys in one JSON object on disk: {"<key>": "<text>", ...}.

    A missing file is an empty store. The parent directory is created on
    the first write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        try:
            if not self.path.exists():
                return {}
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PersistenceFailure(f"cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceFailure(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, text: str) -> bool:
        try:
            data = self._read_all()
        except PersistenceFailure:
            # Unreadable file: overwrite it rather than lose this write too
            data = {}
        data[key] = text
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError:
            return False
        return True
