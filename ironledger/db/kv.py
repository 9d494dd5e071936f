"""Local key-value storage backends.

The application keeps its whole state as one string blob under a single key,
so a backend only needs whole-value reads and overwrites.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """Process-local storage, lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore:
    """Key-value pairs kept as a single JSON object in a file.

    Writes go to a temp file in the same directory followed by os.replace(),
    so readers see either the old file or the new one, never a partial write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=str(self.path.parent),
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp_file:
            tmp_path = tmp_file.name
            try:
                json.dump(data, tmp_file)
            except Exception:
                tmp_file.close()
                os.unlink(tmp_path)
                raise
        try:
            os.replace(tmp_path, self.path)
        except OSError:
            os.unlink(tmp_path)
            raise

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Value for {key!r} in {self.path} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            # Unreadable file: the new value replaces it wholesale.
            logger.warning(f"Overwriting unreadable storage file {self.path}")
            data = {}
        data[key] = value
        self._write_all(data)
        logger.debug(f"Wrote {len(value)} bytes to {self.path} under {key!r}")

    def delete(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)
