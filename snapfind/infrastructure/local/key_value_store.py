"""
On-device key-value persistence.

Mirrors a mobile async storage API: string values under string keys, all
of them kept in one JSON file. Blocking file IO runs in a worker thread so
the event loop keeps serving other coroutines.
"""
import asyncio
import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ...core.exceptions import LocalCacheError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Async string key-value store"""

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Value stored under key, or None"""
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Delete key if present"""
        pass


class JsonFileKeyValueStore(KeyValueStore):
    """KeyValueStore backed by a single JSON object on disk"""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    async def get_item(self, key: str) -> Optional[str]:
        data = await asyncio.to_thread(self._read)
        return data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)

    async def remove_item(self, key: str) -> None:
        await asyncio.to_thread(self._update, key, None)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"Key-value file {self.path} is corrupt, treating as empty")
            return {}
        except OSError as e:
            raise LocalCacheError(f"Cannot read {self.path}: {e}")
        return data if isinstance(data, dict) else {}

    def _update(self, key: str, value: Optional[str]) -> None:
        data = self._read()
        if value is None:
            if key not in data:
                return
            data.pop(key)
        else:
            data[key] = value

        # Write-then-rename so a crash never leaves half a file behind
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise LocalCacheError(f"Cannot write {self.path}: {e}")
