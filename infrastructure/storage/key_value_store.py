"""
Key-value store implementations.

- InMemoryKeyValueStore: process-local dict, for tests and non-durable use
- YamlFileKeyValueStore: durable store backed by one YAML mapping on disk

Both notify subscribers after every write. Neither takes a lock: the last
writer wins.
"""
import logging
import os
import pathlib
import tempfile
from typing import Callable, Dict, List, Optional, Union

import yaml

from application.ports import StoreListener

logger = logging.getLogger(__name__)


class _Subscribers:
    """Listener registry shared by the store implementations."""

    def __init__(self) -> None:
        self._listeners: List[StoreListener] = []

    def add(self, callback: StoreListener) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def notify(self, key: str, value: str) -> None:
        for listener in list(self._listeners):
            listener(key, value)


class InMemoryKeyValueStore:
    """
    In-memory implementation of KeyValueStore.

    Usage:
        store = InMemoryKeyValueStore({"fitness-theme": "dark"})
        store.get("fitness-theme")
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})
        self._subscribers = _Subscribers()

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self._subscribers.notify(key, value)

    def subscribe(self, callback: StoreListener) -> Callable[[], None]:
        return self._subscribers.add(callback)


class YamlFileKeyValueStore:
    """
    Durable implementation of KeyValueStore.

    All keys live in one YAML mapping. Each write replaces the file
    atomically (tempfile + os.replace) so readers see either the previous
    or the new contents, never a partial write.

    Usage:
        store = YamlFileKeyValueStore("~/.fitness-dashboard/local_storage.yaml")
        store.set("fitness-settings", '{"displayName": "Sam"}')
    """

    def __init__(self, path: Union[str, pathlib.Path]):
        self._path = pathlib.Path(path).expanduser()
        self._subscribers = _Subscribers()

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ignoring unreadable local store {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring local store {self._path}: expected a mapping")
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _write_all(self, values: Dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileNotFoundError(
                f"Cannot create local store directory {self._path.parent}: {e}"
            ) from e

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=str(self._path.parent),
                suffix=".yaml",
                delete=False,
                encoding="utf-8",
            ) as tmp_file:
                tmp_path = tmp_file.name
                yaml.safe_dump(values, tmp_file, sort_keys=True, default_flow_style=False)
            os.replace(tmp_path, str(self._path))
        except OSError as e:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            raise OSError(f"Failed to write local store {self._path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read_all()
        values[key] = value
        self._write_all(values)
        self._subscribers.notify(key, value)

    def subscribe(self, callback: StoreListener) -> Callable[[], None]:
        return self._subscribers.add(callback)
