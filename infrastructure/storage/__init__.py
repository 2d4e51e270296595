"""
Local storage adapters implementing application.ports.KeyValueStore.
"""

from infrastructure.storage.key_value_store import (
    InMemoryKeyValueStore,
    YamlFileKeyValueStore,
)

__all__ = [
    "InMemoryKeyValueStore",
    "YamlFileKeyValueStore",
]
