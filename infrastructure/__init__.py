"""
Infrastructure Layer for the Fitness Dashboard.

This package contains concrete implementations of the application ports:
- db/: Supabase gateway (auth + tables)
- storage/: Local key-value stores (in-memory, YAML file)
"""

from infrastructure.db import SupabaseGateway
from infrastructure.storage import InMemoryKeyValueStore, YamlFileKeyValueStore

__all__ = [
    "SupabaseGateway",
    "InMemoryKeyValueStore",
    "YamlFileKeyValueStore",
]
