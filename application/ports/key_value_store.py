"""
Key-Value Store Interface (Port).

Local durable storage for small serialized records (preferences, theme).
Values are strings; callers own serialization. Implementations may keep
values in memory (tests) or on disk.
"""
from typing import Callable, Optional, Protocol

# Callback signature for change notifications: (key, new value)
StoreListener = Callable[[str, str], None]


class KeyValueStore(Protocol):
    """
    Abstract interface for local key-value persistence.

    Usage:
        store.set("fitness-theme", "dark")
        store.get("fitness-theme")  # "dark"
        unsubscribe = store.subscribe(lambda key, value: ...)
    """

    def get(self, key: str) -> Optional[str]:
        """
        Read a value.

        Args:
            key: Storage key

        Returns:
            Stored string, or None if absent
        """
        ...

    def set(self, key: str, value: str) -> None:
        """
        Write a value in a single operation and notify subscribers.

        Args:
            key: Storage key
            value: Serialized value
        """
        ...

    def subscribe(self, callback: StoreListener) -> Callable[[], None]:
        """
        Observe writes to any key.

        Args:
            callback: Called as callback(key, value) after each write

        Returns:
            A function that removes the subscription
        """
        ...
