"""In-memory store of registered API keys."""

import logging
import threading
from collections.abc import Iterable

from gateway.models.enums import KeyOutcome

logger = logging.getLogger(__name__)


class KeyStore:
    """Ordered collection of API keys guarded by a lock.

    Keys are plain strings without metadata. Nothing is persisted: the store
    starts from the seed keys on every process start.
    """

    def __init__(self, seed: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._keys: list[str] = []
        for key in seed:
            if key and key not in self._keys:
                self._keys.append(key)

    def is_valid(self, key: str) -> bool:
        """Return True if key exactly matches a registered key."""
        with self._lock:
            return key in self._keys

    def add(self, key: str) -> KeyOutcome:
        """Register a key.

        Args:
            key: API key to register

        Returns:
            KeyOutcome.ADDED, or KeyOutcome.ALREADY_EXISTS if the key was
            registered before (the store is left unchanged)

        Raises:
            ValueError: If key is empty
        """
        if not key:
            raise ValueError("API key must not be empty")
        with self._lock:
            if key in self._keys:
                return KeyOutcome.ALREADY_EXISTS
            self._keys.append(key)
        logger.info("API key registered")
        return KeyOutcome.ADDED

    def remove(self, key: str) -> KeyOutcome:
        """Remove the first occurrence of a key, keeping the order of the rest.

        Args:
            key: API key to remove

        Returns:
            KeyOutcome.REMOVED, or KeyOutcome.NOT_FOUND if the key is absent

        Raises:
            ValueError: If key is empty
        """
        if not key:
            raise ValueError("API key must not be empty")
        with self._lock:
            try:
                self._keys.remove(key)
            except ValueError:
                return KeyOutcome.NOT_FOUND
        logger.info("API key removed")
        return KeyOutcome.REMOVED

    def keys(self) -> list[str]:
        """Return a snapshot of the registered keys."""
        with self._lock:
            return list(self._keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)
