"""
In-memory cache of sanitized commentary per verse.
"""

import threading

from mufassir.models import VerseKey


class VerseCache:
    """
    Write-once mapping from verse key to sanitized commentary.

    There is no eviction: the cache is bounded by the number of verses.
    Sanitizing is deterministic, so a second put for the same key stores an
    identical value; writes are still serialized for multi-threaded hosts.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: VerseKey) -> str | None:
        return self._entries.get(str(key))

    def put(self, key: VerseKey, text: str) -> None:
        with self._lock:
            self._entries[str(key)] = text

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, VerseKey) and str(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
