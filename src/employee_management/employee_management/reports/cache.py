"""Process-local report cache.

Entries live for a fixed TTL and are never invalidated by data writes, so a
report may be up to one TTL stale. Each server process holds its own copy.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from ..core.constants import REPORT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    content: bytes
    expires_at: float


class ReportCache:
    """TTL cache with single-flight generation per key.

    Concurrent callers for one key wait on that key's lock and get the bytes
    the first caller produced. Different keys never share a lock. A factory
    that raises leaves nothing cached.
    """

    def __init__(self, ttl_seconds: float = REPORT_CACHE_TTL_SECONDS, *, clock: Callable[[], float] = time.monotonic):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._key_locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _fresh(self, key: str):
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at > self._clock():
                return entry.content
            del self._entries[key]
            return None

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def _store(self, key: str, content: bytes) -> None:
        with self._guard:
            now = self._clock()
            for stale in [k for k, e in self._entries.items() if e.expires_at <= now]:
                del self._entries[stale]
            self._entries[key] = _Entry(content, now + self._ttl)
            # Locks of keys with no entry and no holder are dropped; the
            # current key's lock is held by the caller.
            for idle in [k for k, lock in self._key_locks.items() if k not in self._entries and not lock.locked()]:
                del self._key_locks[idle]

    def get_or_create(self, key: str, factory: Callable[[], bytes]) -> bytes:
        content = self._fresh(key)
        if content is not None:
            return content

        with self._lock_for(key):
            content = self._fresh(key)
            if content is not None:
                return content

            logger.info("Report cache miss for %s", key)
            content = factory()
            self._store(key, content)
            return content

    def clear(self) -> None:
        with self._guard:
            self._entries.clear()
            for idle in [k for k, lock in self._key_locks.items() if not lock.locked()]:
                del self._key_locks[idle]
