"""ResolutionCache — quantized scale key → ContentLevel.

Unbounded unless a capacity is given, in which case the least recently used
key is evicted once the cache is full. Threshold changes always clear the
whole cache.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Context, Decimal

from zoomtier.engine.levels import ContentLevel

# Wide enough for the exact expansion of any finite float
_KEY_CONTEXT = Context(prec=400)


@dataclass(frozen=True)
class CacheStats:
    size: int
    keys: list[str] = field(default_factory=list)
    capacity: int | None = None
    hits: int = 0
    misses: int = 0


class ResolutionCache:
    def __init__(self, precision: int = 2, capacity: int | None = None) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be positive or None")
        self.precision = precision
        self.capacity = capacity
        self._entries: OrderedDict[str, ContentLevel] = OrderedDict()
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def key_for(self, scale: float) -> str:
        # Exact binary value, ties rounded up: 0.125 keys as "0.13"
        step = Decimal(1).scaleb(-self.precision)
        key = Decimal(scale).quantize(step, rounding=ROUND_HALF_UP, context=_KEY_CONTEXT)
        # abs() folds -0.0 into 0.0 so both share a key
        return format(abs(key) if key.is_zero() else key, "f")

    def get(self, key: str) -> ContentLevel | None:
        with self._lock:
            level = self._entries.get(key)
            if level is None:
                self._misses += 1
                return None
            self._hits += 1
            if self.capacity is not None:
                self._entries.move_to_end(key)
            return level

    def put(self, key: str, level: ContentLevel) -> None:
        with self._lock:
            self._entries[key] = level
            if self.capacity is not None:
                self._entries.move_to_end(key)
                while len(self._entries) > self.capacity:
                    self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                keys=list(self._entries.keys()),
                capacity=self.capacity,
                hits=self._hits,
                misses=self._misses,
            )
