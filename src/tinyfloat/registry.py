"""Process-wide interning of tiny float values."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, TypeVar

from .codec import encode
from .coerce import MISSING, to_number
from .constants import MANTISSA_MASK, NAN_COUNTER_MODULUS
from .layout import NaN, check_byte, unpack

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValueRegistry(Generic[T]):
    """Maps each non-NaN byte to one canonical instance.

    NaN bytes are never cached: every NaN request builds a fresh instance,
    and NaN payloads rotate through the 14 available codes so repeated NaN
    constructions rarely share a byte. The counter is process-wide.
    """

    def __init__(self, factory: Callable[[int], T]):
        self._factory = factory
        self._cache: dict[int, T] = {}
        self._nan_counter = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, byte: int) -> bool:
        return byte in self._cache

    def next_nan_payload(self) -> int:
        """Advance the NaN rotation; returns sign bit (bit 3) + payload (bits 0-2)."""
        with self._lock:
            counter = (self._nan_counter + 1) % NAN_COUNTER_MODULUS
            if (counter & MANTISSA_MASK) == 0:
                counter = (counter + 1) % NAN_COUNTER_MODULUS
            self._nan_counter = counter
        logger.debug("NaN payload %d allocated", counter)
        return counter

    def reset_nan_counter(self) -> None:
        with self._lock:
            self._nan_counter = 0

    def intern(self, byte: int) -> T:
        if isinstance(unpack(byte), NaN):
            return self._factory(byte)

        value = self._cache.get(byte)
        if value is not None:
            return value
        with self._lock:
            value = self._cache.get(byte)
            if value is None:
                value = self._factory(byte)
                self._cache[byte] = value
                logger.debug("Interned code 0x%02x (%d cached)", byte, len(self._cache))
        return value

    def encode(self, value: object = MISSING) -> int:
        """Coerce and encode ``value``, drawing NaN payloads from this registry."""
        return encode(to_number(value), next_nan=self.next_nan_payload)

    def construct(self, value: object = MISSING) -> T:
        return self.intern(self.encode(value))

    def from_byte(self, byte: int) -> T:
        return self.intern(check_byte(byte))
