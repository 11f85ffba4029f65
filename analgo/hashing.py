"""Hash tables with separate chaining, and the hash functions they are used with."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

HashFunction = Callable[[Any, int], int]


def char_hash(key: str, size: int) -> int:
    """Hash a single character by its code point modulo *size*."""
    if len(key) != 1:
        raise ValueError(f"expected a single character, got {key!r}")
    return ord(key) % size


def int_hash(key: int, size: int) -> int:
    """Hash an integer by taking it modulo *size*."""
    return key % size


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def triple_hash(key: Iterable[int], size: int) -> int:
    """Hash a sequence of integers with a base-31 polynomial on 32-bit signed arithmetic."""
    h = 0
    for part in key:
        h = _wrap32(h * 31 + part)
    # Remainder of a truncating division, made non-negative.
    return abs(h) % size


def _default_hash(key: Any, size: int) -> int:
    return hash(key) % size


def _format_key(key: Any) -> str:
    if isinstance(key, (tuple, list)):
        return "(" + ", ".join(str(part) for part in key) + ")"
    return str(key)


class ChainedHashTable:
    """A fixed number of buckets, each a chain whose newest entry comes first."""

    def __init__(self, size: int, hash_function: HashFunction | None = None) -> None:
        if size < 1:
            raise ValueError("a hash table needs at least one bucket")
        self.size = size
        self._hash = hash_function if hash_function is not None else _default_hash
        self._chains: list[list[list[Any]]] = [[] for _ in range(size)]

    def _chain(self, key: Any) -> list[list[Any]]:
        return self._chains[self._hash(key, self.size)]

    def insert(self, key: Any, value: Any) -> None:
        """Store *value* under *key*, replacing the value of an existing entry."""
        chain = self._chain(key)
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.insert(0, [key, value])

    def get(self, key: Any) -> Any | None:
        """Return the value stored under *key*, or None when there is none."""
        for stored, value in self._chain(key):
            if stored == key:
                return value
        return None

    def __getitem__(self, key: Any) -> Any:
        for stored, value in self._chain(key):
            if stored == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: Any) -> bool:
        return any(stored == key for stored, _ in self._chain(key))

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._chains)

    def remove(self, key: Any) -> bool:
        """Delete the entry for *key*; return whether there was one."""
        chain = self._chain(key)
        for position, (stored, _) in enumerate(chain):
            if stored == key:
                del chain[position]
                return True
        return False

    def clear(self) -> None:
        """Remove every entry, keeping the buckets."""
        for chain in self._chains:
            chain.clear()

    def buckets(self) -> list[list[tuple[Any, Any]]]:
        """Return each bucket's entries as ``(key, value)`` pairs, newest first."""
        return [[(key, value) for key, value in chain] for chain in self._chains]

    def render(self) -> str:
        """Return one line per bucket showing its chain."""
        lines = []
        for index, chain in enumerate(self._chains):
            links = "".join(f"[{_format_key(key)}: {value}] -> " for key, value in chain)
            lines.append(f"Hash {index}: {links}NULL")
        return "\n".join(lines)