"""Separate-chaining hash table with pluggable hashing and equality functions."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple

from shopcore.linked_list import LinkedList

HashFunction = Callable[[Any], int]
EqFunction = Callable[[Any, Any], bool]

LOAD_FACTOR = 0.75
PRIMES = (17, 31, 67, 127, 257, 509, 1021, 2053, 4099, 8191, 16381)

_ULONG_MASK = (1 << 64) - 1


def string_knr_hash(key: str) -> int:
    """Kernighan & Ritchie string hash (multiplier 31), wrapped to 64 bits."""
    result = 0
    for char in key:
        result = (result * 31 + ord(char)) & _ULONG_MASK
    return result


def extract_int_hash_key(key: int) -> int:
    """Use an integer key as its own hash."""
    return int(key)


def eq_elem_int(a: Any, b: Any) -> bool:
    """Integer equality."""
    return a == b


def eq_elem_string(a: Any, b: Any) -> bool:
    """String equality."""
    return a == b


def _default_eq(a: Any, b: Any) -> bool:
    return a is b or a == b


class HashTable:
    """A hash table mapping keys to values, growing through a table of primes."""

    def __init__(
        self,
        hash_func: Optional[HashFunction] = None,
        key_eq: Optional[EqFunction] = None,
        value_eq: Optional[EqFunction] = None,
        load_factor: float = LOAD_FACTOR,
        capacity: int = PRIMES[0],
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if load_factor <= 0:
            raise ValueError("load factor must be positive")
        self._hash = hash_func if hash_func is not None else extract_int_hash_key
        self._key_eq = key_eq if key_eq is not None else _default_eq
        self._value_eq = value_eq if value_eq is not None else _default_eq
        self._load_factor = load_factor
        self._buckets: List[List[List[Any]]] = [[] for _ in range(capacity)]
        self._size = 0

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries())
        return f"HashTable({{{items}}})"

    def _entries(self) -> Iterator[Tuple[Any, Any]]:
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value

    def _bucket_for(self, key: Any) -> List[List[Any]]:
        return self._buckets[self._hash(key) % len(self._buckets)]

    def _find(self, key: Any) -> Optional[List[Any]]:
        for entry in self._bucket_for(key):
            if self._key_eq(entry[0], key):
                return entry
        return None

    def _next_capacity(self) -> int:
        current = len(self._buckets)
        for prime in PRIMES:
            if prime > current:
                return prime
        return current * 2 + 1

    def _resize(self) -> None:
        entries = list(self._entries())
        self._buckets = [[] for _ in range(self._next_capacity())]
        for key, value in entries:
            self._bucket_for(key).append([key, value])

    def insert(self, key: Any, value: Any) -> None:
        """Map key to value, replacing any earlier value for key."""
        entry = self._find(key)
        if entry is not None:
            entry[1] = value
            return
        self._bucket_for(key).append([key, value])
        self._size += 1
        if self._load_factor * len(self._buckets) < self._size:
            self._resize()

    def lookup(self, key: Any) -> Any:
        """Return the value for key; raise KeyError if it is absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for key, or default if it is absent."""
        entry = self._find(key)
        return default if entry is None else entry[1]

    def increase(self, key: Any) -> bool:
        """Add one to the value stored for key; False if key is absent."""
        entry = self._find(key)
        if entry is None:
            return False
        entry[1] += 1
        return True

    def remove(self, key: Any) -> Any:
        """Remove key and return its value; raise KeyError if it is absent."""
        bucket = self._bucket_for(key)
        for position, entry in enumerate(bucket):
            if self._key_eq(entry[0], key):
                del bucket[position]
                self._size -= 1
                return entry[1]
        raise KeyError(key)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has_key(key)

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self._entries():
            yield key

    def is_empty(self) -> bool:
        return self._size == 0

    def keys(self) -> LinkedList:
        """All keys, in bucket order."""
        result = LinkedList(self._key_eq)
        for key, _ in self._entries():
            result.append(key)
        return result

    def values(self) -> LinkedList:
        """All values, in the same order as keys()."""
        result = LinkedList(self._value_eq)
        for _, value in self._entries():
            result.append(value)
        return result

    def has_key(self, key: Any) -> bool:
        return self.any(lambda k, _v: self._key_eq(k, key))

    def has_value(self, value: Any) -> bool:
        return self.any(lambda _k, v: self._value_eq(v, value))

    def any(self, pred: Callable[[Any, Any], bool]) -> bool:
        """True if pred(key, value) holds for some entry."""
        return any(pred(key, value) for key, value in self._entries())

    def all(self, pred: Callable[[Any, Any], bool]) -> bool:
        """True if pred(key, value) holds for every entry."""
        return all(pred(key, value) for key, value in self._entries())

    def apply_to_all(self, fun: Callable[[Any, Any], Any]) -> None:
        """Replace every value with fun(key, value)."""
        for bucket in self._buckets:
            for entry in bucket:
                entry[1] = fun(entry[0], entry[1])

    def clear(self) -> None:
        """Remove every entry, keeping the current capacity."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def capacity(self) -> int:
        """The current number of buckets."""
        return len(self._buckets)