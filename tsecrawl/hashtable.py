"""A hash table stored as an indexed set of queues, searched by predicate."""

import struct
from typing import Any, Callable, Iterator, List, Optional, Union

from .queue import Queue, SearchFn

_MASK = 0xFFFFFFFF


def _signed_byte(value: int) -> int:
    return value - 256 if value > 127 else value


def super_fast_hash(data: Union[str, bytes], tablesize: int) -> int:
    """Return Paul Hsieh's SuperFastHash of data, reduced modulo tablesize."""
    if tablesize < 1:
        raise ValueError("tablesize must be positive")
    if isinstance(data, str):
        data = data.encode("utf-8")
    length = len(data)
    if length == 0:
        return 0

    h = length & _MASK
    rem = length & 3
    body = length - rem

    for low, high in struct.iter_unpack("<HH", data[:body]):
        h = (h + low) & _MASK
        tmp = ((high << 11) ^ h) & _MASK
        h = ((h << 16) ^ tmp) & _MASK
        h = (h + (h >> 11)) & _MASK

    tail = data[body:]
    if rem == 3:
        h = (h + struct.unpack("<H", tail[:2])[0]) & _MASK
        h ^= (h << 16) & _MASK
        h ^= (_signed_byte(tail[2]) << 18) & _MASK
        h = (h + (h >> 11)) & _MASK
    elif rem == 2:
        h = (h + struct.unpack("<H", tail)[0]) & _MASK
        h ^= (h << 11) & _MASK
        h = (h + (h >> 17)) & _MASK
    elif rem == 1:
        h = (h + _signed_byte(tail[0])) & _MASK
        h ^= (h << 10) & _MASK
        h = (h + (h >> 1)) & _MASK

    h ^= (h << 3) & _MASK
    h = (h + (h >> 5)) & _MASK
    h ^= (h << 4) & _MASK
    h = (h + (h >> 17)) & _MASK
    h ^= (h << 25) & _MASK
    h = (h + (h >> 6)) & _MASK

    return h % tablesize


class HashTable:
    """Fixed-size hash table; entries sharing a bucket live in a queue."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("hash table size must be positive")
        self._buckets: List[Optional[Queue]] = [None] * size

    def _index(self, key: Union[str, bytes]) -> int:
        return super_fast_hash(key, len(self._buckets))

    def put(self, element: Any, key: Union[str, bytes]) -> None:
        """Store element in the bucket chosen by key."""
        index = self._index(key)
        bucket = self._buckets[index]
        if bucket is None:
            bucket = self._buckets[index] = Queue()
        bucket.put(element)

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Call fn on every stored element."""
        for element in self:
            fn(element)

    def _bucket_for(self, key: Union[str, bytes]) -> Optional[Queue]:
        if not key:
            return None
        return self._buckets[self._index(key)]

    def search(self, searchfn: SearchFn, key: Union[str, bytes]) -> Optional[Any]:
        """Return the first element in key's bucket matching searchfn(element, key)."""
        bucket = self._bucket_for(key)
        return bucket.search(searchfn, key) if bucket is not None else None

    def remove(self, searchfn: SearchFn, key: Union[str, bytes]) -> Optional[Any]:
        """Remove and return the first element in key's bucket matching searchfn."""
        bucket = self._bucket_for(key)
        return bucket.remove(searchfn, key) if bucket is not None else None

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket