from typing import List, Optional

from wrapio.base import check_bounds
from wrapio.exceptions import (
    BufferFullError,
    InvalidArgumentError,
    UnsupportedOperationError,
)


class CharBuffer(object):
    """A window over a sequence of characters.

    ``position`` is the next index to read or write, ``limit`` the first index
    that may not be touched and ``capacity`` the size of the storage. Buffers
    created by :meth:`allocate` or by wrapping a list expose their storage
    through :meth:`array`; :meth:`allocate_direct` buffers and wrapped strings
    do not.
    """

    def __init__(
        self,
        storage,
        position: int = 0,
        limit: Optional[int] = None,
        read_only: bool = False,
        array_backed: bool = True,
    ):
        self._storage = storage
        self._read_only = read_only
        self._array_backed = array_backed and not read_only
        self._limit = len(storage) if limit is None else limit
        if not 0 <= self._limit <= len(storage):
            raise InvalidArgumentError("limit must lie within the buffer")
        self._position = 0
        self.position = position

    @classmethod
    def allocate(cls, capacity: int) -> "CharBuffer":
        return cls([""] * capacity)

    @classmethod
    def allocate_direct(cls, capacity: int) -> "CharBuffer":
        return cls([""] * capacity, array_backed=False)

    @classmethod
    def wrap(cls, data, start: int = 0, end: Optional[int] = None) -> "CharBuffer":
        """Wrap a list (writable, array backed) or a str (read-only)."""
        if data is None:
            raise InvalidArgumentError("data cannot be None")
        if isinstance(data, str):
            return cls(data, start, end, read_only=True)
        return cls(data, start, end)

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int):
        if not 0 <= value <= self._limit:
            raise InvalidArgumentError("position must lie between 0 and limit")
        self._position = value

    @property
    def limit(self) -> int:
        return self._limit

    @limit.setter
    def limit(self, value: int):
        if not 0 <= value <= self.capacity:
            raise InvalidArgumentError("limit must lie between 0 and capacity")
        self._limit = value
        if self._position > value:
            self._position = value

    @property
    def read_only(self) -> bool:
        return self._read_only

    def remaining(self) -> int:
        return self._limit - self._position

    def has_remaining(self) -> bool:
        return self._position < self._limit

    def has_array(self) -> bool:
        return self._array_backed

    def array(self) -> List[str]:
        if not self._array_backed:
            raise UnsupportedOperationError("buffer is not backed by an accessible array")
        return self._storage

    def flip(self) -> "CharBuffer":
        self._limit = self._position
        self._position = 0
        return self

    def clear(self) -> "CharBuffer":
        self._limit = self.capacity
        self._position = 0
        return self

    def put(self, data, offset: int = 0, length: Optional[int] = None) -> "CharBuffer":
        """Copy ``data[offset:offset + length]`` in at the current position."""
        if self._read_only:
            raise UnsupportedOperationError("buffer is read-only")
        length = check_bounds(data, offset, length, "data")
        if length > self.remaining():
            raise BufferFullError("not enough room left in the buffer")
        start = self._position
        self._storage[start:start + length] = list(data[offset:offset + length])
        self._position += length
        return self

    def get(self, data: List[str], offset: int = 0, length: Optional[int] = None) -> "CharBuffer":
        """Copy characters from the current position into ``data[offset:]``."""
        length = check_bounds(data, offset, length)
        if length > self.remaining():
            raise InvalidArgumentError("not enough characters left in the buffer")
        start = self._position
        data[offset:offset + length] = list(self._storage[start:start + length])
        self._position += length
        return self

    def __len__(self):
        return self.remaining()

    def __str__(self):
        return "".join(self._storage[self._position:self._limit])

    def __repr__(self):
        return "<CharBuffer position=%d limit=%d capacity=%d>" % (
            self._position,
            self._limit,
            self.capacity,
        )
