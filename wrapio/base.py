"""Capability interfaces implemented by every stream, reader and writer.

Byte streams move ``int`` units in ``0..255``, character streams move
one-character ``str`` units. End of data is always reported as ``None``.
"""
import abc
import logging
from typing import Optional, Sequence

from wrapio.config import get_config
from wrapio.exceptions import (
    IllegalStateError,
    InvalidArgumentError,
    UnsupportedOperationError,
)

logger = logging.getLogger(__name__)


def check_bounds(buffer, offset: int, length: Optional[int], what: str = "buffer") -> int:
    """Validate a ``(buffer, offset, length)`` triple and return the length.

    ``length=None`` stands for everything from ``offset`` to the end of the buffer.
    """
    if buffer is None:
        raise InvalidArgumentError(f"{what} cannot be None")
    if offset < 0:
        raise InvalidArgumentError("offset must not be negative")
    if length is None:
        length = max(len(buffer) - offset, 0)
    if length < 0:
        raise InvalidArgumentError("length must not be negative")
    if length > len(buffer) - offset:
        raise InvalidArgumentError(
            f"length must be less or equal to free space available in the {what}"
        )
    return length


class Closeable(abc.ABC):
    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class ClosedGuard(object):
    """One-way open -> closed flag shared by the wrappers."""

    _closed = False
    _kind = "Stream"

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self):
        if self._closed:
            raise IllegalStateError(f"{self._kind} is closed")

    def _mark_closed(self) -> bool:
        """Flip the flag; returns False if it was already closed."""
        if self._closed:
            return False
        self._closed = True
        logger.debug("Closing %s", self.__class__.__name__)
        return True


class _Source(Closeable):
    """Behaviour shared by byte and character sources."""

    def _new_buffer(self, size: int):
        raise NotImplementedError

    @abc.abstractmethod
    def read(self):
        """Read one unit, or return None at end of data."""

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        """Read up to ``length`` units into ``buffer[offset:]``.

        Returns the number of units read, 0 when ``length`` is 0, or None at
        end of data.
        """
        length = check_bounds(buffer, offset, length)
        if length == 0:
            return 0
        for i in range(length):
            unit = self.read()
            if unit is None:
                return i if i else None
            buffer[offset + i] = unit
        return length

    def skip(self, count: int) -> int:
        if count <= 0:
            return 0
        scratch = self._new_buffer(min(count, get_config("transfer_buffer_size")))
        remaining = count
        while remaining > 0:
            read = self.read_into(scratch, 0, min(remaining, len(scratch)))
            if not read:
                break
            remaining -= read
        return count - remaining

    def mark(self, read_limit: int):
        pass

    def reset(self):
        raise UnsupportedOperationError("reset() not supported")

    def mark_supported(self) -> bool:
        return False

    def _read_chunks(self):
        buffer = self._new_buffer(get_config("transfer_buffer_size"))
        while True:
            count = self.read_into(buffer)
            if not count:
                return
            yield buffer[:count]


class InputStream(_Source):
    """A source of bytes."""

    def _new_buffer(self, size: int):
        return bytearray(size)

    def available(self) -> int:
        return 0

    def read_all(self) -> bytes:
        return b"".join(bytes(chunk) for chunk in self._read_chunks())


class Reader(_Source):
    """A source of characters."""

    def _new_buffer(self, size: int):
        return [""] * size

    def ready(self) -> bool:
        return False

    def read_buffer(self, target) -> Optional[int]:
        """Read into the remaining space of a :class:`~wrapio.buffers.CharBuffer`."""
        if target is None:
            raise InvalidArgumentError("buffer cannot be None")
        remaining = target.remaining()
        if remaining == 0:
            return 0
        if target.has_array():
            count = self.read_into(target.array(), target.position, remaining)
            if count:
                target.position += count
        else:
            data = self._new_buffer(remaining)
            count = self.read_into(data)
            if count:
                target.put(data, 0, count)
        return count

    def read_all(self) -> str:
        return "".join("".join(chunk) for chunk in self._read_chunks())


class OutputStream(Closeable):
    """A sink of bytes."""

    @abc.abstractmethod
    def write_one(self, unit: int):
        pass

    def write(self, data: Sequence[int], offset: int = 0, length: Optional[int] = None):
        length = check_bounds(data, offset, length)
        for i in range(offset, offset + length):
            self.write_one(data[i])

    def flush(self):
        pass


class Writer(Closeable):
    """A sink of characters."""

    @abc.abstractmethod
    def write_one(self, ch: str):
        pass

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        length = check_bounds(data, offset, length)
        for i in range(offset, offset + length):
            self.write_one(data[i])

    def append(self, data, start: int = 0, end: Optional[int] = None):
        """Write ``data[start:end]`` and return this writer."""
        if data is None:
            raise InvalidArgumentError("data cannot be None")
        if end is None:
            end = len(data)
        if start < 0 or end < start or end > len(data):
            raise InvalidArgumentError("start and end must select a slice of data")
        self.write(data, start, end - start)
        return self

    def flush(self):
        pass


def transfer(source, sink, buffer_size: Optional[int] = None) -> int:
    """Copy everything left in ``source`` to ``sink`` and return the unit count.

    Works for an :class:`InputStream` into an :class:`OutputStream` as well as
    a :class:`Reader` into a :class:`Writer`. Neither side is closed.
    """
    if source is None or sink is None:
        raise InvalidArgumentError("source and sink cannot be None")
    if buffer_size is None:
        buffer_size = get_config("transfer_buffer_size")
    if buffer_size <= 0:
        raise InvalidArgumentError("buffer_size must be positive")

    buffer = source._new_buffer(buffer_size)
    total = 0
    while True:
        count = source.read_into(buffer)
        if not count:
            break
        sink.write(buffer, 0, count)
        total += count
    return total
