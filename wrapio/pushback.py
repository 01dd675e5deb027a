"""Streams that let already read data be pushed back.

Pushed back units are served first by ``read``, ``read_into`` and ``skip``;
only when none are left do the calls reach the wrapped stream. A single unit
pushed back becomes the very next unit read, while a bulk push back keeps the
order of the pushed slice.

The push back buffer has a fixed size. Pushing back more than the free space
raises :class:`~wrapio.exceptions.BufferFullError` and leaves the buffer as it
was. mark/reset are not supported.
"""
import logging
from typing import Optional

from wrapio.base import ClosedGuard, InputStream, Reader, check_bounds
from wrapio.config import get_config
from wrapio.exceptions import (
    BufferFullError,
    InvalidArgumentError,
    UnsupportedOperationError,
)

logger = logging.getLogger(__name__)

MASK = 0xFF


class _Pushback(ClosedGuard):
    def __init__(self, delegate, size: int):
        if delegate is None:
            raise InvalidArgumentError("delegate cannot be None")
        if size <= 0:
            raise InvalidArgumentError("Push back buffer size must be positive")
        self._delegate = delegate
        self._push_buffer = self._new_buffer(size)
        # Unread data lives in _push_buffer[_push_position:], next unit first.
        self._push_position = size

    @property
    def capacity(self) -> int:
        return len(self._push_buffer)

    def buffered(self) -> int:
        """Number of pushed back units not read yet."""
        return len(self._push_buffer) - self._push_position

    def _convert(self, units):
        raise NotImplementedError

    def _buffer_full(self, requested: int) -> BufferFullError:
        logger.debug(
            "Cannot push back %d units, %d of %d free",
            requested,
            self._push_position,
            len(self._push_buffer),
        )
        return BufferFullError("Push back buffer is full")

    def _unread_one(self, unit):
        self._ensure_open()
        if self._push_position == 0:
            raise self._buffer_full(1)
        self._push_position -= 1
        self._push_buffer[self._push_position] = unit

    def _unread_many(self, data, offset: int, length: Optional[int]):
        self._ensure_open()
        length = check_bounds(data, offset, length, "data")
        if length == 0:
            return
        if length > self._push_position:
            raise self._buffer_full(length)
        start = self._push_position - length
        self._push_buffer[start:self._push_position] = self._convert(
            data[offset:offset + length]
        )
        self._push_position = start

    def read(self):
        self._ensure_open()
        if self._push_position < len(self._push_buffer):
            unit = self._push_buffer[self._push_position]
            self._push_position += 1
            return unit
        return self._delegate.read()

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        self._ensure_open()
        length = check_bounds(buffer, offset, length)
        if length == 0:
            return 0
        served = min(length, self.buffered())
        if served:
            start = self._push_position
            buffer[offset:offset + served] = self._push_buffer[start:start + served]
            self._push_position += served
            if served == length:
                return served
        count = self._delegate.read_into(buffer, offset + served, length - served)
        if count is None:
            # Units already served from the push back buffer still count.
            return served or None
        return served + count

    def skip(self, count: int) -> int:
        self._ensure_open()
        if count <= 0:
            return 0
        skipped = min(count, self.buffered())
        self._push_position += skipped
        if count > skipped:
            skipped += self._delegate.skip(count - skipped)
        return skipped

    def mark(self, read_limit: int):
        raise UnsupportedOperationError("mark() not supported")

    def reset(self):
        raise UnsupportedOperationError("reset() not supported")

    def mark_supported(self) -> bool:
        return False

    def close(self):
        if self._mark_closed():
            self._delegate.close()


class PushbackInputStream(_Pushback, InputStream):
    """Byte stream with a push back buffer of ``size`` bytes.

    Units are stored and returned as unsigned 8 bit values, so pushing back
    ``-1`` yields ``255``.
    """

    def __init__(self, delegate: InputStream, size: int):
        super().__init__(delegate, size)

    def _convert(self, units):
        return bytes(unit & MASK for unit in units)

    def unread(self, data, offset: int = 0, length: Optional[int] = None):
        """Push back one byte (an ``int``) or ``data[offset:offset + length]``."""
        if isinstance(data, int):
            self._unread_one(data & MASK)
        else:
            self._unread_many(data, offset, length)

    def available(self) -> int:
        self._ensure_open()
        return self.buffered() + self._delegate.available()


class PushbackReader(_Pushback, Reader):
    """Reader with a push back buffer of ``size`` characters.

    ``size`` defaults to the ``reader_pushback_size`` setting (1 unless
    configured otherwise).
    """

    _kind = "Reader"

    def __init__(self, delegate: Reader, size: Optional[int] = None):
        if size is None:
            size = get_config("reader_pushback_size")
        super().__init__(delegate, size)

    def _convert(self, units):
        return list(units)

    def unread(self, data, offset: int = 0, length: Optional[int] = None):
        """Push back ``data[offset:offset + length]``; ``data`` is a str or a list of characters."""
        self._unread_many(data, offset, length)

    def unread_buffer(self, source):
        """Push back the remaining characters of a :class:`~wrapio.buffers.CharBuffer`.

        On success the buffer's position moves to its limit.
        """
        self._ensure_open()
        if source is None:
            raise InvalidArgumentError("buffer cannot be None")
        available = source.remaining()
        if available == 0:
            return
        if available > self._push_position:
            raise self._buffer_full(available)
        if source.has_array():
            self._unread_many(source.array(), source.position, available)
            source.position += available
        else:
            data = self._new_buffer(available)
            source.get(data)
            self._unread_many(data, 0, available)

    def read_buffer(self, target) -> Optional[int]:
        self._ensure_open()
        return super().read_buffer(target)

    def ready(self) -> bool:
        self._ensure_open()
        return self.buffered() > 0 or self._delegate.ready()
