"""Wrappers capping the number of units read from or written to a stream.

Reading past the limit quietly reports end of data; writing past the limit is
an :class:`~wrapio.exceptions.OutOfSpaceError`. None of these classes are
thread safe.
"""
from typing import Optional

from wrapio.base import ClosedGuard, InputStream, OutputStream, Reader, Writer, check_bounds
from wrapio.exceptions import InvalidArgumentError, OutOfSpaceError


class _Bounded(ClosedGuard):
    _unit_name = "bytes"

    def __init__(self, delegate, limit: int):
        if delegate is None:
            raise InvalidArgumentError("delegate cannot be None")
        if limit <= 0:
            raise InvalidArgumentError("Limit must be positive")
        self._delegate = delegate
        self._limit = limit
        self._position = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def position(self) -> int:
        return self._position

    def remaining(self) -> int:
        return self._limit - self._position

    def close(self):
        if self._mark_closed():
            self._delegate.close()


class _BoundedSource(_Bounded):
    def __init__(self, delegate, limit: int):
        super().__init__(delegate, limit)
        self._mark = 0

    def read(self):
        self._ensure_open()
        if self.remaining() == 0:
            return None
        unit = self._delegate.read()
        if unit is not None:
            self._position += 1
        return unit

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        self._ensure_open()
        length = check_bounds(buffer, offset, length)
        if length == 0:
            return 0
        if self.remaining() == 0:
            return None
        count = self._delegate.read_into(buffer, offset, min(length, self.remaining()))
        if count:
            self._position += count
        return count

    def skip(self, count: int) -> int:
        self._ensure_open()
        if count <= 0:
            return 0
        skipped = self._delegate.skip(min(count, self.remaining()))
        self._position += skipped
        return skipped

    def mark(self, read_limit: int):
        self._ensure_open()
        self._delegate.mark(read_limit)
        self._mark = self._position

    def reset(self):
        self._ensure_open()
        self._delegate.reset()
        self._position = self._mark

    def mark_supported(self) -> bool:
        self._ensure_open()
        return self._delegate.mark_supported()


class BoundedInputStream(_BoundedSource, InputStream):
    """Reads at most ``limit`` bytes from the wrapped stream."""

    def available(self) -> int:
        self._ensure_open()
        return min(self._delegate.available(), self.remaining())


class BoundedReader(_BoundedSource, Reader):
    """Reads at most ``limit`` characters from the wrapped reader."""

    _kind = "Reader"
    _unit_name = "characters"

    def ready(self) -> bool:
        self._ensure_open()
        return self.remaining() > 0 and self._delegate.ready()

    def read_buffer(self, target) -> Optional[int]:
        self._ensure_open()
        return super().read_buffer(target)


class _BoundedSink(_Bounded):
    def _out_of_space(self):
        return OutOfSpaceError(
            f"{self._kind} is full: {self._limit} {self._unit_name} have been written"
        )

    def write_one(self, unit):
        self._ensure_open()
        if self.remaining() == 0:
            raise self._out_of_space()
        self._delegate.write_one(unit)
        self._position += 1

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._ensure_open()
        length = check_bounds(data, offset, length, "data")
        if length == 0:
            return
        if self.remaining() == 0:
            raise self._out_of_space()
        count = min(self.remaining(), length)
        self._delegate.write(data, offset, count)
        self._position += count
        if count != length:
            # The delegate keeps whatever fitted.
            raise self._out_of_space()

    def flush(self):
        self._ensure_open()
        self._delegate.flush()


class BoundedOutputStream(_BoundedSink, OutputStream):
    """Writes at most ``limit`` bytes to the wrapped stream."""

    _kind = "Output stream"


class BoundedWriter(_BoundedSink, Writer):
    """Writes at most ``limit`` characters to the wrapped writer.

    ``append`` goes through :meth:`write` and fails the same way once the
    limit is reached.
    """

    _kind = "Writer"
    _unit_name = "characters"

    def append(self, data, start: int = 0, end: Optional[int] = None):
        self._ensure_open()
        return super().append(data, start, end)
