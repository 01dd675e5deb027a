"""Wrappers forwarding every operation to one inner stream.

They are the starting point for decorators that only need to change a few
operations: subclass, override what differs and reach the wrapped instance
through :attr:`delegate`.
"""
from typing import Optional

from wrapio.base import ClosedGuard, InputStream, OutputStream, Reader, Writer
from wrapio.exceptions import InvalidArgumentError
from wrapio.printing import PrintStream


def _require(delegate, what: str):
    if delegate is None:
        raise InvalidArgumentError(f"{what} cannot be None")
    return delegate


class DelegatingInputStream(ClosedGuard, InputStream):
    def __init__(self, delegate: InputStream):
        self._delegate = _require(delegate, "delegate")

    @property
    def delegate(self) -> InputStream:
        return self._delegate

    def read(self) -> Optional[int]:
        self._ensure_open()
        return self._delegate.read()

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        self._ensure_open()
        return self._delegate.read_into(buffer, offset, length)

    def skip(self, count: int) -> int:
        self._ensure_open()
        return self._delegate.skip(count)

    def available(self) -> int:
        self._ensure_open()
        return self._delegate.available()

    def mark(self, read_limit: int):
        self._ensure_open()
        self._delegate.mark(read_limit)

    def reset(self):
        self._ensure_open()
        self._delegate.reset()

    def mark_supported(self) -> bool:
        self._ensure_open()
        return self._delegate.mark_supported()

    def close(self):
        if self._mark_closed():
            self._delegate.close()


class DelegatingReader(ClosedGuard, Reader):
    _kind = "Reader"

    def __init__(self, delegate: Reader):
        self._delegate = _require(delegate, "delegate")

    @property
    def delegate(self) -> Reader:
        return self._delegate

    def read(self) -> Optional[str]:
        self._ensure_open()
        return self._delegate.read()

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        self._ensure_open()
        return self._delegate.read_into(buffer, offset, length)

    def read_buffer(self, target) -> Optional[int]:
        self._ensure_open()
        return self._delegate.read_buffer(target)

    def skip(self, count: int) -> int:
        self._ensure_open()
        return self._delegate.skip(count)

    def ready(self) -> bool:
        self._ensure_open()
        return self._delegate.ready()

    def mark(self, read_limit: int):
        self._ensure_open()
        self._delegate.mark(read_limit)

    def reset(self):
        self._ensure_open()
        self._delegate.reset()

    def mark_supported(self) -> bool:
        self._ensure_open()
        return self._delegate.mark_supported()

    def close(self):
        if self._mark_closed():
            self._delegate.close()


class DelegatingOutputStream(ClosedGuard, OutputStream):
    def __init__(self, delegate: OutputStream):
        self._delegate = _require(delegate, "delegate")

    @property
    def delegate(self) -> OutputStream:
        return self._delegate

    def write_one(self, unit: int):
        self._ensure_open()
        self._delegate.write_one(unit)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._ensure_open()
        self._delegate.write(data, offset, length)

    def flush(self):
        self._ensure_open()
        self._delegate.flush()

    def close(self):
        if self._mark_closed():
            self._delegate.close()


class DelegatingWriter(ClosedGuard, Writer):
    _kind = "Writer"

    def __init__(self, delegate: Writer):
        self._delegate = _require(delegate, "delegate")

    @property
    def delegate(self) -> Writer:
        return self._delegate

    def write_one(self, ch: str):
        self._ensure_open()
        self._delegate.write_one(ch)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._ensure_open()
        self._delegate.write(data, offset, length)

    def append(self, data, start: int = 0, end: Optional[int] = None):
        self._ensure_open()
        self._delegate.append(data, start, end)
        return self

    def flush(self):
        self._ensure_open()
        self._delegate.flush()

    def close(self):
        if self._mark_closed():
            self._delegate.close()


class DelegatingPrintStream(PrintStream):
    """Forwards to another print stream.

    Like any print stream it never raises I/O errors; those are recorded by
    the delegate and surface through :meth:`check_error`.
    """

    def __init__(self, delegate: PrintStream):
        super().__init__(_require(delegate, "delegate"))
        self._delegate = delegate

    @property
    def delegate(self) -> PrintStream:
        return self._delegate

    def write_one(self, unit: int):
        self._delegate.write_one(unit)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._delegate.write(data, offset, length)

    def print(self, value):
        self._delegate.print(value)

    def println(self, *value):
        self._delegate.println(*value)

    def printf(self, fmt: str, *args):
        self._delegate.printf(fmt, *args)
        return self

    format = printf

    def append(self, data, start: int = 0, end: Optional[int] = None):
        self._delegate.append(data, start, end)
        return self

    def flush(self):
        self._delegate.flush()

    def close(self):
        if self._mark_closed():
            self._delegate.close()

    def check_error(self) -> bool:
        return self._delegate.check_error()
