"""Wrappers duplicating every write to two or more sinks.

Sinks are called in the order they were given. The first sink to fail stops
the fan-out for that call and its exception propagates unchanged.
"""
from typing import Optional

from wrapio.base import ClosedGuard, OutputStream, Writer
from wrapio.exceptions import InvalidArgumentError
from wrapio.printing import PrintStream
from wrapio.sentinels import NullOutputStream


def _collect(first, second, others, what: str) -> tuple:
    sinks = (first, second) + tuple(others)
    for sink in sinks:
        if sink is None:
            raise InvalidArgumentError(f"{what} cannot be None")
    return sinks


class TeeOutputStream(ClosedGuard, OutputStream):
    def __init__(self, first: OutputStream, second: OutputStream, *others: OutputStream):
        self._delegates = _collect(first, second, others, "OutputStream")

    @property
    def delegates(self) -> tuple:
        return self._delegates

    def write_one(self, unit: int):
        self._ensure_open()
        for delegate in self._delegates:
            delegate.write_one(unit)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._ensure_open()
        for delegate in self._delegates:
            delegate.write(data, offset, length)

    def flush(self):
        self._ensure_open()
        for delegate in self._delegates:
            delegate.flush()

    def close(self):
        if self._mark_closed():
            for delegate in self._delegates:
                delegate.close()


class TeeWriter(ClosedGuard, Writer):
    _kind = "Writer"

    def __init__(self, first: Writer, second: Writer, *others: Writer):
        self._delegates = _collect(first, second, others, "Writer")

    @property
    def delegates(self) -> tuple:
        return self._delegates

    def write_one(self, ch: str):
        self._ensure_open()
        for delegate in self._delegates:
            delegate.write_one(ch)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._ensure_open()
        for delegate in self._delegates:
            delegate.write(data, offset, length)

    def append(self, data, start: int = 0, end: Optional[int] = None):
        self._ensure_open()
        for delegate in self._delegates:
            delegate.append(data, start, end)
        return self

    def flush(self):
        self._ensure_open()
        for delegate in self._delegates:
            delegate.flush()

    def close(self):
        if self._mark_closed():
            for delegate in self._delegates:
                delegate.close()


class TeePrintStream(PrintStream):
    """Print stream fanning out to other print streams.

    :meth:`check_error` is true as soon as one of them reports an error.
    """

    def __init__(self, first: PrintStream, second: PrintStream, *others: PrintStream):
        super().__init__(NullOutputStream.get_instance())
        self._delegates = _collect(first, second, others, "PrintStream")

    @property
    def delegates(self) -> tuple:
        return self._delegates

    def write_one(self, unit: int):
        for delegate in self._delegates:
            delegate.write_one(unit)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        for delegate in self._delegates:
            delegate.write(data, offset, length)

    def print(self, value):
        for delegate in self._delegates:
            delegate.print(value)

    def println(self, *value):
        for delegate in self._delegates:
            delegate.println(*value)

    def printf(self, fmt: str, *args):
        for delegate in self._delegates:
            delegate.printf(fmt, *args)
        return self

    format = printf

    def append(self, data, start: int = 0, end: Optional[int] = None):
        for delegate in self._delegates:
            delegate.append(data, start, end)
        return self

    def flush(self):
        for delegate in self._delegates:
            delegate.flush()

    def close(self):
        if self._mark_closed():
            for delegate in self._delegates:
                delegate.close()

    def check_error(self) -> bool:
        return any(delegate.check_error() for delegate in self._delegates)
