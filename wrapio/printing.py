import logging
import os
from typing import Optional

from wrapio.base import ClosedGuard, OutputStream, check_bounds
from wrapio.config import get_config
from wrapio.exceptions import IllegalStateError, InvalidArgumentError

logger = logging.getLogger(__name__)

_NOTHING = object()

# Failures a print stream records instead of raising.
TROUBLE = (OSError, IllegalStateError)


class PrintStream(ClosedGuard, OutputStream):
    """Prints text representations of values to a byte stream.

    A print stream never raises I/O errors. Failures of the underlying stream,
    and any use after close, set an error flag that :meth:`check_error`
    reports. Argument errors are still raised.
    """

    _kind = "Print stream"

    def __init__(
        self, out: OutputStream, encoding: Optional[str] = None, auto_flush: bool = False
    ):
        if out is None:
            raise InvalidArgumentError("output stream cannot be None")
        self._out = out
        self.encoding = encoding or get_config("print_encoding")
        self.auto_flush = auto_flush
        self._error = False

    def _set_error(self, error: Exception):
        logger.debug("%s swallowed %r", self.__class__.__name__, error)
        self._error = True

    def write_one(self, unit: int):
        try:
            self._ensure_open()
            self._out.write_one(unit)
        except TROUBLE as error:
            self._set_error(error)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        length = check_bounds(data, offset, length)
        try:
            self._ensure_open()
            self._out.write(data, offset, length)
        except TROUBLE as error:
            self._set_error(error)

    def _write_text(self, text: str, newline: bool = False):
        data = text.encode(self.encoding)
        try:
            self._ensure_open()
            self._out.write(data)
            if newline and self.auto_flush:
                self._out.flush()
        except TROUBLE as error:
            self._set_error(error)

    def print(self, value):
        self._write_text(str(value))

    def println(self, value=_NOTHING):
        text = "" if value is _NOTHING else str(value)
        self._write_text(text + os.linesep, newline=True)

    def printf(self, fmt: str, *args):
        """Print ``fmt % args`` and return this stream."""
        if fmt is None:
            raise InvalidArgumentError("format cannot be None")
        self._write_text(fmt % args if args else fmt)
        return self

    format = printf

    def append(self, data, start: int = 0, end: Optional[int] = None):
        text = "None" if data is None else str(data)
        if end is None:
            end = len(text)
        if start < 0 or end < start or end > len(text):
            raise InvalidArgumentError("start and end must select a slice of data")
        self._write_text(text[start:end])
        return self

    def flush(self):
        try:
            self._ensure_open()
            self._out.flush()
        except TROUBLE as error:
            self._set_error(error)

    def close(self):
        if not self._mark_closed():
            return
        try:
            self._out.close()
        except TROUBLE as error:
            self._set_error(error)

    def check_error(self) -> bool:
        """Flush if still open and report whether any error has been recorded."""
        if not self._closed:
            self.flush()
        return self._error
