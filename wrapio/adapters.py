"""Bridges between Python file objects and wrapio streams.

``File*`` classes turn a file object into a wrapio stream so the wrappers can
sit on top of it; :class:`InputStreamIO` and :class:`OutputStreamIO` go the
other way and present any wrapio stream as an ``io.RawIOBase``. The
``ByteArray*`` and ``String*`` classes are in-memory streams.
"""
import io
import os
from typing import BinaryIO, List, Optional, TextIO

from wrapio.base import InputStream, OutputStream, Reader, Writer, check_bounds
from wrapio.exceptions import InvalidArgumentError, UnsupportedOperationError


def _require(fileobj):
    if fileobj is None:
        raise InvalidArgumentError("file object cannot be None")
    return fileobj


class _FileSource(object):
    def __init__(self, fileobj):
        self.fileobj = _require(fileobj)
        self._mark = fileobj.tell() if fileobj.seekable() else None

    def _remaining(self) -> int:
        current = self.fileobj.tell()
        end = self.fileobj.seek(0, os.SEEK_END)
        self.fileobj.seek(current)
        return end - current

    def skip(self, count: int) -> int:
        if count <= 0:
            return 0
        if not self.fileobj.seekable():
            return super().skip(count)
        skipped = min(count, self._remaining())
        self.fileobj.seek(self.fileobj.tell() + skipped)
        return skipped

    def mark(self, read_limit: int):
        if self.fileobj.seekable():
            self._mark = self.fileobj.tell()

    def reset(self):
        if not self.fileobj.seekable():
            raise UnsupportedOperationError("reset() not supported")
        self.fileobj.seek(self._mark)

    def mark_supported(self) -> bool:
        return self.fileobj.seekable()

    def close(self):
        self.fileobj.close()


class FileInputStream(_FileSource, InputStream):
    """Reads bytes from a binary file object.

    ``available``, ``skip`` and mark/reset use seeking when the file supports it.
    """

    def __init__(self, fileobj: BinaryIO):
        super().__init__(fileobj)

    def read(self) -> Optional[int]:
        data = self.fileobj.read(1)
        return data[0] if data else None

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        length = check_bounds(buffer, offset, length)
        if length == 0:
            return 0
        data = self.fileobj.read(length)
        if not data:
            return None
        buffer[offset:offset + len(data)] = data
        return len(data)

    def available(self) -> int:
        return self._remaining() if self.fileobj.seekable() else 0


class FileReader(_FileSource, Reader):
    """Reads characters from a text file object."""

    def __init__(self, fileobj: TextIO):
        super().__init__(fileobj)

    def _remaining(self) -> int:
        # Text positions are opaque cookies, so only emptiness can be told.
        current = self.fileobj.tell()
        more = bool(self.fileobj.read(1))
        self.fileobj.seek(current)
        return int(more)

    def skip(self, count: int) -> int:
        if count <= 0:
            return 0
        return Reader.skip(self, count)

    def read(self) -> Optional[str]:
        return self.fileobj.read(1) or None

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        length = check_bounds(buffer, offset, length)
        if length == 0:
            return 0
        data = self.fileobj.read(length)
        if not data:
            return None
        buffer[offset:offset + len(data)] = list(data)
        return len(data)

    def ready(self) -> bool:
        return self.fileobj.seekable() and self._remaining() > 0


class FileOutputStream(OutputStream):
    """Writes bytes to a binary file object."""

    def __init__(self, fileobj: BinaryIO):
        self.fileobj = _require(fileobj)

    def write_one(self, unit: int):
        self.fileobj.write(bytes((unit & 0xFF,)))

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        length = check_bounds(data, offset, length, "data")
        if length:
            self.fileobj.write(bytes(unit & 0xFF for unit in data[offset:offset + length]))

    def flush(self):
        self.fileobj.flush()

    def close(self):
        self.fileobj.close()


class FileWriter(Writer):
    """Writes characters to a text file object."""

    def __init__(self, fileobj: TextIO):
        self.fileobj = _require(fileobj)

    def write_one(self, ch: str):
        self.fileobj.write(ch)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        length = check_bounds(data, offset, length, "data")
        if length:
            self.fileobj.write("".join(data[offset:offset + length]))

    def flush(self):
        self.fileobj.flush()

    def close(self):
        self.fileobj.close()


class _MemorySource(object):
    def __init__(self, data):
        if data is None:
            raise InvalidArgumentError("data cannot be None")
        self._data = data
        self._position = 0
        self._mark = 0

    def read(self):
        if self._position >= len(self._data):
            return None
        unit = self._data[self._position]
        self._position += 1
        return unit

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        length = check_bounds(buffer, offset, length)
        if length == 0:
            return 0
        count = min(length, len(self._data) - self._position)
        if count <= 0:
            return None
        start = self._position
        buffer[offset:offset + count] = self._convert(self._data[start:start + count])
        self._position += count
        return count

    def skip(self, count: int) -> int:
        skipped = max(min(count, len(self._data) - self._position), 0)
        self._position += skipped
        return skipped

    def mark(self, read_limit: int):
        self._mark = self._position

    def reset(self):
        self._position = self._mark

    def mark_supported(self) -> bool:
        return True


class ByteArrayInputStream(_MemorySource, InputStream):
    """Reads from an in-memory bytes object."""

    def __init__(self, data: bytes = b""):
        super().__init__(None if data is None else bytes(data))

    def _convert(self, chunk):
        return chunk

    def available(self) -> int:
        return len(self._data) - self._position


class StringReader(_MemorySource, Reader):
    """Reads from an in-memory string."""

    def __init__(self, text: str = ""):
        super().__init__(text)

    def _convert(self, chunk):
        return list(chunk)

    def ready(self) -> bool:
        return True


class ByteArrayOutputStream(OutputStream):
    """Collects written bytes in memory."""

    def __init__(self):
        self._data = bytearray()

    def write_one(self, unit: int):
        self._data.append(unit & 0xFF)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        length = check_bounds(data, offset, length, "data")
        self._data += bytes(unit & 0xFF for unit in data[offset:offset + length])

    def getvalue(self) -> bytes:
        return bytes(self._data)

    def __len__(self):
        return len(self._data)


class StringWriter(Writer):
    """Collects written characters in memory."""

    def __init__(self):
        self._parts: List[str] = []

    def write_one(self, ch: str):
        self._parts.append(ch)

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        length = check_bounds(data, offset, length, "data")
        self._parts.append("".join(data[offset:offset + length]))

    def getvalue(self) -> str:
        return "".join(self._parts)


class InputStreamIO(io.RawIOBase):
    """Presents an :class:`~wrapio.base.InputStream` as a readable raw file object.

    Closing the file object closes the stream.
    """

    stream = None

    def __init__(self, stream: InputStream):
        super().__init__()
        if stream is None:
            raise InvalidArgumentError("stream cannot be None")
        self.stream = stream

    def readable(self):
        return True

    def readinto(self, b):
        count = self.stream.read_into(memoryview(b).cast("B"))
        return count or 0

    def close(self):
        if not self.closed:
            try:
                super().close()
            finally:
                if self.stream is not None:
                    self.stream.close()


class OutputStreamIO(io.RawIOBase):
    """Presents an :class:`~wrapio.base.OutputStream` as a writable raw file object.

    Closing the file object closes the stream.
    """

    stream = None

    def __init__(self, stream: OutputStream):
        super().__init__()
        if stream is None:
            raise InvalidArgumentError("stream cannot be None")
        self.stream = stream

    def writable(self):
        return True

    def write(self, b):
        data = bytes(b)
        self.stream.write(data)
        return len(data)

    def flush(self):
        if not self.closed and self.stream is not None:
            self.stream.flush()

    def close(self):
        if not self.closed:
            try:
                super().close()
            finally:
                if self.stream is not None:
                    self.stream.close()
