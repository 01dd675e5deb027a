"""Stateless stand-in streams.

Null streams are empty on read and discard writes. Broken streams fail every
operation, ``close`` included, with one error instance created up front.
Each class has exactly one instance, returned by ``get_instance()``, which is
safe to share between threads.
"""
from typing import Optional

from wrapio.base import InputStream, OutputStream, Reader, Writer
from wrapio.exceptions import BrokenResourceError
from wrapio.printing import PrintStream


class _Singleton(object):
    _instance = None

    @classmethod
    def get_instance(cls):
        return cls._instance


class NullInputStream(_Singleton, InputStream):
    def read(self) -> Optional[int]:
        return None

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        return None

    def skip(self, count: int) -> int:
        return 0

    def available(self) -> int:
        return 0

    def mark(self, read_limit: int):
        pass

    def reset(self):
        pass

    def mark_supported(self) -> bool:
        return False

    def close(self):
        pass


class NullReader(_Singleton, Reader):
    def read(self) -> Optional[str]:
        return None

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None) -> Optional[int]:
        return None

    def read_buffer(self, target) -> Optional[int]:
        return None

    def skip(self, count: int) -> int:
        return 0

    def ready(self) -> bool:
        return False

    def mark(self, read_limit: int):
        pass

    def reset(self):
        pass

    def mark_supported(self) -> bool:
        return False

    def close(self):
        pass


class NullOutputStream(_Singleton, OutputStream):
    def write_one(self, unit: int):
        pass

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        pass

    def flush(self):
        pass

    def close(self):
        pass


class NullWriter(_Singleton, Writer):
    def write_one(self, ch: str):
        pass

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        pass

    def append(self, data, start: int = 0, end: Optional[int] = None):
        return self

    def flush(self):
        pass

    def close(self):
        pass


class NullPrintStream(_Singleton, PrintStream):
    def __init__(self):
        super().__init__(NullOutputStream.get_instance())

    def write_one(self, unit: int):
        pass

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        pass

    def print(self, value):
        pass

    def println(self, *value):
        pass

    def printf(self, fmt: str, *args):
        return self

    format = printf

    def append(self, data, start: int = 0, end: Optional[int] = None):
        return self

    def flush(self):
        pass

    def close(self):
        pass

    def check_error(self) -> bool:
        return False


class _Broken(_Singleton):
    _description = "Broken stream"

    def __init__(self):
        self._error = BrokenResourceError(self._description)

    @property
    def error(self) -> BrokenResourceError:
        return self._error

    def _fail(self):
        error = self._error
        error.__context__ = None
        error.__cause__ = None
        raise error.with_traceback(None)

    def flush(self):
        self._fail()

    def close(self):
        self._fail()


class _BrokenSource(_Broken):
    def read(self):
        self._fail()

    def read_into(self, buffer, offset: int = 0, length: Optional[int] = None):
        self._fail()

    def skip(self, count: int):
        self._fail()

    def mark(self, read_limit: int):
        self._fail()

    def reset(self):
        self._fail()

    def mark_supported(self):
        self._fail()


class BrokenInputStream(_BrokenSource, InputStream):
    _description = "Broken input stream"

    def available(self):
        self._fail()


class BrokenReader(_BrokenSource, Reader):
    _description = "Broken reader"

    def read_buffer(self, target):
        self._fail()

    def ready(self):
        self._fail()


class BrokenOutputStream(_Broken, OutputStream):
    _description = "Broken output stream"

    def write_one(self, unit: int):
        self._fail()

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._fail()


class BrokenWriter(_Broken, Writer):
    _description = "Broken writer"

    def write_one(self, ch: str):
        self._fail()

    def write(self, data, offset: int = 0, length: Optional[int] = None):
        self._fail()

    def append(self, data, start: int = 0, end: Optional[int] = None):
        self._fail()


for _cls in (
    NullInputStream,
    NullReader,
    NullOutputStream,
    NullWriter,
    NullPrintStream,
    BrokenInputStream,
    BrokenReader,
    BrokenOutputStream,
    BrokenWriter,
):
    _cls._instance = _cls()
del _cls
