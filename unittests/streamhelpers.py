"""Recording streams used across the test suites."""

from wrapio import (
    ByteArrayInputStream,
    ByteArrayOutputStream,
    StringReader,
    StringWriter,
)


class _CountsClose(object):
    close_count = 0

    def close(self):
        self.close_count += 1
        super().close()


class _CountsFlush(_CountsClose):
    flush_count = 0

    def flush(self):
        self.flush_count += 1
        super().flush()


class CountingInputStream(_CountsClose, ByteArrayInputStream):
    pass


class CountingReader(_CountsClose, StringReader):
    pass


class CountingOutputStream(_CountsFlush, ByteArrayOutputStream):
    pass


class CountingWriter(_CountsFlush, StringWriter):
    pass
