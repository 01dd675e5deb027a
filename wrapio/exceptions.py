import io


class WrapioError(Exception):
    pass


class InvalidArgumentError(WrapioError, ValueError):
    pass


class IllegalStateError(WrapioError, ValueError):
    pass


class StreamIOError(WrapioError, OSError):
    pass


class OutOfSpaceError(StreamIOError):
    pass


class BufferFullError(StreamIOError):
    pass


class BrokenResourceError(StreamIOError):
    pass


class UnsupportedOperationError(WrapioError, io.UnsupportedOperation):
    pass
