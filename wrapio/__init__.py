import logging

import wrapio.version as version

from wrapio.adapters import (
    ByteArrayInputStream,
    ByteArrayOutputStream,
    FileInputStream,
    FileOutputStream,
    FileReader,
    FileWriter,
    InputStreamIO,
    OutputStreamIO,
    StringReader,
    StringWriter,
)
from wrapio.base import InputStream, OutputStream, Reader, Writer, transfer
from wrapio.bounded import (
    BoundedInputStream,
    BoundedOutputStream,
    BoundedReader,
    BoundedWriter,
)
from wrapio.buffers import CharBuffer
from wrapio.config import config_context, get_config, set_config
from wrapio.delegating import (
    DelegatingInputStream,
    DelegatingOutputStream,
    DelegatingPrintStream,
    DelegatingReader,
    DelegatingWriter,
)
from wrapio.exceptions import (
    BrokenResourceError,
    BufferFullError,
    IllegalStateError,
    InvalidArgumentError,
    OutOfSpaceError,
    StreamIOError,
    UnsupportedOperationError,
    WrapioError,
)
from wrapio.printing import PrintStream
from wrapio.pushback import PushbackInputStream, PushbackReader
from wrapio.sentinels import (
    BrokenInputStream,
    BrokenOutputStream,
    BrokenReader,
    BrokenWriter,
    NullInputStream,
    NullOutputStream,
    NullPrintStream,
    NullReader,
    NullWriter,
)
from wrapio.tee import TeeOutputStream, TeePrintStream, TeeWriter

__version__ = "%d.%d.%d" % (version.major, version.minor, version.micro)

logging.getLogger(__name__).addHandler(logging.NullHandler())
