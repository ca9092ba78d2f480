"""Output streams handed to builtins.

Builtins write text or bytes; the streams keep everything as UTF-8 bytes
so callers can capture output or forward it to a real file object.
"""

import io
from typing import BinaryIO, Optional, Union


class OutputStream:
    """Writable stream for command output.

    Attributes:
        buffer: Underlying binary file object
    """

    def __init__(self, buffer: Optional[BinaryIO] = None):
        self.buffer = buffer if buffer is not None else io.BytesIO()

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create a stream that captures output in memory."""
        return cls(io.BytesIO())

    def write(self, data: Union[str, bytes]) -> int:
        if isinstance(data, str):
            data = data.encode('utf-8')
        return self.buffer.write(data)

    def flush(self) -> None:
        self.buffer.flush()

    def get_value(self) -> bytes:
        """Get captured bytes (empty if the buffer is not in-memory)."""
        if isinstance(self.buffer, io.BytesIO):
            return self.buffer.getvalue()
        return b''

    def get_text(self) -> str:
        return self.get_value().decode('utf-8', errors='replace')


class ErrorStream(OutputStream):
    """Writable stream for diagnostics."""
    pass
