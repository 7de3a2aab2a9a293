"""Binary stream reader for SNSS files.

Wraps a bytes object with an offset pointer, using struct.unpack_from
for reads. Every read checks the remaining length first.
"""

import struct

from .errors import TruncatedDataError, EncodingError


class SnssStream:
    __slots__ = ('data', 'offset')

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset

    def _require(self, count: int):
        available = len(self.data) - self.offset
        if count < 0 or count > available:
            raise TruncatedDataError(count, available, self.offset)

    def _unpack(self, fmt: str, size: int) -> int:
        self._require(size)
        val, = struct.unpack_from(fmt, self.data, self.offset)
        self.offset += size
        return val

    def read_u8(self) -> int:
        self._require(1)
        val = self.data[self.offset]
        self.offset += 1
        return val

    def read_u16_le(self) -> int:
        return self._unpack('<H', 2)

    def read_i32_le(self) -> int:
        return self._unpack('<i', 4)

    def read_i64_le(self) -> int:
        return self._unpack('<q', 8)

    def read_bytes(self, n: int) -> bytes:
        self._require(n)
        end = self.offset + n
        val = self.data[self.offset:end]
        self.offset = end
        return val

    def read_string(self) -> str:
        """Read an i32 byte count followed by that many bytes of UTF-8."""
        size = self.read_i32_le()
        start = self.offset
        raw = self.read_bytes(size)
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError(start, e.reason) from e

    def remaining(self) -> int:
        return len(self.data) - self.offset

    def eof(self) -> bool:
        return self.offset >= len(self.data)
