"""Exceptions raised while decoding SNSS session files.

Every error aborts the whole parse. They all derive from ValueError so
callers that only care about "bad input" can catch that.
"""


class SnssError(ValueError):
    """Base class for all decoding failures."""


class FormatError(SnssError):
    """The file header does not carry the SNSS signature."""

    def __init__(self, signature: bytes):
        self.signature = signature
        super().__init__(f"Not an SNSS file (bad signature {signature!r})")


class TruncatedDataError(SnssError):
    """Fewer bytes remain than a read or a declared record length requires."""

    def __init__(self, needed: int, available: int, offset: int):
        self.needed = needed
        self.available = available
        self.offset = offset
        super().__init__(
            f"Insufficient bytes: need {needed}, have {available} "
            f"at offset 0x{offset:x}"
        )


class EncodingError(SnssError):
    """A length-prefixed string is not valid UTF-8."""

    def __init__(self, offset: int, reason: str):
        self.offset = offset
        super().__init__(f"Invalid UTF-8 string at offset 0x{offset:x}: {reason}")


class UnsupportedOpcode(SnssError):
    """A record body starts with an opcode that has no reader."""

    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"No reader for opcode {opcode}")


class MalformedRecord(SnssError):
    """A record body was not consumed exactly (strict mode only)."""

    def __init__(self, opcode: int, length: int, consumed: int):
        self.opcode = opcode
        self.length = length
        self.consumed = consumed
        super().__init__(
            f"Record with opcode {opcode} declares {length} bytes "
            f"but {consumed} were decoded"
        )
