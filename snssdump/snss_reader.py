"""Main SNSS parser with opcode dispatch table.

A session file is an 8-byte header followed by length-prefixed records.
Each record body starts with an opcode byte selecting its field layout.
"""

import logging

from .stream import SnssStream
from .errors import FormatError, UnsupportedOpcode, MalformedRecord
from .snss_types import (
    SNSS_MAGIC, OPCODE_UPDATE_TAB_NAVIGATION, OPCODE_SELECTED_NAVIGATION_IN_TAB,
    OPCODE_WINDOW, OPCODE_ADD_TAB_EXTRA_DATA, OPCODE_MARKER, OPCODE_NAMES,
    FIELD_LAYOUTS, KIND_I32, KIND_I64, KIND_STRING,
    SnssHeader, SelectedNavigationInTab, UpdateTabNavigation, Window,
    AddTabExtraData, Marker,
)

logger = logging.getLogger(__name__)

# Dispatch table: opcode -> reader function
_readers = {}

_field_readers = {
    KIND_I32: SnssStream.read_i32_le,
    KIND_I64: SnssStream.read_i64_le,
    KIND_STRING: SnssStream.read_string,
}


def register_reader(opcode):
    """Decorator to register a reader function for a record opcode."""
    def decorator(func):
        _readers[opcode] = func
        return func
    return decorator


def _format_fields(fields: dict) -> str:
    return '; '.join(f"{k}={v!r}" for k, v in fields.items())


def read_fields(stream: SnssStream, opcode: int) -> dict:
    """Read the fields of a record body following its FIELD_LAYOUTS entry."""
    fields = {}
    for field_name, kind in FIELD_LAYOUTS.get(opcode, ()):
        fields[field_name] = _field_readers[kind](stream)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s(%s)", OPCODE_NAMES[opcode], _format_fields(fields))
    return fields


# ========== Record readers ==========

@register_reader(OPCODE_UPDATE_TAB_NAVIGATION)
def read_update_tab_navigation(stream):
    fields = read_fields(stream, OPCODE_UPDATE_TAB_NAVIGATION)
    return UpdateTabNavigation(
        tab_id=fields['tab_id'],
        index=fields['index'],
        url=fields['virtual_url'],
    )


@register_reader(OPCODE_SELECTED_NAVIGATION_IN_TAB)
def read_selected_navigation_in_tab(stream):
    fields = read_fields(stream, OPCODE_SELECTED_NAVIGATION_IN_TAB)
    return SelectedNavigationInTab(index=fields['index'])


@register_reader(OPCODE_WINDOW)
def read_window(stream):
    # Read to stay positioned; window geometry is not kept
    read_fields(stream, OPCODE_WINDOW)
    return Window()


@register_reader(OPCODE_ADD_TAB_EXTRA_DATA)
def read_add_tab_extra_data(stream):
    return AddTabExtraData()


@register_reader(OPCODE_MARKER)
def read_marker(stream):
    return Marker()


# ========== Framing ==========

def read_header(stream: SnssStream) -> SnssHeader:
    """Read and validate the 8-byte file header."""
    signature = stream.read_bytes(4)
    logger.debug("signature=%r", signature)
    if signature != SNSS_MAGIC:
        raise FormatError(signature)
    version = stream.read_i32_le()
    logger.debug("version=%d", version)
    return SnssHeader(magic=signature, version=version)


def read_record(stream: SnssStream):
    """Read one length-prefixed record.

    Returns a stream over exactly the record body, or None when the
    input ends cleanly before the next length field. A partial length
    field or a short body raises TruncatedDataError.
    """
    if stream.eof():
        return None
    length = stream.read_u16_le()
    return SnssStream(stream.read_bytes(length))


def read_command(body: SnssStream, strict: bool = False):
    """Decode a record body into a command."""
    opcode = body.read_u8()
    logger.debug("opcode=%d", opcode)
    reader = _readers.get(opcode)
    if reader is None:
        raise UnsupportedOpcode(opcode)
    command = reader(body)

    left = body.remaining()
    if left:
        if strict:
            raise MalformedRecord(opcode, len(body.data), body.offset)
        logger.debug("%d trailing bytes ignored in %s record",
                     left, OPCODE_NAMES[opcode])
    return command


# ========== Top-level readers ==========

def parse_with_header(buffer: bytes, strict: bool = False):
    """Parse a complete session buffer.

    Returns (header, commands). Any error aborts the parse.
    """
    stream = SnssStream(bytes(buffer), 0)
    header = read_header(stream)

    commands = []
    while True:
        body = read_record(stream)
        if body is None:
            break
        commands.append(read_command(body, strict=strict))

    logger.debug("decoded %d commands", len(commands))
    return header, commands


def parse(buffer: bytes, strict: bool = False) -> list:
    """Parse a session buffer into its ordered list of commands."""
    return parse_with_header(buffer, strict=strict)[1]


def read_snss(filename: str, strict: bool = False):
    """Read and parse an SNSS file.

    Returns (header, commands).
    """
    logger.debug("reading file: %s", filename)
    with open(filename, 'rb') as f:
        data = f.read()
    logger.debug("read %d bytes from file", len(data))
    return parse_with_header(data, strict=strict)
