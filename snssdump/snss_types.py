"""SNSS opcode constants, field layouts and command structures."""

from dataclasses import dataclass
from typing import ClassVar

SNSS_MAGIC = b'SNSS'

# Record opcodes (first byte of every record body)
OPCODE_UPDATE_TAB_NAVIGATION = 1
OPCODE_SELECTED_NAVIGATION_IN_TAB = 4
OPCODE_WINDOW = 9
OPCODE_ADD_TAB_EXTRA_DATA = 14
OPCODE_MARKER = 255

OPCODE_NAMES = {
    OPCODE_UPDATE_TAB_NAVIGATION: 'update-tab-navigation',
    OPCODE_SELECTED_NAVIGATION_IN_TAB: 'selected-navigation-in-tab',
    OPCODE_WINDOW: 'window',
    OPCODE_ADD_TAB_EXTRA_DATA: 'add-tab-extra-data',
    OPCODE_MARKER: 'marker',
}

# Field kinds understood by the record readers
KIND_I32 = 'i32'
KIND_I64 = 'i64'
KIND_STRING = 'string'

# Field layout of each record body after the opcode byte, in file order.
# Opcodes without an entry carry no fields.
FIELD_LAYOUTS = {
    OPCODE_UPDATE_TAB_NAVIGATION: (
        ('window_id', KIND_I32),
        ('tab_id', KIND_I32),
        ('index', KIND_I32),
        ('virtual_url', KIND_STRING),
    ),
    OPCODE_SELECTED_NAVIGATION_IN_TAB: (
        ('tab_id', KIND_I32),
        ('index', KIND_I32),
        ('timestamp', KIND_I64),
    ),
    OPCODE_WINDOW: (
        ('window_id', KIND_I64),
        ('selected_tab_index', KIND_I32),
        ('num_tabs', KIND_I32),
        ('timestamp', KIND_I64),
        ('bounds_x', KIND_I32),
        ('bounds_y', KIND_I32),
        ('bounds_width', KIND_I32),
        ('bounds_height', KIND_I32),
        ('show_state', KIND_I32),
        ('workspace', KIND_STRING),
        ('type', KIND_I32),
    ),
}


@dataclass
class SnssHeader:
    magic: bytes
    version: int


@dataclass
class SelectedNavigationInTab:
    name: ClassVar[str] = 'SelectedNavigationInTab'
    index: int


@dataclass
class UpdateTabNavigation:
    name: ClassVar[str] = 'UpdateTabNavigation'
    tab_id: int
    index: int
    url: str


@dataclass
class Window:
    """Window metadata record. Its fields are read but not kept."""
    name: ClassVar[str] = 'Window'


@dataclass
class AddTabExtraData:
    name: ClassVar[str] = 'AddTabExtraData'


@dataclass
class Marker:
    """Separator between groups of related commands, not a terminator."""
    name: ClassVar[str] = 'Marker'
