"""Device geometry, limits and validation of command-line arguments."""

from enum import IntEnum

STORAGE_FILE_NAME = "ssd_nand.txt"
OUTPUT_FILE_NAME = "ssd_output.txt"

MAX_ERASE_SIZE = 10
MAX_DATA_VALUE = 0xFFFFFFFF
MIN_LBA = 0
MAX_LBA = 99
MAX_LBA_CNT = MAX_LBA - MIN_LBA + 1
MAX_STORAGE_IDX = MAX_LBA_CNT

LBA_ERASE_RANGE_LIMIT = 10
INF = 0x3F3F3F3F
NOT_AVAILABLE = INF + 1
MAX_BUFFER = 5
COMMAND_BUFFER_DIRPATH = "./buffer/"
COMMAND_BUFFER_FILE_EXTENSION = ".cmdbuf"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MAX = (1 << 64) - 1
_DEC_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DIGIT_VALUES = "0123456789abcdefghijklmnopqrstuvwxyz"


class CmdType(IntEnum):
    """Kinds of command the device understands."""

    WRITE = 0
    READ = 1
    ERASE = 2
    FLUSH = 3
    INVALID = 4


def cmd_type_string(cmd_type):
    """Return a readable name for buffered command kinds."""
    if cmd_type == CmdType.WRITE:
        return "WRITE"
    if cmd_type == CmdType.ERASE:
        return "ERASE"
    return "NOTHING"


def _stoul(text, base):
    """Parse a leading unsigned integer like strtoul, raising ValueError."""
    rest = text.lstrip(" \t\n\v\f\r")
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if (
        base in (0, 16)
        and rest[:2].lower() == "0x"
        and len(rest) > 2
        and rest[2] in _HEX_DIGITS
    ):
        rest = rest[2:]
        base = 16
    elif base == 0:
        base = 8 if rest.startswith("0") else 10

    digits = []
    for ch in rest:
        value = _DIGIT_VALUES.find(ch.lower()) if len(ch.lower()) == 1 else -1
        if value < 0 or value >= base:
            break
        digits.append(ch)
    if not digits:
        raise ValueError(f"no digits to convert in {text!r}")

    value = int("".join(digits), base)
    if value > _ULONG_MAX:
        raise ValueError(f"value out of range: {text!r}")
    if negative:
        value = (-value) & _ULONG_MAX
    return value


def is_dec(text):
    """True if text is an optional '-' or digit followed by digits only."""
    if not text:
        return False
    if not (text[0] in _DEC_DIGITS or text[0] == "-"):
        return False
    return all(ch in _DEC_DIGITS for ch in text[1:])


def is_hex(text):
    """True if text is '0x' followed by exactly eight hex digits."""
    if len(text) != 10 or not text.startswith("0x"):
        return False
    return all(ch in _HEX_DIGITS for ch in text[2:])


def lba_is_valid(text):
    """True if text names an LBA inside the device."""
    if not text or not is_dec(text):
        return False
    return parse_lba(text) < MAX_LBA_CNT


def parse_lba(text):
    """Convert an LBA argument to an unsigned 32-bit value."""
    return _stoul(text, 0) & _UINT_MASK


def data_is_valid(text):
    """True if text is a well-formed 32-bit hexadecimal data word."""
    if not is_hex(text):
        return False
    return _stoul(text, 16) <= MAX_DATA_VALUE


def parse_data(text):
    """Convert a hexadecimal data argument to an unsigned 32-bit value."""
    return _stoul(text, 16) & _UINT_MASK


def size_is_valid(lba_text, size_text):
    """True if an erase of size_text blocks from lba_text stays in range."""
    if not size_text or not is_dec(size_text):
        return False
    start = parse_size(lba_text)
    size = parse_size(size_text)
    return ((start + size) & _UINT_MASK) <= MAX_LBA_CNT and size <= MAX_ERASE_SIZE


def parse_size(text):
    """Convert an erase size argument to an unsigned 32-bit value."""
    return _stoul(text, 0) & _UINT_MASK