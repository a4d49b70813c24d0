"""Turning command-line tokens into command parameters."""

from dataclasses import dataclass
from typing import Callable, ClassVar, NamedTuple

from .config import (
    CmdType,
    data_is_valid,
    lba_is_valid,
    parse_data,
    parse_lba,
    parse_size,
    size_is_valid,
)


@dataclass(frozen=True)
class WriteParam:
    """Write data to one LBA."""

    lba: int
    data: int
    cmd_type: ClassVar[CmdType] = CmdType.WRITE


@dataclass(frozen=True)
class ReadParam:
    """Read one LBA."""

    lba: int
    cmd_type: ClassVar[CmdType] = CmdType.READ


@dataclass(frozen=True)
class EraseParam:
    """Erase size LBAs starting at lba."""

    lba: int
    size: int
    cmd_type: ClassVar[CmdType] = CmdType.ERASE


@dataclass(frozen=True)
class FlushParam:
    """Flush the command buffer to storage."""

    cmd_type: ClassVar[CmdType] = CmdType.FLUSH


@dataclass(frozen=True)
class InvalidParam:
    """A command line that could not be understood."""

    cmd_type: ClassVar[CmdType] = CmdType.INVALID


class _Spec(NamedTuple):
    arg_count: int
    validate: Callable
    build: Callable


_SPECS = {
    "W": _Spec(
        3,
        lambda t: lba_is_valid(t[1]) and data_is_valid(t[2]),
        lambda t: WriteParam(parse_lba(t[1]), parse_data(t[2])),
    ),
    "R": _Spec(
        2,
        lambda t: lba_is_valid(t[1]),
        lambda t: ReadParam(parse_lba(t[1])),
    ),
    "E": _Spec(
        3,
        lambda t: lba_is_valid(t[1]) and size_is_valid(t[1], t[2]),
        lambda t: EraseParam(parse_lba(t[1]), parse_size(t[2])),
    ),
    "F": _Spec(1, lambda t: True, lambda t: FlushParam()),
}


def parse(tokens):
    """Return the parameters for tokens, or InvalidParam if they are malformed."""
    tokens = list(tokens)
    if not tokens:
        return InvalidParam()
    spec = _SPECS.get(tokens[0])
    if spec is None or len(tokens) != spec.arg_count or not spec.validate(tokens):
        return InvalidParam()
    return spec.build(tokens)