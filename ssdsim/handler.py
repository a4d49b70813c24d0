"""Command buffering in front of the storage: queueing, merging and fast reads."""

from .buffer import CommandBuffer
from .config import (
    LBA_ERASE_RANGE_LIMIT,
    MAX_BUFFER,
    MAX_LBA,
    MIN_LBA,
    CmdType,
)
from .entry import CommandBufferEntry
from .optimizer import optimize

_UINT_MASK = 0xFFFFFFFF


def _erase_bounds(lba, delta):
    """Inclusive LBA range touched by an erase of delta blocks from lba."""
    if delta < 0:
        return lba + delta + 1, lba
    return lba, lba + delta - 1


def _validate_delta(delta):
    if delta == 0:
        raise ValueError("At add_erase(lba, delta), 'delta' must not be 0.")
    if abs(delta) > LBA_ERASE_RANGE_LIMIT:
        raise ValueError(
            f"Erase range must be less than or equal to {LBA_ERASE_RANGE_LIMIT}"
        )


def _validate_range(start_lba, end_lba):
    if not MIN_LBA <= start_lba <= MAX_LBA:
        raise ValueError(f"invalid startLba: {start_lba}")
    if not MIN_LBA <= end_lba <= MAX_LBA:
        raise ValueError(f"invalid endLba: {end_lba}")
    size = end_lba - start_lba + 1
    if size > LBA_ERASE_RANGE_LIMIT:
        raise ValueError(f"invalid lbaRangeSize: {size}")


class CommandBufferHandler:
    """Queues writes and erases, handing back commands that must reach storage."""

    def __init__(self, buffer=None):
        self.buffer = buffer if buffer is not None else CommandBuffer()

    def _add(self, new_cmd):
        saved = self.buffer.load()
        self.buffer.flush(False)
        if len(saved) >= MAX_BUFFER:
            self.buffer.write([new_cmd])
            return saved
        saved.append(new_cmd)
        self.buffer.write(optimize(saved))
        return []

    def add_write(self, lba, data):
        """Queue a write; return the evicted commands if the buffer was full."""
        entry = CommandBufferEntry(CmdType.WRITE, lba, lba, data & _UINT_MASK)
        return self._add(entry)

    def add_erase(self, lba, delta):
        """Queue an erase of |delta| blocks starting at lba (backwards if negative)."""
        _validate_delta(delta)
        start_lba, end_lba = _erase_bounds(lba, delta)
        _validate_range(start_lba, end_lba)
        return self._add(CommandBufferEntry(CmdType.ERASE, start_lba, end_lba, 0))

    def try_fast_read(self, lba):
        """Return the buffered value for lba, or None if no command covers it."""
        for cmd in reversed(self.buffer.load()):
            if cmd.start_lba <= lba <= cmd.end_lba:
                return cmd.data & _UINT_MASK
        return None

    def flush(self):
        """Empty the buffer and return the commands it held."""
        saved = self.buffer.load()
        self.buffer.flush(True)
        return saved

    def is_full(self):
        """True if no more commands fit in the buffer."""
        return len(self.buffer.load()) >= MAX_BUFFER