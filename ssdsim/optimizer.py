"""Rewriting of buffered commands into an equivalent shorter list."""

from itertools import permutations

from .config import LBA_ERASE_RANGE_LIMIT, CmdType
from .entry import CommandBufferEntry

_ORDER_MASK = 1 << 32
_REAL_DATA_MASK = _ORDER_MASK - 1
_ULL_MASK = (1 << 64) - 1
_MAX_RANGE_SIZE = LBA_ERASE_RANGE_LIMIT


def _as_int32(value):
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _cover(order, lbas_by_data):
    """Lay out intervals writing each data value in the given order."""
    covered = set()
    intervals = []
    for data in order:
        lbas = lbas_by_data.get(data)
        if not lbas:
            continue
        low, high = min(lbas), max(lbas)
        start = None
        end = low
        for lba in range(low, high + 1):
            if lba in lbas:
                if start is None:
                    start = lba
                end = lba
                if _as_int32(data) >= 0:
                    covered.add(lba)
            elif lba in covered:
                # A value placed earlier in this order will overwrite it.
                end = lba
            else:
                if start is not None:
                    intervals.append((start, end, data))
                start = None
        if start is not None:
            intervals.append((start, end, data))
    return intervals


def _trim(interval, final_state):
    start, end, data = interval
    first = next(
        (lba for lba in range(start, end + 1) if final_state.get(lba) == data),
        end + 1,
    )
    last = next(
        (lba for lba in range(end, first - 1, -1) if final_state.get(lba) == data),
        end if first > end else first - 1,
    )
    return first, last, data


def _split(start, end, data):
    data &= _REAL_DATA_MASK
    cmd_type = CmdType.ERASE if data == 0 else CmdType.WRITE
    while end - start + 1 > 0:
        chunk_end = min(start + _MAX_RANGE_SIZE - 1, end)
        yield CommandBufferEntry(cmd_type, start, chunk_end, data)
        start = chunk_end + 1


def optimize(cmds):
    """Return the shortest found command list with the same end state as cmds."""
    tagged = []
    order_mask = _ORDER_MASK
    for cmd in cmds:
        data = cmd.data
        if data != 0 and cmd.cmd_type == CmdType.WRITE:
            # Tag each write so equal values written at different times stay apart.
            data = (data | order_mask) & _ULL_MASK
            order_mask = ((order_mask << 1) | order_mask) & _ULL_MASK
        tagged.append((cmd.start_lba, cmd.end_lba, data))

    final_state = {}
    for start, end, data in tagged:
        for lba in range(start, end + 1):
            final_state[lba] = data

    lbas_by_data = {}
    for lba, data in final_state.items():
        lbas_by_data.setdefault(data, set()).add(lba)

    values = sorted({data for _, _, data in tagged})

    best = None
    for order in permutations(values):
        trimmed = (_trim(iv, final_state) for iv in _cover(order, lbas_by_data))
        result = [entry for iv in trimmed for entry in _split(*iv)]
        if best is None or len(result) < len(best):
            best = result[::-1]
    return best