"""Persistence of buffered commands as marker files in a directory."""

import re
from pathlib import Path

from .config import (
    COMMAND_BUFFER_DIRPATH,
    COMMAND_BUFFER_FILE_EXTENSION,
    MAX_BUFFER,
    CmdType,
)
from .entry import CommandBufferEntry

_NORMAL_NAME = re.compile(r"(\d+)_(W|E)_(\d+)_(\d+)_(\d+)\.cmdbuf", re.ASCII)
_EMPTY_NAME = re.compile(r"(\d+)_Empty\.cmdbuf", re.ASCII)
_UINT_MASK = 0xFFFFFFFF


class CommandBuffer:
    """Stores commands as empty files whose names encode each command."""

    def __init__(self, dir_path=COMMAND_BUFFER_DIRPATH):
        self.dir_path = Path(dir_path)

    def _directory(self):
        if not self.dir_path.exists():
            self.dir_path.mkdir(parents=True)
        if not self.dir_path.is_dir():
            raise ValueError(f"Invalid directory: {self.dir_path}")
        return self.dir_path

    def _files(self):
        directory = self._directory()
        return sorted(
            path
            for path in directory.iterdir()
            if path.suffix == COMMAND_BUFFER_FILE_EXTENSION
        )

    def _touch(self, name):
        (self._directory() / name).write_bytes(b"")

    def _write_empty_slots(self, first):
        for order in range(first, MAX_BUFFER):
            self._touch(f"{order}_Empty{COMMAND_BUFFER_FILE_EXTENSION}")

    @staticmethod
    def _entry_from_match(match):
        cmd_type = CmdType.WRITE if match[2] == "W" else CmdType.ERASE
        start, end, data = (int(match[i]) & _UINT_MASK for i in (3, 4, 5))
        return CommandBufferEntry(cmd_type, start, end, data)

    def load(self):
        """Return the buffered commands ordered by their slot number."""
        by_order = {}
        for path in self._files():
            match = _NORMAL_NAME.fullmatch(path.name)
            if not match:
                continue
            order = int(match[1])
            if order >= MAX_BUFFER:
                continue
            by_order[order] = self._entry_from_match(match)
        return [by_order[order] for order in sorted(by_order)]

    def write(self, cmds):
        """Replace the buffer contents with cmds, padding with empty slots."""
        self.flush(False)
        for order, cmd in enumerate(cmds):
            self._touch(f"{order}_{cmd}{COMMAND_BUFFER_FILE_EXTENSION}")
        self._write_empty_slots(len(cmds))

    def flush(self, make_empty_files):
        """Remove all slot files, optionally recreating every slot as empty."""
        for path in self._files():
            if _NORMAL_NAME.fullmatch(path.name) or _EMPTY_NAME.fullmatch(path.name):
                path.unlink()
        if make_empty_files:
            self._write_empty_slots(0)