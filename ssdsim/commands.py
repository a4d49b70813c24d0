"""Executable device commands and the factory that selects them."""

from abc import ABC, abstractmethod

from .config import MAX_ERASE_SIZE, MAX_STORAGE_IDX, CmdType
from .parser import EraseParam, FlushParam, ReadParam, WriteParam


class Command(ABC):
    """A device command working on the storage and the command buffer."""

    def __init__(self, storage, handler):
        self.storage = storage
        self.handler = handler

    @abstractmethod
    def execute(self, param):
        """Run the command; return False if its preconditions do not hold."""

    def check_precondition(self, param):
        """True if the command has what it needs to run."""
        return self.storage is not None and self.handler is not None

    def _apply(self, entries):
        """Write buffered entries through to storage and persist it."""
        for entry in entries:
            for lba in range(entry.start_lba, entry.end_lba + 1):
                self.storage.set(lba, entry.data)
        self.storage.store()


class WriteCommand(Command):
    """Queue a write, pushing evicted commands to storage."""

    def execute(self, param):
        if not self.check_precondition(param):
            return False
        evicted = self.handler.add_write(param.lba, param.data)
        if evicted:
            self._apply(evicted)
        return True

    def check_precondition(self, param):
        return (
            super().check_precondition(param)
            and isinstance(param, WriteParam)
            and param.lba < MAX_STORAGE_IDX
        )


class ReadCommand(Command):
    """Read one LBA, preferring the buffered value, into the output file."""

    def execute(self, param):
        if not self.check_precondition(param):
            return False
        buffered = self.handler.try_fast_read(param.lba)
        if buffered is not None:
            self.storage.set(param.lba, buffered)
        self.storage.store_output(self.storage.get(param.lba))
        return True

    def check_precondition(self, param):
        return (
            super().check_precondition(param)
            and isinstance(param, ReadParam)
            and param.lba < MAX_STORAGE_IDX
        )


class EraseCommand(Command):
    """Queue an erase, pushing evicted commands to storage."""

    def execute(self, param):
        if not self.check_precondition(param):
            return False
        evicted = self.handler.add_erase(param.lba, param.size)
        if evicted:
            self._apply(evicted)
        return True

    def check_precondition(self, param):
        return (
            super().check_precondition(param)
            and isinstance(param, EraseParam)
            and param.lba < MAX_STORAGE_IDX
            and param.size <= MAX_ERASE_SIZE
            and param.lba + param.size <= MAX_STORAGE_IDX
        )


class FlushCommand(Command):
    """Write every buffered command to storage and empty the buffer."""

    def execute(self, param):
        if not self.check_precondition(param):
            return False
        self._apply(self.handler.flush())
        return True

    def check_precondition(self, param):
        return super().check_precondition(param)


_COMMANDS = {
    CmdType.WRITE: WriteCommand,
    CmdType.READ: ReadCommand,
    CmdType.ERASE: EraseCommand,
    CmdType.FLUSH: FlushCommand,
}


class CommandFactory:
    """Creates the command that handles a given command kind."""

    def __init__(self, storage, handler):
        self.storage = storage
        self.handler = handler

    def get_command(self, cmd_type):
        """Return a new command for cmd_type, or None if there is none."""
        command_class = _COMMANDS.get(cmd_type)
        if command_class is None:
            return None
        return command_class(self.storage, self.handler)