"""A single buffered write or erase command."""

from dataclasses import dataclass

from .config import CmdType, cmd_type_string


@dataclass
class CommandBufferEntry:
    """A buffered command covering the inclusive range start_lba..end_lba."""

    cmd_type: CmdType
    start_lba: int
    end_lba: int
    data: int

    def __post_init__(self):
        self.validate()

    @classmethod
    def from_range(cls, start_lba, end_lba, data):
        """Build an entry whose kind follows from data: zero means erase."""
        cmd_type = CmdType.ERASE if data == 0 else CmdType.WRITE
        return cls(cmd_type, start_lba, end_lba, data)

    def length(self):
        """Number of blocks covered."""
        return self.end_lba - self.start_lba + 1

    def validate(self):
        """Raise ValueError unless the entry is a consistent write or erase."""
        if self.cmd_type == CmdType.WRITE and self.start_lba != self.end_lba:
            raise ValueError("if CMD_TYPE is WRITE -> startLba == endLba")
        if self.cmd_type == CmdType.ERASE and self.data != 0:
            raise ValueError("if CMD_TYPE is ERASE -> data == 0")
        if self.cmd_type not in (CmdType.WRITE, CmdType.ERASE):
            raise ValueError(
                "The cmdType field of CommandBuffer must be either ERASE or WRITE."
            )

    def __str__(self):
        if self.cmd_type == CmdType.WRITE:
            prefix = "W"
        elif self.cmd_type == CmdType.ERASE:
            prefix = "E"
        else:
            raise ValueError(f"Invalid CMD_TYPE: {cmd_type_string(self.cmd_type)}")
        return f"{prefix}_{self.start_lba}_{self.end_lba}_{self.data}"