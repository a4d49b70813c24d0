"""The simulated device and its command-line entry point."""

import sys

from .commands import CommandFactory
from .config import CmdType
from .handler import CommandBufferHandler
from .parser import parse
from .storage import FileDriver


class SSD:
    """Runs one command line against the storage and its command buffer."""

    def __init__(self, storage=None, handler=None):
        self.storage = storage if storage is not None else FileDriver()
        self.handler = handler if handler is not None else CommandBufferHandler()
        self.factory = CommandFactory(self.storage, self.handler)

    def run(self, args):
        """Parse and execute args, recording ERROR if the command fails."""
        param = parse(args)
        if param.cmd_type == CmdType.INVALID or not self.execute(param):
            self.storage.store_error()

    def execute(self, param):
        """Execute parsed parameters; return whether the command succeeded."""
        command = self.factory.get_command(param.cmd_type)
        return command is not None and command.execute(param)

    def cached_data(self, lba):
        """Return the value the storage currently holds for lba."""
        return self.storage.get(lba)


def main(argv=None):
    """Run the device with command-line arguments."""
    if argv is None:
        argv = sys.argv[1:]
    SSD().run(list(argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())