import pytest

from ssdsim.buffer import CommandBuffer
from ssdsim.commands import (
    CommandFactory,
    EraseCommand,
    FlushCommand,
    ReadCommand,
    WriteCommand,
)
from ssdsim.config import CmdType
from ssdsim.handler import CommandBufferHandler
from ssdsim.parser import EraseParam, FlushParam, ReadParam, WriteParam
from ssdsim.storage import FileDriver


@pytest.fixture
def storage(tmp_path):
    return FileDriver(tmp_path / "nand.txt", tmp_path / "out.txt")


@pytest.fixture
def handler(tmp_path):
    return CommandBufferHandler(CommandBuffer(tmp_path / "buffer"))


def test_erase_command_success(storage, handler):
    command = EraseCommand(storage, handler)
    assert command.execute(EraseParam(1, 1)) is True
    assert command.execute(EraseParam(95, 5)) is True


def test_erase_command_invalid_lba(storage, handler):
    assert EraseCommand(storage, handler).execute(EraseParam(140, 1)) is False


def test_erase_command_invalid_size1(storage, handler):
    assert EraseCommand(storage, handler).execute(EraseParam(1, 12)) is False


def test_erase_command_invalid_size2(storage, handler):
    assert EraseCommand(storage, handler).execute(EraseParam(96, 5)) is False


def test_erase_command_zero_size_raises(storage, handler):
    with pytest.raises(ValueError):
        EraseCommand(storage, handler).execute(EraseParam(5, 0))


def test_read_valid_lba(storage, handler, tmp_path):
    assert ReadCommand(storage, handler).execute(ReadParam(5)) is True
    assert (tmp_path / "out.txt").read_text() == "0x00000000"


def test_read_invalid_lba(storage, handler):
    assert ReadCommand(storage, handler).execute(ReadParam(140)) is False


def test_write_command_success(storage, handler):
    assert WriteCommand(storage, handler).execute(WriteParam(1, 0x12345678)) is True
    assert handler.try_fast_read(1) == 0x12345678


def test_write_command_invalid_lba(storage, handler):
    assert WriteCommand(storage, handler).execute(WriteParam(140, 0x12345678)) is False


def test_wrong_param_kind_rejected(storage, handler):
    assert WriteCommand(storage, handler).execute(ReadParam(1)) is False
    assert ReadCommand(storage, handler).execute(WriteParam(1, 2)) is False


def test_missing_storage_rejected(handler):
    assert FlushCommand(None, handler).execute(FlushParam()) is False


def test_read_uses_buffered_value(storage, handler, tmp_path):
    WriteCommand(storage, handler).execute(WriteParam(7, 0xABCD1234))
    assert ReadCommand(storage, handler).execute(ReadParam(7)) is True
    assert (tmp_path / "out.txt").read_text() == "0xABCD1234"
    assert storage.get(7) == 0xABCD1234


def test_flush_applies_buffer_to_storage(storage, handler, tmp_path):
    WriteCommand(storage, handler).execute(WriteParam(3, 0x11))
    assert storage.get(3) == 0
    assert FlushCommand(storage, handler).execute(FlushParam()) is True
    assert storage.get(3) == 0x11
    lines = (tmp_path / "nand.txt").read_text().splitlines()
    assert lines[3] == "0x00000011"
    assert handler.try_fast_read(3) is None


def test_sixth_write_evicts_to_storage(storage, handler):
    command = WriteCommand(storage, handler)
    for lba in range(6):
        assert command.execute(WriteParam(lba, 0xFFFFFFFF)) is True
    assert [storage.get(lba) for lba in range(5)] == [0xFFFFFFFF] * 5
    assert storage.get(5) == 0
    assert handler.try_fast_read(5) == 0xFFFFFFFF


@pytest.mark.parametrize(
    "cmd_type, expected",
    [
        (CmdType.WRITE, WriteCommand),
        (CmdType.READ, ReadCommand),
        (CmdType.ERASE, EraseCommand),
        (CmdType.FLUSH, FlushCommand),
    ],
)
def test_factory_creates_matching_command(storage, handler, cmd_type, expected):
    command = CommandFactory(storage, handler).get_command(cmd_type)
    assert type(command) is expected
    assert command.storage is storage
    assert command.handler is handler


def test_factory_invalid_type(storage, handler):
    assert CommandFactory(storage, handler).get_command(CmdType.INVALID) is None