import pytest

from ssdsim.buffer import CommandBuffer
from ssdsim.handler import CommandBufferHandler
from ssdsim.parser import FlushParam, ReadParam
from ssdsim.ssd import SSD, main
from ssdsim.storage import FileDriver

TEST_LBA = 5
TEST_DATA = 0x12345678


@pytest.fixture
def ssd(tmp_path):
    storage = FileDriver(tmp_path / "nand.txt", tmp_path / "out.txt")
    handler = CommandBufferHandler(CommandBuffer(tmp_path / "buffer"))
    return SSD(storage, handler)


def test_flush_cmd(ssd):
    ssd.run(["W", "5", "0x12345678"])
    ssd.run(["R", "5"])
    ssd.run(["F"])
    assert ssd.cached_data(TEST_LBA) == TEST_DATA


def test_write_six_times_flushes(ssd):
    for lba in range(6):
        ssd.run(["W", str(lba), "0xFFFFFFFF"])
    assert [ssd.cached_data(lba) for lba in range(5)] == [0xFFFFFFFF] * 5


def test_write_and_read_cached_data(ssd):
    ssd.run(["W", "5", "0x12345678"])
    ssd.run(["R", "5"])
    assert ssd.cached_data(TEST_LBA) == TEST_DATA


def test_write_erase_read_cached_data(ssd, tmp_path):
    ssd.run(["W", "5", "0x12345678"])
    ssd.run(["R", "5"])
    assert ssd.cached_data(TEST_LBA) == TEST_DATA
    ssd.run(["E", "5", "1"])
    ssd.run(["R", "5"])
    assert ssd.cached_data(TEST_LBA) == 0
    assert (tmp_path / "out.txt").read_text() == "0x00000000"


def test_read_invalid_lba_writes_error(ssd, tmp_path):
    ssd.run(["R", "140"])
    assert (tmp_path / "out.txt").read_text() == "ERROR\n"
    assert ssd.execute(ReadParam(140)) is False


def test_invalid_command_type(ssd, tmp_path):
    before = ssd.cached_data(TEST_LBA)
    ssd.run(["invalid", "5", "0x12345678"])
    assert ssd.cached_data(TEST_LBA) == before
    assert (tmp_path / "out.txt").read_text() == "ERROR\n"


def test_read_writes_hex_output(ssd, tmp_path):
    ssd.run(["W", "9", "0x0000BEEF"])
    ssd.run(["R", "9"])
    assert ssd.cached_data(9) == 0x0000BEEF
    assert (tmp_path / "out.txt").read_text() == "0x0000BEEF"


def test_execute_returns_result(ssd):
    assert ssd.execute(ReadParam(3)) is True
    assert ssd.execute(ReadParam(140)) is False
    assert ssd.execute(FlushParam()) is True


def test_main_uses_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["W", "3", "0x0000ABCD"]) == 0
    assert main(["R", "3"]) == 0
    assert (tmp_path / "ssd_output.txt").read_text() == "0x0000ABCD"
    assert (tmp_path / "buffer").is_dir()


def test_main_flush_persists_image(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["W", "2", "0x00000042"]) == 0
    assert main(["F"]) == 0
    lines = (tmp_path / "ssd_nand.txt").read_text().splitlines()
    assert len(lines) == 100
    assert lines[2] == "0x00000042"