"""The NAND image file and the output file of the simulated device."""

from pathlib import Path

from .config import MAX_STORAGE_IDX, OUTPUT_FILE_NAME, STORAGE_FILE_NAME, parse_data

_UINT_MASK = 0xFFFFFFFF


class FileDriver:
    """An in-memory copy of the NAND image, backed by a text file."""

    def __init__(self, storage_path=STORAGE_FILE_NAME, output_path=OUTPUT_FILE_NAME):
        self.storage_path = Path(storage_path)
        self.output_path = Path(output_path)
        self._cells = [0] * MAX_STORAGE_IDX
        if self.storage_path.is_file():
            self.load()
        else:
            self.store()

    def load(self):
        """Read cell values, one hexadecimal word per line, from the image."""
        with self.storage_path.open(encoding="ascii", newline="") as image:
            for idx, line in zip(range(MAX_STORAGE_IDX), image):
                self._cells[idx] = parse_data(line)

    def store(self):
        """Write every cell to the image file."""
        self.storage_path.write_text(
            "".join(f"0x{value:08X}\n" for value in self._cells), encoding="ascii"
        )

    def store_output(self, value):
        """Write a read result to the output file."""
        self.output_path.write_text(f"0x{value & _UINT_MASK:08X}", encoding="ascii")

    def store_error(self):
        """Mark the last command as failed in the output file."""
        self.output_path.write_text("ERROR\n", encoding="ascii")

    def _check(self, lba):
        if not 0 <= lba < MAX_STORAGE_IDX:
            raise IndexError(f"lba out of range: {lba}")

    def get(self, lba):
        """Return the cached value of a cell."""
        self._check(lba)
        return self._cells[lba]

    def set(self, lba, data):
        """Change the cached value of a cell; call store() to persist it."""
        self._check(lba)
        self._cells[lba] = data & _UINT_MASK