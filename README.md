# ssdsim

A small simulator of a 100-block SSD. The contents of the drive are kept in a
plain text file, `ssd_nand.txt`, with one `0xXXXXXXXX` value per logical block
address (LBA 0 to 99). The result of a read goes to `ssd_output.txt` as
`0xXXXXXXXX`; when a command fails, that file holds `ERROR` instead.

Writes and erases are not applied to the NAND file straight away. They first go
into a command buffer of at most five entries. The buffer lives as empty marker
files in `./buffer/`, with names such as `0_W_5_5_305419896.cmdbuf` or
`3_Empty.cmdbuf`. Each new command is merged with the commands already in the
buffer, and the buffer is rewritten with as few commands as the optimiser can
find. When a command arrives while the buffer already holds five, those five
are applied to the NAND file and the new command alone stays in the buffer. An
explicit flush applies everything in the buffer and leaves five empty slots.

## Installation

```
pip install .
```

## Command line

Each call runs one command. All files are relative to the current directory.

```
ssdsim W 5 0x12345678   # buffer a write of a 32-bit value to LBA 5
ssdsim R 5              # read LBA 5 into ssd_output.txt
ssdsim E 5 3            # buffer an erase of LBAs 5, 6 and 7
ssdsim F                # apply the command buffer to ssd_nand.txt
```

The same can be done with `python -m ssdsim.ssd W 5 0x12345678` and so on.

Argument rules:

- The LBA is a decimal number below 100.
- The data is written as exactly `0x` followed by eight hex digits.
- The erase size is a decimal number of at most 10, and LBA plus size must not
  be more than 100.

A malformed or out-of-range command writes `ERROR` to `ssd_output.txt`.

A read answers from the command buffer when a buffered command covers the LBA,
and otherwise from the NAND file.

## Library use

```python
from ssdsim.ssd import SSD

ssd = SSD()
ssd.run(["W", "5", "0x12345678"])
ssd.run(["R", "5"])
print(hex(ssd.cached_data(5)))   # 0x12345678
```

`SSD(storage, handler)` takes a `FileDriver` and a `CommandBufferHandler`;
either may be left out to use the defaults in the current directory. To keep
the files elsewhere:

```python
from ssdsim.buffer import CommandBuffer
from ssdsim.handler import CommandBufferHandler
from ssdsim.ssd import SSD
from ssdsim.storage import FileDriver

storage = FileDriver("data/nand.txt", "data/output.txt")
handler = CommandBufferHandler(CommandBuffer("data/buffer"))
ssd = SSD(storage, handler)
```

The pieces can also be used on their own:

- `ssdsim.handler.CommandBufferHandler` keeps the command buffer.
  `add_write(lba, data)` and `add_erase(lba, delta)` return the commands to
  apply to storage when the buffer had to be emptied, and an empty list
  otherwise; a negative `delta` erases backwards from `lba`. Both raise
  `ValueError` for an invalid range. `try_fast_read(lba)` returns the buffered
  value or `None`. `flush()` empties the buffer and returns what was in it, and
  `is_full()` tells whether five commands are buffered.
- `ssdsim.buffer.CommandBuffer` stores commands as marker files, with `load`,
  `write` and `flush`.
- `ssdsim.optimizer.optimize` turns a list of `CommandBufferEntry` objects
  (from `ssdsim.entry`) into the shortest equivalent list it finds, with no
  entry longer than ten blocks.
- `ssdsim.storage.FileDriver` loads and stores the NAND file (`load`, `store`),
  holds its cells in memory (`get`, `set`) and writes the output file
  (`store_output`, `store_error`).
- `ssdsim.parser.parse` turns command-line tokens into `WriteParam`,
  `ReadParam`, `EraseParam`, `FlushParam` or `InvalidParam`.
- `ssdsim.commands.CommandFactory` gives the command object for a `CmdType`
  from `ssdsim.config`.

## What it does not do

The package runs one command per call. It has no interactive shell and no
script runner for sequences of commands; drive it from your own code or from
repeated calls of `ssdsim`.

## Running the tests

```
pip install ".[test]"
pytest
```