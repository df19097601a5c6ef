# nextline

Read lines one at a time from raw file descriptors. Data is read with
`os.read` in chunks of a fixed size. Whatever follows the last newline is
kept until the next call, with a separate buffer for each descriptor.

## Usage

The simplest way is the module-level `get_next_line` function in
`nextline.reader`. It shares one reader that reads 42 bytes at a time and
accepts descriptors from 0 to 1023. Each call returns the next line as
`bytes`, including its trailing `b"\n"` if the line has one. The last line
is returned without a newline if the input does not end with one. Once the
descriptor has nothing left, the function returns `None`.

```python
import os
from nextline.reader import get_next_line

fd = os.open("notes.txt", os.O_RDONLY)
try:
    while (line := get_next_line(fd)) is not None:
        print(line.decode(), end="")
finally:
    os.close(fd)
```

For more control, create your own `LineReader`:

- `buffer_size` sets how many bytes are read at a time. The default is 42.
- `max_fd` sets the exclusive upper limit on descriptor numbers. The default is 1024. Pass `None` to have no limit.

```python
from nextline.reader import LineReader

reader = LineReader(buffer_size=4096, max_fd=None)

for line in reader.lines(fd):       # yields each remaining line
    handle(line)

reader.pending(fd)                  # bytes buffered but not yet returned
reader.discard(fd)                  # drop the buffered bytes for fd
```

Each reader keeps its own buffer per descriptor. You can therefore read from
several descriptors in turn without their data mixing.

## Errors

- A non-positive `buffer_size` or `max_fd` raises `ValueError`.
- A negative descriptor, or one at or above `max_fd`, raises `ValueError`.
- If a read fails, the data buffered for that descriptor is dropped and the `OSError` is raised.

## What it does not do

This is a library only; it has no command-line tool. Lines are returned as
raw bytes. Decoding them is left to the caller. Only `b"\n"` counts as a line
ending.

## Running the tests

Install the package with its `test` extra, then run pytest from the project
directory.