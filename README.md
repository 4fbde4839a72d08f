# pipex

`pipex` is a small library of helpers for parsing command text and reading
input: C-style string routines, ASCII character tests and a line reader that
works on raw file descriptors. It has no dependencies outside the standard
library.

## Installation

```sh
pip install .
```

## Modules

### `pipex.textutil`

String routines with the behaviour of their C namesakes, returning Python
values instead of pointers:

- `atoi(text)`: skips leading whitespace, accepts one `+` or `-`, and parses
  digits up to the first non-digit. Text with no digits gives `0`.
- `itoa(n)`: the decimal representation of an integer.
- `split(text, sep)`: splits on a single separator character and drops empty
  words, so `split("grep  -v x", " ")` gives `["grep", "-v", "x"]`.
- `strtrim(text, chars)`: strips every character of `chars` from both ends;
  `chars=None` returns the text unchanged.
- `substr(text, start, length)`: at most `length` characters from `start`;
  a start past the end gives `""`.
- `strnstr(haystack, needle, length)`: index of the first match of `needle`
  lying wholly within the first `length` characters, or `None`. An empty
  needle matches at `0`.
- `strncmp(s1, s2, n)`: compares at most `n` characters and returns the
  difference of the first differing character codes (the end of a string
  counts as code 0), or `0` when equal.
- `strchr(text, ch)` and `strrchr(text, ch)`: index of the first or last
  `ch`, or `None`. Searching for `"\0"` gives the length of the text.
- `strmapi(text, func)`: a new string built from `func(index, char)` for
  each character.
- `has_newline(text)`: whether the text holds a newline.

Negative lengths, starts or counts, and separators or search characters that
are not a single character, raise `ValueError`.

### `pipex.charclass`

ASCII tests and case mapping: `is_alnum`, `is_alpha`, `is_ascii`,
`is_digit`, `is_print`, `to_lower` and `to_upper`. Each takes a
one-character string or an integer character code; `to_lower` and
`to_upper` return the same kind they were given and leave anything other
than an ASCII letter unchanged.

```python
from pipex.charclass import is_digit, to_upper

is_digit("7")      # True
to_upper("a")      # "A"
to_upper(97)       # 65
```

### `pipex.linereader`

`LineReader(fd, buffer_size=42)` reads newline-terminated lines from a file
descriptor, pulling data with `os.read` in chunks of `buffer_size` bytes and
keeping what is left over for the next call. `next_line()` returns the next
line with its newline, the last line without one if the input does not end in
a newline, and `None` at end of input. A `LineReader` is iterable, and
`read_lines(fd, buffer_size=42)` yields every remaining line. Bytes are
decoded as UTF-8 with `surrogateescape`. A negative descriptor or a buffer
size that is not positive raises `ValueError`; read errors surface as
`OSError`.

```python
import os
from pipex.linereader import read_lines

fd = os.open("input.txt", os.O_RDONLY)
try:
    for line in read_lines(fd):
        print(line, end="")
finally:
    os.close(fd)
```

## What the package does not do

The package does not include a command-line program, and it cannot run
commands or join them with a pipe between an input file and an output file.
It also offers no `printf`-style formatted output or helpers that write
strings and numbers to a file descriptor. It is limited to the three modules
above.

## Running the tests

```sh
pip install ".[test]"
pytest
```