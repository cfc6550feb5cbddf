# pipex

`pipex` is a small library of low-level helpers. It covers ASCII character
tests, strings with C-string rules, byte buffers, a singly linked list, and
printf-style output written straight to file descriptors.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `pipex.chars`

This module classifies and maps ASCII characters. Each function takes either
a one-character string or an integer code.

- `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint` return a `bool`.
- `toupper` and `tolower` change only ASCII letters. They return the same
  kind of value they were given.
- `is_all_whitespace(text)` is true when every character is a space or one
  of tab through carriage return.
- `maximum(a, b)` returns the larger value, or `b` when the two are equal.

```python
from pipex.chars import toupper, is_all_whitespace

toupper("a")                # 'A'
toupper(97)                 # 65
is_all_whitespace(" \t\n")  # True
```

### `pipex.text`

This module has string functions that follow C-string rules where they
matter. Searches return an index, or `None` when nothing is found.

- `atoi` parses a leading integer after optional whitespace and sign. The
  result wraps to a signed 32-bit value. A magnitude that overflows 64 bits
  gives `-1` when positive and `0` when negative.
- `itoa` returns the decimal text of an integer.
- `split` splits on one character and drops empty pieces.
- `substr`, `strtrim`, `strjoin` extract, trim and join strings.
- `strchr` and `strrchr` search from the front and from the back. Searching
  for `"\0"` gives the length of the text.
- `strnstr` finds a needle that lies wholly within the first `length`
  characters.
- `strcmp` and `strncmp` return the difference of the first pair of
  characters that do not match.
- `strmapi(text, func)` builds a new string from `func(index, char)`.
- `striteri(chars, func)` calls `func(index, char)` on each element of a
  mutable sequence. It stores any result that is not `None` in place.

```python
from pipex.text import split, atoi, strnstr

split("/usr/bin::/bin:", ":")       # ['/usr/bin', '/bin']
atoi("  -42abc")                    # -42
strnstr("PATH=/bin", "PATH=", 5)    # 0
```

### `pipex.memory`

This module works on byte buffers, usually `bytearray`. If an offset or
length is negative, it raises `ValueError`. If a range runs past the end of
a buffer, it raises `IndexError`.

- `memset`, `bzero`, `memcpy` fill or copy a buffer.
- `memmove(buffer, dst_offset, src_offset, length)` copies within one buffer
  and handles overlapping ranges.
- `memchr` gives the index of a byte value. `memcmp` gives the difference of
  the first pair of bytes that do not match.
- `strlcpy` and `strlcat` copy a NUL-terminated string into a buffer of
  fixed capacity. They return the length the full result would have had.
- `calloc(count, size)` returns a zeroed `bytearray`. It raises
  `MemoryError` when the size overflows 64 bits.

```python
from pipex.memory import strlcpy

dst = bytearray(8)
strlcpy(dst, b"hello", 3)   # 5; dst starts with b"he\x00"
```

### `pipex.linked_list`

`LinkedList` is a singly linked list of `Node` objects. Each node has a
`content` and a `next` field. The list supports `len()` and iteration over
contents. It also has these methods:

- `push_front` and `push_back`
- `last()`
- `clear(delete)`, which calls `delete` on each content from last to first
- `iterate(func)`
- `map(func, delete)`

If `func` raises during `map`, `delete` is called on every content made so
far, and then the exception propagates.

```python
from pipex.linked_list import LinkedList

items = LinkedList([1, 2, 3])
list(items.map(lambda x: x * 2))    # [2, 4, 6]
```

### `pipex.printf_fd`

`format_string(template, *args)` expands these directives:

| Directive | Output |
|-----------|--------|
| `%c` | one character |
| `%s` | a string; `None` is written as `(null)` |
| `%p` | an address |
| `%d`, `%i` | a signed 32-bit integer |
| `%u` | an unsigned 32-bit integer |
| `%x`, `%X` | hexadecimal, in lower or upper case |
| `%%` | a literal `%` |

Any other character after `%` is kept as written. A lone `%` at the end of
the template raises `ValueError`, and so does a template of `None`. Too few
arguments raise `TypeError`.

`printf_fd(fd, template, *args)` writes the expanded text to a file
descriptor as UTF-8 and returns the number of bytes written. These functions
write single values in the same way:

- `put_char`, `put_str`, `put_endl`
- `put_base`, `put_nbr`, `put_uint`
- `put_hexa`, `put_addr`

```python
import sys
from pipex.printf_fd import format_string, printf_fd

format_string("%s: %x %u", "val", 255, -1)   # 'val: ff 4294967295'
printf_fd(sys.stderr.fileno(), "pipex: %s: %s\n", "ls", "Command not found")
```

## What this package does not do

The package provides the helper modules described above and nothing more:

- It installs no command-line program.
- It does not run commands or connect them through pipes.
- It does not split command strings into words or search `PATH` for
  executables.
- It does not read here-documents.