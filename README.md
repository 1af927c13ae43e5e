# cubkit

A small library with no third-party dependencies. It holds:

- the value types, constants and error codes of a grid-map raycaster
  (vectors, rays, per-column render values, texture ids, colours), and
- helpers for NUL-terminated-style text, byte buffers, a singly linked
  list, minimal `printf`-style formatting and reading a file descriptor
  line by line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `cubkit.errors` | `ErrorCode` enumeration, the `CubError` exception and ANSI colour strings |
| `cubkit.settings` | Screen, movement and key constants; `TextureId`, `Vec2`, `IntVec2`, `Color`, `Ray`, `RenderValues` |
| `cubkit.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_whitespace`, `to_lower`, `to_upper` |
| `cubkit.memory` | `find_byte`, `compare_bytes`, `fill`, `zero`, `zeroed`, `copy`, `move`, `c_length`, `bounded_copy`, `bounded_concat` |
| `cubkit.strings` | `find_char`, `rfind_char`, `find_bounded`, `compare`, `compare_n`, `join`, `map_indexed`, `for_each_indexed` |
| `cubkit.linked` | `LinkedList` with `append`, `prepend`, `last`, `clear`, `for_each`, `map`, `len()` and iteration |
| `cubkit.text` | `parse_int`, `int_to_str`, `split`, `trim`, `rtrim`, `substring`, `remove_trailing_newline` |
| `cubkit.printf` | `format_message`, `printf`, `put_char`, `put_str`, `put_endl`, `put_number`, `count_digits` |
| `cubkit.line_reader` | `LineReader` and `next_line` for reading a file descriptor line by line |

Functions in `cubkit.chars` take a one-character string or an integer
code. Text functions in `cubkit.strings`, `cubkit.text` and
`cubkit.printf` treat a string as ending at its first `"\0"`, if it has one.

## Examples

Vector arithmetic (`+`, `-` and `*` work too):

```python
from cubkit.settings import Vec2

a = Vec2(1.0, 2.0)
b = Vec2(3.0, 4.0)
a.add(b)          # Vec2(x=4.0, y=6.0)
a.scale(2.0)      # Vec2(x=2.0, y=4.0)
a.dot(b)          # 11.0
```

Errors carry a code; `ErrorCode.OK` and `ErrorCode.COUNT` are refused
with `ValueError`:

```python
from cubkit.errors import CubError, ErrorCode

try:
    raise CubError(ErrorCode.INVALID_COLORS)
except CubError as exc:
    print(exc.code, exc)   # message: "invalid colors"
```

Text helpers:

```python
from cubkit.text import parse_int, split, trim

parse_int("  -42abc")       # -42
split("F 220,100,0", " ")   # ['F', '220,100,0']
trim("xxhixx", "x")         # 'hi'
```

Formatting with the `%c %s %p %d %i %u %x %X %%` conversions; unknown
conversions produce nothing, and missing arguments raise `TypeError`:

```python
from cubkit.printf import format_message

format_message("%s has %d lives (%x)", "player", 3, 255)
# 'player has 3 lives (ff)'
```

Reading lines from a file descriptor, newline included:

```python
import os
from cubkit.line_reader import LineReader

fd = os.open("map.cub", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line, end="")
finally:
    os.close(fd)
```

`next_line(fd)` does the same one call at a time, keeping a separate
buffer for each descriptor.

## What cubkit does not do

cubkit holds the types and helpers only. It does not parse scene files,
validate maps, cast rays, draw anything, open a window or handle key
presses, and it installs no command-line program.