# embutil

Small, dependency-free helpers for working with byte strings and buffers,
plus a few bits of supporting infrastructure:

- `embutil.mgstr` compares and searches strings given as `str` or bytes.
  It provides `compare`, `ncompare`, `vcmp`, `vcasecmp` (ASCII case-insensitive),
  `find_char`, `find`, `strip` and `starts_with`. `find_char` and `find` return
  an index or `None`.
- `embutil.mbuf` provides `MBuf`, a growable byte buffer that keeps track of
  its allocated capacity (`size`). It supports `insert`, `append`, `remove`
  (drops bytes from the front), `resize`, `trim`, `clear`, `free` and `take`
  (moves another buffer's contents into this one). Use `len()` and `bytes()`
  to inspect it.
- `embutil.varint` handles unsigned 64-bit LEB128 varints through
  `encoded_length`, `encode` and `decode`. `decode` returns
  `(value, bytes_consumed)` and raises `ValueError` on truncated input.
- `embutil.strutil` contains several helpers:
  - a small printf: `c_format` and `c_snprintf`. Supported conversions are
    `%s %c %d %u %x %p`, with the `0` flag, a width, a precision, `*`, and the
    `l`, `ll` and `z` length modifiers. Any other conversion raises `ValueError`.
  - `strnlen` and `strnstr`.
  - `to_hex` and `from_hex`.
  - `to64`.
  - `ncasecmp` and `casecmp`.
  - comma-list parsing with `next_comma_list_entry` and `iter_comma_list`.
  - glob prefix matching with `match_prefix`.
- `embutil.dbg` provides `Logger` and `LogLevel`, along with `make_prefix`.
  Every log line starts with a fixed-width `basename:line` prefix. Levels can
  be overridden per file with `set_file_level`, for example
  `"main.c:=4,=1"`.
- `embutil.timeutil` provides `now()` and `timegm(tm)`. The `tm` argument is a
  `time.struct_time` or a 9-tuple; times before the epoch give `-1.0`.
- `embutil.fileutil` provides `read_file(path)`, which returns bytes, and
  `mmap_file(path)`, which returns a read-only `mmap`.
- `embutil.httpget` is a minimal HTTP/1.1 GET client over plain or TLS
  sockets. It provides `build_request`, `get` and `main`.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from embutil.varint import encode, decode
from embutil.strutil import match_prefix, c_format, iter_comma_list
from embutil.mbuf import MBuf

data = encode(300)           # b'\xac\x02'
value, used = decode(data)   # (300, 2)

match_prefix("a*f", "abcdefgh")   # 6
match_prefix("a*f", "abcdexgh")   # 0
c_format("%05d|%s", 42, "hi")     # '00042|hi'
list(iter_comma_list("a=1,b"))    # [('a', '1'), ('b', None)]

buf = MBuf(0)
buf.append(b"world")
buf.insert(0, b"hello ")
bytes(buf)                        # b'hello world'
```

Logging:

```python
import sys
from embutil.dbg import Logger, LogLevel

log = Logger(LogLevel.INFO, sys.stdout)
log.log(LogLevel.INFO, "src/main.c", 42, "value=%d", 7)
# main.c:42               value=7
```

## Command line

The `embutil-get` command sends a GET request to a host and prints the raw
response:

```
embutil-get example.com /
embutil-get example.com /index.html --port 8080
embutil-get example.com / --tls
```

The URL defaults to `/`. The port defaults to 80, or to 443 when `--tls` is
given. If the connection fails, the command prints the error and exits with
status 1.

## What it does not do

The HTTP client is deliberately bare. It writes a fixed request, echoes
whatever bytes come back until the peer closes the connection, and stops
early only if a NUL byte arrives. It does not parse status lines or headers,
does not decode chunked bodies, does not follow redirects, and has no timeouts
or retries.