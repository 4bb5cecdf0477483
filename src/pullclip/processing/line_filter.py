# src/pullclip/processing/line_filter.py
"""Line filter shared by the local and GitHub collectors.

Blank lines and single-line comment lines (`//` or `#` after trimming
Unicode whitespace) are dropped; every retained line is emitted untrimmed with
one trailing newline. Input is split on the newline byte and decoded per line,
so undecodable content still passes through line by line.
"""
from typing import Iterator

_COMMENT_PREFIXES = ('//', '#')


def filter_lines(data: bytes) -> Iterator[str]:
    """Yield retained lines of *data*, each terminated by a single newline."""
    for raw in data.split(b'\n'):
        if raw.endswith(b'\r'):
            raw = raw[:-1]
        line = raw.decode('utf-8', errors='replace')
        trimmed = line.strip()
        if not trimmed:
            continue
        if trimmed.startswith(_COMMENT_PREFIXES):
            continue
        yield line + '\n'


def filter_text(data: bytes) -> str:
    """Return the filtered content of *data* as one string."""
    return ''.join(filter_lines(data))
