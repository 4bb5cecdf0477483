# pullclip/parsing/parser.py
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import List, NoReturn, Sequence

from pullclip.core.errors import UsageError

CMD_CLEAR = "clear"
CMD_EMIT = "emit"
CMD_WRITE = "write"
CMD_HREF = "href"
COMMANDS = (CMD_CLEAR, CMD_EMIT, CMD_WRITE, CMD_HREF)

USAGE = """\
Usage:
  pull <file/dir> ...                         Pull content to clipboard (recursive)
  pull github.com/<owner>/<repo>[@ref][/path] Pull GitHub repo/path to clipboard (recursive)
  pull https://github.com/<owner>/<repo>/tree/<ref>/<path>   Pull GitHub tree URL (recursive)
  pull https://github.com/<owner>/<repo>/blob/<ref>/<path>   Pull GitHub blob URL (single file)
  pull href <url> [url2 ...]                  Fetch URL(s) and copy response to clipboard
  pull emit                                   Print clipboard content to stdout
  pull clear                                  Clear clipboard
  pull write <file>                           Write clipboard to file
Flags:
  --append                                    Append to clipboard instead of overwrite
  --prepend                                   Prepend to clipboard instead of overwrite
  --includeIgnore                             Include files that are ignored by .gitignore
  --json-logs                                 Emit log lines as JSON on stderr

GitHub auth (recommended):
  export GITHUB_TOKEN=ghp_...   (or fine-grained token with repo read access)
"""


@dataclass
class Invocation:
    """Parsed command line: the selected action plus its operands and flags."""
    command: str = ""
    operands: List[str] = field(default_factory=list)
    write_target: str = ""
    append: bool = False
    prepend: bool = False
    include_ignored: bool = False
    json_logs: bool = False
    show_help: bool = False


class _RaisingParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems as UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"Error: {message}")


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Flags may appear anywhere among the operands; positional tokens keep
    their order since it drives the output order.
    """
    p = _RaisingParser(prog="pull", add_help=False, allow_abbrev=False, usage=USAGE)
    p.add_argument("--append", action="store_true", dest="append")
    p.add_argument("--prepend", action="store_true", dest="prepend")
    p.add_argument("--includeIgnore", action="store_true", dest="include_ignored")
    p.add_argument("--json-logs", action="store_true", dest="json_logs")
    p.add_argument("-h", "--help", action="store_true", dest="show_help")
    p.add_argument("tokens", nargs="*")
    return p


def parse_invocation(argv: Sequence[str]) -> Invocation:
    """Turn argv into an :class:`Invocation`.

    The first positional token selects a command when it is one of
    ``clear``, ``emit``, ``write`` or ``href``; ``write`` takes the following
    token as its target path.
    """
    ns = _build_parser().parse_intermixed_args(list(argv))
    tokens: List[str] = list(ns.tokens or [])

    inv = Invocation(
        append=ns.append,
        prepend=ns.prepend,
        include_ignored=ns.include_ignored,
        json_logs=ns.json_logs,
        show_help=ns.show_help,
    )
    if tokens and tokens[0] in COMMANDS:
        inv.command = tokens.pop(0)
        if inv.command == CMD_WRITE and tokens:
            inv.write_target = tokens.pop(0)
    inv.operands = tokens
    return inv
