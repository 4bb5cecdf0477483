from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List, Optional

from pullclip.constants import FILE_HEADER
from pullclip.core.interfaces.ignore import IgnoreMatcherProtocol
from pullclip.logging.helpers import get_logger, trace_io
from pullclip.processing.line_filter import filter_lines


class LocalTreeCollector:
    """Depth-first walk of a local file or directory feeding the line filter.

    Children are visited in lexical order through an explicit stack. Ignored
    directories are pruned before descent; ignored files are skipped silently.
    A failure on one entry is logged and never aborts its siblings.
    """

    def __init__(
        self,
        *,
        matcher: Optional[IgnoreMatcherProtocol] = None,
        include_ignored: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._matcher = matcher
        self._include_ignored = include_ignored
        self._log = logger or get_logger('walker')

    def _ignored(self, path: Path, is_dir: bool) -> bool:
        if self._include_ignored or self._matcher is None:
            return False
        return self._matcher.is_ignored(path, is_dir=is_dir)

    def collect(self, root: Path | str, parts: List[str]) -> None:
        """Append a header plus filtered body for every non-ignored file under *root*."""
        seed = Path(root)
        stack: List[Path] = [seed]
        while stack:
            path = stack.pop()
            try:
                # The operand itself may be a symlink to a directory; nested links are not followed.
                is_dir = path.is_dir() and (path is seed or not path.is_symlink())
                if not is_dir and not os.path.lexists(path):
                    raise FileNotFoundError(f'no such file or directory: {path}')
            except OSError as exc:
                self._log.warning('⚠  skipping %s: %s', path, exc)
                continue

            if self._ignored(path, is_dir):
                trace_io(self._log, 'ignored', path=str(path), dir=is_dir)
                continue

            if not is_dir:
                self.append_file(path, parts)
                continue

            try:
                with os.scandir(path) as it:
                    names = sorted(entry.name for entry in it)
            except OSError as exc:
                self._log.warning('⚠  skipping %s: %s', path, exc)
                continue
            stack.extend(path / name for name in reversed(names))

    def append_file(self, path: Path, parts: List[str]) -> None:
        """Append `file: <abs>` and the filtered content of *path*.

        The header is written before the file is opened, so an unreadable file
        still leaves its bare header in the output.
        """
        parts.append(f'{FILE_HEADER}{os.path.abspath(path)}\n')
        try:
            data = path.read_bytes()
        except OSError as exc:
            self._log.warning('⚠  could not open %s: %s', path, exc)
            return
        trace_io(self._log, 'read file', path=str(path), size=len(data))
        parts.extend(filter_lines(data))
