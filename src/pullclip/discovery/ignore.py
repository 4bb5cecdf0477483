from __future__ import annotations
"""Repository-root discovery and gitignore matching.

The repository root is the nearest ancestor of the working directory holding a
`.git` directory or a `.gitignore` file. Patterns come from that root's
`.gitignore` and are compiled with :class:`pathspec.GitIgnoreSpec`.
Paths outside the root are never reported as ignored.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pathspec

from pullclip.core.interfaces.ignore import IgnoreMatcherProtocol
from pullclip.logging.helpers import get_logger

GITIGNORE_NAME = '.gitignore'
VCS_MARKER = '.git'


def find_repo_root(start: Path) -> Optional[Path]:
    """Walk upward from *start* and return the first directory that looks like a repo root."""
    try:
        current = Path(os.path.realpath(start))
    except OSError:
        current = Path(os.path.abspath(start))

    while True:
        if (current / VCS_MARKER).is_dir() or (current / GITIGNORE_NAME).is_file():
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent


@dataclass(frozen=True)
class IgnoreMatcher(IgnoreMatcherProtocol):
    """Gitignore matcher anchored at a repository root.

    Either field may be ``None``; in that case nothing is ever ignored.
    """

    root: Optional[Path] = None
    spec: Optional[pathspec.PathSpec] = None

    def relative_key(self, path: Path) -> Optional[str]:
        """Return the forward-slash path of *path* relative to the root, or None if it escapes."""
        if self.root is None:
            return None
        abs_root = os.path.abspath(self.root)
        abs_path = os.path.abspath(path)
        try:
            rel = os.path.relpath(abs_path, abs_root)
        except ValueError:
            # Different drives on Windows.
            return None
        if rel == os.pardir or rel.startswith(os.pardir + os.sep):
            return None
        return Path(rel).as_posix()

    def is_ignored(self, path: Path, *, is_dir: bool = False) -> bool:
        if self.spec is None:
            return False
        rel = self.relative_key(path)
        if rel is None or rel == '.':
            return False
        if self.spec.match_file(rel):
            return True
        # `dir/` patterns only match when the candidate carries the trailing slash.
        return is_dir and self.spec.match_file(rel + '/')


def load_ignore_for_cwd(cwd: Path, *, logger: Optional[logging.Logger] = None) -> IgnoreMatcher:
    """Locate the repository root above *cwd* and compile its `.gitignore`."""
    log = logger or get_logger('ignore')
    root = find_repo_root(cwd)
    if root is None:
        log.debug('no repository root above %s; ignore rules disabled', cwd)
        return IgnoreMatcher()

    gi_path = root / GITIGNORE_NAME
    if not gi_path.is_file():
        return IgnoreMatcher(root=root)

    try:
        with gi_path.open('r', encoding='utf-8', errors='replace') as fh:
            spec = pathspec.GitIgnoreSpec.from_lines(fh)
    except OSError as exc:
        log.warning('⚠  could not read %s: %s – ignore rules disabled', gi_path, exc)
        return IgnoreMatcher(root=root)

    log.debug('loaded ignore rules from %s', gi_path)
    return IgnoreMatcher(root=root, spec=spec)
