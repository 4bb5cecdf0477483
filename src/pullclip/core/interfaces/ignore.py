from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class IgnoreMatcherProtocol(Protocol):
    """Answers whether a local path is excluded by default."""

    def is_ignored(self, path: Path, *, is_dir: bool = False) -> bool:
        ...
