from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClipboardProtocol(Protocol):
    """System clipboard primitive. Failures raise ClipboardError."""

    def read(self) -> str:
        ...

    def write(self, text: str) -> None:
        ...
