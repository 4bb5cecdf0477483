from __future__ import annotations

import enum
from dataclasses import dataclass, field
from http import HTTPStatus
from pathlib import Path
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class FetchRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None
    # Read at most max_bytes + 1 so callers can tell "exactly at limit" from "over".
    max_bytes: int | None = None


@dataclass(frozen=True)
class FetchResponse:
    status: int
    headers: Mapping[str, str]
    body: bytes
    final_url: str
    reason: str = ''

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

    @property
    def status_text(self) -> str:
        """Status rendered as '<code> <reason>', e.g. '404 Not Found'."""
        reason = self.reason
        if not reason:
            try:
                reason = HTTPStatus(self.status).phrase
            except ValueError:
                reason = ''
        return f'{self.status} {reason}'.strip()


class EntryType(enum.Enum):
    FILE = 'file'
    DIR = 'dir'
    OTHER = 'other'

    @classmethod
    def parse(cls, raw: Any) -> 'EntryType':
        if raw == 'file':
            return cls.FILE
        if raw == 'dir':
            return cls.DIR
        return cls.OTHER


@dataclass(frozen=True)
class ContentEntry:
    """One row of a GitHub contents listing (or a single-object response)."""
    type: EntryType
    name: str
    path: str
    size: int = 0
    raw_type: str = ''

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> 'ContentEntry':
        raw_type = str(obj.get('type') or '')
        return cls(
            type=EntryType.parse(raw_type),
            name=str(obj.get('name') or ''),
            path=str(obj.get('path') or ''),
            size=int(obj.get('size') or 0),
            raw_type=raw_type,
        )


@dataclass(frozen=True)
class RemoteSpec:
    owner: str
    repo: str
    ref: str = ''
    path: str = ''
    label: str = ''

    @property
    def display_label(self) -> str:
        """'github.com/<owner>/<repo>[@ref]' without any sub-path."""
        label = f'github.com/{self.owner}/{self.repo}'
        if self.ref:
            label += f'@{self.ref}'
        return label

    def file_label(self, repo_path: str) -> str:
        return f'{self.display_label}/{repo_path}'


@dataclass(frozen=True)
class LocalOperand:
    path: Path


@dataclass(frozen=True)
class RemoteOperand:
    spec: RemoteSpec


Operand = Union[LocalOperand, RemoteOperand]
