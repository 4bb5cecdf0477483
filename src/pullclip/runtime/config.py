from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from pullclip.constants import (
    GITHUB_API_ROOT,
    GITHUB_TIMEOUT,
    GITHUB_TOKEN_ENV,
    HREF_TIMEOUT,
    MAX_FETCH_BYTES,
    USER_AGENT,
)


@dataclass(frozen=True)
class PullConfig:
    """Immutable per-invocation settings handed to every collector.

    Process-wide inputs (working directory, credentials) are captured here once
    so collectors never read the environment themselves.
    """
    cwd: Path
    github_token: str = ''
    include_ignored: bool = False
    max_fetch_bytes: int = MAX_FETCH_BYTES
    href_timeout: float = HREF_TIMEOUT
    github_timeout: float = GITHUB_TIMEOUT
    api_root: str = GITHUB_API_ROOT
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        cwd: Optional[Path] = None,
        include_ignored: bool = False,
    ) -> 'PullConfig':
        env = os.environ if environ is None else environ
        return cls(
            cwd=Path(cwd) if cwd is not None else Path.cwd(),
            github_token=(env.get(GITHUB_TOKEN_ENV) or '').strip(),
            include_ignored=include_ignored,
        )
