from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates defaults shared by the collectors and the configuration
layer to reduce cross-module coupling.
"""

# Safety limit for any remote body (href fetches, GitHub listings and files).
MAX_FETCH_BYTES: int = 5 << 20

GITHUB_API_ROOT: str = 'https://api.github.com'
GITHUB_API_VERSION: str = '2022-11-28'
USER_AGENT: str = 'pull/1.0 (+clipboard)'

GITHUB_TOKEN_ENV: str = 'GITHUB_TOKEN'

HREF_TIMEOUT: float = 15.0
GITHUB_TIMEOUT: float = 20.0

FILE_HEADER: str = 'file: '
HREF_HEADER: str = 'href: '
GITHUB_HEADER: str = 'github: '
