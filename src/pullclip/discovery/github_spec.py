# src/pullclip/discovery/github_spec.py
"""
github_spec – classification and parsing of GitHub operand shorthands.

Accepted forms:
  • github.com/<owner>/<repo>[@ref][/path]
  • https://github.com/<owner>/<repo>/tree/<ref>/<path>   (directory)
  • https://github.com/<owner>/<repo>/blob/<ref>/<path>   (single file)

The blob form needs no special handling: the contents API reports whether
the target is a file or a directory.
"""

from __future__ import annotations

from typing import List
from urllib.parse import urlparse

from pullclip.core.errors import SpecError
from pullclip.core.models import RemoteSpec

_PREFIXES = (
    "github.com/",
    "https://github.com/",
    "http://github.com/",
    "https://www.github.com/",
    "http://www.github.com/",
)
_ALLOWED_HOSTS = {"github.com", "www.github.com"}
_REF_MARKERS = {"tree", "blob"}


def looks_like_github_spec(s: str) -> bool:
    """Return True if *s* starts with a recognized GitHub host prefix."""
    s = (s or "").strip()
    return bool(s) and s.startswith(_PREFIXES)


def split_path_segments(path: str) -> List[str]:
    """Split a URL path on '/' keeping order and dropping empty segments."""
    return [seg for seg in (path or "").strip().split("/") if seg]


def parse_github_spec(raw: str) -> RemoteSpec:
    """Parse a GitHub shorthand or URL into a :class:`RemoteSpec`.

    Raises:
        SpecError: when the operand is empty, targets another host or lacks
            the owner/repo segments.
    """
    raw = (raw or "").strip()
    if not raw:
        raise SpecError("github: empty spec")

    url = raw
    if url.startswith("github.com/"):
        url = "https://" + url

    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise SpecError(f"github: invalid url {raw!r}: {exc}") from exc
    if parsed.netloc not in _ALLOWED_HOSTS:
        raise SpecError(f"github: expected github.com host, got {parsed.netloc!r}")

    segs = split_path_segments(parsed.path)
    if len(segs) < 2:
        raise SpecError(f"github: expected github.com/<owner>/<repo>, got {raw!r}")

    owner, repo = segs[0], segs[1]
    ref = ""
    sub_path = ""

    if len(segs) >= 4 and segs[2] in _REF_MARKERS:
        ref = segs[3]
        sub_path = "/".join(segs[4:])
    elif len(segs) > 2:
        sub_path = "/".join(segs[2:])

    # owner/repo@ref shorthand wins over a tree/blob ref.
    if "@" in repo:
        repo, ref = repo.split("@", 1)

    if not owner or not repo:
        raise SpecError(f"github: expected github.com/<owner>/<repo>, got {raw!r}")

    return RemoteSpec(owner=owner, repo=repo, ref=ref, path=sub_path.lstrip("/"), label=raw)
