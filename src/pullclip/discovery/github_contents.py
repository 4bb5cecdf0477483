from __future__ import annotations
"""
GitHub repository collection through the REST contents API.

The collector resolves a :class:`RemoteSpec` target with
``GET /repos/{owner}/{repo}/contents/{path}?ref=`` and dispatches on the
answer:

- a JSON array (directory listing): ``dir`` rows are walked, ``file`` rows are
  fetched raw, anything else (symlink, submodule) is skipped;
- a single JSON object: ``dir`` is walked, ``file`` is fetched, anything else
  is an error.

Rows are processed in the order the API returns them, depth-first, using an
explicit worklist instead of call recursion. Raw file bodies go through the
line filter under a ``file: github.com/<owner>/<repo>[@ref]/<path>`` header.
"""

import json
import logging
from typing import List, Optional, Tuple
from urllib.parse import quote, urlencode

from pullclip.constants import FILE_HEADER, GITHUB_API_VERSION, GITHUB_HEADER
from pullclip.core.errors import PullError, RemoteError, ResponseTooLargeError, ensure_within_limit
from pullclip.core.interfaces.net import HTTPTransportProtocol
from pullclip.core.models import ContentEntry, EntryType, FetchRequest, FetchResponse, RemoteSpec
from pullclip.logging.helpers import get_logger, trace_io
from pullclip.processing.line_filter import filter_lines
from pullclip.runtime.config import PullConfig

ACCEPT_JSON = 'application/vnd.github+json'
ACCEPT_RAW = 'application/vnd.github.raw+json'

_PATH_SAFE = "!$&'()*+,;=:@~"

_WALK = 'walk'
_FETCH = 'fetch'


def escape_repo_path(path: str) -> str:
    """Percent-escape each segment of a repository path, keeping the slashes."""
    segs = [s for s in (path or '').strip('/').split('/') if s]
    return '/'.join(quote(s, safe=_PATH_SAFE) for s in segs)


def extract_message(body: bytes) -> str:
    """Return the ``message`` field of a GitHub error body, or ''."""
    try:
        payload = json.loads(body.decode('utf-8', errors='replace'))
    except ValueError:
        return ''
    if isinstance(payload, dict) and isinstance(payload.get('message'), str):
        return payload['message'].strip()
    return ''


def _same_path(candidate: str, current: str) -> bool:
    """True when *candidate* is empty or names the directory being listed."""
    cand = (candidate or '').strip('/')
    return not cand or cand == (current or '').strip('/')


class GitHubContentsClient:
    """Thin client for the contents endpoint (listing + raw media type)."""

    def __init__(
        self,
        config: PullConfig,
        *,
        transport: HTTPTransportProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config
        self._http = transport
        self._log = logger or get_logger('github')

    def contents_url(self, owner: str, repo: str, ref: str, repo_path: str) -> str:
        url = f'{self._cfg.api_root.rstrip("/")}/repos/{owner}/{repo}/contents'
        escaped = escape_repo_path(repo_path)
        if escaped:
            url += '/' + escaped
        if ref:
            url += '?' + urlencode({'ref': ref})
        return url

    def _headers(self, accept: str) -> dict:
        headers = {
            'User-Agent': self._cfg.user_agent,
            'X-GitHub-Api-Version': GITHUB_API_VERSION,
            'Accept': accept,
        }
        if self._cfg.github_token:
            headers['Authorization'] = f'Bearer {self._cfg.github_token}'
        return headers

    def get(self, url: str, *, accept: str) -> FetchResponse:
        trace_io(self._log, 'GET', url=url, accept=accept)
        return self._http.request(
            FetchRequest(
                method='GET',
                url=url,
                headers=self._headers(accept),
                timeout=self._cfg.github_timeout,
                max_bytes=self._cfg.max_fetch_bytes,
            )
        )


class GitHubTreeCollector:
    """Collects every file below a GitHub spec into the output parts."""

    def __init__(
        self,
        config: PullConfig,
        *,
        transport: HTTPTransportProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config
        self._log = logger or get_logger('github')
        self._client = GitHubContentsClient(config, transport=transport, logger=self._log)

    def collect(self, spec: RemoteSpec, parts: List[str]) -> None:
        parts.append(f'{GITHUB_HEADER}{spec.label}\n')

        stack: List[Tuple[str, str]] = [(_WALK, spec.path)]
        while stack:
            kind, repo_path = stack.pop()
            if kind == _FETCH:
                self.fetch_file(spec, repo_path, parts)
                continue
            stack.extend(reversed(self._expand(spec, repo_path)))

    def _expand(self, spec: RemoteSpec, repo_path: str) -> List[Tuple[str, str]]:
        """List *repo_path* and return the follow-up tasks in API order."""
        url = self._client.contents_url(spec.owner, spec.repo, spec.ref, repo_path)
        try:
            resp = self._client.get(url, accept=ACCEPT_JSON)
        except PullError as exc:
            raise RemoteError(f'github: request failed: {exc}') from exc

        try:
            body = ensure_within_limit(resp.body, self._cfg.max_fetch_bytes)
        except ResponseTooLargeError as exc:
            raise RemoteError(f'github: response too large at {url}: {exc}') from exc

        if not resp.ok:
            msg = extract_message(body)
            if msg:
                raise RemoteError(f'github: {msg} ({resp.status_text})')
            raise RemoteError(f'github: bad status {resp.status_text}')

        text = body.strip()
        if not text:
            return []

        try:
            payload = json.loads(text.decode('utf-8'))
        except ValueError as exc:
            raise RemoteError(f'github: decode content failed: {exc}') from exc

        if isinstance(payload, list):
            tasks: List[Tuple[str, str]] = []
            for row in payload:
                if not isinstance(row, dict):
                    continue
                entry = ContentEntry.from_json(row)
                if entry.type is EntryType.DIR:
                    if _same_path(entry.path, repo_path):
                        self._log.debug('skipping self-referencing dir entry %r under %r', entry.path, repo_path)
                        continue
                    tasks.append((_WALK, entry.path))
                elif entry.type is EntryType.FILE:
                    tasks.append((_FETCH, entry.path))
                else:
                    self._log.debug('skipping %s entry %s', entry.raw_type or 'unknown', entry.path)
            return tasks

        if not isinstance(payload, dict):
            raise RemoteError(f'github: decode content failed: unexpected JSON at {url}')

        single = ContentEntry.from_json(payload)
        if single.type is EntryType.DIR:
            if _same_path(single.path, repo_path):
                return []
            return [(_WALK, single.path)]
        if single.type is EntryType.FILE:
            return [(_FETCH, single.path)]
        raise RemoteError(
            f'github: unsupported content type {single.raw_type!r} at {spec.owner}/{spec.repo}:{repo_path}'
        )

    def fetch_file(self, spec: RemoteSpec, repo_path: str, parts: List[str]) -> None:
        """Fetch one file with the raw media type and append its filtered lines."""
        url = self._client.contents_url(spec.owner, spec.repo, spec.ref, repo_path)
        try:
            resp = self._client.get(url, accept=ACCEPT_RAW)
        except PullError as exc:
            raise RemoteError(f'github: raw fetch failed for {repo_path}: {exc}') from exc

        if not resp.ok:
            msg = extract_message(resp.body)
            if msg:
                raise RemoteError(f'github: {msg} ({resp.status_text})')
            raise RemoteError(f'github: raw fetch bad status for {repo_path}: {resp.status_text}')

        limit = self._cfg.max_fetch_bytes
        try:
            data = ensure_within_limit(resp.body, limit)
        except ResponseTooLargeError as exc:
            raise RemoteError(f'github: file too large {repo_path} (>{limit} bytes)') from exc

        parts.append(f'{FILE_HEADER}{spec.file_label(repo_path)}\n')
        parts.extend(filter_lines(data))
        self._log.debug('✔ fetched %s (%d bytes)', spec.file_label(repo_path), len(data))
