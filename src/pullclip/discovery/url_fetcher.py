from __future__ import annotations
"""
Single-URL fetching for the `href` command.

Each URL is fetched once (no crawling) and appended verbatim under an
``href: <url>`` header. The line filter is not applied: web content is kept
as returned.
"""
import logging
from typing import List, Optional

from pullclip.constants import HREF_HEADER
from pullclip.core.errors import FetchError, PullError, ResponseTooLargeError, ensure_within_limit
from pullclip.core.interfaces.net import HTTPTransportProtocol
from pullclip.core.models import FetchRequest
from pullclip.logging.helpers import get_logger, trace_io
from pullclip.runtime.config import PullConfig


def normalize_url(s: str) -> str:
    """Trim *s* and prefix ``https://`` unless it already carries an http(s) scheme."""
    s = (s or '').strip()
    if not s:
        return s
    if s.startswith(('http://', 'https://')):
        return s
    return 'https://' + s


class UrlFetcher:
    def __init__(
        self,
        config: PullConfig,
        *,
        transport: HTTPTransportProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config
        self._http = transport
        self._log = logger or get_logger('url_fetcher')

    def fetch(self, raw_url: str, parts: List[str]) -> None:
        """Fetch *raw_url* and append its header plus raw body to *parts*."""
        url = normalize_url(raw_url)
        trace_io(self._log, 'GET', url=url)
        try:
            resp = self._http.request(
                FetchRequest(
                    method='GET',
                    url=url,
                    headers={'User-Agent': self._cfg.user_agent},
                    timeout=self._cfg.href_timeout,
                    max_bytes=self._cfg.max_fetch_bytes,
                )
            )
        except PullError as exc:
            raise FetchError(f'href: request failed for {url!r}: {exc}') from exc

        if not resp.ok:
            raise FetchError(f'href: bad status for {url!r}: {resp.status_text}')

        try:
            body = ensure_within_limit(resp.body, self._cfg.max_fetch_bytes)
        except ResponseTooLargeError as exc:
            raise FetchError(f'href: reading body for {url!r} failed: {exc}') from exc

        parts.append(f'{HREF_HEADER}{url}\n')
        text = body.decode('utf-8', errors='replace')
        parts.append(text)
        if text and not text.endswith('\n'):
            parts.append('\n')
        self._log.debug('✔ fetched %s (%d bytes)', url, len(body))
