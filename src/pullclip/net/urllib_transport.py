from __future__ import annotations

"""HTTP transport implementation using urllib.

The transport is intentionally minimal and synchronous. It supports:
- Custom User-Agent via constructor.
- Bounded body reads (`FetchRequest.max_bytes`): at most one byte past the
  limit is read so callers can reject oversize bodies without buffering them.
- Non-2xx statuses are returned as regular responses instead of raising.
"""

import socket
import urllib.error
import urllib.request
from typing import Optional

from pullclip.core.errors import PullError
from pullclip.core.interfaces.net import HTTPTransportProtocol
from pullclip.core.models import FetchRequest, FetchResponse


class TransportError(PullError):
    """Connection-level failure (DNS, refused connection, timeout, bad URL)."""


def _read_body(stream, max_bytes: Optional[int]) -> bytes:
    if max_bytes is None:
        return stream.read()
    return stream.read(max_bytes + 1)


class UrllibHTTPTransport(HTTPTransportProtocol):
    """urllib-based HTTP transport that satisfies HTTPTransportProtocol."""

    def __init__(self, *, user_agent: Optional[str] = None) -> None:
        self._ua = user_agent

    def request(self, req: FetchRequest) -> FetchResponse:
        """Perform an HTTP request and return a FetchResponse."""
        headers = dict(req.headers or {})
        if self._ua and "User-Agent" not in headers:
            headers["User-Agent"] = self._ua

        try:
            url_req = urllib.request.Request(req.url, data=req.body, headers=headers, method=req.method or "GET")
        except ValueError as exc:
            raise TransportError(f"invalid url {req.url!r}: {exc}") from exc
        timeout = float(req.timeout) if req.timeout is not None else 30.0

        try:
            with urllib.request.urlopen(url_req, timeout=timeout) as resp:  # nosec B310 (intended usage)
                body = _read_body(resp, req.max_bytes)
                status = getattr(resp, "status", None) or int(resp.getcode())
                return FetchResponse(
                    status=status,
                    headers=dict(resp.headers.items()),
                    body=body,
                    final_url=resp.geturl(),
                    reason=str(getattr(resp, "reason", "") or ""),
                )
        except urllib.error.HTTPError as exc:
            try:
                body = _read_body(exc, req.max_bytes)
            except OSError:
                body = b""
            finally:
                exc.close()
            return FetchResponse(
                status=exc.code,
                headers=dict(exc.headers.items()) if exc.headers else {},
                body=body,
                final_url=exc.geturl() or req.url,
                reason=str(exc.reason or ""),
            )
        except (urllib.error.URLError, socket.timeout, OSError) as exc:
            reason = getattr(exc, "reason", None) or exc
            raise TransportError(str(reason)) from exc
