from __future__ import annotations
from typing import Protocol, runtime_checkable

from pullclip.core.models import FetchRequest, FetchResponse


@runtime_checkable
class HTTPTransportProtocol(Protocol):
    """Synchronous request/response transport.

    Non-2xx responses are returned, not raised; connection failures raise
    :class:`pullclip.core.errors.PullError` subclasses.
    """

    def request(self, req: FetchRequest) -> FetchResponse:
        ...
