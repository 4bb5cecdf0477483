from __future__ import annotations

"""Public surface for pullclip.core.

Protocol types, data models and the error hierarchy are re-exported here to
give downstream code one stable import location.
"""

from pullclip.core.errors import (
    ClipboardError,
    FetchError,
    PullError,
    RemoteError,
    ResponseTooLargeError,
    SpecError,
    UsageError,
)
from pullclip.core.interfaces import (
    ClipboardProtocol,
    HTTPTransportProtocol,
    IgnoreMatcherProtocol,
)
from pullclip.core.models import (
    ContentEntry,
    EntryType,
    FetchRequest,
    FetchResponse,
    LocalOperand,
    Operand,
    RemoteOperand,
    RemoteSpec,
)

__all__ = [
    "ClipboardError",
    "FetchError",
    "PullError",
    "RemoteError",
    "ResponseTooLargeError",
    "SpecError",
    "UsageError",
    "ClipboardProtocol",
    "HTTPTransportProtocol",
    "IgnoreMatcherProtocol",
    "ContentEntry",
    "EntryType",
    "FetchRequest",
    "FetchResponse",
    "LocalOperand",
    "Operand",
    "RemoteOperand",
    "RemoteSpec",
]
