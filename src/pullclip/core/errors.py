"""Exception hierarchy for pullclip.

Every fatal condition surfaces as a :class:`PullError` subclass whose message
is printed verbatim by the CLI before exiting with status 1.
"""


class PullError(Exception): ...
class UsageError(PullError): ...
class SpecError(PullError): ...
class RemoteError(PullError): ...
class FetchError(PullError): ...
class ClipboardError(PullError): ...


class ResponseTooLargeError(PullError):
    def __init__(self, limit: int) -> None:
        super().__init__(f'response too large (exceeds {limit} bytes)')
        self.limit = limit


def ensure_within_limit(body: bytes, limit: int) -> bytes:
    """Return *body* unchanged or raise when it is longer than *limit* bytes."""
    if len(body) > limit:
        raise ResponseTooLargeError(limit)
    return body
