from .clipboard import ClipboardProtocol
from .ignore import IgnoreMatcherProtocol
from .net import HTTPTransportProtocol

__all__ = [
    'ClipboardProtocol',
    'IgnoreMatcherProtocol',
    'HTTPTransportProtocol',
]
