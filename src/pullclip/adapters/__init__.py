"""
adapters – Concrete bindings of pullclip Protocols to third-party libraries.
"""

from .clipboard import PyperclipClipboard

__all__ = [
    "PyperclipClipboard",
]
