"""
adapters.clipboard – System clipboard backed by :mod:`pyperclip`.
"""

from dataclasses import dataclass

import pyperclip

from pullclip.core.errors import ClipboardError
from pullclip.core.interfaces.clipboard import ClipboardProtocol


@dataclass
class PyperclipClipboard(ClipboardProtocol):
    """ClipboardProtocol implementation delegating to pyperclip.

    pyperclip failures (no clipboard mechanism on a headless host, backend
    command errors) are converted to :class:`ClipboardError`.
    """

    def read(self) -> str:
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f'Error reading clipboard: {exc}') from exc
        return content or ''

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f'Error writing to clipboard: {exc}') from exc
