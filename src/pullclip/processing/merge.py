from __future__ import annotations

"""Clipboard merge policy.

Composes the final clipboard text from freshly produced content and, when
requested, the clipboard content that was present before the run:

    append   prior + "\\n"? + new
    prepend  new + "\\n"? + prior
    both     prior(seed) + new + prior(attached)

Both clipboard reads happen before `produce` runs, so new content never ends
up interleaved with old content. Failed reads count as an empty clipboard.
"""

import logging
from typing import Callable, List, Optional

from pullclip.core.errors import ClipboardError
from pullclip.core.interfaces.clipboard import ClipboardProtocol
from pullclip.logging.helpers import get_logger

Producer = Callable[[List[str]], None]


def _read_lenient(clipboard: ClipboardProtocol, log: logging.Logger) -> str:
    try:
        return clipboard.read() or ''
    except ClipboardError as exc:
        log.debug('clipboard read failed, treating as empty: %s', exc)
        return ''


def build_with_clipboard_modes(
    clipboard: ClipboardProtocol,
    *,
    append_mode: bool,
    prepend_mode: bool,
    produce: Producer,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Run *produce* and merge its output with prior clipboard content.

    Args:
        clipboard: Source of the prior content.
        append_mode: Seed the output with the prior content.
        prepend_mode: Attach the prior content after the new content.
        produce: Callback appending segments to the list it receives. Any
            exception it raises aborts the merge and propagates unchanged.
        logger: Optional logger.

    Returns:
        The merged text.
    """
    log = logger or get_logger('merge')
    parts: List[str] = []

    if append_mode:
        current = _read_lenient(clipboard, log)
        if current:
            parts.append(current)
            if not current.endswith('\n'):
                parts.append('\n')

    previous = ''
    if prepend_mode:
        previous = _read_lenient(clipboard, log)

    produce(parts)

    final = ''.join(parts)
    if prepend_mode and previous:
        if final and not final.endswith('\n'):
            final += '\n'
        final += previous
    return final
