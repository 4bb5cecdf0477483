from __future__ import annotations

"""Aggregation driver.

Dispatches one parsed :class:`Invocation` to its action:

    clear | emit | write <path> | href <url...> | collect-and-merge

Collect-and-merge classifies every operand up front, then runs the local or
GitHub collector for each one strictly in argument order inside the clipboard
merge policy. The clipboard is written only after every operand succeeded.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from pullclip.core.errors import PullError, UsageError
from pullclip.core.interfaces.clipboard import ClipboardProtocol
from pullclip.core.interfaces.ignore import IgnoreMatcherProtocol
from pullclip.core.interfaces.net import HTTPTransportProtocol
from pullclip.core.models import LocalOperand, Operand, RemoteOperand
from pullclip.discovery.github_contents import GitHubTreeCollector
from pullclip.discovery.ignore import load_ignore_for_cwd
from pullclip.discovery.url_fetcher import UrlFetcher
from pullclip.io.walker import LocalTreeCollector
from pullclip.logging.helpers import get_logger
from pullclip.parsing.parser import CMD_CLEAR, CMD_EMIT, CMD_HREF, CMD_WRITE, USAGE, Invocation
from pullclip.processing.input_classifier import DefaultInputClassifier
from pullclip.processing.merge import build_with_clipboard_modes
from pullclip.runtime.config import PullConfig


class Aggregator:
    """Runs a single invocation against injected clipboard and HTTP transport."""

    def __init__(
        self,
        config: PullConfig,
        *,
        clipboard: ClipboardProtocol,
        transport: HTTPTransportProtocol,
        matcher: Optional[IgnoreMatcherProtocol] = None,
        stdout: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config
        self._clipboard = clipboard
        self._transport = transport
        self._matcher = matcher
        self._stdout = stdout
        self._log = logger or get_logger('driver')
        self._classifier = DefaultInputClassifier()

    @property
    def out(self) -> TextIO:
        return self._stdout or sys.stdout

    def run(self, inv: Invocation) -> str:
        """Execute *inv* and return the text that reached the sink ('' for clear)."""
        if inv.show_help or (not inv.command and not inv.operands):
            self.out.write(USAGE)
            return ''
        if inv.command == CMD_CLEAR:
            return self.clear()
        if inv.command == CMD_EMIT:
            return self.emit()
        if inv.command == CMD_WRITE:
            return self.write_to_file(inv.write_target)
        if inv.command == CMD_HREF:
            return self.fetch_urls(inv)
        return self.collect(inv)

    # -------- clipboard-only actions --------

    def clear(self) -> str:
        self._clipboard.write('')
        self._log.info('Clipboard cleared.')
        return ''

    def emit(self) -> str:
        content = self._clipboard.read()
        self.out.write(content)
        self.out.flush()
        return content

    def write_to_file(self, target: str) -> str:
        if not target:
            raise UsageError('Error: Missing file path. Usage: pull write ./some_file')
        content = self._clipboard.read()
        try:
            with open(target, 'w', encoding='utf-8', newline='') as fh:
                fh.write(content)
        except OSError as exc:
            raise PullError(f'Error writing file: {exc}') from exc
        self._log.info('Clipboard content written to %s', target)
        return content

    # -------- collecting actions --------

    def fetch_urls(self, inv: Invocation) -> str:
        if not inv.operands:
            raise UsageError('Error: Missing URL(s). Usage: pull href <url> [url2 ...]')
        fetcher = UrlFetcher(self._cfg, transport=self._transport, logger=get_logger('url_fetcher'))

        def _produce(parts: List[str]) -> None:
            for raw in inv.operands:
                fetcher.fetch(raw, parts)

        return self._merge_and_commit(inv, _produce)

    def collect(self, inv: Invocation) -> str:
        operands = self._classifier.classify_all(inv.operands)
        matcher = self._matcher
        if matcher is None:
            matcher = load_ignore_for_cwd(self._cfg.cwd, logger=get_logger('ignore'))

        local = LocalTreeCollector(
            matcher=matcher,
            include_ignored=self._cfg.include_ignored or inv.include_ignored,
            logger=get_logger('walker'),
        )
        remote = GitHubTreeCollector(self._cfg, transport=self._transport, logger=get_logger('github'))

        def _produce(parts: List[str]) -> None:
            for op in operands:
                self._collect_operand(op, local, remote, parts)

        return self._merge_and_commit(inv, _produce)

    def _collect_operand(
        self,
        op: Operand,
        local: LocalTreeCollector,
        remote: GitHubTreeCollector,
        parts: List[str],
    ) -> None:
        if isinstance(op, RemoteOperand):
            remote.collect(op.spec, parts)
        elif isinstance(op, LocalOperand):
            path = op.path if op.path.is_absolute() else Path(self._cfg.cwd) / op.path
            local.collect(path, parts)
        else:  # pragma: no cover - exhaustive over Operand
            raise TypeError(f'unknown operand {op!r}')

    def _merge_and_commit(self, inv: Invocation, produce) -> str:
        final = build_with_clipboard_modes(
            self._clipboard,
            append_mode=inv.append,
            prepend_mode=inv.prepend,
            produce=produce,
            logger=get_logger('merge'),
        )
        self._clipboard.write(final)
        self._log.info('Copied to clipboard!')
        return final
