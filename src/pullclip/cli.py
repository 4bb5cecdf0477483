from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, NoReturn, Optional, Sequence, TextIO

from pullclip.core.errors import PullError
from pullclip.core.interfaces.clipboard import ClipboardProtocol
from pullclip.core.interfaces.net import HTTPTransportProtocol
from pullclip.logging.factory import DefaultLoggerFactory
from pullclip.logging.helpers import get_logger, json_logs_requested
from pullclip.net.urllib_transport import UrllibHTTPTransport
from pullclip.parsing.parser import parse_invocation
from pullclip.runtime.config import PullConfig
from pullclip.runtime.driver import Aggregator


logger = get_logger('pullclip')


def _configure_logging(enable_json: bool) -> None:
    """Point the base logger at stderr in JSON or plain mode; safe to call per run."""
    DefaultLoggerFactory(json_logs=enable_json, level=logging.INFO).get_logger('pullclip')


def _default_clipboard() -> ClipboardProtocol:
    # Imported lazily so that pyperclip is only touched when a real clipboard is needed.
    from pullclip.adapters.clipboard import PyperclipClipboard

    return PyperclipClipboard()


class PullClip:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        clipboard: Optional[ClipboardProtocol] = None,
        transport: Optional[HTTPTransportProtocol] = None,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[Path] = None,
        stdout: Optional[TextIO] = None,
    ) -> str:
        """Run the tool with given argv-like sequence and return the text sent to the sink.

        Raises:
            PullError: on any fatal error; nothing has been written to the
                clipboard in that case unless the clipboard write itself failed.
        """
        env = os.environ if environ is None else environ
        json_logs = '--json-logs' in argv or json_logs_requested(env)
        _configure_logging(json_logs)

        inv = parse_invocation(argv)
        config = PullConfig.from_env(env, cwd=cwd, include_ignored=inv.include_ignored)
        aggregator = Aggregator(
            config,
            clipboard=clipboard or _default_clipboard(),
            transport=transport or UrllibHTTPTransport(user_agent=config.user_agent),
            stdout=stdout,
        )
        return aggregator.run(inv)


def main() -> NoReturn:
    """Entry point for the `pull` console script."""
    try:
        PullClip.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except PullError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
