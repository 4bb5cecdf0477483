from __future__ import annotations

from pullclip.cli import PullClip, main
from pullclip.core.errors import PullError
from pullclip.discovery.github_spec import looks_like_github_spec, parse_github_spec
from pullclip.parsing.parser import Invocation, parse_invocation
from pullclip.processing.line_filter import filter_lines, filter_text
from pullclip.processing.merge import build_with_clipboard_modes
from pullclip.runtime.config import PullConfig
from pullclip.runtime.driver import Aggregator

__version__ = '1.0.0'

__all__ = [
    'PullClip',
    'PullError',
    'PullConfig',
    'Aggregator',
    'Invocation',
    'main',
    'parse_invocation',
    'looks_like_github_spec',
    'parse_github_spec',
    'filter_lines',
    'filter_text',
    'build_with_clipboard_modes',
]
