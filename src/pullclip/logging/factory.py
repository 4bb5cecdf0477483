from __future__ import annotations

import logging
from typing import Optional, TextIO

from pullclip.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Hands out ``pullclip.*`` loggers, configuring the base handler on first use."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self.stream = stream
        self._ready = False

    def get_logger(self, name: str) -> logging.Logger:
        if not self._ready:
            setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self.stream)
            self._ready = True
        return get_logger(name)
