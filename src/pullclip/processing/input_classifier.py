from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from pullclip.core.models import LocalOperand, Operand, RemoteOperand
from pullclip.discovery.github_spec import looks_like_github_spec, parse_github_spec


@dataclass
class DefaultInputClassifier:
    """Map raw operand tokens to :data:`Operand` variants.

    Rules:
      - GitHub specs (github.com prefix, with or without scheme) → RemoteOperand
      - anything else → LocalOperand

    The GitHub check runs first, so a local directory literally named
    ``github.com`` is only reachable as ``./github.com``. Parsing happens
    before any I/O; an unparsable spec raises SpecError.
    """

    def classify(self, token: str) -> Operand:
        if looks_like_github_spec(token):
            return RemoteOperand(spec=parse_github_spec(token))
        return LocalOperand(path=Path(token))

    def classify_all(self, tokens: Sequence[str]) -> List[Operand]:
        return [self.classify(tok) for tok in tokens]
