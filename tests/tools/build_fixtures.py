#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates / refreshes the fixture tree used by the pullclip
test-suite.

Idempotent and 100 % Python.
"""
from __future__ import annotations

import shutil
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()
FIX = ROOT  # alias used by the tests


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


def _write_bytes(path: Path, body: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(body)


# ───────────────────── source files ─────────────────────
def _populate_sources() -> None:
    src = ROOT / "src/module"
    oth = ROOT / "src/other"

    _write(ROOT / ".gitignore", """
        build/
        *.log
        secret.txt
    """)

    _write(src / "alpha.py", """
        # simple comment
        import os

        def alpha():
            return 1  # trailing
    """)

    _write(src / "notes.txt", """
        # heading comment

        real note line
    """)

    _write(oth / "beta.js", """
        // line comment
        export const beta = () => {
          return 2;
        };
    """)

    _write_bytes(oth / "crlf.txt", b"first\r\n\r\n# skipped\r\nsecond\r\n")

    _write(oth / "debug.log", """
        LOG_ONLY entry
    """)

    _write(ROOT / "secret.txt", """
        SECRET_ONLY value
    """)

    # Everything below build/ is pruned at directory level.
    _write(ROOT / "build/output.js", """
        BUILD_ONLY artifact
    """)
    _write(ROOT / "build/deep/keep.py", """
        BUILD_DEEP_ONLY = True
    """)


# ──────────────────────────── main ────────────────────────────
def main() -> None:  # pragma: no cover
    if ROOT.exists():
        shutil.rmtree(ROOT)
    print(f"⚙️  Rebuilding fixture tree → {ROOT}")
    _populate_sources()
    print("✅  Fixture tree READY")


if __name__ == "__main__":  # pragma: no cover
    main()
