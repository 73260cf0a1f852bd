"""Append-only text log.

Each call opens the file once in append mode and writes every line with a
leading newline. The file is never truncated or rotated here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def append_log_entry(*, path: Path, lines: Iterable[str]) -> Path:
    payload = "".join(f"\n{line}" for line in lines)
    if not payload:
        return path
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(payload)
    return path
