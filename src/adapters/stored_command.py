"""Stored-command file (`random.txt`).

Format: one line `command,argument`. The first comma splits; the argument
may carry one pair of surrounding quotes, e.g.
`spotify-this-song,"I Want it That Way"`.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import StoredCommand
from core.errors import StoredCommandError

_QUOTES = ('"', "'")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def parse_stored_command(text: str) -> StoredCommand:
    line = next((raw.strip() for raw in text.splitlines() if raw.strip()), "")
    command, _, argument = line.partition(",")
    return StoredCommand(command=command.strip(), argument=_unquote(argument.strip()))


def read_stored_command(path: Path) -> StoredCommand:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StoredCommandError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise StoredCommandError(path, "file is not valid UTF-8") from exc
    return parse_stored_command(text)
