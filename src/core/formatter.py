"""Field extraction and text layout for API records.

Records come straight from third-party JSON and any part of them may be
missing. `lookup` walks an optional path and reports found/not-found instead
of raising, so one absent field turns into `SENTINEL` without touching its
siblings.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Iterable

from core.domain.models import FieldSpec, PathKey, RenderedLine

SENTINEL = "n/a"
WRAP_COLUMN = 80
# Spaces rather than tabs: console rendering expands tabs, the log file would not.
INDENT_UNIT = "    "


def lookup(record: Any, path: Iterable[PathKey]) -> tuple[bool, Any]:
    """Resolve `path` against `record`.

    Returns `(True, value)` when every step exists and the leaf is not null,
    `(False, None)` otherwise (null record, missing key, index out of range,
    or a step that hits a scalar).
    """

    current = record
    for key in path:
        if current is None:
            return False, None
        if isinstance(key, int) and not isinstance(key, bool):
            if isinstance(current, (str, bytes)) or not isinstance(current, Sequence):
                return False, None
            if key < 0 or key >= len(current):
                return False, None
            current = current[key]
        else:
            if not isinstance(current, Mapping) or key not in current:
                return False, None
            current = current[key]
    if current is None:
        return False, None
    return True, current


def wrap_text(text: str, indent: int, column: int = WRAP_COLUMN) -> str:
    """Break `text` once at the nearest space at or before `column`.

    The space becomes a newline followed by `indent` indent units. Text that
    already fits, or that has no usable space, is returned unchanged.
    """

    if len(text) <= column:
        return text
    for i in range(column, 0, -1):
        if text[i] == " ":
            return text[:i] + "\n" + INDENT_UNIT * indent + text[i + 1 :]
    return text


def render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_field(record: Any, spec: FieldSpec) -> RenderedLine:
    found, value = lookup(record, spec.path)
    if not found:
        return RenderedLine(label=spec.label, value=SENTINEL)
    text = render_value(value)
    if spec.wrap_indent is not None:
        text = wrap_text(text, spec.wrap_indent)
    return RenderedLine(label=spec.label, value=text)


def render_record(record: Any, specs: Sequence[FieldSpec]) -> list[RenderedLine]:
    """One line per spec, in declared order, whatever the record holds."""

    return [render_field(record, spec) for spec in specs]
