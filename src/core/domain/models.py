"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to I/O libraries.
- Commands and field specs are immutable once built from process input.

Note:
- API records are *not* modelled here. Their shape belongs to third parties;
  the formatter reads them through optional paths instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

PathKey = Union[str, int]


class HandlerKey(str, Enum):
    """Closed set of routines a command token can select."""

    LATEST_POSTS = "fetch-latest-posts"
    SEARCH_TRACK = "search-track"
    SEARCH_MOVIE = "search-movie"
    REPLAY = "replay-stored-command"
    HELP = "show-help"
    VERSION = "show-version"


class CommandResolution(BaseModel):
    """A raw command token resolved to its handler, plus the joined argument."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        ...,
        min_length=1,
        description="Token exactly as the user typed it.",
    )
    handler: HandlerKey = Field(
        ...,
        description="Routine selected by the token.",
    )
    argument: str = Field(
        default="",
        description="Free text after the command (query or identifier); may be empty.",
    )


class StoredCommand(BaseModel):
    """One `command,argument` pair read back from the stored-command file."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(..., description="Raw command token.")
    argument: str = Field(default="", description="Argument text, possibly empty.")


class FieldSpec(BaseModel):
    """Declarative description of one output line."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(
        ...,
        min_length=1,
        description="Human readable label printed before the value.",
    )
    path: tuple[PathKey, ...] = Field(
        ...,
        description="Keys (str) and list indexes (int) leading to the value.",
    )
    wrap_indent: int | None = Field(
        default=None,
        ge=0,
        description="Indent units for the wrapped remainder; None disables wrapping.",
    )


class RenderedLine(BaseModel):
    """A label with its extracted (or sentinel) value."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}"
