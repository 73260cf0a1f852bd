from __future__ import annotations

import pytest

from core.domain.models import FieldSpec
from core.formatter import INDENT_UNIT, SENTINEL, lookup, render_record, wrap_text

RECORD = {
    "Title": "Heat",
    "Year": 1995,
    "Ratings": [{"Value": "8.3/10"}],
    "Poster": None,
    "nested": {"list": [{"deep": "value"}]},
}


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (("Title",), (True, "Heat")),
        (("Year",), (True, 1995)),
        (("Ratings", 0, "Value"), (True, "8.3/10")),
        (("nested", "list", 0, "deep"), (True, "value")),
        ((), (True, RECORD)),
    ],
)
def test_lookup_found(path, expected):
    assert lookup(RECORD, path) == expected


@pytest.mark.parametrize(
    "path",
    [
        ("Missing",),
        ("Ratings", 1, "Value"),
        ("Ratings", -1, "Value"),
        ("Ratings", "0"),
        ("Title", 0),
        ("Title", "length"),
        ("nested", "missing", 0),
        ("Poster",),
        ("Poster", "url"),
    ],
)
def test_lookup_not_found(path):
    assert lookup(RECORD, path) == (False, None)


@pytest.mark.parametrize("record", [None, "text", 42, [], {}])
def test_lookup_on_unusable_records(record):
    assert lookup(record, ("Title",)) == (False, None)


def test_wrap_breaks_at_nearest_space_before_column():
    text = "word " * 15 + "supercalifragilistic" + " tail"
    assert text[80] not in (" ",)

    wrapped = wrap_text(text, indent=2)
    first, rest = wrapped.split("\n", 1)

    assert len(first) <= 80
    assert text.rfind(" ", 0, 81) == len(first)
    assert rest.startswith(INDENT_UNIT * 2)
    assert not rest.startswith(INDENT_UNIT * 2 + " ")
    assert first + " " + rest[len(INDENT_UNIT * 2):] == text


def test_wrap_uses_space_exactly_at_column():
    text = "a" * 80 + " " + "b" * 10
    assert wrap_text(text, indent=1) == "a" * 80 + "\n" + INDENT_UNIT + "b" * 10


def test_wrap_indent_count_is_configurable():
    text = "x" * 70 + " " + "y" * 30
    assert wrap_text(text, indent=0).split("\n")[1] == "y" * 30
    assert wrap_text(text, indent=3).split("\n")[1] == INDENT_UNIT * 3 + "y" * 30


def test_wrap_without_space_returns_text_unchanged():
    text = "z" * 120
    assert wrap_text(text, indent=2) == text


def test_wrap_ignores_space_at_index_zero():
    text = " " + "z" * 120
    assert wrap_text(text, indent=2) == text


def test_wrap_leaves_short_text_alone():
    text = "Short plot with spaces."
    assert wrap_text(text, indent=2) == text
    assert wrap_text("q" * 78 + " r", indent=2) == "q" * 78 + " r"


SPECS = (
    FieldSpec(label="Movie Title", path=("Title",)),
    FieldSpec(label="Release Year", path=("Year",)),
    FieldSpec(label="IMDB Rating", path=("Ratings", 0, "Value")),
    FieldSpec(label="Rotten Tomatoes Rating", path=("Ratings", 1, "Value")),
    FieldSpec(label="Plot", path=("Plot",), wrap_indent=1),
)


def test_render_record_is_total_and_ordered():
    lines = render_record(RECORD, SPECS)

    assert [line.label for line in lines] == [spec.label for spec in SPECS]
    assert [line.value for line in lines] == ["Heat", "1995", "8.3/10", SENTINEL, SENTINEL]


@pytest.mark.parametrize("record", [None, {}, [], "garbage", {"Ratings": None}])
def test_render_record_with_nothing_usable(record):
    lines = render_record(record, SPECS)

    assert len(lines) == len(SPECS)
    assert all(line.value == SENTINEL for line in lines)


def test_render_record_wraps_only_flagged_fields():
    long_text = "lorem ipsum " * 12
    record = {"Title": long_text, "Plot": long_text}

    lines = render_record(record, SPECS)

    assert "\n" not in lines[0].value
    assert lines[4].value == wrap_text(long_text, indent=1)
    assert "\n" in lines[4].value


def test_render_record_is_idempotent():
    assert render_record(RECORD, SPECS) == render_record(RECORD, SPECS)


def test_rendered_line_text():
    (line,) = render_record(RECORD, SPECS[:1])
    assert line.text == "Movie Title: Heat"
