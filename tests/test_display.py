"""Tests for quote rendering."""

from datetime import datetime, timezone

from quote_it.display import SEPARATOR, format_quote
from quote_it.models import Quote

WHEN = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


def test_text_only():
    assert format_quote(Quote(text="Hi")) == f'"Hi"\n{SEPARATOR}'


def test_author_and_date():
    quote = Quote(text="Javascript sucks", author="Person with common sense", timestamp=WHEN)
    assert format_quote(quote) == (
        '"Javascript sucks"\n'
        "  - Person with common sense on 10-19-2026\n"
        "------------"
    )


def test_date_without_author():
    assert format_quote(Quote(text="Hi", timestamp=WHEN)).splitlines()[1] == "  - on 10-19-2026"


def test_custom_date_format():
    out = format_quote(Quote(text="Hi", author="A", timestamp=WHEN), "%Y-%m-%d")
    assert "  - A on 2026-10-19" in out


def test_embedded_quotes_are_escaped():
    assert format_quote(Quote(text='say "hi"')).startswith('"say \\"hi\\""')


def test_colors_when_enabled(monkeypatch):
    monkeypatch.delenv("NO_COLOR")
    out = format_quote(Quote(text="Hi", author="A"))
    assert "\033[" in out


def test_control_characters_are_escaped():
    out = format_quote(Quote(text="line one\nline two\tend\x1b"))
    first, separator = out.splitlines()
    assert first == '"line one\\nline two\\tend\\u{1b}"'
    assert separator == SEPARATOR
