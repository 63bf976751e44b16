"""Unit tests for the prose class builder."""

from __future__ import annotations

from rawsite._constants import DEFAULT_PROSE_CLASS
from rawsite.rendering.prose import STYLE_SLOTS, build_prose_class


def test_empty_style_returns_default_class() -> None:
    """No styled slots leaves only the base classes."""
    assert build_prose_class({}) == DEFAULT_PROSE_CLASS


def test_only_first_token_is_used() -> None:
    """Multi-token values keep the first token; the rest is dropped.

    Dropping the extra tokens looks unintended but is the current behaviour,
    so it is pinned here rather than changed.
    """
    result = build_prose_class({"h1": "text-xl extra", "a": ""})
    assert " prose-h1:text-xl" in result, f"missing h1 modifier in {result!r}"
    assert "extra" not in result, f"extra token leaked into {result!r}"
    assert "prose-a:" not in result, "empty values should add nothing"


def test_unmentioned_slots_produce_no_tokens() -> None:
    """Only slots present in the table appear in the output."""
    result = build_prose_class({"p": "leading-7"})
    modifiers = [token for token in result.split() if token.startswith("prose-")]
    assert modifiers == ["prose-sm", "prose-p:leading-7"], (
        f"unexpected modifiers {modifiers!r}"
    )
    assert result == f"{DEFAULT_PROSE_CLASS} prose-p:leading-7"


def test_output_follows_catalog_order() -> None:
    """Modifiers are emitted in catalog order regardless of table order."""
    result = build_prose_class({"hr": "border-2", "headings": "underline", "a": "text-red-500"})
    assert result == (
        f"{DEFAULT_PROSE_CLASS}"
        " prose-headings:underline prose-a:text-red-500 prose-hr:border-2"
    )


def test_non_string_and_unknown_slots_are_skipped() -> None:
    """Non-string values and keys outside the catalog are ignored."""
    result = build_prose_class({"h2": 3, "h3": ["text-lg"], "marquee": "fast"})
    assert result == DEFAULT_PROSE_CLASS


def test_catalog_has_twenty_six_slots() -> None:
    """The slot catalog is fixed."""
    assert len(STYLE_SLOTS) == 26
    assert STYLE_SLOTS[0] == "headings"
    assert STYLE_SLOTS[-1] == "hr"


def test_repeated_calls_are_identical() -> None:
    """The builder is pure."""
    style = {"h1": "text-4xl", "code": "text-pink-500", "img": "rounded"}
    assert build_prose_class(style) == build_prose_class(style)
