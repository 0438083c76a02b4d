"""Unit tests for the slug helpers."""

from rethinking_econ.core.text import hyphenate, slugify


def test_slugify_collapses_punctuation() -> None:
    assert slugify("Fiscal Policy 2.0!") == "fiscal-policy-2-0"


def test_slugify_trims_leading_and_trailing_separators() -> None:
    assert slugify("  -- Heterodox Economics --  ") == "heterodox-economics"


def test_slugify_empty_string() -> None:
    assert slugify("") == ""


def test_hyphenate_only_replaces_whitespace() -> None:
    """Tag slugs keep punctuation, only whitespace becomes a hyphen."""
    assert hyphenate("Post Keynesian") == "post-keynesian"
    assert hyphenate("R&D  Policy") == "r&d-policy"


def test_hyphenate_lowercases() -> None:
    assert hyphenate("MMT") == "mmt"
