"""Small string transforms shared by endpoints and services."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def slugify(value: str) -> str:
    """URL slug for titled content: ``"Fiscal Policy 2.0!"`` -> ``"fiscal-policy-2-0"``."""
    return _NON_ALNUM.sub("-", value.lower()).strip("-")


def hyphenate(value: str) -> str:
    """Slug for tags and categories; only whitespace is replaced."""
    return _WHITESPACE.sub("-", value.lower())
