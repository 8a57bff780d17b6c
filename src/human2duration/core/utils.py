"""Core utility functions.

Provides the string normalization helpers shared by the parser and its
directional wrappers.
"""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def strip_prefix_ignore_case(text: str, prefix: str) -> str:
    """Remove *prefix* from the start of *text* once, ignoring case.

    Example:
        >>> strip_prefix_ignore_case("In 2h", "in ")
        '2h'
        >>> strip_prefix_ignore_case("2h", "in ")
        '2h'
    """
    if text.lower().startswith(prefix.lower()):
        return text[len(prefix) :]
    return text


def strip_suffix_ignore_case(text: str, suffix: str) -> str:
    """Remove *suffix* from the end of *text* once, ignoring case.

    Example:
        >>> strip_suffix_ignore_case("5 minutes AGO", " ago")
        '5 minutes'
    """
    if suffix and text.lower().endswith(suffix.lower()):
        return text[: len(text) - len(suffix)]
    return text


def normalize(text: str) -> str:
    """Trim and lowercase an expression."""
    return text.strip().lower()


def compact(text: str) -> str:
    """Remove every whitespace character from *text*."""
    return _WHITESPACE_RE.sub("", text)
