"""Ingredient name normalization.

Reduces free-text ingredient or inventory names ("2 cups fresh chopped spinach",
"Baby Spinach (washed)") to a comparable core ("spinach").
"""
from __future__ import annotations
import re
from typing import Any

from mealmatch.utilities.constants import ARTICLES, DESCRIPTORS, HEDGE_WORDS, MEASUREMENT_UNITS

__all__ = ["normalize"]


def _word_alternation(words) -> str:
    # Longest first so "extra-virgin" is consumed before "virgin"
    ordered = sorted(set(words), key=lambda w: (-len(w), w))
    return "|".join(re.escape(w) for w in ordered)


_PARENS_RE = re.compile(r"\([^)]*\)")
_BRACKETS_RE = re.compile(r"\[[^\]]*\]")
_HEDGE_RE = re.compile(rf"\b(?:{_word_alternation(HEDGE_WORDS)})\b", re.IGNORECASE)
_DESCRIPTOR_RE = re.compile(rf"\b(?:{_word_alternation(DESCRIPTORS)})\b", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")

_QTY = r"(?:\d*[½⅓⅔¼¾⅛]|\d+(?:[.,/]\d+)?)"
_UNITS = _word_alternation(MEASUREMENT_UNITS)
_LEADING_QUANTITY_RE = re.compile(
    rf"^{_QTY}(?:\s*(?:-|to)\s*{_QTY})?(?:\s+|(?=(?:{_UNITS})\b))"
)
_LEADING_UNIT_RE = re.compile(rf"^(?:{_UNITS})\.?\s+")
_LEADING_ARTICLE_RE = re.compile(rf"^(?:{_word_alternation(ARTICLES)})\s+")


def _strip_leading(pattern: re.Pattern, text: str) -> str:
    """Drop a leading match of pattern, unless nothing would be left after it."""
    m = pattern.match(text)
    if not m:
        return text
    rest = text[m.end():].strip()
    return rest if rest else text


def _strip_leading_tokens(text: str) -> str:
    while True:
        before = text
        for pattern in (_LEADING_QUANTITY_RE, _LEADING_UNIT_RE, _LEADING_ARTICLE_RE):
            text = _strip_leading(pattern, text)
        if text == before:
            return text


def normalize(name: Any) -> str:
    """Return the core ingredient for a free-text name.

    Never raises and never returns an empty string for non-empty input: when
    every token is stripped away the original input is returned unchanged.
    """
    if name is None:
        return ""
    original = name if isinstance(name, str) else str(name)

    core = original.lower().strip()
    core = _PARENS_RE.sub("", core)
    core = _BRACKETS_RE.sub("", core)
    core = _HEDGE_RE.sub("", core)
    core = _DESCRIPTOR_RE.sub("", core)
    core = _WHITESPACE_RE.sub(" ", core).strip()
    core = _strip_leading_tokens(core)

    return core or original
