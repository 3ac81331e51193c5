"""Content heuristics for literal text.

Pure string predicates: nothing here knows about syntax trees.
"""

import re
from collections.abc import Iterable

# Starts with a capital letter, or has a whitespace-separated word boundary
_HUMAN_TEXT_RE = re.compile(r"((^[A-Z]{1}.*?)|(\w*?\s\w*?.*?))")
_LOWERCASE_RE = re.compile(r"[a-z]")

# Always the first whitelist pattern: strings without any Latin letter
NO_LETTERS_PATTERN = r"^[^A-Za-z]+$"

# Entities and their decoded characters that may stand alone in markup
ALLOWED_MARKUP_SYMBOLS = frozenset({
    "&larr;",
    "&rarr;",
    "&nbsp;",
    "&middot;",
    "\u2190",
    "\u2192",
    "\u00a0",
    "\u00b7",
})


def is_trivial_or_empty(text: str) -> bool:
    """True if ``text`` is empty or whitespace only."""
    return not text.strip()


def is_all_upper(text: str) -> bool:
    """True if ``text`` is unchanged by upper-casing and has a letter.

    Constant-style values and identifiers such as ``API_URL`` or ``"OK"``.
    """
    return text.upper() == text and any(ch.isalpha() for ch in text)


def looks_like_human_text(text: str) -> bool:
    """Check whether ``text`` reads like prose rather than a code token.

    Args:
        text: Normalized literal content.

    Returns:
        True if the text starts with an uppercase letter or contains a
        whitespace word boundary, and has at least one lowercase letter.
    """
    return bool(text) and bool(_HUMAN_TEXT_RE.search(text)) and bool(_LOWERCASE_RE.search(text))


def matches_any_whitelist_pattern(text: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    """True if any compiled pattern is found in ``text``."""
    return any(pattern.search(text) for pattern in patterns)


def is_allowed_markup_symbol(text: str) -> bool:
    return text in ALLOWED_MARKUP_SYMBOLS
