"""Text normalization for robust description matching.

Normalization steps, in order:
1. Lowercase.
2. Fold full-width Latin letters and digits to half-width.
3. Drop everything that is not an ASCII word character, whitespace, or
   Hiragana/Katakana/Kanji.
4. Remove all whitespace.
"""

import re

_FULL_WIDTH_ALNUM = re.compile(r"[Ａ-Ｚａ-ｚ０-９]")
_FULL_WIDTH_OFFSET = 0xFEE0
# ASCII word characters only, plus the Japanese ranges
_SYMBOLS = re.compile(r"[^A-Za-z0-9_\sぁ-んァ-ヶー一-龯]")
_WHITESPACE = re.compile(r"\s+")


def _to_half_width(match: re.Match) -> str:
    return chr(ord(match.group(0)) - _FULL_WIDTH_OFFSET)


def normalize_width(text: str) -> str:
    """Fold full-width Latin letters and digits to half-width."""
    return _FULL_WIDTH_ALNUM.sub(_to_half_width, text)


def strip_symbols(text: str) -> str:
    """Keep ASCII letters, digits, underscore, whitespace and Japanese script only."""
    return _SYMBOLS.sub("", text)


def normalize(text: str) -> str:
    """Canonicalize text for comparison.

    Args:
        text: Free text such as a transaction description.

    Returns:
        The normalized string. Never raises.
    """
    text = strip_symbols(normalize_width(text.lower()))
    return _WHITESPACE.sub("", text).strip()


def includes(haystack: str, needle: str) -> bool:
    """True if normalized needle is a substring of normalized haystack.

    An empty needle is always contained.
    """
    return normalize(needle) in normalize(haystack)


def equals(a: str, b: str) -> bool:
    """True if both strings normalize to the same value."""
    return normalize(a) == normalize(b)
