"""
Charset Builder
================

Character-class pools for generation and the single-pass class scan used
by analysis.

Generation pools are rebuilt on every call from fixed alphabets; nothing
here caches a charset between calls. When similar-looking glyphs are
excluded, each class pool is filtered with the glyphs relevant to it and
the combined pool is filtered once more against the full ambiguous set.

The "simple entropy" proxy used throughout is ``length * log2(N)`` where
``N`` sums 26 (lowercase), 26 (uppercase), 10 (digits) and 32 (symbols)
over the classes present.
"""

from __future__ import annotations

import math
import string

from pwguard.core.models import (
    CharacterClass,
    CharacterClassFlags,
    GeneratePasswordOptions,
)

LOWERCASE: str = string.ascii_lowercase
UPPERCASE: str = string.ascii_uppercase
DIGITS: str = string.digits
SYMBOLS: str = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Glyphs that are easily confused with one another in common fonts
SIMILAR_CHARS: str = "0O1lI|"

_ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.NUMBERS: DIGITS,
    CharacterClass.SYMBOLS: SYMBOLS,
}

# Per-class ambiguous glyphs. The digit filter also lists "O" and "l",
# which never occur in the digit alphabet; the combined-pool pass makes
# the result identical either way.
_SIMILAR_BY_CLASS: dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: "0O1lI",
    CharacterClass.UPPERCASE: "0O1lI",
    CharacterClass.NUMBERS: "0O1l",
    CharacterClass.SYMBOLS: "|",
}

# Ordered mapping: enabled class -> candidate characters
ClassPools = dict[CharacterClass, str]


# ===================================================================== #
#  Generation Pools
# ===================================================================== #


def strip_similar(chars: str, similar: str = SIMILAR_CHARS) -> str:
    """Return *chars* without any character found in *similar*."""
    return "".join(c for c in chars if c not in similar)


def build_charset(options: GeneratePasswordOptions) -> ClassPools:
    """Build the per-class candidate pools for *options*.

    Classes appear in the order lowercase, uppercase, numbers, symbols,
    restricted to the enabled ones.
    """
    pools: ClassPools = {}
    for cls in options.enabled_classes:
        pool = _ALPHABETS[cls]
        if options.exclude_similar:
            pool = strip_similar(pool, _SIMILAR_BY_CLASS[cls])
        pools[cls] = pool
    return pools


def combined_pool(pools: ClassPools, exclude_similar: bool = False) -> str:
    """Concatenate every pool in *pools*, re-filtering ambiguous glyphs."""
    pool = "".join(pools.values())
    if exclude_similar:
        pool = strip_similar(pool)
    return pool


# ===================================================================== #
#  Class Scan
# ===================================================================== #


def classify_char(ch: str) -> CharacterClass:
    """Classify one character; anything not an ASCII letter or digit is a symbol."""
    if "a" <= ch <= "z":
        return CharacterClass.LOWERCASE
    if "A" <= ch <= "Z":
        return CharacterClass.UPPERCASE
    if "0" <= ch <= "9":
        return CharacterClass.NUMBERS
    return CharacterClass.SYMBOLS


def scan_character_classes(password: str) -> CharacterClassFlags:
    """Derive the class flags of *password* in a single pass."""
    seen: set[CharacterClass] = set()
    for ch in password:
        seen.add(classify_char(ch))
        if len(seen) == 4:
            break
    return CharacterClassFlags(
        has_lower=CharacterClass.LOWERCASE in seen,
        has_upper=CharacterClass.UPPERCASE in seen,
        has_digit=CharacterClass.NUMBERS in seen,
        has_symbol=CharacterClass.SYMBOLS in seen,
    )


def simple_entropy(length: int, charset_size: int) -> float:
    """``length * log2(charset_size)``; 0 when the charset is empty."""
    if length <= 0 or charset_size <= 0:
        return 0.0
    return length * math.log2(charset_size)
