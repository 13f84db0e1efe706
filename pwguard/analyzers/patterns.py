"""
Pattern Library
================

Static, read-only tables and pure predicates used to recognise the
shapes attackers try first: common passwords, l33t substitutions,
keyboard walks, dates, phone numbers, topic words and first names.

Shape matchers (dates and phone numbers) work on "word tokens", the
maximal runs of ASCII letters, digits and underscore. A shape must cover
a whole token, so ``1990`` is a year in ``born-1990!`` but not in
``abc1990``.

References:
    - Weir, M., Aggarwal, S., de Medeiros, B., & Glodek, B. (2009).
      Password Cracking Using Probabilistic Context-Free Grammars.
      IEEE S&P.
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

from typing import Optional


# ===================================================================== #
#  Lexicons
# ===================================================================== #

_COMMON_PASSWORD_ENTRIES: tuple[str, ...] = (
    # Numeric sequences
    "123456", "1234567", "12345678", "123456789", "1234567890",
    "000000", "111111", "222222", "333333", "444444", "555555",
    "666666", "777777", "888888", "999999",
    # Common passwords
    "password", "password1", "password123", "admin", "administrator",
    "root", "user", "guest", "test", "demo",
    # Keyboard patterns
    "qwerty", "qwertyuiop", "asdfgh", "asdfghjkl", "zxcvbn", "zxcvbnm",
    "azerty", "12345qwerty", "qwerty123",
    # Common words
    "welcome", "login", "master", "secret", "super", "access",
    "computer", "internet", "service", "system",
    # Dates
    "19700101", "19800101", "19900101", "20000101", "20100101",
    "20200101", "01011970", "01011980", "01011990", "01012000",
    # Simple variations
    "abc123", "123abc", "a1b2c3", "1q2w3e", "1q2w3e4r", "1qaz2wsx",
    "qwe123", "asd123", "zxc123",
    # Names and words with numbers
    "john123", "admin123", "root123", "user123", "pass123", "temp123",
    # Repeated characters
    "aaaaaaa", "aaaaaaaaaa",
    # Other common weak passwords
    "letmein", "welcome1", "iloveyou", "princess", "rockyou", "12341234",
    "passw0rd", "p@ssw0rd", "p@ssword", "password!", "Password1",
    "Password123",
)

_EXTENDED_PASSWORD_ENTRIES: tuple[str, ...] = (
    # Basic patterns
    "password", "password1", "password123", "pass", "admin", "administrator",
    "root", "user", "guest", "test", "demo", "temp", "qwerty", "asdf",
    "zxcv", "admin123", "root123", "user123", "pass123", "temp123",
    # Years
    "2023", "2022", "2021", "2020", "2019", "2018", "2017", "2016", "2015",
    "1990", "1991", "1992", "1993", "1994", "1995", "1996", "1997", "1998",
    "1999", "2000", "2001", "2002", "2003", "2004", "2005", "2006", "2007",
    "2008", "2009", "2010", "2011", "2012", "2013", "2014",
    # Common words
    "welcome", "login", "master", "secret", "super", "access", "computer",
    "internet", "system", "service", "letmein", "welcome1", "iloveyou",
    "princess", "rockyou", "sunshine", "shadow", "dragon", "monkey",
    "football", "baseball", "basketball", "soccer", "tennis", "hockey",
    # Names
    "john", "mary", "david", "sarah", "michael", "jennifer", "robert",
    "linda", "william", "elizabeth", "james", "barbara", "charles",
    "susan", "joseph", "jessica", "thomas", "karen", "christopher",
    "nancy", "daniel", "betty", "matthew", "helen", "anthony", "sandra",
    # L33t variations
    "p@ssw0rd", "p@ssword", "passw0rd", "password!", "Password1",
    "admin!", "adm1n", "4dm1n", "r00t", "us3r", "t3st", "d3mo",
    "1234567890", "0987654321", "qwerty123", "asdf123", "zxcv123",
    # Company / tech
    "microsoft", "google", "apple", "facebook", "twitter", "amazon",
    "windows", "linux", "android", "iphone", "samsung", "oracle",
    "cisco", "intel", "nvidia", "adobe", "paypal", "netflix",
)


def _casefolded(entries: tuple[str, ...]) -> tuple[str, ...]:
    """Lower-case *entries*, dropping duplicates but keeping first-seen order."""
    return tuple(dict.fromkeys(e.lower() for e in entries))


COMMON_PASSWORDS: frozenset[str] = frozenset(_casefolded(_COMMON_PASSWORD_ENTRIES))

# Ordered so that substring extraction is deterministic
EXTENDED_LEXICON: tuple[str, ...] = _casefolded(_EXTENDED_PASSWORD_ENTRIES)
EXTENDED_COMMON_PASSWORDS: frozenset[str] = frozenset(EXTENDED_LEXICON)

MIN_DICTIONARY_WORD_LENGTH = 4


# ===================================================================== #
#  L33t Speak
# ===================================================================== #

# letter -> glyphs commonly substituted for it
LEET_SUBSTITUTIONS: dict[str, tuple[str, ...]] = {
    "a": ("@", "4"),
    "e": ("3",),
    "i": ("1", "!"),
    "o": ("0",),
    "s": ("5", "$"),
    "t": ("7", "+"),
    "l": ("1", "|"),
    "g": ("9",),
    "b": ("6",),
    "z": ("2",),
}


def _build_leet_table() -> dict[int, str]:
    # A glyph claimed by two letters ("1") resolves to the first one listed
    reverse: dict[str, str] = {}
    for letter, glyphs in LEET_SUBSTITUTIONS.items():
        for glyph in glyphs:
            reverse.setdefault(glyph, letter)
    return str.maketrans(reverse)


_LEET_TABLE: dict[int, str] = _build_leet_table()


# ===================================================================== #
#  Keyboard Walks
# ===================================================================== #

KEYBOARD_PATTERNS: tuple[str, ...] = (
    # QWERTY rows
    "qwertyuiop", "asdfghjkl", "zxcvbnm",
    "poiuytrewq", "lkjhgfdsa", "mnbvcxz",
    # QWERTY columns
    "qaz", "wsx", "edc", "rfv", "tgb", "yhn", "ujm", "ik", "ol", "p",
    "zaq", "xsw", "cde", "vfr", "bgt", "nhy", "mju", "ki", "lo",
    # Diagonals and row fragments
    "qwe", "asd", "zxc", "wer", "sdf", "xcv", "ert", "dfg", "cvb",
    "rty", "fgh", "vbn", "tyu", "ghj", "bnm", "yui", "hjk", "nmk",
    "uio", "jkl", "iop", "kl",
    # Number row
    "123", "234", "345", "456", "567", "678", "789", "890",
    "987", "876", "765", "654", "543", "432", "321",
)


# ===================================================================== #
#  Topic Words and Names
# ===================================================================== #

TOPIC_WORDS: dict[str, tuple[str, ...]] = {
    "colors": (
        "red", "blue", "green", "yellow", "black", "white", "purple",
        "orange", "pink", "brown",
    ),
    "animals": (
        "cat", "dog", "bird", "fish", "tiger", "lion", "bear", "wolf",
        "fox", "eagle",
    ),
    "sports": (
        "football", "baseball", "basketball", "soccer", "tennis", "hockey",
        "golf", "swimming",
    ),
    "months": (
        "january", "february", "march", "april", "may", "june", "july",
        "august", "september", "october", "november", "december",
    ),
    "days": (
        "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
        "sunday",
    ),
}

FIRST_NAMES: tuple[str, ...] = tuple(dict.fromkeys((
    "john", "mary", "david", "sarah", "michael", "jennifer", "robert",
    "linda", "william", "elizabeth", "james", "barbara", "charles",
    "susan", "joseph", "jessica", "thomas", "karen", "christopher",
    "nancy", "daniel", "betty", "matthew", "helen", "anthony", "sandra",
    "mark", "donna", "donald", "carol", "steven", "ruth", "kenneth",
    "sharon", "paul", "michelle", "andrew", "laura", "joshua", "emily",
    "kevin", "kimberly", "brian", "deborah", "george", "dorothy",
    "timothy", "lisa", "ronald", "nancy", "jason", "karen", "edward",
    "betty", "jeffrey", "helen", "ryan", "sandra", "jacob", "donna",
)))


# ===================================================================== #
#  Lexicon Predicates
# ===================================================================== #


def is_common_password(password: str) -> bool:
    """Case-insensitive membership in the common-password lexicon."""
    return password.lower() in COMMON_PASSWORDS


def is_extended_common_password(password: str) -> bool:
    """Case-insensitive membership in the extended lexicon."""
    return password.lower() in EXTENDED_COMMON_PASSWORDS


def normalize_leet_speak(password: str) -> str:
    """Case-fold *password* and map l33t glyphs back to letters.

    >>> normalize_leet_speak("P@ssw0rd")
    'password'
    """
    return password.lower().translate(_LEET_TABLE)


def extract_dictionary_substrings(password: str) -> list[str]:
    """Return every extended-lexicon entry of length >= 4 inside *password*.

    The search runs over the l33t-normalised, case-folded password and
    reports entries in lexicon order.
    """
    normalized = normalize_leet_speak(password)
    return [
        word
        for word in EXTENDED_LEXICON
        if len(word) >= MIN_DICTIONARY_WORD_LENGTH and word in normalized
    ]


def contains_keyboard_pattern(password: str) -> bool:
    """Whether *password* contains a keyboard walk, forwards or reversed."""
    lowered = password.lower()
    return any(
        walk in lowered or walk[::-1] in lowered for walk in KEYBOARD_PATTERNS
    )


def find_topic_word(password: str) -> Optional[str]:
    """First topic word found in *password*, scanning categories in order."""
    lowered = password.lower()
    for words in TOPIC_WORDS.values():
        for word in words:
            if word in lowered:
                return word
    return None


def find_first_name(password: str) -> Optional[str]:
    """First common first name found in *password*."""
    lowered = password.lower()
    for name in FIRST_NAMES:
        if name in lowered:
            return name
    return None


# ===================================================================== #
#  Token Helpers
# ===================================================================== #


def _is_word_char(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9")


def _is_digits(text: str, min_len: int, max_len: int) -> bool:
    return min_len <= len(text) <= max_len and all("0" <= c <= "9" for c in text)


def _word_spans(password: str) -> list[tuple[int, int]]:
    """``(start, end)`` spans of the maximal word-character runs."""
    spans: list[tuple[int, int]] = []
    start: Optional[int] = None
    for idx, ch in enumerate(password):
        if _is_word_char(ch):
            if start is None:
                start = idx
        elif start is not None:
            spans.append((start, idx))
            start = None
    if start is not None:
        spans.append((start, len(password)))
    return spans


def _is_month(two: str) -> bool:
    return "01" <= two <= "12"


def _is_day(two: str) -> bool:
    return "01" <= two <= "31"


# ===================================================================== #
#  Date Shapes
# ===================================================================== #

_DATE_SEPARATORS = "/-."


def _is_date_token(token: str) -> bool:
    if not _is_digits(token, 4, 4):
        return False
    head, tail = token[:2], token[2:]
    if head in ("19", "20"):
        return True  # bare year 1900-2099
    if _is_month(head) and _is_day(tail):
        return True  # MMDD
    return _is_day(head) and _is_month(tail)  # DDMM


def contains_date_pattern(password: str) -> bool:
    """Whether *password* contains a year, MMDD/DDMM or delimited date.

    Delimited dates are ``d{1,2} S d{1,2} S d{2,4}`` with one separator
    ``S`` from ``/``, ``-`` or ``.`` used on both sides.
    """
    spans = _word_spans(password)
    tokens = [password[s:e] for s, e in spans]

    if any(_is_date_token(tok) for tok in tokens):
        return True

    for i in range(len(spans) - 2):
        first, second, third = tokens[i], tokens[i + 1], tokens[i + 2]
        gap_a = password[spans[i][1]:spans[i + 1][0]]
        gap_b = password[spans[i + 1][1]:spans[i + 2][0]]
        if (
            len(gap_a) == 1
            and gap_a in _DATE_SEPARATORS
            and gap_a == gap_b
            and _is_digits(first, 1, 2)
            and _is_digits(second, 1, 2)
            and _is_digits(third, 2, 4)
        ):
            return True
    return False


# ===================================================================== #
#  Phone Shapes
# ===================================================================== #

# Digit-group lengths accepted for XXX-XXX-XXXX with optional hyphens
_PHONE_GROUPINGS: frozenset[tuple[int, ...]] = frozenset(
    {(10,), (3, 7), (6, 4), (3, 3, 4)}
)


def _has_hyphenated_phone(password: str) -> bool:
    spans = _word_spans(password)
    for i in range(len(spans)):
        lengths: list[int] = []
        for j in range(i, min(i + 3, len(spans))):
            token = password[spans[j][0]:spans[j][1]]
            if not _is_digits(token, 1, 10):
                break
            if j > i and password[spans[j - 1][1]:spans[j][0]] != "-":
                break
            lengths.append(len(token))
            if tuple(lengths) in _PHONE_GROUPINGS:
                return True
    return False


def _has_parenthesized_phone(password: str) -> bool:
    n = len(password)
    for i, ch in enumerate(password):
        if ch != "(":
            continue
        if not (_is_digits(password[i + 1:i + 4], 3, 3) and password[i + 4:i + 5] == ")"):
            continue
        k = i + 5
        if k < n and password[k].isspace():
            k += 1
        if not _is_digits(password[k:k + 3], 3, 3):
            continue
        k += 3
        if k < n and password[k] == "-":
            k += 1
        if not _is_digits(password[k:k + 4], 4, 4):
            continue
        k += 4
        if k < n and _is_word_char(password[k]):
            continue
        return True
    return False


def contains_phone_pattern(password: str) -> bool:
    """Whether *password* contains a North-American style phone number.

    Recognised shapes: ``XXX-XXX-XXXX`` (hyphens optional), ``(XXX) XXX-XXXX``
    (space and hyphen optional) and a bare 10-digit run.
    """
    return _has_hyphenated_phone(password) or _has_parenthesized_phone(password)
