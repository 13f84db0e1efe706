"""
Keyspace & Penalty Analyzer
============================

Estimates how many guesses a realistic attacker needs, starting from the
brute-force keyspace ``N ** L`` and shrinking it for every weakness a
cracking rig exploits first:

1. Lexicon exact match (raw or case-folded) -> keyspace 1.
2. L33t-normalised lexicon match -> ``min(1000, 10 * L)``.
3. Otherwise ``N ** L`` scaled by the product of:
   - composite pattern penalty (l33t, dictionary substring, keyboard walk,
     date, phone, topic word, first name), floored at 1e-6;
   - repeating-block and sequential-run detectors (x0.05 each);
   - hybrid-attack penalty ``min(0.1, 0.5 ** extra)`` when a dictionary
     word is present;
   - statistical penalty for class alternation and adjacent repeated
     blocks, floored at 0.001;
   and clamped below at 1.

The smart-attack keyspace narrows the result once more for dictionary,
mask (date / phone) and keyboard-walk strategies. It only feeds the
crack-time projection, never the score.

Powers are computed in floating point. When ``N ** L`` exceeds the float
range the keyspace saturates at ``inf``.

References:
    - Kelley, P. G. et al. (2012). Guess Again (and Again and Again):
      Measuring Password Strength by Simulating Password-Cracking
      Algorithms. IEEE S&P.
    - Ur, B. et al. (2015). Measuring Real-World Accuracies and Biases in
      Modeling Password Guessability. USENIX Security.
"""

from __future__ import annotations

from typing import Optional

from pwguard.analyzers.charset import classify_char, scan_character_classes
from pwguard.analyzers.patterns import (
    EXTENDED_COMMON_PASSWORDS,
    contains_date_pattern,
    contains_keyboard_pattern,
    contains_phone_pattern,
    extract_dictionary_substrings,
    find_first_name,
    find_topic_word,
    is_common_password,
    is_extended_common_password,
    normalize_leet_speak,
)
from pwguard.core.models import (
    CharacterClassFlags,
    KeyspaceBreakdown,
    PasswordPattern,
)
from shared.logger import PwGuardLogger

logger = PwGuardLogger("keyspace")


# ===================================================================== #
#  Multipliers
# ===================================================================== #

LEET_MULTIPLIER = 0.3
DICTIONARY_MULTIPLIER = 0.001
KEYBOARD_MULTIPLIER = 0.1
DATE_MULTIPLIER = 0.2
PHONE_MULTIPLIER = 0.1
TOPIC_WORD_MULTIPLIER = 0.5
FIRST_NAME_MULTIPLIER = 0.3
COMPOSITE_FLOOR = 1e-6

REPEATING_MULTIPLIER = 0.05
SEQUENTIAL_MULTIPLIER = 0.05

HYBRID_CEILING = 0.1

ALTERNATION_RATIO = 0.4
ALTERNATION_MULTIPLIER = 0.3
ADJACENT_REPEAT_MULTIPLIER = 0.2
STATISTICAL_FLOOR = 0.001

LEET_KEYSPACE_CAP = 1000

# Ordered reference runs scanned by the sequential detector
SEQUENCES: tuple[str, ...] = (
    "0123456789",
    "9876543210",
    "abcdefghijklmnopqrstuvwxyz",
    "zyxwvutsrqponmlkjihgfedcba",
    "qwertyuiop",
    "poiuytrewq",
    "asdfghjkl",
    "lkjhgfdsa",
)

_SEQUENCE_TRIGRAMS: frozenset[str] = frozenset(
    seq[i:i + 3] for seq in SEQUENCES for i in range(len(seq) - 2)
)


def safe_pow(base: float, exponent: float) -> float:
    """``base ** exponent`` in floating point, saturating at ``inf``."""
    try:
        return float(base) ** exponent
    except OverflowError:
        return float("inf")


# ===================================================================== #
#  Detectors
# ===================================================================== #


def has_repeating_pattern(password: str) -> bool:
    """Whether a 1-3 character block repeats at least three times in a row.

    Covers both ``aaa`` and ``abcabcabc``.
    """
    n = len(password)
    for block in range(1, 4):
        for i in range(n - 3 * block + 1):
            unit = password[i:i + block]
            if (
                password[i + block:i + 2 * block] == unit
                and password[i + 2 * block:i + 3 * block] == unit
            ):
                return True
    return False


def has_sequential_pattern(password: str) -> bool:
    """Whether any case-folded 3-character window lies on a known run."""
    lowered = password.lower()
    return any(
        lowered[i:i + 3] in _SEQUENCE_TRIGRAMS for i in range(len(lowered) - 2)
    )


def hybrid_attack_penalty(password: str, dictionary_words: list[str]) -> float:
    """Dictionary-plus-decoration penalty; 1.0 without dictionary words."""
    if not dictionary_words:
        return 1.0
    extra = len(password) - max(len(w) for w in dictionary_words)
    return min(HYBRID_CEILING, 0.5 ** extra)


def statistical_penalty(password: str) -> float:
    """Penalty for class alternation and adjacent repeated blocks."""
    n = len(password)
    if n < 3:
        return 1.0

    penalty = 1.0
    classes = [classify_char(ch) for ch in password]
    alternating = sum(
        1
        for i in range(1, n - 1)
        if classes[i - 1] == classes[i + 1] != classes[i]
    )
    if alternating > n * ALTERNATION_RATIO:
        penalty *= ALTERNATION_MULTIPLIER

    if _has_adjacent_repeat(password):
        penalty *= ADJACENT_REPEAT_MULTIPLIER

    return max(STATISTICAL_FLOOR, penalty)


def _has_adjacent_repeat(password: str) -> bool:
    n = len(password)
    for size in range(2, n // 2 + 1):
        for i in range(n - 2 * size + 1):
            if password[i:i + size] == password[i + size:i + 2 * size]:
                return True
    return False


# ===================================================================== #
#  Analyzer
# ===================================================================== #


class KeyspaceAnalyzer:
    """Computes the attacker-adjusted and smart-attack keyspaces.

    Stateless; a single instance may be shared freely between threads.
    """

    def analyze(
        self,
        password: str,
        flags: Optional[CharacterClassFlags] = None,
        *,
        is_common: Optional[bool] = None,
    ) -> KeyspaceBreakdown:
        """Run the full keyspace pipeline for *password*.

        Args:
            password: Candidate password (never logged).
            flags: Pre-computed class flags, scanned here when omitted.
            is_common: Pre-computed common-lexicon hit, checked when omitted.
        """
        if flags is None:
            flags = scan_character_classes(password)
        if is_common is None:
            is_common = is_common_password(password)

        length = len(password)
        charset_size = flags.charset_size

        if is_common or is_extended_common_password(password):
            logger.debug("Lexicon exact match; keyspace short-circuited", length=length)
            return KeyspaceBreakdown(
                charset_size=charset_size,
                keyspace=1.0,
                smart_keyspace=1.0,
                short_circuit="common",
                patterns=[PasswordPattern(pattern_type="common", value="lexicon")],
            )

        normalized = normalize_leet_speak(password)
        if normalized in EXTENDED_COMMON_PASSWORDS:
            keyspace = float(max(1, min(LEET_KEYSPACE_CAP, length * 10)))
            logger.debug("L33t lexicon match; keyspace capped", length=length)
            return KeyspaceBreakdown(
                charset_size=charset_size,
                keyspace=keyspace,
                smart_keyspace=keyspace,
                short_circuit="leet_common",
                patterns=[
                    PasswordPattern(
                        pattern_type="leet_common",
                        value="l33t lexicon variant",
                        multiplier=LEET_MULTIPLIER,
                    )
                ],
            )

        dictionary_words = extract_dictionary_substrings(password)
        patterns = self._collect_patterns(password, normalized, dictionary_words)

        composite = 1.0
        for pattern in patterns:
            if pattern.pattern_type not in ("repeating", "sequential"):
                composite *= pattern.multiplier
        composite = max(COMPOSITE_FLOOR, composite)

        detectors = 1.0
        for pattern in patterns:
            if pattern.pattern_type in ("repeating", "sequential"):
                detectors *= pattern.multiplier

        hybrid = hybrid_attack_penalty(password, dictionary_words)
        statistical = statistical_penalty(password)

        base = safe_pow(charset_size, length)
        keyspace = max(1.0, base * composite * detectors * hybrid * statistical)
        smart = self.smart_keyspace(password, keyspace, dictionary_words)

        logger.debug(
            "Keyspace computed",
            length=length,
            charset_size=charset_size,
            pattern_count=len(patterns),
        )
        return KeyspaceBreakdown(
            charset_size=charset_size,
            base_keyspace=base,
            composite_penalty=composite,
            hybrid_penalty=hybrid,
            statistical_penalty=statistical,
            keyspace=keyspace,
            smart_keyspace=smart,
            patterns=patterns,
            dictionary_words=dictionary_words,
        )

    @staticmethod
    def smart_keyspace(
        password: str, keyspace: float, dictionary_words: list[str]
    ) -> float:
        """Narrow *keyspace* for dictionary, mask and keyboard-walk attacks."""
        length = len(password)
        if dictionary_words:
            longest = max(len(w) for w in dictionary_words)
            hybrid = len(EXTENDED_COMMON_PASSWORDS) * safe_pow(100, length - longest)
            return max(1.0, min(keyspace, hybrid))
        if contains_date_pattern(password) or contains_phone_pattern(password):
            return max(1.0, min(keyspace, safe_pow(10, length) * 1000))
        if contains_keyboard_pattern(password):
            return max(1.0, min(keyspace, safe_pow(1000, length / 3)))
        return keyspace

    # ------------------------------------------------------------------ #
    #  Pattern collection
    # ------------------------------------------------------------------ #

    @staticmethod
    def _collect_patterns(
        password: str, normalized: str, dictionary_words: list[str]
    ) -> list[PasswordPattern]:
        found: list[PasswordPattern] = []

        if normalized != password.lower():
            found.append(PasswordPattern(
                pattern_type="leet", value="l33t substitution",
                multiplier=LEET_MULTIPLIER,
            ))
        if dictionary_words:
            found.append(PasswordPattern(
                pattern_type="dictionary",
                value=_count_label(len(dictionary_words), "lexicon word"),
                multiplier=DICTIONARY_MULTIPLIER,
            ))
        if contains_keyboard_pattern(password):
            found.append(PasswordPattern(
                pattern_type="keyboard", value="keyboard walk",
                multiplier=KEYBOARD_MULTIPLIER,
            ))
        if contains_date_pattern(password):
            found.append(PasswordPattern(
                pattern_type="date", value="date shape",
                multiplier=DATE_MULTIPLIER,
            ))
        if contains_phone_pattern(password):
            found.append(PasswordPattern(
                pattern_type="phone", value="phone number shape",
                multiplier=PHONE_MULTIPLIER,
            ))

        if find_topic_word(password) is not None:
            found.append(PasswordPattern(
                pattern_type="topic_word", value="topic word",
                multiplier=TOPIC_WORD_MULTIPLIER,
            ))
        if find_first_name(password) is not None:
            found.append(PasswordPattern(
                pattern_type="first_name", value="common first name",
                multiplier=FIRST_NAME_MULTIPLIER,
            ))

        if has_repeating_pattern(password):
            found.append(PasswordPattern(
                pattern_type="repeating", value="repeated block",
                multiplier=REPEATING_MULTIPLIER,
            ))
        if has_sequential_pattern(password):
            found.append(PasswordPattern(
                pattern_type="sequential", value="sequential run",
                multiplier=SEQUENTIAL_MULTIPLIER,
            ))
        return found


def _count_label(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("" if count == 1 else "s")
