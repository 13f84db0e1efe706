"""
Password Generator
===================

Random, best-of-N and memorable password generation.

Random generation guarantees one character from every enabled class:

1. Validate the options (length >= 4, at least one class).
2. Draw one required character per enabled class, in the order
   lowercase, uppercase, numbers, symbols.
3. Fill the remaining positions from the combined pool, with replacement.
4. Fisher-Yates shuffle so required characters land anywhere.

Memorable passwords join capitalised words from a fixed list with ``-``
and optionally append ``-N`` (N in [0, 100)) and one trailing symbol.

References:
    - NIST SP 800-63B (2017), Section 5.1.1.2 Memorized Secret Verifiers.
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2,
      Section 3.4.2, Algorithm P (shuffling).
"""

from __future__ import annotations

from typing import Optional

from pwguard.analyzers.charset import build_charset, combined_pool, simple_entropy
from pwguard.core.errors import (
    MIN_PASSWORD_LENGTH,
    InvalidLengthError,
    NoCharacterClassSelectedError,
)
from pwguard.core.models import CharacterClass, GeneratePasswordOptions
from pwguard.generators.randomness import (
    secure_choice,
    secure_randbelow,
    secure_shuffle,
)
from shared.config import GeneratorConfig
from shared.logger import PwGuardLogger

logger = PwGuardLogger("generator")

MEMORABLE_WORDS: tuple[str, ...] = (
    "apple", "brave", "chair", "dance", "eagle", "flame", "grace", "heart",
    "image", "jewel", "knight", "light", "magic", "noble", "ocean", "peace",
    "queen", "river", "stone", "tiger", "unity", "voice", "world", "youth",
    "zebra", "angel", "beach", "cloud", "dream", "earth", "fresh", "green",
    "happy", "ideal", "jolly", "karma", "laugh", "music", "nature", "outer",
    "power", "quiet", "rapid", "smile", "trust", "urban", "vital", "wonder",
)

MEMORABLE_SYMBOLS = "!@#$%&*"
MEMORABLE_NUMBER_BOUND = 100

# Attacker charset weights, matching the analysis side
_CLASS_WEIGHTS: dict[CharacterClass, int] = {
    CharacterClass.LOWERCASE: 26,
    CharacterClass.UPPERCASE: 26,
    CharacterClass.NUMBERS: 10,
    CharacterClass.SYMBOLS: 32,
}


def validate_options(options: GeneratePasswordOptions) -> None:
    """Raise before any randomness is consumed if *options* are unusable."""
    if options.length < MIN_PASSWORD_LENGTH:
        raise InvalidLengthError(options.length)
    if not options.enabled_classes:
        raise NoCharacterClassSelectedError()


def options_entropy(options: GeneratePasswordOptions) -> float:
    """Simple entropy of any password drawn with *options*."""
    charset_size = sum(_CLASS_WEIGHTS[cls] for cls in options.enabled_classes)
    return simple_entropy(options.length, charset_size)


class PasswordGenerator:
    """Generates passwords from a :class:`GeneratePasswordOptions`.

    Args:
        config: Candidate count for :meth:`generate_strong` and the
            default memorable word count.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self._config = config or GeneratorConfig()

    # ------------------------------------------------------------------ #
    #  Random
    # ------------------------------------------------------------------ #

    def generate(self, options: Optional[GeneratePasswordOptions] = None) -> str:
        opts = options or GeneratePasswordOptions()
        validate_options(opts)

        pools = build_charset(opts)
        chars = [secure_choice(pool) for pool in pools.values()]

        pool = combined_pool(pools, opts.exclude_similar)
        chars.extend(secure_choice(pool) for _ in range(opts.length - len(chars)))

        secure_shuffle(chars)
        logger.debug(
            "Generated random password",
            length=opts.length,
            classes=[cls.value for cls in pools],
        )
        return "".join(chars)

    # ------------------------------------------------------------------ #
    #  Best-of-N
    # ------------------------------------------------------------------ #

    def generate_strong(self, options: Optional[GeneratePasswordOptions] = None) -> str:
        """Draw several candidates and keep the first of highest entropy."""
        opts = options or GeneratePasswordOptions()
        validate_options(opts)

        count = max(1, self._config.strong_candidates)
        best = self.generate(opts)
        best_entropy = options_entropy(opts)
        for _ in range(count - 1):
            candidate = self.generate(opts)
            entropy = options_entropy(opts)
            if entropy > best_entropy:
                best, best_entropy = candidate, entropy

        logger.debug("Selected strong candidate", candidates=count, length=opts.length)
        return best

    # ------------------------------------------------------------------ #
    #  Memorable
    # ------------------------------------------------------------------ #

    def generate_memorable(
        self,
        word_count: Optional[int] = None,
        add_numbers: bool = True,
        add_symbols: bool = True,
    ) -> str:
        if word_count is None:
            word_count = self._config.memorable_word_count

        words = [secure_choice(MEMORABLE_WORDS).capitalize() for _ in range(word_count)]
        password = "-".join(words)

        if add_numbers:
            password += f"-{secure_randbelow(MEMORABLE_NUMBER_BOUND)}"
        if add_symbols:
            password += secure_choice(MEMORABLE_SYMBOLS)

        logger.debug(
            "Generated memorable password",
            words=word_count,
            numbers=add_numbers,
            symbols=add_symbols,
        )
        return password


# ===================================================================== #
#  Module-level Convenience API
# ===================================================================== #


def generate_password(options: Optional[GeneratePasswordOptions] = None) -> str:
    return PasswordGenerator().generate(options)


def generate_strong_password(options: Optional[GeneratePasswordOptions] = None) -> str:
    return PasswordGenerator().generate_strong(options)


def generate_memorable_password(
    word_count: int = 4, add_numbers: bool = True, add_symbols: bool = True
) -> str:
    return PasswordGenerator().generate_memorable(word_count, add_numbers, add_symbols)
