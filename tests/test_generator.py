import re
import string
from collections import Counter
from itertools import product

import pytest

from pwguard import generate_memorable_password, generate_password, generate_strong_password
from pwguard.analyzers.charset import SIMILAR_CHARS, SYMBOLS, build_charset, classify_char
from pwguard.core.errors import InvalidLengthError, NoCharacterClassSelectedError
from pwguard.core.models import CharacterClass, GeneratePasswordOptions
from pwguard.generators import password as password_module
from pwguard.generators.password import (
    MEMORABLE_SYMBOLS,
    MEMORABLE_WORDS,
    PasswordGenerator,
    options_entropy,
)
from pwguard.generators.randomness import secure_randbelow, secure_shuffle
from shared.config import GeneratorConfig

_CLASS_FLAGS = [
    flags for flags in product([True, False], repeat=4) if any(flags)
]


def _options(length, flags, **kwargs):
    lower, upper, numbers, symbols = flags
    return GeneratePasswordOptions(
        length=length,
        lowercase=lower,
        uppercase=upper,
        numbers=numbers,
        symbols=symbols,
        **kwargs,
    )


class TestRandomGeneration:
    @pytest.mark.parametrize("length", [4, 5, 12, 64])
    @pytest.mark.parametrize("flags", _CLASS_FLAGS)
    def test_length_and_classes(self, length, flags):
        pw = generate_password(_options(length, flags))
        assert len(pw) == length
        wanted = {
            cls
            for cls, on in zip(
                (CharacterClass.LOWERCASE, CharacterClass.UPPERCASE,
                 CharacterClass.NUMBERS, CharacterClass.SYMBOLS),
                flags,
            )
            if on
        }
        assert {classify_char(c) for c in pw} == wanted

    def test_default_options(self):
        pw = generate_password()
        assert len(pw) == 12

    def test_exclude_similar(self):
        opts = GeneratePasswordOptions(length=64, exclude_similar=True)
        for _ in range(50):
            assert not set(generate_password(opts)) & set(SIMILAR_CHARS)

    def test_one_of_each_class_at_minimum_length(self):
        opts = GeneratePasswordOptions(length=4)
        for _ in range(50):
            counts = Counter(classify_char(c) for c in generate_password(opts))
            assert counts == Counter(
                {
                    CharacterClass.LOWERCASE: 1,
                    CharacterClass.UPPERCASE: 1,
                    CharacterClass.NUMBERS: 1,
                    CharacterClass.SYMBOLS: 1,
                }
            )

    def test_symbols_come_from_symbol_pool(self):
        opts = GeneratePasswordOptions(length=32, lowercase=False, uppercase=False, numbers=False)
        assert set(generate_password(opts)) <= set(SYMBOLS)

    def test_required_characters_are_shuffled(self):
        opts = GeneratePasswordOptions(length=4)
        positions = {
            next(i for i, c in enumerate(generate_password(opts)) if c.islower())
            for _ in range(200)
        }
        assert len(positions) > 1

    def test_deterministic_with_fixed_randomness(self, monkeypatch):
        monkeypatch.setattr(password_module, "secure_choice", lambda pool: pool[0])
        monkeypatch.setattr(password_module, "secure_shuffle", lambda items: None)
        assert generate_password(GeneratePasswordOptions(length=6)) == "aA0!aa"
        assert (
            generate_password(GeneratePasswordOptions(length=6, exclude_similar=True))
            == "aA2!aa"
        )


class TestValidation:
    @pytest.mark.parametrize("length", [-1, 0, 3])
    def test_too_short(self, length):
        with pytest.raises(InvalidLengthError) as exc_info:
            generate_password(GeneratePasswordOptions(length=length))
        assert str(exc_info.value) == "Password length must be at least 4 characters"
        assert exc_info.value.length == length

    def test_no_class_selected(self):
        opts = _options(12, (False, False, False, False))
        with pytest.raises(NoCharacterClassSelectedError, match="At least one character type"):
            generate_password(opts)

    def test_length_checked_first(self):
        with pytest.raises(InvalidLengthError):
            generate_password(_options(3, (False, False, False, False)))

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            generate_strong_password(GeneratePasswordOptions(length=2))

    def test_no_randomness_consumed_on_failure(self, monkeypatch):
        def _fail(*args):
            raise AssertionError("randomness consumed")

        monkeypatch.setattr(password_module, "secure_choice", _fail)
        with pytest.raises(InvalidLengthError):
            generate_password(GeneratePasswordOptions(length=1))


class TestStrongGeneration:
    def test_length(self):
        assert len(generate_strong_password(GeneratePasswordOptions(length=20))) == 20

    def test_first_candidate_wins_ties(self, monkeypatch):
        candidates = iter(["first", "second", "third"])
        calls = []

        def _fake_generate(self, options=None):
            calls.append(options)
            return next(candidates)

        monkeypatch.setattr(PasswordGenerator, "generate", _fake_generate)
        generator = PasswordGenerator(GeneratorConfig(strong_candidates=3))
        assert generator.generate_strong(GeneratePasswordOptions()) == "first"
        assert len(calls) == 3

    def test_zero_candidates_still_draws_one(self, monkeypatch):
        monkeypatch.setattr(PasswordGenerator, "generate", lambda self, options=None: "only")
        generator = PasswordGenerator(GeneratorConfig(strong_candidates=0))
        assert generator.generate_strong(GeneratePasswordOptions()) == "only"

    def test_options_entropy(self):
        opts = GeneratePasswordOptions(length=10, symbols=False, uppercase=False)
        assert options_entropy(opts) == pytest.approx(10 * 5.169925001442312)


class TestMemorable:
    def test_words_only(self):
        pw = generate_memorable_password(3, False, False)
        assert re.fullmatch(r"[A-Z][a-z]+-[A-Z][a-z]+-[A-Z][a-z]+", pw)
        assert all(word.lower() in MEMORABLE_WORDS for word in pw.split("-"))

    def test_default_format(self):
        pw = generate_memorable_password()
        assert re.fullmatch(r"([A-Z][a-z]+-){4}\d{1,2}[!@#$%&*]", pw)

    def test_numbers_only(self):
        pw = generate_memorable_password(2, True, False)
        assert re.fullmatch(r"[A-Z][a-z]+-[A-Z][a-z]+-\d{1,2}", pw)

    def test_symbol_only(self):
        pw = generate_memorable_password(1, False, True)
        assert pw[-1] in MEMORABLE_SYMBOLS
        assert pw[:-1].lower() in MEMORABLE_WORDS

    def test_word_count_from_config(self):
        pw = PasswordGenerator(GeneratorConfig(memorable_word_count=6)).generate_memorable(
            add_numbers=False, add_symbols=False
        )
        assert pw.count("-") == 5

    def test_word_list(self):
        assert len(MEMORABLE_WORDS) == 48
        assert len(set(MEMORABLE_WORDS)) == 48


class TestRandomness:
    def test_randbelow_range(self):
        assert all(0 <= secure_randbelow(7) < 7 for _ in range(200))

    def test_shuffle_preserves_items(self):
        items = list(string.ascii_letters)
        secure_shuffle(items)
        assert sorted(items) == sorted(string.ascii_letters)


class TestCharset:
    def test_pool_order(self):
        pools = build_charset(GeneratePasswordOptions(uppercase=False))
        assert list(pools) == [
            CharacterClass.LOWERCASE,
            CharacterClass.NUMBERS,
            CharacterClass.SYMBOLS,
        ]

    def test_similar_removed_per_class(self):
        pools = build_charset(GeneratePasswordOptions(exclude_similar=True))
        assert pools[CharacterClass.NUMBERS] == "23456789"
        assert "|" not in pools[CharacterClass.SYMBOLS]
        assert "l" not in pools[CharacterClass.LOWERCASE]
        assert "I" not in pools[CharacterClass.UPPERCASE]
