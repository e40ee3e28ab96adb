"""Tests for password generation."""

import string

import pytest
from pydantic import ValidationError

from core import (
    AMBIGUOUS_SYMBOLS,
    SIMILAR_CHARACTERS,
    ConfigurationError,
    GenerationConfig,
    build_character_set,
    draw_index,
    generate_password,
)
from core.charsets import SYMBOLS


NO_CLASSES = dict(
    include_uppercase=False,
    include_lowercase=False,
    include_numbers=False,
    include_symbols=False,
)


class TestCharacterSet:
    """Test character set construction from generation flags."""

    def test_default_config_uses_all_classes_in_order(self):
        """Default set is uppercase, lowercase, digits, then symbols."""
        charset = build_character_set(GenerationConfig())
        assert charset == (
            string.ascii_uppercase + string.ascii_lowercase + string.digits + SYMBOLS
        )

    def test_no_duplicates(self):
        """Every combination of flags yields distinct characters."""
        for similar in (False, True):
            for ambiguous in (False, True):
                charset = build_character_set(
                    GenerationConfig(exclude_similar=similar, exclude_ambiguous=ambiguous)
                )
                assert len(charset) == len(set(charset))

    def test_empty_when_no_class_selected(self):
        """No selected class gives an empty set."""
        assert build_character_set(GenerationConfig(**NO_CLASSES)) == ""

    def test_exclude_similar_leaves_symbols_alone(self):
        """Similar-character exclusion does not touch symbols."""
        config = GenerationConfig(
            include_uppercase=False, include_lowercase=False,
            include_numbers=False, exclude_similar=True,
        )
        assert build_character_set(config) == SYMBOLS

    def test_exclude_ambiguous_leaves_letters_alone(self):
        """Ambiguous-symbol exclusion does not touch letters or digits."""
        config = GenerationConfig(include_symbols=False, exclude_ambiguous=True)
        charset = build_character_set(config)
        assert charset == string.ascii_uppercase + string.ascii_lowercase + string.digits

    def test_similar_excluded_sizes(self):
        """Similar-excluded tables drop I/O, l and 0/1."""
        config = GenerationConfig(include_symbols=False, exclude_similar=True)
        assert len(build_character_set(config)) == 24 + 25 + 8

    def test_ambiguous_excluded_symbols(self):
        """Ambiguous-excluded symbols contain none of the ambiguous subset."""
        config = GenerationConfig(
            include_uppercase=False, include_lowercase=False,
            include_numbers=False, exclude_ambiguous=True,
        )
        charset = build_character_set(config)
        assert charset == "!@#$%^&*()_+-=;:,.?"
        assert not set(charset) & AMBIGUOUS_SYMBOLS


class TestRandomSource:
    """Test the secure index source."""

    def test_index_within_range(self):
        """Drawn indexes stay in [0, n)."""
        for n in (1, 2, 10, 57, 91):
            for _ in range(50):
                assert 0 <= draw_index(n) < n

    def test_single_value_range(self):
        """A range of one always yields zero."""
        assert draw_index(1) == 0

    def test_rejects_empty_range(self):
        """Non-positive ranges are rejected."""
        with pytest.raises(ValueError):
            draw_index(0)
        with pytest.raises(ValueError):
            draw_index(-3)

    def test_uses_modulo_of_random_bits(self, monkeypatch):
        """The index is the 32-bit draw reduced modulo n."""
        monkeypatch.setattr("core.random_source.secrets.randbits", lambda bits: 2**32 - 1)
        assert draw_index(10) == (2**32 - 1) % 10


class TestPasswordGenerator:
    """Test cases for secure password generation."""

    def test_default_password_length(self):
        """Default password should be 16 characters."""
        password = generate_password(GenerationConfig())
        assert len(password) == 16

    def test_custom_length(self):
        """Password should match requested length."""
        for length in [1, 4, 8, 12, 20, 32, 64, 128]:
            password = generate_password(GenerationConfig(length=length))
            assert len(password) == length

    def test_characters_from_character_set(self):
        """Every character is a member of the derived set."""
        for similar in (False, True):
            for ambiguous in (False, True):
                config = GenerationConfig(
                    length=64, exclude_similar=similar, exclude_ambiguous=ambiguous
                )
                charset = set(build_character_set(config))
                assert set(generate_password(config)) <= charset

    def test_no_character_types_raises_error(self):
        """Should raise ConfigurationError if no character types selected."""
        with pytest.raises(ConfigurationError):
            generate_password(GenerationConfig(**NO_CLASSES))

    def test_configuration_error_is_value_error(self):
        """Callers catching ValueError also catch configuration errors."""
        with pytest.raises(ValueError, match="character type"):
            generate_password(GenerationConfig(**NO_CLASSES, exclude_similar=True))

    def test_empty_alphabet_never_draws(self):
        """Validation fails before any random draw."""
        def draw(n):
            raise AssertionError("draw called")

        with pytest.raises(ConfigurationError):
            generate_password(GenerationConfig(**NO_CLASSES), draw=draw)

    def test_zero_length_rejected(self):
        """Length below one fails config validation."""
        with pytest.raises(ValidationError):
            GenerationConfig(length=0)

    def test_config_is_immutable(self):
        """Configs cannot be modified after construction."""
        config = GenerationConfig()
        with pytest.raises(ValidationError):
            config.length = 8

    def test_exclude_similar(self):
        """No similar glyphs when excludeSimilar is set."""
        config = GenerationConfig(length=128, include_symbols=False, exclude_similar=True)
        for _ in range(10):
            assert not set(generate_password(config)) & SIMILAR_CHARACTERS

    def test_exclude_ambiguous(self):
        """No ambiguous symbols when excludeAmbiguous is set."""
        config = GenerationConfig(length=128, exclude_ambiguous=True)
        for _ in range(10):
            assert not set(generate_password(config)) & AMBIGUOUS_SYMBOLS

    def test_exclude_ambiguous_independent_of_similar(self):
        """Ambiguous exclusion holds whatever exclude_similar is."""
        config = GenerationConfig(length=128, exclude_similar=True, exclude_ambiguous=True)
        password = generate_password(config)
        assert not set(password) & AMBIGUOUS_SYMBOLS
        assert not set(password) & SIMILAR_CHARACTERS

    def test_only_uppercase(self):
        """Password with only uppercase should contain only uppercase."""
        config = GenerationConfig(length=12, include_lowercase=False,
                                  include_numbers=False, include_symbols=False)
        password = generate_password(config)
        assert all(c in string.ascii_uppercase for c in password)

    def test_only_digits(self):
        """Password with only digits should contain only digits."""
        config = GenerationConfig(length=12, include_uppercase=False,
                                  include_lowercase=False, include_symbols=False)
        password = generate_password(config)
        assert password.isdigit()

    def test_draw_receives_charset_size(self):
        """Each position draws once against the full set size."""
        sizes = []

        def draw(n):
            sizes.append(n)
            return 0

        config = GenerationConfig(length=5, exclude_similar=True, exclude_ambiguous=True)
        generate_password(config, draw=draw)
        assert sizes == [len(build_character_set(config))] * 5

    def test_deterministic_draw(self):
        """Injected draws map directly onto the character set."""
        config = GenerationConfig(length=4)
        assert generate_password(config, draw=lambda n: 0) == "AAAA"
        assert generate_password(config, draw=lambda n: n - 1) == "````"

        counter = iter(range(4))
        assert generate_password(config, draw=lambda n: next(counter)) == "ABCD"

    def test_randomness(self):
        """Generated passwords should be different each time."""
        passwords = [generate_password(GenerationConfig()) for _ in range(100)]
        assert len(set(passwords)) == 100
