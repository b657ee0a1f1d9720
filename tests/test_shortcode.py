"""Tests for short code generation."""

import string

import pytest
from shortener.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_default_code_is_eight_lowercase_alphanumerics(self):
        generator = ShortCodeGenerator()

        code = generator.generate()
        assert len(code) == 8
        assert set(code) <= set(string.digits + string.ascii_lowercase)

    def test_alphabet_is_digits_then_lowercase(self):
        assert ShortCodeGenerator.ALPHABET == "0123456789abcdefghijklmnopqrstuvwxyz"

    def test_generate_custom_length(self):
        generator = ShortCodeGenerator(default_length=8)

        code = generator.generate(length=12)
        assert len(code) == 12
        assert generator.is_valid_format(code)

    def test_codes_are_distinct(self):
        """36^8 possible codes: a thousand draws should not repeat."""
        generator = ShortCodeGenerator()

        codes = {generator.generate() for _ in range(1000)}
        assert len(codes) == 1000

    def test_all_alphabet_characters_appear(self):
        generator = ShortCodeGenerator()

        seen = set("".join(generator.generate() for _ in range(500)))
        assert seen == set(generator.alphabet)

    def test_custom_alphabet(self):
        generator = ShortCodeGenerator(default_length=5, alphabet="ab")

        code = generator.generate()
        assert len(code) == 5
        assert set(code) <= {"a", "b"}

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            ShortCodeGenerator(default_length=0)

    def test_is_valid_format(self):
        generator = ShortCodeGenerator()

        assert generator.is_valid_format("abc12345")
        assert generator.is_valid_format("0000zzzz")

        # Invalid formats
        assert not generator.is_valid_format("")
        assert not generator.is_valid_format("ABC12345")
        assert not generator.is_valid_format("abc-1234")
        assert not generator.is_valid_format("abc 1234")
