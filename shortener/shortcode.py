"""Short code generation utilities."""

import secrets
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    # Digits followed by lowercase letters: 0-9a-z
    ALPHABET = string.digits + string.ascii_lowercase

    def __init__(self, default_length: int = 8, alphabet: Optional[str] = None):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            alphabet: Characters to draw codes from (defaults to 0-9a-z)
        """
        if default_length < 1:
            raise ValueError("default_length must be at least 1")

        self.default_length = default_length
        self.alphabet = alphabet or self.ALPHABET

    def generate(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Every character is drawn independently and uniformly from the alphabet
        using the operating system's CSPRNG. No uniqueness check is made here;
        the store rejects duplicates on insert.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(secrets.choice(self.alphabet) for _ in range(length))

    def is_valid_format(self, code: str) -> bool:
        """Check if code is non-empty and drawn from the alphabet.

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in self.alphabet for c in code)
