"""Short code generation utilities."""

import secrets
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    # Letters only, both cases (52 characters)
    ALPHABET = string.ascii_letters

    def __init__(self, default_length: int = 6):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
        """
        if default_length < 1:
            raise ValueError("default_length must be positive")
        self.default_length = default_length

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Every character is drawn independently and uniformly from the
        alphabet using the operating system CSPRNG. Errors from the entropy
        source propagate to the caller.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        if length is None:
            length = self.default_length
        if length < 1:
            raise ValueError("length must be positive")
        return ''.join(secrets.choice(self.ALPHABET) for _ in range(length))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code consists only of alphabet characters.

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.ALPHABET for c in code)
