"""Random token generator (adapter).

Produces fixed-length alphanumeric strings for email verification links.

Security:
    - ``secrets.choice`` (OS CSPRNG), never ``random``
    - Each character drawn independently and uniformly from 62 symbols
    - 6 characters = 62^6 (~5.7e10) possibilities; short lifetime and
      single use keep brute force impractical
"""

import secrets
import string

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


class TokenGenerator:
    """Secure alphanumeric token generator.

    Implements TokenGeneratorProtocol (structural typing).

    Usage:
        generator = TokenGenerator()
        token = generator.generate(6)  # e.g. "aZ3k9Q"
    """

    def generate(self, length: int) -> str:
        """Generate a random alphanumeric token.

        Args:
            length: Number of characters (must be positive).

        Returns:
            Token of exactly ``length`` characters from [A-Za-z0-9].

        Raises:
            ValueError: If length is less than 1.
        """
        if length < 1:
            msg = "Token length must be at least 1"
            raise ValueError(msg)
        return "".join(secrets.choice(ALPHABET) for _ in range(length))
