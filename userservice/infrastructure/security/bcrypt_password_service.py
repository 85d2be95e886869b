"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with a configurable cost factor
(``bcrypt_rounds`` setting, default 12).

Security:
    - Random salt per hash, embedded in the digest
    - Constant-time comparison in ``bcrypt.checkpw``
    - Plaintext is never logged or stored
    - bcrypt only reads the first 72 bytes; longer passwords are rejected
      by the ``Password`` validator before they reach this service
"""

import bcrypt

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 31


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Stateless and safe to share: the container builds one instance.

    Usage:
        from userservice.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("pw1")
        is_valid = password_service.verify_password("pw1", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt log2 work factor. Each +1 doubles the time;
                12 costs roughly 250ms. Tests use 4.

        Raises:
            ValueError: If cost_factor is outside 4..31 (bcrypt's range).
        """
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = f"Cost factor must be between {MIN_COST_FACTOR} and {MAX_COST_FACTOR}"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        """Configured work factor."""
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            60-character bcrypt digest ($2b$<cost>$<salt><hash>).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt digest.

        Args:
            password: Plaintext password.
            password_hash: Stored digest.

        Returns:
            True on match. False on mismatch or malformed digest.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            # Malformed digest or over-long input
            return False
