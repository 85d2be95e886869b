"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("pw1")
        is_valid = password_service.verify_password("pw1", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Same password produces different hashes (random salt).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Constant-time comparison. Returns False for malformed hashes,
        never raises.
        """
        ...
