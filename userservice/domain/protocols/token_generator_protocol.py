"""Random token generator protocol."""

from typing import Protocol


class TokenGeneratorProtocol(Protocol):
    """Source of fixed-length random alphanumeric strings."""

    def generate(self, length: int) -> str:
        """Return ``length`` characters drawn uniformly from [A-Za-z0-9]."""
        ...
