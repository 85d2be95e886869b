"""Result types for railway-oriented programming.

Operations that can fail in an expected way (duplicate username, expired
verification token, mail server down) return a Result instead of raising.
Callers branch with structural pattern matching.

Usage:
    result = await handler.handle(LoginUser(username="alice", password="pw1"))
    match result:
        case Success(value=tokens):
            return tokens.access_token
        case Failure(error=error):
            log.warning("login denied", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error value (a DomainError subclass in this codebase).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]


def is_success(result: "Result[T, E]") -> bool:
    """Return True when the result is a Success."""
    return isinstance(result, Success)


def is_failure(result: "Result[T, E]") -> bool:
    """Return True when the result is a Failure."""
    return isinstance(result, Failure)
