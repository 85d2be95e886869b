"""Queries (read operations)."""

from userservice.application.queries.user_queries import GetUser

__all__ = ["GetUser"]
