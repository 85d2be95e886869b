"""Query handlers."""

from userservice.application.queries.handlers.get_user_handler import GetUserHandler

__all__ = ["GetUserHandler"]
