"""Pydantic response schema and whitelist command types used by the API."""

from enum import Enum

from pydantic import BaseModel


class WhitelistAction(str, Enum):
    """Whitelist mutations the game console understands."""

    ADD = "add"
    REMOVE = "remove"


class APIResponse(BaseModel):
    """
    JSON envelope returned to callers.

    `error` stays empty on success.
    """
    message: str
    error: str = ""


def format_command(action: WhitelistAction, username: str) -> str:
    """Console command for a whitelist mutation, e.g. `whitelist add bob`."""
    return f"whitelist {action.value} {username}"
