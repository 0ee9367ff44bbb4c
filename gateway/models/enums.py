"""Enumerations for the API key domain."""

from enum import Enum


class KeyOutcome(str, Enum):
    """Result of a key store mutation."""

    ADDED = "added"
    ALREADY_EXISTS = "already_exists"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
