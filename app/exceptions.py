"""Custom exceptions for owner records."""

from typing import Dict, List, Optional


class OwnerRecordError(Exception):
    """Base exception for all owner record errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class OwnerValidationError(OwnerRecordError):
    """One or more field rules rejected the owner.

    ``errors`` maps each failing field to its messages, in rule order.
    """

    def __init__(self, errors: Dict[str, List[str]]) -> None:
        self.errors = errors
        super().__init__(
            "Owner is invalid",
            "; ".join(
                f"{field} {message}"
                for field, messages in errors.items()
                for message in messages
            ),
        )


class PersistenceError(OwnerRecordError):
    """The storage layer failed to write the owner."""

    def __init__(self, reason: str) -> None:
        super().__init__("Failed to persist owner", reason)
