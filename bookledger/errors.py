"""
Ledger exceptions.

Only conditions the caller must be told about are raised: permission and
login failures, and conflicting registrations. An unavailable book or a
check-in that does not match the loan is an ordinary outcome and is reported
through return values instead.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PermissionDenied(LedgerError):
    """Raised when a user without the required role attempts a restricted action."""

    def __init__(self, user_id: Any, action: str):
        self.user_id = user_id
        self.action = action
        super().__init__(
            f"User {user_id} is not permitted to {action}",
            {"user_id": user_id, "action": action},
        )


class UserNotFound(LedgerError):
    """Raised when no registered user matches the supplied credentials."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"No user matches username {username!r}", {"username": username})


class DuplicateRegistration(LedgerError):
    """Raised when a different entity is already registered under the same key."""

    def __init__(self, kind: str, key: Any):
        self.kind = kind
        self.key = key
        super().__init__(
            f"A different {kind} is already registered under {key!r}",
            {"kind": kind, "key": key},
        )
