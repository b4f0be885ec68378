from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum, auto
from typing import Any, Optional

LOAN_PERIOD = timedelta(days=3)


class Role(Enum):
    REGULAR = auto()
    ADMIN = auto()


class BookStatus(Enum):
    AVAILABLE = auto()
    ON_LOAN = auto()


@dataclass(frozen=True)
class User:
    user_id: int
    username: str
    password: str
    role: Role = Role.REGULAR

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def __repr__(self) -> str:
        # keep the credential out of logs and tracebacks
        return f"User(user_id={self.user_id!r}, username={self.username!r}, role={self.role.name})"


@dataclass
class Ticket:
    """One loan event: who borrowed, when, and whether the loan is still open."""

    user: User
    checked_out_at: datetime
    active: bool = True

    def __setattr__(self, name: str, value: Any) -> None:
        # only the active flag may change once the ticket exists
        if name != "active" and name in self.__dict__:
            raise AttributeError(f"{name} is fixed once the ticket exists")
        super().__setattr__(name, value)

    def due_at(self) -> datetime:
        return self.checked_out_at + LOAN_PERIOD

    def is_overdue(self, now: datetime) -> bool:
        return self.active and self.due_at() < now

    def belongs_to(self, user: User) -> bool:
        return self.user.user_id == user.user_id

    def close(self) -> None:
        self.active = False


@dataclass
class Book:
    reference_number: int
    ticket: Optional[Ticket] = None

    @property
    def status(self) -> BookStatus:
        if self.ticket is not None and self.ticket.active:
            return BookStatus.ON_LOAN
        return BookStatus.AVAILABLE

    def is_available(self) -> bool:
        return self.status is BookStatus.AVAILABLE

    def snapshot(self) -> Book:
        """Detached copy; changes to it never reach the ledger."""
        ticket = replace(self.ticket) if self.ticket is not None else None
        return Book(reference_number=self.reference_number, ticket=ticket)
