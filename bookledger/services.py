from __future__ import annotations
from dataclasses import replace
from datetime import datetime
from typing import List, Optional, Tuple
import logging

from .clock import Clock
from .domain import Book, BookStatus, Ticket, User
from .errors import PermissionDenied, UserNotFound
from .repositories import BookRepo, UserRepo

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepo) -> None:
        self.users = users

    def register_user(self, user: User) -> User:
        if self.users.add(user):
            logger.debug("registered user %s (%s)", user.user_id, user.role.name)
        return user

    def get(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def login(self, username: str, password: str) -> User:
        # plain equality on stored fields; a real credential store replaces this
        user = self.users.find_by_credentials(username, password)
        if user is None:
            logger.warning("login failed for username %r", username)
            raise UserNotFound(username)
        return user


class CatalogService:
    def __init__(self, books: BookRepo) -> None:
        self.books = books

    def register_book(self, book: Book) -> None:
        if self.books.add(book):
            logger.debug("registered book #%s", book.reference_number)

    def find_book(self, reference_number: int) -> Optional[Book]:
        entry = self.books.get_locked(reference_number)
        if entry is None:
            return None
        book, lock = entry
        with lock:
            return book.snapshot()

    def list_books(self) -> List[Book]:
        books: List[Book] = []
        for book, lock in self.books.list_locked():
            with lock:
                books.append(book.snapshot())
        return books


class CirculationService:
    """
    Checkout, check-in and overdue reporting.

    Every read-check-mutate sequence on a book runs while holding that book's
    lock, so at most one active ticket can ever be attached to it. No method
    holds more than one book lock at a time, and unknown reference numbers
    are answered without taking any lock.
    """

    def __init__(self, books: BookRepo, clock: Clock) -> None:
        self.books = books
        self.clock = clock

    def checkout(self, user: User, reference_number: int) -> Ticket:
        """
        Lend the book to ``user``.

        Returns the new active ticket on success. When the book is unknown or
        already on loan, returns an inactive ticket for ``user`` stamped with
        the current time and leaves the ledger untouched.
        """
        now = self.clock.now()
        entry = self.books.get_locked(reference_number)
        if entry is None:
            logger.debug("[checkout] book #%s is not registered", reference_number)
            return Ticket(user=user, checked_out_at=now, active=False)

        book, lock = entry
        with lock:
            if not book.is_available():
                logger.debug("[checkout] book #%s is already on loan", reference_number)
                return Ticket(user=user, checked_out_at=now, active=False)

            ticket = Ticket(user=user, checked_out_at=now, active=True)
            book.ticket = ticket

        logger.info("[checkout] book #%s lent to user %s", reference_number, user.user_id)
        return replace(ticket)

    def check_in(self, user: User, reference_number: int) -> bool:
        """Close the loan if ``user`` holds it. True only when a loan was closed."""
        entry = self.books.get_locked(reference_number)
        closed = False
        if entry is not None:
            book, lock = entry
            with lock:
                if book.ticket is not None and book.ticket.belongs_to(user):
                    closed = book.ticket.active
                    book.ticket.close()

        if closed:
            logger.info("[check-in] book #%s returned by user %s", reference_number, user.user_id)
        else:
            logger.debug(
                "[check-in] ignored: book #%s is not on loan to user %s",
                reference_number,
                user.user_id,
            )
        return closed

    def overdue_books(self, user: User) -> List[Book]:
        if not user.is_admin:
            logger.warning("[overdue] user %s denied overdue report", user.user_id)
            raise PermissionDenied(user.user_id, "view overdue books")

        now = self.clock.now()
        overdue: List[Book] = []
        for book, lock in self.books.list_locked():
            with lock:
                if book.ticket is not None and book.ticket.is_overdue(now):
                    overdue.append(book.snapshot())
        return overdue

    def due_date(self, reference_number: int) -> Optional[datetime]:
        entry = self.books.get_locked(reference_number)
        if entry is None:
            return None
        book, lock = entry
        with lock:
            if book.ticket is None or not book.ticket.active:
                return None
            return book.ticket.due_at()

    def list_user_loans(self, user: User) -> List[Book]:
        loans: List[Book] = []
        for book, lock in self.books.list_locked():
            with lock:
                ticket = book.ticket
                if ticket is not None and ticket.active and ticket.belongs_to(user):
                    loans.append(book.snapshot())
        return loans

    def report_inventory(self) -> List[Tuple[Book, BookStatus]]:
        report: List[Tuple[Book, BookStatus]] = []
        for book, lock in self.books.list_locked():
            with lock:
                snapshot = book.snapshot()
            report.append((snapshot, snapshot.status))
        return report
