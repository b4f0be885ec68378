from __future__ import annotations
from datetime import datetime
from typing import List, Optional, Tuple

from .clock import Clock, SystemClock
from .config import Settings
from .domain import Book, BookStatus, Ticket, User
from .repositories import BookRepo, UserRepo
from .services import CatalogService, CirculationService, UserService


class Ledger:
    """
    The lending ledger: wires repos + services and offers the public API.

    Result conventions:
      - lookups return None when nothing matches
      - checkout returns a Ticket; ``ticket.active`` is False when the book
        could not be lent (unknown or already out)
      - check_in returns True only when it closed an active loan
      - login, overdue_books and conflicting registrations raise LedgerError
        subclasses
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> None:
        self.settings = settings or Settings()
        self.clock = clock or SystemClock(self.settings.tzinfo)

        # repos
        self._users = UserRepo()
        self._books = BookRepo()

        # services
        self._user_service = UserService(self._users)
        self._catalog = CatalogService(self._books)
        self._circulation = CirculationService(self._books, self.clock)

    # ---- registration
    def register_book(self, book: Book) -> None:
        self._catalog.register_book(book)

    def register_user(self, user: User) -> User:
        return self._user_service.register_user(user)

    # ---- lookups
    def find_book(self, reference_number: int) -> Optional[Book]:
        return self._catalog.find_book(reference_number)

    def list_books(self) -> List[Book]:
        return self._catalog.list_books()

    def list_users(self) -> List[User]:
        return self._users.list_all()

    def login(self, username: str, password: str) -> User:
        return self._user_service.login(username, password)

    # ---- circulation
    def checkout(self, user: User, book: Book) -> Ticket:
        # only the key of the caller's book is trusted
        return self._circulation.checkout(user, book.reference_number)

    def check_in(self, user: User, book: Book) -> bool:
        return self._circulation.check_in(user, book.reference_number)

    def due_date(self, reference_number: int) -> Optional[datetime]:
        return self._circulation.due_date(reference_number)

    def list_user_loans(self, user: User) -> List[Book]:
        return self._circulation.list_user_loans(user)

    # ---- reporting
    def overdue_books(self, user: User) -> List[Book]:
        return self._circulation.overdue_books(user)

    def report_inventory(self) -> List[Tuple[Book, BookStatus]]:
        return self._circulation.report_inventory()
