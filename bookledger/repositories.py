from __future__ import annotations
from threading import Lock
from typing import Dict, List, Optional, Tuple

from .domain import Book, User
from .errors import DuplicateRegistration


class UserRepo:
    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._lock = Lock()

    def add(self, user: User) -> bool:
        """Store ``user``. Returns False if the identical user was already stored."""
        with self._lock:
            existing = self._users.get(user.user_id)
            if existing is not None:
                if existing == user:
                    return False
                raise DuplicateRegistration("user", user.user_id)
            # login matches on username, so it has to stay unique too
            if any(u.username == user.username for u in self._users.values()):
                raise DuplicateRegistration("username", user.username)
            self._users[user.user_id] = user
            return True

    def get(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_credentials(self, username: str, password: str) -> Optional[User]:
        with self._lock:
            return next(
                (
                    u
                    for u in self._users.values()
                    if u.username == username and u.password == password
                ),
                None,
            )

    def list_all(self) -> List[User]:
        with self._lock:
            return sorted(self._users.values(), key=lambda u: u.user_id)


class BookRepo:
    """
    Holds the live Book objects, each with the lock that guards its loan
    state. Locks exist only for registered books. Callers outside the package
    only ever see snapshots; loan state is changed by CirculationService alone.
    """

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}
        self._book_locks: Dict[int, Lock] = {}
        self._lock = Lock()

    def add(self, book: Book) -> bool:
        with self._lock:
            existing = self._books.get(book.reference_number)
            if existing is not None:
                if existing == book:
                    return False
                raise DuplicateRegistration("book", book.reference_number)
            self._books[book.reference_number] = book.snapshot()
            self._book_locks[book.reference_number] = Lock()
            return True

    def get_locked(self, reference_number: int) -> Optional[Tuple[Book, Lock]]:
        """The live book and its lock, or None for an unregistered reference."""
        with self._lock:
            book = self._books.get(reference_number)
            if book is None:
                return None
            return book, self._book_locks[reference_number]

    def list_locked(self) -> List[Tuple[Book, Lock]]:
        with self._lock:
            return [(self._books[ref], self._book_locks[ref]) for ref in sorted(self._books)]

    def lock_count(self) -> int:
        with self._lock:
            return len(self._book_locks)
