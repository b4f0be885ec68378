from __future__ import annotations
import logging

from .api import Ledger
from .domain import Book, Role, User

logger = logging.getLogger(__name__)


def seed_demo_data(ledger: Ledger) -> None:
    # users
    alice = ledger.register_user(User(1, "alice", "secret"))
    bob = ledger.register_user(User(2, "bob", "hunter2"))
    ledger.register_user(User(3, "ava", "admin-pass", role=Role.ADMIN))

    # books
    for reference_number in (1, 2, 3, 4):
        ledger.register_book(Book(reference_number))

    # checkouts
    ledger.checkout(alice, Book(1))
    ledger.checkout(alice, Book(2))
    ledger.checkout(bob, Book(3))

    logger.info("[seed] users: %s", [u.username for u in ledger.list_users()])
    logger.info("[seed] books: %s", [b.reference_number for b in ledger.list_books()])
    logger.info(
        "[seed] alice's loans: %s",
        [b.reference_number for b in ledger.list_user_loans(alice)],
    )
