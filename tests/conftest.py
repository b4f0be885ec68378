from datetime import datetime, timezone

import pytest

from bookledger import Book, FixedClock, Ledger, Role, Settings, User

START = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def start():
    return START


@pytest.fixture
def settings():
    return Settings(timezone="UTC", log_level="DEBUG")


@pytest.fixture
def clock():
    return FixedClock(START)


@pytest.fixture
def ledger(settings, clock):
    return Ledger(settings=settings, clock=clock)


@pytest.fixture
def alice():
    return User(1, "alice", "secret")


@pytest.fixture
def bob():
    return User(2, "bob", "hunter2")


@pytest.fixture
def admin():
    return User(99, "root", "toor", role=Role.ADMIN)


@pytest.fixture
def stocked(ledger, alice, bob, admin):
    """Ledger with three users and books #1-#3, nothing lent yet."""
    for user in (alice, bob, admin):
        ledger.register_user(user)
    for ref in (1, 2, 3):
        ledger.register_book(Book(ref))
    return ledger
