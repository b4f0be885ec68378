from __future__ import annotations
from datetime import datetime
import logging

from bookledger import (
    Book,
    FixedClock,
    Ledger,
    PermissionDenied,
    Settings,
    UserNotFound,
    configure_logging,
    seed_demo_data,
)

logger = logging.getLogger("demo")


def demo_flow() -> None:
    settings = Settings()
    configure_logging(settings)

    clock = FixedClock(datetime.now(settings.tzinfo))
    ledger = Ledger(settings=settings, clock=clock)
    seed_demo_data(ledger)

    # Login
    alice = ledger.login("alice", "secret")
    bob = ledger.login("bob", "hunter2")
    admin = ledger.login("ava", "admin-pass")
    try:
        ledger.login("alice", "wrong")
    except UserNotFound as exc:
        logger.info("[demo] login refused: %s", exc)

    # Inventory
    for book, status in ledger.report_inventory():
        logger.info("[demo]   - book #%s: %s", book.reference_number, status.name)

    # Bob tries to borrow a book Alice already has
    attempt = ledger.checkout(bob, Book(1))
    logger.info("[demo] bob checks out #1: %s", "SUCCESS" if attempt.active else "DENIED")

    # Only admins see overdue books
    try:
        ledger.overdue_books(alice)
    except PermissionDenied as exc:
        logger.info("[demo] %s", exc)

    # Four days later everything lent by the seed is overdue
    clock.advance(days=4)
    logger.info(
        "[demo] overdue after 4 days: %s",
        [b.reference_number for b in ledger.overdue_books(admin)],
    )

    # Bob cannot return #1 for Alice; Alice can
    logger.info("[demo] bob checks in #1: %s", ledger.check_in(bob, Book(1)))
    logger.info("[demo] alice checks in #1: %s", ledger.check_in(alice, Book(1)))
    logger.info(
        "[demo] overdue after alice returns #1: %s",
        [b.reference_number for b in ledger.overdue_books(admin)],
    )


if __name__ == "__main__":
    demo_flow()
