"""
BookLedger package.

Exports key modules for convenient imports.
"""

from .domain import (
    LOAN_PERIOD,
    Role,
    BookStatus,
    User,
    Ticket,
    Book,
)

from .errors import (
    LedgerError,
    PermissionDenied,
    UserNotFound,
    DuplicateRegistration,
)

from .clock import Clock, SystemClock, FixedClock
from .config import Settings, configure_logging

from .repositories import (
    UserRepo,
    BookRepo,
)

from .services import (
    UserService,
    CatalogService,
    CirculationService,
)

from .api import Ledger
from .seed import seed_demo_data

__all__ = [
    # domain
    "LOAN_PERIOD",
    "Role",
    "BookStatus",
    "User",
    "Ticket",
    "Book",
    # errors
    "LedgerError",
    "PermissionDenied",
    "UserNotFound",
    "DuplicateRegistration",
    # clock / config
    "Clock",
    "SystemClock",
    "FixedClock",
    "Settings",
    "configure_logging",
    # repos
    "UserRepo",
    "BookRepo",
    # services
    "UserService",
    "CatalogService",
    "CirculationService",
    # api
    "Ledger",
    # seed
    "seed_demo_data",
]
