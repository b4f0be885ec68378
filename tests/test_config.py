from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from bookledger import Book, FixedClock, Ledger, Settings, SystemClock


def test_defaults(monkeypatch):
    for name in ("LEDGER_TIMEZONE", "LEDGER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.tzinfo == ZoneInfo("UTC")
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LEDGER_TIMEZONE", "Europe/London")
    monkeypatch.setenv("LEDGER_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.tzinfo == ZoneInfo("Europe/London")
    assert settings.log_level == "debug"


def test_environment_cannot_change_loan_period(monkeypatch, alice, admin, clock):
    monkeypatch.setenv("LEDGER_LOAN_PERIOD_DAYS", "30")
    ledger = Ledger(Settings(timezone="UTC"), clock)
    ledger.register_book(Book(1))
    ledger.checkout(alice, Book(1))
    clock.advance(days=4)
    assert [b.reference_number for b in ledger.overdue_books(admin)] == [1]


def test_unknown_timezone_is_rejected():
    with pytest.raises(ZoneInfoNotFoundError):
        Settings(timezone="Nowhere/Special")


def test_ledger_defaults_to_system_clock_in_configured_zone():
    ledger = Ledger(Settings(timezone="Asia/Tokyo"))
    assert isinstance(ledger.clock, SystemClock)
    now = ledger.clock.now()
    assert now.tzinfo == ZoneInfo("Asia/Tokyo")


def test_fixed_clock_requires_aware_time():
    with pytest.raises(ValueError):
        FixedClock(datetime(2024, 1, 1))
    clock = FixedClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
    with pytest.raises(ValueError):
        clock.set(datetime(2024, 1, 2))


def test_fixed_clock_converts_to_its_zone():
    tokyo = ZoneInfo("Asia/Tokyo")
    clock = FixedClock(datetime(2024, 1, 1, tzinfo=timezone.utc), tz=tokyo)
    assert clock.now().tzinfo is tokyo
    assert clock.now().hour == 9
    assert clock.advance(hours=1).hour == 10
