import logging
import os
from dataclasses import dataclass, field
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Zone in which due dates and "now" are evaluated
    timezone: str = field(default_factory=lambda: os.getenv("LEDGER_TIMEZONE", "UTC"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LEDGER_LOG_LEVEL", "INFO"))

    def __post_init__(self) -> None:
        # fail early on an unknown zone name
        ZoneInfo(self.timezone)

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
