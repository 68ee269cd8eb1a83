import os
import logging
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///fitness_tracker.db")
SQL_ECHO = os.getenv("SQL_ECHO", "").strip().lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Only pre-fills the onboarding form; stored profiles are never defaulted.
DEFAULT_WEEKLY_AVAILABILITY = 3

MEALS_PER_DAY = 5
REFERENCE_AGE = 25
ACTIVITY_MULTIPLIER = 1.55
CALORIE_ADJUSTMENT = 500


def setup_logging(level: str | None = None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
