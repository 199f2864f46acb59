"""Configuration management for the mealmatch application."""
import logging
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

from mealmatch.utilities import constants

logger = logging.getLogger(__name__)

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _env_number(name: str, default, cast, minimum=None, maximum=None):
    """Read a numeric setting. Unparseable or out-of-range values fall back to the default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        logger.warning("Ignoring %s=%r: outside [%s, %s], using %s", name, raw, minimum, maximum, default)
        return default
    return value


def _env_float(name: str, default: float, minimum: Optional[float] = None, maximum: Optional[float] = None) -> float:
    return _env_number(name, default, float, minimum, maximum)


def _env_int(name: str, default: int, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    return _env_number(name, default, int, minimum, maximum)


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = _env_int('APP_PORT', 8000, 1, 65535)
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Matching / scoring overrides, range-checked here so ScoringWeights.from_config never fails
MATCH_THRESHOLD: Final[float] = _env_float('MATCH_THRESHOLD', constants.MATCH_THRESHOLD, 0.0, 1.0)
CONTAINMENT_SIMILARITY: Final[float] = _env_float('CONTAINMENT_SIMILARITY', constants.CONTAINMENT_SIMILARITY, 0.0, 1.0)
EXPIRING_WEIGHT: Final[float] = _env_float('EXPIRING_WEIGHT', constants.EXPIRING_WEIGHT)
IN_STOCK_WEIGHT: Final[float] = _env_float('IN_STOCK_WEIGHT', constants.IN_STOCK_WEIGHT)
FULL_STOCK_WEIGHT: Final[float] = _env_float('FULL_STOCK_WEIGHT', constants.FULL_STOCK_WEIGHT)
COVERAGE_WEIGHT: Final[float] = _env_float('COVERAGE_WEIGHT', constants.COVERAGE_WEIGHT)
EXPIRING_SOON_DAYS: Final[int] = _env_int('EXPIRING_SOON_DAYS', constants.EXPIRING_SOON_DAYS, 0)
SUGGESTION_LIMIT: Final[int] = _env_int('SUGGESTION_LIMIT', constants.SUGGESTION_LIMIT, 1, constants.MAX_SUGGESTION_LIMIT)
