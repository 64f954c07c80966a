"""
Configuration & Constants
=========================
This module serves as the central registry for defaults and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (default max value, sign odds, ...)
   scattered throughout the engine.
2. Deployment: It reads the optional RNG seed from the environment so runs can
   be reproduced without touching code.

Exports:
    DEFAULT_DAYS (int): Day count of a fresh calculator.
    DEFAULT_MAX_VALUE (int): Upper bound of a new slot's draw.
    SEED_ENV_VAR (str): Name of the environment variable holding the seed.
"""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Grid defaults
DEFAULT_DAYS: int = 3
MIN_DAYS: int = 1

# Slot defaults
DEFAULT_MAX_VALUE: int = 100
MIN_MAX_VALUE: int = 1
DEFAULT_USE_SIGN: bool = True
DEFAULT_USE_INCREASE: bool = True

# A signed draw is negated when a uniform draw in [1, NEGATIVE_SIGN_ODDS] hits 1
NEGATIVE_SIGN_ODDS: int = 3

# Cell writes closer than this to the stored value are ignored
VALUE_EPSILON: float = 1e-12

# Display
MILITARY_LABEL: str = "Military"
ECONOMY_LABEL: str = "Economy"
EMPTY_VALUES_TEXT: str = "—"
VALUE_SEPARATOR: str = "  "

STATUS_NOT_GENERATED: str = "Not generated"
STATUS_GENERATED: str = "Generated (press Sum for totals)"
STATUS_MUST_GENERATE: str = "Generate first"

# Randomness
SEED_ENV_VAR: str = "STRATEGYCALC_SEED"


def get_env_seed() -> Optional[int]:
    """
    Read the RNG seed from the environment.
    Returns None when the variable is unset or not an integer.
    """
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {SEED_ENV_VAR}={raw!r}")
        return None
