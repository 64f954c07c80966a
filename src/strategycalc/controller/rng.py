"""
Shared random generator.

One numpy Generator with process-wide lifetime is used for every draw.
It is created once and only replaced by an explicit set_seed() call.

Non-goals:
- Cryptographic security
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from strategycalc.config import get_env_seed

logger = logging.getLogger(__name__)

_SEED: Optional[int] = get_env_seed()
_GLOBAL_RNG: np.random.Generator = np.random.default_rng(_SEED)


def set_seed(seed: Optional[int]) -> None:
    """Replace the shared generator. None seeds from OS entropy."""
    global _SEED, _GLOBAL_RNG
    _SEED = seed
    _GLOBAL_RNG = np.random.default_rng(seed)
    logger.debug(f"Random generator seeded with {seed}")


def get_seed() -> Optional[int]:
    return _SEED


def get_rng() -> np.random.Generator:
    return _GLOBAL_RNG
