"""
Value Generation
================
Draws one value per slot per day and scales it by that slot's Y cell.

Algorithm (per slot, per day):
1. raw = uniform integer in [1, max_value]
2. if use_sign: a uniform draw in [1, 3] equal to 1 negates raw (p = 1/3)
3. if use_increase: value = round(raw + |raw| * Y / 100), ties away from zero
"""
from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from strategycalc.config import MIN_MAX_VALUE, NEGATIVE_SIGN_ODDS
from strategycalc.controller.rng import get_rng
from strategycalc.model.results import DayResult
from strategycalc.model.slots import Slot
from strategycalc.model.state import CalculatorState
from strategycalc.utils import apply_increase

logger = logging.getLogger(__name__)


def draw_plus(rng: np.random.Generator, max_value: int) -> int:
    return int(rng.integers(1, max_value, endpoint=True))


def draw_signed(rng: np.random.Generator, max_value: int) -> int:
    value = draw_plus(rng, max_value)
    if int(rng.integers(1, NEGATIVE_SIGN_ODDS, endpoint=True)) == 1:
        value = -value
    return value


class GenerationEngine:
    """
    Produces the DayResult list for the current state.

    Args:
        state: The calculator state to read slots and cells from.
        rng: Generator to draw from. Defaults to the shared process-wide one,
            looked up on each call so set_seed() takes effect.
    """
    def __init__(self, state: CalculatorState, rng: Optional[np.random.Generator] = None):
        self.state = state
        self._rng = rng

    @property
    def rng(self) -> np.random.Generator:
        return self._rng if self._rng is not None else get_rng()

    def draw(self, slot: Slot, day_index: int) -> int:
        rng = self.rng
        raw = draw_signed(rng, slot.max_value) if slot.use_sign else draw_plus(rng, slot.max_value)
        if not slot.use_increase:
            return raw
        return apply_increase(raw, slot.cells[day_index])

    def generate(self) -> List[DayResult]:
        """Replace state.results with a fresh run. Clamps max_value < 1 in place."""
        state = self.state
        clamped = sum(1 for slot in state.iter_slots() if slot.clamp_max_value())
        if clamped:
            logger.info(f"Clamped max_value of {clamped} slot(s) to {MIN_MAX_VALUE}")

        # Previous results stay in place until the new run is complete
        results: List[DayResult] = []
        for day in range(state.days):
            military = tuple(self.draw(slot, day) for slot in state.military_slots)
            economy = tuple(self.draw(slot, day) for slot in state.economy_slots)
            results.append(DayResult(day=day + 1, military_values=military, economy_values=economy))

        state.results = results
        logger.info(
            f"Generated {len(results)} day(s) for "
            f"{len(state.military_slots)} military / {len(state.economy_slots)} economy slot(s)"
        )
        return results
