"""
Slot Grid Management
====================
Structural changes to the slot grid: adding/removing slots and changing the
day count. Every change re-applies synchronization afterwards.

Invalid input is clamped or ignored, never rejected.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from strategycalc.config import MIN_DAYS
from strategycalc.controller.sync import SyncController
from strategycalc.model.slots import Category, CellKey, Slot
from strategycalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class GridController:
    def __init__(self, state: CalculatorState, sync: SyncController):
        self.state = state
        self.sync = sync

    def add_slot(self, category: Category) -> List[CellKey]:
        """Append a default slot to `category`. Returns cells changed by re-sync."""
        slots = self.state.slots(category)
        slot = Slot.create(category, len(slots), self.state.days)
        slots.append(slot)
        self.state.reindex(category)
        logger.debug(f"Added slot {slot.title}")
        return self.sync.apply_initial()

    def remove_slot(self, category: Category) -> Optional[List[CellKey]]:
        """
        Drop the most recently added slot of `category`.
        Returns None when the category is already empty (nothing happened).
        """
        slots = self.state.slots(category)
        if not slots:
            return None
        removed = slots.pop()
        self.state.reindex(category)
        logger.debug(f"Removed slot {removed.title}")
        return self.sync.apply_initial()

    def set_day_count(self, days: int) -> Optional[List[CellKey]]:
        """
        Resize every slot to `days` (clamped to >= 1).
        Returns None when the clamped count equals the current one.
        """
        days = max(MIN_DAYS, int(days))
        if days == self.state.days:
            return None
        self.state.days = days
        for slot in self.state.iter_slots():
            slot.resize(days)
        logger.debug(f"Day count set to {days}")
        return self.sync.apply_initial()
