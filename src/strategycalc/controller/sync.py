"""
Y Synchronization
=================
Keeps the per-day Y cells of the slot grid consistent under the two sync
modes.

Modes:
    Pair sync: Military slot i <-> Economy slot i, same day.
    Global sync: every slot of both categories, same day. When on, it fully
        replaces pair sync.

All cell writes go through SyncController.set_value(). The fan-out to the
other cells is a flat loop over target keys that writes the grid directly,
so a propagated write never triggers another propagation.
"""
from __future__ import annotations

import logging
import math
from typing import List

from strategycalc.config import VALUE_EPSILON
from strategycalc.model.slots import Category, CellKey
from strategycalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class SyncController:
    def __init__(self, state: CalculatorState):
        self.state = state

    @property
    def active(self) -> bool:
        return self.state.sync_all_slots or self.state.sync_pair

    def set_value(self, key: CellKey, value: float) -> List[CellKey]:
        """
        Write one cell and propagate it according to the active mode.

        Returns:
            Keys of every cell whose value changed, the edited one first.
            Empty if the key is out of range, the value is NaN or infinite,
            or the value is unchanged.
        """
        if not self.state.has_cell(key):
            logger.debug(f"Ignoring write to missing cell {key}")
            return []

        value = float(value)
        if not math.isfinite(value):
            logger.debug(f"Ignoring non-finite value {value} for {key}")
            return []
        if not self._write(key, value):
            return []

        changed = [key]
        for target in self.targets_for(key):
            if target != key and self._write(target, value):
                changed.append(target)

        if len(changed) > 1:
            logger.debug(f"{key} = {value} propagated to {len(changed) - 1} cell(s)")
        return changed

    def targets_for(self, key: CellKey) -> List[CellKey]:
        """Cells that mirror `key` under the current mode (may include key itself)."""
        state = self.state
        if state.sync_all_slots:
            return [
                CellKey(slot.category, slot.index, key.day_index)
                for slot in state.iter_slots()
            ]
        if state.sync_pair:
            other = key.category.opposite
            if key.slot_index < len(state.slots(other)):
                return [CellKey(other, key.slot_index, key.day_index)]
        return []

    def apply_initial(self) -> List[CellKey]:
        """
        Re-synchronize the whole grid after a structural change or a mode
        toggle. Under global sync, Military slot 1 is the source for each day
        (0.0 if there is no Military slot). Under pair sync, each Military slot
        is copied onto the Economy slot with the same index.
        """
        state = self.state
        if not self.active:
            return []

        changed: List[CellKey] = []
        military = state.military_slots
        economy = state.economy_slots

        for day in range(state.days):
            if state.sync_all_slots:
                base = military[0].cells[day] if military else 0.0
                for slot in state.iter_slots():
                    key = CellKey(slot.category, slot.index, day)
                    if self._write(key, base):
                        changed.append(key)
            else:
                for i in range(min(len(military), len(economy))):
                    key = CellKey(Category.ECONOMY, i, day)
                    if self._write(key, military[i].cells[day]):
                        changed.append(key)

        if changed:
            logger.debug(f"Sync re-applied, {len(changed)} cell(s) updated")
        return changed

    def _write(self, key: CellKey, value: float) -> bool:
        if not self.state.has_cell(key):
            return False
        cells = self.state.slots(key.category)[key.slot_index].cells
        if abs(cells[key.day_index] - value) < VALUE_EPSILON:
            return False
        cells[key.day_index] = value
        return True
