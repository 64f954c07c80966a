from __future__ import annotations

import logging
import math
from typing import List, Optional, Union

from PySide6.QtCore import QObject, Signal

import numpy as np

from strategycalc.controller.aggregator import Aggregator
from strategycalc.controller.generator import GenerationEngine
from strategycalc.controller.grid import GridController
from strategycalc.controller.sync import SyncController
from strategycalc.model.results import DayResult, SumReport, SummaryStatus
from strategycalc.model.slots import Category, CellKey, SLOT_PARAMS, Slot
from strategycalc.model.state import CalculatorState

logger = logging.getLogger(__name__)

CategoryLike = Union[Category, str]


class Store(QObject):
    """
    Central calculator store. Views call its methods and listen to its
    signals; every signal fires after the state is consistent again.
    """
    slots_changed = Signal(str)
    days_changed = Signal(int)
    cells_changed = Signal(object)
    sync_modes_changed = Signal(bool, bool)
    slot_param_changed = Signal(str, int, str)
    initial_totals_changed = Signal()
    results_changed = Signal(object)
    summary_changed = Signal(str)

    def __init__(
        self,
        state: Optional[CalculatorState] = None,
        rng: Optional[np.random.Generator] = None,
        with_default_slots: bool = True,
    ) -> None:
        super().__init__()
        self.state = state if state is not None else CalculatorState()
        self.sync = SyncController(self.state)
        self.grid = GridController(self.state, self.sync)
        self.engine = GenerationEngine(self.state, rng=rng)
        self.aggregator = Aggregator(self.state)

        if with_default_slots and state is None:
            self.grid.add_slot(Category.MILITARY)
            self.grid.add_slot(Category.ECONOMY)

    # ---------------- read access ----------------
    @property
    def days(self) -> int:
        return self.state.days

    @days.setter
    def days(self, value: int) -> None:
        self.set_day_count(value)

    @property
    def sync_pair(self) -> bool:
        return self.state.sync_pair

    @property
    def sync_all_slots(self) -> bool:
        return self.state.sync_all_slots

    @property
    def results(self) -> List[DayResult]:
        return list(self.state.results)

    @property
    def summary_text(self) -> str:
        return self.state.summary_text

    @property
    def summary_status(self) -> SummaryStatus:
        return self.state.summary_status

    def slots(self, category: CategoryLike) -> List[Slot]:
        return list(self.state.slots(Category(category)))

    def cell_value(self, category: CategoryLike, slot_index: int, day_index: int) -> float:
        return self.state.get_cell(CellKey(Category(category), slot_index, day_index))

    def initial_total(self, category: CategoryLike) -> int:
        return self.state.initial_totals[Category(category)]

    # ---------------- slot ops ----------------
    def add_slot(self, category: CategoryLike) -> None:
        category = Category(category)
        changed = self.grid.add_slot(category)
        self.slots_changed.emit(category.value)
        self._emit_cells(changed)

    def remove_slot(self, category: CategoryLike) -> None:
        category = Category(category)
        changed = self.grid.remove_slot(category)
        if changed is None:
            return
        self.slots_changed.emit(category.value)
        self._emit_cells(changed)

    def set_day_count(self, days: int) -> None:
        changed = self.grid.set_day_count(days)
        if changed is None:
            return
        self.days_changed.emit(self.state.days)
        self._emit_cells(changed)

    # ---------------- sync modes ----------------
    def set_sync_pair_mode(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if self.state.sync_pair == enabled:
            return
        self.state.sync_pair = enabled
        self._sync_modes_updated()

    def set_sync_global_mode(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if self.state.sync_all_slots == enabled:
            return
        self.state.sync_all_slots = enabled
        self._sync_modes_updated()

    def _sync_modes_updated(self) -> None:
        logger.info(f"Sync modes: pair={self.state.sync_pair}, all slots={self.state.sync_all_slots}")
        changed = self.sync.apply_initial()
        self.sync_modes_changed.emit(self.state.sync_pair, self.state.sync_all_slots)
        self._emit_cells(changed)

    # ---------------- parameters ----------------
    def set_slot_param(self, category: CategoryLike, index: int, field: str, value) -> None:
        """
        Set max_value, use_sign or use_increase of one slot.
        max_value is stored as given; it is clamped to >= 1 at generation time.
        use_sign and use_increase only take real bools (ValueError otherwise).
        """
        if field not in SLOT_PARAMS:
            raise ValueError(f"Unknown slot parameter '{field}'.")
        category = Category(category)
        slot = self.state.get_slot(category, index)
        if slot is None:
            logger.warning(f"No {category.label} slot at index {index}, parameter '{field}' ignored")
            return

        value = SLOT_PARAMS[field](value)
        if getattr(slot, field) == value:
            return
        setattr(slot, field, value)
        self.slot_param_changed.emit(category.value, index, field)

    def set_cell_value(self, category: CategoryLike, slot_index: int, day_index: int, value: float) -> None:
        key = CellKey(Category(category), slot_index, day_index)
        if not self.state.has_cell(key):
            logger.warning(f"No cell at {key}, edit ignored")
            return
        if not math.isfinite(value):
            logger.warning(f"Non-finite Y {value} for {key}, edit ignored")
            return
        self._emit_cells(self.sync.set_value(key, value))

    def set_initial_total(self, category: CategoryLike, value: int) -> None:
        category = Category(category)
        value = int(value)
        if self.state.initial_totals[category] == value:
            return
        self.state.initial_totals[category] = value
        self.initial_totals_changed.emit()

    # ---------------- generate & sum ----------------
    def generate(self) -> None:
        results = self.engine.generate()
        self.state.set_summary(SummaryStatus.GENERATED)
        self.results_changed.emit(list(results))
        self.summary_changed.emit(self.state.summary_text)

    def sum_all(self) -> Optional[SumReport]:
        report = self.aggregator.sum_all()
        if report is None:
            self.state.set_summary(SummaryStatus.MUST_GENERATE)
        else:
            self.state.set_summary(SummaryStatus.SUMMED, report.text)
        self.summary_changed.emit(self.state.summary_text)
        return report

    def reset(self) -> None:
        """Clear results and summary. Slots, days and sync modes are kept."""
        self.state.clear_results()
        logger.info("Results have been reset.")
        self.results_changed.emit([])
        self.summary_changed.emit(self.state.summary_text)

    def _emit_cells(self, changed: List[CellKey]) -> None:
        if changed:
            self.cells_changed.emit(list(changed))
