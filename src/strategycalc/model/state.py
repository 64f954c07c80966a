"""
Calculator State (Data Model)
=============================
This module defines the central data structure for a running calculator.

Why is this file needed?
------------------------
1. State Management: It holds the slot grid, day count, sync flags, initial
   totals and the latest results in one place.
2. Decoupling: Controllers write to this object; the Store exposes it to views.

Classes:
    CalculatorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, Iterator, List, Optional

from strategycalc.config import DEFAULT_DAYS
from strategycalc.model.slots import Category, CellKey, Slot
from strategycalc.model.results import DayResult, SummaryStatus

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """
    Holds the whole calculator. Each category owns an ordered list of slots
    whose indices are always 0..n-1 and whose cell lists always have
    `days` entries.
    """
    days: int = DEFAULT_DAYS
    sync_pair: bool = False
    sync_all_slots: bool = False

    military_slots: List[Slot] = field(default_factory=list)
    economy_slots: List[Slot] = field(default_factory=list)

    initial_totals: Dict[Category, int] = field(
        default_factory=lambda: {Category.MILITARY: 0, Category.ECONOMY: 0}
    )

    results: List[DayResult] = field(default_factory=list)
    summary_status: SummaryStatus = SummaryStatus.NOT_GENERATED
    summary_text: str = SummaryStatus.NOT_GENERATED.value

    def slots(self, category: Category) -> List[Slot]:
        if category is Category.MILITARY:
            return self.military_slots
        return self.economy_slots

    def iter_slots(self) -> Iterator[Slot]:
        """Military slots first, then Economy, each in index order."""
        yield from self.military_slots
        yield from self.economy_slots

    def get_slot(self, category: Category, index: int) -> Optional[Slot]:
        slots = self.slots(category)
        if 0 <= index < len(slots):
            return slots[index]
        return None

    def has_cell(self, key: CellKey) -> bool:
        slot = self.get_slot(key.category, key.slot_index)
        return slot is not None and 0 <= key.day_index < slot.day_count

    def get_cell(self, key: CellKey) -> float:
        return self.slots(key.category)[key.slot_index].cells[key.day_index]

    def reindex(self, category: Category) -> None:
        for i, slot in enumerate(self.slots(category)):
            slot.index = i

    def clear_results(self) -> None:
        self.results = []
        self.set_summary(SummaryStatus.NOT_GENERATED)

    def set_summary(self, status: SummaryStatus, text: Optional[str] = None) -> None:
        self.summary_status = status
        self.summary_text = status.value if text is None else text
