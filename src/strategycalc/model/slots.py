"""
Slot Data Model
===============
Defines the generator lines ("slots") of the calculator and the per-day
Y cells they own.

Classes:
    Category: Military or Economy.
    CellKey: Address of one Y cell in the grid.
    Slot: One configured generator line with its Y cells.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import List, NamedTuple
import logging

from strategycalc.config import (
    DEFAULT_MAX_VALUE, DEFAULT_USE_SIGN, DEFAULT_USE_INCREASE,
    MIN_DAYS, MIN_MAX_VALUE, MILITARY_LABEL, ECONOMY_LABEL,
)

logger = logging.getLogger(__name__)


class Category(StrEnum):
    MILITARY = "military"
    ECONOMY = "economy"

    @property
    def label(self) -> str:
        return MILITARY_LABEL if self is Category.MILITARY else ECONOMY_LABEL

    @property
    def opposite(self) -> Category:
        return Category.ECONOMY if self is Category.MILITARY else Category.MILITARY


class CellKey(NamedTuple):
    """(category, slot index, day index) address of a Y cell."""
    category: Category
    slot_index: int
    day_index: int


def strict_bool(value) -> bool:
    """Accept only real booleans; bool("false") would silently be True."""
    if not isinstance(value, bool):
        raise ValueError(f"Expected a bool, got {value!r}.")
    return value


# Editable slot parameters and the converter applied to each new value
SLOT_PARAMS = {
    "max_value": int,
    "use_sign": strict_bool,
    "use_increase": strict_bool,
}


@dataclass
class Slot:
    """
    A single generator line.

    The Y cells are plain floats, one per day. They are addressed through
    CellKey by the SyncController; nothing else writes them.
    """
    category: Category
    index: int = 0
    max_value: int = DEFAULT_MAX_VALUE
    use_sign: bool = DEFAULT_USE_SIGN
    use_increase: bool = DEFAULT_USE_INCREASE
    cells: List[float] = field(default_factory=list)

    @classmethod
    def create(cls, category: Category, index: int, days: int) -> Slot:
        slot = cls(category=category, index=index)
        slot.resize(days)
        return slot

    @property
    def title(self) -> str:
        return f"{self.category.label} {self.index + 1}"

    @property
    def day_count(self) -> int:
        return len(self.cells)

    def resize(self, days: int) -> None:
        """Grow with zero cells or truncate from the tail. Survivors keep their order."""
        days = max(MIN_DAYS, days)
        if len(self.cells) < days:
            self.cells.extend([0.0] * (days - len(self.cells)))
        elif len(self.cells) > days:
            del self.cells[days:]

    def clamp_max_value(self) -> bool:
        """Raise max_value to MIN_MAX_VALUE if needed. Returns True when it changed."""
        if self.max_value < MIN_MAX_VALUE:
            logger.debug(f"{self.title}: max_value {self.max_value} clamped to {MIN_MAX_VALUE}")
            self.max_value = MIN_MAX_VALUE
            return True
        return False
