"""
Generation Results
==================
Immutable outcome of one generate() call (one DayResult per day) and the
report produced when the results are summed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from strategycalc.config import (
    STATUS_NOT_GENERATED, STATUS_GENERATED, STATUS_MUST_GENERATE,
    MILITARY_LABEL, ECONOMY_LABEL,
)
from strategycalc.utils import format_signed, format_values


class SummaryStatus(Enum):
    NOT_GENERATED = STATUS_NOT_GENERATED
    GENERATED = STATUS_GENERATED
    MUST_GENERATE = STATUS_MUST_GENERATE
    SUMMED = ""


@dataclass(frozen=True)
class DayResult:
    day: int  # 1-based
    military_values: Tuple[int, ...] = ()
    economy_values: Tuple[int, ...] = ()

    @property
    def military_sum(self) -> int:
        return sum(self.military_values)

    @property
    def economy_sum(self) -> int:
        return sum(self.economy_values)

    @property
    def military_text(self) -> str:
        return format_values(self.military_values)

    @property
    def economy_text(self) -> str:
        return format_values(self.economy_values)


@dataclass(frozen=True)
class CategoryTotal:
    initial: int
    delta: int

    @property
    def final(self) -> int:
        return self.initial + self.delta

    def describe(self, label: str) -> str:
        return (
            f"{label} total = {format_signed(self.initial)} + "
            f"{format_signed(self.delta)} = {format_signed(self.final)}"
        )


@dataclass(frozen=True)
class SumReport:
    military: CategoryTotal
    economy: CategoryTotal

    @property
    def text(self) -> str:
        return (
            f"{self.military.describe(MILITARY_LABEL)}    /    "
            f"{self.economy.describe(ECONOMY_LABEL)}"
        )
