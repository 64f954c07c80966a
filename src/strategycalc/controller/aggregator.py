"""
Summation of generated results into final totals.
Pure read-time reduction: nothing in the state is changed here.
"""
from __future__ import annotations

import logging
from typing import Optional

from strategycalc.model.results import CategoryTotal, SumReport
from strategycalc.model.slots import Category
from strategycalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class Aggregator:
    def __init__(self, state: CalculatorState):
        self.state = state

    def sum_all(self) -> Optional[SumReport]:
        """Totals per category, or None if nothing has been generated yet."""
        results = self.state.results
        if not results:
            return None

        totals = self.state.initial_totals
        report = SumReport(
            military=CategoryTotal(
                initial=totals[Category.MILITARY],
                delta=sum(r.military_sum for r in results),
            ),
            economy=CategoryTotal(
                initial=totals[Category.ECONOMY],
                delta=sum(r.economy_sum for r in results),
            ),
        )
        logger.info(f"Summed {len(results)} day(s): {report.text}")
        return report
