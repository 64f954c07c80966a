"""
Application Initialization
==========================
Builds a Store from command-line options, runs one generation and prints the
day results and the summed totals.

It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Seeds the shared random generator (if requested).
3. Instantiates the Store and applies the configuration.
"""
import argparse
import logging
from typing import List, Optional

from strategycalc.app.state import Store
from strategycalc.controller.rng import set_seed
from strategycalc.logging_config import setup_logging
from strategycalc.model.slots import Category

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strategycalc",
        description="Generate per-day Military/Economy values and sum them.",
    )
    parser.add_argument("--days", type=int, default=3, help="Number of days (min 1)")
    parser.add_argument("--military", type=int, default=1, help="Number of Military slots")
    parser.add_argument("--economy", type=int, default=1, help="Number of Economy slots")
    parser.add_argument("--max-value", type=int, default=None, help="Max value for every slot")
    parser.add_argument("--y", type=float, default=0.0, help="Y percent for Military slot 1 on every day")
    parser.add_argument("--sync-pair", action="store_true", help="Mirror Military slot i <-> Economy slot i")
    parser.add_argument("--sync-all", action="store_true", help="Mirror Y across all slots of a day")
    parser.add_argument("--init-military", type=int, default=0)
    parser.add_argument("--init-economy", type=int, default=0)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", default=None, help="Write a detailed run log (DEBUG) to this file")
    return parser


def configure_store(store: Store, args: argparse.Namespace) -> None:
    store.set_day_count(args.days)

    for category, wanted in ((Category.MILITARY, args.military), (Category.ECONOMY, args.economy)):
        while len(store.slots(category)) < wanted:
            store.add_slot(category)
        while len(store.slots(category)) > max(wanted, 0):
            store.remove_slot(category)

    if args.max_value is not None:
        for category in Category:
            for slot in store.slots(category):
                store.set_slot_param(category, slot.index, "max_value", args.max_value)

    store.set_sync_pair_mode(args.sync_pair)
    store.set_sync_global_mode(args.sync_all)

    if store.slots(Category.MILITARY):
        for day in range(store.days):
            store.set_cell_value(Category.MILITARY, 0, day, args.y)

    store.set_initial_total(Category.MILITARY, args.init_military)
    store.set_initial_total(Category.ECONOMY, args.init_economy)


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.debug else logging.WARNING,
        log_file=args.log_file,
    )

    if args.seed is not None:
        set_seed(args.seed)

    store = Store()
    configure_store(store, args)

    store.generate()
    for result in store.results:
        print(f"Day {result.day}: {Category.MILITARY.label} {result.military_text}"
              f"  |  {Category.ECONOMY.label} {result.economy_text}")

    store.sum_all()
    print(store.summary_text)


if __name__ == "__main__":
    main()
