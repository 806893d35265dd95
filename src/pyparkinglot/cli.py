"""Command line demo for a parking lot registry.

Admit a sequence of vehicles into a packaged layout:
  pyparkinglot --layout basic motorcycle car van van van

Or into explicit capacities:
  pyparkinglot --small 2 --medium 2 --large 3 car van
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence

from .exceptions import ParkingLotError, ValidationError
from .layout.loader import get_layout, list_layouts
from .models import DEFAULT_VEHICLE_KINDS, Category, VehicleKind
from .registry import Registry

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pyparkinglot",
        description="Admit vehicles into a parking lot and print its state.",
    )
    parser.add_argument("--layout", help="Packaged layout id (default: basic).")
    parser.add_argument("--small", type=int, help="Number of small slots.")
    parser.add_argument("--medium", type=int, help="Number of medium slots.")
    parser.add_argument("--large", type=int, help="Number of large slots.")
    parser.add_argument("--list-layouts", action="store_true", help="List packaged layouts.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("vehicles", nargs="*", help="Vehicle kinds to admit, in order.")
    return parser.parse_args(argv)


def _explicit_counts(args: argparse.Namespace) -> dict[Category, int] | None:
    values = {
        Category.SMALL: args.small,
        Category.MEDIUM: args.medium,
        Category.LARGE: args.large,
    }
    if all(value is None for value in values.values()):
        return None
    return {category: value or 0 for category, value in values.items()}


def _build_registry(args: argparse.Namespace) -> tuple[Registry, Mapping[str, VehicleKind]]:
    counts = _explicit_counts(args)
    if counts is None:
        layout = get_layout(args.layout or "basic")
        return Registry(layout.capacities), layout.vehicles
    if args.layout:
        _LOGGER.info("Explicit capacities override layout %s", args.layout)
        return Registry(counts), get_layout(args.layout).vehicles
    return Registry(counts), DEFAULT_VEHICLE_KINDS


def _resolve_kind(name: str, kinds: Mapping[str, VehicleKind]) -> VehicleKind:
    kind = kinds.get(name.strip().lower())
    if kind is None:
        known = ", ".join(sorted(kinds))
        raise ValidationError(f"Unknown vehicle kind {name!r} (known: {known}).")
    return kind


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    log_level = args.log_level
    if args.debug:
        log_level = "DEBUG"
    logging.basicConfig(level=log_level)

    try:
        if args.list_layouts:
            for layout_id in list_layouts():
                print(layout_id)
            return 0
        registry, kinds = _build_registry(args)
        requested = [_resolve_kind(name, kinds) for name in args.vehicles]
    except ParkingLotError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    for kind in requested:
        outcome = "admitted" if registry.park(kind) else "rejected"
        print(f"{kind.name}: {outcome}")

    print(f"Total slots: {registry.total_slots()}")
    print(f"Free slots: {registry.free_slots()}")
    print(f"Full: {'yes' if registry.is_full() else 'no'}")
    print(f"Empty: {'yes' if registry.is_empty() else 'no'}")
    for occupancy in registry.occupancy():
        print(f"{occupancy.category.value}: {occupancy.occupied}/{occupancy.total} occupied")
    for name in sorted(kinds):
        print(f"{name}s parked: {registry.vehicles_parked(kinds[name])}")
    return 0
