"""Parking lot registry: slot ownership, admission and release."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .exceptions import InsufficientOccupancyError, ValidationError
from .layout.loader import get_layout
from .models import Category, Demand, Occupancy, VehicleKind, build_counts
from .slot import Slot
from .util import validate_positive_count

_LOGGER = logging.getLogger(__name__)


class Registry:
    """Fixed pool of slots per category.

    Capacities are set at construction and never change. Every query is
    computed from the slot states, so there are no counters to drift.
    Admission is two-phase: the free count is checked before any slot is
    touched, which keeps multi-slot admissions all-or-nothing.
    """

    def __init__(self, counts: Mapping[Category | str, int]) -> None:
        normalized = build_counts(counts)
        self._slots: dict[Category, tuple[Slot, ...]] = {
            category: tuple(Slot(category) for _ in range(count))
            for category, count in normalized.items()
        }
        _LOGGER.debug(
            "Registry created with capacities %s",
            {category.value: count for category, count in normalized.items()},
        )

    @classmethod
    def from_layout(cls, layout_id: str) -> Registry:
        layout = get_layout(layout_id)
        return cls(layout.capacities)

    def _category_slots(self, category: Category | str) -> tuple[Slot, ...]:
        return self._slots[Category.parse(category)]

    def try_admit(self, demand: Demand) -> bool:
        """Occupy ``demand.slots_needed`` free slots, or nothing at all.

        Returns False when the category does not have enough free slots,
        including requests larger than its total capacity.
        """
        if not isinstance(demand, Demand):
            raise ValidationError("demand must be a Demand.")
        slots = self._slots[demand.category]
        free = [slot for slot in slots if not slot.is_occupied()]
        if len(free) < demand.slots_needed:
            _LOGGER.debug(
                "Rejected %s demand for %d slots (%d free)",
                demand.category.value,
                demand.slots_needed,
                len(free),
            )
            return False
        for slot in free[: demand.slots_needed]:
            slot.occupy()
        _LOGGER.debug(
            "Admitted %s demand for %d slots", demand.category.value, demand.slots_needed
        )
        return True

    def release(self, category: Category | str, slots: int) -> None:
        """Vacate ``slots`` occupied slots of a category in construction order."""
        category = Category.parse(category)
        validate_positive_count(slots, name="slots")
        occupied = [slot for slot in self._slots[category] if slot.is_occupied()]
        if len(occupied) < slots:
            raise InsufficientOccupancyError(
                f"Cannot release {slots} {category.value} slots; only {len(occupied)} occupied."
            )
        for slot in occupied[:slots]:
            slot.vacate()
        _LOGGER.debug("Released %d %s slots", slots, category.value)

    def park(self, kind: VehicleKind) -> bool:
        return self.try_admit(kind.demand())

    def leave(self, kind: VehicleKind) -> None:
        self.release(kind.category, kind.slots_needed)

    def capacity(self, category: Category | str) -> int:
        return len(self._category_slots(category))

    def total_slots(self) -> int:
        return sum(len(slots) for slots in self._slots.values())

    def free_slots(self) -> int:
        return sum(self.free_slots_in_category(category) for category in self._slots)

    def free_slots_in_category(self, category: Category | str) -> int:
        return sum(1 for slot in self._category_slots(category) if not slot.is_occupied())

    def occupied_units_in_category(self, category: Category | str) -> int:
        return sum(1 for slot in self._category_slots(category) if slot.is_occupied())

    def is_full(self) -> bool:
        return self.free_slots() == 0

    def is_empty(self) -> bool:
        return self.free_slots() == self.total_slots()

    def is_category_full(self, category: Category | str) -> bool:
        return self.free_slots_in_category(category) == 0

    def vehicles_parked(self, kind: VehicleKind) -> int:
        """Number of whole ``kind`` units the occupied slots of its category account for."""
        return self.occupied_units_in_category(kind.category) // kind.slots_needed

    def occupancy(self) -> list[Occupancy]:
        return [
            Occupancy(
                category=category,
                total=len(slots),
                occupied=self.occupied_units_in_category(category),
            )
            for category, slots in self._slots.items()
        ]
