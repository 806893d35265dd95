"""Public data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .exceptions import ValidationError
from .util import normalize_name, validate_positive_count, validate_slot_count


class Category(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def parse(cls, value: Category | str) -> Category:
        """Return the category for a member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        normalized = normalize_name(value, name="category")
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValidationError(f"Unknown category: {value!r}.") from exc


@dataclass(frozen=True, slots=True)
class Demand:
    category: Category
    slots_needed: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.category, Category):
            raise ValidationError("category must be a Category.")
        validate_positive_count(self.slots_needed, name="slots_needed")


@dataclass(frozen=True, slots=True)
class VehicleKind:
    name: str
    category: Category
    slots_needed: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError("Vehicle name must be a non-empty string.")
        if not isinstance(self.category, Category):
            raise ValidationError("category must be a Category.")
        validate_positive_count(self.slots_needed, name="slots_needed")

    def demand(self) -> Demand:
        return Demand(self.category, self.slots_needed)


@dataclass(frozen=True, slots=True)
class Occupancy:
    category: Category
    total: int
    occupied: int

    @property
    def free(self) -> int:
        return self.total - self.occupied


MOTORCYCLE = VehicleKind("motorcycle", Category.SMALL, 1)
CAR = VehicleKind("car", Category.MEDIUM, 1)
VAN = VehicleKind("van", Category.LARGE, 3)

DEFAULT_VEHICLE_KINDS: Mapping[str, VehicleKind] = MappingProxyType(
    {kind.name: kind for kind in (MOTORCYCLE, CAR, VAN)}
)


def build_vehicle_kind(name: str, category: Category | str, slots_needed: int) -> VehicleKind:
    return VehicleKind(
        name=normalize_name(name, name="vehicle name"),
        category=Category.parse(category),
        slots_needed=validate_positive_count(slots_needed, name="slots_needed"),
    )


def build_counts(counts: Mapping[Category | str, int]) -> dict[Category, int]:
    """Normalize a category -> count mapping, filling missing categories with zero."""
    if not isinstance(counts, Mapping):
        raise ValidationError("counts must be a mapping of category to integer.")
    normalized = {category: 0 for category in Category}
    seen: set[Category] = set()
    for key, value in counts.items():
        category = Category.parse(key)
        if category in seen:
            raise ValidationError(f"Duplicate count for category {category.value}.")
        seen.add(category)
        normalized[category] = validate_slot_count(value, name=f"{category.value} count")
    return normalized
