import logging

import pytest

from pyparkinglot.exceptions import InsufficientOccupancyError, ValidationError
from pyparkinglot.models import CAR, MOTORCYCLE, VAN, Category, Demand, Occupancy, VehicleKind
from pyparkinglot.registry import Registry


def _basic() -> Registry:
    return Registry({Category.SMALL: 5, Category.MEDIUM: 5, Category.LARGE: 5})


def _free_counts(registry: Registry) -> dict[Category, int]:
    return {category: registry.free_slots_in_category(category) for category in Category}


@pytest.mark.parametrize("category", list(Category))
@pytest.mark.parametrize("count", [0, 1, 4])
def test_fresh_registry_is_vacant(category: Category, count: int) -> None:
    registry = Registry({category: count})
    assert registry.occupied_units_in_category(category) == 0
    assert registry.free_slots_in_category(category) == count
    assert registry.capacity(category) == count
    assert registry.is_empty() is True


def test_missing_categories_have_no_slots() -> None:
    registry = Registry({"small": 2})
    assert registry.total_slots() == 2
    assert registry.capacity(Category.LARGE) == 0
    assert registry.is_category_full(Category.LARGE) is True
    assert registry.try_admit(Demand(Category.LARGE, 1)) is False


def test_invalid_counts() -> None:
    with pytest.raises(ValidationError):
        Registry({"small": -1})
    with pytest.raises(ValidationError):
        Registry({"huge": 1})
    with pytest.raises(ValidationError):
        Registry({"small": True})


def test_basic_scenario() -> None:
    registry = _basic()
    assert registry.total_slots() == 15

    assert registry.park(MOTORCYCLE) is True
    assert registry.park(CAR) is True
    assert registry.park(VAN) is True

    assert registry.free_slots() == 10
    assert registry.is_full() is False
    assert registry.occupied_units_in_category(Category.LARGE) // 3 == 1
    assert registry.vehicles_parked(VAN) == 1

    # Only two large slots remain, a second van does not fit.
    assert registry.park(VAN) is False
    assert registry.park(VAN) is False
    assert registry.free_slots_in_category(Category.LARGE) == 2
    assert registry.vehicles_parked(VAN) == 1


def test_failed_admit_leaves_state_unchanged() -> None:
    registry = _basic()
    registry.try_admit(Demand(Category.LARGE, 3))
    before = _free_counts(registry)

    assert registry.try_admit(Demand(Category.LARGE, 3)) is False

    assert _free_counts(registry) == before


def test_demand_larger_than_capacity_is_rejected() -> None:
    registry = Registry({Category.LARGE: 2})
    assert registry.try_admit(Demand(Category.LARGE, 3)) is False
    assert registry.is_empty() is True


def test_admit_consumes_exactly_slots_needed() -> None:
    registry = _basic()
    total = registry.total_slots()
    for slots_needed in (1, 2, 2):
        before = registry.free_slots_in_category(Category.MEDIUM)
        assert registry.try_admit(Demand(Category.MEDIUM, slots_needed)) is True
        assert registry.free_slots_in_category(Category.MEDIUM) == before - slots_needed
        assert registry.total_slots() == total
    assert registry.is_category_full(Category.MEDIUM) is True
    assert registry.free_slots_in_category(Category.SMALL) == 5


def test_admit_release_round_trip() -> None:
    registry = _basic()
    registry.park(CAR)
    demand = Demand(Category.LARGE, 3)
    before = _free_counts(registry)

    assert registry.try_admit(demand) is True
    registry.release(demand.category, demand.slots_needed)

    assert _free_counts(registry) == before
    assert registry.total_slots() == 15


def test_park_and_leave() -> None:
    registry = _basic()
    registry.park(VAN)
    registry.leave(VAN)
    assert registry.is_empty() is True


def test_admission_uses_construction_order() -> None:
    registry = Registry({Category.SMALL: 4})
    registry.try_admit(Demand(Category.SMALL, 2))
    registry.release(Category.SMALL, 1)
    registry.try_admit(Demand(Category.SMALL, 2))

    states = [slot.is_occupied() for slot in registry._slots[Category.SMALL]]
    assert states == [True, True, True, False]


def test_release_uses_construction_order() -> None:
    registry = Registry({Category.SMALL: 3})
    registry.try_admit(Demand(Category.SMALL, 3))
    registry.release("small", 2)

    states = [slot.is_occupied() for slot in registry._slots[Category.SMALL]]
    assert states == [False, False, True]


def test_over_release_raises_without_mutation() -> None:
    registry = _basic()
    registry.park(VAN)
    before = _free_counts(registry)

    with pytest.raises(InsufficientOccupancyError):
        registry.release(Category.LARGE, 4)
    with pytest.raises(InsufficientOccupancyError):
        registry.release(Category.SMALL, 1)

    assert _free_counts(registry) == before


def test_release_requires_positive_slots() -> None:
    registry = _basic()
    with pytest.raises(ValidationError):
        registry.release(Category.SMALL, 0)


def test_try_admit_requires_demand() -> None:
    registry = _basic()
    with pytest.raises(ValidationError):
        registry.try_admit(VAN)


def test_full_and_empty_track_free_slots() -> None:
    registry = Registry({Category.SMALL: 1, Category.MEDIUM: 1, Category.LARGE: 3})
    steps = [
        Demand(Category.SMALL),
        Demand(Category.LARGE, 2),
        Demand(Category.MEDIUM),
        Demand(Category.LARGE, 1),
    ]
    assert registry.is_empty() is True
    for demand in steps:
        assert registry.try_admit(demand) is True
        assert registry.is_full() == (registry.free_slots() == 0)
        assert registry.is_empty() == (registry.free_slots() == registry.total_slots())
    assert registry.is_full() is True
    assert registry.is_empty() is False


def test_vehicles_parked_uses_unit_size() -> None:
    registry = Registry({Category.LARGE: 8})
    truck = VehicleKind("truck", Category.LARGE, 4)
    registry.park(truck)
    registry.park(VAN)
    assert registry.occupied_units_in_category(Category.LARGE) == 7
    assert registry.vehicles_parked(truck) == 1
    assert registry.vehicles_parked(VAN) == 2


def test_occupancy_snapshot() -> None:
    registry = _basic()
    registry.park(VAN)
    assert registry.occupancy() == [
        Occupancy(Category.SMALL, total=5, occupied=0),
        Occupancy(Category.MEDIUM, total=5, occupied=0),
        Occupancy(Category.LARGE, total=5, occupied=3),
    ]


def test_from_layout() -> None:
    registry = Registry.from_layout("basic")
    assert registry.total_slots() == 15


def test_rejection_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    registry = Registry({Category.LARGE: 2})
    with caplog.at_level(logging.DEBUG, logger="pyparkinglot.registry"):
        registry.park(VAN)
    assert "Rejected large demand for 3 slots (2 free)" in caplog.text
