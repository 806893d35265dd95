"""Single unit of parking capacity."""

from __future__ import annotations

from .exceptions import AlreadyOccupiedError, AlreadyVacantError
from .models import Category


class Slot:
    """One slot of a fixed category that is either occupied or vacant."""

    __slots__ = ("_category", "_occupied")

    def __init__(self, category: Category) -> None:
        self._category = category
        self._occupied = False

    @property
    def category(self) -> Category:
        return self._category

    def is_occupied(self) -> bool:
        return self._occupied

    def occupy(self) -> None:
        if self._occupied:
            raise AlreadyOccupiedError(f"{self._category.value} slot is already occupied.")
        self._occupied = True

    def vacate(self) -> None:
        if not self._occupied:
            raise AlreadyVacantError(f"{self._category.value} slot is already vacant.")
        self._occupied = False

    def __repr__(self) -> str:
        state = "occupied" if self._occupied else "vacant"
        return f"Slot({self._category.value}, {state})"
