"""pyparkinglot package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    AlreadyOccupiedError,
    AlreadyVacantError,
    ConfigError,
    InsufficientOccupancyError,
    ParkingLotError,
    ValidationError,
)
from .models import CAR, MOTORCYCLE, VAN, Category, Demand, Occupancy, VehicleKind
from .registry import Registry

try:
    __version__ = version("pyparkinglot")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "CAR",
    "MOTORCYCLE",
    "VAN",
    "AlreadyOccupiedError",
    "AlreadyVacantError",
    "Category",
    "ConfigError",
    "Demand",
    "InsufficientOccupancyError",
    "Occupancy",
    "ParkingLotError",
    "Registry",
    "ValidationError",
    "VehicleKind",
    "__version__",
]
