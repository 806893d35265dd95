"""Library exceptions."""

from __future__ import annotations


class ParkingLotError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        text = message if message is not None else detail
        super().__init__(text or "")
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.detail = detail if detail is not None else message
        self.user_message = user_message


class ContractError(ParkingLotError):
    """Raised when slot bookkeeping is used outside its contract."""

    error_type = "contract"


class AlreadyOccupiedError(ContractError):
    """Raised when occupying a slot that is already occupied."""

    default_error_code = "already_occupied"


class AlreadyVacantError(ContractError):
    """Raised when vacating a slot that is already vacant."""

    default_error_code = "already_vacant"


class InsufficientOccupancyError(ContractError):
    """Raised when releasing more slots than are occupied in a category."""

    default_error_code = "insufficient_occupancy"


class ValidationError(ParkingLotError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class ConfigError(ParkingLotError):
    """Raised when a lot layout is missing or malformed."""

    error_type = "config"
    default_error_code = "config_error"
