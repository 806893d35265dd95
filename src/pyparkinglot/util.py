"""Shared utilities for validation and normalization."""

from __future__ import annotations

from .exceptions import ValidationError


def validate_slot_count(value: int, *, name: str = "count") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer.")
    if value < 0:
        raise ValidationError(f"{name} must not be negative.")
    return value


def validate_positive_count(value: int, *, name: str = "slots") -> int:
    validate_slot_count(value, name=name)
    if value == 0:
        raise ValidationError(f"{name} must be a positive integer.")
    return value


def normalize_name(value: str, *, name: str = "name") -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string.")
    normalized = value.strip().lower()
    if not normalized:
        raise ValidationError(f"{name} is empty after normalization.")
    return normalized
