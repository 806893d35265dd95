"""Lot layout discovery and loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from importlib import resources
from importlib.resources.abc import Traversable
from types import MappingProxyType

import jsonschema

from ..exceptions import ConfigError, ValidationError
from ..models import (
    DEFAULT_VEHICLE_KINDS,
    Category,
    VehicleKind,
    build_counts,
    build_vehicle_kind,
)

LAYOUT_FILENAME = "layout.json"
SCHEMA_FILENAME = "layout.schema.json"
_LAYOUT_CACHE: tuple[LotLayout, ...] | None = None

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LotLayout:
    id: str
    name: str
    capacities: Mapping[Category, int]
    vehicles: Mapping[str, VehicleKind] = field(default_factory=lambda: DEFAULT_VEHICLE_KINDS)

    def __post_init__(self) -> None:
        # Layouts are cached and shared; their mappings stay read-only.
        object.__setattr__(self, "capacities", MappingProxyType(dict(self.capacities)))
        object.__setattr__(self, "vehicles", MappingProxyType(dict(self.vehicles)))


def _layout_root() -> Traversable:
    return resources.files("pyparkinglot.layout")


def load_layout_schema() -> dict:
    schema_path = _layout_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _build_layout(data: dict, folder_name: str, schema: dict) -> LotLayout:
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"Layout {folder_name} is invalid: {exc.message}") from exc
    if data["id"] != folder_name:
        raise ConfigError("Layout id must match its folder name.")
    vehicles = dict(DEFAULT_VEHICLE_KINDS)
    try:
        capacities = build_counts(data["capacities"])
        for name, spec in data.get("vehicles", {}).items():
            kind = build_vehicle_kind(name, spec["category"], spec["slots_needed"])
            vehicles[kind.name] = kind
    except ValidationError as exc:
        raise ConfigError(f"Layout {folder_name} is invalid: {exc}") from exc
    return LotLayout(
        id=data["id"],
        name=data["name"],
        capacities=capacities,
        vehicles=vehicles,
    )


def iter_layout_files() -> Iterable[tuple[str, Traversable]]:
    root = _layout_root()
    for entry in root.iterdir():
        if not entry.is_dir():
            continue
        layout_path = entry / LAYOUT_FILENAME
        if layout_path.is_file():
            yield entry.name, layout_path


def load_layouts() -> list[LotLayout]:
    global _LAYOUT_CACHE
    if _LAYOUT_CACHE is not None:
        return list(_LAYOUT_CACHE)
    schema = load_layout_schema()
    layouts: list[LotLayout] = []
    for folder_name, layout_path in iter_layout_files():
        try:
            data = json.loads(layout_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Layout {folder_name} is not valid JSON.") from exc
        layouts.append(_build_layout(data, folder_name, schema))
        _LOGGER.debug("Loaded layout %s", folder_name)
    _LAYOUT_CACHE = tuple(sorted(layouts, key=lambda layout: layout.id))
    return list(_LAYOUT_CACHE)


def clear_layout_cache() -> None:
    """Clear cached layouts (used in tests)."""
    global _LAYOUT_CACHE
    _LAYOUT_CACHE = None


def list_layouts() -> list[str]:
    return [layout.id for layout in load_layouts()]


def get_layout(layout_id: str) -> LotLayout:
    if not layout_id:
        raise ConfigError("Layout id is required.")
    for layout in load_layouts():
        if layout.id == layout_id:
            return layout
    raise ConfigError(f"Layout not found: {layout_id}.")
