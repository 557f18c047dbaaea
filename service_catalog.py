from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable

from config import (
    FUEL,
    HUNGER,
    RESOURCE_KINDS,
    SERVICE_STOPS_FILE,
    SLEEP,
    STOP_FOOD,
    STOP_FUEL,
    STOP_REST,
)

STOP_ID_RE = re.compile(r"^[a-z][a-z0-9_]*$")


@dataclass(frozen=True)
class StopDefinition:
    """One kind of roadside service stop.

    ``spawn_min``/``spawn_max`` bound the miles between two stops of this
    kind; ``first_spawn`` is the distance to the first one of a fresh game.
    """

    key: str
    display_name: str
    resource: str
    spawn_min: float
    spawn_max: float
    first_spawn: float

    def to_runtime_dict(self) -> Dict[str, str | float]:
        return {
            "display_name": self.display_name,
            "resource": self.resource,
            "spawn_min": self.spawn_min,
            "spawn_max": self.spawn_max,
            "first_spawn": self.first_spawn,
        }


DEFAULT_STOPS: Dict[str, StopDefinition] = {
    STOP_FUEL: StopDefinition(STOP_FUEL, "Gas Station", FUEL, 5.0, 10.0, 2.0),
    STOP_FOOD: StopDefinition(STOP_FOOD, "Diner", HUNGER, 7.0, 12.0, 3.0),
    STOP_REST: StopDefinition(STOP_REST, "Rest Area", SLEEP, 6.0, 11.0, 4.0),
}


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def _parse_stop_entry(key: str, entry: Dict[str, Any]) -> StopDefinition | None:
    if not STOP_ID_RE.fullmatch(key):
        return None

    display_name = entry.get("display_name")
    resource = entry.get("resource")
    spawn_min = entry.get("spawn_min")
    spawn_max = entry.get("spawn_max")
    first_spawn = entry.get("first_spawn", spawn_min)

    if not isinstance(display_name, str) or not display_name.strip():
        return None
    if resource not in RESOURCE_KINDS:
        return None
    if not _is_positive_number(spawn_min) or not _is_positive_number(spawn_max):
        return None
    if spawn_max < spawn_min:
        return None
    if not _is_positive_number(first_spawn):
        return None

    return StopDefinition(
        key=key,
        display_name=display_name.strip(),
        resource=str(resource),
        spawn_min=float(spawn_min),
        spawn_max=float(spawn_max),
        first_spawn=float(first_spawn),
    )


def _runtime_catalog(entries: Iterable[StopDefinition]) -> Dict[str, Dict[str, str | float]]:
    return {entry.key: entry.to_runtime_dict() for entry in entries}


def _covers_every_resource(entries: Dict[str, StopDefinition]) -> bool:
    return {entry.resource for entry in entries.values()} >= set(RESOURCE_KINDS)


def load_service_catalog(path: Path = SERVICE_STOPS_FILE) -> Dict[str, Dict[str, str | float]]:
    defaults = _runtime_catalog(DEFAULT_STOPS.values())
    if not path.exists():
        return defaults

    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return defaults

    if not isinstance(raw, dict):
        return defaults

    parsed: Dict[str, StopDefinition] = {}
    for key, entry in raw.items():
        if not isinstance(entry, dict):
            continue
        stop = _parse_stop_entry(key, entry)
        if stop is None:
            continue
        parsed[key] = stop

    # every resource needs at least one stop kind that refills it
    if not parsed or not _covers_every_resource(parsed):
        return defaults

    return _runtime_catalog(parsed.values())
