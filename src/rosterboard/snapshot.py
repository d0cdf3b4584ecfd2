"""Loading of record snapshots from JSON.

A snapshot is a JSON object holding the records the engine consumes:

    {
      "workers": [{"id": "W1", "name": "Adam", "region": "NSW"}],
      "schedules": [{"worker_id": "W1", "day_of_week": 1,
                     "start_time": "09:00", "end_time": "17:00"}],
      "unavailability": [{"worker_id": "W1", "start_date": "2024-01-17",
                          "end_date": "2024-01-17", "reason": "Public holiday"}],
      "seasonal": [],
      "assignments": [{"id": "A1", "start": "2024-01-15T09:00:00",
                       "end": "2024-01-15T13:00:00", "worker_ids": ["W1"]}]
    }

Every key is optional. Day-of-week uses 0 = Sunday.
"""

import json
from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

from rosterboard.domain.models import (
    Assignment,
    ScheduleBlock,
    SeasonalAvailability,
    UnavailabilityRange,
    Worker,
)

T = TypeVar("T")


class SnapshotError(ValueError):
    """Raised when a snapshot record cannot be parsed."""


@dataclass(frozen=True)
class Snapshot:
    """A consistent set of input records."""

    workers: tuple[Worker, ...] = ()
    schedules: tuple[ScheduleBlock, ...] = ()
    unavailability: tuple[UnavailabilityRange, ...] = ()
    seasonal: tuple[SeasonalAvailability, ...] = ()
    assignments: tuple[Assignment, ...] = ()

    @property
    def staff(self) -> tuple[Worker, ...]:
        return tuple(w for w in self.workers if w.has_schedule_data)

    @property
    def subcontractors(self) -> tuple[Worker, ...]:
        return tuple(w for w in self.workers if not w.has_schedule_data)


def _optional_time(value: Optional[str]) -> Optional[time]:
    return time.fromisoformat(value) if value else None


def _worker(raw: dict) -> Worker:
    hours = raw.get("standard_work_hours")
    schedule_data = raw.get("has_schedule_data")
    if schedule_data is not None and not isinstance(schedule_data, bool):
        raise ValueError(f"has_schedule_data must be true, false or null, got {schedule_data!r}")
    return Worker(
        id=str(raw["id"]),
        name=raw.get("name") or "",
        region=raw.get("region") or raw.get("worker_state"),
        is_subcontractor=bool(raw.get("is_subcontractor", False)),
        employment_type=raw.get("employment_type"),
        standard_work_hours=float(hours) if hours is not None else None,
        schedule_data=schedule_data,
    )


def _schedule(raw: dict) -> ScheduleBlock:
    return ScheduleBlock(
        worker_id=str(raw["worker_id"]),
        day_of_week=int(raw["day_of_week"]),
        start_time=time.fromisoformat(raw["start_time"]),
        end_time=time.fromisoformat(raw["end_time"]),
        is_active=bool(raw.get("is_active", True)),
    )


def _unavailability(raw: dict) -> UnavailabilityRange:
    return UnavailabilityRange(
        worker_id=str(raw["worker_id"]),
        start_date=date.fromisoformat(raw["start_date"]),
        end_date=date.fromisoformat(raw["end_date"]),
        start_time=_optional_time(raw.get("start_time")),
        end_time=_optional_time(raw.get("end_time")),
        reason=raw.get("reason"),
    )


def _seasonal(raw: dict) -> SeasonalAvailability:
    return SeasonalAvailability(
        worker_id=str(raw["worker_id"]),
        start_date=date.fromisoformat(raw["start_date"]),
        end_date=date.fromisoformat(raw["end_date"]),
        start_time=_optional_time(raw.get("start_time")),
        end_time=_optional_time(raw.get("end_time")),
        reason=raw.get("reason"),
        season_name=raw.get("season_name"),
    )


def _assignment(raw: dict) -> Assignment:
    start = datetime.fromisoformat(raw["start"])
    end = datetime.fromisoformat(raw["end"])
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise ValueError("start and end must both have a UTC offset or both omit it")
    return Assignment(
        id=str(raw["id"]),
        start=start,
        end=end,
        worker_ids=tuple(str(w) for w in raw.get("worker_ids", ())),
    )


def _parse_all(data: dict, key: str, parse: Callable[[dict], T]) -> tuple[T, ...]:
    records = data.get(key) or []
    if not isinstance(records, list):
        raise SnapshotError(f"'{key}' must be a list")

    parsed = []
    for i, raw in enumerate(records):
        if not isinstance(raw, dict):
            raise SnapshotError(f"{key}[{i}] must be an object")
        try:
            parsed.append(parse(raw))
        except KeyError as e:
            raise SnapshotError(f"{key}[{i}] is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise SnapshotError(f"{key}[{i}] is invalid: {e}") from e
    return tuple(parsed)


def parse_snapshot(data: Any) -> Snapshot:
    """Build a Snapshot from decoded JSON."""
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object")

    return Snapshot(
        workers=_parse_all(data, "workers", _worker),
        schedules=_parse_all(data, "schedules", _schedule),
        unavailability=_parse_all(data, "unavailability", _unavailability),
        seasonal=_parse_all(data, "seasonal", _seasonal),
        assignments=_parse_all(data, "assignments", _assignment),
    )


def load_snapshot(path: Union[str, Path]) -> Snapshot:
    """Load a Snapshot from a JSON file."""
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{path} is not valid JSON: {e}") from e
    return parse_snapshot(data)
