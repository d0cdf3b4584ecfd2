"""Validation module for checking availability input records.

The engine itself never fails on bad data: it always produces a defined
result. This module reports the data-quality problems that make those
results less useful, so callers can surface them before display.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from rosterboard.domain.models import (
    DAY_NAMES,
    DAYS_PER_WEEK,
    ScheduleBlock,
    UnavailabilityRange,
    Worker,
)

logger = logging.getLogger(__name__)


class ValidationErrorType(Enum):
    """Types of validation errors."""

    UNKNOWN_WORKER = "unknown_worker"
    DAY_OF_WEEK_OUT_OF_RANGE = "day_of_week_out_of_range"
    BLOCK_ENDS_BEFORE_START = "block_ends_before_start"
    RANGE_ENDS_BEFORE_START = "range_ends_before_start"
    PARTIAL_WINDOW_INCOMPLETE = "partial_window_incomplete"
    DUPLICATE_WORKER_ID = "duplicate_worker_id"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    message: str
    worker_id: Optional[str] = None
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.worker_id:
            parts.append(f"Worker {self.worker_id}:")
        parts.append(self.message)
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating a set of records."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)


class RecordValidator:
    """Validates workers, schedule rows and ranges before computation.

    Example:
        >>> validator = RecordValidator()
        >>> result = validator.validate(workers, schedules, unavailability)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def validate(
        self,
        workers: Iterable[Worker],
        schedules: Iterable[ScheduleBlock],
        unavailability: Iterable[UnavailabilityRange],
        seasonal: Iterable[UnavailabilityRange] = (),
    ) -> ValidationResult:
        """Validate a complete snapshot of records.

        Args:
            workers: Worker records.
            schedules: Weekly schedule rows.
            unavailability: Leave ranges.
            seasonal: Seasonal restriction ranges.

        Returns:
            ValidationResult with is_valid flag, errors and warnings.
        """
        result = ValidationResult(is_valid=True)
        workers = list(workers)
        schedules = list(schedules)
        ranges = list(unavailability) + list(seasonal)

        self._validate_workers(workers, result)

        known_ids = {w.id for w in workers}
        self._validate_schedules(schedules, known_ids, result)
        self._validate_ranges(ranges, known_ids, result)

        if result.errors or result.warnings:
            logger.debug(
                "Validation found %d errors and %d warnings",
                len(result.errors),
                len(result.warnings),
            )
        return result

    def _validate_workers(self, workers: list[Worker], result: ValidationResult) -> None:
        """Check worker identity and naming."""
        counts = Counter(w.id for w in workers)
        for worker_id, count in counts.items():
            if count > 1:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DUPLICATE_WORKER_ID,
                        message=f"Worker ID appears {count} times",
                        worker_id=worker_id,
                    )
                )

        for worker in workers:
            if not worker.name:
                result.add_warning(f"Worker {worker.id} has no display name")

    def _validate_schedules(
        self,
        schedules: list[ScheduleBlock],
        known_ids: set[str],
        result: ValidationResult,
    ) -> None:
        """Check schedule rows for range and consistency problems."""
        active_per_day = Counter()

        for block in schedules:
            if block.worker_id not in known_ids:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.UNKNOWN_WORKER,
                        message="Schedule row for unknown worker",
                        worker_id=block.worker_id,
                    )
                )

            if not 0 <= block.day_of_week < DAYS_PER_WEEK:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DAY_OF_WEEK_OUT_OF_RANGE,
                        message=f"Day of week {block.day_of_week} is not in 0-6",
                        worker_id=block.worker_id,
                        details={"day_of_week": block.day_of_week},
                    )
                )
                continue

            if block.end_time <= block.start_time:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.BLOCK_ENDS_BEFORE_START,
                        message=(
                            f"{DAY_NAMES[block.day_of_week]} block ends at "
                            f"{block.end_time.strftime('%H:%M')}, before it starts"
                        ),
                        worker_id=block.worker_id,
                    )
                )

            if block.is_active:
                active_per_day[(block.worker_id, block.day_of_week)] += 1

        for (worker_id, dow), count in sorted(active_per_day.items()):
            if count > 1:
                result.add_warning(
                    f"Worker {worker_id} has {count} active blocks on "
                    f"{DAY_NAMES[dow]}; the last one is used"
                )

    def _validate_ranges(
        self,
        ranges: list[UnavailabilityRange],
        known_ids: set[str],
        result: ValidationResult,
    ) -> None:
        """Check unavailability and seasonal ranges."""
        by_worker: dict[str, list[UnavailabilityRange]] = {}

        for r in ranges:
            if r.worker_id not in known_ids:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.UNKNOWN_WORKER,
                        message="Unavailability row for unknown worker",
                        worker_id=r.worker_id,
                    )
                )

            if r.end_date < r.start_date:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.RANGE_ENDS_BEFORE_START,
                        message=f"Range {r.start_date} to {r.end_date} ends before it starts",
                        worker_id=r.worker_id,
                    )
                )
                continue

            if (r.start_time is None) != (r.end_time is None):
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.PARTIAL_WINDOW_INCOMPLETE,
                        message="Partial-day range needs both a start and an end time",
                        worker_id=r.worker_id,
                    )
                )

            by_worker.setdefault(r.worker_id, []).append(r)

        for worker_id, worker_ranges in sorted(by_worker.items()):
            ordered = sorted(worker_ranges, key=lambda r: (r.start_date, r.end_date))
            for prev, cur in zip(ordered, ordered[1:]):
                if cur.overlaps(prev.start_date, prev.end_date):
                    result.add_warning(
                        f"Worker {worker_id} has overlapping ranges "
                        f"{prev.start_date}..{prev.end_date} and "
                        f"{cur.start_date}..{cur.end_date}"
                    )
