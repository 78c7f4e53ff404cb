"""
Scheduled energy lookup for the Compass Capacity Engine.

Users describe how their energy usually moves through the day as a list of
blocks ("from 09:00, sparky"). Blocks can apply to every day or to one
weekday; there is no weekday/weekend grouping.

The active block is the last one whose start time has passed. Before the
first block of the day the first block applies, and with no blocks at all
the default is steady.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal, get_args

from src.config.energy import EnergyLevel, to_energy_level
from src.config.energy_presets import EnergySchedulePreset
from src.lib.exceptions import ValidationError
from src.lib.time_utils import minutes_from_datetime, parse_time_to_minutes

DEFAULT_ENERGY_LEVEL = EnergyLevel.STEADY

DayType = Literal[
    "all", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
]

ALL_DAYS: DayType = "all"
DAY_NAMES: tuple[str, ...] = get_args(DayType)[1:]
VALID_DAY_TYPES: frozenset[str] = frozenset(get_args(DayType))


@dataclass(frozen=True)
class EnergyScheduleBlock:
    """From start_minutes on (on day_type), expect energy_level."""

    start_minutes: int
    energy_level: EnergyLevel
    label: str | None = None
    day_type: str = ALL_DAYS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "start_minutes": self.start_minutes,
            "energy_level": self.energy_level.value,
            "label": self.label,
            "day_type": self.day_type,
        }


def day_name(moment: datetime) -> str:
    """Lower-case weekday name ("monday" ... "sunday")."""
    return DAY_NAMES[moment.weekday()]


def blocks_from_preset(
    preset: EnergySchedulePreset,
    day_type: str = ALL_DAYS,
) -> list[EnergyScheduleBlock]:
    """
    Expand a preset into schedule blocks for one day type.

    Raises:
        ValidationError: If day_type is not "all" or a weekday name, or a
            preset time cannot be parsed
    """
    if day_type not in VALID_DAY_TYPES:
        raise ValidationError(f"Unknown day type: {day_type!r}")

    blocks: list[EnergyScheduleBlock] = []
    for item in preset.schedule:
        start = parse_time_to_minutes(item.time)
        if start is None:
            raise ValidationError(f"Preset {preset.id!r} has an invalid time: {item.time!r}")
        blocks.append(
            EnergyScheduleBlock(
                start_minutes=start,
                energy_level=item.energy_level,
                label=item.label or None,
                day_type=day_type,
            )
        )
    return blocks


def get_current_energy_level(
    blocks: Iterable[EnergyScheduleBlock],
    now: datetime | None = None,
) -> EnergyLevel:
    """
    Find the scheduled energy level for a moment.

    Args:
        blocks: Schedule blocks for any day types
        now: Moment to look up; None for the wall clock

    Returns:
        EnergyLevel of the active block, or steady when no block applies today
    """
    moment = now if now is not None else datetime.now()
    today = day_name(moment)

    todays = sorted(
        (b for b in blocks if b.day_type in (today, ALL_DAYS)),
        key=lambda b: b.start_minutes,
    )
    if not todays:
        return DEFAULT_ENERGY_LEVEL

    now_minutes = minutes_from_datetime(moment)
    current = todays[0]
    for block in todays:
        if block.start_minutes > now_minutes:
            break
        current = block
    return to_energy_level(current.energy_level)


__all__ = [
    "DEFAULT_ENERGY_LEVEL",
    "ALL_DAYS",
    "DAY_NAMES",
    "DayType",
    "VALID_DAY_TYPES",
    "EnergyScheduleBlock",
    "day_name",
    "blocks_from_preset",
    "get_current_energy_level",
]
