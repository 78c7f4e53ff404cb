"""
Energy Schedule Presets for the Compass Capacity Engine.

Smart defaults for how energy moves through a day, based on common ADHD
medication patterns and natural rhythms. Users start from a preset and
customise it; the presets themselves are constant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.config.energy import EnergyLevel


@dataclass(frozen=True)
class PresetBlock:
    """One step of a preset: from this time on, this energy level."""

    time: str  # "HH:MM"
    energy_level: EnergyLevel
    label: str = ""


@dataclass(frozen=True)
class EnergySchedulePreset:
    """A named daily energy curve."""

    id: str
    name: str
    description: str
    icon: str
    schedule: tuple[PresetBlock, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "schedule": [
                {"time": b.time, "energy_level": b.energy_level.value, "label": b.label}
                for b in self.schedule
            ],
        }


_S = EnergyLevel.SPARKY
_T = EnergyLevel.STEADY
_F = EnergyLevel.FLOWING
_G = EnergyLevel.FOGGY
_R = EnergyLevel.RESTING


ENERGY_PRESETS: tuple[EnergySchedulePreset, ...] = (
    EnergySchedulePreset(
        id="xr-classic",
        name="XR Meds: Classic 2-Phase",
        description="Extended release stimulant with typical 9am-1pm peak",
        icon="💊",
        schedule=(
            PresetBlock("07:00", _G, "Wake up"),
            PresetBlock("08:00", _F, "Meds kicking in"),
            PresetBlock("09:00", _S, "Peak - best deep work"),
            PresetBlock("13:00", _T, "Still functional"),
            PresetBlock("15:00", _F, "Slow fade begins"),
            PresetBlock("17:00", _G, "Crash - task paralysis"),
            PresetBlock("19:00", _R, "Evening shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="xr-late",
        name="XR Meds: Late Onset",
        description="Slower meds response, 10am-2pm peak window",
        icon="💊",
        schedule=(
            PresetBlock("08:00", _G, "Long warm-up"),
            PresetBlock("10:00", _S, "Peak (shorter window)"),
            PresetBlock("14:00", _T, "Fading"),
            PresetBlock("16:00", _G, "Crash zone"),
            PresetBlock("19:00", _R, "Evening mode"),
        ),
    ),
    EnergySchedulePreset(
        id="ir-twice",
        name="IR Meds: Twice Daily",
        description="Two IR doses with spikes (not smooth curves)",
        icon="⚡",
        schedule=(
            PresetBlock("08:00", _G, "Wake up"),
            PresetBlock("09:00", _S, "1st dose peak"),
            PresetBlock("11:30", _F, "Fading"),
            PresetBlock("12:00", _G, "Crash - need food"),
            PresetBlock("13:00", _F, "2nd dose kicking in"),
            PresetBlock("14:00", _S, "2nd peak window"),
            PresetBlock("17:00", _T, "Tapering off"),
            PresetBlock("19:00", _G, "Crash - irritability"),
            PresetBlock("21:00", _R, "Evening shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="ir-single",
        name="IR Meds: Single Dose",
        description="Short but strong morning peak, then crash",
        icon="⚡",
        schedule=(
            PresetBlock("08:00", _G, "Wake up"),
            PresetBlock("09:00", _S, "Short peak"),
            PresetBlock("11:00", _F, "Fading fast"),
            PresetBlock("14:00", _G, "Crash"),
            PresetBlock("18:00", _R, "Evening mode"),
        ),
    ),
    EnergySchedulePreset(
        id="unmed-afternoon",
        name="Unmedicated: Afternoon Peak",
        description="Natural ADHD - slow start, 1-4pm hyperfocus window",
        icon="🧠",
        schedule=(
            PresetBlock("09:00", _G, "Slow start"),
            PresetBlock("11:00", _F, "Warming up"),
            PresetBlock("13:00", _S, "Natural hyperfocus"),
            PresetBlock("16:00", _T, "Tapering"),
            PresetBlock("18:00", _G, "Decision fatigue"),
            PresetBlock("21:00", _R, "Comfort zone"),
        ),
    ),
    EnergySchedulePreset(
        id="unmed-night",
        name="Unmedicated: Night Burst",
        description="All-day fog + surprise 8-10pm hyperfocus",
        icon="🧠",
        schedule=(
            PresetBlock("10:00", _G, "Brain refuses to boot"),
            PresetBlock("14:00", _F, "First functional window"),
            PresetBlock("17:00", _T, "Random competence spike"),
            PresetBlock("20:00", _S, "Night hyperfocus!"),
            PresetBlock("22:00", _F, "Hard to wind down"),
            PresetBlock("01:00", _R, "Finally tired"),
        ),
    ),
    EnergySchedulePreset(
        id="night-owl",
        name="Night Owl: Extreme Evening",
        description="4-8pm primary productivity window",
        icon="🦉",
        schedule=(
            PresetBlock("11:00", _G, "Barely human"),
            PresetBlock("13:00", _F, "Warm-up period"),
            PresetBlock("16:00", _S, "Primary work window"),
            PresetBlock("20:00", _T, "Still going"),
            PresetBlock("22:00", _F, "Fading"),
            PresetBlock("01:00", _R, "Screen time trap"),
        ),
    ),
    EnergySchedulePreset(
        id="night-owl-intense",
        name="Night Owl: Delayed Hyperfocus",
        description="6-10pm intense creative peak",
        icon="🦉",
        schedule=(
            PresetBlock("12:00", _G, "Like anesthesia"),
            PresetBlock("15:00", _F, "Slowly waking"),
            PresetBlock("18:00", _S, "Best creative work"),
            PresetBlock("22:00", _T, "Still functional"),
            PresetBlock("01:00", _R, "Brain won't shut off"),
        ),
    ),
    EnergySchedulePreset(
        id="early-bird",
        name="Early Bird: Morning Peak",
        description="Rare unicorn - 6-11am best hours",
        icon="🐦",
        schedule=(
            PresetBlock("05:30", _T, "Quiet house magic"),
            PresetBlock("07:00", _S, "Best deep work"),
            PresetBlock("11:00", _T, "Still good"),
            PresetBlock("14:00", _F, "Fading"),
            PresetBlock("17:00", _G, "Slump hits HARD"),
            PresetBlock("19:00", _R, "Shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="early-bird-split",
        name="Early Bird: Split Peak",
        description="Morning peak + weird afternoon second wind",
        icon="🐦",
        schedule=(
            PresetBlock("06:00", _S, "Morning peak"),
            PresetBlock("09:00", _T, "Cruising"),
            PresetBlock("13:00", _G, "Crash"),
            PresetBlock("15:00", _F, "Weird second wind"),
            PresetBlock("17:00", _R, "Evening shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="custom",
        name="Custom Schedule",
        description="Start from scratch and build your own",
        icon="✨",
        schedule=(
            PresetBlock("09:00", _T),
            PresetBlock("17:00", _R),
        ),
    ),
)

_PRESETS_BY_ID: dict[str, EnergySchedulePreset] = {p.id: p for p in ENERGY_PRESETS}


def get_preset_by_id(preset_id: str) -> EnergySchedulePreset | None:
    """Look up a preset by its id, or None if there is no such preset."""
    return _PRESETS_BY_ID.get(preset_id)


__all__ = [
    "PresetBlock",
    "EnergySchedulePreset",
    "ENERGY_PRESETS",
    "get_preset_by_id",
]
