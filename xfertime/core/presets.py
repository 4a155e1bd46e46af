"""Connection speed presets offered as quick-fill buttons."""

from dataclasses import dataclass
from typing import Tuple

from xfertime.core.exceptions import UnknownPresetError
from xfertime.utils.formatters import format_quantity


@dataclass(frozen=True)
class SpeedPreset:
    name: str
    speed: float
    unit: str

    @property
    def label(self) -> str:
        return f"{self.name} ({format_quantity(self.speed, self.unit)})"


SPEED_PRESETS: Tuple[SpeedPreset, ...] = (
    SpeedPreset("Dial-up", 0.056, "Mbps"),
    SpeedPreset("DSL", 25, "Mbps"),
    SpeedPreset("Cable", 100, "Mbps"),
    SpeedPreset("Fiber", 1000, "Mbps"),
    SpeedPreset("5G", 2000, "Mbps"),
)

_BY_NAME = {p.name.lower(): p for p in SPEED_PRESETS}


def preset_names() -> list:
    return [p.name for p in SPEED_PRESETS]


def get_preset(name: str) -> SpeedPreset:
    """Look up a preset by name, ignoring case."""
    preset = _BY_NAME.get((name or "").strip().lower())
    if preset is None:
        raise UnknownPresetError(name)
    return preset
