"""Per-direction calculator input state.

Each direction owns its own Scenario. Scenarios are immutable, so an edit
produces a new value and nothing is shared between download and upload.
"""

from dataclasses import dataclass, replace
from enum import Enum

from xfertime.core.estimator import TransferEstimate, TransferRequest, calculate
from xfertime.core.presets import SpeedPreset


class Direction(Enum):
    DOWNLOAD = "download"
    UPLOAD = "upload"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Scenario:
    direction: Direction
    file_size: float = 100
    size_unit: str = "MB"
    speed: float = 100
    speed_unit: str = "Mbps"

    @classmethod
    def default(cls, direction: Direction) -> "Scenario":
        if direction == Direction.UPLOAD:
            return cls(direction, speed=50)
        return cls(direction)

    def to_request(self) -> TransferRequest:
        return TransferRequest(self.file_size, self.size_unit, self.speed, self.speed_unit)

    def estimate(self) -> TransferEstimate:
        return calculate(self.to_request())

    def apply_preset(self, preset: SpeedPreset) -> "Scenario":
        """Return a copy with speed and speed unit taken from `preset`."""
        return replace(self, speed=preset.speed, speed_unit=preset.unit)

    def with_values(self, **changes) -> "Scenario":
        return replace(self, **changes)
