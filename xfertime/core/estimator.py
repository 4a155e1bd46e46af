"""Transfer time estimation.

calculate() is a pure function: it turns a file size and a connection speed
into the elapsed seconds, a formatted duration and a coarse speed class.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum

from xfertime.core.exceptions import EstimatorError, InvalidValueError
from xfertime.core.units import (
    BITS_PER_BYTE, BITS_PER_KILOBIT, check_positive,
    size_multiplier, speed_multiplier,
)
from xfertime.utils.formatters import format_duration

logger = logging.getLogger(__name__)


class SpeedClass(Enum):
    FAST = "fast"
    MODERATE = "moderate"
    SLOW = "slow"

    @property
    def display_name(self) -> str:
        return _CLASS_DISPLAY.get(self, "Connection")


_CLASS_DISPLAY = {
    SpeedClass.FAST: "Fast Connection",
    SpeedClass.MODERATE: "Moderate Connection",
    SpeedClass.SLOW: "Slow Connection",
}


@dataclass(frozen=True)
class TransferRequest:
    file_size: float
    size_unit: str
    speed: float
    speed_unit: str

    def validate(self):
        """Raise an EstimatorError if any field is unusable."""
        check_positive("file_size", self.file_size)
        size_multiplier(self.size_unit)
        check_positive("speed", self.speed)
        speed_multiplier(self.speed_unit)

    @property
    def bits(self) -> float:
        return self.file_size * size_multiplier(self.size_unit) * BITS_PER_BYTE

    @property
    def bits_per_second(self) -> float:
        speed_in_kbps = self.speed * speed_multiplier(self.speed_unit)
        return speed_in_kbps * BITS_PER_KILOBIT


@dataclass(frozen=True)
class TransferEstimate:
    seconds: float
    formatted: str
    classification: SpeedClass

    def as_dict(self) -> dict:
        return {
            "seconds": self.seconds,
            "formatted": self.formatted,
            "classification": self.classification.value,
        }


def classify_duration(seconds: float) -> SpeedClass:
    """Bucket an elapsed time into fast, moderate or slow."""
    if seconds < 10:
        return SpeedClass.FAST
    if seconds < 60:
        return SpeedClass.MODERATE
    if seconds < 3600:
        return SpeedClass.MODERATE if seconds < 300 else SpeedClass.SLOW
    return SpeedClass.SLOW


def calculate(request, size_unit=None, speed=None, speed_unit=None) -> TransferEstimate:
    """Estimate how long a transfer takes.

    Accepts either a TransferRequest or the four values
    (file_size, size_unit, speed, speed_unit) positionally.

    Raises:
        InvalidUnitError: unknown size or speed unit.
        InvalidValueError: zero, negative or non-finite size or speed.
    """
    if not isinstance(request, TransferRequest):
        request = TransferRequest(request, size_unit, speed, speed_unit)

    try:
        request.validate()
    except EstimatorError as e:
        logger.debug(f"Rejected transfer request {request}: {e}")
        raise

    bits = request.bits
    seconds = bits / request.bits_per_second
    if not math.isfinite(seconds):
        # Either the bit count overflowed or the speed is too small to divide by
        if math.isfinite(bits):
            raise InvalidValueError("speed", request.speed)
        raise InvalidValueError("file_size", request.file_size)
    return TransferEstimate(
        seconds=seconds,
        formatted=format_duration(seconds),
        classification=classify_duration(seconds),
    )
