"""Errors raised by the transfer time estimator."""


class EstimatorError(Exception):
    """Base class for all estimator errors."""


class InvalidUnitError(EstimatorError, ValueError):
    """Raised when a size or speed unit is not one of the known keys."""

    def __init__(self, unit, accepted):
        self.unit = unit
        self.accepted = tuple(accepted)
        super().__init__(
            f"Unknown unit {unit!r}, expected one of: {', '.join(self.accepted)}"
        )


class InvalidValueError(EstimatorError, ValueError):
    """Raised for zero, negative, or non-finite sizes and speeds."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a positive finite number, got {value!r}")


class UnknownPresetError(EstimatorError, KeyError):
    """Raised when a speed preset name is not defined."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown speed preset {self.name!r}"
