"""Size and speed unit tables.

File sizes use decimal (1000-based) scaling. Speed units are expressed as
kilobits per second per unit, so a speed in Mbps becomes kbps by multiplying
by 1000 and bits per second by a further 1000.
"""

import math
import numbers
import re
from typing import Dict, Mapping, Tuple

from xfertime.core.exceptions import InvalidUnitError, InvalidValueError

# Ordered as shown in the unit selectors.
SIZE_UNITS: Dict[str, int] = {
    "KB": 1000,
    "MB": 1000 * 1000,
    "GB": 1000 * 1000 * 1000,
    "TB": 1000 * 1000 * 1000 * 1000,
}

SPEED_UNITS: Dict[str, int] = {
    "Kbps": 1,
    "Mbps": 1000,
    "Gbps": 1000000,
}

BITS_PER_BYTE = 8
BITS_PER_KILOBIT = 1000

_QUANTITY_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*([A-Za-z]+)\s*$")


def _lookup(unit: str, table: Mapping[str, int]) -> int:
    try:
        return table[unit]
    except (KeyError, TypeError):
        raise InvalidUnitError(unit, table.keys()) from None


def size_multiplier(unit: str) -> int:
    """Bytes per one `unit` of file size."""
    return _lookup(unit, SIZE_UNITS)


def speed_multiplier(unit: str) -> int:
    """Kilobits per second per one `unit` of speed."""
    return _lookup(unit, SPEED_UNITS)


def check_positive(field: str, value) -> float:
    """Return `value` as a float, rejecting non-numbers, zero, negatives, NaN and infinity."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidValueError(field, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidValueError(field, value)
    return float(value)


def parse_quantity(text: str, table: Mapping[str, int]) -> Tuple[float, str]:
    """Split text like "100MB" or "0.056 Mbps" into (value, unit).

    The unit must match a key of `table` exactly.
    """
    match = _QUANTITY_RE.match(text or "")
    if not match:
        raise InvalidValueError("quantity", text)
    value, unit = match.groups()
    _lookup(unit, table)
    return check_positive("quantity", float(value)), unit
