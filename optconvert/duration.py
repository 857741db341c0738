"""Human-readable durations such as ``"10 seconds"``, ``"5m"`` or ``"Inf"``."""

import math
import re
from datetime import timedelta

from optconvert.utils import frozen


@frozen
class InfiniteDuration:
    """A duration that cannot be represented by :class:`~datetime.timedelta`."""

    name: str

    def __str__(self) -> str:
        return self.name


INF = InfiniteDuration("Inf")
MINUS_INF = InfiniteDuration("MinusInf")

Duration = timedelta | InfiniteDuration


def _expand(labels: str) -> list[str]:
    # The first label is an abbreviation; the others also take a plural "s".
    head, *rest = labels.split()
    return [head] + [w for word in rest for w in (word, word + "s")]


_unit_labels = {
    "days": "d day",
    "hours": "h hr hour",
    "minutes": "m min minute",
    "seconds": "s sec second",
    "milliseconds": "ms milli millisecond",
    "microseconds": "µs micro microsecond",
    "nanoseconds": "ns nano nanosecond",
}

_units: dict[str, str] = {label: unit for unit, labels in _unit_labels.items() for label in _expand(labels)}
_units["us"] = "microseconds"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_UNIT_RE = re.compile(r"[^\W\d_]*$")

_NANOSECONDS_PER_MICROSECOND = 1000


def _to_timedelta(magnitude: int | float, unit: str) -> timedelta:
    if unit == "nanoseconds":
        return timedelta(microseconds=magnitude / _NANOSECONDS_PER_MICROSECOND)
    return timedelta(**{unit: magnitude})


def parse_duration(s: str) -> Duration:
    """Parse a duration string.

    Whitespace is ignored. The unit is the trailing run of letters.

    Returns
    -------
    datetime.timedelta | InfiniteDuration
    """
    compact = "".join(s.split())
    if compact in ("Inf", "PlusInf", "+Inf"):
        return INF
    elif compact in ("MinusInf", "-Inf"):
        return MINUS_INF

    unit_name = _UNIT_RE.search(compact).group()  # pyright: ignore[reportOptionalMemberAccess]
    unit = _units.get(unit_name)
    number = compact[: len(compact) - len(unit_name)]
    if unit is None or not number:
        raise ValueError(f"Could not parse duration string: {s}")

    if _INTEGER_RE.fullmatch(number):
        return _to_timedelta(int(number), unit)

    try:
        magnitude = float(number)
    except ValueError:
        raise ValueError(f"Could not parse duration string: {s}") from None

    if math.isinf(magnitude):
        return INF if magnitude > 0 else MINUS_INF
    return _to_timedelta(magnitude, unit)


def parse_finite_duration(s: str) -> timedelta:
    duration = parse_duration(s)
    if isinstance(duration, InfiniteDuration):
        raise ValueError(f"'{duration}' is not a finite duration.")
    return duration
