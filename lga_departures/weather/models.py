"""Weather observation data models."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FlightCategory(Enum):
    """
    FAA flight category based on ceiling and visibility.

    Ordered from worst to best: LIFR < IFR < MVFR < VFR. UNKNOWN is used
    for a blank report and sorts before everything else.

    Thresholds (ceiling OR visibility, whichever is worse):
        LIFR:  visibility < 1 SM  or  ceiling < 500 ft
        IFR:   visibility < 3 SM  or  ceiling < 1000 ft
        MVFR:  visibility < 5 SM  or  ceiling < 3000 ft
        VFR:   otherwise
    """

    UNKNOWN = "—"
    LIFR = "LIFR"
    IFR = "IFR"
    MVFR = "MVFR"
    VFR = "VFR"

    @property
    def order(self) -> int:
        return _CATEGORY_ORDER[self]

    @property
    def is_instrument(self) -> bool:
        """True for IFR and LIFR, the categories that put airports in instrument conditions."""
        return self in (FlightCategory.IFR, FlightCategory.LIFR)

    def __lt__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order <= other.order

    def __str__(self) -> str:
        return self.value


_CATEGORY_ORDER = {
    FlightCategory.UNKNOWN: -1,
    FlightCategory.LIFR: 0,
    FlightCategory.IFR: 1,
    FlightCategory.MVFR: 2,
    FlightCategory.VFR: 3,
}


@dataclass(frozen=True)
class Wind:
    """
    Surface wind.

    Attributes:
        direction: Three-digit direction, "VRB", or "" when not reported
        speed: Knots, NaN when not reported
        gust: Gust knots, None when no gust group
    """

    direction: str = ""
    speed: float = math.nan
    gust: Optional[float] = None

    @property
    def is_reported(self) -> bool:
        return not math.isnan(self.speed)

    @property
    def is_variable(self) -> bool:
        return self.direction == "VRB"

    @property
    def degrees(self) -> Optional[int]:
        """Direction in degrees (0-359), None when variable or missing."""
        if self.direction.isdigit():
            return int(self.direction) % 360
        return None

    def __str__(self) -> str:
        if not self.is_reported:
            return "(unknown)"
        text = f"{self.direction}{int(self.speed):02d}"
        if self.gust is not None:
            text += f"G{int(self.gust):02d}"
        return text + "KT"


@dataclass(frozen=True)
class WeatherObservation:
    """
    Fields extracted from a METAR line.

    Attributes:
        raw_text: The report as received
        visibility_sm: Statute miles, NaN when not parseable
        ceiling_ft: Lowest BKN/OVC/VV layer in feet, inf when none
        wind: Surface wind
        flight_category: Derived flight category
    """

    raw_text: str = ""
    visibility_sm: float = math.nan
    ceiling_ft: float = math.inf
    wind: Wind = Wind()
    flight_category: FlightCategory = FlightCategory.UNKNOWN

    @property
    def has_visibility(self) -> bool:
        return not math.isnan(self.visibility_sm)

    @property
    def has_ceiling(self) -> bool:
        return math.isfinite(self.ceiling_ft)

    def visibility_label(self) -> str:
        if not self.has_visibility:
            return "(unknown)"
        return f"{self.visibility_sm:g} SM"

    def ceiling_label(self) -> str:
        if not self.has_ceiling:
            return "none"
        return f"{int(self.ceiling_ft)} ft"
