"""
Suggested runway configuration from the surface wind.

Each airport's procedure is a table of (wind sector, speed band) rows,
evaluated top to bottom; the first row containing the wind wins. Sectors
are inclusive on both ends, in degrees, and may wrap through north
(e.g. 330-039). Speed bands are [min_kt, max_kt) with max_kt None meaning
unbounded.

Calm or variable wind short-circuits to the airport's default
configuration. A report without a wind group gives UNDETERMINED.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from lga_departures.weather.models import FlightCategory, Wind

UNDETERMINED = "—"
CALM_MAX_KT = 4


@dataclass(frozen=True)
class SectorRule:
    """
    One row of a runway configuration table.

    Attributes:
        sector_from: First direction of the sector, degrees
        sector_to: Last direction of the sector, degrees
        label: Configuration in visual conditions
        min_kt: Lowest wind speed the row applies to
        max_kt: Speed the row stops applying at, None for no limit
        instrument_label: Configuration in instrument conditions, label when None
    """

    sector_from: int
    sector_to: int
    label: str
    min_kt: float = 0
    max_kt: Optional[float] = None
    instrument_label: Optional[str] = None

    def contains_direction(self, degrees: int) -> bool:
        if self.sector_from <= self.sector_to:
            return self.sector_from <= degrees <= self.sector_to
        return degrees >= self.sector_from or degrees <= self.sector_to

    def contains_speed(self, speed: float) -> bool:
        if speed < self.min_kt:
            return False
        return self.max_kt is None or speed < self.max_kt

    def applies(self, degrees: int, speed: float) -> bool:
        return self.contains_direction(degrees) and self.contains_speed(speed)

    def label_for(self, instrument: bool) -> str:
        if instrument and self.instrument_label:
            return self.instrument_label
        return self.label


@dataclass(frozen=True)
class RunwayConfigTable:
    """
    Decision table for one airport.

    Attributes:
        airport: ICAO identifier
        calm_label: Configuration for calm (and, when enabled, variable) wind
        rules: Sector rows in evaluation order
        variable_is_calm: Treat a VRB direction as calm regardless of speed
        calm_instrument_label: Calm configuration in instrument conditions
    """

    airport: str
    calm_label: str
    rules: Sequence[SectorRule]
    variable_is_calm: bool = False
    calm_instrument_label: Optional[str] = None

    def suggest(self, wind: Wind, instrument: bool = False) -> str:
        """
        Suggest a configuration.

        Args:
            wind: Parsed surface wind
            instrument: True when the airport is in instrument conditions

        Returns:
            Configuration label, or UNDETERMINED without a usable wind.
        """
        if not wind.is_reported:
            return UNDETERMINED
        if wind.speed <= CALM_MAX_KT or (self.variable_is_calm and wind.is_variable):
            if instrument and self.calm_instrument_label:
                return self.calm_instrument_label
            return self.calm_label

        degrees = wind.degrees
        if degrees is None:
            # Variable wind above calm speed has no sector
            return UNDETERMINED

        for rule in self.rules:
            if rule.applies(degrees, wind.speed):
                return rule.label_for(instrument)
        return UNDETERMINED


# KLGA: runways 4/22 and 13/31.
LGA_RUNWAY_CONFIG = RunwayConfigTable(
    airport="KLGA",
    calm_label="DEP 13 / LDG 22",
    variable_is_calm=True,
    rules=(
        SectorRule(10, 79, "DEP 13 / LDG 4"),
        SectorRule(80, 169, "DEP 13 / LDG 13", max_kt=25),
        SectorRule(80, 169, "DEP 13 / LDG 4", min_kt=25),
        SectorRule(170, 259, "DEP 13 / LDG 22"),
        SectorRule(260, 299, "DEP 31 / LDG 22", max_kt=15),
        SectorRule(260, 299, "DEP 4 / LDG 31", min_kt=15),
        SectorRule(300, 349, "DEP 4 / LDG 31"),
        SectorRule(350, 9, "DEP 4 / LDG 4"),
    ),
)

# KJFK: runways 4L/22R, 4R/22L, 13L/31R, 13R/31L; approach type follows conditions.
JFK_RUNWAY_CONFIG = RunwayConfigTable(
    airport="KJFK",
    calm_label="VIS 31L/31R DEP 31L",
    calm_instrument_label="ILS 4R DEP 4L",
    rules=(
        SectorRule(10, 89, "VIS 4L/4R DEP 4L", instrument_label="ILS 4R DEP 4L"),
        SectorRule(90, 169, "VIS 13L/22L DEP 13R", instrument_label="ILS 13L DEP 13R"),
        SectorRule(170, 259, "VIS 22L/22R DEP 22R", instrument_label="ILS 22L DEP 22R"),
        SectorRule(260, 349, "VIS 31L/31R DEP 31L", instrument_label="ILS 31R DEP 31L"),
        SectorRule(350, 9, "VIS 4L/4R DEP 4L", instrument_label="ILS 4R DEP 4L"),
    ),
)

RUNWAY_CONFIG_TABLES = {
    LGA_RUNWAY_CONFIG.airport: LGA_RUNWAY_CONFIG,
    JFK_RUNWAY_CONFIG.airport: JFK_RUNWAY_CONFIG,
}


def suggest_lga_config(wind: Wind) -> str:
    return LGA_RUNWAY_CONFIG.suggest(wind)


def suggest_jfk_config(wind: Wind, category: FlightCategory = FlightCategory.VFR) -> str:
    return JFK_RUNWAY_CONFIG.suggest(wind, instrument=category.is_instrument)


def suggest_config(airport: str, wind: Wind, category: FlightCategory = FlightCategory.VFR) -> Optional[str]:
    """Suggested configuration for an airport with a table, None for others."""
    table = RUNWAY_CONFIG_TABLES.get((airport or "").strip().upper())
    if table is None:
        return None
    return table.suggest(wind, instrument=category.is_instrument)
