"""Typed rows for the configuration, gate and route snapshot tables."""

from dataclasses import dataclass
from typing import Dict, Optional

from lga_departures.models.navaid import norm


@dataclass(frozen=True)
class LgaConfigRow:
    """LGA ATIS configuration: departure runway and landing class."""

    label: str
    dep_rwy: str = ""
    landing_class: str = ""

    FILE_NAME = "LGA_ATIS_Config.tsv"
    REQUIRED_HEADERS = ("LGA_ATIS_Config", "DEP_RWY", "LGA_LDG_CLASS")

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> 'LgaConfigRow':
        return cls(
            label=norm(row.get('LGA_ATIS_Config')),
            dep_rwy=norm(row.get('DEP_RWY')),
            landing_class=norm(row.get('LGA_LDG_CLASS')),
        )


@dataclass(frozen=True)
class JfkConfigRow:
    """JFK ATIS configuration: the JFK and LGA airspace it implies."""

    label: str
    jfk_airspace: str = ""
    lga_airspace: str = ""

    FILE_NAME = "JFK_ATIS_Config.tsv"
    REQUIRED_HEADERS = ("JFK_ATIS_Config", "JFK_AIRSPACE", "LGA_AIRSPACE")

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> 'JfkConfigRow':
        return cls(
            label=norm(row.get('JFK_ATIS_Config')),
            jfk_airspace=norm(row.get('JFK_AIRSPACE')),
            lga_airspace=norm(row.get('LGA_AIRSPACE')),
        )


@dataclass(frozen=True)
class GateRow:
    """Exit fix and the departure gate direction it belongs to."""

    gate: str
    direction: str = ""

    FILE_NAME = "Gates.tsv"
    REQUIRED_HEADERS = ("Gate", "Direction")

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> 'GateRow':
        return cls(gate=norm(row.get('Gate')), direction=norm(row.get('Direction')))


@dataclass(frozen=True)
class RouteRow:
    """Preferred route from the routes (PRD) table."""

    origin: str
    destination: str
    route: str = ""
    route_type: str = ""
    aircraft: str = ""
    nav: str = ""
    altitude: str = ""

    FILE_NAME = "PRD.tsv"
    REQUIRED_HEADERS = ("Origin", "Destination", "Route")

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> 'RouteRow':
        return cls(
            origin=norm(row.get('Origin')),
            destination=norm(row.get('Destination')),
            route=norm(row.get('Route')),
            route_type=norm(row.get('Type')),
            aircraft=norm(row.get('Aircraft')),
            nav=norm(row.get('Nav')),
            altitude=norm(row.get('Altitude')),
        )

    def serves(self, origin: str, destination: str) -> bool:
        """Case-insensitive exact match on both endpoints."""
        return (
            self.origin.upper() == norm(origin).upper()
            and self.destination.upper() == norm(destination).upper()
        )


def first_match(rows, predicate) -> Optional[object]:
    """Return the first row satisfying predicate, in table order."""
    for row in rows:
        if predicate(row):
            return row
    return None
