"""Navaid and airport reference records."""

import math
from dataclasses import dataclass
from typing import Dict, Optional

from lga_departures.models.navpoint import NavPoint

UNKNOWN = "(unknown)"
NO_VALUE = "—"


def norm(value: Optional[str]) -> str:
    """Trim a raw table value, treating None as empty."""
    return (value or "").strip()


def parse_float(value: Optional[str]) -> Optional[float]:
    """Return the numeric value of a raw field, or None when blank or non-numeric."""
    text = norm(value)
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def format_frequency(raw: Optional[str]) -> str:
    """
    Render a navaid frequency column for display.

    Values of 100000 and above are kHz figures for VHF aids and are shown in
    MHz with two decimals; anything else numeric is shown in kHz. Non-numeric
    values pass through unchanged.
    """
    text = norm(raw)
    if not text:
        return UNKNOWN
    number = parse_float(text)
    if number is None:
        return text
    if number >= 100000:
        return f"{number / 1000:.2f} MHz"
    if number.is_integer():
        return f"{int(number)} kHz"
    return f"{number} kHz"


@dataclass(frozen=True)
class NavaidRecord:
    """
    A radio navigation aid.

    Identifiers are not unique worldwide; the reference index keeps every
    record and orders each identifier group by distance from the hub.

    Attributes:
        ident: Uppercased identifier
        name: Facility name
        type: Uppercased category (VOR, VORTAC, NDB, ...)
        frequency_raw: Frequency column as found in the table
        frequency_display: Human readable frequency
        latitude: Decimal degrees, None when unknown
        longitude: Decimal degrees, None when unknown
        distance_nm: Distance from the hub, math.inf when position is unknown
    """

    ident: str
    name: str = ""
    type: str = ""
    frequency_raw: str = ""
    frequency_display: str = UNKNOWN
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance_nm: float = math.inf

    kind = "NAVAID"

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def has_distance(self) -> bool:
        return math.isfinite(self.distance_nm)

    def distance_label(self, placeholder: str = UNKNOWN) -> str:
        return f"{self.distance_nm:.1f} NM" if self.has_distance else placeholder

    @property
    def search_key(self) -> str:
        return f"{self.ident} {self.name} {self.type}".upper()

    def info_text(self) -> str:
        """Multi-line detail block for a selected navaid."""
        lat = f"{self.latitude:.6f}" if self.latitude is not None else UNKNOWN
        lon = f"{self.longitude:.6f}" if self.longitude is not None else UNKNOWN
        return (
            f"KIND:  NAVAID\n"
            f"IDENT: {self.ident}\n"
            f"TYPE:  {self.type or UNKNOWN}\n"
            f"FREQ:  {self.frequency_display}\n"
            f"NAME:  {self.name or UNKNOWN}\n"
            f"LAT:   {lat}\n"
            f"LON:   {lon}\n"
            f"DIST:  {self.distance_label()} (from KLGA)"
        )

    @classmethod
    def from_row(cls, row: Dict[str, str], origin: NavPoint) -> Optional['NavaidRecord']:
        """
        Build a record from a NAVAIDs.tsv row.

        Returns None when the identifier is blank. Coordinates that are
        missing, non-numeric or out of range leave the position unknown.
        """
        ident = norm(row.get('ident')).upper()
        if not ident:
            return None

        latitude = parse_float(row.get('latitude_deg'))
        longitude = parse_float(row.get('longitude_deg'))
        distance = math.inf
        if latitude is not None and longitude is not None:
            try:
                distance = origin.distance_to(NavPoint(latitude, longitude, ident))
            except ValueError:
                latitude = longitude = None

        return cls(
            ident=ident,
            name=norm(row.get('name')),
            type=norm(row.get('type')).upper(),
            frequency_raw=norm(row.get('frequency_khz')),
            frequency_display=format_frequency(row.get('frequency_khz')),
            latitude=latitude,
            longitude=longitude,
            distance_nm=distance,
        )


@dataclass(frozen=True)
class AirportRecord:
    """An airport known only by identifier and name."""

    ident: str
    name: str = ""

    kind = "AIRPORT"

    @property
    def search_key(self) -> str:
        # Generic words let "heliport" or "airport" queries surface every airport
        return f"{self.ident} {self.name} AIRPORT APT HELIPORT".upper()

    def info_text(self) -> str:
        return (
            f"KIND:  AIRPORT\n"
            f"IDENT: {self.ident}\n"
            f"TYPE:  AIRPORT\n"
            f"NAME:  {self.name or UNKNOWN}"
        )

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> Optional['AirportRecord']:
        ident = norm(row.get('ident')).upper()
        if not ident:
            return None
        return cls(ident=ident, name=norm(row.get('name')))
