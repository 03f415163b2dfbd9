"""METAR decoding wrapping the metar_taf_parser library."""

import logging
import math
import re
from typing import Optional

from metar_taf_parser.model.enum import CloudQuantity
from metar_taf_parser.parser.parser import MetarParser as MetarCodeParser

from lga_departures.weather.models import FlightCategory, WeatherObservation, Wind

logger = logging.getLogger(__name__)

# Meters to statute miles conversion
_METERS_TO_SM = 0.000621371

# "M1/4SM" / "P6SM": less-than and more-than qualifiers the decoder does not accept
_VISIBILITY_QUALIFIER = re.compile(r"(^|\s)[MP](\d[\d/]*SM)(?=\s|$)")

_CEILING_QUANTITIES = (CloudQuantity.BKN, CloudQuantity.OVC)


class MetarParser:
    """
    Decode a raw METAR line into visibility, ceiling and wind.

    Uses the metar_taf_parser library for the decoding, then reduces the
    parsed report to the fields the weather board needs. Every component
    degrades on its own: an unreadable visibility is NaN, a report without
    a ceiling layer has an infinite ceiling, a missing wind group gives an
    empty direction and NaN speed.

    Example:
        obs = MetarParser.parse("KLGA 191251Z 04012KT 2 1/2SM BR OVC008 12/11 A2990")
        obs.flight_category  # FlightCategory.IFR
    """

    @classmethod
    def parse(cls, raw_text: str) -> WeatherObservation:
        text = (raw_text or "").strip()
        if not text:
            return WeatherObservation(raw_text="")

        parsed = cls.decode(text)
        if parsed is None:
            return WeatherObservation(raw_text=text)

        visibility = cls._extract_visibility(parsed)
        ceiling = cls._extract_ceiling(parsed)
        return WeatherObservation(
            raw_text=text,
            visibility_sm=visibility,
            ceiling_ft=ceiling,
            wind=cls._extract_wind(parsed),
            flight_category=flight_category(ceiling, visibility),
        )

    @classmethod
    def decode(cls, raw_text: str):
        """
        Run the library decoder on a report line.

        Returns:
            Parsed Metar object, or None for a blank, NIL or undecodable report
        """
        text = (raw_text or "").strip()
        upper = text.upper()
        if upper.startswith("METAR") or upper.startswith("SPECI"):
            text = text[5:].strip()
        if text.upper().startswith("COR"):
            text = text[3:].strip()
        if not text or "NIL" in text.upper().split():
            return None

        text = _VISIBILITY_QUALIFIER.sub(r"\1\2", text)
        try:
            parsed = MetarCodeParser().parse(text)
        except Exception as e:
            logger.debug("Failed to parse METAR: %s - %s", raw_text[:80], e)
            return None
        if getattr(parsed, 'nil', False):
            return None
        return parsed

    @classmethod
    def parse_visibility(cls, raw_text: str) -> float:
        """Statute-mile visibility, NaN when absent or malformed."""
        return cls._extract_visibility(cls.decode(raw_text))

    @classmethod
    def parse_ceiling(cls, raw_text: str) -> float:
        """Lowest BKN/OVC/VV layer in feet, inf when there is no ceiling."""
        return cls._extract_ceiling(cls.decode(raw_text))

    @classmethod
    def parse_wind(cls, raw_text: str) -> Wind:
        return cls._extract_wind(cls.decode(raw_text))

    # --- Field extraction helpers ---

    @classmethod
    def _extract_wind(cls, parsed) -> Wind:
        wind = getattr(parsed, 'wind', None)
        if not wind or getattr(wind, 'speed', None) is None:
            return Wind()

        degrees = getattr(wind, 'degrees', None)
        gust = getattr(wind, 'gust', None)
        return Wind(
            direction=f"{int(degrees):03d}" if degrees is not None else "VRB",
            speed=float(wind.speed),
            gust=float(gust) if gust else None,
        )

    @classmethod
    def _extract_visibility(cls, parsed) -> float:
        """
        Visibility in statute miles.

        The decoder keeps the distance as text ("10SM", "2 1/2SM", "> 10km",
        "3000m"); fractions are parsed without eval().
        """
        if parsed is None:
            return math.nan
        if getattr(parsed, 'cavok', False):
            return 10000 * _METERS_TO_SM

        vis = getattr(parsed, 'visibility', None)
        distance = getattr(vis, 'distance', None) if vis else None
        if distance is None:
            return math.nan

        text = str(distance).replace('>', '').replace('<', '').replace('_', ' ').strip().upper()
        value = None
        if text.endswith('SM'):
            value = cls._safe_parse_fraction(text[:-2])
        elif text.endswith('KM'):
            km = cls._safe_parse_fraction(text[:-2])
            value = km * 1000 * _METERS_TO_SM if km is not None else None
        elif text.endswith('M'):
            meters = cls._safe_parse_fraction(text[:-1])
            value = meters * _METERS_TO_SM if meters is not None else None
        else:
            meters = cls._safe_parse_fraction(text)
            value = meters * _METERS_TO_SM if meters is not None else None
        return value if value is not None else math.nan

    @classmethod
    def _extract_ceiling(cls, parsed) -> float:
        """Lowest broken or overcast layer, or vertical visibility, in feet."""
        if parsed is None:
            return math.inf

        heights = []
        for cloud in getattr(parsed, 'clouds', None) or []:
            height = getattr(cloud, 'height', None)
            if getattr(cloud, 'quantity', None) in _CEILING_QUANTITIES and height is not None:
                heights.append(height)

        vertical = getattr(parsed, 'vertical_visibility', None)
        if vertical is not None:
            heights.append(vertical)

        if not heights:
            return math.inf
        return float(min(heights))

    @classmethod
    def _safe_parse_fraction(cls, text: str) -> Optional[float]:
        """
        Parse a whole number, decimal, simple fraction or mixed number.

        Handles: "1", "0.5", "1/2", "2 1/2"
        """
        text = text.strip()
        if not text:
            return None

        try:
            return float(text)
        except ValueError:
            pass

        parts = text.split()
        if len(parts) == 2:
            fraction = cls._parse_simple_fraction(parts[1])
            if fraction is None or not parts[0].isdigit():
                return None
            return float(parts[0]) + fraction

        if "/" in text:
            return cls._parse_simple_fraction(text)
        return None

    @staticmethod
    def _parse_simple_fraction(text: str) -> Optional[float]:
        """Parse a simple fraction like '1/2' or '3/4'."""
        parts = text.split("/")
        if len(parts) != 2:
            return None
        try:
            num = float(parts[0])
            den = float(parts[1])
        except ValueError:
            return None
        if den == 0:
            return None
        return num / den


def flight_category(ceiling_ft: float, visibility_sm: float) -> FlightCategory:
    """
    Flight category from ceiling and visibility.

    Each bound is exclusive: a 500 ft ceiling is IFR, 3 SM visibility is
    MVFR. NaN visibility never satisfies a bound, so only the ceiling counts
    when visibility could not be read.
    """
    if ceiling_ft < 500 or visibility_sm < 1:
        return FlightCategory.LIFR
    if ceiling_ft < 1000 or visibility_sm < 3:
        return FlightCategory.IFR
    if ceiling_ft < 3000 or visibility_sm < 5:
        return FlightCategory.MVFR
    return FlightCategory.VFR


def report_category(raw_text: str) -> FlightCategory:
    """Flight category for a raw report; a blank report is UNKNOWN."""
    return MetarParser.parse(raw_text).flight_category
