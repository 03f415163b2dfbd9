"""
Weather module for METAR polling and runway configuration.

Provides:
- WeatherObservation / Wind / FlightCategory: parsed report fields
- MetarParser: regex extraction of visibility, ceiling and wind
- suggest_config: runway configuration tables for KLGA and KJFK
- MetarSource: aviationweather.gov text endpoint
- WeatherPoller / WeatherBoard: bounded, generation-tagged watchlist polling

Example:
    from lga_departures.weather import MetarParser, suggest_config

    obs = MetarParser.parse("KLGA 191251Z 22012KT 10SM FEW250 18/09 A3001")
    print(obs.flight_category)  # VFR
    print(suggest_config("KLGA", obs.wind, obs.flight_category))
"""

from lga_departures.weather.models import FlightCategory, WeatherObservation, Wind
from lga_departures.weather.parser import MetarParser, flight_category
from lga_departures.weather.runway_config import (
    suggest_config,
    suggest_lga_config,
    suggest_jfk_config,
    RunwayConfigTable,
    SectorRule,
)
from lga_departures.weather.source import MetarSource, WeatherFetchError
from lga_departures.weather.poller import (
    WeatherEntry,
    WeatherBoard,
    WeatherPoller,
    fetch_batch,
)

__all__ = [
    'FlightCategory',
    'WeatherObservation',
    'Wind',
    'MetarParser',
    'flight_category',
    'suggest_config',
    'suggest_lga_config',
    'suggest_jfk_config',
    'RunwayConfigTable',
    'SectorRule',
    'MetarSource',
    'WeatherFetchError',
    'WeatherEntry',
    'WeatherBoard',
    'WeatherPoller',
    'fetch_batch',
]
