"""
LaGuardia (KLGA) departure reference tool.

This package resolves departure procedures from ATIS configurations and exit
fixes, looks up navaids, airports and preferred routes, and turns METAR
reports into flight categories and runway configuration suggestions.

The main public API includes:
- ReferenceData: All snapshot tables and indices, loaded once
- DepartureTool: Derivation, rule matching, climb and routes for one run
- ReferenceIndex: Navaid/airport lookups and search
- DirectoryTableSource / HttpTableSource: Where the tables come from
- MetarParser: Visibility, ceiling, wind and flight category from a METAR
"""

from lga_departures.context import ReferenceData
from lga_departures.tool import DepartureTool, DepartureResult
from lga_departures.models.reference_index import ReferenceIndex
from lga_departures.sources import DirectoryTableSource, HttpTableSource
from lga_departures.weather.parser import MetarParser

__version__ = '0.1.0'
__all__ = [
    'ReferenceData',
    'DepartureTool',
    'DepartureResult',
    'ReferenceIndex',
    'DirectoryTableSource',
    'HttpTableSource',
    'MetarParser',
]
