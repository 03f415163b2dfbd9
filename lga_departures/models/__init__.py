"""
Data models for the lga_departures package.

Typed rows for every snapshot table, the navaid/airport reference index and
the validation types used to report parse warnings.
"""

from .navpoint import NavPoint
from .navaid import NavaidRecord, AirportRecord
from .tables import LgaConfigRow, JfkConfigRow, GateRow, RouteRow
from .departure_rule import DepartureRule, RuleInputs
from .reference_index import ReferenceIndex, SearchHit
from .validation import ValidationResult, ValidationError, LgaDeparturesError, TableLoadError

__all__ = [
    'NavPoint',
    'NavaidRecord',
    'AirportRecord',
    'LgaConfigRow',
    'JfkConfigRow',
    'GateRow',
    'RouteRow',
    'DepartureRule',
    'RuleInputs',
    'ReferenceIndex',
    'SearchHit',
    'ValidationResult',
    'ValidationError',
    'LgaDeparturesError',
    'TableLoadError',
]
