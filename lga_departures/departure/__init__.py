"""
Departure procedure resolution.

DerivationResolver turns selections into RuleInputs, pick_departure_rule
selects the rule and climb_instruction classifies its output.
"""

from lga_departures.departure.derivation import DerivationResolver
from lga_departures.departure.matching import (
    match_field,
    match_airspace,
    matching_rules,
    pick_departure_rule,
)
from lga_departures.departure.procedure import (
    climb_instruction,
    CLIMB_VIA_SID,
    CLIMB_AND_MAINTAIN,
)

__all__ = [
    'DerivationResolver',
    'match_field',
    'match_airspace',
    'matching_rules',
    'pick_departure_rule',
    'climb_instruction',
    'CLIMB_VIA_SID',
    'CLIMB_AND_MAINTAIN',
]
