"""
Departure rule matching.

A rule applies when all seven of its match fields accept the corresponding
input value. Among the applicable rules the lowest priority number wins;
equal priorities keep table order.
"""

import logging
import re
from typing import List, Optional, Sequence

from lga_departures.models.departure_rule import DepartureRule, RuleInputs
from lga_departures.models.navaid import norm

logger = logging.getLogger(__name__)

WILDCARD = "*"

# Airspace requirement tokens are joined with "+", "," or "&"
_AIRSPACE_SEPARATOR = re.compile(r"\s*[+,&]\s*")


def is_wildcard(rule_value: Optional[str]) -> bool:
    value = norm(rule_value)
    return value == WILDCARD or value == ""


def match_field(rule_value: Optional[str], input_value: Optional[str]) -> bool:
    """
    Exact, case-insensitive field match.

    "*" and "" in the rule accept anything, including an empty input. An
    empty input never satisfies a literal rule value.
    """
    if is_wildcard(rule_value):
        return True
    value = norm(input_value)
    if not value:
        return False
    return norm(rule_value).upper() == value.upper()


def airspace_tokens(rule_value: Optional[str]) -> List[str]:
    """Split an airspace requirement into its uppercased tokens."""
    return [part.strip() for part in _AIRSPACE_SEPARATOR.split(norm(rule_value).upper()) if part.strip()]


def match_airspace(rule_value: Optional[str], input_value: Optional[str]) -> bool:
    """
    Multi-token airspace match.

    Every token of the requirement must appear somewhere in the input, in
    any order: "N+S" matches "S+N" and "NSW", not "N".

    Examples:
        match_airspace("A+B", "XAYB")  -> True
        match_airspace("A+B", "XAY")   -> False
    """
    if is_wildcard(rule_value):
        return True
    value = norm(input_value)
    if not value:
        return False
    haystack = value.upper()
    return all(token in haystack for token in airspace_tokens(rule_value))


def rule_matches(rule: DepartureRule, inputs: RuleInputs) -> bool:
    return (
        match_field(rule.dep_rwy, inputs.dep_rwy)
        and match_airspace(rule.lga_airspace_req, inputs.lga_airspace)
        and match_airspace(rule.jfk_airspace_req, inputs.jfk_airspace)
        and match_field(rule.exit_gate_dir, inputs.exit_gate_dir)
        and match_field(rule.exit_fix_req, inputs.exit_fix)
        and match_field(rule.acft_type, inputs.acft_type)
        and match_field(rule.lga_ldg_class_req, inputs.lga_ldg_class)
    )


def matching_rules(rules: Sequence[DepartureRule], inputs: RuleInputs) -> List[DepartureRule]:
    """
    All rules satisfied by the inputs, best first.

    sorted() is stable, so rules with the same priority stay in table order.
    """
    return sorted((rule for rule in rules if rule_matches(rule, inputs)), key=lambda rule: rule.priority)


def pick_departure_rule(rules: Sequence[DepartureRule], inputs: RuleInputs) -> Optional[DepartureRule]:
    """
    Select the departure rule for the inputs.

    Returns:
        The applicable rule with the lowest priority number, or None when no
        rule applies.
    """
    candidates = matching_rules(rules, inputs)
    if not candidates:
        logger.debug("No departure rule for %s", inputs.to_dict())
        return None
    chosen = candidates[0]
    logger.debug(
        "Selected rule at row %d (priority %s) out of %d candidates",
        chosen.position, chosen.priority_text, len(candidates),
    )
    return chosen
