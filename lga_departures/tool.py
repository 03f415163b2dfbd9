"""
The departure tool: from operator selections to a display payload.

Derivation, rule matching, climb classification and the route join run
together for one EXEC.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from lga_departures.context import ReferenceData
from lga_departures.departure.matching import pick_departure_rule
from lga_departures.departure.procedure import climb_instruction
from lga_departures.models.departure_rule import DepartureRule, RuleInputs
from lga_departures.models.navaid import UNKNOWN, norm
from lga_departures.models.tables import RouteRow

logger = logging.getLogger(__name__)

NO_RULE_MESSAGE = "No matching departure rule found."


@dataclass(frozen=True)
class DepartureResult:
    """
    Outcome of one run of the tool.

    Attributes:
        inputs: Derived rule inputs
        rule: Selected rule, None when no rule applies
        climb: Climb instruction for the selected rule
        destination: Destination as entered, trimmed and uppercased
        routes: Routes to the destination
        routes_text: Rendered routes block (table or placeholder message)
    """

    inputs: RuleInputs
    rule: Optional[DepartureRule] = None
    climb: Optional[str] = None
    destination: str = ""
    routes: List[RouteRow] = field(default_factory=list)
    routes_text: str = ""

    @property
    def found_rule(self) -> bool:
        return self.rule is not None

    def computed_text(self) -> str:
        inputs = self.inputs
        return (
            f"DEP RWY: {inputs.dep_rwy or UNKNOWN}\n"
            f"LGA LDG CLASS: {inputs.lga_ldg_class or UNKNOWN}\n"
            f"JFK Airspace: {inputs.jfk_airspace or UNKNOWN}\n"
            f"LGA Airspace: {inputs.lga_airspace or UNKNOWN}\n"
            f"Exit Fix: {inputs.exit_fix or '(blank)'}\n"
            f"Exit Direction: {inputs.exit_gate_dir or UNKNOWN}"
        )

    def departure_text(self) -> str:
        if self.rule is None:
            return NO_RULE_MESSAGE
        lines = [f"OUTPUT: {self.rule.output}"]
        if self.rule.notes:
            lines.append(f"NOTES: {self.rule.notes}")
        lines.append(f"PRIORITY: {self.rule.priority_text}")
        lines.append(f"CLIMB: {self.climb}")
        return "\n".join(lines)

    def text(self) -> str:
        return "\n\n".join([self.computed_text(), self.departure_text(), self.routes_text])


class DepartureTool:
    """
    Run the departure resolution against loaded reference data.

    Example:
        tool = DepartureTool(ReferenceData.load(DirectoryTableSource("data")))
        result = tool.run("ILS 22 DEP 13", "31L/31R", "WHITE", "JET", "KPHL")
        print(result.text())
    """

    def __init__(self, reference: ReferenceData):
        self.reference = reference
        self.resolver = reference.resolver()
        self.route_finder = reference.route_finder()

    def run(self, lga_config: str, jfk_config: str, exit_fix: str, acft_type: str = "", destination: str = "") -> DepartureResult:
        inputs = self.resolver.build_inputs(lga_config, jfk_config, exit_fix, acft_type)
        rule = pick_departure_rule(self.reference.rules, inputs)
        climb = climb_instruction(rule.output) if rule else None

        dest = norm(destination).upper()
        routes = self.route_finder.routes_for(dest)
        if rule is None:
            logger.info("No departure rule for %s", inputs.to_dict())
        return DepartureResult(
            inputs=inputs,
            rule=rule,
            climb=climb,
            destination=dest,
            routes=routes,
            routes_text=self.route_finder.routes_text(dest),
        )
