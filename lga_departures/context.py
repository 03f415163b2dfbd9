"""
Loaded reference data.

Everything the query side needs is loaded once, in a fixed order, into a
ReferenceData object that is then handed to the departure tool, the route
finder and the search commands. Nothing reads a table before the whole
load has completed.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from lga_departures.departure.derivation import DerivationResolver
from lga_departures.models.departure_rule import DepartureRule
from lga_departures.models.reference_index import ReferenceIndex
from lga_departures.models.tables import GateRow, JfkConfigRow, LgaConfigRow, RouteRow
from lga_departures.models.validation import ValidationResult
from lga_departures.routes import RouteFinder
from lga_departures.sources.base import TableSource

logger = logging.getLogger(__name__)

NAVAIDS_FILE = "NAVAIDs.tsv"
NAVAIDS_HEADERS = ("ident", "name", "type", "frequency_khz", "latitude_deg", "longitude_deg")
AIRPORTS_FILE = "Airports.tsv"
AIRPORTS_HEADERS = ("ident", "name")


@dataclass(frozen=True)
class ReferenceData:
    """
    Immutable snapshot of every table plus the derived indices.

    Attributes:
        lga_configs: LGA ATIS configurations, table order
        jfk_configs: JFK ATIS configurations, table order
        gates: Exit fix to direction rows
        rules: Departure rules, table order
        routes: Preferred routes
        index: Navaid/airport lookups
        warnings: Parse warnings per table file
    """

    lga_configs: Tuple[LgaConfigRow, ...] = ()
    jfk_configs: Tuple[JfkConfigRow, ...] = ()
    gates: Tuple[GateRow, ...] = ()
    rules: Tuple[DepartureRule, ...] = ()
    routes: Tuple[RouteRow, ...] = ()
    index: ReferenceIndex = field(default_factory=lambda: ReferenceIndex.build([], []))
    warnings: Dict[str, ValidationResult] = field(default_factory=dict, compare=False)

    @classmethod
    def load(cls, source: TableSource) -> 'ReferenceData':
        """
        Load all tables from a source.

        Raises:
            TableLoadError: if any table cannot be read. No partial data is
                returned.
        """
        warnings: Dict[str, ValidationResult] = {}

        def rows(file_name, required):
            table = source.load_table(file_name, required)
            warnings[file_name] = table.validation
            if table.validation.has_warnings:
                logger.warning("%s: %d parse warnings", file_name, len(table.validation.warnings))
                for message in table.validation.get_messages():
                    logger.debug("%s: %s", file_name, message)
            return table.rows

        lga_configs = tuple(LgaConfigRow.from_row(r) for r in rows(LgaConfigRow.FILE_NAME, LgaConfigRow.REQUIRED_HEADERS))
        jfk_configs = tuple(JfkConfigRow.from_row(r) for r in rows(JfkConfigRow.FILE_NAME, JfkConfigRow.REQUIRED_HEADERS))
        gates = tuple(GateRow.from_row(r) for r in rows(GateRow.FILE_NAME, GateRow.REQUIRED_HEADERS))
        rule_rows = rows(DepartureRule.FILE_NAME, DepartureRule.REQUIRED_HEADERS)
        rules = tuple(DepartureRule.from_row(r, position) for position, r in enumerate(rule_rows))
        routes = tuple(RouteRow.from_row(r) for r in rows(RouteRow.FILE_NAME, RouteRow.REQUIRED_HEADERS))
        navaid_rows = rows(NAVAIDS_FILE, NAVAIDS_HEADERS)
        airport_rows = rows(AIRPORTS_FILE, AIRPORTS_HEADERS)

        rule_warnings = warnings[DepartureRule.FILE_NAME]
        for rule in rules:
            if not rule.has_numeric_priority:
                rule_warnings.add_warning(
                    "PRIORITY", "not numeric, rule ranks last", value=rule.priority_text, line=rule.position + 2
                )

        data = cls(
            lga_configs=lga_configs,
            jfk_configs=jfk_configs,
            gates=gates,
            rules=rules,
            routes=routes,
            index=ReferenceIndex.build(navaid_rows, airport_rows),
            warnings=warnings,
        )
        logger.info(
            "Loaded %d LGA configs, %d JFK configs, %d gates, %d rules, %d routes from %s",
            len(lga_configs), len(jfk_configs), len(gates), len(rules), len(routes), source.get_source_name(),
        )
        return data

    @property
    def lga_config_labels(self) -> List[str]:
        return [config.label for config in self.lga_configs]

    @property
    def jfk_config_labels(self) -> List[str]:
        return [config.label for config in self.jfk_configs]

    def resolver(self) -> DerivationResolver:
        return DerivationResolver(self.lga_configs, self.jfk_configs, self.gates)

    def route_finder(self) -> RouteFinder:
        return RouteFinder(self.routes, self.index)
