"""Translate operator selections into rule inputs via the configuration tables."""

from typing import Sequence, Tuple

from lga_departures.models.departure_rule import RuleInputs
from lga_departures.models.navaid import norm
from lga_departures.models.tables import GateRow, JfkConfigRow, LgaConfigRow, first_match


class DerivationResolver:
    """
    Lookups over the LGA config, JFK config and gate tables.

    Each lookup is a linear scan returning the first matching row. A miss
    produces empty strings; downstream matching treats those as unknown.
    """

    def __init__(
        self,
        lga_configs: Sequence[LgaConfigRow],
        jfk_configs: Sequence[JfkConfigRow],
        gates: Sequence[GateRow],
    ):
        self.lga_configs = lga_configs
        self.jfk_configs = jfk_configs
        self.gates = gates

    def gate_direction(self, exit_fix: str) -> str:
        """Direction of the gate an exit fix belongs to, or ""."""
        fix = norm(exit_fix).upper()
        row = first_match(self.gates, lambda gate: gate.gate.upper() == fix)
        return row.direction if row else ""

    def lga_derived(self, lga_config: str) -> Tuple[str, str]:
        """(departure runway, landing class) for an LGA ATIS configuration."""
        label = norm(lga_config)
        row = first_match(self.lga_configs, lambda config: config.label == label)
        return (row.dep_rwy, row.landing_class) if row else ("", "")

    def jfk_airspace(self, jfk_config: str) -> Tuple[str, str]:
        """(JFK airspace, LGA airspace) for a JFK ATIS configuration."""
        label = norm(jfk_config)
        row = first_match(self.jfk_configs, lambda config: config.label == label)
        return (row.jfk_airspace, row.lga_airspace) if row else ("", "")

    def build_inputs(self, lga_config: str, jfk_config: str, exit_fix: str, acft_type: str = "") -> RuleInputs:
        """Run every lookup and assemble the canonical rule inputs."""
        fix = norm(exit_fix).upper()
        dep_rwy, ldg_class = self.lga_derived(lga_config)
        jfk_airspace, lga_airspace = self.jfk_airspace(jfk_config)
        return RuleInputs(
            dep_rwy=dep_rwy,
            lga_ldg_class=ldg_class,
            lga_airspace=lga_airspace,
            jfk_airspace=jfk_airspace,
            exit_gate_dir=self.gate_direction(fix),
            exit_fix=fix,
            acft_type=norm(acft_type),
        )
