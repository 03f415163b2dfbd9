"""Departure rules and the canonical input vector they are matched against."""

import math
from dataclasses import dataclass, field
from typing import Dict, Any

from lga_departures.models.navaid import norm, parse_float


@dataclass(frozen=True)
class RuleInputs:
    """
    Canonical values a departure rule is matched against.

    Produced by the derivation resolver from the operator's selections.
    Empty strings mean "unknown" and only satisfy wildcard rule fields.
    """

    dep_rwy: str = ""
    lga_ldg_class: str = ""
    lga_airspace: str = ""
    jfk_airspace: str = ""
    exit_gate_dir: str = ""
    exit_fix: str = ""
    acft_type: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            'DEP_RWY': self.dep_rwy,
            'LGA_LDG_CLASS': self.lga_ldg_class,
            'LGA_AIRSPACE': self.lga_airspace,
            'JFK_AIRSPACE': self.jfk_airspace,
            'EXIT_GATE_DIR': self.exit_gate_dir,
            'EXIT_FIX': self.exit_fix,
            'ACFT_TYPE': self.acft_type,
        }


@dataclass(frozen=True)
class DepartureRule:
    """
    One row of the departure rule table.

    Match fields hold either a literal value, "*" or "" (wildcards). The
    airspace requirement fields may list several tokens joined by "+", ","
    or "&", all of which must be present in the active airspace.

    Attributes:
        dep_rwy: Required departure runway
        lga_airspace_req: Required LGA airspace tokens
        jfk_airspace_req: Required JFK airspace tokens
        exit_gate_dir: Required exit gate direction
        exit_fix_req: Required exit fix
        acft_type: Required aircraft type
        lga_ldg_class_req: Required LGA landing class
        output: Departure procedure to issue
        notes: Free text shown with the output
        priority_text: PRIORITY column as found in the table
        position: Zero-based row position in the table
    """

    dep_rwy: str = ""
    lga_airspace_req: str = ""
    jfk_airspace_req: str = ""
    exit_gate_dir: str = ""
    exit_fix_req: str = ""
    acft_type: str = ""
    lga_ldg_class_req: str = ""
    output: str = ""
    notes: str = ""
    priority_text: str = ""
    position: int = field(default=0, compare=False)

    FILE_NAME = "Dep_Rules.tsv"
    REQUIRED_HEADERS = (
        "DEP_RWY", "LGA_AIRSPACE_REQ", "JFK_AIRSPACE_REQ", "EXIT_GATE_DIR",
        "EXIT_FIX_REQ", "ACFT_TYPE", "LGA_LDG_CLASS_REQ", "OUTPUT", "PRIORITY",
    )

    @property
    def priority(self) -> float:
        """Numeric priority; blank or non-numeric values rank after every number."""
        value = parse_float(self.priority_text)
        return value if value is not None else math.inf

    @property
    def has_numeric_priority(self) -> bool:
        return parse_float(self.priority_text) is not None

    @classmethod
    def from_row(cls, row: Dict[str, str], position: int = 0) -> 'DepartureRule':
        return cls(
            dep_rwy=norm(row.get('DEP_RWY')),
            lga_airspace_req=norm(row.get('LGA_AIRSPACE_REQ')),
            jfk_airspace_req=norm(row.get('JFK_AIRSPACE_REQ')),
            exit_gate_dir=norm(row.get('EXIT_GATE_DIR')),
            exit_fix_req=norm(row.get('EXIT_FIX_REQ')),
            acft_type=norm(row.get('ACFT_TYPE')),
            lga_ldg_class_req=norm(row.get('LGA_LDG_CLASS_REQ')),
            output=norm(row.get('OUTPUT')),
            notes=norm(row.get('NOTES')),
            priority_text=norm(row.get('PRIORITY')),
            position=position,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'DEP_RWY': self.dep_rwy,
            'LGA_AIRSPACE_REQ': self.lga_airspace_req,
            'JFK_AIRSPACE_REQ': self.jfk_airspace_req,
            'EXIT_GATE_DIR': self.exit_gate_dir,
            'EXIT_FIX_REQ': self.exit_fix_req,
            'ACFT_TYPE': self.acft_type,
            'LGA_LDG_CLASS_REQ': self.lga_ldg_class_req,
            'OUTPUT': self.output,
            'NOTES': self.notes,
            'PRIORITY': self.priority_text,
        }
