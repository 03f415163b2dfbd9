"""Climb instruction for a departure procedure."""

import re

CLIMB_VIA_SID = "CLIMB VIA SID"
CLIMB_AND_MAINTAIN = "CLIMB AND MAINTAIN 5,000"

# Conventional departures that are flown as a SID with a published climb
SID_COMPOUND_NAMES = ("LGA7.MASPETH", "LGA7.WHITESTONE")

# RNAV departures, optionally suffixed with a version digit or "#"
RNAV_SID_WAYPOINTS = ("GLDMN", "HOPEA", "JUTES", "NTHNS", "TNNIS")
_RNAV_SID = re.compile(r"(?:^|\.)(?:%s)(?:\d|#)?(?=\.|$)" % "|".join(RNAV_SID_WAYPOINTS))


def normalize_procedure(output: str) -> str:
    """Collapse whitespace runs to single dots and uppercase."""
    return re.sub(r"\s+", ".", (output or "").strip()).upper()


def climb_instruction(output: str) -> str:
    """
    Climb instruction to issue with a departure procedure.

    Examples:
        climb_instruction("LGA7.MASPETH")  -> "CLIMB VIA SID"
        climb_instruction("TNNIS7 TNNIS")  -> "CLIMB VIA SID"
        climb_instruction("LGA7")          -> "CLIMB AND MAINTAIN 5,000"
    """
    procedure = normalize_procedure(output)
    if any(name in procedure for name in SID_COMPOUND_NAMES):
        return CLIMB_VIA_SID
    if _RNAV_SID.search(procedure):
        return CLIMB_VIA_SID
    return CLIMB_AND_MAINTAIN
