"""
Identifier-keyed lookup structures for navaids and airports.

The index is built once from the snapshot rows and never modified; a reload
builds a new index.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from lga_departures.config import HUB_IDENT, HUB_LATITUDE, HUB_LONGITUDE, SEARCH_LIMIT
from lga_departures.models.navaid import AirportRecord, NavaidRecord, NO_VALUE, norm
from lga_departures.models.navpoint import NavPoint

logger = logging.getLogger(__name__)

Record = Union[NavaidRecord, AirportRecord]


@dataclass(frozen=True)
class SearchHit:
    """One row of the unified search result list."""

    record: Record

    @property
    def kind(self) -> str:
        return self.record.kind

    @property
    def ident(self) -> str:
        return self.record.ident

    @property
    def type_label(self) -> str:
        if isinstance(self.record, NavaidRecord):
            return self.record.type or "-"
        return "AIRPORT"

    @property
    def name_label(self) -> str:
        return self.record.name or "-"

    @property
    def distance_label(self) -> str:
        if isinstance(self.record, NavaidRecord):
            return self.record.distance_label(NO_VALUE)
        return "APT"

    def row_text(self) -> str:
        return f"{self.ident:<6} {self.type_label:<8} {self.name_label:<32} {self.distance_label}"


class ReferenceIndex:
    """
    Navaid and airport lookups.

    Navaids are grouped by identifier, each group nearest-first from the hub.
    Airports are keyed by identifier with the first occurrence winning.
    Search covers both, navaids first.

    Example:
        index = ReferenceIndex.build(navaid_rows, airport_rows)
        index.navaids_for("JFK")[0].distance_nm
        [hit.ident for hit in index.search("KENNEDY")]
    """

    def __init__(
        self,
        navaids_by_ident: Dict[str, Tuple[NavaidRecord, ...]],
        navaid_search: Tuple[NavaidRecord, ...],
        airports_by_ident: Dict[str, AirportRecord],
        airport_search: Tuple[AirportRecord, ...],
    ):
        self._navaids_by_ident = navaids_by_ident
        self._navaid_search = navaid_search
        self._airports_by_ident = airports_by_ident
        self._airport_search = airport_search

    @classmethod
    def build(
        cls,
        navaid_rows: Iterable[Dict[str, str]],
        airport_rows: Iterable[Dict[str, str]],
        origin: Optional[NavPoint] = None,
    ) -> 'ReferenceIndex':
        """
        Build the index from raw table rows.

        Args:
            navaid_rows: NAVAIDs.tsv rows (ident, name, type, frequency_khz, latitude_deg, longitude_deg)
            airport_rows: Airports.tsv rows (ident, name)
            origin: Reference point for distances, KLGA by default
        """
        origin = origin or NavPoint(HUB_LATITUDE, HUB_LONGITUDE, HUB_IDENT)
        navaids = build_navaids(navaid_rows, origin)
        airports = build_airports(airport_rows)

        groups: Dict[str, List[NavaidRecord]] = {}
        for navaid in navaids:
            groups.setdefault(navaid.ident, []).append(navaid)
        navaids_by_ident = {
            ident: tuple(sorted(group, key=lambda n: (n.distance_nm, n.name.casefold(), n.name)))
            for ident, group in groups.items()
        }
        navaid_search = tuple(sorted(navaids, key=lambda n: (n.distance_nm, n.ident)))

        airports_by_ident: Dict[str, AirportRecord] = {}
        for airport in airports:
            airports_by_ident.setdefault(airport.ident, airport)
        airport_search = tuple(sorted(airports, key=lambda a: a.ident))

        logger.info(
            "Reference index: %d navaids (%d idents), %d airports",
            len(navaid_search), len(navaids_by_ident), len(airports_by_ident),
        )
        return cls(navaids_by_ident, navaid_search, airports_by_ident, airport_search)

    # --- Lookups ---

    def navaids_for(self, ident: str) -> List[NavaidRecord]:
        """All navaids sharing an identifier, nearest first."""
        return list(self._navaids_by_ident.get(norm(ident).upper(), ()))

    def airport_for(self, ident: str) -> Optional[AirportRecord]:
        return self._airports_by_ident.get(norm(ident).upper())

    def has_navaid(self, ident: str) -> bool:
        return norm(ident).upper() in self._navaids_by_ident

    def has_airport(self, ident: str) -> bool:
        return norm(ident).upper() in self._airports_by_ident

    @property
    def navaid_search_list(self) -> List[NavaidRecord]:
        return list(self._navaid_search)

    @property
    def airport_search_list(self) -> List[AirportRecord]:
        return list(self._airport_search)

    def navaid_groups(self) -> Dict[str, List[NavaidRecord]]:
        return {ident: list(group) for ident, group in self._navaids_by_ident.items()}

    # --- Search ---

    def search(self, query: str, limit: int = SEARCH_LIMIT) -> List[SearchHit]:
        """
        Substring search over navaids then airports.

        Navaid hits come first in nearest-first order, remaining slots are
        filled with airports in identifier order.
        """
        needle = norm(query).upper()
        if not needle:
            return []

        hits: List[SearchHit] = []
        for navaid in self._navaid_search:
            if len(hits) >= limit:
                return hits
            if needle in navaid.search_key:
                hits.append(SearchHit(navaid))

        for airport in self._airport_search:
            if len(hits) >= limit:
                break
            if needle in airport.search_key:
                hits.append(SearchHit(airport))
        return hits

    # --- Selection ---

    def select_navaid(self, ident: str, index: int = 0) -> Tuple[Optional[NavaidRecord], List[NavaidRecord]]:
        """
        Pick one navaid out of an identifier group.

        The index is clamped into the group. Returns (None, []) when the
        identifier is unknown.
        """
        group = self.navaids_for(ident)
        if not group:
            return None, []
        safe_index = max(0, min(int(index or 0), len(group) - 1))
        return group[safe_index], group

    def overlaps_text(self, ident: str, selected: int = 0) -> str:
        """Rows for every navaid sharing the identifier, selected row marked."""
        key = norm(ident).upper()
        group = self.navaids_for(key)
        if not group:
            return f"No NAVAID data for IDENT: {key}"
        selected = max(0, min(int(selected or 0), len(group) - 1))
        lines = []
        for position, navaid in enumerate(group):
            marker = ">" if position == selected else " "
            lines.append(
                f"{marker} {navaid.ident:<6} {navaid.type or '-':<8} "
                f"{navaid.name or '-':<32} {navaid.distance_label(NO_VALUE)}"
            )
        return "\n".join(lines)

    def airport_info_text(self, ident: str) -> str:
        """Detail block for an airport; unknown identifiers still render."""
        key = norm(ident).upper()
        airport = self.airport_for(key) or AirportRecord(ident=key)
        return airport.info_text()


def build_navaids(rows: Iterable[Dict[str, str]], origin: NavPoint) -> List[NavaidRecord]:
    """Convert navaid rows to records, skipping rows without an identifier."""
    navaids = []
    skipped = 0
    for row in rows:
        navaid = NavaidRecord.from_row(row, origin)
        if navaid is None:
            skipped += 1
            continue
        navaids.append(navaid)
    if skipped:
        logger.debug("Skipped %d navaid rows without identifier", skipped)
    return navaids


def build_airports(rows: Iterable[Dict[str, str]]) -> List[AirportRecord]:
    """Convert airport rows to records, skipping rows without an identifier."""
    airports = []
    for row in rows:
        airport = AirportRecord.from_row(row)
        if airport is not None:
            airports.append(airport)
    return airports
