"""Preferred routes out of the hub and route-token annotation."""

from dataclasses import dataclass
from typing import List, Sequence

from lga_departures.config import HUB_IDENT
from lga_departures.models.navaid import norm
from lga_departures.models.reference_index import ReferenceIndex
from lga_departures.models.tables import RouteRow

NAVAID_TOKEN = "navaid"
AIRPORT_TOKEN = "airport"
TEXT_TOKEN = "text"


@dataclass(frozen=True)
class RouteToken:
    """One whitespace-separated element of a route string."""

    text: str
    kind: str = TEXT_TOKEN

    @property
    def is_reference(self) -> bool:
        return self.kind != TEXT_TOKEN


class RouteFinder:
    """
    Filter the route table for a destination and annotate route strings.

    Annotation only labels tokens for display; it never affects which rows
    are returned.
    """

    def __init__(self, routes: Sequence[RouteRow], index: ReferenceIndex, origin: str = HUB_IDENT):
        self.routes = routes
        self.index = index
        self.origin = origin

    def routes_for(self, destination: str) -> List[RouteRow]:
        """Rows from the hub to the destination, in table order."""
        dest = norm(destination).upper()
        if not dest:
            return []
        return [route for route in self.routes if route.serves(self.origin, dest)]

    def annotate_route(self, route: str) -> List[RouteToken]:
        """
        Classify each token of a route.

        Navaid identifiers take precedence over airports; tokens matching
        neither are plain text and keep their original spelling.
        """
        tokens = []
        for token in norm(route).split():
            key = token.upper()
            if self.index.has_navaid(key):
                tokens.append(RouteToken(key, NAVAID_TOKEN))
            elif self.index.has_airport(key):
                tokens.append(RouteToken(key, AIRPORT_TOKEN))
            else:
                tokens.append(RouteToken(token, TEXT_TOKEN))
        return tokens

    def route_display(self, route: str) -> str:
        """Route tokens joined with dots."""
        return ".".join(token.text for token in self.annotate_route(route))

    def routes_text(self, destination: str) -> str:
        """Route table for a destination, or the appropriate placeholder message."""
        dest = norm(destination).upper()
        if not dest:
            return "Enter a destination (e.g. KPHL)."
        rows = self.routes_for(dest)
        if not rows:
            return f"No routes found for {dest}."

        lines = [f"{'Route':<48} {'Type':<6} {'Aircraft':<10} {'Nav':<6} Altitude"]
        for row in rows:
            lines.append(
                f"{self.route_display(row.route):<48} {row.route_type or '-':<6} "
                f"{row.aircraft or '-':<10} {row.nav or '-':<6} {row.altitude or '-'}"
            )
        return "\n".join(lines)
