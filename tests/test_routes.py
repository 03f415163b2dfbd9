"""Tests for the preferred route join and annotation."""

from lga_departures.models.reference_index import ReferenceIndex
from lga_departures.models.tables import RouteRow
from lga_departures.routes import AIRPORT_TOKEN, NAVAID_TOKEN, TEXT_TOKEN, RouteFinder


class TestRoutesFor:
    """Destination filtering."""

    def test_routes_in_table_order(self, reference):
        routes = reference.route_finder().routes_for("KBOS")

        assert [r.route for r in routes] == ["GAYEL Q818 WOONS PVD KBOS", "BDR V229 PVD"]

    def test_other_origins_excluded(self, reference):
        routes = reference.route_finder().routes_for("KBOS")
        assert all(r.origin == "KLGA" for r in routes)

    def test_case_insensitive(self, reference):
        routes = reference.route_finder().routes_for(" kdca ")

        assert len(routes) == 1
        assert routes[0].route == "DIXIE V16 ENO KDCA"

    def test_blank_destination(self, reference):
        assert reference.route_finder().routes_for("  ") == []


class TestAnnotateRoute:
    """Token classification."""

    def test_classification(self, reference):
        tokens = reference.route_finder().annotate_route("GAYEL Q818 WOONS PVD KBOS")

        assert [(t.text, t.kind) for t in tokens] == [
            ("GAYEL", TEXT_TOKEN),
            ("Q818", TEXT_TOKEN),
            ("WOONS", TEXT_TOKEN),
            ("PVD", NAVAID_TOKEN),
            ("KBOS", AIRPORT_TOKEN),
        ]

    def test_navaid_precedence(self):
        index = ReferenceIndex.build(
            [{"ident": "ABC", "name": "Aid", "type": "VOR"}],
            [{"ident": "ABC", "name": "Field"}],
        )
        tokens = RouteFinder([], index).annotate_route("abc")

        assert tokens[0].kind == NAVAID_TOKEN
        assert tokens[0].text == "ABC"

    def test_text_keeps_spelling(self, reference):
        tokens = reference.route_finder().annotate_route("bdr  v229\tpvd")

        assert [t.text for t in tokens] == ["BDR", "v229", "PVD"]
        assert tokens[1].kind == TEXT_TOKEN
        assert not tokens[1].is_reference

    def test_route_display(self, reference):
        assert reference.route_finder().route_display("BDR V229 PVD") == "BDR.V229.PVD"


class TestRoutesText:
    """Rendered routes block."""

    def test_prompt_for_blank(self, reference):
        assert reference.route_finder().routes_text("") == "Enter a destination (e.g. KPHL)."

    def test_no_routes(self, reference):
        assert reference.route_finder().routes_text("kphl") == "No routes found for KPHL."

    def test_table(self, reference):
        lines = reference.route_finder().routes_text("KIAD").splitlines()

        assert lines[0].startswith("Route")
        assert len(lines) == 2
        assert lines[1].startswith("RBV.Q430.COPES.Q75.GVE.LDN.KIAD")
        assert lines[1].rstrip().endswith("-")

    def test_custom_origin(self, reference):
        finder = RouteFinder(reference.routes, reference.index, origin="KJFK")
        assert [r.route for r in finder.routes_for("KBOS")] == ["MERIT HFD PUT BOSOX4 KBOS"]

    def test_serves(self):
        row = RouteRow("klga", "kbos", "BDR V229 PVD")
        assert row.serves("KLGA", " KBOS ")
        assert not row.serves("KJFK", "KBOS")
