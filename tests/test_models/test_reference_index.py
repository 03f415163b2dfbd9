"""Tests for the navaid/airport reference index."""

import math

import pytest

from lga_departures.models.navaid import AirportRecord, NavaidRecord, format_frequency
from lga_departures.models.navpoint import NavPoint
from lga_departures.models.reference_index import ReferenceIndex


HUB = NavPoint(40.7772, -73.8726, "KLGA")


def navaid_row(ident, name="", type_="VOR", freq="", lat="", lon=""):
    return {
        "ident": ident,
        "name": name,
        "type": type_,
        "frequency_khz": freq,
        "latitude_deg": lat,
        "longitude_deg": lon,
    }


class TestFormatFrequency:
    """Frequency display rules."""

    @pytest.mark.parametrize("raw,expected", [
        ("115900", "115.90 MHz"),
        ("100000", "100.00 MHz"),
        ("356", "356 kHz"),
        ("99999", "99999 kHz"),
        ("415.5", "415.5 kHz"),
        ("", "(unknown)"),
        ("  ", "(unknown)"),
        ("abc", "abc"),
    ])
    def test_format(self, raw, expected):
        assert format_frequency(raw) == expected


class TestNavaidRecord:
    """Row conversion."""

    def test_from_row(self):
        record = NavaidRecord.from_row(navaid_row(" jfk ", "Kennedy", "vor-dme", "115900", "40.632", "-73.771"), HUB)

        assert record.ident == "JFK"
        assert record.type == "VOR-DME"
        assert record.frequency_display == "115.90 MHz"
        assert record.has_position
        assert 8 < record.distance_nm < 12

    def test_blank_ident_skipped(self):
        assert NavaidRecord.from_row(navaid_row("  ", "Nameless"), HUB) is None

    @pytest.mark.parametrize("lat,lon", [("", ""), ("40.0", ""), ("abc", "-73.0"), ("95.0", "-73.0"), ("40.0", "200")])
    def test_unknown_position(self, lat, lon):
        record = NavaidRecord.from_row(navaid_row("XXX", lat=lat, lon=lon), HUB)

        assert not record.has_position
        assert record.distance_nm == math.inf
        assert record.distance_label() == "(unknown)"

    def test_info_text(self):
        record = NavaidRecord.from_row(navaid_row("LGA", "La Guardia", "VOR-DME", "113100", "40.7835", "-73.8684"), HUB)
        text = record.info_text()

        assert "KIND:  NAVAID" in text
        assert "FREQ:  113.10 MHz" in text
        assert "LAT:   40.783500" in text
        assert "(from KLGA)" in text

    def test_info_text_unknown_position(self):
        record = NavaidRecord.from_row(navaid_row("XXX", "Spot", "NDB", "400"), HUB)
        text = record.info_text()

        assert "LAT:   (unknown)" in text
        assert "DIST:  (unknown) (from KLGA)" in text


class TestNavaidGroups:
    """Identifier groups are ordered nearest first."""

    def test_group_order(self, reference):
        group = reference.index.navaids_for("JFK")

        assert [n.name for n in group] == ["Kennedy", "Jefferson", "Unknown Spot"]
        assert group[-1].distance_nm == math.inf

    def test_group_lookup_case_insensitive(self, reference):
        assert reference.index.navaids_for(" lga ")[0].name == "La Guardia"

    def test_blank_identifier_dropped(self, reference):
        names = [n.name for n in reference.index.navaid_search_list]
        assert "Nameless" not in names

    def test_equal_distance_ties_by_name(self):
        rows = [
            navaid_row("ABC", "Zulu", lat="41.0", lon="-73.0"),
            navaid_row("ABC", "Alpha", lat="41.0", lon="-73.0"),
            navaid_row("ABC", "Mike"),
            navaid_row("ABC", "Bravo"),
        ]
        index = ReferenceIndex.build(rows, [], origin=HUB)

        assert [n.name for n in index.navaids_for("ABC")] == ["Alpha", "Zulu", "Bravo", "Mike"]

    def test_name_ties_ignore_case(self):
        rows = [
            navaid_row("ABC", "Bravo"),
            navaid_row("ABC", "alpha"),
            navaid_row("ABC", "Charlie", lat="41.0", lon="-73.0"),
            navaid_row("ABC", "bravo two", lat="41.0", lon="-73.0"),
        ]
        index = ReferenceIndex.build(rows, [], origin=HUB)

        assert [n.name for n in index.navaids_for("ABC")] == ["bravo two", "Charlie", "alpha", "Bravo"]

    def test_rebuild_is_deterministic(self, table_source):
        navaids = table_source.load_table("NAVAIDs.tsv").rows
        airports = table_source.load_table("Airports.tsv").rows
        first = ReferenceIndex.build(navaids, airports)
        second = ReferenceIndex.build(list(reversed(navaids)), airports)

        assert first.navaid_groups() == second.navaid_groups()
        assert [h.ident for h in first.search("VOR")] == [h.ident for h in second.search("VOR")]

    def test_non_numeric_frequency(self, reference):
        assert reference.index.navaids_for("ZZZ")[0].frequency_display == "abc"


class TestAirports:
    """Airport lookups."""

    def test_first_occurrence_wins(self, reference):
        assert reference.index.airport_for("klga").name == "La Guardia Airport"

    def test_unknown_airport(self, reference):
        assert reference.index.airport_for("KXYZ") is None
        assert not reference.index.has_airport("KXYZ")

    def test_info_text(self, reference):
        text = reference.index.airport_info_text("kphl")
        assert "IDENT: KPHL" in text
        assert "NAME:  Philadelphia International Airport" in text

    def test_info_text_unknown(self, reference):
        text = reference.index.airport_info_text("KXYZ")
        assert "IDENT: KXYZ" in text
        assert "NAME:  (unknown)" in text

    def test_record_search_key(self):
        assert AirportRecord("KTEB", "Teterboro").search_key == "KTEB TETERBORO AIRPORT APT HELIPORT"


class TestSearch:
    """Unified search."""

    def test_empty_query(self, reference):
        assert reference.index.search("") == []
        assert reference.index.search("   ") == []

    def test_navaids_before_airports(self, reference):
        hits = reference.index.search("kennedy")

        assert [(h.kind, h.ident) for h in hits] == [("NAVAID", "JFK"), ("AIRPORT", "KJFK")]
        assert hits[1].type_label == "AIRPORT"
        assert hits[1].distance_label == "APT"

    def test_navaid_nearest_first(self, reference):
        hits = reference.index.search("VOR-DME")
        idents = [h.ident for h in hits]

        assert idents[:2] == ["LGA", "JFK"]
        assert set(idents) == {"LGA", "JFK", "BDR", "CCC"}

    def test_generic_airport_terms(self, reference):
        hits = reference.index.search("heliport")

        assert [h.ident for h in hits] == ["KBOS", "KDCA", "KIAD", "KJFK", "KLGA", "KLGA", "KPHL"]

    def test_limit(self, reference):
        hits = reference.index.search("A", limit=3)
        assert len(hits) == 3
        assert all(h.kind == "NAVAID" for h in hits)

    def test_limit_fills_with_airports(self):
        navaids = [navaid_row("N%d" % i, "Point", lat="40.8", lon="-73.9") for i in range(3)]
        airports = [{"ident": "K%03d" % i, "name": "Point Field"} for i in range(5)]
        index = ReferenceIndex.build(navaids, airports, origin=HUB)

        hits = index.search("POINT", limit=5)
        assert [h.kind for h in hits] == ["NAVAID"] * 3 + ["AIRPORT"] * 2

    def test_unknown_distance_label(self, reference):
        hits = reference.index.search("UNKNOWN SPOT")
        assert hits[0].distance_label == "—"


class TestSelection:
    """Selecting within an identifier group."""

    def test_select_clamps_index(self, reference):
        first, group = reference.index.select_navaid("JFK", -5)
        last, _ = reference.index.select_navaid("JFK", 99)

        assert first is group[0]
        assert last is group[-1]

    def test_select_unknown(self, reference):
        assert reference.index.select_navaid("QQQ", 0) == (None, [])

    def test_overlaps_marks_selected(self, reference):
        lines = reference.index.overlaps_text("jfk", 1).splitlines()

        assert len(lines) == 3
        assert lines[1].startswith("> JFK")
        assert lines[0].startswith("  JFK")

    def test_overlaps_clamps_selection(self, reference):
        lines = reference.index.overlaps_text("JFK", 9).splitlines()

        assert lines[-1].startswith("> JFK")
        assert sum(line.startswith(">") for line in lines) == 1

    def test_overlaps_unknown(self, reference):
        assert reference.index.overlaps_text("qqq") == "No NAVAID data for IDENT: QQQ"
