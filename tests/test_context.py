"""Tests for loading the full reference data set."""

import math
import shutil

from lga_departures.context import ReferenceData
from lga_departures.sources import DirectoryTableSource


class TestReferenceDataLoad:
    """Loading the asset tables."""

    def test_tables_loaded(self, reference):
        assert reference.lga_config_labels == ["ILS 22 DEP 13", "LDG 31 DEP 4", "LDG 4 DEP 13", "LDG 13 DEP 13"]
        assert reference.jfk_config_labels == ["31L/31R", "22L/22R", "4L/4R", "13L/22L"]
        assert len(reference.gates) == 11
        assert len(reference.rules) == 7
        assert len(reference.routes) == 5

    def test_rule_positions(self, reference):
        assert [rule.position for rule in reference.rules] == list(range(7))
        assert reference.rules[3].notes == "Coordinate with JFK"

    def test_short_rows_reported(self, reference):
        assert reference.warnings["NAVAIDs.tsv"].has_warnings
        assert not reference.warnings["Gates.tsv"].has_warnings

    def test_non_numeric_priority_warned(self, tmp_path, test_assets_dir):
        for path in test_assets_dir.glob("*.tsv"):
            shutil.copy(path, tmp_path / path.name)
        rules = tmp_path / "Dep_Rules.tsv"
        with open(rules, "a", encoding="utf-8") as f:
            f.write("13\t*\t*\t*\t*\t*\t*\tLGA7\t\thigh\n")

        reference = ReferenceData.load(DirectoryTableSource(tmp_path))

        assert reference.rules[-1].priority == math.inf
        warnings = reference.warnings["Dep_Rules.tsv"].warnings
        assert [w.field for w in warnings] == ["PRIORITY"]
        assert warnings[0].line == 9

    def test_empty_reference(self):
        reference = ReferenceData()
        assert reference.lga_config_labels == []
        assert reference.index.search("JFK") == []
