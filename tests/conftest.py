import pytest
from pathlib import Path

from lga_departures.context import ReferenceData
from lga_departures.sources import DirectoryTableSource
from lga_departures.tool import DepartureTool


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def table_source(test_assets_dir) -> DirectoryTableSource:
    """Source reading the snapshot tables in the assets directory."""
    return DirectoryTableSource(test_assets_dir)


@pytest.fixture
def reference(table_source) -> ReferenceData:
    """Reference data loaded from the asset tables."""
    return ReferenceData.load(table_source)


@pytest.fixture
def tool(reference) -> DepartureTool:
    return DepartureTool(reference)


@pytest.fixture
def state_file(tmp_path) -> Path:
    """Return a temporary preference file path."""
    return tmp_path / 'prefs' / 'state.json'
