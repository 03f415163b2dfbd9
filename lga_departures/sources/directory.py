import logging
from pathlib import Path
from typing import Union

from .base import TableSource
from ..models.validation import TableLoadError

logger = logging.getLogger(__name__)


class DirectoryTableSource(TableSource):
    """Tables stored as files in a local directory."""

    def __init__(self, root: Union[str, Path]):
        """
        Args:
            root: Directory holding the .tsv snapshots
        """
        self.root = Path(root)

    def read_text(self, file_name: str) -> str:
        path = self.root / file_name
        logger.debug(f"Reading {path}")
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise TableLoadError(file_name, str(e)) from e
