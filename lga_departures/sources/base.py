from abc import ABC, abstractmethod
from typing import Sequence

from ..models.validation import TableLoadError
from ..parsers.tsv import ParsedTable, TSVParser


class TableSource(ABC):
    """
    Base interface for snapshot table sources.

    A source only knows how to return the raw text of a table by file name;
    parsing is shared.
    """

    @abstractmethod
    def read_text(self, file_name: str) -> str:
        """
        Return the raw text of a table.

        Raises:
            TableLoadError: when the table cannot be read.
        """
        pass

    def load_table(self, file_name: str, required: Sequence[str] = ()) -> ParsedTable:
        """Read and parse one table."""
        text = self.read_text(file_name)
        if text is None:
            raise TableLoadError(file_name, "no content")
        return TSVParser.parse_text(text, table=file_name, required=required)

    def get_source_name(self) -> str:
        """
        Get the name of this source.

        Returns:
            String identifier for this source
        """
        return self.__class__.__name__.lower()
