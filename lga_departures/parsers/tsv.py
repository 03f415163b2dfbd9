"""Tab-separated snapshot parser built on pandas."""

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import pandas as pd

from lga_departures.models.validation import ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class ParsedTable:
    """
    Result of parsing one TSV snapshot.

    Attributes:
        table: Table name used in warnings (usually the file name)
        headers: Trimmed header names in file order
        rows: One dict per data line, every header present, values trimmed
        validation: Warnings collected during the parse
    """

    table: str
    headers: List[str] = field(default_factory=list)
    rows: List[Dict[str, str]] = field(default_factory=list)
    validation: ValidationResult = field(default_factory=ValidationResult)

    def __len__(self) -> int:
        return len(self.rows)


class TSVParser:
    """
    Parse tab-separated tables into lists of string-valued rows.

    The format is deliberately loose:
    - carriage returns are removed and trailing whitespace is trimmed per line
    - blank lines are dropped
    - the first remaining line is the header
    - extra columns are ignored, missing columns read as ""

    Anything that deviates from the header (short rows, long rows, required
    headers that are absent) is reported on the ValidationResult instead of
    failing the parse.

    Example:
        table = TSVParser.parse_text(text, table="Gates.tsv", required=["Gate", "Direction"])
        for row in table.rows:
            print(row["Gate"], row["Direction"])
    """

    @classmethod
    def parse_text(cls, text: str, table: str = "", required: Sequence[str] = ()) -> ParsedTable:
        result = ParsedTable(table=table, validation=ValidationResult(table=table))

        lines = [line.rstrip() for line in (text or "").replace("\r", "").split("\n")]
        lines = [line for line in lines if line.strip()]
        if not lines:
            result.validation.add_warning("table", "empty table")
            for name in required:
                result.validation.add_warning(name, "required header missing")
            return result

        headers = cls._unique_headers([h.strip() for h in lines[0].split("\t")], result.validation)
        result.headers = headers

        for name in required:
            if name not in headers:
                result.validation.add_warning(name, "required header missing")

        width = len(headers)
        data_lines = []
        for line_number, line in enumerate(lines[1:], start=2):
            cols = line.split("\t")
            if len(cols) > width:
                result.validation.add_warning(
                    "row", "extra columns ignored", value=len(cols), line=line_number
                )
                cols = cols[:width]
            elif len(cols) < width:
                result.validation.add_warning(
                    "row", "missing columns read as empty", value=len(cols), line=line_number
                )
            data_lines.append("\t".join(cols))

        if not data_lines:
            return result

        frame = pd.read_csv(
            io.StringIO("\n".join(data_lines)),
            sep="\t",
            header=None,
            names=headers,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            quoting=csv.QUOTE_NONE,
            engine="python",
            skip_blank_lines=False,
        )
        frame = frame.fillna("")
        for column in frame.columns:
            frame[column] = frame[column].astype(str).str.strip()

        result.rows = frame.to_dict(orient="records")
        logger.debug("Parsed %d rows from %s", len(result.rows), table or "table")
        return result

    @staticmethod
    def _unique_headers(headers: List[str], validation: ValidationResult) -> List[str]:
        """Keep the first occurrence of a duplicated header name."""
        seen = set()
        unique = []
        for index, name in enumerate(headers):
            if name in seen:
                validation.add_warning(name, "duplicate header ignored", value=index + 1, line=1)
                name = f"{name}#{index + 1}"
            seen.add(name)
            unique.append(name)
        return unique
