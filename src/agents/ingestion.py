"""
Ingestion Agent.

Reads a delimited reviews export (header row + one review per line)
and hands back raw, header-keyed string records.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union, IO

import pandas as pd

from src.models.review import RawRecord

logger = logging.getLogger(__name__)


@dataclass
class IngestionResult:
    """
    Outcome of one load attempt.
    Exactly one of `records` (possibly empty) or `error` is meaningful.
    """
    records: List[RawRecord] = field(default_factory=list)
    source: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class IngestionAgent:
    """
    Parser adapter around pandas' CSV reader.

    Every cell is kept as a string and empty cells stay "" so the
    normalizer sees the export exactly as written. Columns the pipeline
    does not use are passed through untouched.
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8"):
        """
        Initialize ingestion agent.

        Args:
            delimiter: Field separator of the export
            encoding: Text encoding of the export
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def load(self, source: Union[str, IO]) -> IngestionResult:
        """
        Load raw records from a file path or an open text buffer.

        Args:
            source: Path to the export, or a file-like object

        Returns:
            IngestionResult; on failure `error` describes what went wrong
            and `records` is empty
        """
        name = source if isinstance(source, str) else getattr(source, "name", "<buffer>")

        try:
            df = pd.read_csv(
                source,
                sep=self.delimiter,
                encoding=self.encoding,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                # Trailing delimiters must not turn the first column into an index
                index_col=False,
            )
        except FileNotFoundError:
            logger.error(f"Reviews file not found: {name}")
            return IngestionResult(source=name, error=f"File not found: {name}")
        except pd.errors.EmptyDataError:
            logger.error(f"Reviews file is empty: {name}")
            return IngestionResult(source=name, error=f"No data in {name}")
        except pd.errors.ParserError as e:
            logger.error(f"Failed to parse reviews file {name}: {e}")
            return IngestionResult(source=name, error=f"Malformed CSV: {e}")
        except (UnicodeDecodeError, OSError) as e:
            logger.error(f"Failed to read reviews file {name}: {e}")
            return IngestionResult(source=name, error=f"Unreadable file: {e}")

        records = self._to_records(df)
        logger.info(f"Loaded {len(records)} raw records from {name}")
        return IngestionResult(records=records, source=name)

    def _to_records(self, df: pd.DataFrame) -> List[RawRecord]:
        """
        Convert the parsed frame into header-keyed string dicts.

        Only truly empty lines are skipped (by the reader); a row of bare
        delimiters is still a record.
        """
        df = df.fillna("")
        df.columns = [str(col) for col in df.columns]
        return df.to_dict(orient="records")
