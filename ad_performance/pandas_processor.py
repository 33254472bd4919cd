
from __future__ import annotations
import logging
import warnings

import pandas as pd

from ad_performance.config import CHUNK_SIZE, CSV_DELIMITER
from ad_performance.errors import IoError, ParseError
from ad_performance.models import CampaignAggregate
from ad_performance.parsers import parse_event, validate_header
from ad_performance.processor import BaseProcessor

logger = logging.getLogger(__name__)

# one column past the header; a value here means the row has surplus cells
SURPLUS_COLUMN = "__surplus__"


class PandasProcessor(BaseProcessor):

    def describe(self) -> str:
        return f"PandasProcessor | chunk_size={CHUNK_SIZE:,} rows | file={self.input_path}"

    def process(self) -> list[CampaignAggregate]:
        logger.info("Reading: %s", self.input_path)
        try:
            # read_csv only warns when it truncates a row
            with warnings.catch_warnings():
                warnings.simplefilter("error", pd.errors.ParserWarning)
                header = self._read_header()
                validate_header(header)
                for chunk in self._read(header):
                    self._fold(chunk)
        except UnicodeDecodeError as exc:
            raise ParseError(f"input is not valid UTF-8: {exc}") from exc
        except pd.errors.EmptyDataError as exc:
            raise ParseError("input has no header row", line=1) from exc
        except (pd.errors.ParserError, pd.errors.ParserWarning) as exc:
            raise ParseError(f"malformed CSV: {exc}") from exc
        except OSError as exc:
            raise IoError(f"cannot read {self.input_path}: {exc}") from exc
        return self._finish()

    def _read_header(self) -> list[str]:
        header = pd.read_csv(
            self.input_path, sep=CSV_DELIMITER, nrows=0, encoding="utf-8",
        )
        return list(header.columns)

    def _read(self, header: list[str]):
        # every cell stays text so parse_event applies the same rules as the csv back-end
        return pd.read_csv(
            self.input_path,
            sep=CSV_DELIMITER,
            header=0,
            names=header + [SURPLUS_COLUMN],
            dtype=str,
            keep_default_na=False,
            index_col=False,
            chunksize=CHUNK_SIZE,
            encoding="utf-8",
        )

    def _fold(self, chunk: pd.DataFrame) -> None:
        # header is line 1; read_csv drops blank lines so this is approximate
        offset = self.table.events_processed + 2
        for i, row in enumerate(chunk.to_dict("records")):
            if isinstance(row.pop(SURPLUS_COLUMN), str):
                raise ParseError("row has more cells than the header", line=offset + i)
            self.table.add(parse_event(row, offset + i))
