
from __future__ import annotations
import csv
import logging
from abc import ABC, abstractmethod

from ad_performance.aggregator import AggregationTable
from ad_performance.config import CHUNK_SIZE, CSV_DELIMITER
from ad_performance.errors import IoError, ParseError
from ad_performance.models import CampaignAggregate
from ad_performance.parsers import parse_event, validate_header

logger = logging.getLogger(__name__)

class BaseProcessor(ABC):

    def __init__(self, input_path: str):
        self.input_path = input_path
        self.table = AggregationTable()

    @abstractmethod
    def process(self) -> list[CampaignAggregate]:
        ...

    @abstractmethod
    def describe(self) -> str:
        ...

    def _finish(self) -> list[CampaignAggregate]:
        logger.info(
            "Processed %s events | unique campaigns: %d",
            f"{self.table.events_processed:,}", len(self.table),
        )
        return self.table.campaigns()


class ChunkedProcessor(BaseProcessor):

    def describe(self) -> str:
        return f"ChunkedProcessor | chunk_size={CHUNK_SIZE:,} rows | file={self.input_path}"

    def process(self) -> list[CampaignAggregate]:
        logger.info("Reading: %s", self.input_path)
        try:
            for chunk in self._iter_chunks():
                for line, row in chunk:
                    self.table.add(parse_event(row, line))
        except UnicodeDecodeError as exc:
            raise ParseError(f"input is not valid UTF-8: {exc}") from exc
        except csv.Error as exc:
            raise ParseError(f"malformed CSV: {exc}") from exc
        except OSError as exc:
            raise IoError(f"cannot read {self.input_path}: {exc}") from exc
        return self._finish()

    def _iter_chunks(self):

        with open(self.input_path, encoding="utf-8", newline="") as fh:
            reader = csv.DictReader(fh, delimiter=CSV_DELIMITER)
            validate_header(reader.fieldnames)
            chunk = []
            for row in reader:
                chunk.append((reader.line_num, row))
                if len(chunk) == CHUNK_SIZE:
                    yield chunk
                    chunk = []
            if chunk:
                yield chunk
