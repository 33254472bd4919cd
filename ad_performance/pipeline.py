from __future__ import annotations
import logging

from ad_performance.processor import BaseProcessor
from ad_performance.writer import write_reports

logger = logging.getLogger(__name__)

PROCESSORS = ("chunked", "pandas")


def get_processor(name: str, input_path: str) -> BaseProcessor:
    if name == "pandas":
        from ad_performance.pandas_processor import PandasProcessor
        return PandasProcessor(input_path)
    if name == "chunked":
        from ad_performance.processor import ChunkedProcessor
        return ChunkedProcessor(input_path)
    raise ValueError(f"unknown processor {name!r}, expected one of {PROCESSORS}")


def run(input_path: str, output_dir: str, processor: str = "chunked") -> tuple[str, str]:
    """Aggregate ``input_path`` and write the CTR and CPA reports.

    Raises an ``AggregatorError`` subclass on the first failure; nothing is
    written when reading or parsing fails.
    """
    backend = get_processor(processor, input_path)
    logger.info("Back-end: %s", backend.describe())

    campaigns = backend.process()
    return write_reports(campaigns, output_dir)
