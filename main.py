from __future__ import annotations
import argparse
import logging
import os
import sys

from ad_performance.errors import AggregatorError
from ad_performance.pipeline import PROCESSORS, run

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

PROCESSOR = os.getenv("PROCESSOR", "chunked")
#PROCESSOR = os.getenv("PROCESSOR", "pandas")


def resolve_path(raw: str) -> str | None:

    if os.path.exists(raw):
        return raw

    tried = [raw]
    # only a bare file name is looked up in the bundled data/ directory
    if not os.path.dirname(raw):
        candidate = os.path.join(
            os.path.dirname(os.path.abspath(__file__)), "data", raw
        )
        if os.path.exists(candidate):
            logger.warning("'%s' not found, using bundled '%s'", raw, candidate)
            return candidate
        tried.append(candidate)

    print(f"\nError: file not found: {raw}", file=sys.stderr)
    for path in tried:
        print(f"  Tried: {path}", file=sys.stderr)
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Aggregate ad campaign events and write top-10 CTR and CPA reports.",
    )
    parser.add_argument("-i", "--input", required=True, help="input CSV file (e.g. ad_data.csv)")
    parser.add_argument(
        "-o", "--output-dir", default=".",
        help="directory (or s3://bucket/prefix) for the generated reports",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if PROCESSOR not in PROCESSORS:
        print(f"Error: PROCESSOR must be one of {', '.join(PROCESSORS)}, got {PROCESSOR!r}", file=sys.stderr)
        return 2

    input_path = resolve_path(args.input)
    if input_path is None:
        print(f"\nHint: python main.py --input data{os.sep}ad_data.csv --output-dir .", file=sys.stderr)
        return 1

    try:
        ctr_path, cpa_path = run(input_path, args.output_dir, PROCESSOR)
    except AggregatorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("\nHint: Make sure the input file exists and is a valid CSV with columns "
              "campaign_id,date,impressions,clicks,spend,conversions.", file=sys.stderr)
        return 1

    print(f"Output: {ctr_path}")
    print(f"Output: {cpa_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
