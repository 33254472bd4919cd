from __future__ import annotations

# Input schema, matched by name so column order does not matter.
INPUT_COLUMNS: list[str] = [
    "campaign_id", "date", "impressions", "clicks", "spend", "conversions",
]
COUNT_COLUMNS: list[str] = ["impressions", "clicks", "conversions"]

CSV_DELIMITER: str = ","


CHUNK_SIZE: int = 10_000

# log a progress line every N folded events
PROGRESS_EVERY: int = 100_000

#fixed ranking size for both reports
TOP_N: int = 10


CTR_REPORT_NAME: str     = "top10_ctr.csv"
CPA_REPORT_NAME: str     = "top10_cpa.csv"
OUTPUT_HEADER: list[str] = [
    "campaign_id", "impressions", "clicks", "spend", "conversions", "ctr", "cpa",
]
SPEND_DECIMALS: int = 2
CTR_DECIMALS: int   = 6

# largest value the count columns accept (unsigned 64-bit)
MAX_COUNT: int = 2**64 - 1
# per-row spend magnitude limit
MAX_SPEND: str = "1e15"
