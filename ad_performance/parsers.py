
from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from ad_performance.config import INPUT_COLUMNS, MAX_COUNT, MAX_SPEND
from ad_performance.errors import ParseError
from ad_performance.models import AdEvent


def validate_header(fieldnames: Iterable[str] | None) -> None:
    if not fieldnames:
        raise ParseError("input has no header row", line=1)

    present = {str(name) for name in fieldnames if name is not None}
    missing = [col for col in INPUT_COLUMNS if col not in present]
    if missing:
        raise ParseError(
            f"header is missing required column(s): {', '.join(missing)}",
            line=1,
            field=missing[0],
        )


def parse_event(row: Mapping[Any, Any], line: int | None = None) -> AdEvent:
    # csv.DictReader files surplus cells under the None key
    if row.get(None):
        raise ParseError("row has more cells than the header", line=line)

    # the identifier is the grouping key, so it is kept exactly as read
    campaign_id = _field(row, "campaign_id", line)
    if campaign_id == "":
        raise ParseError("campaign_id is empty", line=line, field="campaign_id")

    return AdEvent(
        campaign_id=campaign_id,
        date=_field(row, "date", line),
        impressions=parse_count(_field(row, "impressions", line), "impressions", line),
        clicks=parse_count(_field(row, "clicks", line), "clicks", line),
        spend=parse_spend(_field(row, "spend", line), line),
        conversions=parse_count(_field(row, "conversions", line), "conversions", line),
    )


def parse_count(raw: str, field: str, line: int | None = None) -> int:
    value = raw.strip()
    digits = value[1:] if value.startswith("+") else value
    #isdigit alone accepts non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError(
            f"{field} must be a non-negative integer, got {raw!r}",
            line=line,
            field=field,
        )
    count = int(digits)
    if count > MAX_COUNT:
        raise ParseError(f"{field} is too large: {raw!r}", line=line, field=field)
    return count


def parse_spend(raw: str, line: int | None = None) -> Decimal:
    value = raw.strip()
    # Decimal() also takes PEP 515 digit separators
    if "_" in value:
        raise ParseError(f"spend must be a number, got {raw!r}", line=line, field="spend")
    try:
        spend = Decimal(value)
    except InvalidOperation:
        raise ParseError(
            f"spend must be a number, got {raw!r}", line=line, field="spend"
        ) from None
    if not spend.is_finite():
        raise ParseError(
            f"spend must be a finite number, got {raw!r}", line=line, field="spend"
        )
    if abs(spend) > Decimal(MAX_SPEND):
        raise ParseError(
            f"spend is out of range (limit {MAX_SPEND}), got {raw!r}",
            line=line,
            field="spend",
        )
    return spend


def _field(row: Mapping[Any, Any], name: str, line: int | None) -> str:
    value = row.get(name)
    # short rows give None from csv and NaN from pandas
    if not isinstance(value, str):
        raise ParseError(f"missing value for column '{name}'", line=line, field=name)
    return value
