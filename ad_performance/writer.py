from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Sequence

from ad_performance.config import (
    CPA_REPORT_NAME, CSV_DELIMITER, CTR_DECIMALS, CTR_REPORT_NAME,
    OUTPUT_HEADER, SPEND_DECIMALS,
)
from ad_performance.errors import IoError, SerializeError
from ad_performance.metrics import click_through_rate, cost_per_acquisition
from ad_performance.models import CampaignAggregate
from ad_performance.ranker import top_by_cpa, top_by_ctr

logger = logging.getLogger(__name__)


def _is_s3(path: str) -> bool:
    return path.startswith("s3://")


def _join(output_dir: str, filename: str) -> str:
    if _is_s3(output_dir):
        return f"{output_dir.rstrip('/')}/{filename}"
    return str(Path(output_dir) / filename)


def _write_local(content: str, output_path: str) -> None:
    try:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="", encoding="utf-8") as fh:
            fh.write(content)
    except OSError as exc:
        raise IoError(f"cannot write {output_path}: {exc}") from exc


def _write_s3(content: str, s3_path: str) -> None:
    import boto3
    from botocore.exceptions import BotoCoreError, ClientError

    path = s3_path[len("s3://"):]
    bucket, key = path.split("/", 1)
    try:
        s3 = boto3.client("s3")
        s3.put_object(
            Bucket=bucket,
            Key=key,
            Body=content.encode("utf-8"),
            ContentType="text/csv",
        )
    except (BotoCoreError, ClientError) as exc:
        raise IoError(f"cannot upload {s3_path}: {exc}") from exc


def format_ctr(ctr: float | None) -> str:
    if ctr is None:
        return "0"
    text = f"{ctr:.{CTR_DECIMALS}f}".rstrip("0").rstrip(".")
    return text or "0"


def format_money(value) -> str:
    return f"{value:.{SPEND_DECIMALS}f}"


def format_row(campaign: CampaignAggregate) -> list[str]:
    cpa = cost_per_acquisition(campaign)
    return [
        campaign.campaign_id,
        str(campaign.total_impressions),
        str(campaign.total_clicks),
        format_money(campaign.total_spend),
        str(campaign.total_conversions),
        format_ctr(click_through_rate(campaign)),
        "" if cpa is None else format_money(cpa),
    ]


def render_report(campaigns: Sequence[CampaignAggregate]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerow(OUTPUT_HEADER)
    for campaign in campaigns:
        try:
            writer.writerow(format_row(campaign))
        except (csv.Error, TypeError, ValueError) as exc:
            raise SerializeError(
                f"cannot serialize campaign {campaign.campaign_id!r}: {exc}"
            ) from exc
    return buf.getvalue()


def write_report(campaigns: Sequence[CampaignAggregate], output_path: str) -> str:
    content = render_report(campaigns)

    if _is_s3(output_path):
        _write_s3(content, output_path)
    else:
        _write_local(content, output_path)

    logger.info("Output -> %s  (%d rows)", output_path, len(campaigns))
    return output_path


def write_reports(
    campaigns: Sequence[CampaignAggregate],
    output_dir: str,
) -> tuple[str, str]:
    """Rank ``campaigns`` twice and write both top-10 reports into ``output_dir``.

    Returns the CTR report path and the CPA report path.
    """
    ctr_path = write_report(top_by_ctr(campaigns), _join(output_dir, CTR_REPORT_NAME))
    cpa_path = write_report(top_by_cpa(campaigns), _join(output_dir, CPA_REPORT_NAME))
    return ctr_path, cpa_path
