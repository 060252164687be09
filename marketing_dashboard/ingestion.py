"""JSON payload ingestion and Excel table output."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import polars as pl

from marketing_dashboard.domain.models import Campaign, MarketingDataset

logger = logging.getLogger(__name__)

MAX_SHEET_NAME = 31


class DataUnavailableError(RuntimeError):
    """Raised when the marketing dataset cannot be fetched or decoded."""


def dataset_from_payload(payload: Any) -> MarketingDataset:
    """Build a dataset from an already-deserialized ``{"campaigns": [...]}`` payload."""
    if not isinstance(payload, Mapping):
        raise DataUnavailableError(f"Expected a JSON object, got {type(payload).__name__}")
    campaigns = payload.get("campaigns")
    if not isinstance(campaigns, list):
        raise DataUnavailableError("Payload has no 'campaigns' list")

    rows = [row for row in campaigns if isinstance(row, Mapping)]
    skipped = len(campaigns) - len(rows)
    if skipped:
        logger.warning("Skipped %d non-object campaign entries", skipped)
    return MarketingDataset(campaigns=tuple(Campaign.from_row(row) for row in rows))


def dataset_from_json(text: str) -> MarketingDataset:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataUnavailableError(f"Invalid JSON payload: {exc}") from exc
    return dataset_from_payload(payload)


def _excel_cell_value(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (int, bool, str)):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return value
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return value


def write_output_excel(path: str | Path, sheets: Dict[str, pl.DataFrame]) -> None:
    """Write one worksheet per frame; sheet names are truncated to Excel's limit."""
    from openpyxl import Workbook

    excel_path = Path(path)
    excel_path.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    default_sheet = workbook.active
    workbook.remove(default_sheet)

    for sheet_name, frame in sheets.items():
        worksheet = workbook.create_sheet(title=str(sheet_name)[:MAX_SHEET_NAME])
        worksheet.append(frame.columns)
        for row in frame.iter_rows(named=False):
            worksheet.append([_excel_cell_value(value) for value in row])

    workbook.save(excel_path)
