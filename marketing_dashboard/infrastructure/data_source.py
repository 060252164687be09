"""Infrastructure adapter that fetches the marketing dataset from a file or an HTTP endpoint."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from marketing_dashboard.config import DashboardSettings
from marketing_dashboard.domain.models import MarketingDataset
from marketing_dashboard.ingestion import DataUnavailableError, dataset_from_json, dataset_from_payload

logger = logging.getLogger(__name__)

HTTP_SCHEMES = ("http://", "https://")


def _fetch_url(url: str, timeout: float) -> MarketingDataset:
    try:
        response = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        raise DataUnavailableError(f"Request to {url} failed: {exc}") from exc
    except ValueError as exc:
        raise DataUnavailableError(f"Response from {url} is not valid JSON") from exc
    return dataset_from_payload(payload)


def _read_file(path: Path) -> MarketingDataset:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataUnavailableError(f"Cannot read marketing data file {path}: {exc}") from exc
    return dataset_from_json(text)


def fetch_marketing_data(settings: DashboardSettings) -> MarketingDataset:
    source = settings.data_source
    logger.debug("Fetching marketing data from %s", source)
    if source.startswith(HTTP_SCHEMES):
        return _fetch_url(source, settings.fetch_timeout)
    return _read_file(Path(source))
