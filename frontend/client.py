"""
HTTP client for the advocates API.

One GET per browser session; filtering afterwards is done in memory.
No retries — a failure is surfaced to the page as a FetchError message.
"""

import logging
import os
from typing import Any

import requests

log = logging.getLogger("frontend")

API_URL = os.getenv("ADVOCATES_API_URL", "http://localhost:8000/api/advocates")


class FetchError(Exception):
    """The advocate list could not be fetched."""


def fetch_advocates(url: str = API_URL, timeout: float = 30) -> list[dict[str, Any]]:
    log.info("fetching advocates from %s…", url)
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.exceptions.ConnectionError as exc:
        log.error("Cannot reach the API at %s: %s", url, exc)
        raise FetchError(f"Cannot reach the API at {url}. Start it with: python app/app.py") from exc
    except requests.exceptions.RequestException as exc:
        log.error("Request to %s failed: %s", url, exc)
        raise FetchError(f"Failed to fetch advocates: {exc}") from exc

    if not resp.ok:
        log.error("API returned status %d", resp.status_code)
        raise FetchError(f"HTTP error! status: {resp.status_code}")

    try:
        payload = resp.json()
    except ValueError as exc:
        raise FetchError("Failed to fetch advocates: response was not valid JSON") from exc

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, list):
        raise FetchError("Failed to fetch advocates: response has no data list")

    log.info("  %d advocates received.", len(data))
    return data
