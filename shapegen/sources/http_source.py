"""
Fetch sample strings from an HTTP endpoint.

The endpoint may answer with:
  - a JSON list of strings:            ["Smith, John", "Dale, Danny"]
  - a JSON object with a samples list: {"samples": ["Smith, John"]}
  - a single JSON string per request:  "Smith, John"
"""

from typing import Any, List, Optional

import requests


def fetch_samples(
    url: str,
    count: int = 1,
    timeout: float = 10.0,
    session: Optional[requests.Session] = None
) -> List[str]:
    """
    Call the endpoint until `count` samples have been collected.

    Args:
        url: Endpoint returning samples as JSON
        count: Number of samples wanted
        timeout: Per-request timeout in seconds
        session: Optional requests.Session to reuse connections

    Returns:
        Up to `count` samples (fewer if the endpoint runs dry)

    Raises:
        requests.RequestException: On connection or HTTP errors
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    http = session or requests
    samples: List[str] = []

    while len(samples) < count:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()

        batch = _extract_samples(response.json())
        if not batch:
            # Endpoint has nothing more to give
            break
        samples.extend(batch)

    return samples[:count]


def _extract_samples(payload: Any) -> List[str]:
    if isinstance(payload, str):
        return [payload] if payload else []
    if isinstance(payload, dict):
        payload = payload.get("samples", [])
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, str) and item]
    return []
