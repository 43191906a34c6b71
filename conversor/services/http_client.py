from __future__ import annotations

"""Lightweight HTTP client util.

Uses stdlib urllib; the converter issues a single GET per session, so there is
no pooling and no retry loop. Focus: GET JSON, fail loudly with HttpError.
"""
import http.client
import json
import urllib.error
import urllib.request
from typing import Any, Dict


class HttpError(Exception):
    pass


def get_json(url: str, *, timeout: float = 10.0) -> Dict[str, Any]:
    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as resp:  # nosec B310
            if resp.status >= 400:
                raise HttpError(f"HTTP {resp.status} for {url}")
            data = resp.read()
    except urllib.error.HTTPError as e:
        raise HttpError(f"HTTP {e.code} for {url}") from e
    except (urllib.error.URLError, http.client.HTTPException, TimeoutError, OSError) as e:
        raise HttpError(f"Failed to fetch {url}: {e}") from e
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise HttpError(f"Invalid JSON from {url}: {e}") from e
    if not isinstance(payload, dict):
        raise HttpError(f"Expected a JSON object from {url}")
    return payload
