# insults/loader.py
"""
Backing-data loader for the insult registry.

Purpose
- Read the insults document from a local file or an HTTP(S) URL.
- Validate it against the six-field contract (failed_retorts + five factions).

Design
- URLs go through requests with a fixed timeout, like the state fetches.
- Every failure is raised as InsultsLoadError; there is no degraded mode.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List
from urllib.parse import urlparse

import requests

from insults.catalog import FACTION_KEYS, FAILED_RETORTS_KEY, REQUIRED_FIELDS
from insults.errors import InsultsLoadError

__all__ = ["load_insults_data", "validate_insults_data", "is_remote_location"]

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 15


def is_remote_location(location: str) -> bool:
    """True for http:// and https:// locations."""
    try:
        scheme = urlparse(str(location)).scheme.lower()
    except ValueError:
        return False
    return scheme in ("http", "https")


def _fetch_remote(url: str) -> Any:
    try:
        res = requests.get(
            url,
            headers={"Accept": "application/json"},
            timeout=REQUEST_TIMEOUT,
        )
        res.raise_for_status()
    except requests.RequestException as e:
        raise InsultsLoadError(f"request error for {url}: {type(e).__name__}: {e}") from e

    try:
        return res.json()
    except ValueError as e:
        raise InsultsLoadError(f"json error in {url}: {e}") from e


def _read_local(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InsultsLoadError(f"file error: {path}: {e}") from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise InsultsLoadError(f"json error in {path}: {e}") from e


def _validate_phrase_list(field: str, value: Any) -> List[str]:
    if not isinstance(value, list):
        raise InsultsLoadError(
            f"decoding error: `{field}` must be a list, got {type(value).__name__}"
        )
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise InsultsLoadError(
                f"decoding error: `{field}[{i}]` must be a string, got {type(item).__name__}"
            )
    return list(value)


def _validate_phrase_map(field: str, value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        raise InsultsLoadError(
            f"decoding error: `{field}` must be an object, got {type(value).__name__}"
        )
    out: Dict[str, str] = {}
    for insult, retort in value.items():
        if not isinstance(insult, str):
            raise InsultsLoadError(
                f"decoding error: `{field}` insult {insult!r} must be a string, "
                f"got {type(insult).__name__}"
            )
        if not isinstance(retort, str):
            raise InsultsLoadError(
                f"decoding error: `{field}` retort for {insult!r} must be a string, "
                f"got {type(retort).__name__}"
            )
        out[insult] = retort
    return out


def validate_insults_data(data: Any) -> Dict[str, Any]:
    """
    Check a decoded document against the insults contract.

    Returns a normalized copy:
      {"failed_retorts": [str, ...], "<faction>": {insult: retort}, ...}

    Raises InsultsLoadError naming the first offending field.
    Unknown top-level fields are ignored.
    """
    if not isinstance(data, dict):
        raise InsultsLoadError(
            f"decoding error: expected an object at top level, got {type(data).__name__}"
        )

    missing = [k for k in REQUIRED_FIELDS if k not in data]
    if missing:
        raise InsultsLoadError(f"decoding error: missing field(s): {', '.join(missing)}")

    extra = sorted(set(data) - set(REQUIRED_FIELDS))
    if extra:
        logger.debug("ignoring unknown insults fields: %s", extra)

    out: Dict[str, Any] = {
        FAILED_RETORTS_KEY: _validate_phrase_list(FAILED_RETORTS_KEY, data[FAILED_RETORTS_KEY]),
    }
    for key in FACTION_KEYS:
        out[key] = _validate_phrase_map(key, data[key])
    return out


def load_insults_data(location: str) -> Dict[str, Any]:
    """
    Load and validate the insults document at `location`.

    Accepts:
      - http(s) URLs (fetched with requests)
      - filesystem paths (read as UTF-8 JSON)
    """
    if not location:
        raise InsultsLoadError("file error: no insults location given")

    location = str(location)
    if is_remote_location(location):
        logger.debug("fetching insults from %s", location)
        raw = _fetch_remote(location)
    else:
        logger.debug("reading insults from %s", location)
        raw = _read_local(location)

    return validate_insults_data(raw)
