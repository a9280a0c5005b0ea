# insults/config.py

import os
from typing import Mapping, Optional

# Path to insults.json in /data/
DEFAULT_INSULTS_PATH = os.path.join(os.path.dirname(__file__), '..', 'data', 'insults.json')


def _env(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def resolve_insults_location(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Where to load the insults document from. Fallbacks:
      1) INSULTS_LOCATION (path or http(s) URL)
      2) INSULTS_PATH (legacy name, path only)
      3) data/insults.json shipped with the repo
    """
    env = _env(environ)
    location = (env.get("INSULTS_LOCATION") or env.get("INSULTS_PATH") or "").strip()
    return location or os.path.normpath(DEFAULT_INSULTS_PATH)


def log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    v = (_env(environ).get("INSULTS_LOG_LEVEL") or "").strip().lower()
    return v or "info"


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    return log_level(environ) in ("debug", "trace")


def resolve_seed(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """INSULTS_SEED as an int, or None when unset or unparseable."""
    raw = (_env(environ).get("INSULTS_SEED") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"⚠️  INSULTS_SEED={raw!r} is not an integer. Using an unseeded RNG.", flush=True)
        return None
