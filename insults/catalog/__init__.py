# insults/catalog/__init__.py
"""
Aggregator for the faction catalog.

Public API:
  - FACTIONS
  - FACTION_KEYS
  - ENUMERATION_ORDER
  - RESOLUTION_ORDER
  - REQUIRED_FIELDS
"""

from __future__ import annotations

from .factions import (
    FAILED_RETORTS_KEY,
    FACTIONS,
    ENUMERATION_ORDER,
    RESOLUTION_ORDER,
    Faction,
)

FACTION_KEYS = tuple(FACTIONS)

# Every field the backing document must carry.
REQUIRED_FIELDS = (FAILED_RETORTS_KEY,) + FACTION_KEYS

__all__ = [
    "FAILED_RETORTS_KEY",
    "FACTIONS",
    "FACTION_KEYS",
    "ENUMERATION_ORDER",
    "RESOLUTION_ORDER",
    "REQUIRED_FIELDS",
    "Faction",
]
