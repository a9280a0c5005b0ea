"""Faction catalog: the five insult sets and how they shadow each other.

This module is intentionally "dumb": constants only (no lookups, no RNG).
Resolution is performed in insults/registry.py by walking RESOLUTION_ORDER.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Data-file field names (the loader contract).
FAILED_RETORTS_KEY = "failed_retorts"
MONKEY_ISLAND1 = "monkey_island1"
SWORD_MASTER = "sword_master"
MONKEY_ISLAND3 = "monkey_island3"
CAPTAIN_ROTTINGHAM = "captain_rottingham"
MONKEY_ISLAND4 = "monkey_island4"

SWORD_MASTER_ADMONISHMENT = "That's not fair, you're using the Sword Master's insults!"
CAPTAIN_ROTTINGHAM_ADMONISHMENT = "That's not fair, you're using Captain Rottingham's insults!"


@dataclass(frozen=True)
class Faction:
    key: str
    name: str
    # Key of the stronger faction whose insults this one refuses to answer.
    overridden_by: Optional[str] = None
    admonishment: Optional[str] = None


FACTIONS: dict[str, Faction] = {
    MONKEY_ISLAND1: Faction(
        MONKEY_ISLAND1,
        "Monkey Island 1 pirates",
        overridden_by=SWORD_MASTER,
        admonishment=SWORD_MASTER_ADMONISHMENT,
    ),
    SWORD_MASTER: Faction(SWORD_MASTER, "the Sword Master"),
    MONKEY_ISLAND3: Faction(
        MONKEY_ISLAND3,
        "Monkey Island 3 pirates",
        overridden_by=CAPTAIN_ROTTINGHAM,
        admonishment=CAPTAIN_ROTTINGHAM_ADMONISHMENT,
    ),
    CAPTAIN_ROTTINGHAM: Faction(CAPTAIN_ROTTINGHAM, "Captain Rottingham"),
    MONKEY_ISLAND4: Faction(MONKEY_ISLAND4, "Monkey Island 4 pirates"),
}

# Order used by insults(): the catalog order above.
ENUMERATION_ORDER: tuple[str, ...] = tuple(FACTIONS)

# Order used by retort(). The direct Sword Master lookup comes before the
# Monkey Island 1 override check, so a Sword Master insult resolves to its
# own retort globally and only gets the admonishment through mi1_retort().
RESOLUTION_ORDER: tuple[str, ...] = (
    SWORD_MASTER,
    MONKEY_ISLAND1,
    MONKEY_ISLAND3,
    CAPTAIN_ROTTINGHAM,
    MONKEY_ISLAND4,
)

__all__ = [
    "FAILED_RETORTS_KEY",
    "MONKEY_ISLAND1",
    "SWORD_MASTER",
    "MONKEY_ISLAND3",
    "CAPTAIN_ROTTINGHAM",
    "MONKEY_ISLAND4",
    "SWORD_MASTER_ADMONISHMENT",
    "CAPTAIN_ROTTINGHAM_ADMONISHMENT",
    "Faction",
    "FACTIONS",
    "ENUMERATION_ORDER",
    "RESOLUTION_ORDER",
]
