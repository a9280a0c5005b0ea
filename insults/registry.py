# insults/registry.py
"""
Insult registry: resolve insults to retorts across the five factions.

Built once from the backing document and read-only afterwards. Lookups are
exact and case-sensitive; absence is None. Sampling helpers take an optional
random.Random for deterministic selection and fall back to module random.
"""

from __future__ import annotations

import logging
import random
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from insults.catalog import (
    ENUMERATION_ORDER,
    FACTION_KEYS,
    FACTIONS,
    FAILED_RETORTS_KEY,
    RESOLUTION_ORDER,
    Faction,
)
from insults.catalog.factions import (
    CAPTAIN_ROTTINGHAM,
    MONKEY_ISLAND1,
    MONKEY_ISLAND3,
    MONKEY_ISLAND4,
    SWORD_MASTER,
)
from insults.loader import load_insults_data, validate_insults_data

__all__ = ["InsultRegistry"]

logger = logging.getLogger(__name__)


def _choose(items: Sequence[str], what: str, rng: Optional[random.Random]) -> str:
    if not items:
        raise IndexError(f"cannot sample from empty {what}")
    chooser = rng.choice if rng is not None else random.choice
    return chooser(items)


class InsultRegistry:
    """Five faction dictionaries plus the failed-retort pool."""

    def __init__(self, failed_retorts: Sequence[str], dictionaries: Mapping[str, Mapping[str, str]]):
        self._failed_retorts: Tuple[str, ...] = tuple(failed_retorts)
        self._dictionaries: Dict[str, Mapping[str, str]] = {
            key: MappingProxyType(dict(dictionaries[key])) for key in FACTION_KEYS
        }

    @classmethod
    def new(cls, location: str) -> "InsultRegistry":
        """Load, validate and build. Raises InsultsLoadError on any failure."""
        return cls.from_dict(load_insults_data(location))

    @classmethod
    def from_dict(cls, data: Any) -> "InsultRegistry":
        data = validate_insults_data(data)
        registry = cls(
            data[FAILED_RETORTS_KEY],
            {key: data[key] for key in FACTION_KEYS},
        )
        logger.debug(
            "insult registry built: %d insults, %d failed retorts",
            len(registry.insults()),
            len(registry.failed_retorts),
        )
        return registry

    # --- Data access --------------------------------------------------------

    @property
    def failed_retorts(self) -> Tuple[str, ...]:
        return self._failed_retorts

    def dictionary(self, key: str) -> Mapping[str, str]:
        """Read-only insult -> retort mapping for a faction key."""
        return self._dictionaries[key]

    def factions(self) -> List[Faction]:
        return [FACTIONS[key] for key in ENUMERATION_ORDER]

    # --- Resolution ---------------------------------------------------------

    @staticmethod
    def retort_from(insult: str, dictionary: Mapping[str, str]) -> Optional[str]:
        return dictionary.get(insult)

    def faction_retort(self, key: str, insult: str) -> Optional[str]:
        """
        Retort to an insult as the given faction would.

        A faction shadowed by a stronger one answers that faction's insults
        with its admonishment instead of a retort, even when it has its own
        entry for the phrase.
        """
        faction = FACTIONS[key]
        if faction.overridden_by is not None:
            if self.faction_retort(faction.overridden_by, insult) is not None:
                return faction.admonishment
        return self.retort_from(insult, self._dictionaries[key])

    def retort(self, insult: str) -> Optional[str]:
        """Correctly retort to insult, if there is one."""
        for key in RESOLUTION_ORDER:
            found = self.faction_retort(key, insult)
            if found is not None:
                return found
        return None

    def retort_or_rand_fail(self, insult: str, rng: Optional[random.Random] = None) -> str:
        """Correctly retort to an insult, with fallback to a random failed retort."""
        found = self.retort(insult)
        if found is not None:
            return found
        return self.rand_failed_retort(rng)

    def is_retort(self, insult: str, retort: str) -> bool:
        found = self.retort(insult)
        return found is not None and found == retort

    def mi1_retort(self, insult: str) -> Optional[str]:
        """
        Retort to an insult from Monkey Island 1.

        Returns the Sword Master admonishment for Sword Master insults.
        """
        return self.faction_retort(MONKEY_ISLAND1, insult)

    def sword_master_retort(self, insult: str) -> Optional[str]:
        return self.faction_retort(SWORD_MASTER, insult)

    def mi3_retort(self, insult: str) -> Optional[str]:
        """
        Retort to an insult from Monkey Island 3.

        Returns the Captain Rottingham admonishment for his insults.
        """
        return self.faction_retort(MONKEY_ISLAND3, insult)

    def captain_rottingham_retort(self, insult: str) -> Optional[str]:
        return self.faction_retort(CAPTAIN_ROTTINGHAM, insult)

    def mi4_retort(self, insult: str) -> Optional[str]:
        return self.faction_retort(MONKEY_ISLAND4, insult)

    # --- Enumeration & sampling ---------------------------------------------

    def faction_insults(self, key: str) -> List[str]:
        return list(self._dictionaries[key].keys())

    def insults(self) -> List[str]:
        """All insults, faction by faction. Duplicates across factions are kept."""
        res: List[str] = []
        for key in ENUMERATION_ORDER:
            res.extend(self.faction_insults(key))
        return res

    def mi1_insults(self) -> List[str]:
        return self.faction_insults(MONKEY_ISLAND1)

    def sword_master_insults(self) -> List[str]:
        return self.faction_insults(SWORD_MASTER)

    def mi3_insults(self) -> List[str]:
        return self.faction_insults(MONKEY_ISLAND3)

    def captain_rottingham_insults(self) -> List[str]:
        return self.faction_insults(CAPTAIN_ROTTINGHAM)

    def mi4_insults(self) -> List[str]:
        return self.faction_insults(MONKEY_ISLAND4)

    def rand_insult(self, rng: Optional[random.Random] = None) -> str:
        return _choose(self.insults(), "insult list", rng)

    def rand_failed_retort(self, rng: Optional[random.Random] = None) -> str:
        return _choose(self._failed_retorts, "failed retorts", rng)
