import json
import os

import pytest

from insults.registry import InsultRegistry

SHIPPED_INSULTS = os.path.join(os.path.dirname(__file__), "..", "data", "insults.json")


def _small_document() -> dict:
    return {
        "failed_retorts": ["Oh yeah?", "I am rubber, you are glue."],
        "monkey_island1": {
            "Have you stopped wearing diapers yet?": "Why, did you want to borrow one?",
            # Also a Sword Master insult: mi1 refuses to answer it.
            "My tongue is sharper than any sword.": "Pirate answer to the tongue.",
            "Shared insult.": "Pirate answer to the shared insult.",
        },
        "sword_master": {
            "My tongue is sharper than any sword.": "First you'd better stop waving it like a feather-duster.",
            "En garde!": "Sword Master answer to en garde.",
        },
        "monkey_island3": {
            "Would you like to be buried, or cremated?": "With you around, I'd rather be fumigated.",
            "You're as repulsive as a monkey in a negligee!": "Pirate answer to the monkey.",
        },
        "captain_rottingham": {
            "You're as repulsive as a monkey in a negligee!": "I look that much like your fiancée?",
        },
        "monkey_island4": {
            "Hey, look over there!": "Yeah, yeah I know: it's a three headed monkey.",
            "Shared insult.": "Monkey Island 4 answer to the shared insult.",
        },
    }


@pytest.fixture
def document() -> dict:
    return _small_document()


@pytest.fixture
def registry(document) -> InsultRegistry:
    return InsultRegistry.from_dict(document)


@pytest.fixture
def document_path(tmp_path, document) -> str:
    path = tmp_path / "insults.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


@pytest.fixture
def shipped_registry() -> InsultRegistry:
    return InsultRegistry.new(SHIPPED_INSULTS)
