# insults/replies.py

from __future__ import annotations

import random
import re

from insults.registry import InsultRegistry

_EN_GARDE_RE = re.compile(r"^\s*en\s+garde\b[\s,:!.-]*(.*)$", re.IGNORECASE | re.DOTALL)


def build_retort_reply(
    *,
    message_content: str,
    message_id: int,
    registry: InsultRegistry,
) -> str:
    """
    Pure logic: take a chat message and (optionally) return a reply string.

    Rules:
    - A message that is exactly a known insult gets its retort.
    - "insult" and "me" as whole words anywhere get a random insult.
    - "en garde <text>" treats <text> as an insult: retort, or a failed retort
      when nothing matches.
    - Deterministic selection seeded by message_id via local random.Random(seed).
    - Return "" when no reply should be sent.
    """
    content = (message_content or "").strip()
    if not content:
        return ""

    rng = random.Random(int(message_id or 0))

    direct = registry.retort(content)
    if direct is not None:
        return direct

    content_l = content.lower()
    has_insult = re.search(r"\binsult\b", content_l) is not None
    has_me = re.search(r"\bme\b", content_l) is not None
    if has_insult and has_me:
        return registry.rand_insult(rng)

    m = _EN_GARDE_RE.match(content)
    if m:
        challenge = m.group(1).strip()
        if not challenge:
            return ""
        return registry.retort_or_rand_fail(challenge, rng)

    return ""
