# insults/runner.py

from __future__ import annotations

import random
from typing import Any, Dict, List, Mapping, Optional

from insults.config import debug_enabled, resolve_insults_location, resolve_seed
from insults.errors import InsultsLoadError
from insults.registry import InsultRegistry

CHALLENGER = "challenger"
DEFENDER = "defender"


def _other(name: str) -> str:
    return DEFENDER if name == CHALLENGER else CHALLENGER


def run_duel(
    registry: InsultRegistry,
    *,
    wins_needed: int = 3,
    max_rounds: int = 20,
    knowledge: float = 0.5,
    rng: Optional[random.Random] = None,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Play one insult sword fight between a challenger and a defender.

    The attacker hurls a random insult. The defender knows the proper retort
    with probability `knowledge`, otherwise blurts a failed retort. A correct
    retort wins the round and the initiative; a miss scores for the attacker.
    """
    rng = rng if rng is not None else random.Random()

    scores = {CHALLENGER: 0, DEFENDER: 0}
    rounds: List[Dict[str, Any]] = []
    attacker = CHALLENGER

    for index in range(1, max_rounds + 1):
        insult = registry.rand_insult(rng)
        if rng.random() < knowledge:
            answer = registry.retort_or_rand_fail(insult, rng)
        else:
            answer = registry.rand_failed_retort(rng)

        correct = registry.is_retort(insult, answer)
        round_winner = _other(attacker) if correct else attacker
        scores[round_winner] += 1

        rounds.append({
            "attacker": attacker,
            "insult": insult,
            "answer": answer,
            "correct": correct,
        })

        if verbose:
            mark = "🛡️" if correct else "🗡️"
            print(f"{mark} [{index}] {attacker}: {insult!r} / {_other(attacker)}: {answer!r}", flush=True)

        attacker = round_winner
        if scores[round_winner] >= wins_needed:
            break

    if scores[CHALLENGER] >= wins_needed:
        winner: Optional[str] = CHALLENGER
    elif scores[DEFENDER] >= wins_needed:
        winner = DEFENDER
    else:
        winner = None

    return {"winner": winner, "scores": scores, "rounds": rounds}


def main(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    print("🚀 Insult duel started", flush=True)

    location = resolve_insults_location(environ)
    try:
        registry = InsultRegistry.new(location)
    except InsultsLoadError as e:
        print(f"❌ Failed to load insults from {location}: {e}", flush=True)
        raise

    print(f"📥 Loaded {len(registry.insults())} insults from {location}", flush=True)

    seed = resolve_seed(environ)
    rng = random.Random(seed)

    summary = run_duel(registry, rng=rng, verbose=debug_enabled(environ))

    scores = summary["scores"]
    played = len(summary["rounds"])
    if summary["winner"]:
        print(
            f"ℹ️ Duel summary: {summary['winner']} wins "
            f"{scores[CHALLENGER]}-{scores[DEFENDER]} after {played} rounds.",
            flush=True,
        )
    else:
        print(f"ℹ️ Duel summary: draw {scores[CHALLENGER]}-{scores[DEFENDER]} after {played} rounds.", flush=True)

    print("✅ Insult duel complete.", flush=True)
    return summary


if __name__ == "__main__":
    main()
