"""Encounter difficulty evaluation (D&D 5e, DMG Chapter 3).

Pipeline, each step depending on the ones before it:
  1. actual XP        : sum of opponent XP values.
  2. party thresholds : per-tier sum of each character's row by level.
  3. multiplier band  : chosen by opponent *count*, not XP.
  4. adjusted XP      : actual XP × the band's value for the party size.
  5. difficulty       : highest tier whose threshold adjusted XP meets (>=).

No randomness and no I/O: the same encounter always yields the same
Evaluation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from rpg_structures.encounter_tables import ENCOUNTER_MULTIPLIERS, XP_THRESHOLDS_BY_LEVEL
from rpg_structures.models import (
    Difficulty,
    Encounter,
    EncounterMultiplier,
    Evaluation,
    XpThresholds,
)

logger = logging.getLogger(__name__)


def actual_xp(opponents: Sequence[float]) -> float:
    return sum(opponents, 0)


def character_xp_thresholds(level: int) -> XpThresholds:
    try:
        return XP_THRESHOLDS_BY_LEVEL[level]
    except KeyError:
        raise ValueError(f"No XP thresholds for character level {level}") from None


def party_xp_thresholds(party: Sequence[int]) -> XpThresholds:
    total = XpThresholds()
    for level in party:
        total = total + character_xp_thresholds(level)
    return total


def select_multiplier(opponent_count: int) -> EncounterMultiplier | None:
    """Return the band with the largest threshold <= opponent_count.

    The last band covers every count at or above its threshold. There is no
    band for zero opponents, so None is returned.
    """
    selected = None
    for band in ENCOUNTER_MULTIPLIERS:
        if band.number_of_monsters > opponent_count:
            break
        selected = band
    return selected


def adjusted_xp(
    actual: float, multiplier: EncounterMultiplier | None, party_size: int
) -> float:
    if multiplier is None:
        return 0
    return actual * multiplier.for_party_size(party_size)


def classify_difficulty(adjusted: float, thresholds: XpThresholds) -> Difficulty:
    if adjusted >= thresholds.Deadly:
        return "Deadly"
    if adjusted >= thresholds.Hard:
        return "Hard"
    if adjusted >= thresholds.Medium:
        return "Medium"
    return "Easy"


def evaluate(encounter: Encounter | dict[str, Any]) -> Evaluation:
    """Evaluate an encounter.

    Accepts an Encounter or a plain {"party": [...], "opponents": [...]}
    mapping. Levels outside 1-20, negative XP, or an empty party raise
    pydantic.ValidationError.
    """
    if not isinstance(encounter, Encounter):
        encounter = Encounter.model_validate(encounter)

    actual = actual_xp(encounter.opponents)
    thresholds = party_xp_thresholds(encounter.party)
    multiplier = select_multiplier(len(encounter.opponents))
    adjusted = adjusted_xp(actual, multiplier, len(encounter.party))
    difficulty = classify_difficulty(adjusted, thresholds)

    logger.debug(
        "encounter party=%s opponents=%s actual=%s adjusted=%s difficulty=%s",
        encounter.party, encounter.opponents, actual, adjusted, difficulty,
    )

    return Evaluation(
        party=encounter.party,
        opponents=encounter.opponents,
        actual_xp=actual,
        party_xp_thresholds=thresholds,
        multiplier=multiplier,
        adjusted_xp=adjusted,
        difficulty=difficulty,
    )


def _format_number(value: float) -> str:
    """300.0 -> "300", 37.5 -> "37.5"."""
    return str(int(value)) if float(value).is_integer() else str(value)


def format_evaluation(evaluation: Evaluation) -> str:
    """Render an Evaluation as a short multi-line report."""
    t = evaluation.party_xp_thresholds
    if evaluation.multiplier is None:
        multiplier = "none (no opponents)"
    else:
        value = evaluation.multiplier.for_party_size(len(evaluation.party))
        multiplier = (
            f"x{_format_number(value)} "
            f"({evaluation.multiplier.number_of_monsters}+ opponents)"
        )
    lines = [
        f"Party levels: {', '.join(str(lvl) for lvl in evaluation.party)}",
        f"Opponents: {len(evaluation.opponents)}",
        f"Thresholds: Easy {t.Easy}, Medium {t.Medium}, Hard {t.Hard}, Deadly {t.Deadly}",
        f"Actual XP: {_format_number(evaluation.actual_xp)}",
        f"Multiplier: {multiplier}",
        f"Adjusted XP: {_format_number(evaluation.adjusted_xp)}",
        f"Difficulty: {evaluation.difficulty}",
    ]
    return "\n".join(lines)
