"""Gamebook passages and encounter-budget records.

Adventure nodes and choices are plain records the graph indexes by id.
Encounter inputs are checked on construction (levels 1-20, XP >= 0), and
encounter records are frozen with tuple sequences so an Evaluation stays
exactly as it was computed.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["Easy", "Medium", "Hard", "Deadly"]

# Ascending order of severity
DIFFICULTIES: tuple[Difficulty, ...] = ("Easy", "Medium", "Hard", "Deadly")

MIN_LEVEL = 1
MAX_LEVEL = 20

Level = Annotated[int, Field(ge=MIN_LEVEL, le=MAX_LEVEL)]
OpponentXp = Annotated[float, Field(ge=0)]


# ---------------------------------------------------------------------------
# Adventure graph
# ---------------------------------------------------------------------------

class Choice(BaseModel):
    """A labelled edge from one node to another."""

    text: str
    next_node_id: int


class AdventureNode(BaseModel):
    """A single passage of a gamebook.

    An ending node should carry no choices. The graph does not enforce this;
    fixtures are expected to respect it.
    """

    id: int
    text: str
    choices: list[Choice] = Field(default_factory=list)
    is_ending: bool = False


# ---------------------------------------------------------------------------
# Encounter evaluation
# ---------------------------------------------------------------------------

class XpThresholds(BaseModel):
    """XP budget per difficulty tier. Field names match the Difficulty values."""

    model_config = ConfigDict(frozen=True)

    Easy: int = 0
    Medium: int = 0
    Hard: int = 0
    Deadly: int = 0

    def __add__(self, other: XpThresholds) -> XpThresholds:
        return XpThresholds(
            Easy=self.Easy + other.Easy,
            Medium=self.Medium + other.Medium,
            Hard=self.Hard + other.Hard,
            Deadly=self.Deadly + other.Deadly,
        )

    def for_difficulty(self, difficulty: Difficulty) -> int:
        return getattr(self, difficulty)


class EncounterMultiplier(BaseModel):
    """One band of the encounter multiplier table (DMG p.82).

    A band applies from `number_of_monsters` opponents up to, but not
    including, the next band's threshold. The value used depends on how
    many characters are in the party.
    """

    model_config = ConfigDict(frozen=True)

    number_of_monsters: int = Field(ge=1)
    fewer_than_three: float
    three_to_five: float
    six_or_more: float

    def for_party_size(self, party_size: int) -> float:
        if party_size < 3:
            return self.fewer_than_three
        if party_size <= 5:
            return self.three_to_five
        return self.six_or_more


class Encounter(BaseModel):
    """Evaluator input: party member levels and one XP value per opponent."""

    model_config = ConfigDict(frozen=True)

    party: tuple[Level, ...] = Field(min_length=1)
    opponents: tuple[OpponentXp, ...] = ()


class Evaluation(BaseModel):
    """Result of evaluating an Encounter. Computed once, never mutated."""

    model_config = ConfigDict(frozen=True)

    party: tuple[int, ...]
    opponents: tuple[float, ...]
    actual_xp: float
    party_xp_thresholds: XpThresholds
    multiplier: EncounterMultiplier | None  # None when there are no opponents
    adjusted_xp: float
    difficulty: Difficulty

    @classmethod
    def from_encounter(cls, encounter: Encounter | dict[str, Any]) -> Evaluation:
        from rpg_structures.encounter_evaluator import evaluate

        return evaluate(encounter)
