"""D&D 5e encounter building reference tables (DMG p.82).

XP_THRESHOLDS_BY_LEVEL  level 1-20 -> per-character Easy/Medium/Hard/Deadly budget
ENCOUNTER_MULTIPLIERS   opponent-count bands, ascending by threshold

Both are read-only and built once at import.
"""

from collections.abc import Mapping
from types import MappingProxyType

from rpg_structures.models import EncounterMultiplier, XpThresholds

# (level, easy, medium, hard, deadly)
_XP_THRESHOLD_ROWS = [
    (1, 25, 50, 75, 100),
    (2, 50, 100, 150, 200),
    (3, 75, 150, 225, 400),
    (4, 125, 250, 375, 500),
    (5, 250, 500, 750, 1_100),
    (6, 300, 600, 900, 1_400),
    (7, 350, 750, 1_100, 1_700),
    (8, 450, 900, 1_400, 2_100),
    (9, 550, 1_100, 1_600, 2_400),
    (10, 600, 1_200, 1_900, 2_800),
    (11, 800, 1_600, 2_400, 3_600),
    (12, 1_000, 2_000, 3_000, 4_500),
    (13, 1_100, 2_200, 3_400, 5_100),
    (14, 1_250, 2_500, 3_800, 5_700),
    (15, 1_400, 2_800, 4_300, 6_400),
    (16, 1_600, 3_200, 4_800, 7_200),
    (17, 2_000, 3_900, 5_900, 8_800),
    (18, 2_100, 4_200, 6_300, 9_500),
    (19, 2_400, 4_900, 7_300, 10_900),
    (20, 2_800, 5_700, 8_500, 12_700),
]

XP_THRESHOLDS_BY_LEVEL: Mapping[int, XpThresholds] = MappingProxyType({
    level: XpThresholds(Easy=easy, Medium=medium, Hard=hard, Deadly=deadly)
    for level, easy, medium, hard, deadly in _XP_THRESHOLD_ROWS
})

# (number_of_monsters, fewer_than_three, three_to_five, six_or_more)
_MULTIPLIER_ROWS = [
    (1, 1.5, 1, 0.5),
    (2, 2, 1.5, 1),
    (3, 2.5, 2, 1.5),
    (7, 3.5, 2.5, 2),
    (11, 4.5, 3, 2.5),
    (15, 5.5, 3.5, 3),
]

ENCOUNTER_MULTIPLIERS: tuple[EncounterMultiplier, ...] = tuple(
    EncounterMultiplier(
        number_of_monsters=count,
        fewer_than_three=fewer,
        three_to_five=mid,
        six_or_more=many,
    )
    for count, fewer, mid, many in _MULTIPLIER_ROWS
)
