"""Adventure node data: the built-in five-room dungeon and a JSON loader.

Adventure files hold either a bare list of nodes or {"nodes": [...]}:

    [
      {"id": 1, "text": "...", "choices": [{"text": "...", "next_node_id": 2}]},
      {"id": 2, "text": "...", "is_ending": true}
    ]
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from rpg_structures.adventure_graph import AdventureGraph
from rpg_structures.models import AdventureNode, Choice


class AdventureLoadError(ValueError):
    """Raised when an adventure file cannot be read or does not hold valid nodes."""


FIVE_ROOM_DUNGEON: list[AdventureNode] = [
    AdventureNode(
        id=1,
        text="You stand at the entrance of the dungeon. A goblin guards the doorway, "
             "eyeing you suspiciously.",
        choices=[
            Choice(text="Attack the goblin", next_node_id=2),
            Choice(text="Try to sneak past while it's distracted", next_node_id=2),
            Choice(text="Offer gold to pass", next_node_id=2),
        ],
    ),
    AdventureNode(
        id=2,
        text="You enter a chamber with a stone pedestal in the center. There's a riddle "
             "inscribed: 'I speak without a mouth and hear without ears. I have no body, "
             "but I come alive with wind.'",
        choices=[
            Choice(text="Answer 'Echo'", next_node_id=3),
            Choice(text="Smash the pedestal", next_node_id=5),
        ],
    ),
    AdventureNode(
        id=3,
        text="The pedestal slides away, revealing a hidden compartment with a glittering "
             "treasure chest.",
        choices=[
            Choice(text="Take the treasure", next_node_id=4),
            Choice(text="Leave it and proceed", next_node_id=5),
        ],
    ),
    AdventureNode(
        id=4,
        text="As you lift the treasure, you hear a click. The floor beneath you begins "
             "to crumble, revealing spikes!",
        choices=[
            Choice(text="Try to disarm the trap", next_node_id=5),
            Choice(text="Jump but fail to escape", next_node_id=6),
        ],
    ),
    AdventureNode(
        id=5,
        text="You enter a massive chamber with ancient columns. A dragon sleeps on a "
             "pile of gold in the center.",
        choices=[
            Choice(text="Fight the dragon", next_node_id=7),
            Choice(text="Flee the dungeon", next_node_id=8),
        ],
    ),
    AdventureNode(
        id=6,
        text="The spikes impale you. Your adventure ends here.",
        is_ending=True,
    ),
    AdventureNode(
        id=7,
        text="After a fierce battle, you defeat the dragon and claim its hoard. "
             "You are victorious!",
        is_ending=True,
    ),
    AdventureNode(
        id=8,
        text="You escape the dungeon with your life, if not your pride. Perhaps another "
             "day you'll return better prepared.",
        is_ending=True,
    ),
]


def build_graph(
    nodes: Iterable[AdventureNode] | None = None, starting_node_id: int = 1
) -> AdventureGraph:
    """Create a graph from nodes (default: the five-room dungeon)."""
    graph = AdventureGraph(starting_node_id)
    graph.add_nodes(FIVE_ROOM_DUNGEON if nodes is None else nodes)
    return graph


def load_adventure(path: str | Path) -> list[AdventureNode]:
    """Load adventure nodes from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise AdventureLoadError(f"Cannot read adventure file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise AdventureLoadError(f"Adventure file {path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise AdventureLoadError(f"Adventure file {path} is not valid JSON: {e}") from e

    entries = data.get("nodes") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise AdventureLoadError(
            f"Adventure file {path} must hold a list of nodes or {{\"nodes\": [...]}}"
        )

    try:
        return [AdventureNode.model_validate(entry) for entry in entries]
    except ValidationError as e:
        raise AdventureLoadError(f"Adventure file {path} has an invalid node: {e}") from e
