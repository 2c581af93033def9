"""Terminal prompt loop for playing an AdventureGraph.

Each step prints the current passage and its choices as "[<id>]: <text>",
then reads the id of the node to move to. Input that is not one of the listed
ids is rejected and the prompt repeats.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rpg_structures.adventure_graph import AdventureGraph
from rpg_structures.models import AdventureNode

logger = logging.getLogger(__name__)

INVALID_CHOICE_MESSAGE = "Please choose from the listed numbers in square brackets"


def _read_choice(
    choice_ids: list[int], read: Callable[[str], str], write: Callable[[str], None]
) -> int:
    while True:
        raw = read("Choose: ").strip()
        try:
            next_node_id = int(raw)
        except ValueError:
            next_node_id = None
        if next_node_id in choice_ids:
            return next_node_id
        write(INVALID_CHOICE_MESSAGE)


def run_game(
    graph: AdventureGraph,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> AdventureNode | None:
    """Play until an ending (or a dead end) is reached. Returns the last node shown."""
    while True:
        node = graph.get_current_node()
        if node is None:
            logger.warning("Current node %d does not exist", graph.current_node_id)
            return None

        write(node.text)
        if graph.is_at_ending():
            return node

        choice_ids = graph.choice_ids()
        if not choice_ids:
            logger.warning("Node %d has no choices but is not an ending", node.id)
            return node

        for choice in node.choices:
            write(f"[{choice.next_node_id}]: {choice.text}")

        graph.make_choice(_read_choice(choice_ids, read, write))
