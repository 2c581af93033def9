"""Gamebook traversal engine.

An AdventureGraph is a directed graph of AdventureNodes keyed by id, plus a
single cursor (the current node id). Choices are edges; the player moves the
cursor by naming the id a choice points at.

"Not found" is never exceptional here: a cursor pointing at a missing node
reads back as None / False, and an invalid move returns False and leaves the
cursor where it was.

Validation only checks that every edge lands on a node that exists. Cycles
(shops, loops back to a hub) and unreachable nodes are allowed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from rpg_structures.models import AdventureNode

logger = logging.getLogger(__name__)


class AdventureGraph:
    def __init__(self, starting_node_id: int) -> None:
        if isinstance(starting_node_id, bool) or not isinstance(starting_node_id, int):
            raise TypeError(
                f"starting_node_id must be an int, got {type(starting_node_id).__name__}"
            )
        self._nodes: dict[int, AdventureNode] = {}
        self._current_node_id = starting_node_id

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    @property
    def nodes(self) -> Mapping[int, AdventureNode]:
        return MappingProxyType(self._nodes)

    @property
    def current_node_id(self) -> int:
        return self._current_node_id

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_node(self, node: AdventureNode) -> None:
        """Insert a node, replacing any existing node with the same id."""
        if node.id in self._nodes:
            logger.debug("Replacing node %d", node.id)
        self._nodes[node.id] = node

    def add_nodes(self, nodes: Iterable[AdventureNode]) -> None:
        for node in nodes:
            self.add_node(node)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def get_current_node(self) -> AdventureNode | None:
        return self._nodes.get(self._current_node_id)

    def choice_ids(self) -> list[int]:
        """Target ids of the current node's choices, in display order."""
        node = self.get_current_node()
        if node is None:
            return []
        return [choice.next_node_id for choice in node.choices]

    def make_choice(self, next_node_id: int) -> bool:
        """Move the cursor along one of the current node's choices.

        Returns False, leaving the cursor unchanged, when there is no current
        node or no choice of it points at next_node_id.
        """
        for choice_id in self.choice_ids():
            # Only exact ints match; 2.0 or True must not reach the cursor
            if type(next_node_id) is int and choice_id == next_node_id:
                self._current_node_id = choice_id
                return True
        logger.debug(
            "Rejected choice %r from node %d", next_node_id, self._current_node_id
        )
        return False

    def is_at_ending(self) -> bool:
        node = self.get_current_node()
        return node.is_ending if node is not None else False

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def invalid_choices(self) -> list[tuple[int, int]]:
        """Return (node_id, next_node_id) for every choice whose target is missing."""
        return [
            (node.id, choice.next_node_id)
            for node in self._nodes.values()
            for choice in node.choices
            if choice.next_node_id not in self._nodes
        ]

    def validate_graph(self) -> bool:
        """True iff every choice of every node points at an existing node."""
        invalid = self.invalid_choices()
        for node_id, next_node_id in invalid:
            logger.error("Node %d has invalid choice to %d", node_id, next_node_id)
        return not invalid
