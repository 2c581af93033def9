"""Tests for the five-room dungeon fixture and the adventure file loader."""

import json

import pytest

from rpg_structures.adventure_nodes import (
    FIVE_ROOM_DUNGEON,
    AdventureLoadError,
    build_graph,
    load_adventure,
)


class TestFiveRoomDungeon:
    def test_has_eight_nodes(self, dungeon) -> None:
        assert len(dungeon) == 8
        assert set(dungeon.nodes) == set(range(1, 9))

    def test_is_valid(self, dungeon) -> None:
        assert dungeon.validate_graph() is True

    def test_endings_have_no_choices(self) -> None:
        for node in FIVE_ROOM_DUNGEON:
            if node.is_ending:
                assert node.choices == [], f"Ending node {node.id} has choices"

    def test_every_non_ending_has_choices(self) -> None:
        for node in FIVE_ROOM_DUNGEON:
            if not node.is_ending:
                assert node.choices, f"Node {node.id} is a dead end"

    def test_goblin_guard_choices_all_lead_to_node_2(self, dungeon) -> None:
        node = dungeon.get_current_node()
        assert node.id == 1
        assert "goblin" in node.text
        assert dungeon.choice_ids() == [2, 2, 2]

    def test_make_choice_from_entrance(self, dungeon) -> None:
        assert dungeon.make_choice(2) is True
        assert dungeon.get_current_node().id == 2

    def test_invalid_choice_keeps_cursor(self, dungeon) -> None:
        dungeon.make_choice(2)
        assert dungeon.make_choice(99) is False
        assert dungeon.get_current_node().id == 2

    def test_victory_path(self, dungeon) -> None:
        for next_id in (2, 3, 4, 5, 7):
            assert dungeon.is_at_ending() is False
            assert dungeon.make_choice(next_id) is True
        assert dungeon.get_current_node().id == 7
        assert dungeon.is_at_ending() is True

    @pytest.mark.parametrize("path, ending", [
        ((2, 3, 4, 6), 6),
        ((2, 5, 8), 8),
    ])
    def test_other_endings(self, dungeon, path, ending) -> None:
        for next_id in path:
            assert dungeon.make_choice(next_id) is True
        assert dungeon.current_node_id == ending
        assert dungeon.is_at_ending() is True

    def test_build_graph_instances_are_independent(self) -> None:
        a = build_graph()
        b = build_graph()
        a.make_choice(2)
        assert b.current_node_id == 1


class TestLoadAdventure:
    NODES = [
        {"id": 10, "text": "Start", "choices": [{"text": "On", "next_node_id": 11}]},
        {"id": 11, "text": "End", "is_ending": True},
    ]

    def test_load_bare_list(self, tmp_path) -> None:
        path = tmp_path / "adv.json"
        path.write_text(json.dumps(self.NODES))
        nodes = load_adventure(path)
        assert [n.id for n in nodes] == [10, 11]
        assert nodes[1].is_ending is True

    def test_load_wrapped_nodes(self, tmp_path) -> None:
        path = tmp_path / "adv.json"
        path.write_text(json.dumps({"title": "Short", "nodes": self.NODES}))
        graph = build_graph(load_adventure(path), starting_node_id=10)
        assert graph.validate_graph() is True
        assert graph.make_choice(11) is True

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(AdventureLoadError, match="Cannot read"):
            load_adventure(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "adv.json"
        path.write_text("{not json")
        with pytest.raises(AdventureLoadError, match="not valid JSON"):
            load_adventure(path)

    def test_binary_file(self, tmp_path) -> None:
        path = tmp_path / "adv.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(AdventureLoadError, match="not UTF-8"):
            load_adventure(path)

    def test_wrong_shape(self, tmp_path) -> None:
        path = tmp_path / "adv.json"
        path.write_text(json.dumps({"rooms": []}))
        with pytest.raises(AdventureLoadError):
            load_adventure(path)

    def test_invalid_node(self, tmp_path) -> None:
        path = tmp_path / "adv.json"
        path.write_text(json.dumps([{"id": "first", "text": "x"}]))
        with pytest.raises(AdventureLoadError, match="invalid node"):
            load_adventure(path)

    def test_load_error_is_value_error(self) -> None:
        assert issubclass(AdventureLoadError, ValueError)
