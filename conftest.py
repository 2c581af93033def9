import pytest

from rpg_structures import config
from rpg_structures.adventure_nodes import build_graph

CONFIG_ENV_VARS = ("RPG_LOG_LEVEL", "RPG_ADVENTURE_FILE", "RPG_START_NODE")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Ignore the developer's .env and RPG_* variables in every test."""
    monkeypatch.setattr(config, "ENV_FILE", tmp_path / ".env")
    for name in CONFIG_ENV_VARS:
        # setenv first so teardown also undoes anything load_dotenv() sets
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def dungeon():
    """The built-in five-room dungeon, cursor at node 1."""
    return build_graph()
