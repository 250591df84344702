"""Tests for the component JSON store."""

import json

from figma_component_mcp.utils import ComponentStore, ProcessedComponent


def make_component(name="Button", prop_type="Hover"):
    return ProcessedComponent(
        name=name,
        props=[{"name": "state", "type": prop_type}],
        children=[{"name": "Label", "type": "TEXT", "children": []}],
    )


class TestComponentStore:
    """Test cases for ComponentStore."""

    def test_save_creates_directory(self, tmp_path):
        store = ComponentStore(tmp_path / "components")

        assert store.save(make_component())

        data = json.loads((tmp_path / "components" / "Button.json").read_text(encoding="utf-8"))
        assert data["name"] == "Button"
        assert data["props"] == [{"name": "state", "type": "Hover"}]

    def test_exists(self, tmp_path):
        store = ComponentStore(tmp_path)
        assert not store.exists("Button")
        store.save(make_component())
        assert store.exists("Button")

    def test_never_overwrites(self, tmp_path):
        store = ComponentStore(tmp_path)
        store.save(make_component(prop_type="Hover"))

        assert not store.save(make_component(prop_type="Pressed"))

        data = json.loads(store.path_for("Button").read_text(encoding="utf-8"))
        assert data["props"][0]["type"] == "Hover"

    def test_save_all(self, tmp_path):
        store = ComponentStore(tmp_path)
        store.save(make_component("Card"))

        result = store.save_all([make_component("Button"), make_component("Card")])

        assert result == {"saved": ["Button"], "skipped": ["Card"]}

    def test_empty_name_is_not_saved(self, tmp_path):
        store = ComponentStore(tmp_path / "components")

        assert not store.save(make_component(name=""))
        assert not (tmp_path / "components" / ".json").exists()

    def test_save_all_skips_empty_name(self, tmp_path):
        store = ComponentStore(tmp_path)

        result = store.save_all([make_component(name=""), make_component("Card")])

        assert result == {"saved": ["Card"], "skipped": [""]}
        assert sorted(p.name for p in tmp_path.iterdir()) == ["Card.json"]
