"""
Unit Tests for AgentTemplateStore
"""

import json

import pytest
from core.agents.template_store import AgentRecord, AgentTemplateStore


class TestLookup:

    def test_case_insensitive(self, agent_store):
        assert agent_store.get_base_prompt("sa") == "Act as a strategic advisor."
        assert agent_store.get_base_prompt("Sa") == "Act as a strategic advisor."

    def test_stored_name_trimmed(self):
        store = AgentTemplateStore([AgentRecord(name="  CT ", base_prompt="Think.")])
        assert store.get_base_prompt("ct") == "Think."

    def test_unknown_agent(self, agent_store):
        assert agent_store.get("XX") is None
        assert "XX" not in agent_store

    def test_empty_name(self, agent_store):
        assert agent_store.get("") is None

    def test_empty_prompt_is_missing(self):
        store = AgentTemplateStore([AgentRecord(name="EA", base_prompt="")])
        assert store.get("EA") is None

    def test_first_definition_wins(self):
        store = AgentTemplateStore([
            AgentRecord(name="SA", base_prompt="first"),
            AgentRecord(name="sa", base_prompt="second"),
        ])
        assert store.get_base_prompt("SA") == "first"
        assert len(store) == 1

    def test_list_agents(self, agent_store):
        assert [r.name for r in agent_store.list_agents()] == ["SA", "EA"]


class TestFromFile:

    def test_loads_json(self, temp_dir):
        path = temp_dir / "agents.json"
        path.write_text(json.dumps({"agents": [
            {"name": "SM", "description": "Stakeholder Manager", "base_prompt": "Map stakeholders."}
        ]}), encoding="utf-8")

        store = AgentTemplateStore.from_file(path)
        record = store.get("sm")
        assert record == AgentRecord(name="SM", base_prompt="Map stakeholders.", description="Stakeholder Manager")

    def test_missing_file_gives_empty_store(self, temp_dir):
        store = AgentTemplateStore.from_file(temp_dir / "nope.json")
        assert len(store) == 0
        assert store.get("SA") is None

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "agents.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid agent templates file"):
            AgentTemplateStore.from_file(path)

    @pytest.mark.parametrize("content", [
        '[]', '"agents"', 'null', '{"agents": {"SA": "x"}}', '{"agents": ["SA"]}',
    ])
    def test_wrong_shape_rejected(self, temp_dir, content):
        path = temp_dir / "agents.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid agent templates file"):
            AgentTemplateStore.from_file(path)

    def test_null_name_is_empty(self, temp_dir):
        path = temp_dir / "agents.json"
        path.write_text(json.dumps({"agents": [{"name": None, "base_prompt": "x"}]}), encoding="utf-8")
        assert len(AgentTemplateStore.from_file(path)) == 0

    def test_bundled_agents(self, test_settings):
        store = AgentTemplateStore.from_file(test_settings.agents_file)
        for name in ("EA", "SA", "CT", "SM"):
            assert store.get_base_prompt(name)
