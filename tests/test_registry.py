"""
Tests for the scenario registry and the built-in scenario catalog.
"""

import pytest

from core.exceptions import DuplicateScenarioError, ScenarioDefinitionError, UnknownScenarioError
from core.registry import ScenarioDescriptor, ScenarioRegistry, build_scenario_registry
from core.scenarios import SCENARIO_DEFINITIONS


def test_lookup_returns_registered_descriptor(registry):
    d = registry.lookup("foo")
    assert d.name == "foo"
    assert d.default_duration == 30
    assert d.tab == "new"
    assert d.behavior[0]["url"] == "https://foo.example"


def test_lookup_unknown_name():
    reg = ScenarioRegistry()
    with pytest.raises(UnknownScenarioError) as exc:
        reg.lookup("doesnotexist")
    assert exc.value.scenario == "doesnotexist"
    assert "doesnotexist" in str(exc.value)


def test_lookup_is_case_sensitive(registry):
    with pytest.raises(UnknownScenarioError):
        registry.lookup("FOO")


def test_register_duplicate_rejected():
    reg = ScenarioRegistry([ScenarioDescriptor("foo", 30)])
    with pytest.raises(DuplicateScenarioError, match="foo"):
        reg.register(ScenarioDescriptor("foo", 10))
    assert reg.lookup("foo").default_duration == 30


def test_descriptor_requires_positive_duration():
    with pytest.raises(ValueError, match="default_duration"):
        ScenarioDescriptor("foo", 0)


def test_scenarios_view_is_read_only(registry):
    view = registry.scenarios
    with pytest.raises(TypeError):
        view["new"] = ScenarioDescriptor("new", 5)
    assert "new" not in registry


def test_build_rejects_bad_steps():
    bad = [{"name": "broken", "duration": 5, "steps": [{"type": "goto"}]}]
    with pytest.raises(ScenarioDefinitionError, match="requires 'url'") as exc:
        build_scenario_registry(bad)
    assert exc.value.scenario == "broken"


@pytest.mark.parametrize("item", [
    {"name": "nosteps", "duration": 5},
    {"duration": 5, "steps": [{"type": "goto", "url": "about:blank"}]},
    {"name": "zero", "duration": 0, "steps": [{"type": "goto", "url": "about:blank"}]},
    {"name": "word", "duration": "soon", "steps": [{"type": "goto", "url": "about:blank"}]},
])
def test_build_wraps_malformed_definitions(item):
    with pytest.raises(ScenarioDefinitionError):
        build_scenario_registry([item])


def test_built_registry_is_frozen(registry):
    assert registry.frozen
    with pytest.raises(ScenarioDefinitionError, match="frozen"):
        registry.register(ScenarioDescriptor("late", 5))
    assert "late" not in registry


def test_builtin_catalog_registers_everything():
    reg = build_scenario_registry()
    assert len(reg) == len(SCENARIO_DEFINITIONS)
    for name in ("amazon", "facebook", "gmail", "msn", "wikipedia", "youtube", "aboutblank", "pinterestExplore"):
        assert name in reg
    assert all(d.default_duration > 0 for d in reg.scenarios.values())
