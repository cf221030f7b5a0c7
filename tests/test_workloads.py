"""
Tests for workload loading and expansion (override-or-default durations).
"""

import json

import pytest

from core.exceptions import UnknownScenarioError, UnknownWorkloadError, WorkloadSourceError
from core.workloads import WorkloadCatalog


def test_resolve_keeps_entry_order(workloads):
    entries = workloads.resolve("mixed")
    assert [e.scenario_name for e in entries] == ["bar", "foo"]
    assert [e.tab for e in entries] == ["new", "1"]


def test_snake_case_keys_and_defaults(workloads):
    (entry,) = workloads.resolve("single")
    assert entry.scenario_name == "baz"
    assert entry.tab == "new"
    assert entry.duration == 0


def test_expand_override_or_default(workloads, registry):
    runs = workloads.expand("mixed", registry)
    # bar: override 0 -> registry default 20; foo: default 30, override 45
    assert [(r.scenario_name, r.tab, r.duration) for r in runs] == [("bar", "new", 20), ("foo", "1", 45)]
    assert runs[1].behavior == registry.lookup("foo").behavior


def test_resolve_unknown_workload(workloads):
    with pytest.raises(UnknownWorkloadError) as exc:
        workloads.resolve("nope")
    assert exc.value.workload == "nope"


def test_expand_entry_with_unregistered_scenario(registry):
    catalog = WorkloadCatalog.load([{"Name": "w", "Scenarios": [{"ScenarioName": "ghost"}]}])
    with pytest.raises(UnknownScenarioError, match="ghost"):
        catalog.expand("w", registry)


def test_numeric_tab_is_coerced_to_label():
    catalog = WorkloadCatalog.load([{"Name": "w", "Scenarios": [{"ScenarioName": "foo", "Tab": 2}]}])
    assert catalog.resolve("w")[0].tab == "2"


def test_load_json_file(tmp_path):
    path = tmp_path / "workloads.json"
    path.write_text(json.dumps([{"Name": "w", "Scenarios": [{"ScenarioName": "foo", "Tab": "new", "Duration": 12}]}]))
    catalog = WorkloadCatalog.load(path)
    assert catalog.names() == ["w"]
    assert catalog.resolve("w")[0].duration == 12


def test_load_yaml_file(tmp_path):
    path = tmp_path / "workloads.yaml"
    path.write_text(
        "- name: w\n"
        "  scenarios:\n"
        "    - scenario_name: foo\n"
        "      tab: new\n"
        "      duration: 0\n"
    )
    assert WorkloadCatalog.load(path).resolve("w")[0].scenario_name == "foo"


def test_load_missing_file(tmp_path):
    with pytest.raises(WorkloadSourceError, match="file not found"):
        WorkloadCatalog.load(tmp_path / "missing.json")


def test_load_malformed_json(tmp_path):
    path = tmp_path / "workloads.json"
    path.write_text("[{not json")
    with pytest.raises(WorkloadSourceError, match="cannot decode"):
        WorkloadCatalog.load(path)


@pytest.mark.parametrize("raw", [
    {"Name": "w"},                                                  # not a list
    [{"Scenarios": []}],                                            # no name
    [{"Name": "w", "Scenarios": [{"Tab": "new"}]}],                 # no scenario name
    [{"Name": "w", "Scenarios": [{"ScenarioName": "foo", "Duration": -1}]}],
    [{"Name": "w", "Scenarios": []}, {"Name": "w", "Scenarios": []}],
])
def test_load_rejects_bad_definitions(raw):
    with pytest.raises(WorkloadSourceError):
        WorkloadCatalog.load(raw)


def test_shipped_workloads_file_loads():
    from pathlib import Path
    from core.registry import build_scenario_registry

    root = Path(__file__).resolve().parents[1]
    catalog = WorkloadCatalog.load(root / "workloads.json")
    registry = build_scenario_registry()
    for name in catalog.names():
        assert catalog.expand(name, registry)
