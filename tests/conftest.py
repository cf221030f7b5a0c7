import pytest

from core.measuresets import default_measure_sets
from core.registry import build_scenario_registry
from core.workloads import WorkloadCatalog

SMALL_SCENARIOS = [
    {"name": "foo", "duration": 30, "steps": [{"type": "goto", "url": "https://foo.example"}]},
    {"name": "bar", "duration": 20, "steps": [{"type": "goto", "url": "https://bar.example"}]},
    {"name": "baz", "duration": 10, "steps": [{"type": "goto", "url": "about:blank"}]},
]

WORKLOADS = [
    {
        "Name": "mixed",
        "Scenarios": [
            {"ScenarioName": "bar", "Tab": "new", "Duration": 0},
            {"ScenarioName": "foo", "Tab": "1", "Duration": 45},
        ],
    },
    {"name": "single", "scenarios": [{"scenario_name": "baz"}]},
]


@pytest.fixture
def registry():
    return build_scenario_registry(SMALL_SCENARIOS)


@pytest.fixture
def workloads():
    return WorkloadCatalog.load(WORKLOADS)


@pytest.fixture
def measure_sets():
    return default_measure_sets()


@pytest.fixture
def parse(registry, workloads, measure_sets):
    from core.arguments import parse_arguments

    def _parse(*tokens):
        return parse_arguments(list(tokens), registry=registry, workloads=workloads, measure_sets=measure_sets)
    return _parse
