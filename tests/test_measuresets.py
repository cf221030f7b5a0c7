import pytest

from core.exceptions import MeasureSetSourceError, UnknownMeasureSetError
from core.measuresets import default_measure_sets, load_measure_sets, lookup_measure_set


def test_defaults_contain_known_sets(measure_sets):
    assert {"cpuUsage", "diskUsage", "energy", "networkUsage", "refSet"} <= set(measure_sets)
    assert measure_sets["cpuUsage"].wpr_profile == "cpuUsage"


def test_lookup(measure_sets):
    assert lookup_measure_set(measure_sets, "energy").name == "energy"
    with pytest.raises(UnknownMeasureSetError) as exc:
        lookup_measure_set(measure_sets, "Energy")
    assert exc.value.measure_set == "Energy"


def test_load_from_yaml(tmp_path):
    path = tmp_path / "measuresets.yaml"
    path.write_text(
        "- Name: gpu\n"
        "  WprProfile: gpuUsage\n"
        "  TracingMode: File\n"
    )
    catalog = load_measure_sets(path)
    assert list(catalog) == ["gpu"]
    assert catalog["gpu"].tracing_mode == "File"


def test_load_rejects_duplicates_and_bad_entries(tmp_path):
    with pytest.raises(MeasureSetSourceError, match="duplicate"):
        load_measure_sets([{"name": "a", "wpr_profile": "a"}, {"name": "a", "wpr_profile": "b"}])
    with pytest.raises(MeasureSetSourceError):
        load_measure_sets([{"name": "a"}])
    with pytest.raises(MeasureSetSourceError, match="file not found"):
        load_measure_sets(tmp_path / "nope.json")


def test_catalog_is_read_only():
    catalog = default_measure_sets()
    with pytest.raises(TypeError):
        catalog["x"] = None
