# core/measuresets.py
from __future__ import annotations
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.exceptions import MeasureSetSourceError, UnknownMeasureSetError
from utils.yaml_io import read_yaml


class MeasureSetDescriptor(BaseModel):
    """
    What the trace/perf collaborator needs to know about one measure set.
    The argument parser only selects these by name.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1, alias="Name")
    wpr_profile: str = Field(alias="WprProfile")
    tracing_mode: str = Field(default="Memory", alias="TracingMode")   # "Memory" / "File"
    description: Optional[str] = Field(default=None, alias="Description")


_DEFAULTS: List[Dict[str, Any]] = [
    {"name": "cpuUsage", "wpr_profile": "cpuUsage", "tracing_mode": "Memory",
     "description": "CPU time per process and module"},
    {"name": "diskUsage", "wpr_profile": "diskUsage", "tracing_mode": "File",
     "description": "Disk IO per process"},
    {"name": "energy", "wpr_profile": "energy", "tracing_mode": "File",
     "description": "Estimated energy use from the system energy meter"},
    {"name": "networkUsage", "wpr_profile": "networkUsage", "tracing_mode": "File",
     "description": "Bytes sent/received per process"},
    {"name": "refSet", "wpr_profile": "refSet", "tracing_mode": "Memory",
     "description": "Reference set (working memory) per process"},
    {"name": "responsiveness", "wpr_profile": "responsiveness", "tracing_mode": "Memory",
     "description": "Input delay and UI thread hangs"},
]


def _index(items: List[MeasureSetDescriptor], source) -> Mapping[str, MeasureSetDescriptor]:
    out: Dict[str, MeasureSetDescriptor] = {}
    for ms in items:
        if ms.name in out:
            raise MeasureSetSourceError(source, f"duplicate measure set '{ms.name}'")
        out[ms.name] = ms
    return MappingProxyType(out)


def default_measure_sets() -> Mapping[str, MeasureSetDescriptor]:
    return _index([MeasureSetDescriptor.model_validate(d) for d in _DEFAULTS], "<built-in>")


def load_measure_sets(source: Union[str, Path, List[Dict[str, Any]]]) -> Mapping[str, MeasureSetDescriptor]:
    """Reads a list of measure set definitions from a JSON/YAML file or an already-decoded list."""
    if isinstance(source, (str, Path)):
        try:
            raw = read_yaml(Path(source))
        except FileNotFoundError:
            raise MeasureSetSourceError(source, "file not found") from None
        except Exception as e:
            raise MeasureSetSourceError(source, f"cannot decode: {e}") from e
    else:
        raw = source

    if not isinstance(raw, list):
        raise MeasureSetSourceError(source, "top level must be a list")
    try:
        items = [MeasureSetDescriptor.model_validate(d) for d in raw]
    except ValidationError as e:
        raise MeasureSetSourceError(source, str(e)) from e
    return _index(items, source)


def lookup_measure_set(catalog: Mapping[str, MeasureSetDescriptor], name: str) -> MeasureSetDescriptor:
    ms = catalog.get(name)
    if ms is None:
        raise UnknownMeasureSetError(name)
    return ms
