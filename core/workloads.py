# core/workloads.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.config import RunScenario
from core.exceptions import UnknownWorkloadError, WorkloadSourceError
from core.registry import ScenarioRegistry
from utils.yaml_io import read_yaml


class WorkloadEntry(BaseModel):
    """
    One scenario reference inside a workload.
    duration == 0 -> use the scenario's registered default.
    Accepts both the historic workloads.json keys (ScenarioName/Tab/Duration) and snake_case.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    scenario_name: str = Field(min_length=1, alias="ScenarioName")
    tab: str = Field(default="new", alias="Tab")
    duration: int = Field(default=0, ge=0, alias="Duration")

    @field_validator("tab", mode="before")
    @classmethod
    def _tab_as_str(cls, v):
        # tabs are labels ("new", "1", "2"...), YAML happily gives us ints
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v


class Workload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1, alias="Name")
    scenarios: List[WorkloadEntry] = Field(default_factory=list, alias="Scenarios")


class WorkloadCatalog:
    """name -> Workload, loaded once from the workload definition source."""

    def __init__(self, workloads: Optional[List[Workload]] = None):
        self._workloads: Dict[str, Workload] = {}
        for w in workloads or []:
            self._workloads[w.name] = w

    @classmethod
    def load(cls, source: Union[str, Path, List[Dict[str, Any]]]) -> "WorkloadCatalog":
        if isinstance(source, (str, Path)):
            try:
                raw = read_yaml(Path(source))
            except FileNotFoundError:
                raise WorkloadSourceError(source, "file not found") from None
            except Exception as e:
                raise WorkloadSourceError(source, f"cannot decode: {e}") from e
        else:
            raw = source

        if not isinstance(raw, list):
            raise WorkloadSourceError(source, "top level must be a list of workloads")
        try:
            workloads = [Workload.model_validate(w) for w in raw]
        except ValidationError as e:
            raise WorkloadSourceError(source, str(e)) from e

        seen = set()
        for w in workloads:
            if w.name in seen:
                raise WorkloadSourceError(source, f"duplicate workload '{w.name}'")
            seen.add(w.name)
        return cls(workloads)

    def resolve(self, name: str) -> List[WorkloadEntry]:
        w = self._workloads.get(name)
        if w is None:
            raise UnknownWorkloadError(name)
        return list(w.scenarios)

    def expand(self, name: str, registry: ScenarioRegistry) -> List[RunScenario]:
        """Turns a workload into run-ready scenarios, in the workload's own order."""
        out: List[RunScenario] = []
        for entry in self.resolve(name):
            descriptor = registry.lookup(entry.scenario_name)
            duration = descriptor.default_duration
            if entry.duration > 0:
                duration = entry.duration
            out.append(RunScenario(entry.scenario_name, entry.tab, duration, descriptor.behavior))
        return out

    def names(self) -> List[str]:
        return list(self._workloads)

    def __contains__(self, name: object) -> bool:
        return name in self._workloads

    def __len__(self) -> int:
        return len(self._workloads)
