from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from core.measuresets import MeasureSetDescriptor

DEFAULT_WORKLOADS_PATH = "workloads.json"
DEFAULT_CREDENTIAL_PATH = "credentials.json"
SCENARIO_NAME_SEPARATOR = "-"


@dataclass(frozen=True)
class RunScenario:
    scenario_name: str
    tab: str
    duration: int                                   # seconds, already resolved
    behavior: Tuple[Dict[str, Any], ...] = field(default=(), compare=False, repr=False)


@dataclass
class RunConfiguration:
    """Everything the execution side needs to know about one harness run."""
    scenarios: List[RunScenario] = field(default_factory=list)
    browsers: List[str] = field(default_factory=list)
    measure_sets: List["MeasureSetDescriptor"] = field(default_factory=list)
    scenario_name: str = ""
    browser_profile_path: str = ""
    do_warmup: bool = False
    iterations: int = 1
    using_trace_controller: bool = False
    etl_path: str = ""
    max_attempts: int = 3
    override_timeout: bool = False
    do_post_processing: bool = True
    credential_path: str = DEFAULT_CREDENTIAL_PATH

    def add_display_name(self, name: str) -> None:
        if not self.scenario_name:
            self.scenario_name = name
        else:
            self.scenario_name = self.scenario_name + SCENARIO_NAME_SEPARATOR + name


@dataclass(frozen=True)
class Settings:
    workloads_path: Path
    measure_sets_path: Optional[Path]
    quiet: bool


def load_settings(env=os.environ) -> Settings:
    ms = env.get("BET_MEASURESETS")
    return Settings(
        workloads_path=Path(env.get("BET_WORKLOADS") or DEFAULT_WORKLOADS_PATH),
        measure_sets_path=Path(ms) if ms else None,
        quiet=env.get("BET_QUIET") == "1",
    )
