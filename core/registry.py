# core/registry.py
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from core.exceptions import DuplicateScenarioError, ScenarioDefinitionError, UnknownScenarioError
from core.schema import validate_steps

DEFAULT_TAB = "new"


@dataclass(frozen=True)
class ScenarioDescriptor:
    name: str                        # unique key, case-sensitive
    default_duration: int            # seconds
    behavior: Tuple[Dict[str, Any], ...] = field(default=(), compare=False)  # step list, owned by the executor
    tab: str = DEFAULT_TAB

    def __post_init__(self):
        if not self.name:
            raise ValueError("Scenario name must be non-empty")
        if not isinstance(self.default_duration, int) or self.default_duration <= 0:
            raise ValueError(f"Scenario '{self.name}' default_duration must be a positive int")


class ScenarioRegistry:
    """
    name -> ScenarioDescriptor.
    Filled once at startup through register(), then freeze(); everything after that only reads.
    """
    def __init__(self, descriptors: Optional[Iterable[ScenarioDescriptor]] = None):
        self._scenarios: Dict[str, ScenarioDescriptor] = {}
        self._frozen = False
        for d in descriptors or ():
            self.register(d)

    def register(self, descriptor: ScenarioDescriptor) -> None:
        if self._frozen:
            raise ScenarioDefinitionError(descriptor.name, "registry is frozen")
        if descriptor.name in self._scenarios:
            raise DuplicateScenarioError(descriptor.name)
        self._scenarios[descriptor.name] = descriptor

    def freeze(self) -> "ScenarioRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> ScenarioDescriptor:
        try:
            return self._scenarios[name]
        except KeyError:
            raise UnknownScenarioError(name) from None

    @property
    def scenarios(self) -> Mapping[str, ScenarioDescriptor]:
        return MappingProxyType(self._scenarios)

    def names(self) -> List[str]:
        return list(self._scenarios)

    def __contains__(self, name: object) -> bool:
        return name in self._scenarios

    def __len__(self) -> int:
        return len(self._scenarios)


def build_scenario_registry(definitions: Optional[Iterable[Dict[str, Any]]] = None) -> ScenarioRegistry:
    """
    Registers every known scenario. `definitions` defaults to the built-in
    catalog in core.scenarios; each item is {"name", "duration", "steps"}.
    Order does not matter here.
    """
    if definitions is None:
        from core.scenarios import SCENARIO_DEFINITIONS
        definitions = SCENARIO_DEFINITIONS

    registry = ScenarioRegistry()
    for item in definitions:
        name = item.get("name") if isinstance(item, dict) else None
        try:
            validate_steps(name, item["steps"])
            descriptor = ScenarioDescriptor(
                name=item["name"],
                default_duration=int(item["duration"]),
                behavior=tuple(item["steps"]),
                tab=item.get("tab", DEFAULT_TAB),
            )
        except KeyError as e:
            raise ScenarioDefinitionError(name, f"missing key {e}") from e
        except (TypeError, ValueError) as e:
            raise ScenarioDefinitionError(name, str(e)) from e
        registry.register(descriptor)
    return registry.freeze()
