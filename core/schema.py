# core/schema.py
from __future__ import annotations
from typing import Any, Dict, Sequence

STEP_TYPES = {"goto", "click", "scroll", "wait", "type", "press", "new_tab", "switch_tab"}


def _require(d: Dict[str, Any], key: str, msg: str):
    if key not in d or d[key] in (None, ""):
        raise ValueError(msg)


def validate_steps(name: str, steps: Sequence[Dict[str, Any]]) -> None:
    """
    Checks the step list that backs a scenario. The list is handed as-is to
    whatever drives the browser, so only the shape is checked here.
    """
    if not isinstance(steps, (list, tuple)) or not steps:
        raise ValueError(f"Scenario '{name}' must have a non-empty step list")

    for i, st in enumerate(steps, start=1):
        if not isinstance(st, dict):
            raise ValueError(f"Scenario '{name}' step {i} must be a dict")
        t = (st.get("type") or "").strip().lower()
        if not t:
            raise ValueError(f"Scenario '{name}' step {i} missing 'type'")
        if t not in STEP_TYPES:
            raise ValueError(f"Scenario '{name}' step {i} has unknown type '{t}'")

        if t == "goto":
            _require(st, "url", f"Scenario '{name}' step {i} 'goto' requires 'url'")
            url = str(st["url"])
            if not (url.startswith("http://") or url.startswith("https://") or url == "about:blank"):
                raise ValueError(f"Scenario '{name}' step {i} 'goto' url must be absolute")
        if t in {"click", "type", "press"}:
            _require(st, "selector", f"Scenario '{name}' step {i} '{t}' requires 'selector'")
        if t in {"type", "press"}:
            _require(st, "value", f"Scenario '{name}' step {i} '{t}' requires 'value'")

        if t in {"wait", "scroll"}:
            # seconds for wait, page count for scroll
            v = st.get("value", 1)
            if not isinstance(v, (int, float)) or isinstance(v, bool) or v <= 0:
                raise ValueError(f"Scenario '{name}' step {i} '{t}' value must be a positive number")

        if "repeat" in st and (not isinstance(st["repeat"], int) or st["repeat"] < 1):
            raise ValueError(f"Scenario '{name}' step {i} 'repeat' must be int >= 1")
