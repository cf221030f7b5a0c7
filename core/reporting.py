# core/reporting.py
from __future__ import annotations
from typing import Any, Dict, List

from core.config import RunConfiguration


def to_dict(config: RunConfiguration) -> Dict[str, Any]:
    """Plain-data view of a configuration (behavior handles left out)."""
    return {
        "scenario_name": config.scenario_name,
        "browsers": list(config.browsers),
        "scenarios": [
            {"name": s.scenario_name, "tab": s.tab, "duration": s.duration}
            for s in config.scenarios
        ],
        "measure_sets": [m.name for m in config.measure_sets],
        "iterations": config.iterations,
        "max_attempts": config.max_attempts,
        "do_warmup": config.do_warmup,
        "using_trace_controller": config.using_trace_controller,
        "etl_path": config.etl_path,
        "browser_profile_path": config.browser_profile_path,
        "override_timeout": config.override_timeout,
        "do_post_processing": config.do_post_processing,
        "credential_path": config.credential_path,
    }


def format_summary(config: RunConfiguration) -> str:
    lines: List[str] = [
        f"Run: {config.scenario_name or '-'}",
        f"Browsers: {', '.join(config.browsers) or '-'}",
        f"Iterations: {config.iterations} | Max attempts: {config.max_attempts}",
        f"Warmup: {config.do_warmup} | No timeout: {config.override_timeout} | Post-processing: {config.do_post_processing}",
    ]
    if config.using_trace_controller:
        lines.append(f"Trace output: {config.etl_path}")
        lines.append(f"Measure sets: {', '.join(m.name for m in config.measure_sets)}")
    if config.browser_profile_path:
        lines.append(f"Profile: {config.browser_profile_path}")
    lines.append(f"Credentials: {config.credential_path}")
    lines.append("")
    lines.append("Scenarios:")
    total = 0
    for i, s in enumerate(config.scenarios, start=1):
        lines.append(f"  [{i}] {s.scenario_name}  tab={s.tab}  ({s.duration}s)")
        total += s.duration
    if not config.scenarios:
        lines.append("  (none)")
    lines.append(f"Total per iteration per browser: {total}s")
    return "\n".join(lines)
