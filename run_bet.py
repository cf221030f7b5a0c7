import sys
from typing import List, Optional

from core.arguments import USAGE, parse_arguments
from core.config import load_settings
from core.exceptions import ArgumentsError
from core.measuresets import default_measure_sets, load_measure_sets
from core.registry import build_scenario_registry
from core.reporting import format_summary
from core.workloads import WorkloadCatalog

HELP_TOKENS = {"-help", "-h", "-?", "/?"}


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1 and args[0].lower() in HELP_TOKENS:
        print(USAGE)
        return 0

    settings = load_settings()
    try:
        registry = build_scenario_registry()
        workloads = WorkloadCatalog.load(settings.workloads_path)
        if settings.measure_sets_path:
            measure_sets = load_measure_sets(settings.measure_sets_path)
        else:
            measure_sets = default_measure_sets()
        config = parse_arguments(args, registry=registry, workloads=workloads, measure_sets=measure_sets)
    except ArgumentsError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    if not settings.quiet:
        print(f"[bet] {len(registry)} scenarios, {len(workloads)} workloads, {len(measure_sets)} measure sets available")
        print(format_summary(config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
