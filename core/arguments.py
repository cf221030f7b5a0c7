"""
Command line interpreter for the harness.

Turns the raw token list into a RunConfiguration:
  - which browsers to run
  - which scenarios (directly, or through workloads) and for how long
  - iterations / attempts
  - trace capture + measure sets, post-processing, timeouts

Flags are matched case-insensitively and every flag is a single-dash word
(-browser / -b). List flags read values up to the next token that starts
with '-'. The first bad token aborts the whole parse; nothing partial is
handed back and nothing is written to disk unless the parse succeeds.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from core.browser import ALL_BROWSERS, all_browsers, merge_browsers, normalize_browser
from core.config import RunConfiguration, RunScenario
from core.exceptions import (
    InvalidNumberError,
    InvalidPathError,
    MissingArgumentValueError,
    UnrecognizedArgumentError,
    ValidationConflictError,
)
from core.measuresets import MeasureSetDescriptor, lookup_measure_set
from core.registry import ScenarioRegistry
from core.workloads import WorkloadCatalog

FLAG_PREFIX = "-"

USAGE = (
    "Usage: run_bet.py [-browser|-b [chrome|edge|firefox|opera|all] "
    "-scenario|-s <scenario1> <scenario2>] [-iterations|-i <iterationcount>] "
    "[-tracecontrolled|-tc <etlpath> -measureset|-ms <measureset1> <measureset2>] "
    "[-warmup] [-profile|-p <browser profile path>] [-attempts|-a <attempts to make per iteration>] "
    "[-notimeout] [-noprocessing|-np] [-workload|-w <workload name>] "
    "[-credentialpath|-cp <path to credentials json file>]"
)


class TokenStream:
    """Left-to-right cursor over the argument tokens with one token of lookahead."""

    def __init__(self, tokens: Iterable[str]):
        self._tokens = list(tokens)
        self._pos = 0

    def has_more(self) -> bool:
        return self._pos < len(self._tokens)

    def peek(self) -> Optional[str]:
        return self._tokens[self._pos] if self.has_more() else None

    def next(self) -> str:
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def take_value(self, flag: str) -> str:
        """Exactly one value; taken even if it looks like a flag."""
        if not self.has_more():
            raise MissingArgumentValueError(flag)
        return self.next()

    def take_values(self, flag: str) -> List[str]:
        """One or more values, stopping in front of the next flag-looking token."""
        values: List[str] = []
        while self.has_more() and not self.peek().startswith(FLAG_PREFIX):
            values.append(self.next())
        if not values:
            raise MissingArgumentValueError(flag)
        return values


class _ParseState:
    def __init__(self, registry, workloads, measure_sets):
        self.config = RunConfiguration()
        self.registry: ScenarioRegistry = registry
        self.workloads: WorkloadCatalog = workloads
        self.measure_sets: Mapping[str, MeasureSetDescriptor] = measure_sets
        self.etl_path: Optional[str] = None       # created only once everything is valid


def _positive_int(flag: str, value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise InvalidNumberError(flag, value)
    n = int(value)
    if n < 1:
        raise InvalidNumberError(flag, value)
    return n


# ===============================================================
#  Flag handlers: (stream, flag, state) -> None
# ===============================================================

def _on_browser(stream: TokenStream, flag: str, st: _ParseState) -> None:
    values = [v.lower() for v in stream.take_values(flag)]
    browsers = [normalize_browser(v) for v in values if v != ALL_BROWSERS]
    if ALL_BROWSERS in values:
        browsers = all_browsers()
    merge_browsers(st.config.browsers, browsers)


def _on_scenario(stream: TokenStream, flag: str, st: _ParseState) -> None:
    for name in stream.take_values(flag):
        d = st.registry.lookup(name)
        st.config.scenarios.append(RunScenario(d.name, d.tab, d.default_duration, d.behavior))
        st.config.add_display_name(name)


def _on_workload(stream: TokenStream, flag: str, st: _ParseState) -> None:
    name = stream.take_value(flag)
    st.config.scenarios.extend(st.workloads.expand(name, st.registry))


def _on_trace_controlled(stream: TokenStream, flag: str, st: _ParseState) -> None:
    st.etl_path = stream.take_value(flag)
    st.config.using_trace_controller = True


def _on_measure_set(stream: TokenStream, flag: str, st: _ParseState) -> None:
    for name in stream.take_values(flag):
        st.config.measure_sets.append(lookup_measure_set(st.measure_sets, name))


def _on_iterations(stream: TokenStream, flag: str, st: _ParseState) -> None:
    st.config.iterations = _positive_int(flag, stream.take_value(flag))


def _on_attempts(stream: TokenStream, flag: str, st: _ParseState) -> None:
    st.config.max_attempts = _positive_int(flag, stream.take_value(flag))


def _on_profile(stream: TokenStream, flag: str, st: _ParseState) -> None:
    path = stream.take_value(flag)
    if not os.path.isdir(path):
        raise InvalidPathError(path)
    st.config.browser_profile_path = path


def _on_credential_path(stream: TokenStream, flag: str, st: _ParseState) -> None:
    st.config.credential_path = stream.take_value(flag)


def _on_warmup(stream: TokenStream, flag: str, st: _ParseState) -> None:
    st.config.do_warmup = True


def _on_no_timeout(stream: TokenStream, flag: str, st: _ParseState) -> None:
    st.config.override_timeout = True


def _on_no_processing(stream: TokenStream, flag: str, st: _ParseState) -> None:
    st.config.do_post_processing = False


Handler = Callable[[TokenStream, str, _ParseState], None]

# -----------------------------------------------------
# flag (lower-case) -> handler
# -----------------------------------------------------
FLAG_HANDLERS: Dict[str, Handler] = {
    "-browser": _on_browser,            "-b": _on_browser,
    "-scenario": _on_scenario,          "-s": _on_scenario,
    "-workload": _on_workload,          "-w": _on_workload,
    "-tracecontrolled": _on_trace_controlled, "-tc": _on_trace_controlled,
    "-measureset": _on_measure_set,     "-ms": _on_measure_set,
    "-iterations": _on_iterations,      "-i": _on_iterations,
    "-attempts": _on_attempts,          "-a": _on_attempts,
    "-profile": _on_profile,            "-p": _on_profile,
    "-credentialpath": _on_credential_path, "-cp": _on_credential_path,
    "-noprocessing": _on_no_processing, "-np": _on_no_processing,
    "-warmup": _on_warmup,
    "-notimeout": _on_no_timeout,
}


def validate_configuration(config: RunConfiguration) -> None:
    # perf processing needs both the trace controller and at least one measure set
    if config.using_trace_controller and not config.measure_sets:
        raise ValidationConflictError("A measure set must be specified when using a trace controller.")
    if not config.using_trace_controller and config.measure_sets:
        raise ValidationConflictError("The tracing controller option must be specified when using measure sets.")


def _prepare_etl_path(raw: str) -> str:
    try:
        Path(raw).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise InvalidPathError(raw, f"Cannot create trace output directory ({e.strerror})") from e
    return os.path.abspath(raw)


def parse_arguments(
    tokens: Iterable[str],
    *,
    registry: ScenarioRegistry,
    workloads: WorkloadCatalog,
    measure_sets: Mapping[str, MeasureSetDescriptor],
) -> RunConfiguration:
    """
    Returns a fully validated RunConfiguration or raises the first
    ArgumentsError encountered.
    """
    st = _ParseState(registry, workloads, measure_sets)
    stream = TokenStream(tokens)

    while stream.has_more():
        token = stream.next()
        handler = FLAG_HANDLERS.get(token.lower())
        if handler is None:
            raise UnrecognizedArgumentError(token)
        handler(stream, token, st)

    validate_configuration(st.config)

    if st.etl_path is not None:
        st.config.etl_path = _prepare_etl_path(st.etl_path)
    return st.config
