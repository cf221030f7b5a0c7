class ArgumentsError(RuntimeError):
    """Base error for anything that stops a run configuration from being built."""


class UnsupportedBrowserError(ArgumentsError):
    """Raised when a browser name is not in the supported set."""

    def __init__(self, browser: str):
        self.browser = browser
        super().__init__(f"Unsupported browser '{browser}'")


class UnknownScenarioError(ArgumentsError):
    """Raised when a scenario name is not registered."""

    def __init__(self, scenario: str):
        self.scenario = scenario
        super().__init__(f"Unexpected scenario '{scenario}'")


class DuplicateScenarioError(ArgumentsError):
    """Raised when a scenario name is registered twice."""

    def __init__(self, scenario: str):
        self.scenario = scenario
        super().__init__(f"Scenario '{scenario}' is already registered")


class UnknownWorkloadError(ArgumentsError):
    """Raised when a workload name is not defined."""

    def __init__(self, workload: str):
        self.workload = workload
        super().__init__(f"Unexpected workload '{workload}'")


class UnknownMeasureSetError(ArgumentsError):
    """Raised when a measure set name is not available."""

    def __init__(self, measure_set: str):
        self.measure_set = measure_set
        super().__init__(f"Unexpected measure set '{measure_set}'")


class MissingArgumentValueError(ArgumentsError):
    """Raised when a flag is not followed by the value(s) it needs."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"Missing value for argument '{flag}'")


class InvalidNumberError(ArgumentsError):
    """Raised when a numeric flag value is not a positive integer."""

    def __init__(self, flag: str, value: str):
        self.flag = flag
        self.value = value
        super().__init__(f"Argument '{flag}' expects a positive integer, got '{value}'")


class UnrecognizedArgumentError(ArgumentsError):
    """Raised when a token in flag position is not a known flag."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unexpected argument encountered '{token}'")


class InvalidPathError(ArgumentsError):
    """Raised when a path argument is not a usable directory."""

    def __init__(self, path: str, reason: str = "The profile path does not exist"):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: '{path}'")


class ValidationConflictError(ArgumentsError):
    """Raised when flags are individually valid but inconsistent together."""


class WorkloadSourceError(ArgumentsError):
    """Raised when the workload definition source is missing or malformed."""

    def __init__(self, source, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid workload source '{source}': {reason}")


class MeasureSetSourceError(ArgumentsError):
    """Raised when a measure set definition source is missing or malformed."""

    def __init__(self, source, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid measure set source '{source}': {reason}")


class ScenarioDefinitionError(ArgumentsError):
    """Raised when a scenario definition cannot be registered."""

    def __init__(self, scenario, reason: str):
        self.scenario = scenario
        self.reason = reason
        super().__init__(f"Invalid scenario definition '{scenario}': {reason}")
