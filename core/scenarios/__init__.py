from .news_sites import NEWS_SCENARIOS
from .social_sites import SOCIAL_SCENARIOS
from .office_sites import OFFICE_SCENARIOS
from .general_sites import GENERAL_SCENARIOS

# -----------------------------------------------------
# Every scenario the harness knows about.
# Each entry: name (unique) / default duration in seconds / steps
# -----------------------------------------------------
SCENARIO_DEFINITIONS = [
    *NEWS_SCENARIOS,
    *SOCIAL_SCENARIOS,
    *OFFICE_SCENARIOS,
    *GENERAL_SCENARIOS,
]
