from enum import Enum

class NodeKind(str, Enum):
    # decisions
    LAUNCH_STRATEGY = "launch-strategy"
    RATING = "rating"
    LAUNCH_OUTCOME = "launch-outcome"
    # terminals
    FAILED = "failed"
    NEGATIVE_SUCCESSFUL = "negative-successful"
    NEGATIVE_MODEST = "negative-modest"
    POSITIVE_SUCCESSFUL = "positive-successful"
    POSITIVE_MODEST = "positive-modest"
    NO_TESTING_SUCCESSFUL = "no-testing-successful"
    NO_TESTING_MODEST = "no-testing-modest"

    @property
    def is_terminal(self) -> bool:
        return self not in DECISION_KINDS

DECISION_KINDS = frozenset(
    {NodeKind.LAUNCH_STRATEGY, NodeKind.RATING, NodeKind.LAUNCH_OUTCOME}
)
