from __future__ import annotations

from typing import Dict

from launchtree.models.params import LaunchParams
from launchtree.models.types import NodeKind
from launchtree.tree.nodes import Node, decision, terminal

TERMINAL_VALUES: Dict[NodeKind, float] = {
    NodeKind.FAILED: 0.00,
    NodeKind.NEGATIVE_SUCCESSFUL: 75_000.00,
    NodeKind.NEGATIVE_MODEST: 50_000.00,
    NodeKind.POSITIVE_SUCCESSFUL: 150_000.00,
    NodeKind.POSITIVE_MODEST: 75_000.00,
    NodeKind.NO_TESTING_SUCCESSFUL: 100_000.00,
    NodeKind.NO_TESTING_MODEST: 50_000.00,
}


def _outcome(
    name: str, params: LaunchParams, success: Node, modest: Node, failed: Node
) -> Node:
    return decision(
        NodeKind.LAUNCH_OUTCOME,
        params,
        name=name,
        left=failed,
        middle=modest,
        right=success,
    )


def create_tree(params: LaunchParams) -> Node:
    """
    Build the fixed launch tree and return its root.

    Layout:
      launch-strategy
        left  (market testing) -> rating
          left  (negative) -> negative-testing-outcome
          right (positive) -> positive-testing-outcome
        right (no testing)     -> no-testing-outcome

    Every outcome node sends successful -> right, modest -> middle and
    everything else -> left, to one failed terminal shared by all three.
    """
    def leaf(kind: NodeKind) -> Node:
        return terminal(kind, params, TERMINAL_VALUES[kind])

    failed = leaf(NodeKind.FAILED)

    no_testing = _outcome(
        "no-testing-outcome",
        params,
        success=leaf(NodeKind.NO_TESTING_SUCCESSFUL),
        modest=leaf(NodeKind.NO_TESTING_MODEST),
        failed=failed,
    )
    positive_testing = _outcome(
        "positive-testing-outcome",
        params,
        success=leaf(NodeKind.POSITIVE_SUCCESSFUL),
        modest=leaf(NodeKind.POSITIVE_MODEST),
        failed=failed,
    )
    negative_testing = _outcome(
        "negative-testing-outcome",
        params,
        success=leaf(NodeKind.NEGATIVE_SUCCESSFUL),
        modest=leaf(NodeKind.NEGATIVE_MODEST),
        failed=failed,
    )

    rating = decision(
        NodeKind.RATING, params, left=negative_testing, right=positive_testing
    )

    return decision(
        NodeKind.LAUNCH_STRATEGY, params, left=rating, right=no_testing
    )
