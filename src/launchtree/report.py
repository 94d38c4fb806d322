from __future__ import annotations

from typing import Optional

from launchtree.models.types import NodeKind
from launchtree.tree.nodes import Node

UNKNOWN_RESULT = "Unexpected or Unknown result...."

LABELS = {
    NodeKind.FAILED: "Failed Launch",
    NodeKind.NEGATIVE_SUCCESSFUL: "Negative Successful Launch",
    NodeKind.NEGATIVE_MODEST: "Negative Modest Launch",
    NodeKind.POSITIVE_SUCCESSFUL: "Positive Successful Launch",
    NodeKind.POSITIVE_MODEST: "Positive Modest Launch",
    NodeKind.NO_TESTING_SUCCESSFUL: "No Testing Successful Launch",
    NodeKind.NO_TESTING_MODEST: "No Testing Modest Launch",
}


def classify(node: Optional[Node]) -> Optional[str]:
    if node is None or node.value is None:
        return None
    return LABELS.get(node.kind)


def format_value(value: float) -> str:
    return f"${value:,.2f}"


def format_report(node: Optional[Node]) -> str:
    label = classify(node)
    if label is None:
        return UNKNOWN_RESULT
    return f"{label} with value: {format_value(node.value)}"
