from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from launchtree.models.params import LaunchParams
from launchtree.models.types import NodeKind


@dataclass(frozen=True, eq=False)
class Node:
    """
    One node of the launch tree.

    Decision nodes (launch-strategy, rating, launch-outcome) pick a child from
    their params. Terminal nodes hold a dollar value and have no children.
    Compared by identity so a shared leaf stays one node.
    """

    kind: NodeKind
    name: str
    params: LaunchParams
    left: Optional[Node] = None
    middle: Optional[Node] = None
    right: Optional[Node] = None
    value: Optional[float] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind.is_terminal

    def select_next(self) -> Optional[Node]:
        p = self.params

        if self.kind == NodeKind.LAUNCH_STRATEGY:
            return self.left if p.uses_market_testing else self.right

        if self.kind == NodeKind.RATING:
            return self.right if p.has_positive_rating else self.left

        if self.kind == NodeKind.LAUNCH_OUTCOME:
            if p.successful_launch:
                return self.right
            if p.modest_launch:
                return self.middle
            return self.left

        # Terminal
        return None


def terminal(kind: NodeKind, params: LaunchParams, value: float) -> Node:
    if not kind.is_terminal:
        raise ValueError(f"{kind.value} is a decision kind, not a terminal")
    return Node(kind=kind, name=f"{kind.value}-terminal", params=params, value=value)


def decision(
    kind: NodeKind,
    params: LaunchParams,
    name: Optional[str] = None,
    left: Optional[Node] = None,
    middle: Optional[Node] = None,
    right: Optional[Node] = None,
) -> Node:
    if kind.is_terminal:
        raise ValueError(f"{kind.value} is a terminal kind, not a decision")
    return Node(
        kind=kind,
        name=name or kind.value,
        params=params,
        left=left,
        middle=middle,
        right=right,
    )
