from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from launchtree.tree.nodes import Node


def walk(root: Optional[Node]) -> Iterator[Node]:
    """Yield the root and every node chosen after it, ending on the terminal."""
    node = root
    while node is not None:
        yield node
        node = node.select_next()


def travel_path(root: Optional[Node]) -> List[str]:
    return [n.name for n in walk(root)]


def get_result(
    root: Optional[Node],
    track_path: bool = False,
    echo: Callable[[str], None] = print,
) -> Optional[Node]:
    """
    Walk the tree from `root` and return the terminal node it lands on.

    With `track_path` the visited node names are echoed as a numbered list.
    A blank line is always echoed last, ahead of the report. Echoing has no
    effect on the returned node.
    """
    if track_path:
        echo("Displaying travel path...")

    result: Optional[Node] = None
    for step, node in enumerate(walk(root), start=1):
        if track_path:
            echo(f"{step}. {node.name}")
        result = node

    echo("")
    return result
