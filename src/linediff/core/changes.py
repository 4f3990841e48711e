"""Backward walk of a solved edit path into an ordered list of typed change regions"""

from collections import deque

from linediff.core.models import Change, ChangeType
from linediff.core.solver import Node
from linediff.errors import InternalDiffError


def _classify(pi: int, pj: int, i: int, j: int) -> ChangeType:
    if pi == i and pj != j:
        return ChangeType.insert
    if pi != i and pj == j:
        return ChangeType.delete
    return ChangeType.change


def build_changes(path: Node) -> list[Change]:
    """Convert the terminal node of an edit path into forward-ordered Change regions.

    Snake nodes are pure matches and are stepped over; every remaining step
    node spans one region from its predecessor's position to its own.
    """
    changes: deque[Change] = deque()
    node = path.prev if path.snake else path

    while node is not None and node.prev is not None and node.prev.j >= 0:
        if node.snake:
            raise InternalDiffError(f"illegal path: unexpected snake node at ({node.i}, {node.j})")

        i, j = node.i, node.j
        node = node.prev
        changes.appendleft(Change.of(_classify(node.i, node.j, i, j), node.i, i, node.j, j))

        if node.snake:
            node = node.prev

    return list(changes)
