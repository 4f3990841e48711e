"""Myers O(ND) shortest-edit-script search over the implicit edit graph of a SourcePair"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from linediff.core.source import SourcePair
from linediff.errors import InternalDiffError


logger = logging.getLogger("linediff.core.solver")


@dataclass(frozen=True)
class Node:
    """A point on the edit path; snake nodes end a run of matched elements."""
    i:     int
    j:     int
    snake: bool
    prev:  Optional[Node] = field(default=None, repr=False, compare=False)

    @classmethod
    def root(cls) -> Node:
        """Synthetic start node; j = -1 marks it as outside the graph."""
        return cls(0, -1, True, None)

    @classmethod
    def step(cls, i: int, j: int, prev: Optional[Node]) -> Node:
        """A single insert/delete step linked to its nearest enclosing snake (or the origin step)."""
        return cls(i, j, False, _logical_prev(prev))

    @classmethod
    def snake_of(cls, i: int, j: int, prev: Node) -> Node:
        return cls(i, j, True, prev)

    @property
    def is_root(self) -> bool:
        return self.i < 0 or self.j < 0


def _logical_prev(node: Optional[Node]) -> Optional[Node]:
    """Follow prev through consecutive step nodes so adjacent steps collapse into one region."""
    while node is not None:
        if node.is_root:
            return None
        if node.snake or node.prev is None:
            return node
        node = node.prev
    return None


def solve(source: SourcePair) -> Node:
    """Return the terminal node of a shortest edit path from (0, 0) to (n, m).

    Diagonals k = i - j are scanned for each edit distance d; a down move
    (insertion) is preferred when k == -d or the k+1 diagonal reaches further.
    """
    n = source.org.size()
    m = source.rev.size()

    max_d = n + m + 1
    mid = max_d
    diagonal: list[Optional[Node]] = [None] * (2 * max_d + 1)
    diagonal[mid + 1] = Node.root()

    for d in range(max_d):
        for k in range(-d, d + 1, 2):
            mk = mid + k
            if k == -d or (k != d and diagonal[mk - 1].i < diagonal[mk + 1].i):
                prev = diagonal[mk + 1]
                i = prev.i
            else:
                prev = diagonal[mk - 1]
                i = prev.i + 1
            diagonal[mk - 1] = None  # no longer read

            j = i - k
            node = Node.step(i, j, prev)

            while i < n and j < m and source.equals_at(i, j):
                i += 1
                j += 1

            if i != node.i:
                node = Node.snake_of(i, j, node)

            diagonal[mk] = node

            if i >= n and j >= m:
                logger.debug("edit path found: n=%d m=%d d=%d", n, m, d)
                return node

    raise InternalDiffError(f"could not find a diff path (n={n}, m={m})")
