"""Single-pass windowing of changed positions into context-padded, merged hunk groups"""

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from linediff.errors import InvalidArgumentError


class HunkGatherer:
    """Expand ascending positions into windows [p - before, p + after], merging touching windows.

    With a separator configured, the marker is emitted once before each new
    (non-adjacent) group and every position in the group follows in ascending
    order. Without one, positions pass through unchanged.

    >>> list(HunkGatherer(1, 1, upper=10, separator=-1).gather([2, 3, 8]))
    [-1, 1, 2, 3, 4, -1, 7, 8, 9]
    """

    def __init__(
        self,
        before: int,
        after: int,
        upper: Optional[int] = None,
        separator: Any = None,
        ):
        if before < 0 or after < 0:
            raise InvalidArgumentError(f"radius must be >= 0, got before={before}, after={after}")
        if separator is not None:
            if upper is None:
                raise InvalidArgumentError("an upper bound is required when a separator is set")
            if upper < 1:
                raise InvalidArgumentError(f"upper bound must be >= 1, got {upper}")
        self.before = before
        self.after = after
        self.upper = upper
        self.separator = separator

    @property
    def windowed(self) -> bool:
        return self.separator is not None

    def window(self, position: int) -> tuple[int, int]:
        """Inclusive window around position, clipped to [0, upper - 1]."""
        return max(0, position - self.before), min(self.upper - 1, position + self.after)

    def gather(self, positions: Iterable[int]) -> Iterator[Any]:
        """Yield windowed positions (and separators) for an ascending stream of positions."""
        if not self.windowed:
            yield from positions
            return

        hi: Optional[int] = None
        for p in positions:
            if not 0 <= p < self.upper:
                raise InvalidArgumentError(f"position {p} outside [0, {self.upper})")
            lo, new_hi = self.window(p)
            if hi is None or lo > hi + 1:
                yield self.separator
                yield from range(lo, new_hi + 1)
                hi = new_hi
            elif new_hi > hi:
                yield from range(hi + 1, new_hi + 1)
                hi = new_hi


def split_groups(gathered: Iterable[Any], separator: Any) -> list[list[int]]:
    """Split gatherer output on its separator into per-hunk position lists."""
    groups: list[list[int]] = []
    for item in gathered:
        if item == separator:
            groups.append([])
        elif groups:
            groups[-1].append(item)
        else:
            groups.append([item])
    return [g for g in groups if g]
