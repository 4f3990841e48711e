"""Text renderings of a change set: unified diff hunks and full merged listings"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from linediff.core.hunks import HunkGatherer, split_groups
from linediff.core.models import Change, ChangeType
from linediff.errors import InvalidArgumentError

if TYPE_CHECKING:
    from linediff.core.changeset import ChangeSet


logger = logging.getLogger("linediff.core.render")

HUNK_BREAK = -1


# --- unified diff ---

def _anchors(changes: list[Change], org_size: int) -> Iterator[int]:
    """Org-side positions touched by each change; an insertion anchors at its org_from."""
    for c in changes:
        if c.type == ChangeType.insert:
            yield min(c.org_from, org_size - 1)
        else:
            yield from range(c.org_from, c.org_to)


def _group_changes(changes: list[Change], org_size: int, context: int) -> list[list[Change]]:
    """Group changes whose context windows overlap or touch."""
    if not changes:
        return []
    if org_size == 0:
        return [list(changes)]

    gatherer = HunkGatherer(context, context, upper=org_size, separator=HUNK_BREAK)
    windows = [(g[0], g[-1]) for g in split_groups(gatherer.gather(_anchors(changes, org_size)), HUNK_BREAK)]

    groups: list[list[Change]] = [[] for _ in windows]
    w = 0
    for c in changes:
        anchor = min(c.org_from, org_size - 1)
        while windows[w][1] < anchor:
            w += 1
        groups[w].append(c)
    return [g for g in groups if g]


def _range(start: int, count: int) -> str:
    """Unified range 'start,count' (1-based); an empty range names the line before it."""
    return f"{start + 1 if count else start},{count}"


def _hunk(group: list[Change], org: Any, rev: Any, context: int) -> list[str]:
    first, last = group[0], group[-1]
    org_start = max(0, first.org_from - context)
    org_end = min(org.size(), last.org_to + context)
    rev_start = first.rev_from - (first.org_from - org_start)
    rev_end = last.rev_to + (org_end - last.org_to)

    lines = [f"@@ -{_range(org_start, org_end - org_start)} +{_range(rev_start, rev_end - rev_start)} @@"]
    i = org_start
    for c in group:
        lines.extend(f" {org.get(x)}" for x in range(i, c.org_from))
        lines.extend(f"-{org.get(x)}" for x in range(c.org_from, c.org_to))
        lines.extend(f"+{rev.get(x)}" for x in range(c.rev_from, c.rev_to))
        i = c.org_to
    lines.extend(f" {org.get(x)}" for x in range(i, org_end))
    return lines


def unified(change_set: ChangeSet, context: int = 3) -> list[str]:
    """Render change_set as unified-diff lines (no terminators); empty when nothing changed."""
    if context < 0:
        raise InvalidArgumentError(f"context must be >= 0, got {context}")

    source = change_set.source
    changes = change_set.changes
    if not changes:
        return []

    lines: list[str] = []
    if source.named():
        lines.append(f"--- {source.org.name}")
        lines.append(f"+++ {source.rev.name}")

    groups = _group_changes(changes, source.org.size(), context)
    for group in groups:
        lines.extend(_hunk(group, source.org, source.rev, context))
    logger.debug("rendered %d hunk(s) from %d change(s)", len(groups), len(changes))
    return lines


# --- full listings ---

def walk(change_set: ChangeSet) -> Iterator[tuple[int, int, Any]]:
    """Yield (i, j, element) for every line in merged order; -1 marks the side a line is absent from."""
    org, rev = change_set.source.org, change_set.source.rev
    i = j = 0
    for c in change_set.changes:
        while i < c.org_from:
            yield i, j, org.get(i)
            i += 1
            j += 1
        for x in range(c.org_from, c.org_to):
            yield x, -1, org.get(x)
        for y in range(c.rev_from, c.rev_to):
            yield -1, y, rev.get(y)
        i, j = c.org_to, c.rev_to
    while i < org.size():
        yield i, j, org.get(i)
        i += 1
        j += 1


def unify_texts(change_set: ChangeSet) -> list[str]:
    """Every line of both sides, prefixed '  ' (common), '- ' (org only) or '+ ' (rev only)."""
    lines = []
    for i, j, text in walk(change_set):
        if i >= 0 and j >= 0:
            lines.append(f"  {text}")
        elif i >= 0:
            lines.append(f"- {text}")
        else:
            lines.append(f"+ {text}")
    return lines


def unify_texts_with_numbers(change_set: ChangeSet) -> list[str]:
    """Full listing with zero-padded 1-based org/rev line numbers."""
    w = max(4, len(str(change_set.source.size_max())))
    pad = " " * w
    lines = []
    for i, j, text in walk(change_set):
        if i >= 0 and j >= 0:
            lines.append(f" {i + 1:0{w}d}  {j + 1:0{w}d} :    {text}")
        elif i >= 0:
            lines.append(f" {i + 1:0{w}d}  {pad} : -  {text}")
        else:
            lines.append(f" {pad}  {j + 1:0{w}d} : +  {text}")
    return lines
