"""Diff entry point: solve the edit graph of a source pair and build its change set"""

import logging
from collections.abc import Sequence
from typing import Any

from linediff.core.changes import build_changes
from linediff.core.changeset import ChangeSet
from linediff.core.solver import solve
from linediff.core.source import SourcePair


logger = logging.getLogger("linediff.core.diff")


def run(source: SourcePair) -> ChangeSet:
    """Compute the minimal change set turning source.org into source.rev."""
    changes = build_changes(solve(source))
    logger.debug(
        "diff %r -> %r: %d change(s)", source.org.name, source.rev.name, len(changes),
    )
    return ChangeSet(source=source, changes=tuple(changes))


def diff_lines(org: Sequence[Any], rev: Sequence[Any], org_name: str = "", rev_name: str = "") -> ChangeSet:
    """Convenience wrapper: diff two plain sequences."""
    return run(SourcePair.of(org, rev, org_name, rev_name))
