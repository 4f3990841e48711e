"""Unit tests for core/diff.py, core/solver.py and core/changes.py"""

import random

import pytest

from linediff.core.changes import build_changes
from linediff.core.diff import diff_lines, run
from linediff.core.models import Change, ChangeType
from linediff.core.solver import Node, solve
from linediff.core.source import SourcePair
from linediff.errors import InternalDiffError


def _lcs_len(a: list, b: list) -> int:
    """Reference LCS length by dynamic programming."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for x in range(len(a)):
        for y in range(len(b)):
            table[x + 1][y + 1] = table[x][y] + 1 if a[x] == b[y] else max(table[x][y + 1], table[x + 1][y])
    return table[len(a)][len(b)]


def _assert_partition(org: list, rev: list, changes) -> None:
    """Changes plus the equal gaps between them cover both sequences exactly."""
    i = j = 0
    for c in changes:
        assert c.org_from >= i and c.rev_from >= j
        assert c.org_from - i == c.rev_from - j
        assert org[i:c.org_from] == rev[j:c.rev_from]
        i, j = c.org_to, c.rev_to
    assert len(org) - i == len(rev) - j
    assert org[i:] == rev[j:]


def _random_pairs(count: int, seed: int = 7):
    rnd = random.Random(seed)
    for _ in range(count):
        org = [rnd.choice("abc") for _ in range(rnd.randint(0, 9))]
        rev = [rnd.choice("abc") for _ in range(rnd.randint(0, 9))]
        yield org, rev


# --- concrete scenarios ---

def test_empty():
    """Two empty sequences produce no changes."""
    assert diff_lines([], []).changes == ()


def test_identical():
    """Identical sequences produce no changes."""
    assert diff_lines(["a", "b", "c"], ["a", "b", "c"]).changes == ()


def test_insertion():
    """A single added element is an insert with an empty org range."""
    changes = diff_lines(["a", "c"], ["a", "b", "c"]).changes
    assert changes == (Change.of(ChangeType.insert, 1, 1, 1, 2),)


def test_deletion():
    """A single removed element is a delete with an empty rev range."""
    changes = diff_lines(["a", "b", "c"], ["a", "c"]).changes
    assert changes == (Change.of(ChangeType.delete, 1, 2, 1, 1),)


def test_change():
    """A replaced element is a change spanning one element on each side."""
    changes = diff_lines(["a", "b", "c"], ["a", "x", "c"]).changes
    assert changes == (Change.of(ChangeType.change, 1, 2, 1, 2),)


def test_mixed(mixed_set):
    """Three separated replacements yield three change regions in order."""
    assert mixed_set.changes == (
        Change.of(ChangeType.change, 1, 2, 1, 2),
        Change.of(ChangeType.change, 3, 4, 3, 4),
        Change.of(ChangeType.change, 5, 6, 5, 6),
    )


def test_nothing_in_common():
    """Fully replaced content collapses into a single change region."""
    changes = diff_lines(["a", "b", "c"], ["d", "e", "f"]).changes
    assert changes == (Change.of(ChangeType.change, 0, 3, 0, 3),)


def test_insert_into_empty():
    """Diffing from an empty org is one insert of everything."""
    assert diff_lines([], ["a", "b"]).changes == (Change.of(ChangeType.insert, 0, 0, 0, 2),)


def test_delete_everything():
    """Diffing to an empty rev is one delete of everything."""
    assert diff_lines(["a", "b"], []).changes == (Change.of(ChangeType.delete, 0, 2, 0, 0),)


def test_append_at_end():
    """An element appended after the last org element inserts at org_from == len(org)."""
    assert diff_lines(["a"], ["a", "b"]).changes == (Change.of(ChangeType.insert, 1, 1, 1, 2),)


def test_leading_delete():
    """A removed first element is a delete starting at zero."""
    assert diff_lines(["x", "a"], ["a"]).changes == (Change.of(ChangeType.delete, 0, 1, 0, 0),)


def test_non_string_elements():
    """Any elements with value equality can be compared."""
    changes = diff_lines([1, (2, 3), None], [1, (2, 3), None, 4]).changes
    assert changes == (Change.of(ChangeType.insert, 3, 3, 3, 4),)


def test_run_keeps_source(mixed_pair):
    """The change set references the pair it was computed from."""
    assert run(mixed_pair).source is mixed_pair


# --- properties ---

@pytest.mark.parametrize("org,rev", list(_random_pairs(20)))
def test_determinism(org, rev):
    """Re-running on the same inputs yields the same change set."""
    assert diff_lines(org, rev).changes == diff_lines(org, rev).changes


@pytest.mark.parametrize("seq", [[], ["a"], list("abcabc"), list("aaaa")])
def test_identity(seq):
    """A sequence diffed against itself has no changes."""
    assert diff_lines(seq, list(seq)).changes == ()


@pytest.mark.parametrize("org,rev", list(_random_pairs(60)))
def test_minimal_and_partitioned(org, rev):
    """Changed element count equals the LCS-based edit distance, and gaps are equal runs."""
    changes = diff_lines(org, rev).changes
    changed = sum(c.org_len + c.rev_len for c in changes)
    assert changed == len(org) + len(rev) - 2 * _lcs_len(org, rev)
    _assert_partition(org, rev, changes)


@pytest.mark.parametrize("org,rev", list(_random_pairs(30, seed=11)))
def test_regions_are_separated(org, rev):
    """Consecutive regions never touch: an equal run separates them on both sides."""
    changes = diff_lines(org, rev).changes
    for a, b in zip(changes, changes[1:]):
        assert b.org_from > a.org_to and b.rev_from > a.rev_to


@pytest.mark.parametrize("org,rev", [
    (["a", "c"], ["a", "b", "c"]),
    (["a", "b", "c"], ["a", "x", "c"]),
    (["a", "b", "c", "d", "f", "g"], ["a", "x", "c", "e", "f", "h"]),
    ([], ["a", "b"]),
    (["a", "b", "c", "d"], ["a", "d"]),
])
def test_swap_symmetry(org, rev):
    """Swapping org and rev turns inserts into deletes and exchanges ranges."""
    forward = diff_lines(org, rev).changes
    backward = diff_lines(rev, org).changes
    assert backward == tuple(c.swapped() for c in forward)


# --- solver / builder internals ---

def test_solve_reaches_end(mixed_pair):
    """The terminal node sits at (len(org), len(rev))."""
    node = solve(mixed_pair)
    assert (node.i, node.j) == (6, 6)


def test_step_from_root_has_no_prev():
    """A step taken from the synthetic root starts the path."""
    assert Node.step(0, 0, Node.root()).prev is None


def test_consecutive_steps_collapse():
    """A step after a step links back to the first non-step node."""
    origin = Node(0, 0, False, None)
    down = Node.step(0, 1, origin)
    right = Node.step(1, 1, down)
    assert right.prev is origin


def test_step_after_snake_links_snake():
    """A step taken right after a snake keeps the snake as predecessor."""
    snake = Node.snake_of(2, 2, Node(0, 0, False, None))
    assert Node.step(2, 3, snake).prev is snake


def test_build_changes_rejects_malformed_path():
    """Two snakes in a row on the backward walk are an internal error."""
    origin = Node(0, 0, False, None)
    first = Node(1, 1, True, origin)
    second = Node(2, 2, True, first)
    terminal = Node(3, 3, False, second)
    with pytest.raises(InternalDiffError, match="illegal path"):
        build_changes(terminal)


def test_build_changes_skips_terminal_snake():
    """A terminal snake is stepped over before the walk starts."""
    source = SourcePair.of(["a", "b"], ["a", "b"])
    assert build_changes(solve(source)) == []
