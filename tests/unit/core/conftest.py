"""Shared fixtures for core unit tests"""

import pytest

from linediff.core.diff import run
from linediff.core.source import SourcePair


MIXED_ORG = ["a", "b", "c", "d", "f", "g"]
MIXED_REV = ["a", "x", "c", "e", "f", "h"]

LONG_ORG = ["a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "k", "l", "m"]
LONG_REV = ["a", "X", "c", "d", "e", "f", "g", "h", "i", "j", "k", "Y", "m"]


@pytest.fixture(name="mixed_pair")
def mixed_pair_fixture():
    return SourcePair.of(MIXED_ORG, MIXED_REV, "org.txt", "rev.txt")


@pytest.fixture(name="mixed_set")
def mixed_set_fixture(mixed_pair):
    return run(mixed_pair)


@pytest.fixture(name="long_set")
def long_set_fixture():
    return run(SourcePair.of(LONG_ORG, LONG_REV, "org.txt", "rev.txt"))
