"""Diff result models: typed change regions, summary counts, and the serialisable report"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ChangeType(str, Enum):
    insert = "insert"
    delete = "delete"
    change = "change"


class Change(BaseModel):
    """One change region; both ranges are half-open [from, to) element indices."""
    model_config = ConfigDict(frozen=True)

    type:     ChangeType
    org_from: int = Field(..., ge=0)
    org_to:   int = Field(..., ge=0)
    rev_from: int = Field(..., ge=0)
    rev_to:   int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "Change":
        if self.org_to < self.org_from or self.rev_to < self.rev_from:
            raise ValueError("range end precedes range start")
        if self.type == ChangeType.insert and not (self.org_from == self.org_to and self.rev_to > self.rev_from):
            raise ValueError("insert must have an empty org range and a non-empty rev range")
        if self.type == ChangeType.delete and not (self.rev_from == self.rev_to and self.org_to > self.org_from):
            raise ValueError("delete must have an empty rev range and a non-empty org range")
        if self.type == ChangeType.change and (self.org_from == self.org_to or self.rev_from == self.rev_to):
            raise ValueError("change must have non-empty org and rev ranges")
        return self

    @classmethod
    def of(cls, type: ChangeType, org_from: int, org_to: int, rev_from: int, rev_to: int) -> "Change":
        """Positional constructor, in (type, orgFrom, orgTo, revFrom, revTo) order."""
        return cls(type=type, org_from=org_from, org_to=org_to, rev_from=rev_from, rev_to=rev_to)

    @property
    def org_len(self) -> int:
        return self.org_to - self.org_from

    @property
    def rev_len(self) -> int:
        return self.rev_to - self.rev_from

    def swapped(self) -> "Change":
        """The same region seen from the other side: insert <-> delete, ranges exchanged."""
        flipped = {ChangeType.insert: ChangeType.delete, ChangeType.delete: ChangeType.insert}
        return Change.of(flipped.get(self.type, self.type), self.rev_from, self.rev_to, self.org_from, self.org_to)


class DiffSummary(BaseModel):
    """Element counts of a diff; a change region counts as deletions plus additions."""
    added:     int = 0
    deleted:   int = 0
    unchanged: int = 0

    @property
    def distance(self) -> int:
        """Edit distance: number of inserted plus deleted elements."""
        return self.added + self.deleted


class DiffReport(BaseModel):
    """Serialisable view of a change set (names, counts, change list)."""
    org_name: Optional[str] = None
    rev_name: Optional[str] = None
    org_size: int
    rev_size: int
    summary:  DiffSummary
    changes:  list[Change] = []
