"""The change set produced by one diff run, with its renderings and statistics"""

from __future__ import annotations

from dataclasses import dataclass

from linediff.core import render
from linediff.core.models import Change, DiffReport, DiffSummary
from linediff.core.source import SourcePair


@dataclass(frozen=True)
class ChangeSet:
    """Source pair plus its ordered, non-overlapping change regions. Read-only."""
    source:  SourcePair
    changes: tuple[Change, ...]

    @property
    def identical(self) -> bool:
        return not self.changes

    def as_unified_form_text(self, context: int = 3) -> list[str]:
        """Unified diff lines with context radius `context`."""
        return render.unified(self, context)

    def unify_texts(self) -> list[str]:
        return render.unify_texts(self)

    def unify_texts_with_numbers(self) -> list[str]:
        return render.unify_texts_with_numbers(self)

    def summary(self) -> DiffSummary:
        """Added/deleted/unchanged element counts."""
        added = sum(c.rev_len for c in self.changes)
        deleted = sum(c.org_len for c in self.changes)
        return DiffSummary(added=added, deleted=deleted, unchanged=self.source.org.size() - deleted)

    def to_report(self) -> DiffReport:
        org, rev = self.source.org, self.source.rev
        return DiffReport(
            org_name=org.name or None,
            rev_name=rev.name or None,
            org_size=org.size(),
            rev_size=rev.size(),
            summary=self.summary(),
            changes=list(self.changes),
        )
