"""Diff inputs: named, indexable sources and the org/rev pair compared by the engine"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any


LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Source:
    """A read-only indexed sequence of elements with an optional display name."""
    items: Sequence[Any]
    name:  str = ""

    @classmethod
    def of(cls, items: Sequence[Any], name: str = "") -> Source:
        """Wrap an already materialized sequence; lists are copied to a tuple."""
        return cls(items=tuple(items) if isinstance(items, list) else items, name=name)

    @classmethod
    def from_text(cls, text: str, name: str = "") -> Source:
        """Split text on \\n, \\r\\n or \\r (terminators dropped); a final terminator adds no empty line."""
        lines = LINE_BREAK_RE.split(text)
        if lines[-1] == "":
            lines.pop()
        return cls(items=tuple(lines), name=name)

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8", name: str | None = None) -> Source:
        """Read a file as lines with strict decoding; named after the path unless name is given."""
        raw = Path(path).read_bytes()
        text = raw.decode(encoding, errors="strict")
        return cls.from_text(text, str(path) if name is None else name)

    def get(self, index: int) -> Any:
        return self.items[index]

    def size(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]


@dataclass(frozen=True)
class SourcePair:
    """The original (org) and revised (rev) sources of one diff run."""
    org: Source
    rev: Source

    @classmethod
    def of(cls, org: Sequence[Any], rev: Sequence[Any], org_name: str = "", rev_name: str = "") -> SourcePair:
        """Build a pair from two plain sequences."""
        return cls(Source.of(org, org_name), Source.of(rev, rev_name))

    def equals_at(self, index_org: int, index_rev: int) -> bool:
        """True if org[index_org] == rev[index_rev]."""
        return self.org.get(index_org) == self.rev.get(index_rev)

    def size_max(self) -> int:
        return max(self.org.size(), self.rev.size())

    def named(self) -> bool:
        """True if either source carries a non-empty name."""
        return bool(self.org.name) or bool(self.rev.name)

    def swapped(self) -> SourcePair:
        """Return the pair with org and rev exchanged."""
        return SourcePair(self.rev, self.org)
