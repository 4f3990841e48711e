"""Pipeline step functions: load file sources, run the diff, render and write output"""

import logging
from pathlib import Path
from typing import Optional

from linediff.core.changeset import ChangeSet
from linediff.core.diff import run
from linediff.core.source import Source, SourcePair


logger = logging.getLogger("linediff.core.pipeline")

FORMATS = ("unified", "listing", "numbered", "json")


def _load(path: Path, encoding: str, label: Optional[str]) -> Source:
    try:
        return Source.from_path(path, encoding, name=label)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def load_pair(
    org_path: Path,
    rev_path: Path,
    encoding: str = "utf-8",
    org_label: Optional[str] = None,
    rev_label: Optional[str] = None,
    ) -> SourcePair:
    """Read both files as strictly decoded lines. Labels default to the paths."""
    return SourcePair(_load(Path(org_path), encoding, org_label), _load(Path(rev_path), encoding, rev_label))


def render(change_set: ChangeSet, fmt: str = "unified", context: int = 3) -> list[str]:
    """Render change_set in one of FORMATS as a list of lines without terminators."""
    if fmt == "unified":
        return change_set.as_unified_form_text(context)
    if fmt == "listing":
        return change_set.unify_texts()
    if fmt == "numbered":
        return change_set.unify_texts_with_numbers()
    if fmt == "json":
        return change_set.to_report().model_dump_json(indent=2).splitlines()
    raise ValueError(f"Unknown output format '{fmt}'; expected one of {', '.join(FORMATS)}")


def run_diff(
    org_path: Path,
    rev_path: Path,
    encoding: str = "utf-8",
    org_label: Optional[str] = None,
    rev_label: Optional[str] = None,
    ) -> ChangeSet:
    """Load both files and diff them line by line."""
    source = load_pair(org_path, rev_path, encoding, org_label, rev_label)
    logger.info("diffing %s (%d lines) against %s (%d lines)",
                org_path, source.org.size(), rev_path, source.rev.size())
    return run(source)


def write_lines(path: Path, lines: list[str]) -> Path:
    """Write lines joined by '\\n' with a trailing newline (UTF-8). Returns path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def write_diff(change_set: ChangeSet, path: Path, context: int = 3) -> Path:
    """Write the folded (unified) rendering of change_set to path."""
    return write_lines(path, change_set.as_unified_form_text(context))


def write_diff_without_fold(change_set: ChangeSet, path: Path) -> Path:
    """Write the full listing of change_set to path."""
    return write_lines(path, change_set.unify_texts())


def summary_line(change_set: ChangeSet) -> str:
    s = change_set.summary()
    return f"+{s.added} -{s.deleted} ={s.unchanged}"
