"""linediff exception hierarchy.

Kept dependency-free: imported by every layer and by tests.
"""


class LinediffError(Exception):
    """Base exception for all linediff errors."""


class InvalidArgumentError(LinediffError, ValueError):
    """Raised when a caller passes an out-of-range argument (context, radius, bound)."""


class InternalDiffError(LinediffError, RuntimeError):
    """Raised when the diff engine breaks one of its own invariants. Always a bug."""
