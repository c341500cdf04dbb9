"""Exception types for the word kernels.

The kernels themselves are total over their domain; these exceptions mark the
domain boundary (Python ints are unbounded) and the checked entry points in
``dispatch.py`` for callers that prefer exceptions over inspecting results.
"""

from __future__ import annotations


class WordDomainError(ValueError):
    """Raised when a value or slot does not fit the kernel's word width."""


class SlotAliasError(ValueError):
    """Raised when the same slot is passed for two kernel arguments."""


class KernelInvariantError(Exception):
    """Raised when a post-state violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")


class KernelSpecError(ValueError):
    """Raised when a YAML kernel descriptor is malformed."""
