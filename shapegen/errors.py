# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   The error kinds the profiling engine raises to its immediate caller.
#   None of them are fatal: the orchestrator and the CLI catch
#   ProfileError at the boundary and report it.
#
# CLASSES:
# --------
# - ProfileError       → Base class for every engine error
# - InvalidInput       → Empty / malformed sample, pattern or serialized fact
# - NotTrained         → Nothing ingested, or generate() before finalize()
# - NoMatchingFact     → A pattern position has zero candidate characters
#
# ==============================================

from typing import Optional


class ProfileError(Exception):
    """Base class for errors raised by the profiling engine."""


class InvalidInput(ProfileError, ValueError):
    """A sample (or pattern) was empty or structurally invalid."""


class NotTrained(ProfileError):
    """The profile has no data (or no rank tables) to work from."""


class NoMatchingFact(ProfileError):
    """
    No ingested fact can fill a position of the requested pattern.

    Means the rank table and the record store disagree: the pattern
    is selectable but cannot be rebuilt from the facts on hand.
    """

    def __init__(self, pattern: str, index: int, placeholder: Optional[str] = None):
        self.pattern = pattern
        self.index = index
        self.placeholder = placeholder
        super().__init__(
            f"No fact matches symbol {placeholder!r} at position {index} of pattern {pattern!r}"
        )
