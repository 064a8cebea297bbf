"""Exceptions raised while turning a table snapshot into advice."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for every failure the hand advisor reports to its caller.

    The advisor is deterministic, so none of these are worth retrying.
    Callers should show "no recommendation available" instead of a result.
    """

    reason = "analysis_error"


class MalformedCardError(AnalysisError, ValueError):
    """A card could not be read: unknown rank or suit symbol, or bad shape."""

    reason = "malformed_card"


class InvalidSnapshotError(AnalysisError, ValueError):
    """The snapshot does not have the shape the advisor needs."""

    reason = "invalid_snapshot"


class InsufficientInputError(InvalidSnapshotError):
    """Fewer than two hole cards are known, so there is no hand to rate."""

    reason = "insufficient_input"
