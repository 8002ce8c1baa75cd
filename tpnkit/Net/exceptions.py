from __future__ import annotations

from typing import Any, Optional


class SequentialNetError(RuntimeError):
    """Base class for all sequential-net errors."""


class NoStates(SequentialNetError):
    """Raised when removing a place from a net that has no places."""

    def __init__(self) -> None:
        super().__init__("Sequential net has no places to delete")


class NotEnoughTransitions(SequentialNetError):
    """Raised when a positional transition index is out of range."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(
            f"Transition index {index} out of range for net with {count} transition(s)"
        )


class NoNextPlace(SequentialNetError):
    """Raised when a place has no outgoing transition (it is the tail)."""

    def __init__(self, place: Any) -> None:
        self.place = place
        super().__init__(f"Place {place} has no next place")


class InvalidPlace(SequentialNetError):
    """Raised when a place identifier does not exist in the net."""

    def __init__(self, place: Any) -> None:
        self.place = place
        super().__init__(f"Invalid place {place}")


class InvalidTransition(SequentialNetError):
    """Raised when a transition identifier does not exist in the net."""

    def __init__(self, transition: Any) -> None:
        self.transition = transition
        super().__init__(f"Invalid transition {transition}")


class ArcError(SequentialNetError):
    """Raised when the underlying net rejects an arc (bad weight, unknown node, duplicate)."""

    def __init__(self, arc: Any, reason: Optional[str] = None) -> None:
        self.arc = arc
        msg = f"Cannot add arc {arc!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
