# Net/core_types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Union

from .time_range import TimeRange


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class PlaceId:
    """
    Stable handle of a place.

    :param index: Allocation index; unique within one net and never reused.
    :type index: int
    """

    index: int

    def __str__(self) -> str:
        return f"P{self.index}"


@dataclass(frozen=True, order=True)
class TransitionId:
    """
    Stable handle of a transition.

    :param index: Allocation index; unique within one net and never reused.
    :type index: int
    """

    index: int

    def __str__(self) -> str:
        return f"T{self.index}"


# ---------------------------------------------------------------------------
# Arcs
# ---------------------------------------------------------------------------


class ArcKind(Enum):
    CONSUME = "consume"  # place -> transition
    PRODUCE = "produce"  # transition -> place


@dataclass(frozen=True)
class Arc:
    """
    Weighted connection between a place and a transition.

    :param kind: ``CONSUME`` when the place feeds the transition,
        ``PRODUCE`` when the transition feeds the place.
    :type kind: ArcKind
    :param place: Place endpoint.
    :type place: PlaceId
    :param transition: Transition endpoint.
    :type transition: TransitionId
    :param weight: Arc multiplicity, a positive integer.
    :type weight: int
    """

    kind: ArcKind
    place: PlaceId
    transition: TransitionId
    weight: int = 1

    @classmethod
    def consume(cls, place: PlaceId, transition: TransitionId, weight: int = 1) -> Arc:
        return cls(ArcKind.CONSUME, place, transition, weight)

    @classmethod
    def produce(cls, place: PlaceId, transition: TransitionId, weight: int = 1) -> Arc:
        return cls(ArcKind.PRODUCE, place, transition, weight)

    def endpoints(
        self,
    ) -> Tuple[Union[PlaceId, TransitionId], Union[PlaceId, TransitionId]]:
        """Return the arc as a directed ``(source, target)`` node pair."""
        if self.kind is ArcKind.CONSUME:
            return self.place, self.transition
        return self.transition, self.place

    def __repr__(self) -> str:
        return (
            f"{self.kind.value.capitalize()}({self.place}, {self.transition}, {self.weight})"
        )


# ---------------------------------------------------------------------------
# Read-only node records
# ---------------------------------------------------------------------------


@dataclass
class Place:
    """
    Snapshot of a place and its incident arcs.

    :param id: Place identifier.
    :type id: PlaceId
    :param consumed_by: Transitions consuming from this place -> weight.
    :type consumed_by: Dict[TransitionId, int]
    :param produced_by: Transitions producing into this place -> weight.
    :type produced_by: Dict[TransitionId, int]
    """

    id: PlaceId
    consumed_by: Dict[TransitionId, int] = field(default_factory=dict)
    produced_by: Dict[TransitionId, int] = field(default_factory=dict)


@dataclass
class Transition:
    """
    Snapshot of a transition, its timing and its incident arcs.

    :param id: Transition identifier.
    :type id: TransitionId
    :param time: Firing interval.
    :type time: TimeRange
    :param consume: Input places -> weight.
    :type consume: Dict[PlaceId, int]
    :param produce: Output places -> weight.
    :type produce: Dict[PlaceId, int]
    """

    id: TransitionId
    time: TimeRange = field(default_factory=TimeRange.instant)
    consume: Dict[PlaceId, int] = field(default_factory=dict)
    produce: Dict[PlaceId, int] = field(default_factory=dict)
