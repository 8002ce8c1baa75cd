"""
Sequential timed Petri nets.

A sequential net is a single chain ``P0 -T0-> P1 -T1-> P2 ...`` in which
every transition carries a :class:`TimeRange`. :class:`SequentialNet`
is the only way to grow or shrink such a chain, so the chain invariants
hold after every successful call:

* places and transitions alternate along one chain,
* ``k >= 1`` places always come with exactly ``k - 1`` transitions,
* identifiers are never reused and survive deletion of the tail.

Chain order is reconstructed from the arcs on every walk; no "next"
pointers are stored next to the graph.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .core_types import Arc, PlaceId, TransitionId
from .exceptions import (
    ArcError,
    InvalidPlace,
    InvalidTransition,
    NoNextPlace,
    NoStates,
    NotEnoughTransitions,
)
from .time_range import TimeRange, show
from .timed_net import TimedNet

_HEADER = "Sequential Time Petri Net"


class SequentialNet:
    """
    Builder and accessor for a linear chain of timed places.

    :param default_time: Interval given to every new transition;
        ``[0, 0]`` when omitted.
    :type default_time: Optional[TimeRange]
    :param logger: Logger for debug information. If ``None``, the
        module-level logger is used.
    :type logger: Optional[logging.Logger]

    .. code-block:: python

        net = SequentialNet()
        net.create_n_places(3)
        net.set_time_by_index(TimeRange(Bound.closed(2), Bound.open(5)), 0)
        print(net)
        # Sequential Time Petri Net {
        #     P0 --[2, 5)--> P1
        #     P1 --[0, 0]--> P2
        # }
    """

    def __init__(
        self,
        *,
        default_time: Optional[TimeRange] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._net = TimedNet()
        self._default_time = (
            default_time.copy() if default_time is not None else TimeRange.instant()
        )
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_time_ranges(
        cls, ranges: Iterable[TimeRange], **kwargs: Any
    ) -> "SequentialNet":
        """
        Build a chain whose transitions carry ``ranges`` in order.

        The chain has ``len(ranges) + 1`` places, so an empty iterable
        yields a single-place net.

        :param ranges: Interval of each transition, first to last.
        :type ranges: Iterable[TimeRange]
        :param kwargs: Forwarded to the constructor.
        :returns: New net.
        :rtype: SequentialNet
        """
        ranges = list(ranges)
        net = cls(**kwargs)
        net.create_n_places(len(ranges) + 1)
        for i, rng in enumerate(ranges):
            net.set_time_by_index(rng, i)
        return net

    # ------------------------------------------------------------------
    # Growth / shrink
    # ------------------------------------------------------------------
    def create_place(self) -> PlaceId:
        """
        Append one place to the tail of the chain.

        The first place stands alone. Every later place comes with a
        transition carrying the default interval, consuming from the
        old tail and producing into the new place.

        :returns: Identifier of the new tail.
        :rtype: PlaceId
        :raises ArcError: If the underlying net rejects one of the two
            arcs; the new place and transition are removed again before
            the error propagates.
        """
        if self._net.n_places() == 0:
            pid = self._net.create_place()
            self.logger.debug("Created first place %s", pid)
            return pid

        last = self._last_place()
        tid = self._net.create_transition(self._default_time)
        pid = self._net.create_place()
        try:
            self._net.add_arc(Arc.consume(last, tid, 1))
            self._net.add_arc(Arc.produce(pid, tid, 1))
        except ArcError:
            self._net.remove_place(pid)
            self._net.remove_transition(tid)
            raise
        self.logger.debug("Linked %s --%s--> %s", last, tid, pid)
        return pid

    def create_n_places(self, n: int) -> List[PlaceId]:
        """
        Call :meth:`create_place` ``n`` times.

        :param n: Number of places to append; ``0`` is a no-op.
        :type n: int
        :returns: New place identifiers in creation order.
        :rtype: List[PlaceId]
        :raises ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Cannot create a negative number of places ({n})")
        return [self.create_place() for _ in range(n)]

    def delete_place(self) -> None:
        """
        Remove the tail place and the transition feeding it.

        Relies on growth being append-only: the most recently created
        place and transition are always the tail pair.

        :raises NoStates: If the net has no places.
        """
        n_places = self._net.n_places()
        n_transitions = self._net.n_transitions()
        if n_places == 0:
            raise NoStates()
        if n_transitions == 0:
            self._net.clear_places()
        else:
            self._net.truncate_places(n_places - 1)
            self._net.truncate_transitions(n_transitions - 1)
        self.logger.debug("Deleted tail, %d place(s) left", self._net.n_places())

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------
    def set_time_by_index(self, time: TimeRange, index: int) -> None:
        """
        Overwrite the interval of the ``index``-th transition.

        :param time: New interval.
        :type time: TimeRange
        :param index: 0-based position in creation order.
        :type index: int
        :raises TypeError: If ``index`` is not an integer.
        :raises NotEnoughTransitions: If ``index`` is negative or not
            smaller than the number of transitions.
        """
        self.set_time_by_id(time, self.transition_at(index))

    def set_time_by_id(self, time: TimeRange, transition: TransitionId) -> None:
        """
        Overwrite the interval of the transition ``transition``.

        :raises InvalidTransition: If the transition does not exist.
        """
        if self._net.get_transition(transition) is None:
            raise InvalidTransition(transition)
        if not time.is_well_formed():
            self.logger.warning("Assigning inverted interval %s to %s", time, transition)
        self._net.set_time(transition, time)
        self.logger.debug("Set %s time to %s", transition, time)

    def time_range(self, transition: TransitionId) -> TimeRange:
        """
        :raises InvalidTransition: If the transition does not exist.
        """
        trans = self._net.get_transition(transition)
        if trans is None:
            raise InvalidTransition(transition)
        return trans.time

    def time_ranges(self) -> List[TimeRange]:
        """Intervals of all transitions in chain order."""
        return [self.time_range(tid) for _, tid, _ in self._hops()]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def net(self) -> TimedNet:
        return self._net

    @property
    def place_count(self) -> int:
        return self._net.n_places()

    @property
    def transition_count(self) -> int:
        return self._net.n_transitions()

    def is_empty(self) -> bool:
        return self._net.n_places() == 0

    def place_ids(self) -> List[PlaceId]:
        return self._net.places()

    def transition_ids(self) -> List[TransitionId]:
        return self._net.transitions()

    def transition_at(self, index: int) -> TransitionId:
        """
        Identifier of the ``index``-th transition in creation order.

        :raises TypeError: If ``index`` is not an integer (``bool`` included).
        :raises NotEnoughTransitions: If ``index`` is out of range.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Transition index must be an int, got {index!r}")
        count = self._net.n_transitions()
        if index < 0 or index >= count:
            raise NotEnoughTransitions(index, count)
        return self._net.transition_at(index)

    def chain(self) -> Iterator[PlaceId]:
        """Walk the places from the head of the chain to its tail."""
        if self._net.n_places() == 0:
            return
        yield self._net.place_at(0)
        for _, _, nxt in self._hops():
            yield nxt

    # ------------------------------------------------------------------
    # Traversal helpers
    # ------------------------------------------------------------------
    def _last_place(self) -> PlaceId:
        if self._net.n_places() == 0:
            raise NoStates()
        return self._net.place_at(-1)

    def _last_transition(self) -> TransitionId:
        if self._net.n_transitions() == 0:
            raise NotEnoughTransitions(0, 0)
        return self._net.transition_at(-1)

    def _next_transition_id(self, curr: PlaceId) -> TransitionId:
        place = self._net.get_place(curr)
        if place is None:
            raise InvalidPlace(curr)
        if not place.consumed_by:
            raise NoNextPlace(curr)
        return list(place.consumed_by)[-1]

    def _next_place_id(self, curr: PlaceId) -> PlaceId:
        tid = self._next_transition_id(curr)
        trans = self._net.get_transition(tid)
        if trans is None:
            raise InvalidTransition(tid)
        if not trans.produce:
            raise NoNextPlace(curr)
        return list(trans.produce)[-1]

    def _hops(self) -> Iterator[Tuple[PlaceId, TransitionId, PlaceId]]:
        """Yield ``(place, transition, next_place)`` along the chain."""
        n_places = self._net.n_places()
        if n_places == 0:
            return
        curr = self._net.place_at(0)
        # a well-formed chain has exactly n_places - 1 hops
        for _ in range(n_places - 1):
            tid = self._next_transition_id(curr)
            nxt = self._next_place_id(curr)
            yield curr, tid, nxt
            curr = nxt

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        """
        Human-readable view of the chain, one line per transition.

        .. code-block:: text

            Sequential Time Petri Net {
                P0 --[0, 0]--> P1
                P1 --(2, inf)--> P2
            }

        An empty net renders as ``Sequential Time Petri Net {}`` and a
        single place as ``Sequential Time Petri Net { P0 }``.

        :returns: Rendered text, newline-terminated.
        :rtype: str
        """
        n_places = self._net.n_places()
        if n_places == 0:
            return f"{_HEADER} {{}}\n"
        if n_places == 1:
            return f"{_HEADER} {{ {self._last_place()} }}\n"

        lines = [f"{_HEADER} {{"]
        for curr, tid, nxt in self._hops():
            interval = show(self.time_range(tid))
            lines.append(f"\t{curr} --{interval}--> {nxt}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return self._net.n_places()

    def __repr__(self) -> str:
        return (
            f"SequentialNet(n_places={self.place_count}, "
            f"n_transitions={self.transition_count})"
        )
