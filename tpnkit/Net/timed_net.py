"""
Generic timed Petri net storage backed by a :class:`networkx.DiGraph`.

Graph conventions
-----------------
Nodes:
  - places: :class:`PlaceId` keys with ``kind="place"``.
  - transitions: :class:`TransitionId` keys with ``kind="transition"``
    and a ``time`` attribute holding a :class:`TimeRange`.

Edges:
  - consume arcs run ``place -> transition``, produce arcs run
    ``transition -> place``.
  - ``kind``: the :class:`ArcKind` of the arc.
  - ``weight``: positive integer multiplicity.

Places and transitions are also kept in per-kind lists in creation
order, so counts, the most recent node and positional lookup are O(1).
These lists record allocation order only; chain order lives in the arcs.
Identifiers come from per-net counters and are never handed out twice,
even after removal.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

import networkx as nx

from .core_types import Arc, ArcKind, Place, PlaceId, Transition, TransitionId
from .exceptions import ArcError
from .time_range import TimeRange

logger = logging.getLogger(__name__)

NodeId = Union[PlaceId, TransitionId]

_PLACE = "place"
_TRANSITION = "transition"


class TimedNet:
    """
    Identifier-indexed arena of places, transitions and weighted arcs.

    .. code-block:: python

        net = TimedNet()
        p0, p1 = net.create_place(), net.create_place()
        t0 = net.create_transition()
        net.add_arc(Arc.consume(p0, t0))
        net.add_arc(Arc.produce(p1, t0))
    """

    def __init__(self) -> None:
        self._graph: nx.DiGraph = nx.DiGraph()
        self._places: List[PlaceId] = []
        self._transitions: List[TransitionId] = []
        self._next_place = 0
        self._next_transition = 0

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------
    def create_place(self) -> PlaceId:
        """
        Allocate a new, unconnected place.

        :returns: Identifier of the new place.
        :rtype: PlaceId
        """
        pid = PlaceId(self._next_place)
        self._next_place += 1
        self._graph.add_node(pid, kind=_PLACE)
        self._places.append(pid)
        return pid

    def create_transition(self, time: Optional[TimeRange] = None) -> TransitionId:
        """
        Allocate a new, unconnected transition.

        :param time: Initial firing interval; ``[0, 0]`` when omitted.
        :type time: Optional[TimeRange]
        :returns: Identifier of the new transition.
        :rtype: TransitionId
        """
        tid = TransitionId(self._next_transition)
        self._next_transition += 1
        rng = time.copy() if time is not None else TimeRange.instant()
        self._graph.add_node(tid, kind=_TRANSITION, time=rng)
        self._transitions.append(tid)
        return tid

    def add_arc(self, arc: Arc) -> None:
        """
        Connect a place and a transition.

        :param arc: Arc to add.
        :type arc: Arc
        :raises ArcError: If the weight is not a positive integer, an
            endpoint is missing, or the same pair is already linked in
            that direction.
        """
        if isinstance(arc.weight, bool) or not isinstance(arc.weight, int):
            raise ArcError(arc, "weight must be an integer")
        if arc.weight <= 0:
            raise ArcError(arc, "weight must be positive")
        if not self._is_kind(arc.place, _PLACE):
            raise ArcError(arc, f"unknown place {arc.place}")
        if not self._is_kind(arc.transition, _TRANSITION):
            raise ArcError(arc, f"unknown transition {arc.transition}")

        u, v = arc.endpoints()
        if self._graph.has_edge(u, v):
            raise ArcError(arc, "arc already exists")
        self._graph.add_edge(u, v, kind=arc.kind, weight=arc.weight)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def _is_kind(self, node: NodeId, kind: str) -> bool:
        return node in self._graph and self._graph.nodes[node].get("kind") == kind

    def get_place(self, pid: PlaceId) -> Optional[Place]:
        """
        Snapshot a place with its incident arcs.

        :param pid: Place identifier.
        :type pid: PlaceId
        :returns: The place record, or ``None`` if no such place exists.
        :rtype: Optional[Place]
        """
        if not self._is_kind(pid, _PLACE):
            return None
        G = self._graph
        return Place(
            id=pid,
            consumed_by={t: d["weight"] for _, t, d in G.out_edges(pid, data=True)},
            produced_by={t: d["weight"] for t, _, d in G.in_edges(pid, data=True)},
        )

    def get_transition(self, tid: TransitionId) -> Optional[Transition]:
        """
        Snapshot a transition with its timing and incident arcs.

        The returned ``time`` is a copy; use :meth:`set_time` to change
        the stored interval.

        :param tid: Transition identifier.
        :type tid: TransitionId
        :returns: The transition record, or ``None`` if absent.
        :rtype: Optional[Transition]
        """
        if not self._is_kind(tid, _TRANSITION):
            return None
        G = self._graph
        return Transition(
            id=tid,
            time=G.nodes[tid]["time"].copy(),
            consume={p: d["weight"] for p, _, d in G.in_edges(tid, data=True)},
            produce={p: d["weight"] for _, p, d in G.out_edges(tid, data=True)},
        )

    def set_time(self, tid: TransitionId, time: TimeRange) -> None:
        """
        Overwrite the firing interval of a transition.

        :raises KeyError: If ``tid`` is not a transition of this net.
        """
        if not self._is_kind(tid, _TRANSITION):
            raise KeyError(tid)
        self._graph.nodes[tid]["time"] = time.copy()

    def places(self) -> List[PlaceId]:
        """Place identifiers in creation order."""
        return list(self._places)

    def transitions(self) -> List[TransitionId]:
        """Transition identifiers in creation order."""
        return list(self._transitions)

    def n_places(self) -> int:
        return len(self._places)

    def n_transitions(self) -> int:
        return len(self._transitions)

    def place_at(self, index: int) -> PlaceId:
        """
        The ``index``-th surviving place in creation order.

        :raises IndexError: If ``index`` is out of range.
        """
        return self._places[index]

    def transition_at(self, index: int) -> TransitionId:
        """
        The ``index``-th surviving transition in creation order.

        :raises IndexError: If ``index`` is out of range.
        """
        return self._transitions[index]

    def arcs(self) -> List[Arc]:
        """All arcs, grouped by source node in creation order."""
        out: List[Arc] = []
        for u, v, d in self._graph.edges(data=True):
            if d["kind"] is ArcKind.CONSUME:
                out.append(Arc(ArcKind.CONSUME, u, v, d["weight"]))
            else:
                out.append(Arc(ArcKind.PRODUCE, v, u, d["weight"]))
        return out

    @property
    def graph(self) -> nx.DiGraph:
        """Underlying graph. Mutating it directly bypasses arc validation."""
        return self._graph

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------
    def _remove_nodes(self, nodes: Iterable[NodeId]) -> None:
        nodes = list(nodes)
        for node in nodes:
            registry = self._places if isinstance(node, PlaceId) else self._transitions
            # removals are almost always the most recent node
            if registry and registry[-1] == node:
                registry.pop()
            else:
                registry.remove(node)
        # incident arcs go with their nodes
        self._graph.remove_nodes_from(nodes)
        if nodes:
            logger.debug("Removed %d node(s): %s", len(nodes), ", ".join(map(str, nodes)))

    def truncate_places(self, n: int) -> None:
        """
        Keep only the first ``n`` places (creation order).

        :raises ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Cannot truncate to a negative count ({n})")
        self._remove_nodes(reversed(self._places[n:]))

    def truncate_transitions(self, n: int) -> None:
        """
        Keep only the first ``n`` transitions (creation order).

        :raises ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Cannot truncate to a negative count ({n})")
        self._remove_nodes(reversed(self._transitions[n:]))

    def clear_places(self) -> None:
        self.truncate_places(0)

    def remove_place(self, pid: PlaceId) -> None:
        """:raises KeyError: If ``pid`` is not a place of this net."""
        if not self._is_kind(pid, _PLACE):
            raise KeyError(pid)
        self._remove_nodes([pid])

    def remove_transition(self, tid: TransitionId) -> None:
        """:raises KeyError: If ``tid`` is not a transition of this net."""
        if not self._is_kind(tid, _TRANSITION):
            raise KeyError(tid)
        self._remove_nodes([tid])

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __repr__(self) -> str:
        return (
            f"TimedNet(n_places={self.n_places()}, "
            f"n_transitions={self.n_transitions()}, "
            f"n_arcs={self._graph.number_of_edges()})"
        )
