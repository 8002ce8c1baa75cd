from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

import networkx as nx
import numpy as np

from .core_types import ArcKind, PlaceId, TransitionId
from .sequential import SequentialNet
from .time_range import show
from .timed_net import TimedNet

NetLike = Union[SequentialNet, TimedNet]


def _as_timed_net(net: NetLike) -> TimedNet:
    if isinstance(net, SequentialNet):
        return net.net
    if isinstance(net, TimedNet):
        return net
    raise TypeError(f"Expected SequentialNet or TimedNet, got {type(net).__name__}")


# ---------------------------------------------------------------------------
# NetworkX export
# ---------------------------------------------------------------------------


def net_to_digraph(net: NetLike) -> nx.DiGraph:
    """
    Export a net as a plain bipartite :class:`networkx.DiGraph`.

    Node keys are the rendered identifiers (``"P0"``, ``"T0"``) so the
    result can be drawn or written out without tpnkit types.

    Nodes:
      - places: ``kind="place"``, ``bipartite=0``, ``label``.
      - transitions: ``kind="transition"``, ``bipartite=1``, ``label``
        and ``time`` (rendered interval, e.g. ``"[0, 0]"``).

    Edges:
      - ``role``: ``"consume"`` or ``"produce"``.
      - ``weight``: arc multiplicity.

    :param net: Net to export.
    :type net: Union[SequentialNet, TimedNet]
    :returns: New directed graph.
    :rtype: networkx.DiGraph

    .. code-block:: python

        seq = SequentialNet()
        seq.create_n_places(3)
        G = net_to_digraph(seq)
        list(G.edges())   # [('P0', 'T0'), ('T0', 'P1'), ('P1', 'T1'), ('T1', 'P2')]
    """
    tn = _as_timed_net(net)
    G = nx.DiGraph()
    # keep creation order so edges iterate along the chain
    for node in tn.graph.nodes:
        if isinstance(node, PlaceId):
            G.add_node(str(node), kind="place", bipartite=0, label=str(node))
        else:
            trans = tn.get_transition(node)
            G.add_node(
                str(node),
                kind="transition",
                bipartite=1,
                label=str(node),
                time=show(trans.time),
            )
    for arc in tn.arcs():
        u, v = arc.endpoints()
        G.add_edge(str(u), str(v), role=arc.kind.value, weight=arc.weight)
    return G


# ---------------------------------------------------------------------------
# Incidence matrices
# ---------------------------------------------------------------------------


def incidence_matrices(
    net: NetLike,
) -> Tuple[List[PlaceId], List[TransitionId], np.ndarray, np.ndarray]:
    """
    Build the **pre** (consume) and **post** (produce) matrices.

    Rows follow place creation order, columns transition creation order.

    :param net: Net to analyse.
    :type net: Union[SequentialNet, TimedNet]
    :returns: ``(place_order, transition_order, pre, post)``; both
        matrices have shape ``(n_places, n_transitions)`` and
        non-negative integer entries.
    :rtype: Tuple[List[PlaceId], List[TransitionId], numpy.ndarray, numpy.ndarray]
    """
    tn = _as_timed_net(net)
    places = tn.places()
    transitions = tn.transitions()
    p_idx = {p: i for i, p in enumerate(places)}
    t_idx = {t: j for j, t in enumerate(transitions)}

    pre = np.zeros((len(places), len(transitions)), dtype=int)
    post = np.zeros((len(places), len(transitions)), dtype=int)
    for arc in tn.arcs():
        i, j = p_idx[arc.place], t_idx[arc.transition]
        if arc.kind is ArcKind.CONSUME:
            pre[i, j] += arc.weight
        else:
            post[i, j] += arc.weight
    return places, transitions, pre, post


def incidence_matrix(net: NetLike) -> np.ndarray:
    """
    Incidence matrix ``C = post - pre`` of shape ``(n_places, n_transitions)``.

    For a sequential chain every column holds exactly one ``-1`` (the
    place the transition consumes from) and one ``+1``.
    """
    _, _, pre, post = incidence_matrices(net)
    return post - pre


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


def transition_summary(net: NetLike) -> List[Dict[str, Any]]:
    """
    One record per transition, in creation order.

    :param net: Net to summarise.
    :type net: Union[SequentialNet, TimedNet]
    :returns: Dicts with keys ``id``, ``source`` (list of consumed
        places), ``target`` (list of produced places) and ``time``
        (rendered interval).
    :rtype: List[Dict[str, Any]]
    """
    tn = _as_timed_net(net)
    out: List[Dict[str, Any]] = []
    for tid in tn.transitions():
        trans = tn.get_transition(tid)
        out.append(
            {
                "id": str(tid),
                "source": [str(p) for p in trans.consume],
                "target": [str(p) for p in trans.produce],
                "time": show(trans.time),
            }
        )
    return out
