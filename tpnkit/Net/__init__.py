"""
Public API for :mod:`tpnkit.Net`.

Re-exported classes
-------------------
- :class:`~tpnkit.Net.sequential.SequentialNet`
- :class:`~tpnkit.Net.timed_net.TimedNet`
- :class:`~tpnkit.Net.time_range.TimeRange`, :class:`~tpnkit.Net.time_range.Bound`
- identifier, arc and error types
"""

from __future__ import annotations

from typing import List

from .core_types import Arc, ArcKind, Place, PlaceId, Transition, TransitionId
from .exceptions import (
    ArcError,
    InvalidPlace,
    InvalidTransition,
    NoNextPlace,
    NoStates,
    NotEnoughTransitions,
    SequentialNetError,
)
from .time_range import Bound, BoundKind, TimeRange, show
from .timed_net import TimedNet
from .sequential import SequentialNet
from .conversion import (
    incidence_matrices,
    incidence_matrix,
    net_to_digraph,
    transition_summary,
)

__all__: List[str] = [
    "SequentialNet",
    "TimedNet",
    "TimeRange",
    "Bound",
    "BoundKind",
    "show",
    "PlaceId",
    "TransitionId",
    "Arc",
    "ArcKind",
    "Place",
    "Transition",
    "SequentialNetError",
    "NoStates",
    "NotEnoughTransitions",
    "NoNextPlace",
    "InvalidPlace",
    "InvalidTransition",
    "ArcError",
    "net_to_digraph",
    "incidence_matrices",
    "incidence_matrix",
    "transition_summary",
]
