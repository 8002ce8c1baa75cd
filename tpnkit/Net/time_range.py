"""
Time intervals attached to transitions of a timed Petri net.

A :class:`TimeRange` is a pair of :class:`Bound` values. Each bound is
open, closed or infinite, so the usual interval shapes can be written
directly:

.. code-block:: python

    from tpnkit.Net.time_range import Bound, TimeRange

    TimeRange(Bound.closed(2), Bound.open(5))       # [2, 5)
    TimeRange(Bound.closed(0), Bound.infinity())    # [0, inf)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Optional, Union

Number = Union[int, float]


class BoundKind(Enum):
    OPEN = "open"
    CLOSED = "closed"
    INFINITY = "infinity"


@dataclass(frozen=True)
class Bound:
    """
    One endpoint of a time interval.

    :param kind: Whether the endpoint is open, closed or infinite.
    :type kind: BoundKind
    :param value: Endpoint value; a non-negative number for open and
        closed bounds, ``None`` for an infinite bound.
    :type value: Optional[Union[int, float]]
    :raises ValueError: If a finite bound has a missing, non-numeric or
        negative value.
    """

    kind: BoundKind
    value: Optional[Number] = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.INFINITY:
            # value is meaningless here; normalise so equality is by kind only
            object.__setattr__(self, "value", None)
            return
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise ValueError(f"{self.kind.value} bound needs a number, got {self.value!r}")
        if self.value < 0 or math.isnan(self.value):
            raise ValueError(f"Bound value must be non-negative, got {self.value!r}")

    @classmethod
    def open(cls, value: Number) -> Bound:
        return cls(BoundKind.OPEN, value)

    @classmethod
    def closed(cls, value: Number) -> Bound:
        return cls(BoundKind.CLOSED, value)

    @classmethod
    def infinity(cls) -> Bound:
        return cls(BoundKind.INFINITY)

    @property
    def is_infinite(self) -> bool:
        return self.kind is BoundKind.INFINITY

    def magnitude(self) -> float:
        """Numeric position of the bound, ``math.inf`` for an infinite bound."""
        return math.inf if self.is_infinite else float(self.value)

    def __repr__(self) -> str:
        if self.is_infinite:
            return "Infinity"
        return f"{self.kind.value.capitalize()}({self.value})"


@dataclass
class TimeRange:
    """
    Interval ``start .. end`` constraining how long a token may dwell
    before the owning transition fires.

    ``start <= end`` is expected by rendering but is not enforced here;
    use :meth:`is_well_formed` to check it.

    :param start: Lower bound, defaults to ``Closed(0)``.
    :type start: Bound
    :param end: Upper bound, defaults to ``Closed(0)``.
    :type end: Bound
    """

    start: Bound = field(default_factory=lambda: Bound.closed(0))
    end: Bound = field(default_factory=lambda: Bound.closed(0))

    @classmethod
    def instant(cls) -> TimeRange:
        """The instantaneous interval ``[0, 0]``."""
        return cls(Bound.closed(0), Bound.closed(0))

    def is_well_formed(self) -> bool:
        """
        Check that ``start`` does not lie after ``end``.

        Infinite bounds are placed at ``+inf``, so ``(inf, inf)`` is
        well formed and ``(inf, 5]`` is not.

        :returns: ``True`` if ``start <= end``.
        :rtype: bool
        """
        return self.start.magnitude() <= self.end.magnitude()

    def copy(self) -> TimeRange:
        # bounds are frozen, a shallow copy is enough
        return TimeRange(self.start, self.end)

    def __str__(self) -> str:
        return show(self)


def show(tr: TimeRange) -> str:
    """
    Render a time range as ``[a, b]``, ``(a, b)`` or a mix of both.

    Infinite bounds render as ``(inf, `` at the start and ``inf)`` at
    the end.

    :param tr: Range to render.
    :type tr: TimeRange
    :returns: Interval text, e.g. ``"[2, 5)"``.
    :rtype: str
    """
    if tr.start.kind is BoundKind.OPEN:
        start = f"({tr.start.value}, "
    elif tr.start.kind is BoundKind.CLOSED:
        start = f"[{tr.start.value}, "
    else:
        start = "(inf, "

    if tr.end.kind is BoundKind.OPEN:
        end = f"{tr.end.value})"
    elif tr.end.kind is BoundKind.CLOSED:
        end = f"{tr.end.value}]"
    else:
        end = "inf)"
    return start + end
