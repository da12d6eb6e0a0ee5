"""
Edge-weight representations for path finding.

A stored edge weight is coerced into a totally ordered, summable number
before the search uses it. Unweighted edges store UNIT, which counts as
one hop; numbers (Python or numpy) stand for themselves; any other object
may provide its own ``into_weight()``.
"""

import numbers
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

import numpy as np


# Cost of traversing an unweighted edge.
UNIT_WEIGHT = 1


class _Unit:
    """Weight payload of an unweighted edge."""

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "_Unit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"

    def __reduce__(self) -> str:
        return "UNIT"

    def into_weight(self) -> int:
        return UNIT_WEIGHT


UNIT = _Unit()


@runtime_checkable
class WeightRepr(Protocol):
    """Stored weight that knows how to become a comparable, summable number."""

    def into_weight(self) -> Any: ...


def is_numeric(weight: Any) -> bool:
    if isinstance(weight, (bool, np.bool_)):
        return False
    return isinstance(weight, (numbers.Real, Decimal, np.integer, np.floating))


def into_weight(weight: Any) -> Any:
    """
    Coerce a stored edge weight into the number the search adds up.

    Raises:
        TypeError: the weight is neither numeric nor a WeightRepr.
    """
    if is_numeric(weight):
        return weight
    if isinstance(weight, WeightRepr):
        return weight.into_weight()
    raise TypeError(f"Edge weight {weight!r} has no numeric representation.")
