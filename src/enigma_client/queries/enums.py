"""Enumerated query parameter values."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..core.errors import EnigmaValidationError

EnumT = TypeVar("EnumT", bound=Enum)


class Endpoint(str, Enum):
    META = "meta"
    DATA = "data"
    STATS = "stats"
    EXPORT = "export"


class Conjunction(str, Enum):
    """Logical link between several search or where parameters."""

    OR = "or"
    AND = "and"


class SortDirection(str, Enum):
    ASC = "+"
    DESC = "-"


class Operation(str, Enum):
    """Calculations a stats request can run on the selected column."""

    SUM = "sum"
    AVG = "avg"
    STDDEV = "stddev"
    VARIANCE = "variance"
    MAX = "max"
    MIN = "min"
    FREQUENCY = "frequency"


COMPOUND_OPERATIONS = frozenset({Operation.SUM, Operation.AVG})


def coerce_enum(enum_cls: type[EnumT], value: EnumT | str, *, name: str) -> EnumT:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(repr(member.value) for member in enum_cls)
        raise EnigmaValidationError(f"{name} must be one of {allowed}") from exc


__all__ = [
    "Endpoint",
    "Conjunction",
    "SortDirection",
    "Operation",
    "COMPOUND_OPERATIONS",
    "coerce_enum",
]
