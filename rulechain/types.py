"""
Rule type definitions.

Value kinds, the Case record held by a CaseList, and dry-run traces.
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import IntEnum, auto
from numbers import Real
from typing import Any, Callable


Predicate = Callable[[], bool]
Action = Callable[[], None]


class ValueKind(IntEnum):
    """
    Runtime kind of a compared value.

    Decides which operator set the builder offers:
    - Ordered comparisons (gt, lt, ge, le) require NUMERIC on both sides
    - Everything else only gets equality
    """

    OTHER = 0
    NUMERIC = auto()  # int, float, Decimal, Fraction (never bool)
    TEXT = auto()  # str
    BOOL = auto()  # bool

    @classmethod
    def from_value(cls, value: Any) -> "ValueKind":
        """
        Determine ValueKind from a Python value.

        bool is checked first because it subclasses int.
        """
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, (Real, Decimal)):
            return cls.NUMERIC
        if isinstance(value, str):
            return cls.TEXT
        return cls.OTHER


def is_numeric(value: Any) -> bool:
    """Check if value is of the numeric kind."""
    return ValueKind.from_value(value) == ValueKind.NUMERIC


def is_nan(value: Any) -> bool:
    """Check for float NaN or Decimal NaN (quiet or signaling)."""
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def strict_equals(lhs: Any, rhs: Any) -> bool:
    """
    Kind-aware equality.

    Values of different kinds never compare equal, so 1 vs True and
    5 vs "5" are both False. NaN equals nothing. Within a kind, plain ==
    applies.
    """
    if ValueKind.from_value(lhs) != ValueKind.from_value(rhs):
        return False
    # Decimal sNaN raises on ==
    if is_nan(lhs) or is_nan(rhs):
        return False
    return lhs == rhs


@dataclass(frozen=True)
class Case:
    """A single (predicate, action) pair."""

    predicate: Predicate
    action: Action
    label: str = ""  # e.g. "10 > 5", empty for raw appends


@dataclass
class CaseTrace:
    """Trace of a single case within a dry run."""
    case_index: int
    label: str
    matched: bool

    def summary(self) -> str:
        """One-line summary of the case outcome."""
        label = self.label or "<predicate>"
        status = "MATCH" if self.matched else "SKIP"
        return f"case[{self.case_index}]: {label} = {status}"


@dataclass
class RunTrace:
    """Full trace of a dry run over a CaseList."""
    case_traces: list[CaseTrace] = field(default_factory=list)

    @property
    def matched_indices(self) -> list[int]:
        """Indices of cases whose predicate held, in run order."""
        return [ct.case_index for ct in self.case_traces if ct.matched]

    def format_lines(self) -> list[str]:
        """Format trace as human-readable log lines (no prefix, caller adds it)."""
        if not self.case_traces:
            return ["NO CASES"]
        return [ct.summary() for ct in self.case_traces]
