"""
Operator Registry - Single source of truth for operator semantics.

Used by:
- The builder, to produce predicates for each operator method
- Labels and traces, to render a case as "lhs <symbol> rhs"

Design:
- Each operator declares which value kinds it accepts
- Ordered operators need NUMERIC on both sides
- Adding new operators requires updating this registry
"""

import operator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, FrozenSet, Optional

from .types import ValueKind, is_nan, strict_equals


class OpCategory(Enum):
    """Operator input kind categories."""
    ANY = auto()      # any kind, strict equality
    NUMERIC = auto()  # numeric on both sides


@dataclass(frozen=True)
class OperatorSpec:
    """
    Specification for a single operator.

    Attributes:
        name: Builder method name (e.g., "gt_then")
        symbol: Infix symbol used in case labels
        category: Allowed input kind category
        compare: Binary comparison applied at run time
        alias: Japanese method name carried alongside the English one
    """
    name: str
    symbol: str
    category: OpCategory
    compare: Callable[[Any, Any], bool]
    alias: str


def ordered(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    """
    Wrap an ordered comparison so NaN on either side is False.

    float NaN already compares False; Decimal NaN raises InvalidOperation.
    """
    def _compare(lhs: Any, rhs: Any) -> bool:
        if is_nan(lhs) or is_nan(rhs):
            return False
        return compare(lhs, rhs)
    return _compare


# =============================================================================
# OPERATOR REGISTRY - Single Source of Truth
# =============================================================================

OPERATOR_REGISTRY = {
    "then": OperatorSpec(
        name="then",
        symbol="==",
        category=OpCategory.ANY,
        compare=strict_equals,
        alias="なら",
    ),
    "ge_then": OperatorSpec(
        name="ge_then",
        symbol=">=",
        category=OpCategory.NUMERIC,
        compare=ordered(operator.ge),
        alias="以上なら",
    ),
    "le_then": OperatorSpec(
        name="le_then",
        symbol="<=",
        category=OpCategory.NUMERIC,
        compare=ordered(operator.le),
        alias="以下なら",
    ),
    "gt_then": OperatorSpec(
        name="gt_then",
        symbol=">",
        category=OpCategory.NUMERIC,
        compare=ordered(operator.gt),
        alias="より大きいなら",
    ),
    "lt_then": OperatorSpec(
        name="lt_then",
        symbol="<",
        category=OpCategory.NUMERIC,
        compare=ordered(operator.lt),
        alias="より小さいなら",
    ),
}

ALL_OPERATORS: FrozenSet[str] = frozenset(OPERATOR_REGISTRY.keys())

EQUALITY_OPERATORS: FrozenSet[str] = frozenset(
    spec.name for spec in OPERATOR_REGISTRY.values()
    if spec.category == OpCategory.ANY
)


def get_operator_spec(name: str) -> Optional[OperatorSpec]:
    """
    Get operator specification from registry.

    Args:
        name: Operator method name, English or Japanese

    Returns:
        OperatorSpec if known, None if unknown
    """
    spec = OPERATOR_REGISTRY.get(name)
    if spec is not None:
        return spec
    for candidate in OPERATOR_REGISTRY.values():
        if candidate.alias == name:
            return candidate
    return None


def operators_for(lhs_kind: ValueKind, rhs_kind: ValueKind) -> FrozenSet[str]:
    """
    Operator names offered for a value/target kind pair.

    Both sides NUMERIC gets the full set, anything else gets equality only.
    """
    if lhs_kind == ValueKind.NUMERIC and rhs_kind == ValueKind.NUMERIC:
        return ALL_OPERATORS
    return EQUALITY_OPERATORS


def format_case_label(value: Any, symbol: str, target: Any) -> str:
    """Render a case as "value <symbol> target" using repr for text."""
    def fmt(v: Any) -> str:
        return repr(v) if isinstance(v, str) else str(v)
    return f"{fmt(value)} {symbol} {fmt(target)}"
