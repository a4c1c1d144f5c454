"""
rulechain: a small fluent rule mini-language.

Clauses are declared as if <value> <comparison> <target> then <action> and
run in declaration order:

    r = rule()
    r.if_(10).is_(5).gt_then(on_high).if_(10).is_(10).then(on_equal)
    r.apply()   # on_high, then on_equal

Design principles:
- Predicates are deferred; nothing is compared until apply()
- Append order is run order, and every matching case fires
- Ordered comparisons only when value and target are both numeric
- Exceptions from predicates or actions abort the run (fail-fast)
"""

from .types import (
    ValueKind,
    Case,
    CaseTrace,
    RunTrace,
    is_numeric,
    strict_equals,
)
from .cases import CaseList
from .registry import (
    OperatorSpec,
    OpCategory,
    OPERATOR_REGISTRY,
    ALL_OPERATORS,
    EQUALITY_OPERATORS,
    get_operator_spec,
    operators_for,
)
from .builder import (
    Rule,
    TargetEntry,
    NumericOps,
    EqualityOps,
    rule,
    ルール,
)

__all__ = [
    # Types
    "ValueKind",
    "Case",
    "CaseTrace",
    "RunTrace",
    "is_numeric",
    "strict_equals",
    # Cases
    "CaseList",
    # Registry
    "OperatorSpec",
    "OpCategory",
    "OPERATOR_REGISTRY",
    "ALL_OPERATORS",
    "EQUALITY_OPERATORS",
    "get_operator_spec",
    "operators_for",
    # Builder
    "Rule",
    "TargetEntry",
    "NumericOps",
    "EqualityOps",
    "rule",
    "ルール",
]
