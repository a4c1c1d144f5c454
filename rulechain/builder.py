"""
Fluent rule builder.

Usage:
    from rulechain import rule

    r = rule()
    r.if_(temperature).is_(30).gt_then(turn_on_fan)
    r.if_(mode).is_("eco").then(dim_lights)
    r.apply()

The operator set returned by is_() depends on the kinds of the bound value
and target: both numeric gives NumericOps (then, ge_then, le_then,
gt_then, lt_then), anything else gives EqualityOps (then only). The choice
is made once, when is_() is called.

Each operator stores a zero-argument predicate; nothing is compared until
apply() runs the accumulated cases.

Japanese method names are available as aliases:
    ルール().もし(10).が(5).より大きいなら(action).適用する()
"""

from __future__ import annotations

from typing import Any, FrozenSet, Union

from .cases import CaseList
from .registry import OPERATOR_REGISTRY, OpCategory, format_case_label, operators_for
from .types import Action, RunTrace, ValueKind


class EqualityOps:
    """Operator set for textual, boolean or mixed-kind comparisons."""

    def __init__(self, rule: "Rule", value: Any, target: Any):
        self._rule = rule
        self._value = value
        self._target = target

    @property
    def offered_operators(self) -> FrozenSet[str]:
        """Operator method names available on this set."""
        return operators_for(
            ValueKind.from_value(self._value),
            ValueKind.from_value(self._target),
        )

    def _add(self, op_name: str, action: Action) -> "Rule":
        spec = OPERATOR_REGISTRY[op_name]
        value, target = self._value, self._target
        self._rule._cases.append(
            lambda: spec.compare(value, target),
            action,
            label=format_case_label(value, spec.symbol, target),
        )
        return self._rule

    def then(self, action: Action) -> "Rule":
        """Fire action when value equals target (kind-strict)."""
        return self._add("then", action)


class NumericOps(EqualityOps):
    """Operator set for number-to-number comparisons."""

    def ge_then(self, action: Action) -> "Rule":
        """Fire action when value >= target."""
        return self._add("ge_then", action)

    def le_then(self, action: Action) -> "Rule":
        """Fire action when value <= target."""
        return self._add("le_then", action)

    def gt_then(self, action: Action) -> "Rule":
        """Fire action when value > target."""
        return self._add("gt_then", action)

    def lt_then(self, action: Action) -> "Rule":
        """Fire action when value < target."""
        return self._add("lt_then", action)


# Japanese operator names come from the registry
for _spec in OPERATOR_REGISTRY.values():
    _owner = EqualityOps if _spec.category == OpCategory.ANY else NumericOps
    setattr(_owner, _spec.alias, getattr(_owner, _spec.name))
del _spec, _owner


OperatorSet = Union[NumericOps, EqualityOps]


class TargetEntry:
    """Value bound by Rule.if_(), waiting for its comparison target."""

    def __init__(self, rule: "Rule", value: Any):
        self._rule = rule
        self._value = value

    def is_(self, target: Any) -> OperatorSet:
        """
        Bind the target and pick the operator set.

        Returns:
            NumericOps if value and target are both numeric, else EqualityOps
        """
        if (
            ValueKind.from_value(self._value) == ValueKind.NUMERIC
            and ValueKind.from_value(target) == ValueKind.NUMERIC
        ):
            return NumericOps(self._rule, self._value, target)
        return EqualityOps(self._rule, self._value, target)

    が = is_


class Rule:
    """
    Caller-facing handle over one CaseList.

    Every operator call returns this same Rule so clauses can be chained.
    apply() can be called any number of times and interleaved with more
    clauses; each call replays everything accumulated so far.
    """

    def __init__(self):
        self._cases = CaseList()

    def __len__(self) -> int:
        return len(self._cases)

    def if_(self, value: Any) -> TargetEntry:
        """Start a clause comparing value. Does not add a case."""
        return TargetEntry(self, value)

    def apply(self) -> None:
        """Run all accumulated cases in order (fail-fast on exceptions)."""
        self._cases.run()

    def explain(self) -> RunTrace:
        """Report which cases would fire right now, without firing any."""
        return self._cases.evaluate()

    もし = if_
    適用する = apply


def rule() -> Rule:
    """Create an empty Rule."""
    return Rule()


ルール = rule
