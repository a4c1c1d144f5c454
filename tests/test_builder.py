"""
Tests for the fluent Rule builder.

Validates that:
1. Operator sets are gated on both sides being numeric
2. Every operator appends one case and returns the same Rule
3. apply() replays cases in order with all matches firing
4. The Japanese aliases drive the same machinery
"""

from decimal import Decimal

import pytest

from rulechain import (
    ALL_OPERATORS,
    EQUALITY_OPERATORS,
    OPERATOR_REGISTRY,
    EqualityOps,
    NumericOps,
    Rule,
    rule,
    ルール,
)


class TestOperatorGating:
    """Kind-dependent operator surface."""

    def test_number_vs_number_offers_ordered_set(self):
        """Two numbers get all five operators."""
        ops = rule().if_(5).is_(3)

        assert isinstance(ops, NumericOps)
        assert ops.offered_operators == ALL_OPERATORS

    def test_number_vs_text_offers_equality_only(self):
        """Number against text only gets then."""
        ops = rule().if_(5).is_("5")

        assert type(ops) is EqualityOps
        assert ops.offered_operators == EQUALITY_OPERATORS
        assert not hasattr(ops, "gt_then")
        assert not hasattr(ops, "ge_then")

    @pytest.mark.parametrize("value,target", [
        ("a", "b"),
        (True, False),
        (True, 1),
        (1, True),
        ("3", 3),
    ])
    def test_non_numeric_pairs_get_equality_only(self, value, target):
        """Any pair with a non-numeric side gets EqualityOps."""
        ops = rule().if_(value).is_(target)

        assert type(ops) is EqualityOps

    def test_float_and_int_are_both_numeric(self):
        """Mixed int and float still count as numeric."""
        assert isinstance(rule().if_(2.5).is_(2), NumericOps)

    def test_if_does_not_append(self):
        """Binding value and target alone adds no case."""
        r = rule()
        r.if_(1)
        r.if_(1).is_(2)

        assert len(r) == 0


class TestChaining:
    """Operators append exactly one case and return the owning Rule."""

    @pytest.mark.parametrize("op_name", sorted(ALL_OPERATORS))
    def test_numeric_operator_returns_same_rule(self, op_name):
        """Each numeric operator returns the owning Rule."""
        r = rule()
        result = getattr(r.if_(1).is_(2), op_name)(lambda: None)

        assert result is r
        assert len(r) == 1

    def test_equality_then_returns_same_rule(self):
        """then on EqualityOps returns the owning Rule."""
        r = rule()

        assert r.if_("a").is_("a").then(lambda: None) is r
        assert len(r) == 1

    def test_long_chain(self, recorder):
        """Clauses can be chained in a single expression."""
        r = (
            rule()
            .if_(1).is_(1).then(recorder.action("a"))
            .if_("x").is_("y").then(recorder.action("b"))
            .if_(3).is_(2).gt_then(recorder.action("c"))
        )

        assert isinstance(r, Rule)
        assert len(r) == 3
        r.apply()
        assert recorder.fired == ["a", "c"]


class TestComparisons:
    """Predicate semantics per operator."""

    @staticmethod
    def _fires(value, target, op_name) -> bool:
        hits = []
        r = rule()
        getattr(r.if_(value).is_(target), op_name)(lambda: hits.append(op_name))
        r.apply()
        return bool(hits)

    @pytest.mark.parametrize("value,target", [(10, 5), (5, 10), (7, 7), (-1.5, 0), (0, 0.0)])
    def test_numeric_trichotomy(self, value, target):
        """Exactly one of then/gt/lt holds; ge and le are the disjunctions."""
        eq = self._fires(value, target, "then")
        gt = self._fires(value, target, "gt_then")
        lt = self._fires(value, target, "lt_then")

        assert [eq, gt, lt].count(True) == 1
        assert self._fires(value, target, "ge_then") == (gt or eq)
        assert self._fires(value, target, "le_then") == (lt or eq)

    def test_text_exact_match(self):
        """Text equality is exact and case-sensitive."""
        assert self._fires("eco", "eco", "then")
        assert not self._fires("eco", "Eco", "then")

    def test_boolean_identity(self):
        """Booleans are equal only to the same boolean."""
        assert self._fires(True, True, "then")
        assert not self._fires(True, False, "then")

    def test_mismatched_kinds_never_equal(self):
        """Values of different kinds are never equal."""
        assert not self._fires(5, "5", "then")
        assert not self._fires(1, True, "then")
        assert not self._fires(0, False, "then")

    def test_int_equals_float(self):
        """Numeric equality spans int and float."""
        assert self._fires(1, 1.0, "then")

    def test_nan_matches_nothing(self):
        """A float NaN fires no operator."""
        nan = float("nan")
        for op_name in ALL_OPERATORS:
            assert not self._fires(nan, nan, op_name)

    @pytest.mark.parametrize("nan", [Decimal("NaN"), Decimal("sNaN")])
    @pytest.mark.parametrize("op_name", sorted(ALL_OPERATORS))
    def test_decimal_nan_matches_nothing_without_raising(self, nan, op_name):
        """A Decimal NaN on either side fires nothing and does not raise."""
        assert not self._fires(nan, 1, op_name)
        assert not self._fires(Decimal("1"), nan, op_name)

    def test_decimal_nan_does_not_abort_later_cases(self, recorder):
        """Cases after a Decimal NaN comparison still run."""
        r = (
            rule()
            .if_(Decimal("NaN")).is_(1).gt_then(recorder.action("nan"))
            .if_(Decimal("2.5")).is_(2).gt_then(recorder.action("after"))
        )

        r.apply()

        assert recorder.fired == ["after"]


class TestApply:
    """Rule-level run semantics."""

    def test_empty_rule_apply_is_noop(self, recorder):
        """apply() on a fresh Rule fires nothing."""
        r = rule()
        r.apply()

        assert recorder.fired == []

    def test_example_scenario_fires_both_in_order(self, recorder):
        """10 > 5 then 10 == 10 fire A then B."""
        r = rule()
        r.if_(10).is_(5).gt_then(recorder.action("A"))
        r.if_(10).is_(10).then(recorder.action("B"))

        r.apply()

        assert recorder.fired == ["A", "B"]

    def test_apply_twice_fires_twice(self, recorder):
        """Two apply() calls fire matching actions twice."""
        r = rule().if_(3).is_(3).then(recorder.action("x"))

        r.apply()
        r.apply()

        assert recorder.fired == ["x", "x"]

    def test_cases_added_after_apply_join_later_runs(self, recorder):
        """Clauses added between applies are included in later runs."""
        r = rule().if_(1).is_(1).then(recorder.action("first"))
        r.apply()

        r.if_(2).is_(1).gt_then(recorder.action("second"))
        r.apply()

        assert recorder.fired == ["first", "first", "second"]

    def test_rules_do_not_share_cases(self, recorder):
        """Each Rule owns its own cases."""
        r1 = rule().if_(1).is_(1).then(recorder.action("r1"))
        r2 = rule()

        r2.apply()

        assert len(r1) == 1
        assert len(r2) == 0
        assert recorder.fired == []

    def test_apply_returns_none(self):
        """apply() has no return value."""
        assert rule().if_(1).is_(1).then(lambda: None).apply() is None

    def test_failing_action_stops_run(self, recorder):
        """An exception from an action aborts the rest of the run."""
        def boom():
            raise RuntimeError("stop")

        r = (
            rule()
            .if_(1).is_(1).then(recorder.action("before"))
            .if_(1).is_(1).then(boom)
            .if_(1).is_(1).then(recorder.action("after"))
        )

        with pytest.raises(RuntimeError, match="stop"):
            r.apply()

        assert recorder.fired == ["before"]


class TestExplain:
    """Dry-run traces from a Rule."""

    def test_explain_reports_labels_without_firing(self, recorder):
        """explain() labels each case and fires nothing."""
        r = (
            rule()
            .if_(10).is_(5).gt_then(recorder.action("A"))
            .if_("eco").is_("max").then(recorder.action("B"))
            .if_(2).is_(2).le_then(recorder.action("C"))
        )

        trace = r.explain()

        assert recorder.fired == []
        assert [ct.label for ct in trace.case_traces] == ["10 > 5", "'eco' == 'max'", "2 <= 2"]
        assert trace.matched_indices == [0, 2]
        assert trace.format_lines()[1] == "case[1]: 'eco' == 'max' = SKIP"


class TestJapaneseAliases:
    """Japanese method names map onto the same builder."""

    def test_full_japanese_chain(self, recorder):
        """Every Japanese operator name fires like its English one."""
        r = ルール()
        r.もし(10).が(5).より大きいなら(recorder.action("gt"))
        r.もし(10).が(20).より小さいなら(recorder.action("lt"))
        r.もし(10).が(10).以上なら(recorder.action("ge"))
        r.もし(10).が(10).以下なら(recorder.action("le"))
        r.もし("晴れ").が("晴れ").なら(recorder.action("eq"))

        r.適用する()

        assert recorder.fired == ["gt", "lt", "ge", "le", "eq"]

    def test_equality_ops_has_no_ordered_alias(self):
        """EqualityOps only carries the equality alias."""
        ops = ルール().もし("a").が("a")

        assert hasattr(ops, "なら")
        assert not hasattr(ops, "より大きいなら")

    def test_alias_returns_same_rule(self):
        """Japanese operators also return the owning Rule."""
        r = ルール()

        assert r.もし(1).が(1).なら(lambda: None) is r

    @pytest.mark.parametrize("op_name", sorted(ALL_OPERATORS))
    def test_registry_alias_is_same_method(self, op_name):
        """Each registry alias resolves to the same method as its name."""
        spec = OPERATOR_REGISTRY[op_name]

        assert getattr(NumericOps, spec.alias) is getattr(NumericOps, spec.name)

    def test_factory_alias(self):
        """ルール is the rule factory under another name."""
        assert ルール is rule
        assert isinstance(ルール(), Rule)
