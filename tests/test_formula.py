"""
Tests for rz_formula: parsing user formulas in x and point-wise evaluation.

Undefined points (1/0, log of x <= 0, complex results) are skipped, never zero-filled.
"""

import math

import pytest

from rz_formula import FormulaError, compile_formula, evaluate_custom_formula, parse_formula


def _ys(result):
    return [y for _, y in result["values"]]


class TestEvaluate:
    """Valid formulas over a grid."""

    def test_identity_round_trip(self):
        res = evaluate_custom_formula("x", [1, 2, 3])
        assert res["error"] is None
        assert res["values"] == [(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]

    def test_legendre(self):
        res = evaluate_custom_formula("x/(log(x)-1.08366)", [100])
        assert _ys(res)[0] == pytest.approx(100 / (math.log(100) - 1.08366))

    def test_caret_is_power(self):
        assert _ys(evaluate_custom_formula("x^2 + 1", [3])) == [pytest.approx(10.0)]

    def test_ln_alias(self):
        assert _ys(evaluate_custom_formula("ln(x)", [math.e])) == [pytest.approx(1.0)]

    def test_constants(self):
        assert _ys(evaluate_custom_formula("pi * x", [2])) == [pytest.approx(2 * math.pi)]

    def test_constant_formula(self):
        assert _ys(evaluate_custom_formula("2", [1, 5])) == [2.0, 2.0]

    def test_empty_grid(self):
        assert evaluate_custom_formula("x", []) == dict(values=[], error=None)


class TestSkippedPoints:
    """Per-point failures drop that point only."""

    def test_division_by_zero_constant_is_skipped(self):
        res = evaluate_custom_formula("1/0", [5])
        assert res == dict(values=[], error=None)

    def test_pole_inside_grid(self):
        res = evaluate_custom_formula("1/(x-2)", [1, 2, 3])
        assert [x for x, _ in res["values"]] == [1.0, 3.0]

    def test_log_domain(self):
        res = evaluate_custom_formula("log(x)", [-1, 0, 1, math.e])
        assert res["error"] is None
        assert [x for x, _ in res["values"]] == [1.0, math.e]

    def test_complex_result_skipped(self):
        res = evaluate_custom_formula("x**0.5", [-4, 4])
        assert res["values"] == [(4.0, 2.0)]

    def test_overflow_skipped(self):
        res = evaluate_custom_formula("exp(x)", [1, 1000])
        assert [x for x, _ in res["values"]] == [1.0]


class TestParseErrors:
    """Malformed input yields a message and an absent series."""

    @pytest.mark.parametrize("text", ["x +", "(x + 1", "", "   "])
    def test_syntax(self, text):
        res = evaluate_custom_formula(text, [1, 2])
        assert res["values"] == []
        assert isinstance(res["error"], str) and res["error"]

    def test_unknown_variable(self):
        res = evaluate_custom_formula("y + 1", [1])
        assert res["values"] == []
        assert "y" in res["error"]

    def test_unknown_function(self):
        res = evaluate_custom_formula("foo(x)", [1])
        assert res["values"] == []
        assert "foo" in res["error"]

    def test_builtins_are_not_reachable(self):
        res = evaluate_custom_formula("open(x)", [1])
        assert res["values"] == []
        assert "open" in res["error"]

    def test_sympy_functions_still_resolve(self):
        res = evaluate_custom_formula("sqrt(abs(x - 3))", [-1, 7])
        assert [y for _, y in res["values"]] == [pytest.approx(2.0), pytest.approx(2.0)]

    def test_dunder_rejected(self):
        with pytest.raises(FormulaError):
            parse_formula("x.__class__")

    def test_compile_raises(self):
        with pytest.raises(FormulaError):
            compile_formula("")

    def test_formula_error_is_value_error(self):
        assert issubclass(FormulaError, ValueError)
