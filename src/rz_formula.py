# rz_formula.py
# User-supplied curve y = f(x) (e.g. Legendre's x/(log(x)-1.08366)) overlaid on the staircase.
# The text is parsed once with sympy and compiled to a plain-math callable; points where
# the formula is undefined are dropped instead of failing the whole series.

import math
from tokenize import TokenError

import sympy as sp
from sympy.core.function import AppliedUndef
from sympy.parsing.sympy_parser import (parse_expr, standard_transformations,
                                        convert_xor)

X = sp.Symbol("x", real=True)
TRANSFORMS = standard_transformations + (convert_xor,)
NAMESPACE = {
    "x": X, "e": sp.E, "pi": sp.pi,
    "log": sp.log, "ln": sp.log, "exp": sp.exp, "sqrt": sp.sqrt,
    "sin": sp.sin, "cos": sp.cos, "tan": sp.tan, "abs": sp.Abs,
}
# parse_expr evals the text: globals are the public sympy names only, no builtins
GLOBALS = {name: getattr(sp, name) for name in dir(sp) if not name.startswith("_")}
GLOBALS["__builtins__"] = {}

class FormulaError(ValueError):
    """The formula text could not be turned into a function of x."""

def parse_formula(text):
    """Parse text into a sympy expression in x, or raise FormulaError with a readable reason."""
    text = (text or "").strip()
    if not text:
        raise FormulaError("formula is empty")
    if "__" in text:
        raise FormulaError("invalid character sequence '__'")
    try:
        expr = parse_expr(text, local_dict=dict(NAMESPACE), global_dict=dict(GLOBALS),
                          transformations=TRANSFORMS)
    except SyntaxError as exc:
        raise FormulaError(f"syntax error: {exc.msg}") from exc
    except (TokenError, sp.SympifyError, TypeError, ValueError, AttributeError, NameError) as exc:
        raise FormulaError(f"cannot parse formula: {exc}") from exc
    if not isinstance(expr, sp.Expr):
        raise FormulaError("formula must be a single arithmetic expression")
    unknown = sorted(str(s) for s in expr.free_symbols if s != X)
    if unknown:
        raise FormulaError(f"unknown variable(s): {', '.join(unknown)} (only x is allowed)")
    undefined = sorted(str(f.func) for f in expr.atoms(AppliedUndef))
    if undefined:
        raise FormulaError(f"unknown function(s): {', '.join(undefined)}")
    return expr

def compile_formula(text):
    """Callable f(x) -> number for the formula; raises FormulaError on bad input."""
    expr = parse_formula(text)
    if expr.has(sp.zoo, sp.nan):
        # e.g. 1/0: undefined at every x
        return lambda x: math.nan
    return sp.lambdify(X, expr, modules="math")

def _eval_point(fn, x):
    try:
        y = fn(x)
    except (ValueError, ZeroDivisionError, OverflowError, TypeError):
        return None
    if isinstance(y, complex):
        return None
    try:
        y = float(y)
    except (TypeError, ValueError):
        return None
    return y if math.isfinite(y) else None

def evaluate_custom_formula(text, x_grid):
    """
    Evaluate the formula on every x of the grid.
    Returns dict(values=[(x, y), ...], error=None | message).
    A parse failure gives values=[] plus the message; undefined points
    (log of x <= 0, division by zero, nan/inf or complex results) are skipped.
    """
    try:
        fn = compile_formula(text)
    except FormulaError as exc:
        return dict(values=[], error=str(exc))
    values = []
    for x in x_grid:
        x = float(x)
        y = _eval_point(fn, x)
        if y is not None:
            values.append((x, y))
    return dict(values=values, error=None)
