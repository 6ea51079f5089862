"""
Explicit conversions into Complex.

to_complex() accepts numbers only (Python or numpy, real or complex).
Text goes through parse_complex(), which evaluates it with sympy and
raises ComplexParseError instead of guessing.
"""

import re as regex

import sympy as sp

from .errors import ComplexParseError
from .value import Complex, as_pair

# "2i", "0.5j", "1e-3i" -> "2*I" ...; then a lone i/j -> I
_UNIT_SUFFIX_RE = regex.compile(r"(\d[\d.]*(?:[eE][+-]?\d+)?)\s*[ij]\b")
_BARE_UNIT_RE = regex.compile(r"\b[ij]\b")

_LOCALS = {
    "I": sp.I,
    "E": sp.E,
    "pi": sp.pi,
}


def is_complex(x) -> bool:
    return isinstance(x, Complex)


def to_complex(x) -> Complex:
    if isinstance(x, Complex):
        return x
    if isinstance(x, (str, bytes)):
        raise TypeError(f"cannot convert text {x!r} to Complex; use parse_complex()")
    p = as_pair(x)
    if p is None:
        raise TypeError(f"cannot convert {type(x).__name__} to Complex")
    return Complex(p[0], p[1])


def _normalize_units(text: str) -> str:
    text = _UNIT_SUFFIX_RE.sub(r"\1*I", text)
    return _BARE_UNIT_RE.sub("I", text)


def parse_complex(text: str) -> Complex:
    """
    Evaluate text to a Complex.

    Accepts the display form ("1+2i", "-0.5-3i"), Python literals ("1+2j")
    and closed-form numeric expressions ("sqrt(2)/2 + pi*i", "exp(-pi/2)",
    "2^0.5"). Anything that does not reduce to a finite number raises
    ComplexParseError.

    Signed zeros do not survive: "1-0i" parses as 1+0i, so
    str(Complex(1, -0.0)) reads back with a positive zero.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_complex expects str, got {type(text).__name__}")
    src = text.strip()
    if not src:
        raise ComplexParseError("cannot parse an empty string")

    try:
        expr = sp.sympify(_normalize_units(src), locals=_LOCALS)
    except (sp.SympifyError, SyntaxError, TypeError, ValueError) as e:
        raise ComplexParseError(f"cannot parse {text!r}: {e}") from e

    if not isinstance(expr, sp.Expr):
        raise ComplexParseError(f"{text!r} is not a numeric expression")
    if expr.free_symbols:
        names = ", ".join(sorted(str(s) for s in expr.free_symbols))
        raise ComplexParseError(f"{text!r} has free symbols: {names}")

    value = sp.N(expr)
    if value.has(sp.zoo, sp.oo, -sp.oo, sp.nan):
        raise ComplexParseError(f"{text!r} does not evaluate to a finite number")
    try:
        c = complex(value)
    except (TypeError, ValueError) as e:
        raise ComplexParseError(f"{text!r} does not evaluate to a number: {e}") from e
    return Complex(c.real, c.imag)
