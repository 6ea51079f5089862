"""
zmath - complex arithmetic and elementary functions with explicit branches.

This package is organized as:
- kernels: numba-compiled arithmetic and elementary functions on (re, im) pairs
- value: the immutable Complex type, its operators and methods
- functions: module-level form of every operation
- coerce: to_complex() for numbers, parse_complex() for text
- sampling: random points in the unit disc

log, pow/sqrt and the inverse functions take integer branch indices
(k, or k1/k2) selecting which of their many values is returned; 0 is
the principal value.
"""

from .defaults import (
    DEFAULT_BRANCH,
    DEFAULT_SQRT_EXPONENT,
    DEFAULT_ZERO_POW_ZERO,
    DEFAULT_DISPLAY_FORMAT,
)

from .errors import InvalidBranchIndex, ComplexParseError
from .branches import check_branch
from .value import Complex
from .display import format_complex
from .coerce import is_complex, to_complex, parse_complex
from .sampling import uniform_sample

from . import functions
from .functions import (
    # Arithmetic
    neg,
    add,
    sub,
    mul,
    div,
    equals,
    conj,
    # Polar
    abs,
    arg,
    polar,
    rect,
    # Exponential / logarithm / powers
    exp,
    log,
    pow,
    sqrt,
    # Circular and hyperbolic
    sin,
    cos,
    tan,
    cot,
    sinh,
    cosh,
    tanh,
    coth,
    # Inverses
    asin,
    acos,
    atan,
    acot,
    asinh,
    acosh,
    atanh,
    acoth,
)

I = Complex(0.0, 1.0)
