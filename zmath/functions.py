"""
Module-level form of every Complex operation.

Arguments may be Complex or any number to_complex() accepts; results are
always Complex (or float for abs/arg, bool for equals).
"""

from .coerce import to_complex
from .defaults import DEFAULT_BRANCH
from .value import Complex

# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def neg(z) -> Complex:
    return -to_complex(z)


def add(a, b) -> Complex:
    return to_complex(a) + to_complex(b)


def sub(a, b) -> Complex:
    return to_complex(a) - to_complex(b)


def mul(a, b) -> Complex:
    return to_complex(a) * to_complex(b)


def div(a, b) -> Complex:
    """a / b. A zero divisor gives inf/nan components, not an exception."""
    return to_complex(a) / to_complex(b)


def equals(a, b) -> bool:
    return to_complex(a) == to_complex(b)


def conj(z) -> Complex:
    return to_complex(z).conj()

# ---------------------------------------------------------------------------
# Polar
# ---------------------------------------------------------------------------

def abs(z) -> float:
    return to_complex(z).abs()


def arg(z) -> float:
    return to_complex(z).arg()


def polar(z) -> tuple[float, float]:
    """(abs(z), arg(z))."""
    return to_complex(z).polar()


def rect(r: float, theta: float) -> Complex:
    """Inverse of polar()."""
    return Complex.from_polar(r, theta)

# ---------------------------------------------------------------------------
# Exponential, logarithm, powers
# ---------------------------------------------------------------------------

def exp(z) -> Complex:
    return to_complex(z).exp()


def log(z, k=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).log(k)


def pow(z, n, k=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).pow(n, k)


def sqrt(z, k=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).sqrt(k)

# ---------------------------------------------------------------------------
# Circular and hyperbolic
# ---------------------------------------------------------------------------

def sin(z) -> Complex:
    return to_complex(z).sin()


def cos(z) -> Complex:
    return to_complex(z).cos()


def tan(z) -> Complex:
    return to_complex(z).tan()


def cot(z) -> Complex:
    return to_complex(z).cot()


def sinh(z) -> Complex:
    return to_complex(z).sinh()


def cosh(z) -> Complex:
    return to_complex(z).cosh()


def tanh(z) -> Complex:
    return to_complex(z).tanh()


def coth(z) -> Complex:
    return to_complex(z).coth()

# ---------------------------------------------------------------------------
# Inverse circular and hyperbolic
# ---------------------------------------------------------------------------

def asin(z, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).asin(k1, k2)


def acos(z, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).acos(k1, k2)


def atan(z, k=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).atan(k)


def acot(z, k=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).acot(k)


def asinh(z, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).asinh(k1, k2)


def acosh(z, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).acosh(k1, k2)


def atanh(z, k=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).atanh(k)


def acoth(z, k=DEFAULT_BRANCH) -> Complex:
    return to_complex(z).acoth(k)
