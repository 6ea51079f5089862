"""
Numba kernels for complex arithmetic and elementary functions.

A complex value is carried as a (re, im) tuple of float64. Kernels know
nothing about the Complex class; they take and return plain pairs and
are compiled eagerly against explicit signatures.

fastmath stays off everywhere: inf/NaN propagation and signed zeros
are part of the results callers see.
"""

import math
from numba import njit, types

from .defaults import DEFAULT_SQRT_EXPONENT, DEFAULT_ZERO_POW_ZERO

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PI = math.pi
TWO_PI = 2.0 * PI
NEG_INF = -math.inf
_ZPZ_RE, _ZPZ_IM = DEFAULT_ZERO_POW_ZERO

_F = types.float64
_I = types.int64
_P = types.UniTuple(types.float64, 2)

# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

@njit(_P(_P), cache=True, fastmath=False)
def c_neg(a):
    return (-a[0], -a[1])


@njit(_P(_P), cache=True, fastmath=False)
def c_conj(a):
    return (a[0], -a[1])


@njit(_P(_P, _P), cache=True, fastmath=False)
def c_add(a, b):
    return (a[0] + b[0], a[1] + b[1])


@njit(_P(_P, _P), cache=True, fastmath=False)
def c_sub(a, b):
    return (a[0] - b[0], a[1] - b[1])


@njit(_P(_P, _P), cache=True, fastmath=False)
def c_mul(a, b):
    return (a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0])


# error_model="numpy": x/0 gives inf/nan instead of ZeroDivisionError
@njit(_P(_P, _P), cache=True, fastmath=False, error_model="numpy")
def c_div(a, b):
    """
    a / b by the textbook formula.

    d = b.re^2 + b.im^2 is not guarded: a zero divisor yields
    +-inf or nan components.
    """
    d = b[0] * b[0] + b[1] * b[1]
    return ((a[0] * b[0] + a[1] * b[1]) / d, (a[1] * b[0] - a[0] * b[1]) / d)


@njit(_P(_P), cache=True, fastmath=False)
def _times_i(a):
    return (-a[1], a[0])


@njit(_P(_P), cache=True, fastmath=False)
def _times_neg_i(a):
    return (a[1], -a[0])

# ---------------------------------------------------------------------------
# Polar
# ---------------------------------------------------------------------------

@njit(_F(_P), cache=True, fastmath=False)
def c_abs(a):
    return math.hypot(a[0], a[1])


@njit(_F(_P), cache=True, fastmath=False)
def c_arg(a):
    """
    Argument in (-pi, pi]. arg(0) is 0.0, signed zeros included.
    """
    if a[0] == 0.0 and a[1] == 0.0:
        return 0.0
    t = math.atan2(a[1], a[0])
    # atan2(-0.0, x<0) lands on -pi, outside the half-open range
    if t == -PI:
        return PI
    return t


@njit(_P(_F, _F), cache=True, fastmath=False)
def c_rect(r, theta):
    return (r * math.cos(theta), r * math.sin(theta))

# ---------------------------------------------------------------------------
# Exponential / logarithm / power
# ---------------------------------------------------------------------------

@njit(_P(_P), cache=True, fastmath=False)
def c_exp(a):
    r = math.exp(a[0])
    return (r * math.cos(a[1]), r * math.sin(a[1]))


@njit(_P(_P, _I), cache=True, fastmath=False)
def c_log(a, k):
    """
    Branch k of the logarithm: (ln|a|, arg(a) + 2 pi k).

    log(0) has real part -inf.
    """
    r = c_abs(a)
    if r == 0.0:
        lnr = NEG_INF
    else:
        lnr = math.log(r)
    return (lnr, c_arg(a) + TWO_PI * k)


@njit(_P(_P, _P, _I), cache=True, fastmath=False)
def c_pow(a, n, k):
    """
    a**n on branch k, computed as exp(n * log(a, k)).

    A zero base gives 0 for any n != 0 and 1 for n == 0, in place of
    the nan that exp(n * -inf) would produce.
    """
    if a[0] == 0.0 and a[1] == 0.0:
        if n[0] == 0.0 and n[1] == 0.0:
            return (_ZPZ_RE, _ZPZ_IM)
        return (0.0, 0.0)
    return c_exp(c_mul(n, c_log(a, k)))


@njit(_P(_P, _I), cache=True, fastmath=False)
def c_sqrt(a, k):
    return c_pow(a, (DEFAULT_SQRT_EXPONENT, 0.0), k)

# ---------------------------------------------------------------------------
# Circular and hyperbolic
# ---------------------------------------------------------------------------

@njit(_P(_P), cache=True, fastmath=False)
def c_sin(a):
    ia = _times_i(a)
    d = c_sub(c_exp(ia), c_exp(c_neg(ia)))
    # d / 2i
    return (0.5 * d[1], -0.5 * d[0])


@njit(_P(_P), cache=True, fastmath=False)
def c_cos(a):
    ia = _times_i(a)
    s = c_add(c_exp(ia), c_exp(c_neg(ia)))
    return (0.5 * s[0], 0.5 * s[1])


@njit(_P(_P), cache=True, fastmath=False)
def c_tan(a):
    return c_div(c_sin(a), c_cos(a))


@njit(_P(_P), cache=True, fastmath=False)
def c_cot(a):
    return c_div(c_cos(a), c_sin(a))


@njit(_P(_P), cache=True, fastmath=False)
def c_sinh(a):
    d = c_sub(c_exp(a), c_exp(c_neg(a)))
    return (0.5 * d[0], 0.5 * d[1])


@njit(_P(_P), cache=True, fastmath=False)
def c_cosh(a):
    s = c_add(c_exp(a), c_exp(c_neg(a)))
    return (0.5 * s[0], 0.5 * s[1])


@njit(_P(_P), cache=True, fastmath=False)
def c_tanh(a):
    return c_div(c_sinh(a), c_cosh(a))


@njit(_P(_P), cache=True, fastmath=False)
def c_coth(a):
    return c_div(c_cosh(a), c_sinh(a))

# ---------------------------------------------------------------------------
# Inverse circular
#   k1 selects the branch of the outer log, k2 the branch of the inner
#   square root.
# ---------------------------------------------------------------------------

@njit(_P(_P), cache=True, fastmath=False)
def _one_minus_sq(a):
    return c_sub((1.0, 0.0), c_mul(a, a))


@njit(_P(_P, _I, _I), cache=True, fastmath=False)
def c_asin(a, k1, k2):
    """
    asin(a) = -i log(i a + sqrt(1 - a^2))
    """
    root = c_sqrt(_one_minus_sq(a), k2)
    return _times_neg_i(c_log(c_add(_times_i(a), root), k1))


@njit(_P(_P, _I, _I), cache=True, fastmath=False)
def c_acos(a, k1, k2):
    """
    acos(a) = -i log(a + i sqrt(1 - a^2))
    """
    root = c_sqrt(_one_minus_sq(a), k2)
    return _times_neg_i(c_log(c_add(a, _times_i(root)), k1))


@njit(_P(_P, _I), cache=True, fastmath=False)
def c_atan(a, k):
    """
    atan(a) = (-i/2) log((i - a) / (i + a))
    """
    q = c_div(c_sub((0.0, 1.0), a), c_add((0.0, 1.0), a))
    return c_mul((0.0, -0.5), c_log(q, k))


@njit(_P(_P, _I), cache=True, fastmath=False)
def c_acot(a, k):
    """
    acot(a) = (i/2) log((a - i) / (a + i))
    """
    q = c_div(c_sub(a, (0.0, 1.0)), c_add(a, (0.0, 1.0)))
    return c_mul((0.0, 0.5), c_log(q, k))

# ---------------------------------------------------------------------------
# Inverse hyperbolic: rotations of the inverse circular kernels
# ---------------------------------------------------------------------------

@njit(_P(_P, _I, _I), cache=True, fastmath=False)
def c_asinh(a, k1, k2):
    return _times_i(c_asin(_times_neg_i(a), k1, k2))


@njit(_P(_P, _I, _I), cache=True, fastmath=False)
def c_acosh(a, k1, k2):
    return _times_i(c_acos(a, k1, k2))


@njit(_P(_P, _I), cache=True, fastmath=False)
def c_atanh(a, k):
    return _times_i(c_atan(_times_neg_i(a), k))


@njit(_P(_P, _I), cache=True, fastmath=False)
def c_acoth(a, k):
    return _times_i(c_acot(_times_i(a), k))
