"""
Complex value type.

Complex is an immutable (re, im) pair of floats. Arithmetic and the
elementary functions wrap the numba kernels in zmath.kernels; branch
indices are validated here, before any kernel runs.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from . import kernels as K
from .branches import check_branch
from .defaults import DEFAULT_BRANCH
from .display import format_complex


def as_pair(x) -> tuple[float, float] | None:
    """(re, im) floats for a Complex or a numeric scalar, None for anything else."""
    if isinstance(x, Complex):
        return (x.re, x.im)
    if isinstance(x, numbers.Real):
        return (float(x), 0.0)
    if isinstance(x, numbers.Complex):
        return (float(x.real), float(x.imag))
    return None


def _exponent(n) -> tuple[float, float]:
    p = as_pair(n)
    if p is None:
        raise TypeError(f"exponent must be a number or Complex, got {type(n).__name__}")
    return p


def _principal_pow(a, b):
    return K.c_pow(a, b, DEFAULT_BRANCH)


def _binop(kernel):
    def forward(self, other):
        b = as_pair(other)
        if b is None:
            return NotImplemented
        return Complex._wrap(kernel(self.pair, b))

    def reflected(self, other):
        a = as_pair(other)
        if a is None:
            return NotImplemented
        return Complex._wrap(kernel(a, self.pair))

    return forward, reflected


@dataclass(frozen=True, eq=False)
class Complex:
    re: float
    im: float = 0.0

    def __post_init__(self):
        for part in (self.re, self.im):
            if not isinstance(part, numbers.Real):
                raise TypeError(f"Complex components must be real numbers, got {type(part).__name__}")
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------

    @classmethod
    def _wrap(cls, p) -> Complex:
        return cls(p[0], p[1])

    @classmethod
    def from_polar(cls, r: float, theta: float) -> Complex:
        """r (cos theta + i sin theta)."""
        return cls._wrap(K.c_rect(float(r), float(theta)))

    @classmethod
    def from_real(cls, x: float) -> Complex:
        return cls(x, 0.0)

    @property
    def pair(self) -> tuple[float, float]:
        return (self.re, self.im)

    # -----------------------------------------------------------------------
    # Operators
    # -----------------------------------------------------------------------

    __add__, __radd__ = _binop(K.c_add)
    __sub__, __rsub__ = _binop(K.c_sub)
    __mul__, __rmul__ = _binop(K.c_mul)
    __truediv__, __rtruediv__ = _binop(K.c_div)
    __pow__, __rpow__ = _binop(_principal_pow)

    def __neg__(self) -> Complex:
        return self._wrap(K.c_neg(self.pair))

    def __pos__(self) -> Complex:
        return self

    def __eq__(self, other):
        # exact componentwise comparison, no tolerance
        p = as_pair(other)
        if p is None:
            return NotImplemented
        return self.re == p[0] and self.im == p[1]

    def __hash__(self):
        return hash(complex(self.re, self.im))

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        return format_complex(self.re, self.im)

    # -----------------------------------------------------------------------
    # Polar
    # -----------------------------------------------------------------------

    def abs(self) -> float:
        return K.c_abs(self.pair)

    def arg(self) -> float:
        """Angle from the positive real axis in (-pi, pi]; 0.0 for zero."""
        return K.c_arg(self.pair)

    def polar(self) -> tuple[float, float]:
        return (self.abs(), self.arg())

    def conj(self) -> Complex:
        return self._wrap(K.c_conj(self.pair))

    # -----------------------------------------------------------------------
    # Exponential, logarithm, powers
    # -----------------------------------------------------------------------

    def exp(self) -> Complex:
        return self._wrap(K.c_exp(self.pair))

    def log(self, k=DEFAULT_BRANCH) -> Complex:
        """
        Logarithm on branch k: ln|z| + i (arg z + 2 pi k).

        log of zero has a -inf real part; it does not raise.
        """
        k = check_branch(k, "k")
        return self._wrap(K.c_log(self.pair, k))

    def pow(self, n, k=DEFAULT_BRANCH) -> Complex:
        """
        z**n on branch k, as exp(n log(z, k)). n may be real or complex.

        For n = 1/N, k = 0..N-1 walks through the N distinct roots.
        A zero base gives 0 for n != 0 and 1 for n == 0.
        """
        k = check_branch(k, "k")
        return self._wrap(K.c_pow(self.pair, _exponent(n), k))

    def sqrt(self, k=DEFAULT_BRANCH) -> Complex:
        k = check_branch(k, "k")
        return self._wrap(K.c_sqrt(self.pair, k))

    # -----------------------------------------------------------------------
    # Circular and hyperbolic
    # -----------------------------------------------------------------------

    def sin(self) -> Complex:
        return self._wrap(K.c_sin(self.pair))

    def cos(self) -> Complex:
        return self._wrap(K.c_cos(self.pair))

    def tan(self) -> Complex:
        return self._wrap(K.c_tan(self.pair))

    def cot(self) -> Complex:
        return self._wrap(K.c_cot(self.pair))

    def sinh(self) -> Complex:
        return self._wrap(K.c_sinh(self.pair))

    def cosh(self) -> Complex:
        return self._wrap(K.c_cosh(self.pair))

    def tanh(self) -> Complex:
        return self._wrap(K.c_tanh(self.pair))

    def coth(self) -> Complex:
        return self._wrap(K.c_coth(self.pair))

    # -----------------------------------------------------------------------
    # Inverses. k1: branch of the outer log, k2: branch of the inner sqrt.
    # -----------------------------------------------------------------------

    def asin(self, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
        k1, k2 = check_branch(k1, "k1"), check_branch(k2, "k2")
        return self._wrap(K.c_asin(self.pair, k1, k2))

    def acos(self, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
        k1, k2 = check_branch(k1, "k1"), check_branch(k2, "k2")
        return self._wrap(K.c_acos(self.pair, k1, k2))

    def atan(self, k=DEFAULT_BRANCH) -> Complex:
        k = check_branch(k, "k")
        return self._wrap(K.c_atan(self.pair, k))

    def acot(self, k=DEFAULT_BRANCH) -> Complex:
        k = check_branch(k, "k")
        return self._wrap(K.c_acot(self.pair, k))

    def asinh(self, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
        k1, k2 = check_branch(k1, "k1"), check_branch(k2, "k2")
        return self._wrap(K.c_asinh(self.pair, k1, k2))

    def acosh(self, k1=DEFAULT_BRANCH, k2=DEFAULT_BRANCH) -> Complex:
        k1, k2 = check_branch(k1, "k1"), check_branch(k2, "k2")
        return self._wrap(K.c_acosh(self.pair, k1, k2))

    def atanh(self, k=DEFAULT_BRANCH) -> Complex:
        k = check_branch(k, "k")
        return self._wrap(K.c_atanh(self.pair, k))

    def acoth(self, k=DEFAULT_BRANCH) -> Complex:
        k = check_branch(k, "k")
        return self._wrap(K.c_acoth(self.pair, k))
