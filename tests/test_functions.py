"""Tests for the elementary functions and their branch indices."""

import cmath
import math

import pytest
import numpy as np

EPS = 1e-9


def dist(a, b):
    from zmath import to_complex
    return (to_complex(a) - to_complex(b)).abs()


class TestExpLog:
    """Test exp and log."""

    def test_euler_identity(self):
        import zmath
        assert (zmath.exp(zmath.Complex(0, math.pi)) + 1).abs() < EPS

    def test_log_minus_one(self):
        import zmath
        z = zmath.log(-1)
        assert z.re == pytest.approx(0.0, abs=1e-15)
        assert z.im == pytest.approx(math.pi)

    def test_log_branch_index(self):
        import zmath
        assert zmath.log(-1, 1).im == pytest.approx(3 * math.pi)
        assert zmath.log(-1, -1).im == pytest.approx(-math.pi)
        assert zmath.log(2, 5).re == pytest.approx(math.log(2))

    def test_log_integral_float_branch(self):
        import zmath
        assert zmath.log(-1, 2.0) == zmath.log(-1, 2)
        assert zmath.log(-1, np.int64(2)) == zmath.log(-1, 2)

    def test_log_of_zero_propagates(self):
        import zmath
        z = zmath.log(0)
        assert z.re == -math.inf
        assert z.im == 0.0

    def test_exp_log_inverse(self):
        import zmath
        z = zmath.Complex(0.3, -1.7)
        assert dist(zmath.exp(zmath.log(z)), z) < EPS
        assert dist(zmath.exp(zmath.log(z, 4)), z) < EPS


class TestPowRoot:
    """Test pow and sqrt, including roots enumerated by branch index."""

    def test_i_to_the_i(self):
        import zmath
        z = zmath.pow(zmath.I, zmath.I)
        assert z.re == pytest.approx(math.exp(-math.pi / 2))
        assert z.im == 0.0

    def test_i_squared(self):
        import zmath
        assert dist(zmath.I.pow(2), -1) < EPS

    def test_sqrt_minus_one(self):
        import zmath
        assert dist(zmath.sqrt(-1), zmath.I) < EPS
        assert dist(zmath.sqrt(-1, 1), -zmath.I) < EPS

    def test_fourth_roots_of_minus_one(self):
        from zmath import Complex

        z = Complex(-1, 0)
        h = 2 ** 0.5 / 2
        expected = [
            Complex(h, h),
            Complex(-h, h),
            Complex(-h, -h),
            Complex(h, -h),
        ]
        roots = [z.pow(1 / 4, k) for k in range(4)]
        for root, want in zip(roots, expected):
            assert dist(root, want) < EPS
        for root in roots:
            assert dist(root.pow(4), z) < EPS
        for i in range(4):
            for j in range(i + 1, 4):
                assert dist(roots[i], roots[j]) > 0.5

    def test_roots_wrap_around(self):
        from zmath import Complex

        z = Complex(8, 0)
        assert dist(z.pow(1 / 3, 0), 2) < EPS
        assert dist(z.pow(1 / 3, 3), z.pow(1 / 3, 0)) < EPS

    def test_complex_exponent(self):
        import zmath
        z = zmath.Complex(1.2, 0.4)
        w = zmath.Complex(0.5, -0.3)
        want = complex(1.2, 0.4) ** complex(0.5, -0.3)
        assert dist(zmath.pow(z, w), want) < EPS

    def test_zero_base(self):
        import zmath
        assert zmath.pow(0, 3) == zmath.Complex(0, 0)
        assert zmath.pow(0, zmath.Complex(0, 1)) == zmath.Complex(0, 0)
        assert zmath.pow(0, 0) == zmath.Complex(1, 0)
        assert zmath.sqrt(0) == zmath.Complex(0, 0)


class TestCircularHyperbolic:
    """Test the forward functions against the standard library."""

    Z = complex(0.3, 0.7)

    @pytest.mark.parametrize("name", ["exp", "log", "sqrt", "sin", "cos", "tan", "sinh", "cosh", "tanh"])
    def test_matches_cmath(self, name):
        import zmath
        got = getattr(zmath, name)(self.Z)
        want = getattr(cmath, name)(self.Z)
        assert dist(got, want) < 1e-12

    def test_cot_coth(self):
        import zmath
        assert dist(zmath.cot(self.Z), 1 / cmath.tan(self.Z)) < 1e-12
        assert dist(zmath.coth(self.Z), 1 / cmath.tanh(self.Z)) < 1e-12

    def test_pythagorean_identity(self):
        import zmath
        z = zmath.Complex(0.3, 0.7)
        s, c = z.sin(), z.cos()
        assert dist(s * s + c * c, 1) < EPS
        sh, ch = z.sinh(), z.cosh()
        assert dist(ch * ch - sh * sh, 1) < EPS

    def test_real_argument(self):
        import zmath
        assert zmath.sin(0.5).re == pytest.approx(math.sin(0.5))
        assert zmath.sin(0.5).im == pytest.approx(0.0, abs=1e-15)
        assert zmath.cosh(0.5).re == pytest.approx(math.cosh(0.5))

    def test_zero_denominator(self):
        import zmath
        for f in (zmath.cot, zmath.coth):
            z = f(0)
            assert math.isnan(z.re) and math.isnan(z.im)


class TestInverses:
    """Test inverse circular and hyperbolic functions and their branches."""

    Z = complex(0.3, 0.7)

    @pytest.mark.parametrize("name", ["asin", "acos", "atan", "asinh", "atanh"])
    def test_principal_matches_cmath(self, name):
        import zmath
        got = getattr(zmath, name)(self.Z)
        want = getattr(cmath, name)(self.Z)
        assert dist(got, want) < 1e-12

    @pytest.mark.parametrize("pair", [
        ("sin", "asin"), ("cos", "acos"), ("tan", "atan"), ("cot", "acot"),
        ("sinh", "asinh"), ("cosh", "acosh"), ("tanh", "atanh"), ("coth", "acoth"),
    ])
    def test_round_trip_principal(self, pair):
        from zmath import Complex

        f, g = pair
        z = Complex(1, 1)
        assert dist(getattr(getattr(z, f)(), g)(), z) < EPS

    def test_round_trip_outside_principal_image(self):
        from zmath import Complex, I

        z = Complex(1, -2)
        pi_i = math.pi * I
        assert dist(z.sin().asin(), z) < EPS
        assert dist(z.cos().acos(), z) < EPS
        assert dist(z.tan().atan(), z) < EPS
        assert dist(z.cot().acot(), z) < EPS
        assert dist(z.sinh().asinh(), -z - pi_i) < EPS
        assert dist(z.cosh().acosh(0, 1), z) < EPS
        assert dist(z.tanh().atanh(), z + pi_i) < EPS
        assert dist(z.coth().acoth(), z + pi_i) < EPS

    def test_round_trip_through_other_branches(self):
        from zmath import Complex, I

        z = Complex(1, -2)
        k1, k2 = 123, 456
        pi_i = math.pi * I
        assert dist(z.sin().asin(k1, k2).sin().asin(), z) < EPS
        assert dist(z.cos().acos(k1, k2).cos().acos(), z) < EPS
        assert dist(z.tan().atan(k1).tan().atan(), z) < EPS
        assert dist(z.cot().acot(k1).cot().acot(), z) < EPS
        assert dist(z.sinh().asinh(k1, k2).sinh().asinh(), -z - pi_i) < EPS
        assert dist(z.cosh().acosh(k1, k2).cosh().acosh(0, 1), z) < EPS
        assert dist(z.tanh().atanh(k1).tanh().atanh(), z + pi_i) < EPS
        assert dist(z.coth().acoth(k1).coth().acoth(), z + pi_i) < EPS

    def test_outer_branch_shifts_by_period(self):
        import zmath
        z = zmath.Complex(0.3, 0.7)
        assert dist(zmath.asin(z, 1), zmath.asin(z) + 2 * math.pi) < EPS
        assert dist(zmath.atan(z, 1), zmath.atan(z) + math.pi) < EPS

    def test_inner_branch_reflects(self):
        import zmath
        z = zmath.Complex(0.3, 0.7)
        # the other square root gives pi - asin(z)
        assert dist(zmath.asin(z, 0, 1), math.pi - zmath.asin(z)) < EPS


class TestBranchValidation:
    """Non-integral branch indices are rejected before any arithmetic."""

    @pytest.mark.parametrize("call", [
        lambda zm: zm.log(2, 0.5),
        lambda zm: zm.pow(2, 3, 0.5),
        lambda zm: zm.sqrt(2, 1.5),
        lambda zm: zm.asin(0.5, 0.5),
        lambda zm: zm.acos(0.5, 0, 0.5),
        lambda zm: zm.atan(0.5, 0.25),
        lambda zm: zm.acot(0.5, -0.5),
        lambda zm: zm.asinh(0.5, 0.5),
        lambda zm: zm.acosh(0.5, 0, 0.5),
        lambda zm: zm.atanh(0.5, 0.5),
        lambda zm: zm.acoth(2, 0.5),
    ])
    def test_fractional_index_raises(self, call):
        import zmath
        with pytest.raises(zmath.InvalidBranchIndex):
            call(zmath)

    def test_error_names_parameter(self):
        import zmath
        with pytest.raises(zmath.InvalidBranchIndex, match="k2"):
            zmath.asin(0.5, 0, 0.5)
        with pytest.raises(zmath.InvalidBranchIndex) as exc:
            zmath.log(2, 0.5)
        assert exc.value.name == "k"
        assert exc.value.value == 0.5

    @pytest.mark.parametrize("bad", [math.nan, math.inf, "1", None, 1 + 0j, True, False, np.bool_(True)])
    def test_non_numbers_rejected(self, bad):
        from zmath import check_branch, InvalidBranchIndex
        with pytest.raises(InvalidBranchIndex):
            check_branch(bad)

    def test_integral_values_accepted(self):
        from zmath import check_branch
        assert check_branch(3) == 3
        assert check_branch(-2.0) == -2
        assert check_branch(np.int64(7)) == 7
        assert check_branch(np.float64(4.0)) == 4

    def test_bool_index_raises(self):
        import zmath
        with pytest.raises(zmath.InvalidBranchIndex):
            zmath.log(-1, True)
        with pytest.raises(zmath.InvalidBranchIndex, match="k1"):
            zmath.asin(0.5, False, 0)

    @pytest.mark.parametrize("big", [2 ** 63, -(2 ** 63) - 1, 10 ** 30, 1e300, -1e300])
    def test_out_of_int64_range_raises(self, big):
        import zmath
        with pytest.raises(zmath.InvalidBranchIndex):
            zmath.log(-1, big)
        with pytest.raises(zmath.InvalidBranchIndex):
            zmath.Complex(-1).sqrt(big)

    def test_int64_bounds_accepted(self):
        from zmath import check_branch
        assert check_branch(2 ** 63 - 1) == 2 ** 63 - 1
        assert check_branch(-(2 ** 63)) == -(2 ** 63)
        assert check_branch(np.int64(-(2 ** 63))) == -(2 ** 63)


class TestFreeFunctions:
    """The module-level functions coerce numbers and mirror the methods."""

    def test_arithmetic(self):
        import zmath
        assert zmath.add(1, 2j) == zmath.Complex(1, 2)
        assert zmath.sub(1, 2j) == zmath.Complex(1, -2)
        assert zmath.mul(zmath.I, zmath.I) == -1
        assert zmath.div(zmath.Complex(-5, 10), 3 + 4j) == zmath.Complex(1, 2)
        assert zmath.neg(1 - 2j) == zmath.Complex(-1, 2)
        assert zmath.equals(1, zmath.Complex(1, 0))
        assert not zmath.equals(1, zmath.Complex(1, 1e-300))

    def test_div_by_zero(self):
        import zmath
        z = zmath.div(1, 0)
        assert math.isnan(z.re) and math.isnan(z.im)

    def test_polar_rect(self):
        import zmath
        r, t = zmath.polar(1 + 1j)
        assert r == pytest.approx(math.sqrt(2))
        assert t == pytest.approx(math.pi / 4)
        assert dist(zmath.rect(1, math.pi / 2), zmath.I) < EPS
        assert dist(zmath.rect(*zmath.polar(-2 + 3j)), -2 + 3j) < EPS

    def test_abs_arg_conj(self):
        import zmath
        assert zmath.abs(3 + 4j) == 5.0
        assert zmath.arg(-1) == math.pi
        assert zmath.arg(0) == 0.0
        assert zmath.conj(1 - 2j) == zmath.Complex(1, 2)
        assert zmath.conj(zmath.conj(1 - 2j)) == 1 - 2j

    def test_rejects_text(self):
        import zmath
        with pytest.raises(TypeError):
            zmath.sin("1")

    def test_matches_methods(self):
        import zmath
        z = zmath.Complex(0.3, 0.7)
        assert zmath.asin(z, 2, 1) == z.asin(2, 1)
        assert zmath.acoth(z, 3) == z.acoth(3)
        assert zmath.pow(z, 1 / 3, 2) == z.pow(1 / 3, 2)
