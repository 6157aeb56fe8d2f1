"""
Coefficients of known functions in every basis system.
"""
import math

import pytest

from fourier_lab import OUT_OF_RANGE, FourierEngine, LegendreTable, SystemId, sample_function
from fourier_lab.bases import compute_chebyshev_coef, eval_chebyshev_term, eval_legendre_term

EPSILON = 1e-4


@pytest.fixture
def engine():
    return FourierEngine()


def coefs_of(engine, f, a, b, system, max_k=5, n=1000):
    return engine.compute_coefs(sample_function(f, a, b, n), a, b, max_k, system)


# ---- standard system on [-pi, pi] ------------------------------------------

def test_standard_sin(engine):
    """sin(x) is the first sine harmonic with coefficient +1; everything else vanishes."""
    res = coefs_of(engine, math.sin, -math.pi, math.pi, "standard")
    assert res.c0 == pytest.approx(0.0, abs=EPSILON)
    assert res.coefficient("sin", 1) == pytest.approx(1.0, abs=EPSILON)
    for k in range(1, 6):
        assert res.coefficient("cos", k) == pytest.approx(0.0, abs=EPSILON)
    for k in range(2, 6):
        assert res.coefficient("sin", k) == pytest.approx(0.0, abs=EPSILON)


def test_standard_cos(engine):
    res = coefs_of(engine, math.cos, -math.pi, math.pi, "standard")
    assert res.c0 == pytest.approx(0.0, abs=EPSILON)
    assert res.coefficient("cos", 1) == pytest.approx(1.0, abs=EPSILON)
    assert res.coefficient("sin", 1) == pytest.approx(0.0, abs=EPSILON)


def test_standard_sawtooth(engine):
    """f(x) = x has b_n = 2 (-1)^(n+1) / n."""
    res = coefs_of(engine, lambda x: x, -math.pi, math.pi, "standard", n=2000)
    assert res.c0 == pytest.approx(0.0, abs=EPSILON)
    for k in range(1, 4):
        assert res.coefficient("cos", k) == pytest.approx(0.0, abs=EPSILON)
        assert res.coefficient("sin", k) == pytest.approx(2 * (-1) ** (k + 1) / k, abs=EPSILON)


def test_standard_step(engine):
    """sign(x) has b_n = 4 / (n pi) for odd n, 0 for even n."""
    res = coefs_of(engine, lambda x: 1.0 if x >= 0 else -1.0, -math.pi, math.pi, "standard", n=2000)
    assert res.coefficient("sin", 1) == pytest.approx(4 / math.pi, abs=1e-3)
    assert res.coefficient("sin", 2) == pytest.approx(0.0, abs=1e-3)
    assert res.coefficient("sin", 3) == pytest.approx(4 / (3 * math.pi), abs=1e-3)


def test_standard_exp(engine):
    res = coefs_of(engine, math.exp, -math.pi, math.pi, "standard")
    factor = 2 * math.sinh(math.pi) / math.pi
    for k in (1, 2):
        a_k = factor * (-1) ** k / (1 + k * k)
        b_k = factor * (-1) ** (k + 1) * k / (1 + k * k)
        assert res.coefficient("cos", k) == pytest.approx(a_k, abs=1e-3)
        assert res.coefficient("sin", k) == pytest.approx(b_k, abs=1e-3)
    assert res.c0 == pytest.approx(factor, abs=1e-3)


# ---- half-period systems on [0, pi] ------------------------------------------

def test_cos_system(engine):
    res = coefs_of(engine, math.cos, 0.0, math.pi, "cos")
    assert res.c0 == pytest.approx(0.0, abs=EPSILON)
    assert res.coefficient("cos", 1) == pytest.approx(1.0, abs=EPSILON)
    assert res.coefficient("cos", 2) == pytest.approx(0.0, abs=EPSILON)


def test_sin_system(engine):
    res = coefs_of(engine, math.sin, 0.0, math.pi, "sin")
    assert res.c0 == 0.0
    assert res.coefficient("sin", 1) == pytest.approx(1.0, abs=EPSILON)
    assert res.coefficient("sin", 2) == pytest.approx(0.0, abs=EPSILON)


def test_half_period_angle_starts_at_a(engine):
    """On a shifted interval the cos system measures the angle from a."""
    a, b = 2.0, 2.0 + math.pi
    res = coefs_of(engine, lambda x: math.cos(x - a), a, b, "cos")
    assert res.coefficient("cos", 1) == pytest.approx(1.0, abs=EPSILON)


def test_sin_system_oversamples_sparse_curves(engine):
    """Three points of a straight line still give the analytic sine coefficients."""
    res = engine.compute_coefs([(0.0, 0.0), (0.5, 0.5), (1.0, 1.0)], 0.0, 1.0, 3, "sin")
    for k in range(1, 4):
        assert res.coefficient("sin", k) == pytest.approx(2 * (-1) ** (k + 1) / (k * math.pi), abs=1e-2)


# ---- chebyshev on [-1, 1] ---------------------------------------------------

def test_chebyshev_constant(engine):
    res = coefs_of(engine, lambda x: 1.0, -1.0, 1.0, "chebyshev")
    assert res.c0 == pytest.approx(1.0, abs=EPSILON)
    for k in range(1, 6):
        assert res.coefficient("T", k) == pytest.approx(0.0, abs=EPSILON)


def test_chebyshev_t1(engine):
    res = coefs_of(engine, lambda x: x, -1.0, 1.0, "chebyshev")
    assert res.c0 == pytest.approx(0.0, abs=EPSILON)
    assert res.coefficient("T", 1) == pytest.approx(1.0, abs=EPSILON)
    for k in range(2, 6):
        assert res.coefficient("T", k) == pytest.approx(0.0, abs=EPSILON)


def test_chebyshev_t2(engine):
    res = coefs_of(engine, lambda x: 2 * x * x - 1, -1.0, 1.0, "chebyshev")
    assert res.c0 == pytest.approx(0.0, abs=EPSILON)
    assert res.coefficient("T", 1) == pytest.approx(0.0, abs=EPSILON)
    assert res.coefficient("T", 2) == pytest.approx(1.0, abs=EPSILON)
    assert res.coefficient("T", 3) == pytest.approx(0.0, abs=EPSILON)


def test_chebyshev_scaled_interval():
    """T_1 on [0, 4] is (x - 2) / 2."""
    pts = sample_function(lambda x: (x - 2.0) / 2.0, 0.0, 4.0, 1000)
    assert compute_chebyshev_coef(pts, 0.0, 4.0, 1) == pytest.approx(1.0, abs=EPSILON)


def test_chebyshev_term_inside_and_outside():
    assert eval_chebyshev_term(2, 0.5, -1.0, 1.0) == pytest.approx(2 * 0.25 - 1)
    # analytic continuation: T_2(2) = 7, T_3(-2) = -26
    assert eval_chebyshev_term(2, 2.0, -1.0, 1.0) == pytest.approx(7.0)
    assert eval_chebyshev_term(3, -2.0, -1.0, 1.0) == pytest.approx(-26.0)
    assert eval_chebyshev_term(4, 100.0, -1.0, 1.0) is not OUT_OF_RANGE


def test_chebyshev_term_saturates_instead_of_overflowing():
    """High orders far outside [a, b] exceed the float range and become +/-inf."""
    assert eval_chebyshev_term(300, 10.0, -1.0, 1.0) == math.inf
    assert eval_chebyshev_term(301, -10.0, -1.0, 1.0) == -math.inf
    assert eval_chebyshev_term(300, -10.0, -1.0, 1.0) == math.inf
    assert eval_chebyshev_term(300, 0.5, -1.0, 1.0) == pytest.approx(math.cos(300 * math.acos(0.5)))


# ---- legendre ---------------------------------------------------------------

def test_legendre_identity(engine):
    res = coefs_of(engine, lambda x: x, -1.0, 1.0, "legendre")
    assert res.c0 == pytest.approx(0.0, abs=EPSILON)
    assert res.coefficient("P", 1) == pytest.approx(1.0, abs=EPSILON)
    assert res.coefficient("P", 2) == pytest.approx(0.0, abs=EPSILON)


def test_legendre_quadratic(engine):
    """x^2 = P_0 / 3 + 2 P_2 / 3."""
    res = coefs_of(engine, lambda x: x * x, -1.0, 1.0, "legendre")
    assert res.c0 == pytest.approx(1 / 3, abs=1e-3)
    assert res.coefficient("P", 1) == pytest.approx(0.0, abs=1e-3)
    assert res.coefficient("P", 2) == pytest.approx(2 / 3, abs=1e-3)


def test_legendre_term_out_of_range():
    table = LegendreTable()
    assert eval_legendre_term(2, 1.4, -1.0, 1.0, table) == pytest.approx(0.5 * (3 * 1.4 ** 2 - 1), abs=1e-4)
    assert eval_legendre_term(2, 1.6, -1.0, 1.0, table) is OUT_OF_RANGE
    assert eval_legendre_term(1, -7.0, 0.0, 2.0, table) is OUT_OF_RANGE


def test_legendre_window_follows_table_range():
    """A narrower table narrows the window, so no value is read off a clamped grid end."""
    table = LegendreTable(grid_size=500, x_min=-1.2, x_max=1.2)
    assert eval_legendre_term(1, 1.3, -1.0, 1.0, table) is OUT_OF_RANGE
    assert eval_legendre_term(1, -1.25, -1.0, 1.0, table) is OUT_OF_RANGE
    assert eval_legendre_term(1, 1.1, -1.0, 1.0, table) == pytest.approx(1.1, abs=1e-6)

    wide = LegendreTable(grid_size=4000, x_min=-3.0, x_max=3.0)
    assert eval_legendre_term(2, 2.0, -1.0, 1.0, wide) == pytest.approx(5.5, abs=1e-3)


def test_engines_do_not_share_legendre_tables():
    e1, e2 = FourierEngine(), FourierEngine()
    e1.compute_coefs(sample_function(math.exp, -1, 1, 200), -1, 1, 12, SystemId.legendre)
    assert e1.legendre_table.max_order >= 12
    assert e2.legendre_table.max_order == 1


def test_unknown_system_is_rejected(engine):
    with pytest.raises(ValueError):
        engine.get_system("hermite")
