import math

import pytest

from blackgreeks import pricer

F, K, VOL, DF, T = 100.0, 95.0, 0.25, 0.97, 0.8


def test_norm_cdf_at_zero():
    assert pricer.norm_cdf(0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("x", [-3.0, -0.7, 0.4, 2.5])
def test_norm_cdf_symmetry(x):
    assert pricer.norm_cdf(x) + pricer.norm_cdf(-x) == pytest.approx(1.0)


@pytest.mark.parametrize("x", [-2.0, 0.3, 1.7])
def test_norm_pdf_is_derivative_of_cdf(x):
    h = 1e-5
    numeric = (pricer.norm_cdf(x + h) - pricer.norm_cdf(x - h)) / (2 * h)
    assert pricer.norm_pdf(x) == pytest.approx(numeric, rel=1e-6)


@pytest.mark.parametrize("strike", [60.0, 95.0, 100.0, 140.0])
def test_put_call_parity(strike):
    call = pricer.price(F, strike, VOL, DF, True)
    put = pricer.price(F, strike, VOL, DF, False)
    assert call - put == pytest.approx(DF * (F - strike))


def test_zero_total_vol_gives_zero_everywhere():
    assert pricer.price(F, K, 0.0, DF, True) == 0.0
    assert pricer.delta(F, K, -1.0, DF, False) == 0.0
    assert pricer.gamma(F, K, 0.0, DF) == 0.0
    assert pricer.vega(F, K, 0.0, DF, T) == 0.0


def test_zero_strike_call_is_discounted_forward():
    assert pricer.price(100.0, 0.0, 0.2, 0.9, True) == pytest.approx(90.0)


def test_delta_call_minus_put_is_discount_factor():
    dc = pricer.delta(F, K, VOL, DF, True)
    dp = pricer.delta(F, K, VOL, DF, False)
    assert dc - dp == pytest.approx(DF)


@pytest.mark.parametrize("is_call", [True, False])
def test_delta_matches_finite_difference(is_call):
    h = 1e-4
    numeric = (
        pricer.price(F + h, K, VOL, DF, is_call) - pricer.price(F - h, K, VOL, DF, is_call)
    ) / (2 * h)
    assert pricer.delta(F, K, VOL, DF, is_call) == pytest.approx(numeric, rel=1e-6)


def test_gamma_matches_finite_difference_of_delta():
    h = 1e-4
    numeric = (
        pricer.delta(F + h, K, VOL, DF, True) - pricer.delta(F - h, K, VOL, DF, True)
    ) / (2 * h)
    assert pricer.gamma(F, K, VOL, DF) == pytest.approx(numeric, rel=1e-5)


def test_gamma_zero_for_non_positive_forward():
    assert pricer.gamma(0.0, K, VOL, DF) == 0.0
    assert pricer.gamma(-5.0, K, VOL, DF) == 0.0


def test_vega_matches_finite_difference_in_sigma():
    sigma = 0.3
    h = 1e-5
    root = math.sqrt(T)
    numeric = (
        pricer.price(F, K, (sigma + h) * root, DF, True)
        - pricer.price(F, K, (sigma - h) * root, DF, True)
    ) / (2 * h)
    assert pricer.vega(F, K, sigma * root, DF, T) == pytest.approx(numeric / 100.0, rel=1e-6)


def test_vega_zero_for_non_positive_maturity():
    assert pricer.vega(F, K, VOL, DF, 0.0) == 0.0


def test_theta_same_for_call_and_put():
    tc = pricer.theta(F, K, 0.3, DF, T, True)
    tp = pricer.theta(F, K, 0.3, DF, T, False)
    assert tc == pytest.approx(tp)
    assert tc < 0.0


@pytest.mark.parametrize("maturity", [0.0, 0.005, pricer.THETA_BUMP])
def test_theta_zero_for_short_maturity(maturity):
    assert pricer.theta(F, K, 0.3, DF, maturity, True) == 0.0


def test_theta_zero_for_non_positive_sigma():
    assert pricer.theta(F, K, 0.0, DF, T, False) == 0.0