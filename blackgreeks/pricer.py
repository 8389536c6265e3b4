"""Black-76 prices and Greeks on a forward, expressed with total volatility."""

from __future__ import annotations

import math

THETA_BUMP = 0.01
"""Maturity bump, in years, used by the finite-difference theta."""

DAYS_PER_YEAR = 365


def norm_cdf(x: float) -> float:
    """Standard normal cumulative distribution function."""
    return 0.5 * math.erfc(-x / math.sqrt(2.0))


def norm_pdf(x: float) -> float:
    """Standard normal probability density function."""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


def _log_ratio(forward: float, strike: float) -> float:
    """ln(forward / strike) with IEEE semantics instead of Python exceptions."""
    if strike == 0:
        ratio = math.copysign(math.inf, forward) if forward != 0 else math.nan
    else:
        ratio = forward / strike
    if ratio > 0:
        return math.log(ratio)
    if ratio == 0:
        return -math.inf
    return math.nan


def _d1(forward: float, strike: float, total_vol: float) -> float:
    return (_log_ratio(forward, strike) + 0.5 * total_vol * total_vol) / total_vol


def price(
    forward: float,
    strike: float,
    total_vol: float,
    discount_factor: float,
    is_call: bool,
) -> float:
    """Discounted Black price; ``total_vol`` is sigma * sqrt(T)."""
    if total_vol <= 0.0:
        return 0.0
    d1 = _d1(forward, strike, total_vol)
    d2 = d1 - total_vol
    if is_call:
        return discount_factor * (forward * norm_cdf(d1) - strike * norm_cdf(d2))
    return discount_factor * (strike * norm_cdf(-d2) - forward * norm_cdf(-d1))


def delta(
    forward: float,
    strike: float,
    total_vol: float,
    discount_factor: float,
    is_call: bool,
) -> float:
    """Sensitivity of the price to the forward."""
    if total_vol <= 0.0:
        return 0.0
    base = norm_cdf(_d1(forward, strike, total_vol))
    return discount_factor * (base if is_call else base - 1.0)


def gamma(
    forward: float,
    strike: float,
    total_vol: float,
    discount_factor: float,
) -> float:
    """Second derivative of the price with respect to the forward."""
    if total_vol <= 0.0 or forward <= 0.0:
        return 0.0
    d1 = _d1(forward, strike, total_vol)
    return discount_factor * norm_pdf(d1) / (forward * total_vol)


def vega(
    forward: float,
    strike: float,
    total_vol: float,
    discount_factor: float,
    maturity: float,
) -> float:
    """Price change per volatility point (one hundredth of sigma)."""
    if total_vol <= 0.0 or maturity <= 0.0:
        return 0.0
    d1 = _d1(forward, strike, total_vol)
    return forward * norm_pdf(d1) * math.sqrt(maturity) * discount_factor / 100.0


def theta(
    forward: float,
    strike: float,
    sigma: float,
    discount_factor: float,
    maturity: float,
    is_call: bool,
) -> float:
    """Price decay per calendar day, by central difference in maturity.

    ``sigma`` is the annual volatility and ``maturity`` is in years.
    """
    if sigma <= 0.0 or maturity <= THETA_BUMP:
        return 0.0
    longer = maturity + THETA_BUMP
    shorter = maturity - THETA_BUMP
    p_plus = price(forward, strike, sigma * math.sqrt(longer), discount_factor, is_call)
    p_minus = price(forward, strike, sigma * math.sqrt(shorter), discount_factor, is_call)
    return -(p_plus - p_minus) / (2.0 * THETA_BUMP) / DAYS_PER_YEAR