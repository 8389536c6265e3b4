"""Model Greeks for a set of quotes against fitted forward curves."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from . import pricer
from .option_data import OptionChainQuote
from .regression import ForwardRegressions

DEFAULT_EPS = 1e-8


@dataclass(slots=True)
class GreekRow:
    """Greeks of one quote's call and put."""

    quote_ts: int
    expiry_ts: int
    strike: float
    delta_call: float
    delta_put: float
    gamma: float
    vega: float
    theta_call: float
    theta_put: float


def swap_vendor_theta(quotes: Iterable[OptionChainQuote]) -> None:
    """Swap call and put theta in place; the data vendor publishes them reversed."""
    for quote in quotes:
        quote.c_theta, quote.p_theta = quote.p_theta, quote.c_theta


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def compute_greeks(
    quotes: Iterable[OptionChainQuote],
    regressions: ForwardRegressions,
    eps: float = DEFAULT_EPS,
) -> list[GreekRow]:
    """Compute Greeks for every quote with positive days to expiry and a fitted expiry.

    Total volatilities are floored at ``eps``.
    """
    rows = []
    for quote in quotes:
        if quote.dte <= 0.0:
            continue
        stats = regressions.find(quote.expire_unixtime)
        if stats is None:
            continue

        root_t = _sqrt(stats.maturity)
        vol_c = max(eps, quote.c_iv * root_t)
        vol_p = max(eps, quote.p_iv * root_t)
        fwd, k, df, t = stats.forward, quote.strike, stats.discount_factor, stats.maturity

        rows.append(
            GreekRow(
                quote_ts=quote.quote_unixtime,
                expiry_ts=quote.expire_unixtime,
                strike=k,
                delta_call=pricer.delta(fwd, k, vol_c, df, True),
                delta_put=pricer.delta(fwd, k, vol_p, df, False),
                gamma=pricer.gamma(fwd, k, vol_c, df),
                vega=pricer.vega(fwd, k, vol_c, df, t),
                theta_call=pricer.theta(fwd, k, quote.c_iv, df, t, True),
                theta_put=pricer.theta(fwd, k, quote.p_iv, df, t, False),
            )
        )
    return rows