"""Black-model option pricing, option chain file reading and Greeks per quote."""

__version__ = "0.1.0"
__all__ = ["greeks", "option_data", "pricer", "regression"]