# blackgreeks

Prices European options with the Black (forward) model and computes their
Greeks for the rows of an option chain read from a semicolon-separated file.

## Installation

```
pip install .
```

## Pricing and Greeks

The functions in `blackgreeks.pricer` take the forward, the strike, the
*total* volatility (σ·√T) and the discount factor. `is_call` selects a call
(true) or a put (false).

```python
from blackgreeks import pricer

call = pricer.price(100.0, 100.0, 0.2, 0.99, True)
put_delta = pricer.delta(100.0, 105.0, 0.2, 0.99, False)
gamma = pricer.gamma(100.0, 100.0, 0.2, 0.99)
vega = pricer.vega(100.0, 100.0, 0.2, 0.99, 1.0)          # per volatility point
theta = pricer.theta(100.0, 100.0, 0.2, 0.99, 1.0, True)  # annual sigma, price per day
```

- `price`, `delta`, `gamma` and `vega` return `0.0` when the total volatility
  is zero or negative; `gamma` also returns `0.0` for a non-positive forward,
  and `vega` for a non-positive maturity.
- `vega` is the price change for one volatility point (σ/100).
- `theta` takes the annual volatility σ and the maturity in years. It is a
  central difference over a ±0.01-year shift in maturity, reported per
  calendar day (divided by 365), and is `0.0` when σ is not positive or the
  maturity is 0.01 years or less.
- `norm_cdf` and `norm_pdf` are the standard normal distribution and density.

## Reading option chains

`blackgreeks.option_data` reads files with one header line followed by
semicolon-separated data lines, 45 columns per line in the order of the
fields of `OptionChainQuote`.

```python
from blackgreeks.option_data import load_quotes

quotes = load_quotes("chain.csv")
for q in quotes:
    print(q.expire_unixtime, q.strike, q.c_iv, q.p_iv)
```

- `parse_quote_line(line)` turns one line into an `OptionChainQuote`. The line
  ends at the first CR or LF. Empty fields are skipped, so the fields after
  them move one column to the left; extra fields are ignored; missing ones
  keep their defaults (`0`, `0.0` or `""`). Text fields are cut to their
  fixed width (31 characters for `quote_readtime`, 15 for the other text
  fields).
- `parse_number(text)` reads the leading decimal number and accepts a decimal
  comma; `parse_integer(text)` reads the leading base-10 integer. Both give
  zero when the text does not start with a number.
- `count_rows(stream)` counts the line feeds in the whole stream, header
  included.
- `read_quotes(stream, limit=None)` reads the data lines after the header,
  at most `limit` of them when a limit is given.
- `load_quotes(path)` opens a file and reads as many data rows as its line
  feeds give, less one for the header.

## Forward regressions and Greek tables

`blackgreeks.regression.ForwardRegressions` holds one
`LinearRegressionStats` (intercept, slope, r_squared, rmse, count, maturity,
discount_factor, forward, zero_rate) per expiry timestamp, in insertion
order. `add(expiry, stats)` appends an entry, `find(expiry)` returns the first
entry for that expiry or `None`, and the object supports `len()` and
iteration over `(expiry, stats)` pairs. It can also be built from such pairs:
`ForwardRegressions([(expiry, stats), ...])`.

`blackgreeks.greeks.compute_greeks(quotes, regressions, eps=1e-8)` returns one
`GreekRow` (quote_ts, expiry_ts, strike, delta_call, delta_put, gamma, vega,
theta_call, theta_put) for each quote with positive days to expiry whose
expiry is found in the regressions. Total volatilities are floored at `eps`.

```python
from blackgreeks.greeks import compute_greeks, swap_vendor_theta
from blackgreeks.option_data import load_quotes
from blackgreeks.regression import ForwardRegressions, LinearRegressionStats

quotes = load_quotes("chain.csv")
swap_vendor_theta(quotes)  # swaps c_theta and p_theta in place

regressions = ForwardRegressions()
regressions.add(1700000000, LinearRegressionStats(
    intercept=99.0, slope=-0.99, r_squared=1.0, rmse=0.0, count=10,
    maturity=0.5, discount_factor=0.99, forward=100.0, zero_rate=0.02,
))

for row in compute_greeks(quotes, regressions):
    print(row.strike, row.delta_call, row.delta_put, row.gamma, row.vega)
```

## What the package does not do

- It does not fit the forward regressions: `LinearRegressionStats` values,
  including the forward, discount factor and maturity for each expiry, must
  be supplied by the caller.
- It has no command-line program and prints no report tables; it is used as
  a library.

## Running the tests

```
pip install .[test]
pytest
```