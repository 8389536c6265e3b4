"""Option chain quotes and the semicolon-separated file they are read from."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, TextIO, Union

_NUMBER_MAX_CHARS = 63
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(slots=True)
class OptionChainQuote:
    """One row of an option chain: a call and a put at one strike and expiry."""

    quote_unixtime: int = 0
    quote_readtime: str = ""
    quote_date: str = ""
    quote_time_hours: float = 0.0
    underlying_last: float = 0.0
    expire_date: str = ""
    expire_unixtime: int = 0
    dte: float = 0.0
    c_delta: float = 0.0
    c_gamma: float = 0.0
    c_vega: float = 0.0
    c_theta: float = 0.0
    c_rho: float = 0.0
    c_iv: float = 0.0
    c_volume: int = 0
    c_last: float = 0.0
    c_size: str = ""
    c_bid: float = 0.0
    c_ask: float = 0.0
    strike: float = 0.0
    p_bid: float = 0.0
    p_ask: float = 0.0
    p_size: str = ""
    p_last: float = 0.0
    p_delta: float = 0.0
    p_gamma: float = 0.0
    p_vega: float = 0.0
    p_theta: float = 0.0
    p_rho: float = 0.0
    p_iv: float = 0.0
    p_volume: int = 0
    strike_distance: float = 0.0
    strike_distance_pct: float = 0.0
    call_put_parity_criterion: float = 0.0
    c_mid: float = 0.0
    p_mid: float = 0.0
    c_bidaskspread: float = 0.0
    p_bidaskspread: float = 0.0
    yte: float = 0.0
    calc: float = 0.0
    volume: int = 0
    forward: float = 0.0
    log_moneyness: float = 0.0
    fwd_pct: float = 0.0
    log_money_fwd_pct: float = 0.0


def parse_number(text: str) -> float:
    """Parse the leading decimal number of ``text``; a comma counts as the decimal point.

    Text without a leading number yields 0.0.
    """
    cleaned = text[:_NUMBER_MAX_CHARS].replace(",", ".")
    match = _FLOAT_PREFIX.match(cleaned)
    return float(match.group(1)) if match else 0.0


def parse_integer(text: str) -> int:
    """Parse the leading base-10 integer of ``text``; anything else yields 0."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _text(capacity: int) -> Callable[[str], str]:
    return lambda value: value[:capacity]


_COLUMNS: tuple[tuple[str, Callable[[str], object]], ...] = (
    ("quote_unixtime", parse_integer),
    ("quote_readtime", _text(31)),
    ("quote_date", _text(15)),
    ("quote_time_hours", parse_number),
    ("underlying_last", parse_number),
    ("expire_date", _text(15)),
    ("expire_unixtime", parse_integer),
    ("dte", parse_number),
    ("c_delta", parse_number),
    ("c_gamma", parse_number),
    ("c_vega", parse_number),
    ("c_theta", parse_number),
    ("c_rho", parse_number),
    ("c_iv", parse_number),
    ("c_volume", parse_integer),
    ("c_last", parse_number),
    ("c_size", _text(15)),
    ("c_bid", parse_number),
    ("c_ask", parse_number),
    ("strike", parse_number),
    ("p_bid", parse_number),
    ("p_ask", parse_number),
    ("p_size", _text(15)),
    ("p_last", parse_number),
    ("p_delta", parse_number),
    ("p_gamma", parse_number),
    ("p_vega", parse_number),
    ("p_theta", parse_number),
    ("p_rho", parse_number),
    ("p_iv", parse_number),
    ("p_volume", parse_integer),
    ("strike_distance", parse_number),
    ("strike_distance_pct", parse_number),
    ("call_put_parity_criterion", parse_number),
    ("c_mid", parse_number),
    ("p_mid", parse_number),
    ("c_bidaskspread", parse_number),
    ("p_bidaskspread", parse_number),
    ("yte", parse_number),
    ("calc", parse_number),
    ("volume", parse_integer),
    ("forward", parse_number),
    ("log_moneyness", parse_number),
    ("fwd_pct", parse_number),
    ("log_money_fwd_pct", parse_number),
)


def parse_quote_line(line: str) -> OptionChainQuote:
    """Build a quote from one data line.

    The line ends at the first CR or LF. Empty fields are skipped, so fields
    after them shift left; fields beyond the known columns are ignored.
    """
    line = re.split(r"[\r\n]", line, maxsplit=1)[0]
    tokens = (token for token in line.split(";") if token)
    values = {name: parse(token) for (name, parse), token in zip(_COLUMNS, tokens)}
    return OptionChainQuote(**values)


def _read_all(stream: TextIO) -> str:
    stream.seek(0)
    text = stream.read()
    stream.seek(0)
    return text


def count_rows(stream: TextIO) -> int:
    """Count the line feeds in the whole stream, header included."""
    return _read_all(stream).count("\n")


def _data_lines(text: str) -> Iterable[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines[1:]


def read_quotes(stream: TextIO, limit: int | None = None) -> list[OptionChainQuote]:
    """Read quotes from the stream, skipping its header line.

    At most ``limit`` rows are read when it is given.
    """
    lines = list(_data_lines(_read_all(stream)))
    if limit is not None:
        lines = lines[: max(0, limit)]
    return [parse_quote_line(line) for line in lines]


def load_quotes(path: Union[str, Path]) -> list[OptionChainQuote]:
    """Load every data row of a quote file; the row count comes from its line feeds."""
    with open(path, encoding="utf-8", errors="replace", newline="") as stream:
        return read_quotes(stream, count_rows(stream) - 1)