"""
Display formatting for amounts, rates and deltas
"""

import numpy as np

from inflation_calculator import config


def format_currency(value) -> str:
    """Peso amount with grouping and 2 decimals, e.g. ₱1,234.56"""
    if value is None or isinstance(value, bool):
        value = 0.0
    value = float(value)
    if not np.isfinite(value):
        value = 0.0

    sign = '-' if value < 0 and round(abs(value), 2) != 0 else ''
    return f"{sign}{config.CURRENCY_SYMBOL}{abs(value):,.2f}"


def format_percent_change(pct: float) -> str:
    label = 'increase' if pct >= 0 else 'decrease'
    return f"{pct:.2f}% {label}"


def format_rate(rate) -> str:
    if rate is None or not np.isfinite(rate):
        return config.UNKNOWN_RATE_LABEL
    return f"{rate:g}%"


def delta_direction(delta) -> str:
    """Anything not above zero, including no change, counts as a decrease"""
    if delta is None:
        return ''
    return 'increase' if delta > 0 else 'decrease'


def format_delta(delta) -> str:
    """Signed delta with 2 decimals, using a true minus sign for drops"""
    if delta is None:
        return ''
    sign = '+' if delta > 0 else config.MINUS_SIGN
    return f"{sign}{abs(delta):.2f}"
