"""Philippine inflation calculator: restate peso amounts between years."""

from inflation_calculator.rate_table import RateTable, load_rate_table
from inflation_calculator.multiplier_engine import (
    InflationCalculatorError,
    InvalidAmountError,
    MultiplierEngine,
    UnknownYearError,
    compute,
    compute_multiplier,
    parse_amount,
)
from inflation_calculator.yearly_deltas import deltas

__version__ = "1.0.0"
