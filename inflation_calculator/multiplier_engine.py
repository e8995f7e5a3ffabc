"""
Inflation Multiplier Engine
Compounds annual inflation rates between two years to restate a peso amount
"""

import logging
import re
import numpy as np
from typing import Dict, Tuple, Union

from inflation_calculator import config
from inflation_calculator.rate_table import RateTable

logger = logging.getLogger(__name__)

LEADING_NUMBER = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


class InflationCalculatorError(Exception):
    """Base class for calculator errors"""


class InvalidAmountError(ValueError, InflationCalculatorError):
    """Amount input is not a finite, non-negative number"""


class UnknownYearError(KeyError, InflationCalculatorError):
    """Requested year is not present in the rate table"""

    def __init__(self, year):
        self.year = year
        super().__init__(year)

    def __str__(self):
        return f"Year {self.year!r} is not in the inflation table"


def parse_amount(raw: Union[str, int, float]) -> float:
    """
    Parse a raw amount input into a non-negative float

    Grouping separators (",") and surrounding whitespace are ignored, so
    "1,250.50" parses to 1250.5. Only the leading number is read: "12abc"
    parses to 12 and "1_000" to 1.

    Raises:
        InvalidAmountError: empty, unparsable, negative or non-finite input
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidAmountError(f"Invalid amount: {raw!r}")

    text = str(raw).replace(',', '').strip()
    match = LEADING_NUMBER.match(text)
    if match is None:
        raise InvalidAmountError(f"Invalid amount: {raw!r}")
    amount = float(match.group(0))

    if not np.isfinite(amount) or amount < 0:
        raise InvalidAmountError(f"Amount must be a finite non-negative number: {raw!r}")

    return amount


def _check_year(table: RateTable, year) -> int:
    if isinstance(year, bool) or not table.has_year(year) or int(year) != year:
        raise UnknownYearError(year)
    return int(year)


def compute_multiplier(table: RateTable, from_year: int, to_year: int) -> float:
    """
    Cumulative growth factor between two years

    Rates are compounded over the years after the earlier year up to and
    including the later one, in ascending order. A year with an unknown rate
    counts as 0%.
    """
    from_year = _check_year(table, from_year)
    to_year = _check_year(table, to_year)

    if from_year == to_year:
        return 1.0

    start, end = min(from_year, to_year), max(from_year, to_year)
    multiplier = 1.0
    for year in range(start + 1, end + 1):
        rate = table.rate(year)
        if rate is None:
            logger.debug(f"No rate for {year}, treating as 0%")
            rate = 0.0
        multiplier *= 1 + rate / 100

    return multiplier


class MultiplierEngine:
    """Restates an amount from one year's pesos into another's"""

    def __init__(self, table: RateTable):
        self.table = table

    def compute(self, amount, from_year: int, to_year: int) -> Dict:
        """
        Restate amount from from_year into to_year

        Moving forward in time multiplies by the compounded rates, moving
        backward divides by them.

        Args:
            amount: raw amount input (string with optional "," separators, or a number)
            from_year: year the amount is expressed in
            to_year: year to restate the amount into

        Returns:
            Dict with 'success' plus either the computed values or 'errors'

        Raises:
            UnknownYearError: either year is outside the table
        """
        from_year = _check_year(self.table, from_year)
        to_year = _check_year(self.table, to_year)

        try:
            value = parse_amount(amount)
        except InvalidAmountError as e:
            logger.debug(str(e))
            return self._invalid(from_year, to_year, config.INVALID_AMOUNT_MESSAGE)

        multiplier = compute_multiplier(self.table, from_year, to_year)

        # a -100% year in range zeroes the multiplier
        if to_year < from_year and multiplier == 0:
            logger.warning(f"Zero multiplier between {to_year} and {from_year}")
            return self._invalid(from_year, to_year, config.UNDEFINED_RESULT_MESSAGE)

        if to_year > from_year:
            direction = 'forward'
            final_amount = value * multiplier
        elif to_year < from_year:
            direction = 'backward'
            final_amount = value / multiplier
        else:
            direction = 'none'
            final_amount = value

        if value == 0:
            percent_change = 0.0
        else:
            percent_change = ((final_amount - value) / value) * 100

        return {
            'success': True,
            'amount': value,
            'from_year': from_year,
            'to_year': to_year,
            'multiplier': float(multiplier),
            'final_amount': float(final_amount),
            'percent_change': float(percent_change),
            'direction': direction,
            'same_year': from_year == to_year,
            'errors': []
        }

    @staticmethod
    def _invalid(from_year: int, to_year: int, message: str) -> Dict:
        return {
            'success': False,
            'from_year': from_year,
            'to_year': to_year,
            'final_amount': None,
            'percent_change': 0.0,
            'errors': [message]
        }


def compute(table: RateTable, amount, from_year: int, to_year: int) -> Dict:
    """Shortcut for MultiplierEngine(table).compute(...)"""
    return MultiplierEngine(table).compute(amount, from_year, to_year)


def status_message(amount, from_year: int, to_year: int) -> str:
    """Advisory text for the current inputs, empty when there is nothing to say"""
    try:
        parse_amount(amount)
    except InvalidAmountError:
        return config.INVALID_AMOUNT_MESSAGE

    if from_year == to_year:
        return config.SAME_YEAR_MESSAGE
    return ''


def default_years(table: RateTable) -> Tuple[int, int]:
    """Initial (from, to) selection: oldest and most recent year"""
    return table.first_year, table.last_year


def swap_years(from_year: int, to_year: int) -> Tuple[int, int]:
    return to_year, from_year
