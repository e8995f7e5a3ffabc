"""
Yearly Inflation Rate Table
Immutable year -> annual inflation rate lookup shared by the calculator and the table view
"""

import json
import logging
import pandas as pd
import numpy as np
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from inflation_calculator import config

logger = logging.getLogger(__name__)


class RateTable:
    """Static table of average annual inflation rates (percent) keyed by year"""

    def __init__(self, rates: Dict):
        """
        Build the table from a year -> rate mapping

        Args:
            rates: mapping of year (int or numeric string) to a percentage rate.
                   None or non-numeric rates are stored as unknown.
        """
        clean = {}
        for key, value in rates.items():
            try:
                year = self._to_year(key)
            except (ValueError, TypeError):
                logger.warning(f"Dropping non-integer year key: {key!r}")
                continue

            clean[year] = self._to_rate(value)

        series = pd.Series(clean, dtype=float)
        self._rates = series.sort_index()
        self._rates.index = self._rates.index.astype(int)
        self._rates.index.name = 'Year'
        self._rates.name = 'Rate'

    @staticmethod
    def _to_year(key) -> int:
        if isinstance(key, (float, np.floating)) and float(key).is_integer():
            return int(key)
        if isinstance(key, (int, np.integer)) and not isinstance(key, bool):
            return int(key)
        return int(str(key).strip())

    @staticmethod
    def _to_rate(value) -> float:
        if value is None or isinstance(value, bool):
            return np.nan
        try:
            rate = float(value)
        except (ValueError, TypeError):
            return np.nan
        return rate if np.isfinite(rate) else np.nan

    @classmethod
    def from_json(cls, path: Path) -> 'RateTable':
        """Load a JSON object of "year": rate|null"""
        path = Path(path)
        try:
            with open(path, encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Missing inflation data file: {path}")

        table = cls(data)
        logger.info(f"Loaded {len(table)} years of inflation data from {path.name}")
        return table

    @classmethod
    def from_csv(cls, path: Path) -> 'RateTable':
        """Load a CSV with Year and Rate columns"""
        path = Path(path)
        try:
            df = pd.read_csv(path)
        except FileNotFoundError:
            raise FileNotFoundError(f"Missing inflation data file: {path}")

        missing = [col for col in ('Year', 'Rate') if col not in df.columns]
        if missing:
            raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")

        rates = {year: (None if pd.isna(rate) else rate)
                 for year, rate in zip(df['Year'], df['Rate'])}
        table = cls(rates)
        logger.info(f"Loaded {len(table)} years of inflation data from {path.name}")
        return table

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def years(self) -> List[int]:
        """All years present, ascending"""
        return [int(y) for y in self._rates.index]

    def years_descending(self) -> List[int]:
        return self.years()[::-1]

    def rate(self, year: int) -> Optional[float]:
        """Rate for a year, or None when unknown or not in the table"""
        if not self.has_year(year):
            return None
        value = self._rates.loc[int(year)]
        return None if np.isnan(value) else float(value)

    def has_year(self, year) -> bool:
        try:
            return int(year) in self._rates.index
        except (ValueError, TypeError, OverflowError):
            return False

    @property
    def first_year(self) -> Optional[int]:
        return int(self._rates.index[0]) if len(self._rates) else None

    @property
    def last_year(self) -> Optional[int]:
        return int(self._rates.index[-1]) if len(self._rates) else None

    def items(self) -> List[Tuple[int, Optional[float]]]:
        """(year, rate) pairs, ascending by year"""
        return [(year, self.rate(year)) for year in self.years()]

    def to_frame(self) -> pd.DataFrame:
        """Year/Rate dataframe, ascending by year"""
        return self._rates.copy().reset_index()

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, year) -> bool:
        return self.has_year(year)

    def __iter__(self) -> Iterator[int]:
        return iter(self.years())

    def __repr__(self) -> str:
        return f"RateTable({self.first_year}-{self.last_year}, {len(self)} years)"


def load_rate_table(path: Path = None) -> RateTable:
    """Load the rate table from JSON or CSV, defaulting to the configured data file"""
    path = Path(path) if path is not None else config.DATA_FILE

    if path.suffix.lower() == '.csv':
        return RateTable.from_csv(path)
    return RateTable.from_json(path)
