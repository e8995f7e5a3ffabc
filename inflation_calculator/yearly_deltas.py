"""
Year-over-year rate changes for the inflation table view
"""

import pandas as pd
from typing import Dict, List, Optional, Tuple

from inflation_calculator import config
from inflation_calculator.rate_table import RateTable


def deltas(table: RateTable) -> Dict[int, Optional[float]]:
    """
    Change in rate against the previous year present in the table

    Keys are ordered most recent first. The previous year is the next entry
    going back in time, so a gap in the table compares across it. Delta is
    None when either rate is unknown, and always None for the oldest year.
    """
    years = table.years_descending()
    result = {}

    for i, year in enumerate(years):
        rate = table.rate(year)
        prev_rate = table.rate(years[i + 1]) if i + 1 < len(years) else None

        if rate is None or prev_rate is None:
            result[year] = None
        else:
            result[year] = rate - prev_rate

    return result


def table_entries(table: RateTable) -> List[Dict]:
    """Year, rate and delta for every year, most recent first"""
    year_deltas = deltas(table)
    return [
        {'year': year, 'rate': table.rate(year), 'delta': delta}
        for year, delta in year_deltas.items()
    ]


def split_latest(entries: List[Dict]) -> Tuple[Optional[Dict], List[Dict]]:
    """Separate the most recent entry from the rest"""
    if not entries:
        return None, []
    return entries[0], entries[1:]


def grid_layout(entries: List[Dict], columns: int = config.GRID_COLUMNS) -> List[List[Optional[Dict]]]:
    """
    Arrange entries into rows for a fixed-width grid

    Entries fill the grid column by column, so reading down the first column
    continues at the top of the next. Empty trailing cells are None.
    """
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")
    if not entries:
        return []

    rows_count = -(-len(entries) // columns)
    rows = []
    for r in range(rows_count):
        row = []
        for c in range(columns):
            index = c * rows_count + r
            row.append(entries[index] if index < len(entries) else None)
        rows.append(row)

    return rows


def deltas_frame(table: RateTable) -> pd.DataFrame:
    """Year, Rate and Delta columns, most recent first"""
    df = pd.DataFrame(table_entries(table), columns=['year', 'rate', 'delta'])
    df = df.rename(columns={'year': 'Year', 'rate': 'Rate', 'delta': 'Delta'})
    return df.astype({'Rate': float, 'Delta': float})
