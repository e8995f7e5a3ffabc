import pytest

from inflation_calculator.rate_table import RateTable


@pytest.fixture
def sample_table():
    """Three-year table used throughout the calculator tests"""
    return RateTable({2020: 5, 2021: 10, 2022: -2})


@pytest.fixture
def gap_table():
    """Table with a missing year (2019) and an unknown rate (2021)"""
    return RateTable({2017: 2.0, 2018: 4.0, 2020: 3.0, 2021: None, 2022: 6.0})
