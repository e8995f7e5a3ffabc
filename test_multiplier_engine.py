"""
Tests for the inflation multiplier engine
"""

import pytest

from inflation_calculator import config
from inflation_calculator.rate_table import RateTable
from inflation_calculator.multiplier_engine import (
    InflationCalculatorError,
    InvalidAmountError,
    MultiplierEngine,
    UnknownYearError,
    compute,
    compute_multiplier,
    default_years,
    parse_amount,
    status_message,
    swap_years,
)


class TestParseAmount:

    @pytest.mark.parametrize("raw, expected", [
        ("100", 100.0),
        ("1,250.50", 1250.5),
        ("  42 ", 42.0),
        ("0", 0.0),
        ("1,000,000", 1000000.0),
        (75, 75.0),
        (12.5, 12.5),
        ("12abc", 12.0),
        ("12.5.3", 12.5),
        ("1_000", 1.0),
        (".5", 0.5),
        ("1e3", 1000.0),
    ])
    def test_valid(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", [
        "abc", "", "   ", "-5", "inf", "nan", "1e999", "$100", None, True, float('inf'),
    ])
    def test_invalid(self, raw):
        with pytest.raises(InvalidAmountError):
            parse_amount(raw)

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            parse_amount("x")
        with pytest.raises(InflationCalculatorError):
            parse_amount("x")


class TestComputeMultiplier:

    def test_same_year(self, sample_table):
        assert compute_multiplier(sample_table, 2021, 2021) == 1.0

    def test_compounds_years_after_start(self, sample_table):
        assert compute_multiplier(sample_table, 2020, 2022) == pytest.approx(1.10 * 0.98)
        assert compute_multiplier(sample_table, 2020, 2021) == pytest.approx(1.10)

    def test_direction_does_not_change_multiplier(self, sample_table):
        assert compute_multiplier(sample_table, 2022, 2020) == pytest.approx(
            compute_multiplier(sample_table, 2020, 2022)
        )

    def test_unknown_rate_counts_as_zero(self, gap_table):
        # 2021 is unknown, so only 2022 contributes
        assert compute_multiplier(gap_table, 2020, 2022) == pytest.approx(1.06)

    def test_missing_year_in_range_counts_as_zero(self, gap_table):
        # 2019 is absent from the table
        assert compute_multiplier(gap_table, 2018, 2020) == pytest.approx(1.03)

    def test_rejects_years_outside_table(self, sample_table):
        with pytest.raises(UnknownYearError) as exc_info:
            compute_multiplier(sample_table, 2019, 2022)
        assert exc_info.value.year == 2019

        with pytest.raises(UnknownYearError):
            compute_multiplier(sample_table, 2020, 2030)


class TestMultiplierEngine:

    def test_forward(self, sample_table):
        result = MultiplierEngine(sample_table).compute("100", 2020, 2022)

        assert result['success']
        assert result['direction'] == 'forward'
        assert result['multiplier'] == pytest.approx(1.078)
        assert result['final_amount'] == pytest.approx(107.8)
        assert result['percent_change'] == pytest.approx(7.8)
        assert result['errors'] == []

    def test_backward(self, sample_table):
        result = MultiplierEngine(sample_table).compute("100", 2022, 2020)

        assert result['success']
        assert result['direction'] == 'backward'
        assert result['final_amount'] == pytest.approx(92.76, abs=0.01)
        assert result['percent_change'] == pytest.approx(-7.24, abs=0.01)

    def test_deflation_year(self, sample_table):
        result = compute(sample_table, "100", 2021, 2022)
        assert result['final_amount'] == pytest.approx(98.0)
        assert result['percent_change'] == pytest.approx(-2.0)

    def test_invalid_amount(self, sample_table):
        result = compute(sample_table, "abc", 2020, 2021)

        assert result['success'] is False
        assert result['final_amount'] is None
        assert result['errors'] == [config.INVALID_AMOUNT_MESSAGE]

    def test_negative_amount_is_invalid(self, sample_table):
        assert compute(sample_table, "-1", 2020, 2021)['success'] is False

    def test_zero_amount(self, sample_table):
        result = compute(sample_table, "0", 2020, 2022)

        assert result['success']
        assert result['final_amount'] == 0.0
        assert result['percent_change'] == 0.0

    def test_grouping_separators(self, sample_table):
        result = compute(sample_table, "1,000", 2020, 2021)
        assert result['final_amount'] == pytest.approx(1100.0)

    def test_unknown_year_raises(self, sample_table):
        with pytest.raises(UnknownYearError):
            compute(sample_table, "100", 2020, 1999)

    def test_unknown_year_checked_before_amount(self, sample_table):
        with pytest.raises(UnknownYearError):
            compute(sample_table, "abc", 1999, 2020)

    def test_non_integer_year_rejected(self, sample_table):
        with pytest.raises(UnknownYearError):
            compute(sample_table, "100", "2020", 2021)
        with pytest.raises(UnknownYearError):
            compute(sample_table, "100", 2020.5, 2021)

    def test_infinite_year_rejected(self, sample_table):
        with pytest.raises(UnknownYearError):
            compute(sample_table, "1", float('inf'), 2020)
        with pytest.raises(UnknownYearError):
            compute_multiplier(sample_table, 2020, float('nan'))

    def test_backward_through_total_loss_year(self):
        table = RateTable({2020: 1.0, 2021: -100.0})

        result = compute(table, "100", 2021, 2020)
        assert result['success'] is False
        assert result['final_amount'] is None
        assert result['errors'] == [config.UNDEFINED_RESULT_MESSAGE]

    def test_forward_through_total_loss_year(self):
        table = RateTable({2020: 1.0, 2021: -100.0})

        result = compute(table, "100", 2020, 2021)
        assert result['success']
        assert result['final_amount'] == 0.0
        assert result['percent_change'] == pytest.approx(-100.0)


class TestProperties:

    @pytest.mark.parametrize("amount", ["0", "1", "100", "12,345.67"])
    def test_same_year_is_identity(self, sample_table, amount):
        for year in sample_table.years():
            result = compute(sample_table, amount, year, year)
            assert result['final_amount'] == parse_amount(amount)
            assert result['percent_change'] == 0
            assert result['same_year'] is True
            assert result['direction'] == 'none'

    def test_round_trip(self, sample_table):
        years = sample_table.years()
        for a in years:
            for b in years:
                there = compute(sample_table, "250", a, b)['final_amount']
                back = compute(sample_table, there, b, a)['final_amount']
                assert back == pytest.approx(250.0)

    def test_monotonic_with_non_negative_rates(self):
        table = RateTable({2000: 1.0, 2001: 0.0, 2002: 3.5, 2003: 2.0})
        for a in table.years():
            for b in table.years():
                final = compute(table, "100", a, b)['final_amount']
                if b > a:
                    assert final >= 100.0
                elif b < a:
                    assert final <= 100.0

    def test_zero_amount_never_divides_by_zero(self, sample_table):
        for a in sample_table.years():
            for b in sample_table.years():
                assert compute(sample_table, 0, a, b)['percent_change'] == 0

    def test_idempotent(self, sample_table):
        engine = MultiplierEngine(sample_table)
        assert engine.compute("100", 2020, 2022) == engine.compute("100", 2020, 2022)


class TestHelpers:

    def test_status_message(self):
        assert status_message("abc", 2020, 2021) == config.INVALID_AMOUNT_MESSAGE
        assert status_message("100", 2020, 2020) == config.SAME_YEAR_MESSAGE
        assert status_message("100", 2020, 2021) == ''

    def test_invalid_amount_message_wins_over_same_year(self):
        assert status_message("", 2020, 2020) == config.INVALID_AMOUNT_MESSAGE

    def test_default_years(self, sample_table):
        assert default_years(sample_table) == (2020, 2022)

    def test_swap_years(self):
        assert swap_years(1990, 2024) == (2024, 1990)

    def test_unknown_year_message(self):
        assert str(UnknownYearError(1899)) == "Year 1899 is not in the inflation table"
