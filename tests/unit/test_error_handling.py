"""
Unit tests for error handling utilities.

Tests decorators used at the loading boundary and for derived metrics.
"""
import math

import pytest
import pandas as pd
from radiolinks.utils.error_handling import (
    require_columns,
    safe_numeric_operation,
    log_dataframe_summary,
)
from radiolinks.utils.exceptions import DataValidationError


class TestRequireColumnsDecorator:
    """Test require_columns decorator."""

    def test_passes_with_all_columns(self):
        """Should pass when all required columns exist."""
        @require_columns(['a', 'b', 'c'], df_param='df')
        def process_df(df):
            return len(df)

        df = pd.DataFrame({'a': [1], 'b': [2], 'c': [3]})
        result = process_df(df)
        assert result == 1

    def test_raises_on_missing_columns(self):
        """Should raise DataValidationError when columns are missing."""
        @require_columns(['a', 'b', 'c'], df_param='df')
        def process_df(df):
            return len(df)

        df = pd.DataFrame({'a': [1], 'b': [2]})  # Missing 'c'

        with pytest.raises(DataValidationError) as exc_info:
            process_df(df)

        assert 'Missing required columns' in str(exc_info.value)
        assert 'c' in str(exc_info.value)

    def test_works_with_kwargs(self):
        """Should work with keyword arguments."""
        @require_columns(['x', 'y'], df_param='data')
        def process_data(data):
            return len(data)

        df = pd.DataFrame({'x': [1, 2], 'y': [3, 4]})
        result = process_data(data=df)
        assert result == 2

    def test_rejects_non_dataframe(self):
        """Should raise when the argument is not a DataFrame."""
        @require_columns(['a'])
        def process_df(df):
            return df

        with pytest.raises(DataValidationError, match='must be a pandas DataFrame'):
            process_df([{'a': 1}])

    def test_missing_parameter(self):
        """Should raise when the DataFrame argument is absent."""
        @require_columns(['a'], df_param='frame')
        def process_df(df=None):
            return df

        with pytest.raises(DataValidationError, match="not found"):
            process_df()


class TestSafeNumericOperation:
    """Test safe_numeric_operation decorator."""

    def test_passes_result_through(self):
        @safe_numeric_operation(default_value=None)
        def double(x):
            return x * 2

        assert double(21) == 42

    def test_zero_division_returns_default(self):
        @safe_numeric_operation(default_value=None)
        def ratio(a, b):
            return a / b

        assert ratio(1, 0) is None

    def test_type_error_returns_default(self):
        @safe_numeric_operation(default_value=-1)
        def add(a, b):
            return a + b

        assert add(1, 'x') == -1

    def test_nan_result_returns_default(self):
        @safe_numeric_operation(default_value=None)
        def nan():
            return math.nan

        assert nan() is None

    def test_infinite_result_returns_default(self):
        @safe_numeric_operation(default_value=0.0)
        def inf():
            return math.inf

        assert inf() == 0.0

    def test_none_result_untouched(self):
        @safe_numeric_operation(default_value=0.0)
        def nothing():
            return None

        assert nothing() is None

    def test_other_exceptions_propagate(self):
        @safe_numeric_operation(default_value=None)
        def broken():
            raise KeyError('x')

        with pytest.raises(KeyError):
            broken()


class TestLogDataframeSummary:
    """Test log_dataframe_summary helper."""

    def test_does_not_raise(self):
        df = pd.DataFrame({'id': [1, 2], 'frequency_mhz': [18000.0, 19010.0]})
        log_dataframe_summary(df, "radiolines")

    def test_empty_dataframe(self):
        log_dataframe_summary(pd.DataFrame(), "empty", include_columns=False)
