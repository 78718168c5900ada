"""
Error handling utilities for the radio link engine.

Provides decorators that let derived metrics degrade to "unavailable"
instead of failing, plus DataFrame checks used at the loading boundary.
"""
import inspect
from functools import wraps
from typing import List, Callable, Any
import pandas as pd
import numpy as np
from radiolinks.utils.logging_config import get_logger
from radiolinks.utils.exceptions import DataValidationError

logger = get_logger(__name__)


def require_columns(required_cols: List[str], df_param: str = "df"):
    """
    Decorator to validate required columns exist in DataFrame.

    Parameters
    ----------
    required_cols : List[str]
        List of required column names
    df_param : str
        Name of the DataFrame parameter to check

    Raises
    ------
    DataValidationError
        If required columns are missing
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)
        param_names = list(sig.parameters.keys())

        @wraps(func)
        def wrapper(*args, **kwargs):
            df = kwargs.get(df_param)
            if df is None and df_param in param_names:
                param_idx = param_names.index(df_param)
                if param_idx < len(args):
                    df = args[param_idx]

            if df is None:
                raise DataValidationError(f"DataFrame parameter '{df_param}' not found")

            if not isinstance(df, pd.DataFrame):
                raise DataValidationError(
                    f"Parameter '{df_param}' must be a pandas DataFrame, got {type(df)}"
                )

            missing_cols = set(required_cols) - set(df.columns)
            if missing_cols:
                raise DataValidationError(
                    f"Missing required columns in {df_param}: {sorted(missing_cols)}. "
                    f"Available columns: {sorted(df.columns.tolist())}"
                )

            return func(*args, **kwargs)
        return wrapper
    return decorator


def safe_numeric_operation(default_value: Any = None):
    """
    Decorator to safely handle numeric operations that might fail.

    Parameters
    ----------
    default_value : Any
        Value to return if the operation fails or yields NaN/infinity.
        ``None`` marks the metric as unavailable.

    Returns
    -------
    Callable
        Decorated function with error handling
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                result = func(*args, **kwargs)
            except (ZeroDivisionError, ValueError, TypeError, OverflowError) as e:
                logger.debug(
                    f"{func.__name__} numeric operation failed",
                    error=str(e),
                    returning=default_value
                )
                return default_value

            if isinstance(result, (int, float)) and not isinstance(result, bool):
                if not np.isfinite(result):
                    logger.debug(
                        f"{func.__name__} returned invalid numeric value",
                        result=result,
                        returning=default_value
                    )
                    return default_value
            return result
        return wrapper
    return decorator


def log_dataframe_summary(
    df: pd.DataFrame,
    name: str,
    include_columns: bool = True
) -> None:
    """
    Log summary statistics for a DataFrame.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to summarize
    name : str
        Name for logging
    include_columns : bool
        Whether to log column names
    """
    log_data = {
        "dataframe": name,
        "rows": len(df),
        "columns": len(df.columns),
    }

    if include_columns:
        log_data["column_names"] = df.columns.tolist()

    if len(df) > 0:
        log_data["memory_mb"] = df.memory_usage(deep=True).sum() / 1024 / 1024

    logger.debug("DataFrame summary", **log_data)
