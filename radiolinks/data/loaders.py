"""
Radioline record loading with validation.

Reads flat CSV exports (one row per unidirectional assignment) into
UnidirectionalLinkRecord values. Invalid rows are skipped and reported;
a file with too many invalid rows is rejected.
"""
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd
from pydantic import ValidationError

from radiolinks.data.schemas import Endpoint, UnidirectionalLinkRecord
from radiolinks.utils.dtypes import (
    REQUIRED_RADIOLINE_COLUMNS,
    OPTIONAL_RADIOLINE_COLUMNS,
    get_dtypes_for_columns,
)
from radiolinks.utils.error_handling import require_columns, log_dataframe_summary
from radiolinks.utils.exceptions import DataLoadError, DataValidationError
from radiolinks.utils.logging_config import get_logger

logger = get_logger(__name__)

# Reject the file when more than this share of rows is invalid
MAX_INVALID_ROW_RATE = 0.10


def load_radiolines(
    file_path: Path,
    validate: bool = True,
) -> List[UnidirectionalLinkRecord]:
    """
    Load radioline records from CSV.

    Args:
        file_path: Path to the radioline CSV file
        validate: If True, fail when more than 10% of rows are invalid;
            otherwise invalid rows are only logged and skipped

    Returns:
        List of validated records, in file order

    Raises:
        DataLoadError: If file not found or cannot be read
        DataValidationError: If required columns are missing or too many
            rows are invalid

    Example:
        >>> records = load_radiolines(Path("data/radiolines.csv"))
        >>> print(f"Loaded {len(records)} records")
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise DataLoadError(f"Radioline file not found: {file_path}")

    logger.info("loading_radiolines", file=str(file_path))

    try:
        header = pd.read_csv(file_path, nrows=0).columns
        df = pd.read_csv(file_path, dtype=get_dtypes_for_columns(header))
    except Exception as e:
        raise DataLoadError(f"Failed to read radioline CSV: {e}") from e

    logger.info("radiolines_file_read", rows=len(df), columns=len(df.columns))
    log_dataframe_summary(df, "radiolines")

    records, errors = records_from_dataframe(df)

    if errors:
        error_rate = len(errors) / len(df)
        logger.warning(
            "radioline_validation_errors",
            total_rows=len(df),
            invalid_rows=len(errors),
            error_rate=f"{error_rate:.2%}"
        )

        if validate and error_rate > MAX_INVALID_ROW_RATE:
            raise DataValidationError(
                f"Radioline validation failed: {len(errors)} invalid rows",
                invalid_rows=len(errors),
                details={
                    'total_rows': len(df),
                    'error_rate': error_rate,
                    'sample_errors': errors[:5]
                }
            )

    return records


@require_columns(REQUIRED_RADIOLINE_COLUMNS)
def records_from_dataframe(
    df: pd.DataFrame,
) -> Tuple[List[UnidirectionalLinkRecord], List[Dict[str, Any]]]:
    """
    Convert DataFrame rows into records.

    Args:
        df: DataFrame with at least the required radioline columns

    Returns:
        Tuple of (valid records, list of error dicts for invalid rows)
    """
    records = []
    errors = []

    optional = [c for c in OPTIONAL_RADIOLINE_COLUMNS if c in df.columns]
    clean = df.astype(object).where(pd.notna(df), None)

    for idx, row in clean.iterrows():
        data = {col: _to_python(row[col]) for col in REQUIRED_RADIOLINE_COLUMNS + optional}
        try:
            records.append(UnidirectionalLinkRecord(
                id=data['id'],
                tx=Endpoint(latitude=data['tx_latitude'], longitude=data['tx_longitude']),
                rx=Endpoint(latitude=data['rx_latitude'], longitude=data['rx_longitude']),
                frequency_mhz=data['frequency_mhz'],
                **{col: data[col] for col in optional},
            ))
        except ValidationError as e:
            errors.append({
                'row': idx,
                'errors': e.errors(include_url=False)
            })

    return records, errors


def _to_python(value: Any) -> Any:
    """Unwrap numpy scalars so pydantic sees plain Python values."""
    if hasattr(value, 'item') and not isinstance(value, (str, bytes)):
        return value.item()
    return value
