"""
Data type specifications for radioline CSV loading.

Explicit dtypes keep identifiers and permit numbers as strings (leading
zeros, slashes) and coordinates at full float64 precision.
"""

import numpy as np

# Columns every radioline record file must provide
REQUIRED_RADIOLINE_COLUMNS = [
    'id',
    'tx_latitude',
    'tx_longitude',
    'rx_latitude',
    'rx_longitude',
    'frequency_mhz',
]

# Optional columns, read when present
OPTIONAL_RADIOLINE_COLUMNS = [
    'polarization',
    'channel_width_mhz',
    'modulation',
    'permit_number',
    'permit_expiry',
    'operator_id',
]

RADIOLINE_DTYPES = {
    # Identifiers
    'id': 'Int64',  # nullable: a blank id fails its own row, not the file
    'operator_id': str,  # MNC codes or names, keep as text
    'permit_number': str,

    # Endpoints (high precision required)
    'tx_latitude': np.float64,
    'tx_longitude': np.float64,
    'rx_latitude': np.float64,
    'rx_longitude': np.float64,

    # Channel
    'frequency_mhz': np.float64,
    'channel_width_mhz': np.float64,
    'polarization': str,
    'modulation': str,

    # Parsed later into a date
    'permit_expiry': str,
}


def get_dtypes_for_columns(columns) -> dict:
    """Return the dtype mapping restricted to the given columns."""
    return {col: dtype for col, dtype in RADIOLINE_DTYPES.items() if col in columns}
