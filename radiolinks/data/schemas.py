"""
Pydantic schemas for radioline records.

Defines the immutable endpoint and unidirectional record models the link
engine consumes. Coordinates are rounded to 6 decimals on the way in so
that exact equality between endpoints of the same site holds.
"""
from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

# Decimal places kept for endpoint coordinates
COORDINATE_PRECISION = 6


def format_coordinate(value: float) -> str:
    """
    Render a coordinate the way endpoint keys expect it.

    Shortest decimal form with at most 6 decimals and no trailing zeros,
    e.g. 52.2297 -> '52.2297', 21.0 -> '21'.
    """
    text = f"{value:.{COORDINATE_PRECISION}f}".rstrip('0').rstrip('.')
    if text in ('-0', ''):
        return '0'
    return text


def _blank_to_none(v: Any) -> Any:
    if v is None:
        return None
    if isinstance(v, float) and v != v:  # NaN from pandas
        return None
    if isinstance(v, str) and not v.strip():
        return None
    return v


class Endpoint(BaseModel):
    """
    A fixed radio site location.

    Example:
        >>> site = Endpoint(latitude=52.2297, longitude=21.0122)
        >>> site.key
        '52.2297,21.0122'
    """
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    @field_validator('latitude', 'longitude')
    @classmethod
    def round_coordinate(cls, v: float) -> float:
        """Round to 6 decimals; fold -0.0 into 0.0."""
        return round(v, COORDINATE_PRECISION) + 0.0

    @property
    def key(self) -> str:
        """String key ``"lat,lon"`` used for grouping and canonical ordering."""
        return f"{format_coordinate(self.latitude)},{format_coordinate(self.longitude)}"

    model_config = {
        "frozen": True,
    }


class UnidirectionalLinkRecord(BaseModel):
    """
    One licensed frequency/polarization assignment from tx to rx.

    Example:
        >>> record = UnidirectionalLinkRecord(
        ...     id=101,
        ...     tx=Endpoint(latitude=52.2297, longitude=21.0122),
        ...     rx=Endpoint(latitude=52.1, longitude=21.2),
        ...     frequency_mhz=18000,
        ...     polarization='V',
        ...     channel_width_mhz=28,
        ...     modulation='256QAM',
        ...     permit_number='R/1234/2020',
        ...     permit_expiry='2030-12-31',
        ...     operator_id='26001',
        ... )
    """
    id: int = Field(..., description="Record identifier")
    tx: Endpoint = Field(..., description="Transmitting site")
    rx: Endpoint = Field(..., description="Receiving site")
    frequency_mhz: float = Field(..., gt=0, description="Carrier frequency (MHz)")

    polarization: Optional[str] = Field(None, description="Polarization (e.g. 'V', 'H')")
    channel_width_mhz: Optional[float] = Field(None, gt=0, description="Channel width (MHz)")
    modulation: Optional[str] = Field(None, description="Modulation name (e.g. '256QAM')")

    permit_number: Optional[str] = Field(None, description="Permit / decision number")
    permit_expiry: Optional[date] = Field(None, description="Permit expiry date")
    operator_id: Optional[str] = Field(None, description="Operator identifier")

    @field_validator(
        'polarization', 'channel_width_mhz', 'modulation',
        'permit_number', 'permit_expiry', 'operator_id',
        mode='before',
    )
    @classmethod
    def blank_optional_to_none(cls, v: Any) -> Any:
        """Treat empty strings and NaN as missing."""
        return _blank_to_none(v)

    @field_validator('polarization', 'modulation', 'permit_number')
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        """Trim whitespace from text fields."""
        if v is None:
            return None
        return v.strip() or None

    @field_validator('polarization')
    @classmethod
    def upper_polarization(cls, v: Optional[str]) -> Optional[str]:
        """Polarization letters compare case-insensitively."""
        return v.upper() if v is not None else None

    @field_validator('operator_id', mode='before')
    @classmethod
    def operator_to_text(cls, v: Any) -> Any:
        """Accept numeric operator codes (MNC) as text."""
        if isinstance(v, bool) or v is None:
            return v
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        if isinstance(v, int):
            return str(v)
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator('permit_expiry', mode='before')
    @classmethod
    def parse_expiry(cls, v: Any) -> Any:
        """Accept datetimes and ISO timestamps by keeping the date part."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and len(v.strip()) > 10:
            return v.strip()[:10]
        return v

    model_config = {
        "frozen": True,
    }
