"""
Custom exception hierarchy for the radio link engine.

All custom exceptions inherit from RadioLinkError for easy catching.
The link-building pipeline itself never raises on well-formed records;
these are raised at the edges (configuration, file loading, runner).
"""


class RadioLinkError(Exception):
    """Base exception for all radio link engine errors."""
    pass


class ConfigurationError(RadioLinkError):
    """Configuration-related errors.

    Raised when configuration loading or validation fails.

    Example:
        >>> raise ConfigurationError("Invalid throughput config: derating_factor must be <= 1")
    """
    pass


class DataValidationError(RadioLinkError):
    """Data validation errors.

    Raised when input records fail validation checks.

    Attributes:
        invalid_rows: Number of rows that failed validation
        details: Dictionary with validation error details
    """

    def __init__(self, message: str, invalid_rows: int = 0, details: dict = None):
        super().__init__(message)
        self.invalid_rows = invalid_rows
        self.details = details or {}

    def __str__(self):
        base = super().__str__()
        if self.invalid_rows > 0:
            return f"{base} (invalid_rows={self.invalid_rows})"
        return base


class DataLoadError(RadioLinkError):
    """Data loading errors.

    Raised when record files cannot be loaded or parsed.

    Example:
        >>> raise DataLoadError("Failed to load radiolines: file not found")
    """
    pass


class ProcessingError(RadioLinkError):
    """Processing pipeline errors.

    Raised when a runner stage fails during execution.

    Attributes:
        stage: Name of the pipeline stage that failed
        details: Dictionary with error details
    """

    def __init__(self, message: str, stage: str = None, details: dict = None):
        super().__init__(message)
        self.stage = stage
        self.details = details or {}

    def __str__(self):
        base = super().__str__()
        if self.stage:
            return f"{base} (stage={self.stage})"
        return base

