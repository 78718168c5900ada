"""
Configuration management using Pydantic for validation.

Provides type-safe loading of the engine settings (grouping sentinel,
throughput derating, logging) from YAML files.
"""
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator
import yaml

from radiolinks.utils.exceptions import ConfigurationError


class GroupingParams(BaseModel):
    """Parameters for grouping unidirectional records into duplex links."""
    unknown_operator_label: str = Field(
        "unknown",
        min_length=1,
        description="Bucket label for records without an operator",
    )

    @field_validator('unknown_operator_label')
    @classmethod
    def strip_label(cls, v: str) -> str:
        """Reject labels that are blank once stripped."""
        v = v.strip()
        if not v:
            raise ValueError("unknown_operator_label must not be blank")
        return v


class ThroughputParams(BaseModel):
    """Parameters for the coarse throughput estimate."""
    derating_factor: float = Field(
        0.85,
        gt=0.0,
        le=1.0,
        description="Spectral-efficiency derating applied to width x bits/symbol",
    )


class LoggingParams(BaseModel):
    """Logging output settings."""
    level: str = Field("INFO", description="Logging level")
    json_output: bool = Field(False, description="Emit JSON log lines")
    log_file: Optional[Path] = Field(None, description="Optional log file")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and check the level name."""
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return v


class EngineConfig(BaseModel):
    """Complete engine configuration."""
    grouping: GroupingParams = Field(default_factory=GroupingParams)
    throughput: ThroughputParams = Field(default_factory=ThroughputParams)
    logging: LoggingParams = Field(default_factory=LoggingParams)


def load_config(config_path: Path) -> EngineConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated EngineConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If YAML is malformed or not a mapping
        ValidationError: If config validation fails

    Example:
        >>> config = load_config(Path("config/default.yaml"))
        >>> config.throughput.derating_factor
        0.85
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {config_path}: {e}") from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config root must be a mapping, got {type(config_dict).__name__}"
        )

    return EngineConfig(**config_dict)


def get_default_config() -> EngineConfig:
    """
    Get default configuration.

    Returns:
        Default EngineConfig
    """
    return EngineConfig()
