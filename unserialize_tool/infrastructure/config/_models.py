# unserialize_tool/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from codecs import lookup
from codecs import lookup_error
from json import load
from logging import getLogger
from pathlib import Path
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

DEFAULT_CONFIG_FILENAME = "unserialize_config.json"


class DecoderConfig(BaseModel):
    """Decoder limits and policy switches"""

    max_depth: int = Field(256, gt=0, description="Maximum aggregate nesting depth")
    list_growth_factor: int = Field(
        8, ge=1, description="Largest list length allowed per declared aggregate pair"
    )
    min_list_capacity: int = Field(
        64, ge=1, description="List length always allowed regardless of pair count"
    )
    coerce_integer_keys: bool = Field(
        False, description="Reify mixed integer/text keys as a map with decimal text keys"
    )
    float_terminator_scan: Literal["last", "first"] = Field(
        "last", description="Which ';' in the remaining input terminates a float"
    )
    reject_trailing_data: bool = Field(
        False, description="Fail when bytes remain after the root value"
    )

    @field_validator("max_depth")
    @classmethod
    def validate_depth(cls, v: int) -> int:
        """Keep nesting within what the interpreter can recurse through"""
        if v > 400:  # Each level costs two interpreter frames
            raise ValueError("max_depth should not exceed 400")
        return v

    def list_capacity(self, pair_count: int) -> int:
        """Largest list length an aggregate of ``pair_count`` pairs may reify to"""
        return max(pair_count * self.list_growth_factor, self.min_list_capacity)


class BinderConfig(BaseModel):
    """How decoded text is converted into Python strings"""

    text_encoding: str = Field("utf-8", description="Encoding used for str destinations")
    text_errors: str = Field(
        "surrogateescape", description="Codec error handler used for str destinations"
    )
    native_text: Literal["str", "bytes"] = Field(
        "str", description="Form of text when binding into object or Any"
    )

    @field_validator("text_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the codec exists"""
        try:
            lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e
        return v

    @field_validator("text_errors")
    @classmethod
    def validate_errors(cls, v: str) -> str:
        """Ensure the codec error handler exists"""
        try:
            lookup_error(v)
        except LookupError as e:
            raise ValueError(f"Unknown codec error handler: {v}") from e
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    binder: BinderConfig = Field(default_factory=BinderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Convert to Path if string
        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, look for the default file in the current directory
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            getLogger(__name__).warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except (OSError, ValueError) as e:
            # ValidationError and JSONDecodeError are both ValueErrors
            getLogger(__name__).warning(
                f"Failed to load config from {config_path}: {e}. Using defaults."
            )
            return cls()
