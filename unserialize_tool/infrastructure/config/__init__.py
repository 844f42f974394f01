# unserialize_tool/infrastructure/config/__init__.py

"""Configuration infrastructure for the unserialize tool.

This module manages configuration loading, validation, and models.
"""

# Local imports
from unserialize_tool.infrastructure.config._loader import ConfigLoader
from unserialize_tool.infrastructure.config._loader import get_config
from unserialize_tool.infrastructure.config._models import AppConfig
from unserialize_tool.infrastructure.config._models import BinderConfig
from unserialize_tool.infrastructure.config._models import DEFAULT_CONFIG_FILENAME
from unserialize_tool.infrastructure.config._models import DecoderConfig
from unserialize_tool.infrastructure.config._models import LoggingConfig

__all__ = [
    "AppConfig",
    "BinderConfig",
    "ConfigLoader",
    "DEFAULT_CONFIG_FILENAME",
    "DecoderConfig",
    "LoggingConfig",
    "get_config",
]
