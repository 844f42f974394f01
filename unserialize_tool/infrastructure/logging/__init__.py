# unserialize_tool/infrastructure/logging/__init__.py

"""Logging infrastructure for the unserialize tool.

This module provides centralized logging configuration and setup.
"""

# Local imports
from unserialize_tool.infrastructure.logging._setup import get_default_log_path
from unserialize_tool.infrastructure.logging._setup import set_up_logging as setup_logging
from unserialize_tool.infrastructure.logging._setup import set_up_logging_from_config

__all__ = ["setup_logging", "set_up_logging_from_config", "get_default_log_path"]
