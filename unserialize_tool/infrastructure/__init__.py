# unserialize_tool/infrastructure/__init__.py

"""System infrastructure components for configuration and logging."""

# Local imports
from unserialize_tool.infrastructure.config import ConfigLoader
from unserialize_tool.infrastructure.config import get_config

__all__ = ["ConfigLoader", "get_config"]
