# unserialize_tool/adapters/api/__init__.py

"""API module for decoding serialized data

This module provides the high-level entry points that decode a buffer and
bind the result into a caller-chosen type.
"""

# Local imports
from unserialize_tool.adapters.api._unserializer import Destination
from unserialize_tool.adapters.api._unserializer import RawInput
from unserialize_tool.adapters.api._unserializer import Unserializer
from unserialize_tool.adapters.api._unserializer import decode
from unserialize_tool.adapters.api._unserializer import get_unserializer
from unserialize_tool.adapters.api._unserializer import loads
from unserialize_tool.adapters.api._unserializer import try_loads
from unserialize_tool.adapters.api._unserializer import unmarshal

__all__ = [
    "Destination",
    "RawInput",
    "Unserializer",
    "decode",
    "get_unserializer",
    "loads",
    "try_loads",
    "unmarshal",
]
