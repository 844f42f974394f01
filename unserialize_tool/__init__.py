# unserialize_tool/__init__.py

"""Unserialize Tool Package

A library for decoding the compact, length-prefixed typed serialization
format into generic values and binding them into Python types.
"""

# Local imports
# High-level API
from unserialize_tool.adapters.api import Destination
from unserialize_tool.adapters.api import Unserializer
from unserialize_tool.adapters.api import decode
from unserialize_tool.adapters.api import loads
from unserialize_tool.adapters.api import try_loads
from unserialize_tool.adapters.api import unmarshal

# Errors
from unserialize_tool.core.domain import ErrorKind
from unserialize_tool.core.domain import HeterogeneousKeysError
from unserialize_tool.core.domain import KeyOutOfRangeError
from unserialize_tool.core.domain import MalformedNumberError
from unserialize_tool.core.domain import MissingTerminatorError
from unserialize_tool.core.domain import NestingTooDeepError
from unserialize_tool.core.domain import TrailingDataError
from unserialize_tool.core.domain import TruncatedError
from unserialize_tool.core.domain import TypeMismatchError
from unserialize_tool.core.domain import UnknownTypeError
from unserialize_tool.core.domain import UnserializeError

# Data models (for advanced users)
from unserialize_tool.core.types import BooleanValue
from unserialize_tool.core.types import Err
from unserialize_tool.core.types import FloatValue
from unserialize_tool.core.types import GenericValue
from unserialize_tool.core.types import HoleValue
from unserialize_tool.core.types import IntegerValue
from unserialize_tool.core.types import ListValue
from unserialize_tool.core.types import MapValue
from unserialize_tool.core.types import Ok
from unserialize_tool.core.types import Result
from unserialize_tool.core.types import TextValue

# For users who want lower-level control
from unserialize_tool.infrastructure.config import AppConfig
from unserialize_tool.infrastructure.config import BinderConfig
from unserialize_tool.infrastructure.config import ConfigLoader
from unserialize_tool.infrastructure.config import DecoderConfig
from unserialize_tool.infrastructure.logging import setup_logging

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "Unserializer",
    "Destination",
    "decode",
    "loads",
    "try_loads",
    "unmarshal",
    # Errors
    "ErrorKind",
    "UnserializeError",
    "TruncatedError",
    "MissingTerminatorError",
    "MalformedNumberError",
    "UnknownTypeError",
    "HeterogeneousKeysError",
    "TypeMismatchError",
    "KeyOutOfRangeError",
    "NestingTooDeepError",
    "TrailingDataError",
    # Data models
    "GenericValue",
    "IntegerValue",
    "FloatValue",
    "BooleanValue",
    "TextValue",
    "ListValue",
    "MapValue",
    "HoleValue",
    "Ok",
    "Err",
    "Result",
    # Configuration and logging
    "AppConfig",
    "BinderConfig",
    "ConfigLoader",
    "DecoderConfig",
    "setup_logging",
    # Version
    "__version__",
]
