# unserialize_tool/core/domain/__init__.py

"""Core domain enumerations and errors"""

# Local imports
from unserialize_tool.core.domain.enums import ErrorKind
from unserialize_tool.core.domain.enums import KeyShape
from unserialize_tool.core.domain.enums import TypeTag
from unserialize_tool.core.domain.errors import HeterogeneousKeysError
from unserialize_tool.core.domain.errors import KeyOutOfRangeError
from unserialize_tool.core.domain.errors import MalformedNumberError
from unserialize_tool.core.domain.errors import MissingTerminatorError
from unserialize_tool.core.domain.errors import NestingTooDeepError
from unserialize_tool.core.domain.errors import TrailingDataError
from unserialize_tool.core.domain.errors import TruncatedError
from unserialize_tool.core.domain.errors import TypeMismatchError
from unserialize_tool.core.domain.errors import UnknownTypeError
from unserialize_tool.core.domain.errors import UnserializeError

__all__ = [
    "ErrorKind",
    "KeyShape",
    "TypeTag",
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
]
