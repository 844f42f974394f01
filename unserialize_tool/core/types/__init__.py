# unserialize_tool/core/types/__init__.py

"""Type definitions for the unserialize tool

This package contains the generic value tree, the result type and the
protocols used at the parser seams.
"""

# Local imports
from unserialize_tool.core.types.protocols import BinderProtocol
from unserialize_tool.core.types.protocols import ValueParserProtocol
from unserialize_tool.core.types.result import Err
from unserialize_tool.core.types.result import Ok
from unserialize_tool.core.types.result import Result
from unserialize_tool.core.types.result import is_err
from unserialize_tool.core.types.result import is_ok
from unserialize_tool.core.types.values import BooleanValue
from unserialize_tool.core.types.values import ElementValue
from unserialize_tool.core.types.values import FloatValue
from unserialize_tool.core.types.values import GenericValue
from unserialize_tool.core.types.values import HoleValue
from unserialize_tool.core.types.values import INT64_MAX
from unserialize_tool.core.types.values import INT64_MIN
from unserialize_tool.core.types.values import IntegerValue
from unserialize_tool.core.types.values import KeyValue
from unserialize_tool.core.types.values import ListValue
from unserialize_tool.core.types.values import MapValue
from unserialize_tool.core.types.values import NativeValue
from unserialize_tool.core.types.values import TextValue

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    # Protocols
    "BinderProtocol",
    "ValueParserProtocol",
    # Values
    "INT64_MAX",
    "INT64_MIN",
    "BooleanValue",
    "ElementValue",
    "FloatValue",
    "GenericValue",
    "HoleValue",
    "IntegerValue",
    "KeyValue",
    "ListValue",
    "MapValue",
    "NativeValue",
    "TextValue",
]
