# unserialize_tool/core/domain/enums.py

"""Domain enumerations for the unserialize tool"""

# Standard library imports
from enum import Enum


class TypeTag(Enum):
    """One-byte type tag that prefixes every encoded value"""

    INTEGER = b"i"
    FLOAT = b"d"
    BOOLEAN = b"b"
    TEXT = b"s"
    AGGREGATE = b"a"


class KeyShape(Enum):
    """Outcome of classifying the keys of a decoded aggregate

    An aggregate reifies as a dense list when every key is an integer and as
    a string-keyed map when every key is text. Anything else is mixed.
    """

    INTEGER = "integer"
    TEXT = "text"
    MIXED = "mixed"


class ErrorKind(Enum):
    """Kind of failure raised while decoding or binding"""

    TRUNCATED = "truncated"  # Fewer bytes than the grammar requires
    MISSING_TERMINATOR = "missing_terminator"  # Required delimiter absent
    MALFORMED_NUMBER = "malformed_number"  # Digit field does not parse
    UNKNOWN_TYPE = "unknown_type"  # Unrecognized type tag
    HETEROGENEOUS_KEYS = "heterogeneous_keys"  # Keys not all integer or all text
    TYPE_MISMATCH = "type_mismatch"  # Value cannot bind into the destination
    KEY_OUT_OF_RANGE = "key_out_of_range"  # Integer key cannot index a bounded list
    NESTING_TOO_DEEP = "nesting_too_deep"  # Aggregates nested past the depth limit
    TRAILING_DATA = "trailing_data"  # Bytes left over after the root value
