# unserialize_tool/core/domain/errors.py

"""Exception hierarchy for decoding and binding failures

Every parser raises exactly one of these and nothing catches them on the way
up, so the caller always sees the first failure unchanged.
"""

# Local imports
from unserialize_tool.core.domain.enums import ErrorKind


class UnserializeError(ValueError):
    """Base class for every decode or bind failure"""

    kind: ErrorKind

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize the error

        Args:
            message: Human readable description
            offset: Byte position in the input where the failure was detected
        """
        self.message = message
        self.offset = offset
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)


class TruncatedError(UnserializeError):
    """Input ended before the grammar was satisfied"""

    kind = ErrorKind.TRUNCATED


class MissingTerminatorError(UnserializeError):
    """A required delimiter was not where the grammar demands it"""

    kind = ErrorKind.MISSING_TERMINATOR


class MalformedNumberError(UnserializeError):
    """A numeric field did not parse"""

    kind = ErrorKind.MALFORMED_NUMBER


class UnknownTypeError(UnserializeError):
    """The type tag did not match any known variant"""

    kind = ErrorKind.UNKNOWN_TYPE


class HeterogeneousKeysError(UnserializeError):
    """Aggregate keys were not uniformly integer or uniformly text"""

    kind = ErrorKind.HETEROGENEOUS_KEYS


class TypeMismatchError(UnserializeError):
    """Decoded value cannot be converted into the requested destination"""

    kind = ErrorKind.TYPE_MISMATCH


class KeyOutOfRangeError(UnserializeError):
    """Integer key is negative or too large to size a list"""

    kind = ErrorKind.KEY_OUT_OF_RANGE


class NestingTooDeepError(UnserializeError):
    """Aggregates were nested past the configured depth limit"""

    kind = ErrorKind.NESTING_TOO_DEEP


class TrailingDataError(UnserializeError):
    """Bytes remained after the root value"""

    kind = ErrorKind.TRAILING_DATA
