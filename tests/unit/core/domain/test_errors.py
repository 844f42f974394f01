# tests/unit/core/domain/test_errors.py

"""Tests for the decode error hierarchy"""

# Third party imports
import pytest

# Local imports
from unserialize_tool.core.domain.enums import ErrorKind
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


class TestUnserializeError:
    """Test error messages, offsets and kinds"""

    def test_offset_in_message(self) -> None:
        error = TruncatedError("input ended", 12)
        assert str(error) == "input ended (at byte 12)"
        assert error.message == "input ended"
        assert error.offset == 12

    def test_without_offset(self) -> None:
        error = TypeMismatchError("cannot bind")
        assert str(error) == "cannot bind"
        assert error.offset is None

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise UnknownTypeError("unknown type tag", 0)

    @pytest.mark.parametrize(
        "error_type, kind",
        [
            (TruncatedError, ErrorKind.TRUNCATED),
            (MissingTerminatorError, ErrorKind.MISSING_TERMINATOR),
            (MalformedNumberError, ErrorKind.MALFORMED_NUMBER),
            (UnknownTypeError, ErrorKind.UNKNOWN_TYPE),
            (HeterogeneousKeysError, ErrorKind.HETEROGENEOUS_KEYS),
            (TypeMismatchError, ErrorKind.TYPE_MISMATCH),
            (KeyOutOfRangeError, ErrorKind.KEY_OUT_OF_RANGE),
            (NestingTooDeepError, ErrorKind.NESTING_TOO_DEEP),
            (TrailingDataError, ErrorKind.TRAILING_DATA),
        ],
    )
    def test_kinds(self, error_type: type[UnserializeError], kind: ErrorKind) -> None:
        assert error_type.kind is kind
        assert issubclass(error_type, UnserializeError)
