# tests/adapters/api/test_unserializer.py

"""Tests for the high-level decode and bind API"""

# Standard library imports
from ctypes import c_float
from ctypes import c_int32
from logging import DEBUG

# Third party imports
from pydantic import BaseModel
import pytest

# Local imports
from unserialize_tool import AppConfig
from unserialize_tool import DecoderConfig
from unserialize_tool import Destination
from unserialize_tool import ErrorKind
from unserialize_tool import HeterogeneousKeysError
from unserialize_tool import IntegerValue
from unserialize_tool import ListValue
from unserialize_tool import MalformedNumberError
from unserialize_tool import TrailingDataError
from unserialize_tool import TruncatedError
from unserialize_tool import TypeMismatchError
from unserialize_tool import Unserializer
from unserialize_tool import decode
from unserialize_tool import loads
from unserialize_tool import try_loads
from unserialize_tool import unmarshal
from unserialize_tool.adapters.api import get_unserializer
from unserialize_tool.core.types.result import is_err
from unserialize_tool.core.types.result import is_ok


class Account(BaseModel):
    name: str
    balance: float = 0.0
    tags: list[str] = []


@pytest.fixture
def unserializer() -> Unserializer:
    return Unserializer(AppConfig())


class TestScenarios:
    """End-to-end decodes into typed destinations"""

    def test_integer(self, unserializer: Unserializer) -> None:
        assert unserializer.loads(b"i:42;", int) == 42

    def test_sized_integer(self, unserializer: Unserializer) -> None:
        assert unserializer.loads(b"i:42;", c_int32) == 42

    def test_text(self, unserializer: Unserializer) -> None:
        assert unserializer.loads(b's:5:"hello";', str) == "hello"

    def test_float(self, unserializer: Unserializer) -> None:
        assert unserializer.loads(b"d:6.5;", float) == 6.5

    def test_float_narrowed(self, unserializer: Unserializer) -> None:
        assert unserializer.loads(b"d:6.5;", c_float) == 6.5

    def test_list(self, unserializer: Unserializer) -> None:
        data = b"a:3:{i:0;i:1;i:1;i:2;i:2;i:3;}"
        assert unserializer.loads(data, list[int]) == [1, 2, 3]

    def test_map(self, unserializer: Unserializer) -> None:
        data = b'a:2:{s:3:"one";i:1;s:3:"two";i:2;}'
        assert unserializer.loads(data, dict[str, int]) == {"one": 1, "two": 2}

    def test_mixed_keys(self, unserializer: Unserializer) -> None:
        with pytest.raises(HeterogeneousKeysError):
            unserializer.loads(b'a:2:{i:0;i:1;s:1:"x";i:2;}', list[int])

    def test_model(self, unserializer: Unserializer) -> None:
        data = b'a:2:{s:4:"name";s:3:"Ada";s:4:"tags";a:1:{i:0;s:3:"vip";}}'
        assert unserializer.loads(data, Account) == Account(name="Ada", tags=["vip"])

    def test_float_followed_by_values(self, unserializer: Unserializer) -> None:
        data = b'a:2:{s:1:"a";a:2:{i:0;b:1;i:2;d:1.5;}s:1:"b";s:0:"";}'
        # The last ';' in the input terminates the float
        with pytest.raises(MalformedNumberError):
            unserializer.loads(data)

    def test_native_nested(self, unserializer: Unserializer) -> None:
        data = b'a:2:{s:1:"a";a:2:{i:0;b:1;i:2;i:7;}s:1:"b";s:0:"";}'
        assert unserializer.loads(data) == {"a": [True, None, 7], "b": ""}

    def test_str_input(self, unserializer: Unserializer) -> None:
        assert unserializer.loads('s:2:"hi";', str) == "hi"

    def test_memoryview_input(self, unserializer: Unserializer) -> None:
        assert unserializer.loads(memoryview(b"i:1;"), int) == 1

    def test_decode_only(self, unserializer: Unserializer) -> None:
        assert unserializer.decode(b"a:1:{i:0;i:5;}") == ListValue(
            items=(IntegerValue(value=5),)
        )


class TestUnmarshal:
    """Test that destinations are written only on success"""

    def test_success(self, unserializer: Unserializer) -> None:
        destination = Destination(int)
        unserializer.unmarshal(b"i:42;", destination)
        assert destination.value == 42
        assert destination.is_set

    def test_decode_failure_leaves_destination(self, unserializer: Unserializer) -> None:
        destination = Destination(int, 7)
        with pytest.raises(TruncatedError):
            unserializer.unmarshal(b"i:42", destination)
        assert destination.value == 7

    def test_bind_failure_leaves_destination(self, unserializer: Unserializer) -> None:
        destination = Destination(list[int], [1])
        with pytest.raises(TypeMismatchError):
            unserializer.unmarshal(b'a:1:{i:0;s:1:"x";}', destination)
        assert destination.value == [1]

    def test_unset_destination(self) -> None:
        destination = Destination(str)
        assert not destination.is_set
        with pytest.raises(LookupError):
            destination.value
        assert "<unset>" in repr(destination)

    def test_repr(self) -> None:
        assert repr(Destination(int, 3)) == "Destination(int, 3)"


class TestTryLoads:
    """Test the Result-returning entry point"""

    def test_ok(self, unserializer: Unserializer) -> None:
        result = unserializer.try_loads(b"b:1;", bool)
        assert is_ok(result)
        assert result.unwrap() is True

    def test_err(self, unserializer: Unserializer) -> None:
        result = unserializer.try_loads(b"x:1;", int)
        assert is_err(result)
        assert result.kind is ErrorKind.UNKNOWN_TYPE
        assert result.offset == 0

    def test_err_from_bind(self, unserializer: Unserializer) -> None:
        result = unserializer.try_loads(b"i:1;", str)
        assert is_err(result)
        assert result.kind is ErrorKind.TYPE_MISMATCH
        assert result.offset is None


class TestConfiguration:
    """Test that configuration reaches the parser and binder"""

    def test_reject_trailing_data(self) -> None:
        unserializer = Unserializer(AppConfig(decoder=DecoderConfig(reject_trailing_data=True)))
        with pytest.raises(TrailingDataError):
            unserializer.loads(b"i:1;i:2;", int)

    def test_trailing_data_ignored_by_default(self, unserializer: Unserializer) -> None:
        assert unserializer.loads(b"i:1;i:2;", int) == 1

    def test_coerce_integer_keys(self) -> None:
        unserializer = Unserializer(AppConfig(decoder=DecoderConfig(coerce_integer_keys=True)))
        data = b'a:2:{i:0;i:1;s:1:"x";i:2;}'
        assert unserializer.loads(data, dict[str, int]) == {"0": 1, "x": 2}

    def test_native_bytes(self) -> None:
        unserializer = Unserializer(AppConfig.model_validate({"binder": {"native_text": "bytes"}}))
        assert unserializer.loads(b's:1:"x";') == b"x"

    def test_debug_logging(
        self, unserializer: Unserializer, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(DEBUG, logger="unserialize_tool")
        unserializer.loads(b"i:1;", int)
        assert "Decoding 4 bytes" in caplog.text
        assert "Binding integer value into int" in caplog.text

    def test_failure_logged(
        self, unserializer: Unserializer, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(DEBUG, logger="unserialize_tool")
        with pytest.raises(TruncatedError):
            unserializer.decode(b"i")
        assert "Decode failed with truncated at byte 0" in caplog.text


class TestModuleFunctions:
    """Test the shortcuts backed by the shared instance"""

    def test_loads(self) -> None:
        assert loads(b"i:-3;", int) == -3

    def test_decode(self) -> None:
        assert decode(b"i:-3;") == IntegerValue(value=-3)

    def test_try_loads(self) -> None:
        assert try_loads(b"i:-3;").unwrap() == -3

    def test_unmarshal(self) -> None:
        destination = Destination(dict[str, str])
        unmarshal(b'a:1:{s:1:"k";s:1:"v";}', destination)
        assert destination.value == {"k": "v"}

    def test_shared_instance(self) -> None:
        assert get_unserializer() is get_unserializer()
