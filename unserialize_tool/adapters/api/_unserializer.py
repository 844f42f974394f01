# unserialize_tool/adapters/api/_unserializer.py

"""High-level decode and bind entry points"""

# Standard library imports
from logging import getLogger
from typing import Any
from typing import overload

# Local imports
from unserialize_tool.application.processing.binder import OutputBinder
from unserialize_tool.application.processing.binder import describe
from unserialize_tool.application.processing.value_parser import ValueParser
from unserialize_tool.core.domain.errors import UnserializeError
from unserialize_tool.core.types.protocols import BinderProtocol
from unserialize_tool.core.types.result import Err
from unserialize_tool.core.types.result import Ok
from unserialize_tool.core.types.result import Result
from unserialize_tool.core.types.values import GenericValue
from unserialize_tool.infrastructure.config import AppConfig
from unserialize_tool.infrastructure.config import get_config

logger = getLogger(__name__)

_UNSET = object()

# Accepted input; str is encoded with the configured text encoding first
type RawInput = bytes | bytearray | memoryview | str


class Destination[T]:
    """Typed slot that receives a decoded value

    ``value`` is only assigned when a decode into the slot succeeds; after a
    failure it keeps whatever it held before.
    """

    def __init__(self, target: type[T] | object, value: T | object = _UNSET) -> None:
        self.target = target
        self._value = value

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        if self._value is _UNSET:
            raise LookupError(f"Destination[{describe(self.target)}] has not been assigned")
        return self._value  # type: ignore[return-value]

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        shown = repr(self._value) if self.is_set else "<unset>"
        return f"Destination({describe(self.target)}, {shown})"


class Unserializer:
    """Decodes serialized bytes and binds them into Python types"""

    def __init__(self, config: AppConfig | None = None) -> None:
        """Initialize with configuration

        Args:
            config: Application configuration, loaded through get_config() if None
        """
        self.config = config or get_config().app_config
        self.parser = ValueParser(self.config.decoder)
        self.binder: BinderProtocol = OutputBinder(self.config.binder)

    def _as_bytes(self, data: RawInput) -> bytes:
        if isinstance(data, str):
            return data.encode(self.config.binder.text_encoding, self.config.binder.text_errors)
        return bytes(data)

    def decode(self, data: RawInput) -> GenericValue:
        """Decode ``data`` into a generic value tree without binding it"""
        raw = self._as_bytes(data)
        logger.debug(f"Decoding {len(raw)} bytes")
        try:
            return self.parser.parse_document(raw)
        except UnserializeError as e:
            logger.debug(f"Decode failed with {e.kind.value} at byte {e.offset}: {e.message}")
            raise

    @overload
    def loads[T](self, data: RawInput, target: type[T]) -> T: ...

    @overload
    def loads(self, data: RawInput, target: object = ...) -> Any: ...

    def loads(self, data: RawInput, target: object = object) -> Any:
        """Decode ``data`` and bind the root value into ``target``

        Args:
            data: Serialized input
            target: Destination type descriptor, ``object`` for native Python values

        Returns:
            The bound value

        Raises:
            UnserializeError: The first decode or bind failure
        """
        value = self.decode(data)
        logger.debug(f"Binding {value.kind} value into {describe(target)}")
        try:
            return self.binder.bind(value, target)
        except UnserializeError as e:
            logger.debug(f"Bind failed with {e.kind.value}: {e.message}")
            raise

    def unmarshal[T](self, data: RawInput, destination: Destination[T]) -> None:
        """Decode ``data`` into ``destination``

        The destination is left unmodified when decoding or binding fails.
        """
        destination.value = self.loads(data, destination.target)

    def try_loads(self, data: RawInput, target: object = object) -> Result[Any]:
        """Like loads(), but returns failures as an Err instead of raising"""
        try:
            return Ok(value=self.loads(data, target))
        except UnserializeError as e:
            return Err.from_exception(e)


# Global default instance
_default_unserializer: Unserializer | None = None


def get_unserializer() -> Unserializer:
    """Shared Unserializer built from the default configuration"""
    global _default_unserializer

    if _default_unserializer is None:
        _default_unserializer = Unserializer()

    return _default_unserializer


def decode(data: RawInput) -> GenericValue:
    """Decode ``data`` into a generic value tree"""
    return get_unserializer().decode(data)


def loads(data: RawInput, target: object = object) -> Any:
    """Decode ``data`` and bind it into ``target``"""
    return get_unserializer().loads(data, target)


def unmarshal[T](data: RawInput, destination: Destination[T]) -> None:
    """Decode ``data`` into ``destination``, leaving it untouched on failure"""
    get_unserializer().unmarshal(data, destination)


def try_loads(data: RawInput, target: object = object) -> Result[Any]:
    """Decode ``data`` into ``target``, returning Ok or Err"""
    return get_unserializer().try_loads(data, target)
