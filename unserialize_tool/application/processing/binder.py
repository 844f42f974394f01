# unserialize_tool/application/processing/binder.py

"""Conversion of decoded values into caller-declared destination types

The binder matches on the pair (value kind, destination kind) and applies
exactly one conversion rule per compatible pair. Any pair without a rule is
a type mismatch. Aggregate destinations delegate each element to the same
rules using the element type the destination declares.

Supported destination descriptors:
- ``object`` and ``typing.Any`` take the native Python form of any value
- ``int``, ``float``, ``bool``, ``str``, ``bytes`` and ``bytearray``
- ctypes scalar types for sized integers and 32/64-bit floats
- ``list``, ``tuple`` and ``Sequence`` with an optional element type
- ``dict`` and ``Mapping`` with optional key and value types
- pydantic models, populated from maps
- ``Optional``/``Union`` and ``Annotated`` wrappers around any of the above
"""

# Standard library imports
from collections.abc import Mapping
from collections.abc import MutableMapping
from collections.abc import MutableSequence
from collections.abc import Sequence
from ctypes import _SimpleCData
from ctypes import sizeof
from types import NoneType
from types import UnionType
from typing import Annotated
from typing import Any
from typing import TypeIs
from typing import Union
from typing import get_args
from typing import get_origin

# Third party imports
from pydantic import BaseModel
from pydantic import ValidationError

# Local imports
from unserialize_tool.core.domain.errors import TypeMismatchError
from unserialize_tool.core.types.values import BooleanValue
from unserialize_tool.core.types.values import ElementValue
from unserialize_tool.core.types.values import FloatValue
from unserialize_tool.core.types.values import HoleValue
from unserialize_tool.core.types.values import IntegerValue
from unserialize_tool.core.types.values import ListValue
from unserialize_tool.core.types.values import MapValue
from unserialize_tool.core.types.values import NativeValue
from unserialize_tool.core.types.values import TextValue
from unserialize_tool.infrastructure.config import BinderConfig

SEQUENCE_TYPES = (list, tuple, Sequence, MutableSequence)
MAPPING_TYPES = (dict, Mapping, MutableMapping)
SCALAR_TYPES = (int, float, bool, str, bytes, bytearray)

# ctypes ``_type_`` codes; lowercase integer codes are signed
_INTEGER_CODES = "bBhHiIlLqQ"
_FLOAT_CODES = "fdg"
_BOOL_CODE = "?"


def describe(target: object) -> str:
    """Readable name of a destination descriptor for error messages"""
    if is_plain_class(target):
        return target.__name__
    return repr(target)


def is_plain_class(target: object) -> TypeIs[type]:
    """True for a class that is not a parameterized generic alias"""
    return isinstance(target, type) and get_origin(target) is None


def is_ctype(target: object) -> TypeIs[type[_SimpleCData]]:
    return is_plain_class(target) and issubclass(target, _SimpleCData)


def is_model(target: object) -> TypeIs[type[BaseModel]]:
    return is_plain_class(target) and issubclass(target, BaseModel)


def is_union(origin: object) -> bool:
    return origin is Union or origin is UnionType


def ctype_range(target: type[_SimpleCData]) -> tuple[int, int]:
    """Inclusive range of an integer ctype"""
    bits = sizeof(target) * 8
    if target._type_.islower():
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


class OutputBinder:
    """Binds generic values into destination types"""

    def __init__(self, config: BinderConfig | None = None) -> None:
        self.config = config or BinderConfig()

    def bind(self, value: ElementValue, target: object) -> object:
        """Convert ``value`` into ``target``

        Args:
            value: Decoded value, or a hole taken from a list
            target: Destination type descriptor

        Returns:
            The converted value

        Raises:
            TypeMismatchError: If the value cannot be converted
        """
        if isinstance(value, HoleValue):
            return self.default_for(target)

        origin = get_origin(target)
        args = get_args(target)

        if origin is Annotated:
            return self.bind(value, args[0])
        if target is Any or target is object:
            return self.to_native(value)
        if is_union(origin):
            return self._bind_union(value, args, target)
        if is_ctype(target):
            return self._bind_ctype(value, target)
        if is_model(target):
            return self._bind_model(value, target)

        container = origin or target
        match value:
            case IntegerValue(value=number) if container is int:
                return number
            case IntegerValue(value=number) if container is float:
                return float(number)
            case FloatValue(value=real) if container is float:
                return real
            case BooleanValue(value=flag) if container is bool:
                return flag
            case TextValue(value=raw) if container is bytes:
                return raw
            case TextValue(value=raw) if container is bytearray:
                return bytearray(raw)
            case TextValue(value=raw) if container is str:
                return self._decode_text(raw)
            case ListValue() if container in SEQUENCE_TYPES:
                return self._bind_sequence(value, container, args)
            case ListValue(items=()) if container in MAPPING_TYPES:
                # An empty aggregate reifies as a list but is also an empty map
                return {}
            case MapValue() if container in MAPPING_TYPES:
                return self._bind_mapping(value, args)

        raise TypeMismatchError(f"cannot bind {value.kind} value into {describe(target)}")

    def to_native(self, value: ElementValue) -> NativeValue:
        """Plain Python form of a value, used for ``object`` and ``Any``"""
        try:
            return value.to_native(
                self.config.text_encoding,
                self.config.text_errors,
                raw_text=self.config.native_text == "bytes",
            )
        except UnicodeDecodeError as e:
            raise TypeMismatchError(f"text is not valid {self.config.text_encoding}: {e}") from e

    def default_for(self, target: object) -> object:
        """Value a hole takes when bound into ``target``"""
        origin = get_origin(target)
        args = get_args(target)

        if origin is Annotated:
            return self.default_for(args[0])
        if target is Any or target is object or target is None or target is NoneType:
            return None
        if is_union(origin):
            return None if NoneType in args else self.default_for(args[0])
        if is_ctype(target):
            return target().value
        if is_model(target):
            try:
                return target()
            except ValidationError as e:
                raise TypeMismatchError(
                    f"{describe(target)} has required fields and cannot fill a hole"
                ) from e

        container = origin or target
        if container is tuple and args and args[-1] is not Ellipsis:
            return tuple(self.default_for(arg) for arg in args)
        if container is tuple:
            return ()
        if container in SEQUENCE_TYPES:
            return []
        if container in MAPPING_TYPES:
            return {}
        if container in SCALAR_TYPES:
            return container()

        raise TypeMismatchError(f"{describe(target)} has no default to fill a hole")

    def _decode_text(self, raw: bytes) -> str:
        try:
            return raw.decode(self.config.text_encoding, self.config.text_errors)
        except UnicodeDecodeError as e:
            raise TypeMismatchError(f"text is not valid {self.config.text_encoding}: {e}") from e

    def _bind_union(
        self, value: ElementValue, members: tuple[object, ...], target: object
    ) -> object:
        """Bind into the first union member that accepts the value"""
        for member in members:
            if member is NoneType:
                continue
            try:
                return self.bind(value, member)
            except TypeMismatchError:
                continue
        raise TypeMismatchError(f"cannot bind {value.kind} value into {describe(target)}")

    def _bind_ctype(self, value: ElementValue, target: type[_SimpleCData]) -> object:
        code = target._type_
        match value:
            case IntegerValue(value=number) if code in _INTEGER_CODES:
                low, high = ctype_range(target)
                if not low <= number <= high:
                    raise TypeMismatchError(f"{number} does not fit in {target.__name__}")
                return number
            case IntegerValue(value=number) | FloatValue(value=number) if code in _FLOAT_CODES:
                # Narrowing to c_float rounds to single precision
                return target(float(number)).value
            case BooleanValue(value=flag) if code == _BOOL_CODE:
                return flag
        raise TypeMismatchError(f"cannot bind {value.kind} value into {target.__name__}")

    def _bind_sequence(
        self, value: ListValue, container: object, args: tuple[object, ...]
    ) -> list[object] | tuple[object, ...]:
        # Fixed-length tuple such as tuple[int, str]
        if container is tuple and args and args[-1] is not Ellipsis:
            if len(args) != len(value.items):
                raise TypeMismatchError(
                    f"list of {len(value.items)} items cannot bind into a {len(args)}-tuple"
                )
            return tuple(self.bind(item, arg) for item, arg in zip(value.items, args))

        element = args[0] if args else object
        items = [self.bind(item, element) for item in value.items]
        return tuple(items) if container is tuple else items

    def _bind_mapping(self, value: MapValue, args: tuple[object, ...]) -> dict[object, object]:
        key_type, value_type = args if len(args) == 2 else (object, object)
        return {
            self.bind(TextValue(value=name), key_type): self.bind(item, value_type)
            for name, item in value.entries.items()
        }

    def _bind_model(self, value: ElementValue, target: type[BaseModel]) -> BaseModel:
        """Populate a pydantic model from a map, field by field"""
        if not isinstance(value, MapValue):
            raise TypeMismatchError(f"cannot bind {value.kind} value into {target.__name__}")

        fields: dict[str, object] = {}
        for name, field in target.model_fields.items():
            key = field.alias or name
            entry = value.entries.get(key.encode(self.config.text_encoding))
            if entry is not None:
                annotation = field.annotation if field.annotation is not None else object
                fields[key] = self.bind(entry, annotation)

        try:
            return target.model_validate(fields)
        except ValidationError as e:
            raise TypeMismatchError(f"map does not satisfy {target.__name__}: {e}") from e


__all__ = ["OutputBinder", "describe"]
