# unserialize_tool/core/types/values.py

"""Generic value tree produced by the decoder

Decoded data is held as a tagged union of frozen pydantic models. The ``kind``
field is the discriminator, so a value always knows which variant it is and
the binder can match on it without inspecting Python types.
"""

# Standard library imports
from typing import Annotated
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Values never change after construction
VALUE_MODEL_CONFIG = ConfigDict(strict=True, frozen=True, extra="forbid")

# Python form of a decoded value when the caller asks for no particular type
type NativeValue = (
    int | float | bool | str | bytes | None | list[NativeValue] | dict[str | bytes, NativeValue]
)


class IntegerValue(BaseModel):
    """64-bit signed integer"""

    model_config = VALUE_MODEL_CONFIG

    kind: Literal["integer"] = "integer"
    value: int = Field(ge=INT64_MIN, le=INT64_MAX)

    def to_native(
        self, encoding: str = "utf-8", errors: str = "strict", raw_text: bool = False
    ) -> int:
        return self.value


class FloatValue(BaseModel):
    """64-bit floating point number"""

    model_config = VALUE_MODEL_CONFIG

    kind: Literal["float"] = "float"
    value: float

    def to_native(
        self, encoding: str = "utf-8", errors: str = "strict", raw_text: bool = False
    ) -> float:
        return self.value


class BooleanValue(BaseModel):
    """Boolean flag"""

    model_config = VALUE_MODEL_CONFIG

    kind: Literal["boolean"] = "boolean"
    value: bool

    def to_native(
        self, encoding: str = "utf-8", errors: str = "strict", raw_text: bool = False
    ) -> bool:
        return self.value


class TextValue(BaseModel):
    """Byte string copied verbatim from the input"""

    model_config = VALUE_MODEL_CONFIG

    kind: Literal["text"] = "text"
    value: bytes

    def to_native(
        self, encoding: str = "utf-8", errors: str = "strict", raw_text: bool = False
    ) -> str | bytes:
        """Return the text decoded with ``encoding``, or the raw bytes"""
        if raw_text:
            return self.value
        return self.value.decode(encoding, errors)


class HoleValue(BaseModel):
    """Placeholder for a list index that had no key in the aggregate"""

    model_config = VALUE_MODEL_CONFIG

    kind: Literal["hole"] = "hole"

    def to_native(
        self, encoding: str = "utf-8", errors: str = "strict", raw_text: bool = False
    ) -> None:
        return None


class ListValue(BaseModel):
    """Dense list reified from an aggregate whose keys were all integers"""

    model_config = VALUE_MODEL_CONFIG

    kind: Literal["list"] = "list"
    items: "tuple[ElementValue, ...]" = ()

    def __len__(self) -> int:
        return len(self.items)

    def to_native(
        self, encoding: str = "utf-8", errors: str = "strict", raw_text: bool = False
    ) -> list[NativeValue]:
        """Convert to a plain list, holes become None"""
        return [item.to_native(encoding, errors, raw_text) for item in self.items]


class MapValue(BaseModel):
    """String-keyed map reified from an aggregate whose keys were all text"""

    model_config = VALUE_MODEL_CONFIG

    kind: Literal["map"] = "map"
    entries: "dict[bytes, GenericValue]" = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def to_native(
        self, encoding: str = "utf-8", errors: str = "strict", raw_text: bool = False
    ) -> dict[str | bytes, NativeValue]:
        """Convert to a plain dict with native keys and values"""
        return {
            (key if raw_text else key.decode(encoding, errors)): value.to_native(
                encoding, errors, raw_text
            )
            for key, value in self.entries.items()
        }


# Any decoded value
GenericValue = Annotated[
    IntegerValue | FloatValue | BooleanValue | TextValue | ListValue | MapValue,
    Field(discriminator="kind"),
]

# Anything that may sit at a list index
ElementValue = Annotated[
    IntegerValue | FloatValue | BooleanValue | TextValue | ListValue | MapValue | HoleValue,
    Field(discriminator="kind"),
]

# Decoded aggregate keys are constrained to these two variants
type KeyValue = IntegerValue | TextValue

ListValue.model_rebuild()
MapValue.model_rebuild()

__all__ = [
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
