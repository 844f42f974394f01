# unserialize_tool/application/processing/aggregate.py

"""Aggregate decoding and list-versus-map reification

An aggregate is a counted sequence of key/value pairs. Once every pair has
been decoded the keys are classified in a single pass, and the aggregate
becomes a dense list when all keys are integers or a map when all keys are
text. Mixed keys are rejected unless the decoder is configured to coerce
integer keys into their decimal text.
"""

# Standard library imports
from logging import getLogger
from typing import Iterable

# Local imports
from unserialize_tool.application.processing.scalars import LENGTH_TERMINATOR
from unserialize_tool.application.processing.scalars import parse_integer
from unserialize_tool.core.domain.enums import KeyShape
from unserialize_tool.core.domain.errors import HeterogeneousKeysError
from unserialize_tool.core.domain.errors import KeyOutOfRangeError
from unserialize_tool.core.domain.errors import MalformedNumberError
from unserialize_tool.core.domain.errors import MissingTerminatorError
from unserialize_tool.core.domain.errors import TruncatedError
from unserialize_tool.core.types.protocols import ValueParserProtocol
from unserialize_tool.core.types.values import GenericValue
from unserialize_tool.core.types.values import HoleValue
from unserialize_tool.core.types.values import IntegerValue
from unserialize_tool.core.types.values import ListValue
from unserialize_tool.core.types.values import MapValue
from unserialize_tool.core.types.values import TextValue
from unserialize_tool.infrastructure.config import DecoderConfig

logger = getLogger(__name__)

OPEN_BRACE = b"{"
CLOSE_BRACE = b"}"

type Pair = tuple[GenericValue, GenericValue]


def classify_keys(keys: Iterable[GenericValue], offset: int | None = None) -> KeyShape:
    """Classify aggregate keys as all-integer, all-text or mixed

    An aggregate with no keys counts as all-integer so that it reifies as an
    empty list.

    Args:
        keys: Decoded keys in scanning order
        offset: Position of the aggregate, used in error messages

    Returns:
        The key shape

    Raises:
        HeterogeneousKeysError: If any key is neither an integer nor text
    """
    shape: KeyShape | None = None
    for key in keys:
        match key:
            case IntegerValue():
                key_shape = KeyShape.INTEGER
            case TextValue():
                key_shape = KeyShape.TEXT
            case _:
                raise HeterogeneousKeysError(
                    f"{key.kind} value cannot be used as an aggregate key", offset
                )

        if shape is None:
            shape = key_shape
        elif shape is not key_shape:
            shape = KeyShape.MIXED

    return shape or KeyShape.INTEGER


def _expect(data: bytes, pos: int, delimiter: bytes) -> int:
    """Consume one delimiter byte and return the position after it"""
    if pos >= len(data):
        raise TruncatedError(f"input ended where {delimiter.decode()!r} was expected", pos)
    if data[pos : pos + 1] != delimiter:
        raise MissingTerminatorError(
            f"expected {delimiter.decode()!r}, found {data[pos : pos + 1]!r}", pos
        )
    return pos + 1


class AggregateReifier:
    """Decodes aggregates and reifies them as lists or maps"""

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self.config = config or DecoderConfig()

    def reify(
        self, data: bytes, pos: int, parse_value: ValueParserProtocol, depth: int = 0
    ) -> tuple[ListValue | MapValue, int]:
        """Decode the aggregate body that starts at ``pos``

        Args:
            data: Input buffer
            pos: Position just past the ``a:`` prefix
            parse_value: Parser used for every nested key and value
            depth: Nesting level of this aggregate

        Returns:
            Tuple of (reified list or map, position after the closing brace)
        """
        start = pos
        count, pos = parse_integer(data, pos, LENGTH_TERMINATOR)
        if count < 0:
            raise MalformedNumberError(f"aggregate count {count} is negative", start)

        pos = _expect(data, pos, OPEN_BRACE)

        # Pairs are collected as they decode; nothing is sized from the declared count
        pairs: list[Pair] = []
        for _ in range(count):
            key, pos = parse_value(data, pos, depth + 1)
            value, pos = parse_value(data, pos, depth + 1)
            pairs.append((key, value))

        pos = _expect(data, pos, CLOSE_BRACE)

        shape = classify_keys((key for key, _ in pairs), start)
        logger.debug(f"Aggregate at byte {start} has {count} pairs with {shape.value} keys")

        match shape:
            case KeyShape.INTEGER:
                return self._build_list(pairs, count, start), pos
            case KeyShape.TEXT:
                return self._build_map(pairs), pos
            case KeyShape.MIXED if self.config.coerce_integer_keys:
                return self._build_map(pairs), pos
            case _:
                raise HeterogeneousKeysError("aggregate mixes integer and text keys", start)

    def _build_list(self, pairs: list[Pair], count: int, offset: int) -> ListValue:
        """Place values at their integer keys, filling gaps with holes"""
        slots: dict[int, GenericValue] = {}
        for key, value in pairs:
            index = key.value
            if index < 0:
                raise KeyOutOfRangeError(f"list index {index} is negative", offset)
            slots[index] = value

        if not slots:
            return ListValue()

        length = max(slots) + 1
        capacity = self.config.list_capacity(count)
        if length > capacity:
            raise KeyOutOfRangeError(
                f"list index {length - 1} exceeds capacity {capacity} for {count} pairs", offset
            )

        hole = HoleValue()
        return ListValue(items=tuple(slots.get(index, hole) for index in range(length)))

    def _build_map(self, pairs: list[Pair]) -> MapValue:
        """Key values by their text, or by the decimal form of integer keys"""
        entries: dict[bytes, GenericValue] = {}
        for key, value in pairs:
            match key:
                case TextValue(value=name):
                    entries[name] = value
                case IntegerValue(value=number):
                    entries[str(number).encode("ascii")] = value
        return MapValue(entries=entries)


__all__ = ["AggregateReifier", "classify_keys"]
