# unserialize_tool/application/processing/value_parser.py

"""Recursive-descent entry point that dispatches on the type tag"""

# Standard library imports
from logging import getLogger

# Local imports
from unserialize_tool.application.processing.aggregate import AggregateReifier
from unserialize_tool.application.processing.scalars import parse_boolean
from unserialize_tool.application.processing.scalars import parse_float
from unserialize_tool.application.processing.scalars import parse_integer
from unserialize_tool.application.processing.scalars import parse_text
from unserialize_tool.core.domain.enums import TypeTag
from unserialize_tool.core.domain.errors import MissingTerminatorError
from unserialize_tool.core.domain.errors import NestingTooDeepError
from unserialize_tool.core.domain.errors import TrailingDataError
from unserialize_tool.core.domain.errors import TruncatedError
from unserialize_tool.core.domain.errors import UnknownTypeError
from unserialize_tool.core.types.values import BooleanValue
from unserialize_tool.core.types.values import FloatValue
from unserialize_tool.core.types.values import GenericValue
from unserialize_tool.core.types.values import IntegerValue
from unserialize_tool.core.types.values import TextValue
from unserialize_tool.infrastructure.config import DecoderConfig

logger = getLogger(__name__)

TAG_SEPARATOR = b":"

_TAGS = {tag.value: tag for tag in TypeTag}


class ValueParser:
    """Decodes one value of any type, recursing into aggregates"""

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self.config = config or DecoderConfig()
        self.reifier = AggregateReifier(self.config)

    def parse(self, data: bytes, pos: int = 0, depth: int = 0) -> tuple[GenericValue, int]:
        """Decode the value whose type tag is at ``pos``

        Args:
            data: Input buffer
            pos: Position of the type tag
            depth: Number of aggregates enclosing this value

        Returns:
            Tuple of (decoded value, position just past it)
        """
        if len(data) - pos < 2:
            raise TruncatedError("value needs a type tag and separator", pos)

        tag = _TAGS.get(data[pos : pos + 1])
        if tag is None:
            raise UnknownTypeError(f"unknown type tag {data[pos : pos + 1]!r}", pos)

        if data[pos + 1 : pos + 2] != TAG_SEPARATOR:
            raise MissingTerminatorError(
                f"type tag {tag.value.decode()!r} is not followed by ':'", pos + 1
            )

        pos += 2
        match tag:
            case TypeTag.INTEGER:
                number, pos = parse_integer(data, pos)
                return IntegerValue(value=number), pos
            case TypeTag.FLOAT:
                real, pos = parse_float(data, pos, self.config.float_terminator_scan)
                return FloatValue(value=real), pos
            case TypeTag.BOOLEAN:
                flag, pos = parse_boolean(data, pos)
                return BooleanValue(value=flag), pos
            case TypeTag.TEXT:
                text, pos = parse_text(data, pos)
                return TextValue(value=text), pos
            case TypeTag.AGGREGATE:
                if depth >= self.config.max_depth:
                    raise NestingTooDeepError(
                        f"aggregates nested deeper than {self.config.max_depth}", pos - 2
                    )
                return self.reifier.reify(data, pos, self.parse, depth)

    def parse_document(self, data: bytes) -> GenericValue:
        """Decode the root value of ``data``

        Bytes after the root value are ignored unless the decoder is
        configured to reject them.
        """
        value, end = self.parse(data, 0, 0)
        if end < len(data):
            if self.config.reject_trailing_data:
                raise TrailingDataError(f"{len(data) - end} bytes follow the root value", end)
            logger.debug(f"Ignoring {len(data) - end} trailing bytes after the root value")
        return value


__all__ = ["TAG_SEPARATOR", "ValueParser"]
