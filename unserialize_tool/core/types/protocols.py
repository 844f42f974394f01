# unserialize_tool/core/types/protocols.py

"""Protocol definitions for the parser seams"""

# Standard library imports
from typing import Protocol

# Local imports
from unserialize_tool.core.types.values import GenericValue


class ValueParserProtocol(Protocol):
    """Anything that decodes one value starting at ``pos``

    Returns the decoded value and the position just past it. ``depth`` is the
    aggregate nesting level of the value being decoded.
    """

    def __call__(self, data: bytes, pos: int, depth: int) -> tuple[GenericValue, int]: ...


class BinderProtocol(Protocol):
    """Anything that converts a decoded value into a destination type"""

    def bind(self, value: GenericValue, target: object) -> object: ...


__all__ = ["ValueParserProtocol", "BinderProtocol"]
