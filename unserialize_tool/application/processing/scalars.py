# unserialize_tool/application/processing/scalars.py

"""Parsers for the fixed-grammar scalar tokens

Each parser receives the input buffer and the position just past the
``tag:`` prefix, and returns the decoded value together with the position
just past the token. The buffer is never copied or modified.
"""

# Standard library imports
from math import isinf
from re import IGNORECASE
from re import compile

# Local imports
from unserialize_tool.core.domain.errors import MalformedNumberError
from unserialize_tool.core.domain.errors import MissingTerminatorError
from unserialize_tool.core.domain.errors import TruncatedError
from unserialize_tool.core.types.values import INT64_MAX
from unserialize_tool.core.types.values import INT64_MIN

INTEGER_TERMINATOR = b";"
LENGTH_TERMINATOR = b":"
QUOTE = b'"'

# Longest literal that can still fit in a signed 64-bit integer
_MAX_INTEGER_DIGITS = 20

_INTEGER_PATTERN = compile(rb"-?[0-9]+")
_FLOAT_PATTERN = compile(
    rb"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf(?:inity)?|nan)",
    IGNORECASE,
)


def parse_integer(
    data: bytes, pos: int, terminator: bytes = INTEGER_TERMINATOR
) -> tuple[int, int]:
    """Decode a base-10 signed integer ending at the first ``terminator``

    Args:
        data: Input buffer
        pos: Position of the first digit
        terminator: ``;`` for plain integers, ``:`` for length and count fields

    Returns:
        Tuple of (value, position after the terminator)
    """
    if len(data) - pos < 2:
        raise TruncatedError("integer field needs at least 2 bytes", pos)

    end = data.find(terminator, pos)
    if end == -1:
        raise TruncatedError(f"integer field has no {terminator.decode()!r} terminator", pos)

    digits = data[pos:end]
    if len(digits) > _MAX_INTEGER_DIGITS or _INTEGER_PATTERN.fullmatch(digits) is None:
        raise MalformedNumberError(f"{digits!r} is not a base-10 integer", pos)

    value = int(digits.decode("ascii"))
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedNumberError(f"{value} does not fit in a signed 64-bit integer", pos)

    return value, end + 1


def parse_float(data: bytes, pos: int, scan: str = "last") -> tuple[float, int]:
    """Decode a floating point number terminated by ``;``

    With ``scan="last"`` the terminator is the last ``;`` anywhere in the
    remaining buffer, so a float is only decodable when nothing after it
    contains another ``;``. ``scan="first"`` stops at the nearest one.
    """
    if len(data) - pos < 2:
        raise TruncatedError("float field needs at least 2 bytes", pos)

    if scan == "first":
        end = data.find(INTEGER_TERMINATOR, pos)
    else:
        end = data.rfind(INTEGER_TERMINATOR, pos)
    if end == -1:
        raise TruncatedError("float field has no ';' terminator", pos)

    payload = data[pos:end]
    if _FLOAT_PATTERN.fullmatch(payload) is None:
        raise MalformedNumberError(f"{payload!r} is not a number", pos)

    text = payload.decode("ascii")
    value = float(text)
    if isinf(value) and "inf" not in text.lower():
        raise MalformedNumberError(f"{text} is out of range for a 64-bit float", pos)

    return value, end + 1


def parse_boolean(data: bytes, pos: int) -> tuple[bool, int]:
    """Decode a boolean; ``1`` is true and any other byte is false"""
    if len(data) - pos < 2:
        raise TruncatedError("boolean field needs 2 bytes", pos)

    if data[pos + 1 : pos + 2] != INTEGER_TERMINATOR:
        raise MissingTerminatorError("boolean is not followed by ';'", pos + 1)

    return data[pos : pos + 1] == b"1", pos + 2


def parse_text(data: bytes, pos: int) -> tuple[bytes, int]:
    """Decode a length-prefixed, quoted byte string

    The content is returned exactly as it appears between the quotes. No
    escaping or character-set validation is applied, so the content may hold
    quotes, digits, braces or semicolons.
    """
    length, pos = parse_integer(data, pos, LENGTH_TERMINATOR)
    if length < 0:
        raise MalformedNumberError(f"text length {length} is negative", pos)

    # Opening quote, content, closing quote and terminator
    if len(data) - pos < length + 3:
        raise TruncatedError(f"text of length {length} runs past the end of input", pos)

    if data[pos : pos + 1] != QUOTE:
        raise MissingTerminatorError("text content does not start with '\"'", pos)

    close = pos + 1 + length
    if data[close : close + 1] != QUOTE:
        raise MissingTerminatorError("text content does not end with '\"'", close)
    if data[close + 1 : close + 2] != INTEGER_TERMINATOR:
        raise MissingTerminatorError("text is not followed by ';'", close + 1)

    return data[pos + 1 : close], close + 2


__all__ = [
    "INTEGER_TERMINATOR",
    "LENGTH_TERMINATOR",
    "parse_boolean",
    "parse_float",
    "parse_integer",
    "parse_text",
]
