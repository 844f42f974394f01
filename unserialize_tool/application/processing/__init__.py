# unserialize_tool/application/processing/__init__.py

"""Core processing logic for parsing and binding"""

# Local imports
from unserialize_tool.application.processing.aggregate import AggregateReifier
from unserialize_tool.application.processing.aggregate import classify_keys
from unserialize_tool.application.processing.binder import OutputBinder
from unserialize_tool.application.processing.scalars import parse_boolean
from unserialize_tool.application.processing.scalars import parse_float
from unserialize_tool.application.processing.scalars import parse_integer
from unserialize_tool.application.processing.scalars import parse_text
from unserialize_tool.application.processing.value_parser import ValueParser

__all__: list[str] = [
    "AggregateReifier",
    "OutputBinder",
    "ValueParser",
    "classify_keys",
    "parse_boolean",
    "parse_float",
    "parse_integer",
    "parse_text",
]
