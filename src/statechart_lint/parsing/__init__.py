"""Parsing of inline function source embedded in machine documents.

Uses tree-sitter's JavaScript grammar to recover the parameter shape of
inline guards.
"""

from statechart_lint.parsing.exceptions import FunctionParsingError
from statechart_lint.parsing.functions import FunctionParser, get_function_parser

__all__ = [
    "FunctionParser",
    "FunctionParsingError",
    "get_function_parser",
]
