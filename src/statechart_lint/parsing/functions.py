"""Inline function parameter extraction using tree-sitter.

This module parses the source of an inline guard (an arrow function or a
function expression) and reports the shape of its parameter list. Only
the parameters are inspected; the function body is never evaluated.
"""

from functools import lru_cache

import structlog
import tree_sitter
import tree_sitter_javascript

from statechart_lint.models.enums import ParameterKind
from statechart_lint.models.machine import ParameterShape
from statechart_lint.parsing.exceptions import FunctionParsingError

__all__ = ["FunctionParser", "get_function_parser"]

logger = structlog.get_logger(__name__)

FUNCTION_TYPES = frozenset(
    {
        "arrow_function",
        "function",
        "function_expression",
        "generator_function",
    }
)

PARAMETER_KINDS = {
    "identifier": ParameterKind.identifier,
    "object_pattern": ParameterKind.object_pattern,
    "array_pattern": ParameterKind.array_pattern,
    "rest_pattern": ParameterKind.rest,
}


def _text(node: tree_sitter.Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _named(node: tree_sitter.Node) -> list[tree_sitter.Node]:
    return [child for child in node.named_children if child.type != "comment"]


class FunctionParser:
    """Parser for inline JavaScript function source.

    The underlying tree-sitter parser is created lazily and reused. A
    tree-sitter parser is not thread-safe, so share an instance only
    within one thread.

    """

    def __init__(self) -> None:
        """Initialize the parser."""
        self._parser: tree_sitter.Parser | None = None

    def _get_parser(self) -> tree_sitter.Parser:
        if self._parser is None:
            language = tree_sitter.Language(tree_sitter_javascript.language())
            self._parser = tree_sitter.Parser(language)
        return self._parser

    def parse_parameters(self, source: str) -> ParameterShape:
        """Parse function source and describe its parameters.

        Args:
            source: Source of an arrow function or function expression.

        Returns:
            The parameter shape of the function.

        Raises:
            FunctionParsingError: If the source is not a single function.

        """
        function_node = self._parse_function(source)
        parameters = self._parameter_nodes(function_node)

        if not parameters:
            return ParameterShape(count=0)

        first = parameters[0]
        if first.type == "assignment_pattern":
            first = first.child_by_field_name("left") or first

        kind = PARAMETER_KINDS.get(first.type, ParameterKind.identifier)
        fields: frozenset[str] = frozenset()
        open_pattern = False
        if kind == ParameterKind.object_pattern:
            fields, open_pattern = self._pattern_fields(first)

        shape = ParameterShape(
            count=len(parameters),
            first_kind=kind,
            fields=fields,
            open_pattern=open_pattern,
        )
        logger.debug(
            "inline_function_parsed",
            parameters=shape.count,
            first_kind=shape.first_kind.value,
            fields=sorted(shape.fields),
        )
        return shape

    def _parse_function(self, source: str) -> tree_sitter.Node:
        """Parse source as a parenthesized expression and return the function node."""
        if not source.strip():
            raise FunctionParsingError("Empty function source", source)

        tree = self._get_parser().parse(f"({source})".encode())
        root = tree.root_node
        if root.has_error:
            raise FunctionParsingError(f"Invalid function source: {source!r}", source)

        statements = _named(root)
        if len(statements) != 1 or statements[0].type != "expression_statement":
            raise FunctionParsingError(f"Expected a single expression: {source!r}", source)

        expression = _named(statements[0])
        if len(expression) != 1 or expression[0].type != "parenthesized_expression":
            raise FunctionParsingError(f"Expected a single expression: {source!r}", source)

        inner = _named(expression[0])
        if len(inner) != 1 or inner[0].type not in FUNCTION_TYPES:
            raise FunctionParsingError(f"Source is not a function: {source!r}", source)

        return inner[0]

    def _parameter_nodes(self, function_node: tree_sitter.Node) -> list[tree_sitter.Node]:
        # Arrow functions with one unparenthesized parameter use a separate field.
        single = function_node.child_by_field_name("parameter")
        if single is not None:
            return [single]

        parameters = function_node.child_by_field_name("parameters")
        if parameters is None:
            return []
        return _named(parameters)

    def _pattern_fields(self, pattern: tree_sitter.Node) -> tuple[frozenset[str], bool]:
        """Collect property names bound by an object pattern.

        Returns:
            The names, and whether the pattern may bind unlisted properties.

        """
        names: set[str] = set()
        open_pattern = False

        for child in _named(pattern):
            if child.type == "shorthand_property_identifier_pattern":
                names.add(_text(child))
            elif child.type == "object_assignment_pattern":
                left = child.child_by_field_name("left")
                if left is not None and left.type == "shorthand_property_identifier_pattern":
                    names.add(_text(left))
            elif child.type == "pair_pattern":
                key = child.child_by_field_name("key")
                if key is None or key.type == "computed_property_name":
                    open_pattern = True
                elif key.type == "string":
                    names.add(_text(key)[1:-1])
                else:
                    names.add(_text(key))
            elif child.type == "rest_pattern":
                open_pattern = True

        return frozenset(names), open_pattern


@lru_cache(maxsize=1)
def get_function_parser() -> FunctionParser:
    """Get the shared function parser."""
    return FunctionParser()
