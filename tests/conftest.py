"""Pytest configuration and shared fixtures for the statechart-lint test suite.

Provides guard and action building blocks for analyzer tests and a helper
for writing machine documents to a temporary directory.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from statechart_lint.config.settings import get_settings
from statechart_lint.models import ActionRef, Guard, ParameterKind, ParameterShape


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Drop cached settings so environment changes made by a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def context_free_guard() -> Guard:
    """An inline guard declaring no parameters: ``() => true``."""
    return Guard.inline(ParameterShape(count=0), source="() => true")


@pytest.fixture
def positional_guard() -> Guard:
    """An inline guard reading its first positional parameter: ``(ctx) => ctx.n > 5``."""
    return Guard.inline(
        ParameterShape(count=1, first_kind=ParameterKind.identifier),
        source="(ctx) => ctx.n > 5",
    )


@pytest.fixture
def destructured_context_guard() -> Guard:
    """An inline guard destructuring ``context``: ``({ context }) => context.n > 5``."""
    return Guard.inline(
        ParameterShape(
            count=1,
            first_kind=ParameterKind.object_pattern,
            fields=frozenset({"context"}),
        ),
        source="({ context }) => context.n > 5",
    )


@pytest.fixture
def assign_action() -> ActionRef:
    """The canonical context-update action."""
    return ActionRef.assign()


@pytest.fixture
def inline_action() -> ActionRef:
    """A function-literal action, not assumed to update the context."""
    return ActionRef.opaque("fn")


@pytest.fixture
def write_machine(tmp_path: Path) -> Callable[[str, str], Path]:
    """Provide a helper that writes a machine document and returns its path.

    Args:
        tmp_path: pytest's built-in temporary directory fixture.

    Returns:
        A function taking the document text and an optional file name.
    """

    def _write(content: str, filename: str = "machine.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
