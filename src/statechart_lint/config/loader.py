"""YAML loader for machine configuration documents.

This module converts a machine document (YAML or JSON) into the config
tree model consumed by the analyzer. Structural problems raise
ConfigurationError; guard and action values the loader does not recognize
are classified as opaque instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from statechart_lint.config.defaults import (
    AUTOMATIC_TRANSITIONS_KEY,
    BUILTIN_ACTION_CREATORS,
    CONDITIONAL_ACTION_TYPES,
    CONTEXT_ASSIGNMENT_TYPES,
    DYNAMIC_ACTION_TYPES,
    NULL_EVENT,
    SCHEMA_VERSION_KEY,
    SUPPORTED_SCHEMA_VERSIONS,
)
from statechart_lint.config.exceptions import ConfigurationError
from statechart_lint.config.models import MachineDocument
from statechart_lint.config.settings import get_settings
from statechart_lint.config.validators import FieldValidator
from statechart_lint.logging_config import get_logger
from statechart_lint.models.enums import ActionKind, Dialect
from statechart_lint.models.machine import (
    ActionRef,
    Guard,
    StateNode,
    TransitionCandidate,
)
from statechart_lint.parsing import FunctionParsingError, get_function_parser

__all__ = ["load_machine", "load_yaml_file", "parse_machine"]

logger = get_logger(__name__)

ROOT_STATE_NAME = "(machine)"
INLINE_FUNCTION_KEY = "fn"
EVENTS_KEY = "on"


def load_yaml_file(path: Path, label: str = "File") -> dict[str, Any]:
    """Load and validate a YAML file, returning the parsed dict.

    Args:
        path: Path to the YAML file.
        label: Human-readable label for error messages (e.g. "Machine file").

    Returns:
        Parsed dictionary from the YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not valid UTF-8 or YAML, is empty,
            or is not a mapping.
        OSError: If the file cannot be read.

    """
    if not path.exists():
        raise FileNotFoundError(f"{label} not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Failed to decode {path}: {e}") from e
    except OSError as e:
        raise OSError(f"Failed to read YAML file {path}: {e}") from e

    if data is None:
        raise ConfigurationError(f"Empty YAML file: {path}")

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid YAML structure: expected mapping, got {type(data).__name__}"
        )

    return data


def load_machine(path: Path | str, schema_version: int | None = None) -> MachineDocument:
    """Load a machine configuration from a YAML or JSON file.

    Args:
        path: Path to the machine document.
        schema_version: Schema version overriding the document's own
            ``schemaVersion`` and the configured default.

    Returns:
        MachineDocument: The parsed machine.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the document cannot be decoded or is invalid.
        OSError: If the file cannot be read.

    Example:
        >>> document = load_machine("machines/checkout.yaml")
        >>> document.dialect
        <Dialect.destructured_context: 'destructured_context'>

    """
    path = Path(path)
    data = load_yaml_file(path, label="Machine file")
    return parse_machine(data, source=str(path), schema_version=schema_version)


def parse_machine(
    data: dict[str, Any],
    source: str = "<memory>",
    schema_version: int | None = None,
) -> MachineDocument:
    """Parse a machine configuration mapping.

    Args:
        data: The raw machine mapping.
        source: Label used in error messages.
        schema_version: Optional schema version override.

    Returns:
        MachineDocument: The parsed machine.

    Raises:
        ConfigurationError: If the mapping is invalid.

    """
    context = f"machine: {source}"
    v = FieldValidator(data, context)
    v.require_mapping()

    version = _resolve_schema_version(v, schema_version)
    dialect = Dialect.from_schema_version(version)
    machine_id = v.optional("id", str)

    root = _parse_state(
        data,
        name=machine_id or ROOT_STATE_NAME,
        path=(),
        dialect=dialect,
        source=source,
    )
    document = MachineDocument(
        source=source,
        schema_version=version,
        dialect=dialect,
        root=root,
    )

    logger.info(
        "machine_loaded",
        source=source,
        machine_id=document.machine_id,
        dialect=dialect.value,
        states=document.state_count,
        automatic_transitions=document.transition_count,
    )
    return document


def _resolve_schema_version(v: FieldValidator, override: int | None) -> int:
    """Pick the schema version: override, then document, then settings."""
    if override is not None:
        version = override
    else:
        declared = v.optional(SCHEMA_VERSION_KEY, int)
        version = declared if declared is not None else get_settings().lint.schema_version

    if version not in SUPPORTED_SCHEMA_VERSIONS:
        raise ConfigurationError(
            f"Schema version {version} is not supported in {v.context}. "
            f"Supported versions: {list(SUPPORTED_SCHEMA_VERSIONS)}"
        )
    return version


def _parse_state(
    data: Any,
    name: str,
    path: tuple[str, ...],
    dialect: Dialect,
    source: str,
) -> StateNode:
    """Parse a state mapping and its descendants.

    Raises:
        ConfigurationError: If the state or one of its descendants is invalid.

    """
    label = ".".join(path) if path else name
    context = f"state '{label}' in {source}"

    # "idle:" with no body is an empty state
    v = FieldValidator({} if data is None else data, context)
    state_data = v.require_mapping()

    children = tuple(
        _parse_state(child_data, child_name, (*path, child_name), dialect, source)
        for child_name, child_data in v.optional_mapping("states").items()
    )

    return StateNode(
        name=name,
        id=v.optional("id", str),
        path=path,
        automatic_transitions=_parse_automatic_transitions(state_data, dialect, context),
        children=children,
    )


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _parse_automatic_transitions(
    data: dict[str, Any],
    dialect: Dialect,
    context: str,
) -> list[TransitionCandidate]:
    """Collect a state's automatic transitions in runtime evaluation order."""
    raw: list[Any] = []

    if dialect == Dialect.positional_context:
        # YAML 1.1 loads an unquoted "on" key as boolean true.
        events = data.get(EVENTS_KEY, data.get(True))
        if isinstance(events, dict) and NULL_EVENT in events:
            null_event = _as_list(events[NULL_EVENT])
            logger.debug(
                "null_event_transitions",
                state=context,
                count=len(null_event),
            )
            raw.extend(null_event)

    raw.extend(_as_list(data.get(AUTOMATIC_TRANSITIONS_KEY)))

    return [
        _parse_transition(item, index, dialect, context)
        for index, item in enumerate(raw)
    ]


def _parse_transition(
    data: Any,
    index: int,
    dialect: Dialect,
    parent_context: str,
) -> TransitionCandidate:
    """Parse one automatic transition.

    Raises:
        ConfigurationError: If the transition is neither a target string nor
            a mapping, or its target is not a string.

    """
    if isinstance(data, str):
        return TransitionCandidate(position=index, target=data)

    context = f"automatic transition [{index}] of {parent_context}"
    v = FieldValidator(data, context)
    v.require_mapping()

    foreign_property = (
        Dialect.destructured_context.guard_property
        if dialect == Dialect.positional_context
        else Dialect.positional_context.guard_property
    )
    if data.get(foreign_property) is not None:
        logger.warning(
            "foreign_guard_property",
            transition=context,
            property=foreign_property,
            expected=dialect.guard_property,
        )

    return TransitionCandidate(
        position=index,
        target=v.optional("target", str),
        guard=_parse_guard(data.get(dialect.guard_property), context),
        actions=tuple(
            _parse_action(action, dialect) for action in _as_list(data.get("actions"))
        ),
    )


def _parse_guard(value: Any, context: str) -> Guard | None:
    """Classify a guard value."""
    if value is None:
        return None

    if isinstance(value, str):
        return Guard.named(value)

    if isinstance(value, dict) and isinstance(value.get(INLINE_FUNCTION_KEY), str):
        source = value[INLINE_FUNCTION_KEY]
        try:
            parameters = get_function_parser().parse_parameters(source)
        except FunctionParsingError as e:
            logger.warning("inline_guard_unparsed", transition=context, error=str(e))
            return Guard.other()
        return Guard.inline(parameters, source=source.strip())

    return Guard.other()


def _action_creator(value: dict[str, Any]) -> str | None:
    action_type = value.get("type")
    if isinstance(action_type, str):
        return action_type
    if len(value) == 1:
        return next(iter(value))
    return None


def _parse_action(value: Any, dialect: Dialect) -> ActionRef:
    """Classify an action value."""
    if isinstance(value, str):
        return ActionRef.named(value)

    if not isinstance(value, dict):
        return ActionRef.opaque()

    creator = _action_creator(value)

    if creator in CONTEXT_ASSIGNMENT_TYPES:
        return ActionRef.assign()

    if creator in CONDITIONAL_ACTION_TYPES:
        return _parse_conditional_action(value, creator, dialect)

    if creator in DYNAMIC_ACTION_TYPES:
        return ActionRef.named(creator)

    if creator is not None and (
        creator in BUILTIN_ACTION_CREATORS[dialect.schema_version]
        or creator.startswith("xstate.")
    ):
        return ActionRef.opaque(creator)

    if INLINE_FUNCTION_KEY in value:
        return ActionRef.opaque(INLINE_FUNCTION_KEY)

    if isinstance(value.get("type"), str):
        return ActionRef.named(value["type"])

    return ActionRef.opaque()


def _parse_conditional_action(
    value: dict[str, Any],
    creator: str,
    dialect: Dialect,
) -> ActionRef:
    """Classify a ``choose`` action by the actions of its branches.

    Branches come either from the single-key form ``{choose: [...]}`` or from
    a ``conds`` list alongside ``type: choose``.
    """
    branches = value.get(creator) if "type" not in value else value.get("conds")

    nested: list[ActionRef] = []
    for branch in _as_list(branches):
        if not isinstance(branch, dict):
            continue
        nested.extend(
            _parse_action(action, dialect) for action in _as_list(branch.get("actions"))
        )

    kinds = {action.kind for action in nested}
    if ActionKind.context_assignment in kinds:
        return ActionRef(kind=ActionKind.context_assignment, name=creator)
    if ActionKind.named_or_referenced in kinds:
        return ActionRef(kind=ActionKind.named_or_referenced, name=creator)
    return ActionRef.opaque(creator)
