"""Default configuration values for statechart-lint.

This module centralizes all hard-coded default values used throughout
the application, making them easy to discover and modify.
"""

# Schema versions
DEFAULT_SCHEMA_VERSION = 5
SUPPORTED_SCHEMA_VERSIONS = (4, 5)

# Concurrency
DEFAULT_MAX_WORKERS = 4
MAX_WORKERS_MIN = 1
MAX_WORKERS_MAX = 32

# Document keys
SCHEMA_VERSION_KEY = "schemaVersion"
AUTOMATIC_TRANSITIONS_KEY = "always"
NULL_EVENT = ""

# Action creators whose effects are known and do not touch the context,
# per schema version. assign, choose and pure are classified separately.
BUILTIN_ACTION_CREATORS: dict[int, frozenset[str]] = {
    4: frozenset(
        {
            "cancel",
            "done",
            "doneInvoke",
            "error",
            "escalate",
            "forwardTo",
            "log",
            "raise",
            "respond",
            "send",
            "sendParent",
            "sendTo",
            "sendUpdate",
            "start",
            "stop",
        }
    ),
    5: frozenset(
        {
            "cancel",
            "emit",
            "forwardTo",
            "log",
            "raise",
            "sendParent",
            "sendTo",
            "spawnChild",
            "stopChild",
        }
    ),
}

CONTEXT_ASSIGNMENT_TYPES = frozenset({"assign", "xstate.assign"})
CONDITIONAL_ACTION_TYPES = frozenset({"choose", "xstate.choose"})
DYNAMIC_ACTION_TYPES = frozenset({"pure", "xstate.pure", "enqueueActions"})
