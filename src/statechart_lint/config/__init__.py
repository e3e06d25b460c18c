"""Configuration module.

This module provides the loader that turns YAML machine documents into
the config tree model, the field validator it uses, and centralized
settings via pydantic-settings.
"""

from statechart_lint.config.exceptions import ConfigurationError
from statechart_lint.config.loader import load_machine, load_yaml_file, parse_machine
from statechart_lint.config.models import MachineDocument
from statechart_lint.config.settings import LintSettings, Settings, get_settings

__all__ = [
    "ConfigurationError",
    "LintSettings",
    "MachineDocument",
    "Settings",
    "get_settings",
    "load_machine",
    "load_yaml_file",
    "parse_machine",
]
