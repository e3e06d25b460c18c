"""Validate command implementation.

This module implements the command that loads machine documents without
analyzing them.
"""

import json
from argparse import Namespace
from pathlib import Path

from statechart_lint.cli.commands.base import BaseCommand, CommandResult
from statechart_lint.config import ConfigurationError, load_machine

__all__ = ["ValidateCommand"]


class ValidateCommand(BaseCommand):
    """Command to validate machine documents."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "validate"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the validate command.

        Args:
            args: Parsed arguments with document paths.

        Returns:
            CommandResult with validation status.

        """
        schema_version = getattr(args, "schema_version", None)
        verbose = getattr(args, "verbose", False)

        if getattr(args, "json_output", False):
            return self.validate_files_json(
                [Path(file) for file in args.files], schema_version
            )

        errors: list[str] = []
        for file in args.files:
            if not self.validate_file(Path(file), schema_version, verbose):
                errors.append(str(file))

        return CommandResult(
            exit_code=1 if errors else 0,
            errors=errors,
            message="Validation successful" if not errors else "Validation failed",
        )

    def validate_files_json(
        self,
        paths: list[Path],
        schema_version: int | None = None,
    ) -> CommandResult:
        """Validate documents and print one JSON summary for all of them.

        Args:
            paths: Paths to the machine documents.
            schema_version: Optional schema version override.

        Returns:
            CommandResult listing the documents that failed to load.

        """
        documents: list[dict[str, object]] = []
        messages: list[str] = []
        failed: list[str] = []

        for path in paths:
            try:
                document = load_machine(path, schema_version=schema_version)
            except (ConfigurationError, OSError) as e:
                failed.append(str(path))
                messages.append(str(e))
                continue
            documents.append(document.get_summary())

        print(json.dumps({"documents": documents, "errors": messages}, indent=2))

        return CommandResult(
            exit_code=1 if failed else 0,
            errors=failed,
            message="Validation successful" if not failed else "Validation failed",
        )

    def validate_file(
        self,
        path: Path,
        schema_version: int | None = None,
        verbose: bool = False,
    ) -> bool:
        """Validate a machine document without analyzing it.

        Args:
            path: Path to the machine document.
            schema_version: Optional schema version override.
            verbose: Whether to print details.

        Returns:
            True if valid, False otherwise.

        """
        try:
            document = load_machine(path, schema_version=schema_version)
        except (ConfigurationError, OSError) as e:
            print(f"Validation failed: {e}")
            return False

        if verbose:
            print(f"Machine: {document.machine_id}")
            print(f"Schema version: {document.schema_version} ({document.dialect.value})")
            print(f"States: {document.state_count}")
            print(f"Automatic transitions: {document.transition_count}")

        print(
            f"Validation successful: {path} ({document.machine_id}, "
            f"{document.dialect.value}, {document.state_count} states, "
            f"{document.transition_count} automatic transitions)"
        )
        return True
