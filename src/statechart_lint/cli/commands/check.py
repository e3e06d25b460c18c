"""Check command implementation.

This module implements the command that analyzes machine documents for
non-terminating automatic transitions.
"""

from argparse import Namespace
from pathlib import Path

from statechart_lint.analysis import MachineAnalyzer
from statechart_lint.cli.commands.base import BaseCommand, CommandResult
from statechart_lint.config import ConfigurationError, get_settings, load_machine
from statechart_lint.logging_config import get_logger
from statechart_lint.models.finding import LintReport

__all__ = ["CheckCommand"]

logger = get_logger(__name__)


class CheckCommand(BaseCommand):
    """Command to analyze machine documents."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "check"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the check command.

        Args:
            args: Parsed arguments with document paths and options.

        Returns:
            CommandResult with one report per loaded document. The exit code
            is 1 when any document has findings or failed to load.

        """
        workers = getattr(args, "workers", None) or get_settings().lint.max_workers
        schema_version = getattr(args, "schema_version", None)

        reports: list[LintReport] = []
        errors: list[str] = []

        for file in args.files:
            try:
                reports.append(self.check_file(Path(file), schema_version, workers))
            except (ConfigurationError, OSError) as e:
                logger.error("machine_load_failed", path=str(file), error=str(e))
                errors.append(str(e))

        failed = bool(errors) or any(report.has_findings() for report in reports)
        return CommandResult(
            exit_code=1 if failed else 0,
            reports=reports,
            errors=errors,
        )

    def check_file(
        self,
        path: Path,
        schema_version: int | None = None,
        workers: int = 1,
    ) -> LintReport:
        """Load and analyze a single machine document.

        Args:
            path: Path to the machine document.
            schema_version: Optional schema version override.
            workers: Maximum threads used to classify states.

        Returns:
            LintReport for the document.

        Raises:
            OSError: If the file does not exist or cannot be read.
            ConfigurationError: If the document is invalid.

        """
        document = load_machine(path, schema_version=schema_version)
        analyzer = MachineAnalyzer(document.dialect, max_workers=workers)
        findings = analyzer.analyze(document.root)

        logger.info(
            "machine_checked",
            path=str(path),
            machine_id=document.machine_id,
            findings=len(findings),
        )

        return LintReport(
            source=document.source,
            machine_id=document.machine_id,
            dialect=document.dialect,
            state_count=document.state_count,
            findings=findings,
        )
