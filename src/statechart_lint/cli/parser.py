"""CLI argument parser configuration.

This module provides the argument parser for the statechart-lint CLI.
"""

import argparse

from statechart_lint import __version__
from statechart_lint.config.defaults import SUPPORTED_SCHEMA_VERSIONS

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="statechart-lint",
        description=(
            "statechart-lint - Detect automatic transitions that can loop "
            "forever in statechart configurations."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check one machine document
  statechart-lint machines/checkout.yaml

  # Check several documents written for schema version 4
  statechart-lint machines/*.yaml --schema-version 4

  # Emit findings as JSON
  statechart-lint machines/checkout.yaml --json

  # Only validate that documents load
  statechart-lint machines/checkout.yaml --dry-run
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="Machine documents (YAML or JSON) to analyze",
    )

    parser.add_argument(
        "--schema-version",
        type=int,
        choices=list(SUPPORTED_SCHEMA_VERSIONS),
        dest="schema_version",
        help="Schema version of the documents (default: document's schemaVersion, "
        "then STATECHART_LINT_SCHEMA_VERSION)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Maximum threads used to classify states (default: STATECHART_LINT_MAX_WORKERS)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Load and validate documents without analyzing them",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON instead of formatted text",
    )

    return parser
