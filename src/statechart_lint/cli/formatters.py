"""Output formatting utilities for CLI.

This module provides functions for formatting lint reports.
"""

import json

from statechart_lint.models.finding import LintReport

__all__ = ["format_reports"]


def format_reports(
    reports: list[LintReport],
    errors: list[str] | None = None,
    json_output: bool = False,
) -> str:
    """Format lint reports for output.

    Args:
        reports: Reports of successfully analyzed documents.
        errors: Messages for documents that failed to load.
        json_output: Whether to format as JSON.

    Returns:
        Formatted string output.

    """
    errors = errors or []

    if json_output:
        return json.dumps(
            {
                "reports": [report.get_summary() for report in reports],
                "errors": errors,
            },
            indent=2,
        )

    lines: list[str] = []
    total_findings = 0

    for report in reports:
        if not report.findings:
            continue
        lines.append(f"{report.source} ({report.machine_id})")
        for finding in report.findings:
            lines.append(
                f"  {finding.state_path}[{finding.position}] "
                f"{finding.severity.value:<6} {finding.message}  "
                f"[{finding.category.value}]"
            )
        lines.append("")
        total_findings += len(report.findings)

    for error in errors:
        lines.append(f"error: {error}")

    if errors:
        lines.append("")

    lines.append(
        f"{total_findings} finding(s) in {len(reports)} machine(s), "
        f"{len(errors)} failed to load"
    )

    return "\n".join(lines)
