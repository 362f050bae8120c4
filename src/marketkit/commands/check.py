"""Check command for validating a marketplace bundle."""

from pathlib import Path

import click

from marketkit.commands.options import bundle_path_option
from marketkit.context import MarketkitContext, resolve_bundle_root
from marketkit.error_boundary import cli_error_boundary
from marketkit.models.validation import ValidationIssue, ValidationReport
from marketkit.operations.validation import validate_bundle
from marketkit.output import user_output


def _format_issue(issue: ValidationIssue) -> str:
    if issue.severity == "error":
        marker = click.style("✗", fg="red")
    else:
        marker = click.style("⚠", fg="yellow")
    return f"  {marker} {click.style(issue.location, fg='cyan')}: {issue.message}"


def render_report(report: ValidationReport, strict: bool) -> None:
    """Print a validation report for people."""
    passed = report.is_valid(strict=strict)

    if passed:
        user_output(click.style("✓ Marketplace bundle: PASSED", fg="green", bold=True))
    else:
        user_output(click.style("✗ Marketplace bundle: FAILED", fg="red", bold=True))
    user_output()

    if report.errors:
        user_output(click.style("Errors:", fg="red"))
        for issue in report.errors:
            user_output(_format_issue(issue))
        user_output()

    if report.warnings:
        label = "Warnings (fatal in strict mode):" if strict else "Warnings:"
        user_output(click.style(label, fg="yellow"))
        for issue in report.warnings:
            user_output(_format_issue(issue))
        user_output()

    user_output(f"Plugins checked: {report.plugins_checked}")
    user_output(f"Skills checked: {report.skills_checked}")
    user_output(f"Errors: {len(report.errors)}, warnings: {len(report.warnings)}")


@click.command()
@bundle_path_option
@click.option("--strict", is_flag=True, default=False, help="Treat warnings as failures.")
@click.pass_obj
@cli_error_boundary
def check(ctx: MarketkitContext, path: Path | None, strict: bool) -> None:
    """Validate the marketplace registry, plugin manifests, skills and hooks.

    Exit codes:
    - 0: Bundle is valid
    - 1: Errors found (or warnings, with --strict)
    """
    bundle_root = resolve_bundle_root(ctx, path)
    effective_strict = strict or ctx.config.check.strict

    report = validate_bundle(bundle_root)
    render_report(report, effective_strict)

    if not report.is_valid(strict=effective_strict):
        raise SystemExit(1)
