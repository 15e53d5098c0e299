"""Output formatting for biome-suppressed CLI commands."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from itertools import groupby
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from biome_suppressed.diff import Action, Evaluation
from biome_suppressed.models import Baseline, Finding
from biome_suppressed.runner import DEFAULT_COMMAND
console = Console()
err_console = Console(stderr=True)


def pluralise(count: int, word: str = "error") -> str:
    """Return ``"1 error"`` / ``"2 errors"``."""
    return f"{count} {word}{'' if count == 1 else 's'}"


class OutputFormatter:
    """Handles formatting CLI output for different commands."""

    def __init__(self, biome_command: Sequence[str] = DEFAULT_COMMAND) -> None:
        """Initialise formatter.

        Args:
            biome_command: Linter command shown in fix suggestions.

        """
        self._biome_command = tuple(biome_command)

    def format_running(self, write: bool) -> None:
        suffix = " with --write" if write else ""
        console.print(f"🔍 Running biome check{suffix}...")

    def format_found(self, count: int, write: bool) -> None:
        suffix = " (after fixes applied)" if write else ""
        console.print(f"Found {pluralise(count)}{suffix}")

    def format_evaluation(self, evaluation: Evaluation) -> None:
        """Print the outcome of a check run.

        Args:
            evaluation: Result returned by the diff engine.

        """
        match evaluation.action:
            case Action.CREATE:
                console.print("📊 No baseline found, creating initial baseline...")
                console.print(
                    f"[green]✅ Baseline created with {pluralise(evaluation.current_count)}[/green]"
                )
            case Action.RATCHET | Action.RATCHET_SKIPPED | Action.RATCHET_REJECTED:
                self._format_improvement(evaluation)
            case Action.NONE if evaluation.passed:
                self._format_no_new_errors(evaluation)
            case _:
                self.format_new_errors(evaluation.new_findings)
                err_console.print(
                    f"Baseline: {pluralise(evaluation.baseline_count or 0)}, "
                    f"Current: {pluralise(evaluation.current_count)}"
                )

    def _format_improvement(self, evaluation: Evaluation) -> None:
        before = evaluation.baseline_count or 0
        after = evaluation.current_count
        console.print(
            f"🎉 Improvement detected! {before} → {pluralise(after)} (-{before - after})"
        )
        if evaluation.new_findings:
            console.print(
                f"⚠️  {pluralise(len(evaluation.new_findings))} not in the previous baseline:"
            )
            for finding in evaluation.new_findings:
                console.print(
                    f"    {escape(finding.location)} {escape(finding.rule)}", soft_wrap=True
                )

        if evaluation.action is Action.RATCHET_REJECTED:
            err_console.print(
                "[red]❌ Unexpected improvement detected in CI mode "
                "(--suppression-fail-on-improvement)[/red]"
            )
            err_console.print("   Update the baseline with: bs update")
        elif evaluation.action is Action.RATCHET_SKIPPED:
            console.print("📊 Baseline update skipped (--skip-suppression-update)")
        else:
            console.print("📊 Baseline updated automatically")

    def _format_no_new_errors(self, evaluation: Evaluation) -> None:
        if evaluation.fixed_count > 0:
            console.print(
                f"[green]✅ No new errors. Fixed {pluralise(evaluation.fixed_count, 'existing error')}![/green]"
            )
        else:
            console.print(
                f"[green]✅ No new errors ({pluralise(evaluation.current_count, 'existing error')} suppressed)[/green]"
            )

    def format_new_errors(self, new_findings: Sequence[Finding]) -> None:
        """Print new findings grouped by rule, then the suggested next steps."""
        err_console.print(f"[red]❌ Found {pluralise(len(new_findings), 'new error')}:[/red]")
        err_console.print()

        by_rule = sorted(new_findings, key=lambda f: (f.rule, f.file, f.line))
        for rule, group in groupby(by_rule, key=lambda f: f.rule):
            findings = list(group)
            err_console.print(f"  {escape(rule)} ({pluralise(len(findings))}):")
            for finding in findings:
                err_console.print(f"    {escape(finding.location)}")
            err_console.print()

        files = sorted({f.file for f in new_findings})
        fix_command = shlex.join([*self._biome_command, "check", "--write", *files])
        err_console.print("Fix strategies:")
        err_console.print(f"• Run: {escape(fix_command)}", soft_wrap=True)
        err_console.print("• Or accept: bs update")

    def format_saved(self, baseline: Baseline, verb: str) -> None:
        """Report an explicit init/update."""
        icon = "✅" if verb == "created" else "📊"
        console.print(f"{icon} Baseline {verb} with {pluralise(baseline.error_count)}")

    def format_cleared(self, existed: bool) -> None:
        if existed:
            console.print("🗑️  Baseline cleared")
        else:
            console.print("ℹ️  No baseline to clear")

    def format_status(self, baseline: Baseline | None, location: Path | None) -> None:
        """Print a summary of the stored baseline."""
        if baseline is None:
            console.print("ℹ️  No baseline found")
            return

        table = Table(title="📊 Baseline", show_header=False)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value")
        table.add_row("Errors", str(baseline.error_count))
        table.add_row("Biome version", escape(baseline.biome_version))
        if location is not None:
            table.add_row("Location", escape(str(location)))
        console.print(table)
