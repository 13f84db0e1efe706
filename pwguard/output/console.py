"""
PwGuard Console Output
=======================

Rich-based formatters for strength checks and generated passwords: a
colour-graded 0-5 strength meter, a composition table, crack-time
projections per attacker profile, detected patterns and suggestions.

Uses the shared :class:`~shared.console.PwGuardConsole` for consistent
styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import PwGuardConsole
from pwguard.core.models import (
    CrackTimeEstimate,
    KeyspaceBreakdown,
    PasswordStrengthResult,
    Verdict,
)


_VERDICT_COLOURS: dict[Verdict, str] = {
    Verdict.WEAK: "bold red",
    Verdict.MEDIUM: "bold yellow",
    Verdict.STRONG: "bold green",
    Verdict.VERY_STRONG: "bold bright_green",
}

_SCENARIO_LABELS: dict[str, str] = {
    "online": "Online (throttled)",
    "offline": "Offline (GPU)",
    "offline_fast": "Offline (fast hash cluster)",
}

_METER_WIDTH = 40


class PwGuardConsoleOutput:
    """Console formatters for PwGuard results.

    Usage::

        output = PwGuardConsoleOutput()
        output.display_strength(result, breakdown)
    """

    def __init__(self, console: Optional[PwGuardConsole] = None) -> None:
        self.console = console or PwGuardConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Strength Display
    # ------------------------------------------------------------------ #

    def display_strength(
        self,
        result: PasswordStrengthResult,
        breakdown: Optional[KeyspaceBreakdown] = None,
        *,
        masked: str = "",
        rates: Optional[dict[str, float]] = None,
    ) -> None:
        """Render a strength check.

        Args:
            result: Strength result to display.
            breakdown: Keyspace breakdown; adds the pattern table when given.
            masked: Masked password shown in the header panel.
            rates: Guesses per second keyed by scenario value.
        """
        self.console.section("Password Strength")
        self._rich.print(Panel(
            self._meter(result),
            title=f"Strength Meter {escape(masked)}".strip(),
            border_style="cyan",
        ))

        crack_tbl = Table(
            title="Crack Time Estimates",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        crack_tbl.add_column("Attack Scenario", style="bold")
        crack_tbl.add_column("Speed", justify="right")
        crack_tbl.add_column("Estimated Time", justify="right")
        for estimate in self._estimates(result):
            scenario = estimate.attack_scenario.value
            speed = f"{rates[scenario]:.0e} g/s" if rates and scenario in rates else "-"
            crack_tbl.add_row(
                _SCENARIO_LABELS.get(scenario, scenario),
                speed,
                estimate.human_readable,
            )
        self._rich.print(crack_tbl)

        if breakdown is not None and breakdown.patterns:
            pat_tbl = Table(
                title="Detected Patterns",
                border_style="bright_cyan",
                header_style="bold bright_magenta",
            )
            pat_tbl.add_column("Type", style="bold yellow")
            pat_tbl.add_column("Detail")
            pat_tbl.add_column("Keyspace x", justify="right")
            for pattern in breakdown.patterns:
                pat_tbl.add_row(
                    pattern.pattern_type, pattern.value, f"{pattern.multiplier:g}"
                )
            self._rich.print(pat_tbl)

        if result.pwned_check is not None:
            pwned = result.pwned_check
            if pwned.error_message:
                self.console.warning(f"Breach check unavailable: {escape(pwned.error_message)}")
            elif pwned.is_pwned:
                self.console.error(
                    f"Password found in breach data ({pwned.breach_count or 0} times)"
                )
            else:
                self.console.success("Password not found in breach data")

        if result.suggestions:
            self._rich.print()
            self._rich.print("[bold]Suggestions:[/bold]")
            for suggestion in result.suggestions:
                self._rich.print(f"  [cyan]•[/cyan] {suggestion}")

    # ------------------------------------------------------------------ #
    #  Generation Display
    # ------------------------------------------------------------------ #

    def display_generated(self, password: str, result: PasswordStrengthResult) -> None:
        """Show a generated password with its verdict and offline crack time."""
        self.console.section("Generated Password")
        colour = _VERDICT_COLOURS.get(result.verdict, "white")

        body = Text()
        body.append(password, style="bold bright_white")
        body.append("\n\n")
        body.append("Strength: ", style="bold")
        body.append(_label(result.verdict), style=colour)
        body.append(f"  ({result.score}/5)")
        body.append("\nOffline crack time: ", style="bold")
        body.append(result.crack_time.offline.human_readable)

        self._rich.print(Panel(body, border_style="green", padding=(1, 2)))

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _estimates(result: PasswordStrengthResult) -> list[CrackTimeEstimate]:
        ct = result.crack_time
        return [ct.online, ct.offline, ct.offline_fast]

    @staticmethod
    def _meter(result: PasswordStrengthResult) -> Text:
        filled = max(0, min(_METER_WIDTH, int(result.score / 5 * _METER_WIDTH)))
        colour = _VERDICT_COLOURS.get(result.verdict, "white")

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/5  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.25:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.50:
                meter.append("█", style="yellow")
            elif i < _METER_WIDTH * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(_label(result.verdict).upper(), style=colour)
        return meter


def _label(verdict: Verdict) -> str:
    return verdict.value.replace("_", " ").title()
