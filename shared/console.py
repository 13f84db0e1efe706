"""
PwGuard Console Interface
==========================

Rich-powered console abstraction providing a single presentation layer
for the PwGuard CLI.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages, tables and
findings listings, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_PWGUARD_THEME = Theme(
    {
        "pwguard.banner": "bold bright_cyan",
        "pwguard.section": "bold bright_magenta",
        "pwguard.success": "bold green",
        "pwguard.warning": "bold yellow",
        "pwguard.error": "bold red",
        "pwguard.info": "bold bright_blue",
        "pwguard.dim": "dim white",
        "pwguard.critical": "bold white on red",
        "pwguard.high": "bold red",
        "pwguard.medium": "bold yellow",
        "pwguard.low": "bold bright_cyan",
        "pwguard.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ____           ____                     _
 |  _ \__      _/ ___|_   _  __ _ _ __ __| |
 | |_) \ \ /\ / / |  _| | | |/ _` | '__/ _` |
 |  __/ \ V  V /| |_| | |_| | (_| | | | (_| |
 |_|     \_/\_/  \____|\__,_|\__,_|_|  \__,_|
[/bright_cyan]"""

_TAGLINE = "Password Strength Estimation & Secure Generation"

_SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "pwguard.critical",
    "HIGH": "pwguard.high",
    "MEDIUM": "pwguard.medium",
    "LOW": "pwguard.low",
    "INFO": "pwguard.informational",
}


class PwGuardConsole:
    """Unified console interface for the PwGuard CLI.

    Usage::

        con = PwGuardConsole()
        con.banner()
        con.section("Strength Report")
        con.success("Password generated")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text / HTML export.
        """
        self._console = Console(
            theme=_PWGUARD_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner and sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PwGuard ASCII-art banner."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[pwguard.info]{_TAGLINE}[/pwguard.info]\n"
            f"[pwguard.dim]Version: {version}  |  {now}[/pwguard.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {title}  ", style="pwguard.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[pwguard.success][✔] SUCCESS:[/pwguard.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[pwguard.warning][⚠] WARNING:[/pwguard.warning] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[pwguard.error][✘] ERROR:[/pwguard.error] {message}")

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings with automatic severity colouring.

        Expects objects with ``severity``, ``title`` and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = _SEVERITY_STYLES.get(sev_name, "")
            sev_cell = f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            tbl.add_row(
                str(idx),
                sev_cell,
                str(getattr(finding, "title", "")),
                str(getattr(finding, "description", "")),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

