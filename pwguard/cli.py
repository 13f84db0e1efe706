"""
PwGuard CLI
============

Click-based command-line interface for PwGuard. Provides subcommands for
password strength checks, random and best-of-N generation, and
memorable passphrase generation.

Usage::

    python -m pwguard check "MyP@ssw0rd!"
    python -m pwguard generate --length 20 --exclude-similar
    python -m pwguard generate --strong --no-symbols
    python -m pwguard memorable --words 5
    python -m pwguard -o json -f report.json check "hunter2"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import PwGuardConfig
from shared.console import PwGuardConsole
from shared.logger import PwGuardLogger
from shared.models import ScanResult

from pwguard import __version__
from pwguard.core.engine import PwGuardEngine, mask_password
from pwguard.core.errors import PasswordGenerationError
from pwguard.core.models import (
    GeneratePasswordOptions,
    GenerationStrategy,
    KeyspaceBreakdown,
    PasswordStrengthResult,
)
from pwguard.output.console import PwGuardConsoleOutput
from pwguard.output.report import PwGuardReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="pwguard")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PwGuard configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and log output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """PwGuard -- Password Strength Estimation & Secure Generation.

    Check how quickly a password falls to realistic attacks, and generate
    random or memorable passwords from a cryptographically secure source.
    """
    ctx.ensure_object(dict)

    pw_config = PwGuardConfig.load(config) if config else PwGuardConfig()
    ctx.obj["config"] = pw_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = PwGuardConsole(quiet=quiet)
    logger = PwGuardLogger.from_config(
        "cli", pw_config.global_settings, console_output=not quiet
    )
    ctx.obj["console"] = console
    ctx.obj["engine"] = PwGuardEngine(pw_config, logger=logger)
    ctx.obj["display"] = PwGuardConsoleOutput(console)
    ctx.obj["reporter"] = PwGuardReportGenerator(version=pw_config.global_settings.version)

    if output == "console" and not quiet:
        console.banner(version=pw_config.global_settings.version)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON to the output file, or to stdout."""
    output_file = ctx.obj["output_file"]
    reporter: PwGuardReportGenerator = ctx.obj["reporter"]
    console: PwGuardConsole = ctx.obj["console"]

    if output_file:
        path = reporter.generate_json(result, Path(output_file))
        console.success(f"JSON report saved to: {path}")
    else:
        click.echo(reporter.render_json(result))


def _run_generation(
    ctx: click.Context,
    options: GeneratePasswordOptions,
    strategy: GenerationStrategy,
    word_count: Optional[int] = None,
) -> None:
    engine: PwGuardEngine = ctx.obj["engine"]
    display: PwGuardConsoleOutput = ctx.obj["display"]

    try:
        result = engine.generate(options, strategy, word_count=word_count)
    except PasswordGenerationError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc

    if ctx.obj["output_format"] == "console":
        strength = PasswordStrengthResult.model_validate(result.metadata["strength"])
        display.display_generated(result.metadata["password"], strength)
        if ctx.obj["quiet"]:
            # Rich output is suppressed in quiet mode
            click.echo(result.metadata["password"])
    else:
        _handle_output(ctx, result)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.pass_context
def check(ctx: click.Context, password: str) -> None:
    """Check password strength.

    Scores the password from 0 to 5, detects weakening patterns and
    projects crack times for online and offline attackers.
    """
    engine: PwGuardEngine = ctx.obj["engine"]
    display: PwGuardConsoleOutput = ctx.obj["display"]

    result = engine.analyze_password(password)

    if ctx.obj["output_format"] == "console":
        raw = result.metadata
        if raw:
            display.display_strength(
                PasswordStrengthResult.model_validate(raw["strength"]),
                KeyspaceBreakdown.model_validate(raw["keyspace"]),
                masked=mask_password(password),
                rates={k.value: v for k, v in engine.checker.rates.items()},
            )
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.option("--length", "-l", type=int, default=None,
              help="Password length (default from config, minimum 4).")
@click.option("--no-numbers", is_flag=True, default=False, help="Exclude digits.")
@click.option("--no-symbols", is_flag=True, default=False, help="Exclude symbols.")
@click.option("--no-uppercase", is_flag=True, default=False, help="Exclude uppercase letters.")
@click.option("--no-lowercase", is_flag=True, default=False, help="Exclude lowercase letters.")
@click.option("--exclude-similar", is_flag=True, default=False,
              help="Exclude look-alike characters (0 O 1 l I |).")
@click.option("--strong", is_flag=True, default=False,
              help="Draw several candidates and keep the highest-entropy one.")
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    no_numbers: bool,
    no_symbols: bool,
    no_uppercase: bool,
    no_lowercase: bool,
    exclude_similar: bool,
    strong: bool,
) -> None:
    """Generate a random password."""
    config: PwGuardConfig = ctx.obj["config"]
    options = GeneratePasswordOptions(
        length=length if length is not None else config.generator.default_length,
        numbers=not no_numbers,
        symbols=not no_symbols,
        uppercase=not no_uppercase,
        lowercase=not no_lowercase,
        exclude_similar=exclude_similar,
    )
    strategy = GenerationStrategy.STRONG if strong else GenerationStrategy.RANDOM
    _run_generation(ctx, options, strategy)


@cli.command()
@click.option("--words", "-w", type=click.IntRange(min=1), default=None,
              help="Number of words (default from config).")
@click.option("--no-numbers", is_flag=True, default=False, help="Omit the -NN suffix.")
@click.option("--no-symbols", is_flag=True, default=False, help="Omit the trailing symbol.")
@click.pass_context
def memorable(
    ctx: click.Context,
    words: Optional[int],
    no_numbers: bool,
    no_symbols: bool,
) -> None:
    """Generate a memorable word-based password."""
    options = GeneratePasswordOptions(numbers=not no_numbers, symbols=not no_symbols)
    _run_generation(ctx, options, GenerationStrategy.MEMORABLE, word_count=words)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Console-script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
