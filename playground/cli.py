"""
Playground CLI
===============

Click-based command-line interface for the Security Playground.  Provides
subcommands for password strength analysis, password generation,
injection pattern detection, digests, JWT inspection and the
security-header checklist.

Usage::

    python -m playground password "MyP@ssw0rd!"
    python -m playground generate --length 24 --exclude-ambiguous
    python -m playground detect "' OR '1'='1"
    python -m playground hash --algorithm SHA-512 "hello"
    python -m playground jwt eyJhbGciOiJIUzI1NiJ9.e30.sig
    curl -sI https://example.com | python -m playground headers

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from shared.config import PlaygroundConfig
from shared.console import PlaygroundConsole
from shared.models import ScanResult

from playground import __version__
from playground.core.engine import PlaygroundEngine
from playground.core.exceptions import InvalidConfigurationError
from playground.core.models import (
    DigestAlgorithm,
    GenerationOptions,
    HeaderAnalysis,
    PasswordAnalysis,
    TokenAnalysis,
    Vulnerability,
)
from playground.output.console import PlaygroundConsoleOutput
from playground.output.report import PlaygroundReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a playground configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner, log and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Security Playground -- heuristic password and payload analyzers.

    Score password strength, generate passwords, flag injection-looking
    input, compute digests, inspect JWTs and check security headers.
    """
    ctx.ensure_object(dict)

    pg_config = PlaygroundConfig.load(config) if config else PlaygroundConfig()
    if quiet:
        pg_config.global_settings.console_logging = False

    ctx.obj["config"] = pg_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file

    console = PlaygroundConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = PlaygroundEngine(pg_config)
    ctx.obj["display"] = PlaygroundConsoleOutput(console)
    ctx.obj["reporter"] = PlaygroundReportGenerator()

    if not quiet:
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON (stdout or file) or as an HTML report."""
    output_file = ctx.obj["output_file"]
    reporter: PlaygroundReportGenerator = ctx.obj["reporter"]
    console: PlaygroundConsole = ctx.obj["console"]

    if ctx.obj["output_format"] == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.to_json(result))
    else:
        if output_file:
            target = Path(output_file)
        else:
            output_dir = ctx.obj["config"].global_settings.output_dir
            target = Path(output_dir) / f"{result.tool_name.replace('.', '_')}_report.html"
        path = reporter.generate_html(result, target)
        console.success(f"HTML report saved to: {path}")


def _emit_payload(ctx: click.Context, payload: dict[str, Any]) -> None:
    """JSON output for commands that produce a value rather than findings."""
    console: PlaygroundConsole = ctx.obj["console"]
    if ctx.obj["output_format"] == "html":
        console.warning("HTML reports cover analysis commands; writing JSON instead.")

    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    output_file = ctx.obj["output_file"]
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        console.success(f"JSON output saved to: {path}")
    else:
        click.echo(text)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.pass_context
def password(ctx: click.Context, password: str) -> None:
    """Analyse password strength, entropy and crack time.

    Reports a 0-100 score, entropy in bits, crack-time estimates for
    CPU, GPU and distributed attackers, weaknesses and suggestions.
    """
    engine: PlaygroundEngine = ctx.obj["engine"]
    display: PlaygroundConsoleOutput = ctx.obj["display"]

    result = engine.analyze_password(password)

    if ctx.obj["output_format"] == "console":
        if result.metadata:
            display.display_password(PasswordAnalysis(**result.metadata))
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.option("--length", "-l", type=int, default=None,
              help="Password length (default from configuration).")
@click.option("--uppercase/--no-uppercase", default=True, help="Include A-Z.")
@click.option("--numbers/--no-numbers", default=True, help="Include 0-9.")
@click.option("--symbols/--no-symbols", default=True, help="Include symbols.")
@click.option("--exclude-ambiguous", is_flag=True, default=False,
              help="Drop look-alike characters (l, I, O, 0).")
@click.option("--uniform", is_flag=True, default=False,
              help="Use rejection sampling instead of modulo reduction.")
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    uppercase: bool,
    numbers: bool,
    symbols: bool,
    exclude_ambiguous: bool,
    uniform: bool,
) -> None:
    """Generate a random password from the operating system CSPRNG."""
    engine: PlaygroundEngine = ctx.obj["engine"]
    console: PlaygroundConsole = ctx.obj["console"]

    options = GenerationOptions(
        uppercase=uppercase,
        numbers=numbers,
        symbols=symbols,
        exclude_ambiguous=exclude_ambiguous,
    )
    if uniform:
        engine.generator.uniform = True

    try:
        generated = engine.generate_password(length, options)
    except InvalidConfigurationError as exc:
        console.error(str(exc))
        ctx.exit(2)

    analysis = engine.password_analyzer.analyze(generated)
    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_generated(generated, analysis)
    else:
        _emit_payload(ctx, {
            "password": generated,
            "length": len(generated),
            "options": options.model_dump(),
            "analysis": analysis.model_dump(),
        })


@cli.command()
@click.argument("text")
@click.pass_context
def detect(ctx: click.Context, text: str) -> None:
    """Flag SQL injection, XSS and command injection patterns in TEXT.

    Pattern matching only: a hit means the input looks like a known
    payload, not that any application is vulnerable.
    """
    engine: PlaygroundEngine = ctx.obj["engine"]
    display: PlaygroundConsoleOutput = ctx.obj["display"]

    result = engine.detect_injection(text)

    if ctx.obj["output_format"] == "console":
        vulns = [Vulnerability(**v) for v in result.metadata.get("vulnerabilities", [])]
        display.display_vulnerabilities(vulns)
    else:
        _handle_output(ctx, result)


@cli.command("hash")
@click.argument("message")
@click.option(
    "--algorithm", "-a",
    type=click.Choice([a.value for a in DigestAlgorithm], case_sensitive=False),
    default=DigestAlgorithm.SHA256.value,
    help="Digest algorithm.",
)
@click.pass_context
def hash_(ctx: click.Context, message: str, algorithm: str) -> None:
    """Compute the hex digest of MESSAGE (UTF-8)."""
    engine: PlaygroundEngine = ctx.obj["engine"]

    digest = engine.compute_digest(message, algorithm)

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_digest(digest)
    else:
        _emit_payload(ctx, digest.model_dump(mode="json"))


@cli.command()
@click.argument("token")
@click.pass_context
def jwt(ctx: click.Context, token: str) -> None:
    """Decode a JSON Web Token without verifying its signature."""
    engine: PlaygroundEngine = ctx.obj["engine"]

    result = engine.decode_token(token)

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_token(TokenAnalysis(**result.metadata))
    else:
        _handle_output(ctx, result)


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def headers(ctx: click.Context, source: Any) -> None:
    """Check HTTP response headers (file or stdin) for security headers."""
    engine: PlaygroundEngine = ctx.obj["engine"]

    result = engine.check_headers(source.read())

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_headers(HeaderAnalysis(**result.metadata))
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the playground CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
