from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="treetest", help="Run nested test trees and report the results")


@app.command()
def run(
    target: str = typer.Argument(
        help="Tester to run: path/to/file.py[:name] or package.module[:name]"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to YAML config"),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report to this path"),
    html: str | None = typer.Option(None, help="Write an HTML report to this path"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable console colors"),
    ascii_glyphs: bool = typer.Option(
        False, "--ascii", help="Use PASS/FAIL instead of emoji glyphs"
    ),
    summary: bool = typer.Option(
        False, "--summary", help="Print assertion counts before the status line"
    ),
    max_concurrency: int | None = typer.Option(
        None, "--max-concurrency", min=1, help="Maximum number of test bodies running at once"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
    debug_log: str | None = typer.Option(None, help="Write debug output to this file"),
):
    """Run a test tree and exit with 0 if every test passed, 1 otherwise."""
    from pydantic import ValidationError

    from treetest.config import RunConfig, load_config
    from treetest.loader import load_tester
    from treetest.runner import Runner
    from treetest.style import GlyphSet

    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            run_config = load_config(config_path)
        except (ValidationError, ValueError) as e:
            typer.echo(f"Error: invalid config {config}: {e}", err=True)
            raise typer.Exit(1)
    else:
        run_config = RunConfig()

    # Command line flags override values from the config file
    if junit is not None:
        run_config.report.junit = junit
    if html is not None:
        run_config.report.html = html
    if no_color:
        run_config.report.color = False
    if ascii_glyphs:
        run_config.report.glyphs = GlyphSet.ASCII
    if summary:
        run_config.report.summary = True
    if max_concurrency is not None:
        run_config.max_concurrency = max_concurrency
    if verbose:
        run_config.verbose = True
    if debug_log is not None:
        run_config.debug_log = debug_log

    try:
        tester = load_tester(target)
    except (ImportError, FileNotFoundError, ValueError, TypeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    runner = Runner(config=run_config, write=typer.echo)
    result = runner.run(tester)
    exit_code = runner.report(result)

    if run_config.report.junit:
        typer.echo(f"JUnit report: {run_config.report.junit}", err=True)
    if run_config.report.html:
        typer.echo(f"HTML report: {run_config.report.html}", err=True)

    raise typer.Exit(exit_code)


@app.command()
def report(
    junit_xml: str = typer.Argument(help="Path to a JUnit XML file written by 'run'"),
    out: str | None = typer.Option(
        None, help="Output path for the HTML report (defaults to report.html beside the XML)"
    ),
):
    """Regenerate the HTML report from a previous run's JUnit XML."""
    from treetest.reporting.junit import generate_report

    junit_path = Path(junit_xml)
    if not junit_path.is_file():
        typer.echo(f"Error: JUnit file not found: {junit_xml}", err=True)
        raise typer.Exit(1)

    report_path = generate_report(junit_path, Path(out) if out is not None else None)
    typer.echo(f"Report generated: {report_path}")


if __name__ == "__main__":
    app()
