"""Analyze command."""

import sys

import click
from loguru import logger

from bundle_cli import __version__
from bundle_cli.config import Settings, load_settings
from bundle_cli.log import configure_logging
from bundle_report import AnalysisFailure, ValidationError, render_report, validate_archive_path
from bundle_report.engines import AnalysisEngine, CommandEngine


def create_engine(settings: Settings) -> AnalysisEngine:
    """Build the analysis engine for the configured command."""
    return CommandEngine(settings.engine_command)


@click.command()
@click.version_option(version=__version__, prog_name="bundle-analyzer")
@click.option("--path", "raw_path", required=True, help="Path to the .ipa archive to analyze")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs")
def analyze(raw_path: str, verbose: bool):
    """Print the size breakdown of an app archive."""
    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        path = validate_archive_path(raw_path)
    except ValidationError as e:
        raise click.BadParameter(e.message, param_hint="'--path'")

    logger.info(f"Analyzing bundle at {path}")

    try:
        report = create_engine(settings).analyze(path)
    except AnalysisFailure as e:
        click.echo(f"❌ Analysis failed: {e.message}", err=True)
        sys.exit(1)

    for line in render_report(report):
        click.echo(line)
