#!/usr/bin/env python3
"""
Appraiser CLI - Main Entry Point

Runs the valuation engine over a JSON payload shaped like the evaluation
form (basicInfo / financialData / businessDetails).

Usage:
    appraiser [OPTIONS] COMMAND [ARGS]...

Examples:
    appraiser value company.json
    appraiser value company.json --format json
    appraiser industries
"""

import json
import logging

import click

from appraiser.cli.utils import load_payload, print_table, setup_logging
from appraiser.config import get_settings
from appraiser.domain.models.valuation import InvalidValuationInputError, ValuationError, ValuationInput
from appraiser.domain.services.valuation.engine import calculate_valuation
from appraiser.domain.services.valuation.industry_data import load_industry_multipliers
from appraiser.infrastructure.formatters.valuation_table_formatter import ValuationTableFormatter

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    max_content_width=120,
)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config", "-c",
    default="config.yaml",
    envvar="APPRAISER_CONFIG",
    help="Configuration file path"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default=None,
    envvar="APPRAISER_LOG_LEVEL",
    help="Logging level (default: from configuration)"
)
@click.option(
    "--log-file",
    type=click.Path(),
    envvar="APPRAISER_LOG_FILE",
    help="Log file path"
)
@click.version_option(
    version="0.1.0",
    prog_name="appraiser"
)
@click.pass_context
def cli(ctx, config, log_level, log_file):
    """Appraiser - Deterministic Business Valuation

    Blends revenue, EBITDA, P/E, asset-based and DCF valuations into one
    confidence-weighted estimate.
    """
    try:
        settings = get_settings(config)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration {config}: {e}") from e

    app = settings.application
    if log_level is None:
        log_level = "DEBUG" if app.debug else settings.logging.level
    setup_logging(log_level, log_file or settings.logging.file)
    logger.debug(f"{app.name} {app.version} ({app.environment})")

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    # Reference table is loaded once per process and shared read-only
    try:
        ctx.obj["industry_table"] = load_industry_multipliers(settings.reference_data.industry_multiples_path)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Cannot load industry multiples: {e}") from e


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format"
)
@click.pass_context
def value(ctx, input_file, output_format):
    """Value the company described in INPUT_FILE (JSON)."""
    payload = load_payload(input_file)

    try:
        valuation_input = ValuationInput.from_dict(payload)
    except InvalidValuationInputError as e:
        raise click.BadParameter(str(e), param_hint="INPUT_FILE") from e

    try:
        result = calculate_valuation(valuation_input, ctx.obj["industry_table"])
    except ValuationError as e:
        logger.error(f"Valuation failed for {valuation_input.identity.company_name}: {e}")
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(ValuationTableFormatter.format_valuation_table(result))


@cli.command()
@click.pass_context
def industries(ctx):
    """List industry reference multiples (averages)."""
    table = ctx.obj["industry_table"]
    rows = [
        (
            name,
            f"{entry.revenue_multiple.average:g}x",
            f"{entry.ebitda_multiple.average:g}x",
            f"{entry.pe_ratio.average:g}x",
        )
        for name, entry in table.items()
    ]
    print_table(["Industry", "Revenue", "EBITDA", "P/E"], rows)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
