"""
Shared CLI utilities for Appraiser
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure application logging with production-friendly defaults.

    Use APPRAISER_LOG_PROFILE=debug for verbose tracing.
    """
    profile = os.getenv("APPRAISER_LOG_PROFILE", "prod").strip().lower()
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=handlers,
        force=True,
    )

    # Per-method debug lines are noisy outside of debug profile
    methods_logger = logging.getLogger("appraiser.domain.services.valuation.methods")
    if profile != "debug" and numeric_level > logging.DEBUG:
        methods_logger.setLevel(logging.WARNING)
    else:
        methods_logger.setLevel(logging.NOTSET)


def load_payload(input_file: str) -> Dict[str, Any]:
    """Load a valuation payload from a JSON file"""
    path = Path(input_file)
    try:
        with open(path, "r") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"{path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise click.BadParameter(f"{path} must contain a JSON object")
    return payload


def print_table(headers: list, rows: list, widths: Optional[list] = None):
    """Print a formatted table to stdout"""
    if not widths:
        widths = [max(len(str(h)), max(len(str(r[i])) for r in rows) if rows else 0) + 2 for i, h in enumerate(headers)]

    header_line = "".join(str(h).ljust(w) for h, w in zip(headers, widths))
    click.echo(header_line)
    click.echo("-" * len(header_line))

    for row in rows:
        click.echo("".join(str(c).ljust(w) for c, w in zip(row, widths)))
