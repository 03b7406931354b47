#!/usr/bin/env python3
"""
Normalize a raw request into a structured intent.

Usage:
    python scripts/normalize_prompt.py "Write a short API guide for developers"
    python scripts/normalize_prompt.py --file /tmp/irl/request.txt --format json
    python scripts/normalize_prompt.py "Design a minimal dashboard" --format compiled -o out.txt
    python scripts/normalize_prompt.py --file request.txt --format yaml --log-dir outs/logs
"""

import json
import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from irl.contexts.parsing.logger import log_info, log_success, setup_parsing_logger
from irl.pipeline import NormalizationResult, normalize

load_dotenv()

# =============================================================================
# CONFIGURATION
# =============================================================================

LOGS_PATH = Path(os.getenv("IRL_LOGS_PATH", "outs/logs"))


class OutputFormat(str, Enum):
    NOTATION = "notation"
    COMPILED = "compiled"
    JSON = "json"
    YAML = "yaml"


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================


def format_result(result: NormalizationResult, output_format: OutputFormat) -> str:
    """
    Render a normalization result in the requested format.

    Args:
        result: Output of normalize()
        output_format: notation, compiled, json or yaml

    Returns:
        Text to print or write
    """
    if output_format == OutputFormat.NOTATION:
        return result.notation
    if output_format == OutputFormat.COMPILED:
        return result.compiled_text
    if output_format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2)
    return OmegaConf.to_yaml(OmegaConf.create(result.to_dict()))


def read_request(text: Optional[str], file: Optional[Path]) -> str:
    """Resolve request text from the positional argument or --file."""
    if text is not None and file is not None:
        raise typer.BadParameter("Pass either TEXT or --file, not both")

    if file is not None:
        if not file.exists():
            typer.echo(f"Error: File not found: {file}", err=True)
            raise typer.Exit(1)
        return file.read_text(encoding="utf-8")

    if text is None:
        typer.echo("Error: Provide request TEXT or --file", err=True)
        raise typer.Exit(1)

    return text


# =============================================================================
# CLI APPLICATION
# =============================================================================

app = typer.Typer(
    help="Normalize raw requests into structured intents.",
    add_completion=False,
)


@app.command()
def main(
    text: Annotated[Optional[str], typer.Argument(help="Raw request text")] = None,
    file: Annotated[
        Optional[Path], typer.Option("--file", "-f", help="Read request text from a file")
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", help="Output encoding")
    ] = OutputFormat.NOTATION,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write output to file instead of stdout")
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help=f"Enable session logging under this directory (e.g. {LOGS_PATH})"),
    ] = None,
):
    """Normalize one request and print its notation, instruction, JSON or YAML."""
    request = read_request(text, file)

    if log_dir is not None:
        session_dir = log_dir / f"normalize_{datetime.now():%Y%m%d_%H%M%S}"
        log_file = setup_parsing_logger(session_dir)
        log_info(f"Log file: {log_file}")

    result = normalize(request)
    rendered = format_result(result, output_format)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered + "\n", encoding="utf-8")
        log_success(f"Saved {output_format.value} output: {output}")
        typer.secho(f"✓ Saved: {output}", fg=typer.colors.GREEN)
    else:
        typer.echo(rendered)

    if result.intent.requires_clarification:
        typer.secho(
            "! Request has blocking conflicts and needs clarification",
            fg=typer.colors.YELLOW,
            err=True,
        )


if __name__ == "__main__":
    app()
