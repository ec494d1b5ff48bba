#!/usr/bin/env python3
"""Print the failure context that explains how two values differ."""
from __future__ import annotations

from pathlib import Path
import logging

import typer

from context_generator import ContextGenerator
from diff_config import AUTO_ENCODING, DiffConfig
from message_section import render_sections
from terminal_encoding import TerminalEncoding

app = typer.Typer(add_completion=False)
LIST_SEPARATOR = "|"


def setup_logging(verbose: bool) -> None:
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    console = logging.StreamHandler()
    console.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.handlers.clear()
    root.addHandler(console)


def resolve_encoding(value: str) -> TerminalEncoding:
    if value.strip().lower() == AUTO_ENCODING:
        return TerminalEncoding.detect()
    return TerminalEncoding.parse(value)


@app.command()
def main(
    actual: str = typer.Argument(..., help="The actual value"),
    expected: str = typer.Argument(..., help="The expected value"),
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        "-e",
        help="none, 16-color, 256-color, 16-million-color or auto (default: diff-config.yaml)",
    ),
    diff: bool = typer.Option(True, "--diff/--no-diff", help="Show a character diff instead of the raw values"),
    legend: bool = typer.Option(False, "--legend", help="Explain the diff symbols after the context"),
    lines: bool = typer.Option(
        False,
        "--lines",
        help=f"Split both values on '{LIST_SEPARATOR}' and compare them element by element",
    ),
    actual_name: str = typer.Option("actual", "--actual-name", help="Label of the actual value"),
    expected_name: str = typer.Option("expected", "--expected-name", help="Label of the expected value"),
    config_dir: Path | None = typer.Option(None, "--config", help="Directory containing diff-config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", help="Log how the diff was built"),
) -> None:
    """Compare ACTUAL with EXPECTED and print the explanation."""
    setup_logging(verbose)
    config = DiffConfig.load(config_dir)
    if encoding is not None:
        try:
            config.terminal_encoding = resolve_encoding(encoding)
        except ValueError as error:
            raise typer.BadParameter(str(error), param_hint="--encoding") from error
    logging.debug("Using %s terminal encoding", config.terminal_encoding.value)

    actual_value: str | list[str] = actual.split(LIST_SEPARATOR) if lines else actual
    expected_value: str | list[str] = expected.split(LIST_SEPARATOR) if lines else expected
    generator = ContextGenerator(actual_name, expected_name, actual_value, expected_value, config=config)
    generator.allow_diff = diff and config.diff_enabled
    generator.allow_legend = legend or config.legend_enabled
    typer.echo(render_sections(generator.build()))


if __name__ == "__main__":
    app()
