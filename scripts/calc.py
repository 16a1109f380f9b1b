from __future__ import annotations

import json
import logging
from enum import Enum

import typer

from calc.config import load_config
from calc.errors import CalcError
from calc.pipeline import run
from calc.util.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)


class Precision(str, Enum):
    f64 = "f64"
    f32 = "f32"


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: list[str] = typer.Argument(..., help="Expression; arguments are joined without separator."),
    config: str = typer.Option("", "--config", help="YAML config file."),
    precision: Precision | None = typer.Option(None, "--precision", help="Float width (overrides config)."),
    implicit_mul: bool | None = typer.Option(
        None,
        "--implicit-mul/--no-implicit-mul",
        help="Insert '*' between adjacent operands (overrides config).",
    ),
    show_tokens: bool = typer.Option(False, "--show-tokens"),
    show_ast: bool = typer.Option(False, "--show-ast"),
    as_json: bool = typer.Option(False, "--json"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    logger = get_logger(__name__)
    text = "".join(expression)
    try:
        cfg = load_config(
            config or None,
            precision=precision.value if precision is not None else None,
            implicit_mul=implicit_mul,
        )
        logger.debug("calc precision=%s implicit_mul=%s", cfg.precision, cfg.implicit_mul)
        result = run(text, cfg)
    except (CalcError, ValueError, OSError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    if as_json:
        typer.echo(json.dumps(result.model_dump(), sort_keys=True))
        return
    if show_tokens:
        typer.echo(" ".join(result.tokens))
    if show_ast:
        typer.echo(result.tree)
    typer.echo(repr(result.value))


if __name__ == "__main__":
    app()
