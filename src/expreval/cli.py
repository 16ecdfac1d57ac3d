"""
Command-line interface for Expreval.

Provides commands for:
- Evaluating a single expression
- Running an interactive session
- Running the API server
- Viewing effective configuration
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from expreval.config import apply_yaml_config, configure_logging, settings
from expreval.evaluator import calculate
from expreval.models import EvaluationResult

app = typer.Typer(
    name="expreval",
    help="Expreval - Arithmetic expression evaluator",
    add_completion=False,
)

console = Console()

EXIT_WORDS = {"exit", "quit"}


@app.callback()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override log level"),
):
    """Load settings and configure logging before any command runs."""
    if config is not None:
        if not config.exists():
            console.print(f"[red]Config file not found: {config}[/]")
            raise typer.Exit(1)
        apply_yaml_config(config)

    try:
        configure_logging(log_level)
    except ValueError as e:
        console.print(f"[red]{e}[/]", highlight=False)
        raise typer.Exit(1)


# =============================================================================
# Evaluation Commands
# =============================================================================

@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Reject trailing input"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
):
    """Evaluate an expression and print the result."""
    result = calculate(expression, strict=settings.strict if strict is None else strict)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        _print_result(result)

    if not result.ok:
        raise typer.Exit(1)


@app.command()
def repl(
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Reject trailing input"),
):
    """Evaluate expressions interactively until 'exit' or EOF."""
    use_strict = settings.strict if strict is None else strict
    console.print("[bold]Expreval[/] - type an expression, or 'exit' to quit")

    while True:
        try:
            line = console.input(settings.repl_prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        line = line.strip()
        if not line:
            continue
        if line.lower() in EXIT_WORDS:
            break

        _print_result(calculate(line, strict=use_strict))


# =============================================================================
# Server Commands
# =============================================================================

@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
):
    """Start the Expreval API server."""
    import uvicorn

    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting Expreval server on {host}:{port}[/]")

    uvicorn.run(
        "expreval.api:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("config")
def show_config():
    """Show effective settings."""
    table = Table(title="Settings")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")

    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)


# =============================================================================
# Helpers
# =============================================================================

def _print_result(result: EvaluationResult) -> None:
    """Print a value, or the error in red."""
    if result.ok:
        console.print(f"{result.value}")
    else:
        console.print(f"[red]{result.error}[/]", highlight=False)


if __name__ == "__main__":
    app()
