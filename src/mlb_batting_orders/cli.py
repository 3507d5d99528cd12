"""Command-line interface for MLB batting orders."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .batting_orders import mlb_batting_orders
from .ingestion.client import LiveFeedClient
from .ingestion.config import LineupMode, StatsAPIConfig, load_config
from .models.lineup import LineupTable

app = typer.Typer(
    name="mlb-batting-orders",
    help="Retrieve MLB game batting orders from the Stats API live feed",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _load_config(config_path: Optional[str]) -> StatsAPIConfig:
    if config_path:
        return load_config(config_path)
    return StatsAPIConfig.from_env()


@app.command()
def lineup(
    game_pk: int = typer.Argument(..., help="MLB game_pk"),
    mode: LineupMode = typer.Option(
        LineupMode.STARTING, "--type", "-t", help="starting: starters only, all: every batter"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print rows as JSON"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Show the batting order for a game."""
    _configure_logging(verbose)

    try:
        config = _load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    table = mlb_batting_orders(game_pk, mode=mode, config=config)
    if table is None:
        console.print(f"[red]Could not retrieve batting orders for game {game_pk}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(table.to_json())
    else:
        _display_lineup(table)


@app.command()
def endpoint(
    game_pk: int = typer.Argument(..., help="MLB game_pk"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config"),
):
    """Print the live feed URL for a game."""
    try:
        config = _load_config(config_path)
        typer.echo(LiveFeedClient(config).endpoint_url(game_pk))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


def _display_lineup(table: LineupTable) -> None:
    """Render the lineup as a rich table."""
    if not len(table):
        console.print("[yellow]⚠ No batting order posted yet[/yellow]")
        return

    output = Table(title=table.source, caption=f"Generated {table.generated_at.isoformat()}")
    output.add_column("Team", style="cyan")
    output.add_column("Order", justify="right")
    output.add_column("Sub", justify="right")
    output.add_column("Player")
    output.add_column("Pos")
    output.add_column("ID", justify="right", style="dim")

    for row in table:
        output.add_row(
            row.team_name,
            row.batting_order,
            row.batting_position_num,
            row.full_name,
            row.abbreviation,
            str(row.id),
        )

    console.print(output)


if __name__ == "__main__":
    app()
