"""Hold'em Equity CLI: Typer-based command line interface."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="holdem-equity",
    help="Texas Hold'em hand evaluator and Monte Carlo starting-hand simulator",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    from holdem_equity import config
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _parse_cards(text: str):
    from holdem_equity.models.card import Card
    try:
        return Card.parse_many(text)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    _setup_logging(verbose)


@app.command()
def simulate(
    players: Optional[int] = typer.Option(None, "--players", "-p",
                                          help="Players dealt in per trial"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w",
                                          help="Number of worker threads"),
    trials: Optional[int] = typer.Option(None, "--trials", "-t",
                                         help="Trials per worker"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible run"),
    heuristics: Optional[bool] = typer.Option(None, "--heuristics/--no-heuristics",
                                              help="Drop weak hands before the showdown"),
    sort: str = typer.Option("hand", "--sort", "-s",
                             help="Sort rows by: hand, count, win_rate"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Show only the first N rows"),
    categories: bool = typer.Option(False, "--categories",
                                    help="Show showdown category columns"),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Also write the table to a CSV file"),
):
    """Estimate starting-hand strength with a Monte Carlo simulation."""
    from holdem_equity.export.aggregate import AggregateExporter
    from holdem_equity.formatters.table import TableFormatter
    from holdem_equity.models.simulation import SimulationConfig
    from holdem_equity.simulation.engine import SimulationEngine, SimulationError

    config = SimulationConfig.from_env()
    if players is not None:
        config.player_count = players
    if workers is not None:
        config.worker_count = workers
    if trials is not None:
        config.trials_per_worker = trials
    if seed is not None:
        config.seed = seed
    if heuristics is not None:
        config.use_heuristics = heuristics

    if sort not in ("hand", "count", "win_rate"):
        console.print(f"[red]Unknown sort key: {sort}[/red]")
        raise typer.Exit(1)

    try:
        engine = SimulationEngine(config)
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    try:
        with console.status(f"Running {config.total_trials:,} trials..."):
            aggregator = engine.run()
    except SimulationError as e:
        console.print(f"[red]Simulation failed:[/red] {e}")
        raise typer.Exit(1)

    fmt = TableFormatter(console)
    fmt.print_run_summary(config, aggregator, engine.elapsed)
    fmt.print_aggregation(aggregator, sort_by=sort, limit=limit, show_categories=categories)

    if csv is not None:
        path = AggregateExporter.write_csv(aggregator, csv, sort_by=sort)
        console.print(f"[green]Wrote {len(aggregator)} rows to[/green] [cyan]{path}[/cyan]")


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="5 to 7 cards, e.g. Ah Kh Qh Jh Th"),
):
    """Find the best five-card hand among 5 to 7 cards."""
    from holdem_equity.formatters.table import TableFormatter
    from holdem_equity.simulation.evaluator import HandEvaluator

    pool = _parse_cards(" ".join(cards))
    if len(set(pool)) != len(pool):
        console.print("[red]The same card was given twice.[/red]")
        raise typer.Exit(1)
    if not 5 <= len(pool) <= 7:
        console.print(f"[red]Give between 5 and 7 cards, got {len(pool)}.[/red]")
        raise typer.Exit(1)

    best = HandEvaluator.evaluate(pool)
    TableFormatter(console).print_best_hand(best, pool)


@app.command()
def compare(
    hands: List[str] = typer.Argument(..., help="Hole cards per player, e.g. AsKs KhQh"),
    board: str = typer.Option(..., "--board", "-b", help="Five community cards, e.g. 'Ad Kd 2c 7h 9s'"),
):
    """Show down two or more hole-card pairs on a complete board."""
    from holdem_equity.formatters.table import TableFormatter
    from holdem_equity.models.starting_hand import StartingHand
    from holdem_equity.simulation.evaluator import HandEvaluator

    board_cards = _parse_cards(board)
    if len(board_cards) != 5:
        console.print(f"[red]The board needs 5 cards, got {len(board_cards)}.[/red]")
        raise typer.Exit(1)
    if len(hands) < 2:
        console.print("[red]Give at least two hands to compare.[/red]")
        raise typer.Exit(1)

    try:
        starting = [StartingHand.parse(h) for h in hands]
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    all_cards = [c for h in starting for c in h.cards] + board_cards
    if len(set(all_cards)) != len(all_cards):
        console.print("[red]The same card was given twice.[/red]")
        raise typer.Exit(1)

    player_cards = {seat: list(h.cards) for seat, h in enumerate(starting, 1)}
    winners = HandEvaluator.get_winners(board_cards, player_cards)
    rows = [
        {
            "seat": seat,
            "hole_cards": str(starting[seat - 1]),
            "best": HandEvaluator.evaluate(cards + board_cards),
        }
        for seat, cards in player_cards.items()
    ]
    TableFormatter(console).print_showdown(rows, winners)


if __name__ == "__main__":
    app()
