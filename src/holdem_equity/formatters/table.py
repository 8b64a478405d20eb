"""Rich table formatting for terminal output."""

from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from holdem_equity.models.simulation import SimulationConfig, TrialOutcome
from holdem_equity.simulation.aggregator import Aggregator
from holdem_equity.simulation.evaluator import BestFiveHand, HandCategory

_OUTCOME_HEADERS = {
    TrialOutcome.PREFLOP_DROP: "PF drop",
    TrialOutcome.PREFLOP_WIN: "PF win",
    TrialOutcome.FLOP_DROP: "Flop drop",
    TrialOutcome.FLOP_WIN: "Flop win",
    TrialOutcome.SHOWDOWN_WIN: "SD win",
    TrialOutcome.SHOWDOWN_TIE: "SD tie",
    TrialOutcome.SHOWDOWN_LOSE: "SD lose",
}


class TableFormatter:
    """Format simulation and evaluation results as Rich tables."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_aggregation(self, aggregator: Aggregator, sort_by: str = "hand",
                          limit: Optional[int] = None,
                          show_categories: bool = False) -> None:
        """Print one row per starting-hand shape."""
        results = aggregator.sorted_results(sort_by)
        if not results:
            self.console.print("[dim]No trial results to show.[/dim]")
            return
        if limit is not None:
            results = results[:limit]

        table = Table(title=f"Starting Hands ({len(aggregator)} shapes, "
                            f"{aggregator.total_records} records)")
        table.add_column("Hand", style="cyan")
        table.add_column("Trials", justify="right")
        table.add_column("Adjusted", justify="right", style="dim")
        table.add_column("Win%", justify="right", style="green")
        for outcome in TrialOutcome:
            table.add_column(_OUTCOME_HEADERS[outcome], justify="right")
        if show_categories:
            for category in HandCategory:
                table.add_column(category.label, justify="right", style="magenta")

        for r in results:
            cells = [
                r.hand_summary,
                str(r.actual_count),
                str(r.adjusted_count),
                f"{r.win_rate * 100:.1f}",
            ]
            cells += [str(r.outcome_count(o)) for o in TrialOutcome]
            if show_categories:
                cells += [str(r.category_count(c)) for c in HandCategory]
            table.add_row(*cells)

        self.console.print(table)

    def print_run_summary(self, config: SimulationConfig, aggregator: Aggregator,
                          elapsed: float) -> None:
        """Print the run parameters as a Rich panel."""
        rate = config.total_trials / elapsed if elapsed > 0 else 0.0
        content = (
            f"Players: {config.player_count}  |  Workers: {config.worker_count}  |  "
            f"Trials: {config.total_trials:,}\n"
            f"Heuristics: {'on' if config.use_heuristics else 'off'}  |  "
            f"Seed: {config.seed if config.seed is not None else '-'}\n"
            f"Records: {aggregator.total_records:,}  |  "
            f"Elapsed: {elapsed:.2f}s ({rate:,.0f} trials/s)"
        )
        self.console.print(Panel(content, title="Monte Carlo Run", border_style="blue"))

    def print_best_hand(self, best: Optional[BestFiveHand], cards: Sequence) -> None:
        """Print the best five-card hand found among ``cards``."""
        pool = " ".join(str(c) for c in cards)
        if best is None:
            self.console.print(f"[yellow]{pool}: fewer than 5 cards, no hand.[/yellow]")
            return
        value = best.value()
        self.console.print(Panel(
            f"Cards: {pool}\nBest five: {' '.join(str(c) for c in best.cards)}\n"
            f"Value: {value}",
            title=f"[bold]{best.category.label}[/bold]",
            border_style="green",
        ))

    def print_showdown(self, rows: List[Dict], winners: List[int]) -> None:
        """Print a showdown, one row per seat, winners highlighted."""
        table = Table(title="Showdown")
        table.add_column("Seat", justify="right", style="dim")
        table.add_column("Hole Cards", style="cyan")
        table.add_column("Best Five")
        table.add_column("Category")
        table.add_column("Result", justify="right")

        tie = len(winners) > 1
        for row in rows:
            if row["seat"] in winners:
                result = "[yellow]Tie[/yellow]" if tie else "[green]Win[/green]"
            else:
                result = "[red]Lose[/red]"
            best: BestFiveHand = row["best"]
            table.add_row(
                str(row["seat"]),
                row["hole_cards"],
                " ".join(str(c) for c in best.cards),
                best.category.label,
                result,
            )

        self.console.print(table)
