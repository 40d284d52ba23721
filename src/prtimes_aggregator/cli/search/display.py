"""Display functions for search commands - pure functions for Rich output."""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...press.models import AggregationReport, ResultItem


def show_search_start(console: Console, keyword: str, limit: int) -> None:
    """Display search parameters."""
    limit_text = str(limit) if limit > 0 else "unlimited"
    console.print(f"[bold]Searching PR TIMES:[/bold] [cyan]{keyword}[/cyan] [dim](limit: {limit_text})[/dim]")


def show_results_table(console: Console, items: List[ResultItem]) -> None:
    """Display ranked press releases."""
    if not items:
        console.print("[yellow]No press releases found.[/yellow]")
        return

    table = Table(title="Press Releases by Likes")
    table.add_column("#", style="dim")
    table.add_column("Likes", style="green", justify="right")
    table.add_column("Published", style="dim")
    table.add_column("Company", style="cyan")
    table.add_column("Title", style="white")

    for i, item in enumerate(items, 1):
        table.add_row(
            str(i),
            str(item.like_count),
            item.published_at,
            item.corporation_name[:20] + ("..." if len(item.corporation_name) > 20 else ""),
            item.title[:50] + ("..." if len(item.title) > 50 else ""),
        )

    console.print(table)


def show_results_json(console: Console, items: List[ResultItem]) -> None:
    """Print the result array exactly as the HTTP endpoint serves it."""
    console.print_json(data=[item.to_dict() for item in items], ensure_ascii=False)


def show_search_summary(console: Console, report: AggregationReport) -> None:
    """Display run statistics."""
    lines = [
        f"[bold]Pages:[/] {report.pages_fetched}/{report.total_pages}",
        f"[bold]Collected:[/] {report.items_collected}  [bold]Returned:[/] {len(report.items)}",
        f"[bold]Duration:[/] {report.duration_ms}ms",
    ]

    if report.failed_pages:
        lines.append(f"[yellow]Failed pages: {len(report.failed_pages)}[/yellow]")
        for failure in report.failed_pages[:5]:
            lines.append(f"  [dim]{failure}[/dim]")
    if report.like_count_failures or report.missing_release_ids:
        zeroed = report.like_count_failures + report.missing_release_ids
        lines.append(f"[yellow]Like counts defaulted to 0: {zeroed}[/yellow]")
    if report.unparsed_dates:
        lines.append(f"[yellow]Unparsed dates (current time used): {report.unparsed_dates}[/yellow]")

    border = "green" if report.is_complete else "yellow"
    console.print(Panel("\n".join(lines), title="Summary", border_style=border))
