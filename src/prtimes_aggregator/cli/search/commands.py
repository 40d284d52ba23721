"""Search CLI command - thin wrapper orchestrating validation, service and display."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from ...press.service import run_search
from ...press.validation import validate_search
from ..core.console import console, print_error
from .display import (
    show_results_json,
    show_results_table,
    show_search_start,
    show_search_summary,
)


def search(
    keyword: str = typer.Argument(..., help="Search keyword"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum releases to return"),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON array instead of a table"),
) -> None:
    """Search PR TIMES and rank the releases by like count.

    Every result page is fetched, so broad keywords can take a while.
    """
    validated = validate_search(keyword, limit)
    if validated.is_failure():
        print_error(validated.error, validated.details)
        raise typer.Exit(1)

    params = validated.value

    if not as_json:
        show_search_start(console, params.keyword, params.limit)

    result = asyncio.run(run_search(params))

    if result.is_failure():
        print_error(result.error, result.details)
        raise typer.Exit(1)

    report = result.value

    if as_json:
        show_results_json(console, report.items)
        return

    show_results_table(console, report.items)
    show_search_summary(console, report)
