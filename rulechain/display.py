"""
Rich rendering of dry-run traces.

Usage:
    from rulechain.display import render_trace

    render_trace(my_rule.explain())
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from .types import RunTrace


def build_trace_table(trace: RunTrace) -> Table:
    """Build a table with one row per case."""
    table = Table(title="Rule Cases", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Case", style="cyan")
    table.add_column("Status", justify="center")

    for ct in trace.case_traces:
        status = "[green]MATCH[/]" if ct.matched else "[dim]SKIP[/]"
        table.add_row(str(ct.case_index), ct.label or "<predicate>", status)

    return table


def render_trace(trace: RunTrace, console: Console | None = None) -> None:
    """Print a trace table plus a matched-count footer."""
    if console is None:
        console = Console()

    if not trace.case_traces:
        console.print("[dim]No cases[/]")
        return

    console.print(build_trace_table(trace))
    matched = len(trace.matched_indices)
    console.print(f"Matched: [bold]{matched}[/] / {len(trace.case_traces)}")
