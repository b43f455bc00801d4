#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
display.py

MAIN OBJECTIVE:
---------------
Render the pipeline output surface (column list, summary, per-row results)
in the terminal with Rich.

Dependencies:
-------------
- rich

MAIN FEATURES:
--------------
1) Column picker listing with the default column marked
2) Summary panel: total rows, unique labels, detected languages
3) Results table with undetermined rows highlighted

Author:
-------
Antoine Lemor
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text

from ..pipelines.models import PipelineResult, Schema
from ..utils.language_codes import UNDETERMINED_NAME


def create_columns_table(schema: Schema, selected: Optional[str] = None) -> RichTable:
    table = RichTable(title="Select Column for Language Detection", box=box.ROUNDED)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Column", style="white")
    table.add_column("", style="green")

    for index, column in enumerate(schema.selectable_columns, start=1):
        marker = "selected" if column == selected else ""
        table.add_row(str(index), column, marker)

    caption = "Header row detected" if schema.has_header else "No header row detected"
    table.caption = f"{caption}; label column: {schema.label_column_name!r}"
    return table


def create_summary_panel(result: PipelineResult) -> Panel:
    stats = result.stats
    languages = ", ".join(sorted(stats.languages)) or "-"
    body = Text()
    body.append("Total Rows: ", style="bold")
    body.append(f"{stats.rows}\n")
    body.append("Unique Labels: ", style="bold")
    body.append(f"{stats.labels}\n")
    body.append("Detected Languages: ", style="bold")
    body.append(languages)
    return Panel(body, title="Language Detection Results", border_style="blue")


def create_results_table(result: PipelineResult) -> RichTable:
    table = RichTable(box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("Label", style="bold")
    table.add_column("Language")
    table.add_column("Text", style="dim")

    for row in result.results:
        if row.language == UNDETERMINED_NAME:
            language = Text(f"{UNDETERMINED_NAME} (text may be too short or ambiguous)", style="yellow")
        else:
            language = Text(row.language)
        table.add_row(row.label, language, row.text)

    return table


def display_result(result: PipelineResult, console: Optional[Console] = None):
    console = console or Console()
    if not result.results:
        console.print("[yellow]No rows with text in the selected column.[/yellow]")
        return
    console.print(create_summary_panel(result))
    console.print(create_results_table(result))
