"""Derive and render the view that corresponds to the workflow state."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .dates import format_date_range
from .messages import t
from .models import FormInput, ProcessResult
from .state import AwaitingConfirmation, Failed, Submitting, Succeeded, WorkflowState


class View(str, Enum):
    FORM = "form"
    CONFIRMATION = "confirmation"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def current_view(state: WorkflowState) -> View:
    if isinstance(state, AwaitingConfirmation):
        return View.CONFIRMATION
    if isinstance(state, Submitting):
        return View.LOADING
    if isinstance(state, Succeeded):
        # a 2xx body that still says "error" is shown as an error summary
        return View.SUCCESS if state.result.is_success else View.ERROR
    if isinstance(state, Failed):
        return View.ERROR
    return View.FORM


def show_export_action(state: WorkflowState) -> bool:
    return isinstance(state, Succeeded) and state.result.has_misc_records


def confirmation_panel(form: FormInput) -> Panel:
    body = Group(
        Text(t("confirm_range")),
        Text(format_date_range(form.start_date, form.end_date), style="bold"),
    )
    return Panel(body, title=t("confirm_title"), border_style="blue", padding=(1, 2))


def result_table(result: ProcessResult) -> Table:
    table = Table(box=None, show_header=False, expand=False, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_row(t("matched_title"), str(result.matched_count or 0))
    if result.loaded_to_warehouse:
        table.add_row("", Text("✓ " + t("warehouse_loaded"), style="green"))
    else:
        table.add_row("", Text("⚠ " + t("warehouse_not_loaded"), style="yellow"))
    if (result.unmatched_count or 0) > 0:
        table.add_row(t("unmatched_title"), Text(str(result.unmatched_count), style="yellow"))
        table.add_row("", Text(t("unmatched_subtitle"), style="dim"))
    return table


def success_panel(result: ProcessResult) -> Panel:
    return Panel(result_table(result), title=t("success_title"), border_style="green", padding=(1, 2))


def error_panel(message: str) -> Panel:
    return Panel(Text(message, style="red"), title=t("error_title"), border_style="red")


def render(console: Console, state: WorkflowState, form: FormInput, last_error: Optional[str] = None) -> View:
    """Print the panel for ``state`` and return which view it was."""
    view = current_view(state)
    if view is View.CONFIRMATION:
        console.print(confirmation_panel(form))
    elif view is View.SUCCESS and isinstance(state, Succeeded):
        console.print(success_panel(state.result))
    elif view is View.ERROR:
        if isinstance(state, Failed):
            message = state.message
        elif isinstance(state, Succeeded):
            message = state.result.message or t("processing_failed")
        else:
            message = t("processing_failed")
        console.print(error_panel(message))
    elif view is View.FORM and last_error:
        console.print(error_panel(last_error))
    return view
