"""Workflow state as an explicit tagged union."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .models import ProcessResult


@dataclass(frozen=True)
class Editing:
    """The form is shown and editable."""


@dataclass(frozen=True)
class AwaitingConfirmation:
    """The form is complete; waiting for the user to confirm or go back."""


@dataclass(frozen=True)
class Submitting:
    """The single request is in flight."""


@dataclass(frozen=True)
class Succeeded:
    result: ProcessResult


@dataclass(frozen=True)
class Failed:
    message: str


WorkflowState = Union[Editing, AwaitingConfirmation, Submitting, Succeeded, Failed]

EDITABLE_STATES = (Editing, Failed)
