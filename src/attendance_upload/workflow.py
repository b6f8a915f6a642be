"""Workflow controller: form ownership, confirmation gate and transitions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .errors import NetworkError, ValidationError
from .files import TextReader, load_file
from .logger import get_logger
from .messages import t
from .models import EntryMode, FormInput, ProcessResult
from .orchestrator import SubmissionOrchestrator
from .state import (
    EDITABLE_STATES,
    AwaitingConfirmation,
    Editing,
    Failed,
    Submitting,
    Succeeded,
    WorkflowState,
)
from .validation import first_error

logger = get_logger("workflow")


class WorkflowController:
    """Own the form and the single ``WorkflowState``.

    Actions that do not apply to the current state are ignored and return
    the unchanged state. ``confirm`` moves to ``Submitting`` before its
    first ``await``, so a second concurrent call is a no-op.
    """

    def __init__(
        self,
        orchestrator: SubmissionOrchestrator,
        *,
        form: Optional[FormInput] = None,
        reader: Optional[TextReader] = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._reader = reader
        self._form = form or FormInput()
        self._state: WorkflowState = Editing()
        self.last_error: Optional[str] = None

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def form(self) -> FormInput:
        return self._form

    @property
    def result(self) -> Optional[ProcessResult]:
        if isinstance(self._state, Succeeded):
            return self._state.result
        return None

    @property
    def error_message(self) -> Optional[str]:
        """Message to show inline: a failed submission or a validation error."""
        if isinstance(self._state, Failed):
            return self._state.message
        return self.last_error

    def _transition(self, new_state: WorkflowState) -> WorkflowState:
        logger.debug("%s -> %s", type(self._state).__name__, type(new_state).__name__)
        self._state = new_state
        self.last_error = None
        return new_state

    def _ignored(self, action: str) -> WorkflowState:
        logger.debug("Ignoring %s while %s", action, type(self._state).__name__)
        return self._state

    def _editable(self) -> bool:
        return isinstance(self._state, EDITABLE_STATES)

    # ------------------------------------------------------------------ form edits

    def _edit(self, action: str, **changes: object) -> WorkflowState:
        if not self._editable():
            return self._ignored(action)
        self._form = self._form.evolve(**changes)
        return self._state

    def set_dates(self, start_date: str, end_date: str) -> WorkflowState:
        return self._edit("set_dates", start_date=start_date, end_date=end_date)

    def set_credential(self, credential: str) -> WorkflowState:
        return self._edit("set_credential", credential=credential)

    def set_content(self, content_text: str) -> WorkflowState:
        return self._edit("set_content", content_text=content_text)

    def load_file(self, path: Union[Path, str]) -> WorkflowState:
        """Read ``path`` into the form content (upload mode)."""
        if not self._editable():
            return self._ignored("load_file")
        try:
            loaded = load_file(path, self._reader)
        except ValidationError as exc:
            self.last_error = str(exc)
            logger.warning(self.last_error)
            return self._state
        self._form = self._form.evolve(source_file_name=loaded.name, content_text=loaded.content)
        logger.debug("Loaded %s (%d chars)", loaded.name, len(loaded.content))
        return self._state

    def set_entry_mode(self, mode: Union[EntryMode, str]) -> WorkflowState:
        """Switch between manual and upload entry; discards the current content."""
        if not self._editable():
            return self._ignored("set_entry_mode")
        self._form = self._form.evolve(
            entry_mode=EntryMode(mode),
            content_text="",
            source_file_name=None,
        )
        return self._transition(Editing())

    # ------------------------------------------------------------------ gate

    def request_submit(self) -> WorkflowState:
        if not self._editable():
            return self._ignored("request_submit")
        message = first_error(self._form)
        if message is not None:
            self.last_error = message
            logger.warning(message)
            return self._state
        return self._transition(AwaitingConfirmation())

    def cancel(self) -> WorkflowState:
        if not isinstance(self._state, AwaitingConfirmation):
            return self._ignored("cancel")
        return self._transition(Editing())

    async def confirm(self) -> WorkflowState:
        if not isinstance(self._state, AwaitingConfirmation):
            return self._ignored("confirm")
        self._transition(Submitting())
        try:
            outcome = await self._orchestrator.submit(self._form)
        except NetworkError as exc:
            logger.error(t("connection_error"))
            logger.debug("Transport failure: %s", exc, exc_info=True)
            return self._transition(Failed(t("connection_error")))
        except ValueError as exc:
            # malformed date that slipped past the presence-only validator
            logger.error("Could not build the request: %s", exc)
            return self._transition(Failed(t("processing_failed")))

        if not outcome.accepted:
            return self._transition(Failed(outcome.message or t("processing_failed")))
        return self._transition(Succeeded(outcome.result))

    def reset(self) -> WorkflowState:
        """Start over after a success, keeping only the credential."""
        if not isinstance(self._state, Succeeded):
            return self._ignored("reset")
        self._form = self._form.evolve(
            start_date="",
            end_date="",
            content_text="",
            source_file_name=None,
        )
        return self._transition(Editing())
