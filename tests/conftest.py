from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

import pytest

from attendance_upload.client import HttpResponse
from attendance_upload.logger import BASE_LOGGER_NAME
from attendance_upload.models import FormInput
from attendance_upload.orchestrator import SubmissionOrchestrator
from attendance_upload.workflow import WorkflowController


class StubTransport:
    """Returns a canned response (or raises) and records every payload."""

    def __init__(self, status: int = 200, body: Dict[str, Any] | None = None, error: Exception | None = None):
        self.status = status
        self.body = body if body is not None else {"status": "success", "matched_count": 0}
        self.error = error
        self.payloads: List[Dict[str, Any]] = []

    async def post_json(self, payload: Mapping[str, Any]) -> HttpResponse:
        self.payloads.append(dict(payload))
        if self.error is not None:
            raise self.error
        return HttpResponse(status=self.status, body=self.body)


@pytest.fixture
def valid_form() -> FormInput:
    return FormInput(
        start_date="2024-03-05",
        end_date="2024-03-11",
        credential="s3cret",
        content_text="Yoga,5\nSpinning,12",
    )


@pytest.fixture
def make_controller(valid_form):
    def _make(transport: StubTransport, form: FormInput | None = None) -> WorkflowController:
        return WorkflowController(SubmissionOrchestrator(transport), form=form or valid_form)

    return _make


@pytest.fixture
def caplog(caplog):
    """The package logger does not propagate, so capture from it directly."""
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.addHandler(caplog.handler)
    yield caplog
    base.removeHandler(caplog.handler)
