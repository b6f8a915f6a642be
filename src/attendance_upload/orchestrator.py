"""Single-request submission to the processing endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .client import Transport
from .logger import get_logger
from .messages import t
from .models import FormInput, ProcessResult, SubmissionRequest

logger = get_logger("orchestrator")


@dataclass(frozen=True)
class SubmissionOutcome:
    """Discriminated result of one submission.

    ``accepted`` mirrors a 2xx status. On rejection ``result`` carries
    ``status="error"`` and the message to surface.
    """

    accepted: bool
    http_status: int
    result: ProcessResult

    @property
    def message(self) -> Optional[str]:
        return self.result.message


class SubmissionOrchestrator:
    """Build the payload, issue exactly one POST and interpret the reply."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def submit(self, form: FormInput) -> SubmissionOutcome:
        request = SubmissionRequest.from_form(form)
        logger.debug("Submitting %r", request)
        # NetworkError propagates to the caller untouched.
        response = await self._transport.post_json(request.to_payload())

        if not response.ok:
            message = response.body.get("message") or t("processing_failed")
            logger.error("Processing endpoint rejected the request (HTTP %s): %s", response.status, message)
            return SubmissionOutcome(
                accepted=False,
                http_status=response.status,
                result=ProcessResult.failure(str(message)),
            )

        result = ProcessResult.from_payload(response.body)
        if not result.is_success:
            logger.warning(
                "HTTP %s response reports status %r; treating it as the result anyway",
                response.status,
                result.status,
            )
        return SubmissionOutcome(accepted=True, http_status=response.status, result=result)
