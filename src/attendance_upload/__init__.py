"""Client-side workflow for submitting attendance data to the processing service."""

from .csv_export import export_misc_records, misc_records_filename, to_csv
from .dates import format_date_range, to_display_format, to_wire_format
from .errors import (
    AttendanceUploadError,
    NetworkError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from .models import EntryMode, FormInput, ProcessResult, SubmissionRequest
from .orchestrator import SubmissionOrchestrator, SubmissionOutcome
from .state import AwaitingConfirmation, Editing, Failed, Submitting, Succeeded, WorkflowState
from .validation import first_error, is_valid
from .workflow import WorkflowController

__all__ = [
    "AttendanceUploadError",
    "AwaitingConfirmation",
    "Editing",
    "EntryMode",
    "Failed",
    "FormInput",
    "NetworkError",
    "ProcessResult",
    "ProtocolError",
    "SubmissionOrchestrator",
    "SubmissionOutcome",
    "SubmissionRequest",
    "Submitting",
    "Succeeded",
    "TransportError",
    "ValidationError",
    "WorkflowController",
    "WorkflowState",
    "export_misc_records",
    "first_error",
    "format_date_range",
    "is_valid",
    "misc_records_filename",
    "to_csv",
    "to_display_format",
    "to_wire_format",
]
