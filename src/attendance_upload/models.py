"""Domain objects for the attendance upload workflow."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .dates import to_wire_format
from .errors import ProtocolError

Scalar = Union[str, int, float, bool, None]
MiscRecord = Dict[str, Scalar]


class EntryMode(str, Enum):
    """How the attendance data was provided."""

    MANUAL = "manual"
    UPLOAD = "upload"


@dataclass(frozen=True)
class FormInput:
    """Snapshot of the form fields.

    ``content_text`` is the payload in both entry modes; a file read and
    manual typing both end up there.
    """

    start_date: str = ""
    end_date: str = ""
    credential: str = ""
    entry_mode: EntryMode = EntryMode.MANUAL
    content_text: str = ""
    source_file_name: Optional[str] = None

    def evolve(self, **changes: Any) -> "FormInput":
        return replace(self, **changes)


@dataclass(frozen=True)
class SubmissionRequest:
    """Read-only wire payload derived from a confirmed form."""

    credential: str
    start_date: str
    end_date: str
    file_content: str
    entry_mode: str

    @classmethod
    def from_form(cls, form: FormInput) -> "SubmissionRequest":
        return cls(
            credential=form.credential,
            start_date=to_wire_format(form.start_date),
            end_date=to_wire_format(form.end_date),
            file_content=form.content_text,
            entry_mode=EntryMode(form.entry_mode).value,
        )

    def to_payload(self) -> Dict[str, str]:
        return {
            "password": self.credential,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "file_content": self.file_content,
            "entry_mode": self.entry_mode,
        }

    def __repr__(self) -> str:
        # keep the credential out of logs
        return (
            f"SubmissionRequest(start_date={self.start_date!r}, end_date={self.end_date!r}, "
            f"entry_mode={self.entry_mode!r}, file_content=<{len(self.file_content)} chars>)"
        )


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class ProcessResult:
    """Response body returned by the processing endpoint."""

    status: str
    message: Optional[str] = None
    matched_count: Optional[int] = None
    unmatched_count: Optional[int] = None
    loaded_to_warehouse: Optional[bool] = None
    misc_records: List[MiscRecord] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def has_misc_records(self) -> bool:
        """True when the export action should be offered."""
        return (self.unmatched_count or 0) > 0 and bool(self.misc_records)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProcessResult":
        records = payload.get("misc_records") or []
        if not isinstance(records, list):
            records = []
        loaded = payload.get("bigquery_loaded")
        message = payload.get("message")
        return cls(
            status=str(payload.get("status") or "error"),
            message=str(message) if message else None,
            matched_count=_optional_int(payload.get("matched_count")),
            unmatched_count=_optional_int(payload.get("unmatched_count")),
            loaded_to_warehouse=bool(loaded) if loaded is not None else None,
            misc_records=[dict(record) for record in records if isinstance(record, Mapping)],
        )

    @classmethod
    def failure(cls, message: str) -> "ProcessResult":
        return cls(status="error", message=message)

    def raise_for_status(self) -> "ProcessResult":
        """Raise ``ProtocolError`` if the body itself reports an error."""
        if not self.is_success:
            raise ProtocolError(self.message or "processing failed")
        return self
