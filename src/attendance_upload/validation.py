"""Minimal gate deciding whether the form may be submitted.

Checks run in a fixed order (dates, credential, content) and only the
first failure is reported. There are no cross-field checks: a start date
after the end date is accepted.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from .errors import ValidationError
from .messages import t
from .models import FormInput

_CHECKS: Tuple[Tuple[Callable[[FormInput], bool], str], ...] = (
    (lambda form: bool(form.start_date) and bool(form.end_date), "missing_dates"),
    (lambda form: bool(form.credential), "missing_credential"),
    (lambda form: bool(form.content_text), "missing_content"),
)


def first_error(form: FormInput) -> Optional[str]:
    """Return the message of the first failing check, or ``None``."""
    for check, key in _CHECKS:
        if not check(form):
            return t(key)
    return None


def is_valid(form: FormInput) -> bool:
    return first_error(form) is None


def validate(form: FormInput) -> FormInput:
    message = first_error(form)
    if message is not None:
        raise ValidationError(message)
    return form
