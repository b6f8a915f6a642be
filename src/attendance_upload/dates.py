"""Conversions from ISO calendar dates to the wire and display formats."""

from __future__ import annotations

MONTH_NAMES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


def _split_iso(value: str) -> tuple[str, str, str]:
    parts = value.split("-")
    if len(parts) != 3:
        raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
    year, month, day = parts
    return year, month, day


def to_wire_format(value: str) -> str:
    """Convert ``YYYY-MM-DD`` into the ``MM/DD/YYYY`` order the endpoint expects.

    Components are carried over as written; nothing is re-padded.
    """
    year, month, day = _split_iso(value)
    return f"{month}/{day}/{year}"


def to_display_format(value: str) -> str:
    """Render a date as ``5 de marzo de 2024``; empty input yields ``""``."""
    if not value:
        return ""
    year, month, day = _split_iso(value)
    month_number = int(month)
    if not 1 <= month_number <= 12:
        raise ValueError(f"Month out of range in {value!r}")
    return f"{int(day)} de {MONTH_NAMES[month_number - 1]} de {year}"


def format_date_range(start: str, end: str) -> str:
    return f"{to_display_format(start)} - {to_display_format(end)}"
