"""CSV serialization of misc records and the downloadable export file.

The writer is deliberately minimal: only values containing a comma or a
double quote are quoted, and embedded newlines are written as-is.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

from .logger import get_logger
from .models import ProcessResult, Scalar

logger = get_logger("csv_export")

CSV_MIME_TYPE = "text/csv;charset=utf-8"


def _stringify(value: Scalar) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _escape(text: str) -> str:
    if "," in text or '"' in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def to_csv(records: Sequence[Mapping[str, Scalar]]) -> str:
    """Serialize ``records`` with the first record's keys as the columns."""
    if not records:
        raise ValueError("to_csv() requires at least one record")
    columns = list(records[0].keys())
    rows = [",".join(columns)]
    for record in records:
        rows.append(",".join(_escape(_stringify(record.get(column))) for column in columns))
    return "\n".join(rows)


def misc_records_filename(today: Optional[date] = None) -> str:
    return f"misc_records_{(today or date.today()).isoformat()}.csv"


def export_misc_records(
    result: ProcessResult,
    directory: Union[Path, str] = ".",
    *,
    today: Optional[date] = None,
) -> Path:
    """Write the result's misc records to ``misc_records_<date>.csv`` in ``directory``."""
    if not result.misc_records:
        raise ValueError("Result has no misc records to export")
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / misc_records_filename(today)
    path.write_text(to_csv(result.misc_records), encoding="utf-8", newline="")
    logger.info("Exported %d misc records to %s", len(result.misc_records), path)
    return path
