"""Reading user-selected attendance files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

from .errors import ValidationError
from .messages import t

ACCEPTED_EXTENSIONS = frozenset({".txt", ".csv"})


class TextReader(Protocol):
    def read_text(self, path: Path) -> str:
        ...


@dataclass(frozen=True)
class LoadedFile:
    name: str
    content: str


def is_accepted(path: Union[Path, str]) -> bool:
    return Path(path).suffix.lower() in ACCEPTED_EXTENSIONS


class LocalTextReader:
    """Read a file from disk as UTF-8 text.

    A BOM is dropped and undecodable bytes become U+FFFD instead of failing.
    """

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8-sig", errors="replace")


def load_file(path: Union[Path, str], reader: TextReader | None = None) -> LoadedFile:
    """Check the extension and read the file through ``reader``.

    Only the extension is checked; the contents are not inspected.
    """
    path = Path(path)
    if not is_accepted(path):
        raise ValidationError(f"{t('unsupported_file')}: {path.name}")
    try:
        content = (reader or LocalTextReader()).read_text(path)
    except OSError as exc:
        raise ValidationError(f"{t('unreadable_file')}: {path.name}") from exc
    return LoadedFile(name=path.name, content=content)
