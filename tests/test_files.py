from pathlib import Path
from unittest.mock import MagicMock

import pytest

from attendance_upload.errors import ValidationError
from attendance_upload.files import LocalTextReader, is_accepted, load_file


@pytest.mark.parametrize("name,expected", [("a.txt", True), ("b.CSV", True), ("c.xlsx", False), ("d", False)])
def test_is_accepted_checks_extension_only(name, expected):
    assert is_accepted(name) is expected


def test_load_file_uses_reader_capability():
    reader = MagicMock()
    reader.read_text.return_value = "Yoga,1"

    loaded = load_file("/nowhere/datos.txt", reader)

    reader.read_text.assert_called_once_with(Path("/nowhere/datos.txt"))
    assert (loaded.name, loaded.content) == ("datos.txt", "Yoga,1")


def test_load_file_rejects_before_reading():
    reader = MagicMock()

    with pytest.raises(ValidationError):
        load_file("datos.json", reader)

    reader.read_text.assert_not_called()


def test_local_reader_drops_bom(tmp_path):
    path = tmp_path / "datos.csv"
    path.write_bytes("\ufeffclase,asistentes\n".encode("utf-8"))

    assert LocalTextReader().read_text(path) == "clase,asistentes\n"


def test_load_file_missing_path_is_validation_error(tmp_path):
    with pytest.raises(ValidationError, match="No se pudo leer el archivo: nope.csv"):
        load_file(tmp_path / "nope.csv")


def test_load_file_directory_is_validation_error(tmp_path):
    folder = tmp_path / "carpeta.csv"
    folder.mkdir()

    with pytest.raises(ValidationError, match="carpeta.csv"):
        load_file(folder)


def test_local_reader_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes("Año,5".encode("latin-1"))

    assert LocalTextReader().read_text(path) == "A�o,5"
