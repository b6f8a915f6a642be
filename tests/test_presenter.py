import io

from rich.console import Console

from attendance_upload.models import FormInput, ProcessResult
from attendance_upload.presenter import View, current_view, render, show_export_action
from attendance_upload.state import AwaitingConfirmation, Editing, Failed, Submitting, Succeeded


def _console():
    return Console(file=io.StringIO(), width=100, color_system=None)


def test_view_follows_state():
    ok = ProcessResult(status="success", matched_count=1)
    assert current_view(Editing()) is View.FORM
    assert current_view(AwaitingConfirmation()) is View.CONFIRMATION
    assert current_view(Submitting()) is View.LOADING
    assert current_view(Succeeded(ok)) is View.SUCCESS
    assert current_view(Failed("x")) is View.ERROR


def test_export_only_offered_with_unmatched_records():
    with_misc = ProcessResult(status="success", unmatched_count=1, misc_records=[{"name": "Yoga"}])
    without = ProcessResult(status="success", unmatched_count=0)

    assert show_export_action(Succeeded(with_misc))
    assert not show_export_action(Succeeded(without))
    assert not show_export_action(Failed("x"))


def test_render_confirmation_shows_display_dates():
    console = _console()

    view = render(console, AwaitingConfirmation(), FormInput(start_date="2024-03-05", end_date="2024-03-11"))

    output = console.file.getvalue()
    assert view is View.CONFIRMATION
    assert "5 de marzo de 2024 - 11 de marzo de 2024" in output


def test_render_success_summary():
    console = _console()
    result = ProcessResult(status="success", matched_count=120, unmatched_count=3, loaded_to_warehouse=True)

    render(console, Succeeded(result), FormInput())

    output = console.file.getvalue()
    assert "¡Carga Exitosa!" in output
    assert "120" in output
    assert "Cargados a BigQuery" in output
    assert "Registros No Procesados (Misc)" in output


def test_render_failure_and_validation_message():
    console = _console()

    render(console, Failed("bad credential"), FormInput())
    render(console, Editing(), FormInput(), "Por favor ingresa la contraseña")

    output = console.file.getvalue()
    assert "bad credential" in output
    assert "Por favor ingresa la contraseña" in output
