import io

import pytest
from conftest import StubTransport

from attendance_upload import cli
from attendance_upload.messages import t

SUCCESS_BODY = {
    "status": "success",
    "matched_count": 120,
    "unmatched_count": 1,
    "bigquery_loaded": True,
    "misc_records": [{"name": "Yoga"}],
}


@pytest.fixture
def run_cli(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ATTENDANCE_PASSWORD", "s3cret")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    def _run(argv, transport, stdin=""):
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        monkeypatch.setattr(cli, "AiohttpTransport", lambda url, timeout=None: transport)
        return cli.main(argv)

    return _run


def test_scripted_upload_submits_and_exports(run_cli, tmp_path):
    data = tmp_path / "datos.csv"
    data.write_text("Yoga,1\n", encoding="utf-8")
    transport = StubTransport(body=SUCCESS_BODY)

    code = run_cli(
        ["--start", "2024-03-05", "--end", "2024-03-11", "--file", str(data), "--yes", "--export",
         "--export-dir", str(tmp_path / "out")],
        transport,
    )

    assert code == cli.EXIT_OK
    assert transport.payloads[0]["entry_mode"] == "upload"
    assert transport.payloads[0]["file_content"] == "Yoga,1\n"
    exported = list((tmp_path / "out").glob("misc_records_*.csv"))
    assert len(exported) == 1
    assert exported[0].read_text(encoding="utf-8") == "name\nYoga"


def test_stdin_entry_is_manual_mode(run_cli):
    transport = StubTransport(body={"status": "success", "matched_count": 1})

    code = run_cli(["--start", "2024-03-05", "--end", "2024-03-11", "--stdin", "--yes"], transport, stdin="Box,4\n")

    assert code == cli.EXIT_OK
    assert transport.payloads[0]["entry_mode"] == "manual"
    assert transport.payloads[0]["file_content"] == "Box,4\n"


def test_missing_dates_exit_without_request(run_cli):
    transport = StubTransport()

    code = run_cli(["--stdin", "--yes"], transport, stdin="Box,4\n")

    assert code == cli.EXIT_INVALID
    assert transport.payloads == []


def test_scripted_run_requires_yes(run_cli):
    transport = StubTransport()

    code = run_cli(["--start", "2024-03-05", "--end", "2024-03-11", "--stdin"], transport, stdin="Box,4\n")

    assert code == cli.EXIT_FAILED
    assert transport.payloads == []


def test_rejected_submission_exit_code(run_cli):
    transport = StubTransport(status=500, body={"status": "error", "message": "bad credential"})

    code = run_cli(["--start", "2024-03-05", "--end", "2024-03-11", "--stdin", "--yes"], transport, stdin="Box,4\n")

    assert code == cli.EXIT_FAILED


def test_invalid_date_flag_is_rejected():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--start", "05/03/2024"])


def test_missing_file_exits_invalid_without_request(run_cli, tmp_path):
    transport = StubTransport()

    code = run_cli(
        ["--start", "2024-03-05", "--end", "2024-03-11", "--file", str(tmp_path / "nope.csv"), "--yes"],
        transport,
    )

    assert code == cli.EXIT_INVALID
    assert transport.payloads == []


def test_non_utf8_file_is_submitted_with_replacement_chars(run_cli, tmp_path):
    data = tmp_path / "latin1.csv"
    data.write_bytes("Año,5".encode("latin-1"))
    transport = StubTransport()

    code = run_cli(["--start", "2024-03-05", "--end", "2024-03-11", "--file", str(data), "--yes"], transport)

    assert code == cli.EXIT_OK
    assert transport.payloads[0]["file_content"] == "A�o,5"


def test_bad_timeout_setting_exits_invalid(run_cli, monkeypatch, caplog):
    monkeypatch.setenv("ATTENDANCE_HTTP_TIMEOUT", "abc")
    transport = StubTransport()

    code = run_cli(["--start", "2024-03-05", "--end", "2024-03-11", "--stdin", "--yes"], transport, stdin="Box,4\n")

    assert code == cli.EXIT_INVALID
    assert transport.payloads == []
    assert any(t("invalid_config") in record.getMessage() for record in caplog.records)


def test_scripted_run_without_yes_logs_hint(run_cli, caplog):
    code = run_cli(["--start", "2024-03-05", "--end", "2024-03-11", "--stdin"], StubTransport(), stdin="Box,4\n")

    assert code == cli.EXIT_FAILED
    assert t("confirm_required") in [record.getMessage() for record in caplog.records]
