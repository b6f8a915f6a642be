import logging

from attendance_upload.logger import BASE_LOGGER_NAME, LayeredFormatter, get_logger, set_log_profile


def _record(layer=None):
    record = logging.LogRecord("attendance_upload.test", logging.INFO, __file__, 1, "hola %s", ("mundo",), None)
    if layer:
        record.layer = layer
    return record


def test_formatter_prefixes_layer_icon(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    formatter = LayeredFormatter("%(message)s")

    assert formatter.format(_record("success")) == "✓ hola mundo"
    assert formatter.format(_record("error")) == "✗ hola mundo"
    assert formatter.format(_record()) == "• hola mundo"
    assert formatter.format(_record("debug")) == "[debug] hola mundo"


def test_child_logger_tags_warning_layer(caplog):
    log = get_logger("tests")

    with caplog.at_level(logging.INFO):
        log.warning("cuidado")
        log.info("listo")

    layers = {record.getMessage(): record.layer for record in caplog.records}
    assert layers == {"cuidado": "warning", "listo": "user"}
    assert caplog.records[0].name == f"{BASE_LOGGER_NAME}.tests"


def test_set_log_profile_changes_console_level(monkeypatch):
    monkeypatch.setenv("LOG_PROFILE", "user")
    console_handlers = [
        handler
        for handler in logging.getLogger(BASE_LOGGER_NAME).handlers
        if type(handler) is logging.StreamHandler
    ]

    set_log_profile("quiet")
    assert all(handler.level == logging.WARNING for handler in console_handlers)

    set_log_profile("user")
    assert all(handler.level == logging.INFO for handler in console_handlers)


def test_base_logger_does_not_propagate_to_root():
    get_logger("tests")

    assert logging.getLogger(BASE_LOGGER_NAME).propagate is False
