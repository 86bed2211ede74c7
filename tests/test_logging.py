"""Tests for logging configuration."""
import logging

from weather_service.core.logging import HTTP, LOGGER_NAME, configure_logging, log_http_request

from conftest import build_settings


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def test_console_only_without_log_dir():
    logger = configure_logging(build_settings(LOG_DIR=None))

    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_file_channels_are_split(tmp_path):
    logger = configure_logging(build_settings(LOG_DIR=str(tmp_path)))

    logger.info("application started")
    log_http_request(logger, "127.0.0.1", "GET", "/coordinates", {"lat": "1", "lon": "2"})
    _flush(logger)

    application_log = (tmp_path / "application.log").read_text()
    http_log = (tmp_path / "http.log").read_text()

    assert "[INFO]: application started" in application_log
    assert "/coordinates" not in application_log
    assert '[HTTP]: IP: 127.0.0.1 GET /coordinates {"lat": "1", "lon": "2"}' in http_log
    assert "application started" not in http_log


def test_reconfiguring_replaces_handlers(tmp_path):
    configure_logging(build_settings(LOG_DIR=str(tmp_path)))
    logger = configure_logging(build_settings(LOG_DIR=None))

    assert len(logger.handlers) == 1


def test_request_log_masks_query_api_key(caplog):
    logger = logging.getLogger(LOGGER_NAME)
    caplog.set_level(HTTP, logger=LOGGER_NAME)

    log_http_request(logger, "10.0.0.1", "GET", "/version", {"apikey": "secret-value"})

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ['IP: 10.0.0.1 GET /version {"apikey": "***"}']
    assert caplog.records[0].levelname == "HTTP"
