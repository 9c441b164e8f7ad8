"""
Tests for the logging setup.
"""

import json
import logging

from petcare.core.logging_config import ServiceJsonFormatter, setup_logging


def make_record(level=logging.INFO, msg="Created feeding 1"):
    return logging.LogRecord("petcare.crud.feeding", level, __file__, 10, msg, None, None, func="create")


class TestServiceJsonFormatter:

    def test_info_record_fields(self):
        formatter = ServiceJsonFormatter('%(message)s', service="Pet Care API")

        data = json.loads(formatter.format(make_record()))

        assert data["message"] == "Created feeding 1"
        assert data["level"] == "INFO"
        assert data["logger"] == "petcare.crud.feeding"
        assert data["service"] == "Pet Care API"
        assert data["timestamp"].endswith("+00:00")
        assert "location" not in data

    def test_warning_record_has_location(self):
        formatter = ServiceJsonFormatter('%(message)s')

        data = json.loads(formatter.format(make_record(logging.WARNING, "Stale version")))

        assert data["service"] == "petcare"
        assert data["location"].endswith(":create:10")


class TestSetupLogging:

    def test_single_handler_and_level(self):
        root_logger = logging.getLogger()
        saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
        try:
            setup_logging("debug", json_logs=True, service="test")
            setup_logging("debug", json_logs=True, service="test")

            assert len(root_logger.handlers) == 1
            assert isinstance(root_logger.handlers[0].formatter, ServiceJsonFormatter)
            assert root_logger.level == logging.DEBUG
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)

    def test_unknown_level_falls_back_to_info(self):
        root_logger = logging.getLogger()
        saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
        try:
            setup_logging("chatty", json_logs=False)

            assert root_logger.level == logging.INFO
            assert not isinstance(root_logger.handlers[0].formatter, ServiceJsonFormatter)
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)
