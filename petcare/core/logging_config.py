"""
Logging setup for the API.

JSON lines in production, plain text for local runs. Every JSON record
carries the service name so logs from several deployments can be told apart.
"""

import logging
import sys
from typing import Any, Dict
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps each record with UTC time, level and service."""

    def __init__(self, *args, service: str = "petcare", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = self.service

        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.module}:{record.funcName}:{record.lineno}"


def setup_logging(log_level: str = "INFO", json_logs: bool = True, service: str = "petcare") -> None:
    """
    Replace the root handlers with a single stdout handler.

    Args:
        log_level: Root level name; unknown names fall back to INFO
        json_logs: JSON lines when True, plain text otherwise
        service: Value of the `service` field on JSON records
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        console_handler.setFormatter(ServiceJsonFormatter('%(message)s', service=service))
    else:
        console_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)

    # Statement echo only when explicitly debugging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
