"""
Structured logging configuration for the application.

JSON logs carry the service name and version on every record, plus any
``employee_id`` passed through ``extra=`` by the employee service, so log
lines can be filtered per employee. Text logs are meant for development.
"""

import logging
import sys
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

JSON_LOG_FORMAT = '%(timestamp)s %(level)s %(logger)s %(message)s'
TEXT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter stamping each record with the emitting service.
    """

    def __init__(self, *args, service_name: Optional[str] = None, service_version: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service_name = service_name
        self.service_version = service_version

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        # Time the record was created, not the time it was formatted
        log_record['timestamp'] = (
            datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace('+00:00', 'Z')
        )
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if self.service_name:
            log_record['service'] = self.service_name
        if self.service_version:
            log_record['version'] = self.service_version

        # Add source location for errors/warnings
        if record.levelno >= logging.WARNING:
            log_record['function'] = record.funcName
            log_record['line'] = record.lineno


def build_formatter(json_logs: bool, service_name: Optional[str] = None,
                    service_version: Optional[str] = None) -> logging.Formatter:
    """
    Build the formatter used by the console handler.

    Args:
        json_logs: JSON output when True, plain text otherwise
        service_name: Value of the ``service`` field in JSON logs
        service_version: Value of the ``version`` field in JSON logs
    """
    if json_logs:
        return ServiceJsonFormatter(
            JSON_LOG_FORMAT,
            service_name=service_name,
            service_version=service_version,
        )
    return logging.Formatter(TEXT_LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')


def setup_logging(log_level: str = "INFO", json_logs: bool = True,
                  service_name: Optional[str] = None, service_version: Optional[str] = None) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to use JSON formatting (True for production, False for development)
        service_name: Service name added to JSON records
        service_version: Service version added to JSON records
    """
    # Remove any existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(build_formatter(json_logs, service_name, service_version))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)

    # SQL statements are logged through the engine's echo setting instead
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
