import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(service_name: str = "summary-api") -> logging.Logger:
    """
    Configures structured JSON logging on stdout and returns the root logger.

    Every record is rendered as one JSON object carrying timestamp, level,
    logger name, message, the ddtrace trace/span ids and the service name.
    Fields passed through ``extra`` are merged into the same object. The
    root logger and the Uvicorn loggers share a single stream handler, so
    access logs and application logs come out in the same format.

    The level is read from ``LOG_LEVEL`` (default ``INFO``). Calling this
    repeatedly is safe: handlers are replaced, never stacked.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": service_name},
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in _UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [stream_handler]
        u_logger.propagate = False

    return root_logger
