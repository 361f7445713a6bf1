import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME: str = "skilllens-action"
SERVICE_VERSION: str = "1.0.0"

RUN_LOGGER_NAME: str = "skilllens_action.run"

BASE_LOGGER_CACHE = {}

# Levels rendered as GitHub workflow commands; INFO is printed as-is.
WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_command_data(value: str) -> str:
    """Escape a message so the runner keeps it on a single command line."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Formats records as `::debug::`, `::warning::` and `::error::` commands."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_command_data(message)}"


def build_formatter(log_format: str = "actions") -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            static_fields={"service.name": SERVICE_NAME, "service.version": SERVICE_VERSION},
        )
    return WorkflowCommandFormatter("%(message)s")


def get_logger(name: str) -> logging.Logger:
    """
    Returns the logger with the given name is exists, else creates a new one.
    """
    if name in BASE_LOGGER_CACHE:
        return BASE_LOGGER_CACHE[name]

    base_logger = logging.getLogger(name)
    base_logger.setLevel(logging.INFO)
    BASE_LOGGER_CACHE[name] = base_logger

    # The runner reads workflow commands from stdout
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(build_formatter())
    base_logger.addHandler(stream_handler)

    return base_logger


def get_run_logger(debug: bool = False, log_format: str = "actions") -> logging.Logger:
    """
    Returns the logger for a single action run.

    The debug flag decides whether diagnostic traces are emitted. The
    returned logger is handed to every component the run calls.
    """
    run_logger = get_logger(RUN_LOGGER_NAME)
    run_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    formatter = build_formatter(log_format)
    for handler in run_logger.handlers:
        handler.setFormatter(formatter)
    run_logger.debug(f"Run logger initialized (debug={debug}, format={log_format})")
    return run_logger
