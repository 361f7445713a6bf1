from .actions_logger import (
    RUN_LOGGER_NAME,
    WorkflowCommandFormatter,
    escape_command_data,
    get_logger,
    get_run_logger,
)

__all__ = [
    "RUN_LOGGER_NAME",
    "WorkflowCommandFormatter",
    "escape_command_data",
    "get_logger",
    "get_run_logger",
]
