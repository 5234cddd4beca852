from .response import api_error_message, first_message_content
from .run_log import RunLogPaths, append_exchange, init_run_log, make_run_id

__all__ = [
    "RunLogPaths",
    "api_error_message",
    "append_exchange",
    "first_message_content",
    "init_run_log",
    "make_run_id",
]
