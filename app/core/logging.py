import logging
from typing import Optional

from app.core.config import settings
from app.utils.logger import build_handler

_CONFIGURED = False


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure the root logger once per process.
    Repeated calls (one per create_app in tests) only adjust the level.
    """
    global _CONFIGURED

    level = (level or settings.log_level).upper()
    json_output = settings.log_json if json_output is None else json_output

    root = logging.getLogger()
    root.setLevel(level)

    if _CONFIGURED:
        return

    root.addHandler(build_handler(json_output))

    # uvicorn ships its own access log; ours comes from RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _CONFIGURED = True
