"""
Logging setup and progress reporting
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

QUIET_LOGGERS = ("sqlalchemy", "sqlalchemy.engine", "aiohttp.access", "httpx")


def _console_handler(rich_logging: bool, format_string: str) -> logging.Handler:
    if rich_logging:
        return RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=True,
            markup=False,
            rich_tracebacks=True
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def _file_handler(log_file: str, format_string: str) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rich_logging: bool = True,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Replace the root logger's handlers.

    Args:
        level: level name such as ``"DEBUG"``; unknown names mean INFO
        log_file: also write plain-format records to this file
        rich_logging: render console records with Rich
        format_string: format for the plain handlers

    Returns:
        the root logger
    """
    format_string = format_string or DEFAULT_FORMAT
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(numeric_level)

    handlers: List[logging.Handler] = [_console_handler(rich_logging, format_string)]
    if log_file:
        handlers.append(_file_handler(log_file, format_string))

    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


class ProgressLogger:
    """Logs ``[NN.N%] step`` lines against a known number of steps"""

    def __init__(self, logger: logging.Logger, total_steps: int):
        self.logger = logger
        self.total_steps = max(total_steps, 1)
        self.current_step = 0

    @property
    def percent(self) -> float:
        return min(self.current_step / self.total_steps, 1.0) * 100

    def update(self, step_name: str, increment: int = 1):
        self.current_step += increment
        self.logger.info(f"[{self.percent:.1f}%] {step_name}")

    def complete(self, message: str = "Done"):
        self.current_step = self.total_steps
        self.logger.info(f"[{self.percent:.1f}%] {message}")
