"""
Utility functions for the Urlbox client.
"""
import sys
import time
from pathlib import Path
from typing import Union

from loguru import logger
from config.config import LOGGING_SETTINGS, LOGS_DIR


def setup_logger(log_dir: Union[str, Path] = LOGS_DIR):
    """Set up loguru logger with a colored console sink and a rotating file sink.

    The file sink is skipped with a warning when ``log_dir`` cannot be
    created or written.
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sink=sys.stderr,
        level=LOGGING_SETTINGS["level"],
        format=LOGGING_SETTINGS["format"],
        colorize=LOGGING_SETTINGS.get("colorize", True),
    )

    # Create log filename with date
    log_file = Path(log_dir) / f"urlbox_{time.strftime('%Y%m%d')}.log"

    try:
        ensure_dir(log_dir)
        logger.add(
            sink=log_file,
            level=LOGGING_SETTINGS["level"],
            format=LOGGING_SETTINGS["format"],
            rotation=LOGGING_SETTINGS["rotation"],
            retention=LOGGING_SETTINGS["retention"],
            backtrace=LOGGING_SETTINGS.get("backtrace", True),
            diagnose=LOGGING_SETTINGS.get("diagnose", False),
            enqueue=LOGGING_SETTINGS.get("enqueue", True),
        )
    except OSError as e:
        logger.warning(f"File logging disabled: cannot create log file in '{log_dir}': {format_exception(e)}")
        return logger

    logger.info(f"Logger initialized. Log file: {log_file}")

    return logger


def ensure_dir(directory: Union[str, Path]) -> Path:
    """Ensure directory exists, create if it doesn't.

    Args:
        directory: Directory path to ensure

    Returns:
        Path object of the directory
    """
    dir_path = Path(directory)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def format_exception(e: Exception) -> str:
    """Format exception for logging.

    Args:
        e: Exception to format

    Returns:
        Formatted exception message
    """
    return f"{type(e).__name__}: {str(e)}"


def mask_secret(text: str, secret: str) -> str:
    """Replace every occurrence of ``secret`` in ``text`` for log output."""
    if not secret:
        return text
    return text.replace(secret, "***")


def build_download_filename(name: str, file_format: str) -> str:
    """Attach the output format as extension unless ``name`` already has it.

    Example: ``build_download_filename("report", "pdf")`` -> ``"report.pdf"``
    """
    suffix = f".{file_format}"
    if name.lower().endswith(suffix):
        return name
    return f"{name}{suffix}"
