"""
Logging utility module.

Provides one logging configuration for the application: the console format
used everywhere plus an optional dated log file.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_file_logging(log_dir: str, logger: Optional[logging.Logger] = None) -> Path:
    """
    Set up file logging in addition to console logging.

    Args:
        log_dir: Directory to store log files
        logger: Logger to attach the handler to, the root logger by default

    Returns:
        Path of the log file
    """
    # Create log directory if it doesn't exist
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d")
    file_path = log_path / f"medcase_{timestamp}.log"
    file_handler = logging.FileHandler(file_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    (logger or logging.getLogger()).addHandler(file_handler)
    return file_path

def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Configure the root logger once at startup.

    Args:
        level: Name of the log level, e.g. "INFO"
        log_dir: When set, log lines are also written to a dated file there
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    if log_dir:
        setup_file_logging(log_dir)

def log_error(logger: logging.Logger, error: Exception, context: Optional[str] = None):
    """
    Log an error with optional context, stack trace at debug level.
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))

    logger.debug("Stack trace:", exc_info=error)
