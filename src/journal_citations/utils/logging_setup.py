"""Logging configuration."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def setup_logging(log_dir: Optional[str] = "logs", level: Union[int, str] = logging.INFO) -> None:
    """
    Set up logging configuration.

    Args:
        log_dir: Directory to store log files. ``None`` logs to the console only.
        level: Logging level, as a number or a name such as "DEBUG"
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    handlers = [logging.StreamHandler()]  # Console output

    log_file = None
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"citations_{timestamp}.log"
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
    )

    logging.info("Logging initialized")
    if log_file:
        logging.info(f"Log file: {log_file}")


def log_operation(operation: str, details: str, level: int = logging.INFO) -> None:
    """Log an operation with details."""
    logging.log(level, f"{operation}: {details}")
