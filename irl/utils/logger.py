"""
Generic logger setup utilities for session logging.

The irl package disables its loguru records on import so library callers
see no output. setup_logger() re-enables them and attaches a session log
file plus a console sink, headed by execution provenance.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Console threshold; the file handler always captures DEBUG
CONSOLE_LEVEL = os.getenv("IRL_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict | None = None) -> Path:
    """
    Enable irl logging for one session.

    Args:
        context_name: Context identifier, used as the log file stem (e.g., "parse")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for provenance header

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.enable("irl")

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    # stderr keeps stdout clean for rendered output
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=CONSOLE_LEVEL, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict | None = None) -> None:
    """Log script, command, working directory and Python version, plus extra_context."""
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
