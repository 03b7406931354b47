"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from irl.contexts.parsing.intent_data_structure import SCHEMA_VERSION
from irl.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[parse]"


def setup_parsing_logger(log_dir: Path) -> Path:
    """
    Setup logger for parsing context.

    Args:
        log_dir: Directory for this normalization session

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="parse",
        log_dir=log_dir,
        extra_provenance={"Schema version": SCHEMA_VERSION},
    )


# Wrapper functions with automatic [parse] prefix, shared with scripts


def log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def log_success(message: str) -> None:
    """Log success message with [parse] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_intent_summary(intent) -> None:
    """
    Log what was extracted from one request.

    Args:
        intent: Intent produced by normalize()
    """
    log_debug(
        f"goal={intent.primary_goal!r} task={intent.task_type} "
        f"audience={intent.audience} domain={intent.domain}"
    )
    log_debug(
        f"constraints: {len(intent.constraints.hard)} hard, {len(intent.constraints.soft)} soft; "
        f"{len(intent.conflicts)} conflict(s)"
    )
    for conflict in intent.blocking_conflicts:
        log_warning(f"Blocking conflict: {conflict.description} {list(conflict.terms)}")
