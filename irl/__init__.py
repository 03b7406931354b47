"""
IRL - Intent Representation Layer

A rule-based pipeline that normalizes raw natural-language requests into
structured intent records and renders them as notation or as a
ready-to-send instruction.

Architecture:
- Parsing Context: Field extraction, conflict detection, intent assembly
- Rendering Context: Notation rendering and instruction compiling

Logging is silent when used as a library; irl.utils.logger.setup_logger()
turns it on for a session.
"""

__version__ = "0.1.0"

from loguru import logger

from irl.contexts.parsing.intent_data_structure import SCHEMA_VERSION, Intent
from irl.pipeline import NormalizationResult, normalize

logger.disable("irl")

__all__ = ["Intent", "NormalizationResult", "SCHEMA_VERSION", "normalize"]
