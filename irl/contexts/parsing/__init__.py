"""
Parsing Context

Responsibilities:
- Holds the ordered trigger tables for every intent field
- Extracts goal, task type, audience, domain, constraints and output hints
- Detects contradictory descriptor pairs
- Assembles the frozen Intent record

Owns: Intent data model, extraction patterns, conflict rules
Never: Renders text for consumers
"""

from irl.contexts.parsing.conflict_detector import CONFLICT_RULES, ConflictRule, detect_conflicts
from irl.contexts.parsing.exceptions import InvalidIntentStructureError
from irl.contexts.parsing.intent_components import Conflict, Constraint, OutputExpectation
from irl.contexts.parsing.intent_data_structure import SCHEMA_VERSION, ConstraintSet, Intent
from irl.contexts.parsing.intent_parser import ParsedIntentData, parse_intent_text

__all__ = [
    "CONFLICT_RULES",
    "Conflict",
    "ConflictRule",
    "Constraint",
    "ConstraintSet",
    "Intent",
    "InvalidIntentStructureError",
    "OutputExpectation",
    "ParsedIntentData",
    "SCHEMA_VERSION",
    "detect_conflicts",
    "parse_intent_text",
]
