"""
Intent parsing utilities for the parsing context.

Provides one extractor per intent field. This module has no knowledge of
Intent - it returns raw parsed data that Intent.assemble() freezes into a
record, and it never raises: absent signals come back as None or [].

Pattern follows the intake context: parser produces data, data structure consumes it.
"""

from dataclasses import dataclass, field
from typing import Optional

from irl.contexts.parsing.extraction_patterns import (
    AUDIENCE_PATTERNS,
    DOMAIN_PATTERNS,
    FORMAT_PATTERNS,
    GOAL_FILLER_PATTERNS,
    HARD_CONSTRAINT_RULES,
    LENGTH_PATTERNS,
    MAX_CONSTRAINT_LENGTH,
    MIN_CONSTRAINT_LENGTH,
    SOFT_CONSTRAINT_RULES,
    STRUCTURE_PATTERNS,
    TASK_TYPE_PATTERNS,
    ConstraintRule,
    GoalPatterns,
    LabelledPattern,
)
from irl.contexts.parsing.intent_components import Constraint, ConstraintType, OutputExpectation

ASSUMPTION_GENERAL_AUDIENCE = "Assuming general audience with moderate technical knowledge"
ASSUMPTION_MEDIUM_LENGTH = "Assuming medium-length output is acceptable"
ASSUMPTION_NO_DOMAIN = "No specific domain context detected"


@dataclass
class ParsedIntentData:
    """
    Raw parsed intent fields.

    This is the intermediate form between raw text and Intent.
    Intent.assemble() uses this to construct frozen instances.
    """

    raw_text: str
    primary_goal: str
    task_type: Optional[str] = None
    audience: Optional[str] = None
    domain: Optional[str] = None
    hard_constraints: list[Constraint] = field(default_factory=list)
    soft_constraints: list[Constraint] = field(default_factory=list)
    output_expectations: Optional[OutputExpectation] = None
    assumptions: list[str] = field(default_factory=list)


# =============================================================================
# FIELD EXTRACTORS
# =============================================================================


def extract_primary_goal(text: str) -> str:
    """
    Extract the primary goal from the first sentence.

    Only the first matching filler prefix is removed, so
    "Please can you X" becomes "Can you X".

    Args:
        text: Raw request text

    Returns:
        Goal sentence with its first letter capitalized ("" for blank input)
    """
    sentences = [s.strip() for s in GoalPatterns.SENTENCE_SPLIT.split(text) if s.strip()]
    if not sentences:
        return text.strip()

    goal = sentences[0]
    for pattern in GOAL_FILLER_PATTERNS:
        stripped, count = pattern.subn("", goal, count=1)
        if count:
            goal = stripped
            break

    return goal[:1].upper() + goal[1:]


def _first_label(text: str, table: tuple[LabelledPattern, ...]) -> Optional[str]:
    """Return the label of the first pattern in table order that matches."""
    for entry in table:
        if entry.pattern.search(text):
            return entry.label
    return None


def extract_task_type(text: str) -> Optional[str]:
    """Classify the request (generate, analyze, ...), first category in priority order."""
    return _first_label(text, TASK_TYPE_PATTERNS)


def extract_audience(text: str) -> Optional[str]:
    return _first_label(text, AUDIENCE_PATTERNS)


def extract_domain(text: str) -> Optional[str]:
    return _first_label(text, DOMAIN_PATTERNS)


def extract_constraints(
    text: str, rules: tuple[ConstraintRule, ...], constraint_type: ConstraintType
) -> list[Constraint]:
    """
    Extract every constraint clause matched by any rule.

    Each rule scans the whole text for non-overlapping matches. Clauses
    outside the length bounds are dropped, and a clause already collected
    for this constraint type (case-insensitive) is skipped.

    Args:
        text: Raw request text
        rules: Ordered constraint rules (hard or soft)
        constraint_type: "hard" or "soft", stamped on each result

    Returns:
        Constraints in rule order, then match order
    """
    constraints = []
    seen = set()

    for rule in rules:
        for match in rule.pattern.finditer(text):
            constraint_text = rule.extract(match)
            key = constraint_text.lower()
            if not MIN_CONSTRAINT_LENGTH < len(constraint_text) < MAX_CONSTRAINT_LENGTH:
                continue
            if key in seen:
                continue
            seen.add(key)
            constraints.append(Constraint(text=constraint_text, type=constraint_type))

    return constraints


def extract_hard_constraints(text: str) -> list[Constraint]:
    return extract_constraints(text, HARD_CONSTRAINT_RULES, "hard")


def extract_soft_constraints(text: str) -> list[Constraint]:
    return extract_constraints(text, SOFT_CONSTRAINT_RULES, "soft")


def extract_output_expectations(text: str) -> Optional[OutputExpectation]:
    """
    Extract length, format and structure hints for the output.

    Length and format are first-match-wins; structure collects every
    matched hint in pattern order.

    Returns:
        OutputExpectation with length defaulting to "any", or None when
        no length, format or structure signal is present
    """
    length = _first_label(text, LENGTH_PATTERNS)
    output_format = _first_label(text, FORMAT_PATTERNS)

    structures = []
    for pattern in STRUCTURE_PATTERNS:
        for match in pattern.finditer(text):
            hint = match.group(1).strip()
            if hint:
                structures.append(hint)

    if not (length or output_format or structures):
        return None

    return OutputExpectation(
        length=length or "any",
        format=output_format,
        structure=tuple(structures) if structures else None,
    )


# =============================================================================
# ASSUMPTIONS
# =============================================================================


def generate_assumptions(parsed: ParsedIntentData) -> list[str]:
    """
    Describe the defaults applied for fields the request left open.

    Checks run in a fixed order: audience, output length, domain.
    """
    assumptions = []

    if parsed.audience is None:
        assumptions.append(ASSUMPTION_GENERAL_AUDIENCE)

    if parsed.output_expectations is None or parsed.output_expectations.length is None:
        assumptions.append(ASSUMPTION_MEDIUM_LENGTH)

    if parsed.domain is None:
        assumptions.append(ASSUMPTION_NO_DOMAIN)

    return assumptions


def parse_intent_text(text: str) -> ParsedIntentData:
    """
    Run every field extractor over raw request text.

    Args:
        text: Raw request text (any string, including "")

    Returns:
        ParsedIntentData with assumptions filled in
    """
    parsed = ParsedIntentData(
        raw_text=text,
        primary_goal=extract_primary_goal(text),
        task_type=extract_task_type(text),
        audience=extract_audience(text),
        domain=extract_domain(text),
        hard_constraints=extract_hard_constraints(text),
        soft_constraints=extract_soft_constraints(text),
        output_expectations=extract_output_expectations(text),
    )
    parsed.assumptions = generate_assumptions(parsed)
    return parsed
