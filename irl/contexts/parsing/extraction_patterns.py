"""
Reusable patterns and constants for intent parsing.

This module provides the ordered trigger tables used across the parsing
context for field extraction. Tables are tuples so that first-match-wins
lookups keep a stable priority order.

Pattern classes follow the convention from the intake patterns:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Convenience tuples for iteration
"""

import re
from dataclasses import dataclass

# Clause ends at sentence punctuation, a comma, or end of line
_CLAUSE_END = r"(?:[.,!?]|$)"

_FLAGS = re.IGNORECASE | re.MULTILINE


# =============================================================================
# GOAL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class GoalPatterns:
    """
    Patterns for isolating the primary goal sentence.
    """

    SENTENCE_SPLIT: re.Pattern = re.compile(r"[.!?]+")

    # Leading filler phrases, checked in priority order
    I_WANT_TO: re.Pattern = re.compile(r"^i\s+want\s+(?:you\s+)?to\s+", re.IGNORECASE)
    PLEASE: re.Pattern = re.compile(r"^please\s+", re.IGNORECASE)
    CAN_YOU: re.Pattern = re.compile(r"^can\s+you\s+", re.IGNORECASE)
    HELP_ME: re.Pattern = re.compile(r"^help\s+me\s+", re.IGNORECASE)
    I_NEED_TO: re.Pattern = re.compile(r"^i\s+need\s+(?:you\s+)?to\s+", re.IGNORECASE)


GOAL_FILLER_PATTERNS = (
    GoalPatterns.I_WANT_TO,
    GoalPatterns.PLEASE,
    GoalPatterns.CAN_YOU,
    GoalPatterns.HELP_ME,
    GoalPatterns.I_NEED_TO,
)


# =============================================================================
# LABELLED PATTERN TABLES
# =============================================================================


@dataclass(frozen=True)
class LabelledPattern:
    """A trigger pattern and the label it resolves to."""

    label: str
    pattern: re.Pattern


def _labelled(label: str, regex: str) -> LabelledPattern:
    return LabelledPattern(label=label, pattern=re.compile(regex, re.IGNORECASE))


# Priority order matters: "write a brief overview" is generate, not summarize
TASK_TYPE_PATTERNS = (
    _labelled("generate", r"\b(create|generate|build|make|write|produce|design)\b"),
    _labelled("analyze", r"\b(analyze|examine|review|evaluate|assess|audit)\b"),
    _labelled("explain", r"\b(explain|describe|clarify|elaborate|break down)\b"),
    _labelled("fix", r"\b(fix|repair|debug|solve|resolve|correct)\b"),
    _labelled("optimize", r"\b(optimize|improve|enhance|refactor|streamline)\b"),
    _labelled("convert", r"\b(convert|transform|translate|migrate|port)\b"),
    _labelled("summarize", r"\b(summarize|condense|tldr|brief|overview)\b"),
)

AUDIENCE_PATTERNS = (
    _labelled("beginners", r"\bfor\s+(beginners?|newbies?|novices?)\b"),
    _labelled("experts", r"\bfor\s+(experts?|advanced users?|professionals?)\b"),
    _labelled("developers", r"\bfor\s+(developers?|devs?|engineers?|programmers?)\b"),
    _labelled("managers", r"\bfor\s+(managers?|executives?|leadership)\b"),
    _labelled("designers", r"\bfor\s+(designers?|ux|ui)\b"),
    _labelled("students", r"\bfor\s+(students?|learners?)\b"),
    _labelled("end users", r"\bfor\s+(customers?|users?|clients?)\b"),
    _labelled("startup founders", r"\bfor\s+(founders?|startups?|entrepreneurs?)\b"),
    _labelled("children", r"\bfor\s+(children|kids)\b"),
    _labelled("technical audience", r"\btechnical\s+audience\b"),
    _labelled("non-technical audience", r"\bnon-technical\b"),
)

DOMAIN_PATTERNS = (
    _labelled("web development", r"\b(web|website|frontend|react|vue|angular)\b"),
    _labelled("mobile development", r"\b(mobile|ios|android|app)\b"),
    _labelled("backend development", r"\b(api|backend|server|database)\b"),
    _labelled("machine learning", r"\b(ml|machine learning|ai|data science)\b"),
    _labelled("devops", r"\b(devops|ci/cd|deployment|infrastructure)\b"),
    _labelled("marketing", r"\b(marketing|seo|growth|analytics)\b"),
    _labelled("finance", r"\b(finance|banking|trading|investment)\b"),
    _labelled("healthcare", r"\b(healthcare|medical|health)\b"),
    _labelled("e-commerce", r"\b(e-?commerce|shopping|retail)\b"),
    _labelled("education", r"\b(education|learning|teaching)\b"),
)

# Order is short, long, medium
LENGTH_PATTERNS = (
    _labelled("short", r"\b(brief|short|concise|quick|simple)\b"),
    _labelled("long", r"\b(detailed|comprehensive|thorough|in-depth|exhaustive|long)\b"),
    _labelled("medium", r"\b(moderate|medium|balanced)\b"),
)

FORMAT_PATTERNS = (
    _labelled("JSON", r"\bjson\b"),
    _labelled("Markdown", r"\b(markdown|md)\b"),
    _labelled("HTML", r"\bhtml\b"),
    _labelled("bullet points", r"\b(bullet\s*points?|bullets?|list)\b"),
    _labelled("table", r"\b(table|tabular)\b"),
    _labelled("code", r"\b(code|snippet)\b"),
)


# =============================================================================
# STRUCTURE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class StructurePatterns:
    """
    Structural hints about how the output should be organised.

    Group 1 of each pattern is the hint that gets collected.
    """

    WITH_SECTIONS: re.Pattern = re.compile(r"\bwith\s+(sections?|parts?|chapters?)\b", _FLAGS)

    # "include X and Y" keeps only X
    INCLUDE: re.Pattern = re.compile(r"\binclude\s+(.+?)(?:[.,]|\band\b|$)", _FLAGS)


STRUCTURE_PATTERNS = (
    StructurePatterns.WITH_SECTIONS,
    StructurePatterns.INCLUDE,
)


# =============================================================================
# CONSTRAINT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ConstraintRule:
    """
    A constraint trigger and the template applied to its captured clause.

    The template receives the trimmed clause as ``{clause}``.
    """

    pattern: re.Pattern
    template: str = "{clause}"

    def extract(self, match: re.Match) -> str:
        return self.template.format(clause=match.group(1).strip())


def _rule(trigger: str, template: str = "{clause}") -> ConstraintRule:
    return ConstraintRule(pattern=re.compile(trigger + r"(.+?)" + _CLAUSE_END, _FLAGS), template=template)


HARD_CONSTRAINT_RULES = (
    _rule(r"\bmust\s+(?:be\s+)?"),
    _rule(r"\brequired?(?:\s+to)?\s+"),
    _rule(r"\bhas\s+to\s+"),
    _rule(r"\bneeds?\s+to\s+"),
    _rule(r"\bensure\s+"),
    _rule(r"\bno\s+", "no {clause}"),
    _rule(r"\bwithout\s+", "without {clause}"),
)

SOFT_CONSTRAINT_RULES = (
    _rule(r"\bpreferably\s+"),
    _rule(r"\bideally\s+"),
    _rule(r"\bshould\s+(?:be\s+)?"),
    _rule(r"\bwould\s+be\s+nice\s+(?:to\s+)?"),
    _rule(r"\bif\s+possible[,\s]+"),
    _rule(r"\boptionally\s+"),
)

# Exclusive bounds on extracted constraint length
MIN_CONSTRAINT_LENGTH = 3
MAX_CONSTRAINT_LENGTH = 100
