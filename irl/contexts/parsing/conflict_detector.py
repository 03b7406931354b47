"""
Contradictory descriptor detection for the parsing context.

Scans raw request text for pairs of terms that pull the output in opposite
directions (e.g., "short" and "comprehensive"). Matching is plain
case-insensitive substring containment, so "shortest" counts as "short".
"""

from dataclasses import dataclass

from irl.contexts.parsing.intent_components import Conflict, ConflictSeverity, ConflictType


@dataclass(frozen=True)
class ConflictRule:
    """A pair of descriptors that contradict each other when both are present."""

    terms: tuple[str, str]
    description: str
    severity: ConflictSeverity
    type: ConflictType

    def matches(self, lower_text: str) -> bool:
        first, second = self.terms
        return first in lower_text and second in lower_text

    def to_conflict(self) -> Conflict:
        return Conflict(
            type=self.type,
            description=self.description,
            severity=self.severity,
            terms=self.terms,
        )


CONFLICT_RULES = (
    ConflictRule(
        terms=("simple", "detailed"),
        description="Request asks for both simple and detailed output",
        severity="warning",
        type="constraint",
    ),
    ConflictRule(
        terms=("short", "comprehensive"),
        description="Request asks for both short and comprehensive output",
        severity="warning",
        type="output",
    ),
    ConflictRule(
        terms=("short", "in-depth"),
        description="Request asks for both short and in-depth content",
        severity="warning",
        type="output",
    ),
    ConflictRule(
        terms=("brief", "thorough"),
        description="Request asks for both brief and thorough output",
        severity="warning",
        type="output",
    ),
    ConflictRule(
        terms=("creative", "strict"),
        description="Request asks for both creative and strict approach",
        severity="warning",
        type="constraint",
    ),
    ConflictRule(
        terms=("creative", "formal"),
        description="Creative tone conflicts with formal style requirement",
        severity="warning",
        type="constraint",
    ),
    ConflictRule(
        terms=("casual", "professional"),
        description="Casual tone conflicts with professional style",
        severity="warning",
        type="constraint",
    ),
    ConflictRule(
        terms=("fast", "perfect"),
        description="Prioritizing speed may conflict with perfectionism",
        severity="warning",
        type="constraint",
    ),
    ConflictRule(
        terms=("minimal", "feature-rich"),
        description="Minimal design conflicts with feature-rich requirements",
        severity="blocking",
        type="goal",
    ),
    ConflictRule(
        terms=("concise", "exhaustive"),
        description="Concise output conflicts with exhaustive coverage",
        severity="warning",
        type="output",
    ),
)


def detect_conflicts(text: str) -> list[Conflict]:
    """
    Detect contradictory descriptor pairs in raw text.

    Every rule is checked independently; several rules sharing a term
    (e.g., short/comprehensive and short/in-depth) can all fire.

    Args:
        text: Raw request text

    Returns:
        Conflicts in rule-table order (empty list if none)
    """
    lower_text = text.lower()
    return [rule.to_conflict() for rule in CONFLICT_RULES if rule.matches(lower_text)]
