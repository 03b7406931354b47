"""
Intent data structure for the parsing context.

Provides the frozen Intent record that both renderers consume. An Intent is
built once per normalization call and never modified afterwards.

Factory methods:
    from_text(text) - Parse raw request text
    assemble(parsed, conflicts) - Freeze already-extracted fields
    from_dict(data) - Rebuild from the camelCase wire format
"""

from dataclasses import dataclass, field
from typing import Optional

from irl.contexts.parsing.conflict_detector import detect_conflicts
from irl.contexts.parsing.exceptions import InvalidIntentStructureError
from irl.contexts.parsing.intent_components import (
    Conflict,
    Constraint,
    OutputExpectation,
    require_list,
)
from irl.contexts.parsing.intent_parser import ParsedIntentData, parse_intent_text

SCHEMA_VERSION = "0.1.0"


def _constraints_of_type(constraints: dict, kind: str) -> tuple[Constraint, ...]:
    items = tuple(
        Constraint.from_dict(c)
        for c in require_list(constraints.get(kind, []), f"Intent.constraints.{kind}")
    )
    for constraint in items:
        if constraint.type != kind:
            raise InvalidIntentStructureError(
                f"Intent.constraints.{kind} holds a {constraint.type} constraint: {constraint.text!r}"
            )
    return items


@dataclass(frozen=True)
class ConstraintSet:
    """Hard and soft constraints, kept in separate lists."""

    hard: tuple[Constraint, ...] = ()
    soft: tuple[Constraint, ...] = ()

    def texts(self) -> list[str]:
        """All constraint texts, hard first."""
        return [c.text for c in self.hard] + [c.text for c in self.soft]

    def to_dict(self) -> dict:
        return {
            "hard": [c.to_dict() for c in self.hard],
            "soft": [c.to_dict() for c in self.soft],
        }


@dataclass(frozen=True)
class Intent:
    """
    Structured record produced by normalizing a raw request.

    requires_clarification is true exactly when at least one conflict
    is blocking; assemble() derives it and from_dict() checks it.
    """

    primary_goal: str
    raw_input: str
    task_type: Optional[str] = None
    audience: Optional[str] = None
    domain: Optional[str] = None
    constraints: ConstraintSet = field(default_factory=ConstraintSet)
    output_expectations: Optional[OutputExpectation] = None
    conflicts: tuple[Conflict, ...] = ()
    assumptions: tuple[str, ...] = ()
    requires_clarification: bool = False
    version: str = SCHEMA_VERSION

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def assemble(cls, parsed: ParsedIntentData, conflicts: list[Conflict]) -> "Intent":
        """
        Freeze extracted fields and detected conflicts into an Intent.

        Args:
            parsed: Output of parse_intent_text()
            conflicts: Output of detect_conflicts() for the same text

        Returns:
            Immutable Intent
        """
        return cls(
            version=SCHEMA_VERSION,
            primary_goal=parsed.primary_goal,
            task_type=parsed.task_type,
            audience=parsed.audience,
            domain=parsed.domain,
            constraints=ConstraintSet(
                hard=tuple(parsed.hard_constraints),
                soft=tuple(parsed.soft_constraints),
            ),
            output_expectations=parsed.output_expectations,
            conflicts=tuple(conflicts),
            assumptions=tuple(parsed.assumptions),
            requires_clarification=any(c.is_blocking for c in conflicts),
            raw_input=parsed.raw_text,
        )

    @classmethod
    def from_text(cls, text: str) -> "Intent":
        """
        Parse raw request text and create an Intent.

        This is the primary way to create an Intent. Extraction and conflict
        detection both read the raw text and are independent of each other.
        """
        return cls.assemble(parse_intent_text(text), detect_conflicts(text))

    @classmethod
    def from_dict(cls, data: dict) -> "Intent":
        """
        Rebuild an Intent from its camelCase wire format.

        Args:
            data: Mapping as produced by to_dict()

        Returns:
            Intent instance

        Raises:
            InvalidIntentStructureError: If fields are missing or inconsistent
        """
        if not isinstance(data, dict):
            raise InvalidIntentStructureError(f"Intent must be a mapping, got {type(data).__name__}")

        missing = [
            key
            for key in ("primaryGoal", "constraints", "conflicts", "requiresClarification", "rawInput")
            if key not in data
        ]
        if missing:
            raise InvalidIntentStructureError(f"Intent is missing required fields: {', '.join(missing)}")

        constraints = data["constraints"]
        if not isinstance(constraints, dict):
            raise InvalidIntentStructureError("Intent.constraints must be a mapping with 'hard' and 'soft'")

        conflicts = tuple(
            Conflict.from_dict(c) for c in require_list(data["conflicts"], "Intent.conflicts")
        )
        requires_clarification = bool(data["requiresClarification"])
        if requires_clarification != any(c.is_blocking for c in conflicts):
            raise InvalidIntentStructureError(
                "Intent.requiresClarification must be true exactly when a conflict is blocking"
            )

        output = data.get("outputExpectations")

        return cls(
            version=data.get("version", SCHEMA_VERSION),
            primary_goal=data["primaryGoal"],
            task_type=data.get("taskType"),
            audience=data.get("audience"),
            domain=data.get("domain"),
            constraints=ConstraintSet(
                hard=_constraints_of_type(constraints, "hard"),
                soft=_constraints_of_type(constraints, "soft"),
            ),
            output_expectations=OutputExpectation.from_dict(output) if output is not None else None,
            conflicts=conflicts,
            assumptions=tuple(require_list(data.get("assumptions", []), "Intent.assumptions", str)),
            requires_clarification=requires_clarification,
            raw_input=data["rawInput"],
        )

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    @property
    def blocking_conflicts(self) -> list[Conflict]:
        return [c for c in self.conflicts if c.is_blocking]

    def to_dict(self) -> dict:
        """
        Serialize to the camelCase wire format.

        Returns:
            JSON-compatible dict (tuples become lists)
        """
        return {
            "version": self.version,
            "primaryGoal": self.primary_goal,
            "taskType": self.task_type,
            "audience": self.audience,
            "domain": self.domain,
            "constraints": self.constraints.to_dict(),
            "outputExpectations": (
                self.output_expectations.to_dict() if self.output_expectations else None
            ),
            "conflicts": [c.to_dict() for c in self.conflicts],
            "requiresClarification": self.requires_clarification,
            "rawInput": self.raw_input,
            "assumptions": list(self.assumptions),
        }
