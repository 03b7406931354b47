"""
Component data structures for parsed intents.

Leaf records shared by the extractors, the conflict detector and the
Intent record itself. Each record converts to and from the camelCase
wire format used by downstream consumers.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from irl.contexts.parsing.exceptions import InvalidIntentStructureError

ConstraintType = Literal["hard", "soft"]
ConflictType = Literal["constraint", "goal", "output"]
ConflictSeverity = Literal["warning", "blocking"]
OutputLength = Literal["short", "medium", "long", "any"]

CONSTRAINT_TYPES = ("hard", "soft")
CONFLICT_TYPES = ("constraint", "goal", "output")
CONFLICT_SEVERITIES = ("warning", "blocking")
OUTPUT_LENGTHS = ("short", "medium", "long", "any")


def _require(data: dict, key: str, record: str):
    if not isinstance(data, dict):
        raise InvalidIntentStructureError(f"{record} must be a mapping, got {type(data).__name__}")
    if key not in data:
        raise InvalidIntentStructureError(f"{record} is missing required field '{key}'")
    return data[key]


def require_list(value, field_name: str, item_type: type | None = None) -> list:
    """Check that a wire field holds a list, optionally of item_type."""
    if not isinstance(value, (list, tuple)):
        raise InvalidIntentStructureError(f"{field_name} must be a list, got {type(value).__name__}")
    if item_type is not None:
        for item in value:
            if not isinstance(item, item_type):
                raise InvalidIntentStructureError(
                    f"{field_name} items must be {item_type.__name__}, got {type(item).__name__}"
                )
    return value


def _require_choice(data: dict, key: str, record: str, choices: tuple) -> str:
    value = _require(data, key, record)
    if value not in choices:
        raise InvalidIntentStructureError(
            f"{record}.{key} must be one of {', '.join(choices)}, got {value!r}"
        )
    return value


@dataclass(frozen=True)
class Constraint:
    """A requirement phrase extracted from the input."""

    text: str
    type: ConstraintType

    def to_dict(self) -> dict:
        return {"text": self.text, "type": self.type}

    @classmethod
    def from_dict(cls, data: dict) -> "Constraint":
        return cls(
            text=str(_require(data, "text", "Constraint")),
            type=_require_choice(data, "type", "Constraint", CONSTRAINT_TYPES),
        )


@dataclass(frozen=True)
class Conflict:
    """
    A pair of contradictory descriptors found in the input.

    Attributes:
        type: What the contradiction affects ("constraint", "goal" or "output")
        description: Human-readable explanation
        severity: "blocking" conflicts require clarification before use
        terms: The two literal descriptor words that triggered it
    """

    type: ConflictType
    description: str
    severity: ConflictSeverity
    terms: tuple[str, str]

    @property
    def is_blocking(self) -> bool:
        return self.severity == "blocking"

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "description": self.description,
            "severity": self.severity,
            "terms": list(self.terms),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Conflict":
        terms = _require(data, "terms", "Conflict")
        if not isinstance(terms, (list, tuple)) or len(terms) != 2:
            raise InvalidIntentStructureError(f"Conflict.terms must be a pair, got {terms!r}")
        return cls(
            type=_require_choice(data, "type", "Conflict", CONFLICT_TYPES),
            description=str(_require(data, "description", "Conflict")),
            severity=_require_choice(data, "severity", "Conflict", CONFLICT_SEVERITIES),
            terms=(str(terms[0]), str(terms[1])),
        )


@dataclass(frozen=True)
class OutputExpectation:
    """Length, format and structure signals for the requested output."""

    length: Optional[OutputLength] = None
    format: Optional[str] = None
    structure: Optional[tuple[str, ...]] = None

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "format": self.format,
            "structure": list(self.structure) if self.structure is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OutputExpectation":
        length = _require(data, "length", "OutputExpectation")
        if length is not None and length not in OUTPUT_LENGTHS:
            raise InvalidIntentStructureError(
                f"OutputExpectation.length must be one of {', '.join(OUTPUT_LENGTHS)}, got {length!r}"
            )
        structure = _require(data, "structure", "OutputExpectation")
        return cls(
            length=length,
            format=_require(data, "format", "OutputExpectation"),
            structure=(
                tuple(require_list(structure, "OutputExpectation.structure", str))
                if structure is not None
                else None
            ),
        )
