"""
Intent normalization pipeline.

Entry point that runs the parsing context on raw text and hands the frozen
Intent to both renderers. Stateless: every call builds a fresh Intent and
shares only the read-only pattern tables.
"""

from dataclasses import dataclass

from irl.contexts.parsing.intent_data_structure import Intent
from irl.contexts.parsing.logger import log_intent_summary
from irl.contexts.rendering.instruction_compiler import compile_instruction
from irl.contexts.rendering.notation import render_notation


@dataclass(frozen=True)
class NormalizationResult:
    """Intent plus its two textual encodings."""

    intent: Intent
    notation: str
    compiled_text: str

    def to_dict(self) -> dict:
        """Response body shape: {"intent", "irl", "compiled"}."""
        return {
            "intent": self.intent.to_dict(),
            "irl": self.notation,
            "compiled": self.compiled_text,
        }


def normalize(raw_input: str) -> NormalizationResult:
    """
    Normalize a raw natural-language request.

    Never raises for string input; empty or unstructured text yields a
    minimal Intent whose goal is the trimmed input.

    Args:
        raw_input: Request text as typed by the user

    Returns:
        NormalizationResult with intent, notation and compiled instruction
    """
    intent = Intent.from_text(raw_input)
    log_intent_summary(intent)

    return NormalizationResult(
        intent=intent,
        notation=render_notation(intent),
        compiled_text=compile_instruction(intent),
    )
