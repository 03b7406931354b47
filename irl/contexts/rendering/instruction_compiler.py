"""
Instruction compiling for parsed intents.

Turns an Intent into a natural-language instruction that can be sent to a
model as-is. Unlike the notation, constraint types and conflicts are not
shown; hard and soft constraints are merged into one requirements list.
"""

from irl.contexts.parsing.intent_data_structure import Intent

LENGTH_PHRASES = {
    "short": "Keep the response concise",
    "medium": "Provide a balanced, moderate-length response",
    "long": "Provide a comprehensive, detailed response",
}


def _context_sentence(intent: Intent) -> str | None:
    parts = []
    if intent.audience:
        parts.append(f"Target audience: {intent.audience}")
    if intent.domain:
        parts.append(f"Domain: {intent.domain}")
    return ". ".join(parts) + "." if parts else None


def _requirements_block(intent: Intent) -> str | None:
    texts = intent.constraints.texts()
    if not texts:
        return None
    return "\n".join(["Requirements:"] + [f"- {text}" for text in texts])


def _output_sentence(intent: Intent) -> str | None:
    expectations = intent.output_expectations
    if expectations is None:
        return None

    parts = []
    # "any" has no phrase
    if expectations.length in LENGTH_PHRASES:
        parts.append(LENGTH_PHRASES[expectations.length])
    if expectations.format:
        parts.append(f"Format the output as {expectations.format}")
    if expectations.structure:
        parts.append(f"Include: {', '.join(expectations.structure)}")

    return ". ".join(parts) + "." if parts else None


def compile_instruction(intent: Intent) -> str:
    """
    Compile an Intent into a ready-to-send instruction paragraph.

    Sections (goal, context, requirements, output) are separated by blank
    lines; empty sections are skipped.

    Args:
        intent: Intent to compile

    Returns:
        Trimmed instruction text
    """
    sections = [
        intent.primary_goal,
        _context_sentence(intent),
        _requirements_block(intent),
        _output_sentence(intent),
    ]
    return "\n\n".join(section for section in sections if section is not None).strip()
