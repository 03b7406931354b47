"""
Notation rendering for parsed intents.

Serializes an Intent into the line-oriented, @-tagged notation:

    @goal Write a backend API guide
    @task generate
    @audience developers
    @domain backend development

    @constraints hard
    - include authentication examples

    @output
    - Length: short

Sections are separated by one blank line and omitted when empty.
Consumers split on blank lines and read the @ marker of each block.
"""

from dataclasses import dataclass

from irl.contexts.parsing.intent_data_structure import Intent


@dataclass(frozen=True)
class NotationMarkers:
    """Section markers, in rendering order."""

    GOAL: str = "@goal"
    TASK: str = "@task"
    AUDIENCE: str = "@audience"
    DOMAIN: str = "@domain"
    HARD_CONSTRAINTS: str = "@constraints hard"
    PREFERENCES: str = "@preferences"
    OUTPUT: str = "@output"
    CONFLICTS: str = "@conflicts"
    ASSUMPTIONS: str = "@assumptions"


SEVERITY_TAGS = {
    "blocking": "[BLOCKING]",
    "warning": "[WARNING]",
}


def _bullets(items) -> list[str]:
    return [f"- {item}" for item in items]


def _render_header(intent: Intent) -> list[str]:
    # Header is one line per marker; a goal spanning lines is flattened
    goal = " ".join(intent.primary_goal.split())
    lines = [f"{NotationMarkers.GOAL} {goal}"]
    if intent.task_type:
        lines.append(f"{NotationMarkers.TASK} {intent.task_type}")
    if intent.audience:
        lines.append(f"{NotationMarkers.AUDIENCE} {intent.audience}")
    if intent.domain:
        lines.append(f"{NotationMarkers.DOMAIN} {intent.domain}")
    return lines


def _render_output(intent: Intent) -> list[str]:
    expectations = intent.output_expectations
    if expectations is None:
        return []

    lines = []
    if expectations.length and expectations.length != "any":
        lines.append(f"- Length: {expectations.length}")
    if expectations.format:
        lines.append(f"- Format: {expectations.format}")
    if expectations.structure:
        lines.append(f"- Structure: {', '.join(expectations.structure)}")

    return [NotationMarkers.OUTPUT] + lines if lines else []


def _render_list_section(marker: str, items: list[str]) -> list[str]:
    if not items:
        return []
    return [marker] + _bullets(items)


def render_notation(intent: Intent) -> str:
    """
    Render an Intent as notation text.

    Pure function of the record: the same Intent always renders to the
    same string.

    Args:
        intent: Intent to render

    Returns:
        Notation text (no trailing newline)
    """
    sections = [
        _render_header(intent),
        _render_list_section(
            NotationMarkers.HARD_CONSTRAINTS, [c.text for c in intent.constraints.hard]
        ),
        _render_list_section(
            NotationMarkers.PREFERENCES, [c.text for c in intent.constraints.soft]
        ),
        _render_output(intent),
        _render_list_section(
            NotationMarkers.CONFLICTS,
            [f"{SEVERITY_TAGS[c.severity]} {c.description}" for c in intent.conflicts],
        ),
        _render_list_section(NotationMarkers.ASSUMPTIONS, list(intent.assumptions)),
    ]

    return "\n\n".join("\n".join(lines) for lines in sections if lines)


def split_notation_sections(notation: str) -> dict[str, list[str]]:
    """
    Split notation text into its @-tagged sections.

    The header block yields one entry per line (e.g., "@goal" -> ["Write X"]).
    List sections yield their marker and the bullet texts without "- ".

    Args:
        notation: Text produced by render_notation()

    Returns:
        Ordered dict of marker to values
    """
    sections: dict[str, list[str]] = {}

    for block in notation.split("\n\n"):
        lines = [line for line in block.split("\n") if line.strip()]
        if not lines:
            continue

        if lines[0].startswith("@") and all(line.startswith("@") for line in lines):
            # Header block: "@marker value" per line
            for line in lines:
                marker, _, value = line.partition(" ")
                sections[marker] = [value]
            continue

        marker = lines[0]
        sections[marker] = [line[2:] if line.startswith("- ") else line for line in lines[1:]]

    return sections
