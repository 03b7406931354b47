"""
Rendering Context

Responsibilities:
- Renders an Intent as @-tagged notation
- Compiles an Intent into a natural-language instruction

Owns: Notation format, instruction wording
Never: Extracts or changes intent fields
"""

from irl.contexts.rendering.instruction_compiler import compile_instruction
from irl.contexts.rendering.notation import render_notation, split_notation_sections

__all__ = ["compile_instruction", "render_notation", "split_notation_sections"]
