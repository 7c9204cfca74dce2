"""Documentation comments for tables, columns and enums.

Rendering rules:

- One line becomes ``/** text */``.
- Several lines become a block, one `` * `` prefixed line per input line.
- Enums append a block listing ``VARIANT: description`` for every documented
  variant. When the enum has its own documentation the two read as one
  block: the enum's block stays open and the variant listing continues it.

Every renderer returns a list of lines (without indentation) so callers can
place them inside any text node. Rendering is skipped entirely when
documentation is disabled.
"""

from __future__ import annotations

from collections.abc import Sequence

from supatypes.model.types import EnumType

BLOCK_OPEN = "/**"
BLOCK_LINE = " * "
BLOCK_CLOSE = " */"
CLOSE_TOKEN = "*/"
ESCAPED_CLOSE_TOKEN = "*\\/"


def _escape(line: str) -> str:
    """Keep ``*/`` in the text from closing the comment early."""
    return line.replace(CLOSE_TOKEN, ESCAPED_CLOSE_TOKEN)


def _block_lines(lines: Sequence[str]) -> list[str]:
    return [f"{BLOCK_LINE}{_escape(line)}".rstrip() for line in lines]


def render_documentation(lines: Sequence[str], *, enabled: bool = True) -> list[str]:
    """Render documentation lines as a comment.

    Args:
        lines: Free-text documentation, one entry per line.
        enabled: When False nothing is rendered.

    Returns:
        Comment lines, empty when there is nothing to render.
    """
    if not enabled or not lines:
        return []
    if len(lines) == 1:
        return [f"{BLOCK_OPEN} {_escape(lines[0])}{BLOCK_CLOSE}"]
    return [BLOCK_OPEN, *_block_lines(lines), BLOCK_CLOSE]


def variant_documentation(enum: EnumType) -> list[str]:
    """``NAME: description`` entries for documented variants."""
    return [
        f"{variant.name}: {' '.join(line for line in variant.documentation if line)}"
        for variant in enum.variants
        if variant.documentation
    ]


def render_enum_documentation(enum: EnumType, *, enabled: bool = True) -> list[str]:
    """Render an enum's own documentation followed by its variant listing."""
    if not enabled:
        return []

    variants = variant_documentation(enum)
    if not variants:
        return render_documentation(enum.documentation)

    trailing = [*_block_lines(variants), BLOCK_CLOSE]
    if not enum.documentation:
        return [BLOCK_OPEN, *trailing]
    # Own block stays open; the listing continues it without reopening.
    return [BLOCK_OPEN, *_block_lines(enum.documentation), *trailing]
