"""Source excerpts for declarations.

Positions in formatted excerpts are zero-based, matching
:class:`~stylescope.model.SourceRange`.
"""

from __future__ import annotations

from stylescope.model.stylesheet import Declaration, SourceRange

__all__ = ["extract_source", "format_declaration"]


def extract_source(content: str, source_range: SourceRange) -> str:
    """Return the exact text of *content* covered by *source_range*."""
    lines = content.split("\n")
    first, last = source_range.start_line, source_range.end_line

    if source_range.is_single_line:
        return lines[first][source_range.start_column:source_range.end_column]

    parts = [lines[first][source_range.start_column:]]
    parts.extend(lines[first + 1:last])
    parts.append(lines[last][:source_range.end_column])
    return "\n".join(parts)


def format_declaration(declaration: Declaration, content: str) -> str:
    """Render *declaration* as a small rule block for reports.

    Example::

        .legacy {
          display: box
        } (line: 3, col: 2-14)
    """
    rule = extract_source(content, declaration.range)
    r = declaration.range
    if r.is_single_line:
        position = f"line: {r.start_line}, col: {r.start_column}-{r.end_column}"
    else:
        position = (
            f"lines: {r.start_line}-{r.end_line}, "
            f"col: {r.start_column}-{r.end_column}"
        )
    return f"{declaration.selector} {{\n  {rule}\n}} ({position})"
