"""
Plain-text dump of a Table for logs and test failure messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from lattice import Table
from lattice_types import OutOfBoundsError, Point


@dataclass(frozen=True)
class DumpStyle:
    """Options controlling dump_table output."""

    cell_width: int = 3
    formatter: Callable[[Any], str] = str
    border: bool = True


def dump_table(
    table: Table[Any],
    highlight: Point | None = None,
    style: DumpStyle = DumpStyle(),
) -> str:
    """
    Dump a table as one line of text per row.

    Each cell is formatted with style.formatter and centred in
    style.cell_width characters (longer text is kept whole). A highlighted
    cell gets a white background.

    Args:
        table: The table to dump
        highlight: Optional point to highlight
        style: Formatting options

    Returns:
        The dump, lines joined with newlines

    Raises:
        OutOfBoundsError: If `highlight` is outside the table
    """
    if highlight is not None and highlight not in table:
        raise OutOfBoundsError(table.size, point=highlight)

    lines: list[str] = []
    inner_width = table.cols * style.cell_width

    if style.border:
        lines.append("┌" + "─" * inner_width + "┐")

    for r_idx in range(table.rows):
        line_parts: list[str] = []
        for point in table.size.points_in_row(r_idx):
            content = style.formatter(table[point]).center(style.cell_width)
            if point == highlight:
                content = chalk.bgWhite.black(content)
            line_parts.append(content)
        body = "".join(line_parts)
        lines.append(f"│{body}│" if style.border else body)

    if style.border:
        lines.append("└" + "─" * inner_width + "┘")

    return "\n".join(lines)
