"""Text rendering of a grid generation.

Produces a bordered block: a line of dashes above and below, and one ``|``-framed
line per row. Cells are read only through ``ToroidalGrid.alive``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.grid import ToroidalGrid

ALIVE_CHAR = '*'
DEAD_CHAR = ' '


def render(grid: 'ToroidalGrid', alive_char: str = ALIVE_CHAR, dead_char: str = DEAD_CHAR) -> str:
    """Render a grid as a bordered block of text.

    Args:
        grid: Grid to render
        alive_char: Single character used for alive cells
        dead_char: Single character used for dead cells

    Returns:
        Multi-line string ending with a newline; ``height + 2`` lines of
        ``width + 2`` characters each

    Raises:
        ValueError: If a glyph is not exactly one character
    """
    for name, glyph in (("alive_char", alive_char), ("dead_char", dead_char)):
        if len(glyph) != 1:
            raise ValueError(f"{name} must be a single character, got {glyph!r}")

    border = '-' * (grid.width + 2)
    lines = [border]
    for y in range(grid.height):
        row = ''.join(alive_char if grid.alive(x, y) else dead_char for x in range(grid.width))
        lines.append(f"|{row}|")
    lines.append(border)

    return '\n'.join(lines) + '\n'
