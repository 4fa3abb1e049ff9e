import re
import sys
from typing import IO, Optional, Sequence

from fstable.formatting import Row

HEADER = ('#', 'name', 'type', 'size', 'modified')

ANSI_REGEX = re.compile(r'\x1b\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    return ANSI_REGEX.sub('', text)


def visual_width(text: str) -> int:
    """Display width of `text`, color sequences excluded.

    Parameters
    ----------
    text : str
        Cell text, possibly containing ANSI color sequences.

    Returns
    -------
    int
        Number of characters left after stripping color sequences.
    """
    return len(strip_ansi(text))


def column_widths(header: Sequence[str], rows: Sequence[Row]) -> list[int]:
    widths = [visual_width(label) for label in header]
    for row in rows:
        for i, cell in enumerate(row.cells()):
            widths[i] = max(widths[i], visual_width(cell))
    return widths


def pad(text: str, width: int) -> str:
    return text + ' ' * (width - visual_width(text))


def border(widths: Sequence[int], left: str, junction: str, right: str) -> str:
    return left + junction.join('─' * (width + 2) for width in widths) + right


def _line(cells: Sequence[str], widths: Sequence[int]) -> str:
    return '│' + ''.join(f' {pad(cell, width)} │' for cell, width in zip(cells, widths))


def render_table(rows: Sequence[Row], header: Sequence[str] = HEADER) -> list[str]:
    """Render rows as a bordered table.

    Widths are measured over the header and every row before any line is
    built.

    Parameters
    ----------
    rows : Sequence[Row]
        Rows in display order.
    header : Sequence[str], default=HEADER
        Column labels.

    Returns
    -------
    list[str]
        Table lines without trailing newlines.
    """
    widths = column_widths(header, rows)
    lines = [border(widths, '╭', '┬', '╮'), _line(header, widths), border(widths, '├', '┼', '┤')]
    lines.extend(_line(row.cells(), widths) for row in rows)
    lines.append(border(widths, '╰', '┴', '╯'))
    return lines


def print_table(
    rows: Sequence[Row],
    header: Sequence[str] = HEADER,
    file: Optional[IO[str]] = None
) -> None:
    if file is None:
        file = sys.stdout
    file.write('\n'.join(render_table(rows, header)) + '\n')
    file.flush()
