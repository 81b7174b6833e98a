"""Box-drawing table rendering.

Everything here is a pure function of its arguments: a list of records and the
column widths in, a list of printable terminal rows out. Widths, padding and
clipping are all counted in code points.
"""

HEADER_GLYPHS = ("┏", "┳", "┓")
SEPARATOR_GLYPHS = ("┣", "╋", "┫")
FOOTER_GLYPHS = ("┗", "┻", "┛")
FILL = "━"
VERTICAL = "┃"


def table_width(widths) -> int:
    """Length of an unclipped table row: every column plus its borders."""
    return sum(widths) + len(widths) + 1


def column_bounds(widths):
    """Start offset of every column's left border within a table row."""
    bounds = []
    pos = 0
    for cw in widths:
        bounds.append(pos)
        pos += cw + 1
    return bounds


def border_line(widths, left, junction, right) -> str:
    if not widths:
        return left + right
    inner = junction.join(FILL * cw for cw in widths)
    return f"{left}{inner}{right}"


def header_line(widths) -> str:
    return border_line(widths, *HEADER_GLYPHS)


def separator_line(widths) -> str:
    return border_line(widths, *SEPARATOR_GLYPHS)


def footer_line(widths) -> str:
    return border_line(widths, *FOOTER_GLYPHS)


def pad_field(value: str, width: int) -> str:
    # fields sit flush right, leading spaces fill the rest
    return value.rjust(width)


def data_line(record, widths) -> str:
    cells = []
    for idx, cw in enumerate(widths):
        value = record[idx] if idx < len(record) else ""
        cells.append(pad_field(value, cw))
    return VERTICAL + VERTICAL.join(cells) + VERTICAL


def clip(line: str, shift: int, width: int) -> str:
    shift = max(0, shift)
    width = max(0, width)
    return line[shift : shift + width]


def build_lines(records, widths, viewport_height: int) -> list[str]:
    """Compose the unclipped table rows that fit in ``viewport_height``.

    A record is only added when its data row and the border under it both
    fit, and the last border is always the footer.
    """
    lines = [header_line(widths)]
    separator = separator_line(widths)
    for record in records:
        if len(lines) + 2 > viewport_height:
            break
        lines.append(data_line(record, widths))
        lines.append(separator)

    footer = footer_line(widths)
    if len(lines) > 1:
        lines[-1] = footer
    else:
        lines.append(footer)
    lines = lines[: max(0, viewport_height)]
    if lines:
        # a one-row viewport still shows a closed frame
        lines[-1] = footer
    return lines


def render(records, widths, viewport_width: int, viewport_height: int, shift: int = 0) -> list[str]:
    lines = build_lines(records, widths, viewport_height)
    return [clip(line, shift, viewport_width) for line in lines]
