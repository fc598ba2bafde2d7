"""Format frames into a text table for print.

the `tabulate` function takes a :class:`framejoin.frame.Frame` and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
It's convenient to inspect the result of a join.

Example:

    >>> from framejoin.frame import Frame
    >>> frame = Frame.from_pydict({
    ...     "Time": [1, 2, 3],
    ...     "host": ["web-1", "web-1", None],
    ...     "load": [0.5, 0.72, 0.8],
    ... })
    >>> print(tabulate(frame))
    Time | host  | load
    ---- | ----- | ----
    1    | web-1 | 0.50
    2    | web-1 | 0.72
    3    |       | 0.80
"""

from typing import Any

from ..frame import Frame


def tabulate(frame: Frame, max_rows: int = 20) -> str:
    """Format a Frame into a text table.

    Will produce a string like::

        Time | cpu  | mem
        ---- | ---- | ---
        1    | 0.50 | 512
        2    | 0.70 | 640

    Fields shorter than the frame are displayed as empty cells.
    """
    cols = frame.field_names
    rows = [
        [
            format_value(field.values[idx]) if idx < len(field.values) else ""
            for field in frame.fields
        ]
        for idx in range(min(frame.length, max_rows))
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if frame.length > max_rows:
        table += f"\n... and {frame.length - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    print ``None`` as an empty cell and truncate long strings.
    """
    if v is None:
        return ""
    elif isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
