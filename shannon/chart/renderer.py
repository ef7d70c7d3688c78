"""
Draws an entropy sequence as a bar chart on a fixed character grid.
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional

from shannon.core.errors import InvalidConfiguration


FILL_MARKER = "█"
BLANK = " "


@dataclass
class ChartGrid:
    """Rendered chart: ``rows`` run top to bottom, each ``width`` characters."""
    width: int
    height: int
    y_max: float
    rows: List[List[str]] = field(default_factory=list)
    columns: List[Optional[float]] = field(default_factory=list)
    bar_heights: List[int] = field(default_factory=list)

    def lines(self):
        return ["".join(row) for row in self.rows]

    def __str__(self):
        return "\n".join(self.lines())


def _check_dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"Chart {name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidConfiguration(f"Chart {name} must be greater than 0, got {value}")


def check_y_max(y_max):
    """Reject a chart scale that is not a finite number."""
    if y_max is None:
        return
    if isinstance(y_max, bool) or not isinstance(y_max, (int, float)) or not math.isfinite(y_max):
        raise InvalidConfiguration(f"Chart y_max must be a finite number, got {y_max!r}")


def check_chart_size(width, height):
    """Reject chart dimensions that are not positive integers."""
    _check_dimension("width", width)
    _check_dimension("height", height)


def bucket_bounds(count, width):
    """Split ``count`` blocks into ``width`` contiguous, near-equal buckets."""
    return [(j * count // width, (j + 1) * count // width) for j in range(width)]


def bucket_columns(values, width):
    """
    Map entropy values onto ``width`` columns.

    With no more values than columns, each value gets its own column and the
    rest are None. Otherwise blocks are grouped into buckets and each bucket
    keeps its maximum so short high entropy runs stay visible.
    """
    values = list(values)
    if len(values) <= width:
        return values + [None] * (width - len(values))

    return [max(values[start:end]) for start, end in bucket_bounds(len(values), width)]


def bar_height(value, y_max, height):
    """Rows to fill for one column, rounded half up and clamped to the grid."""
    if value is None or y_max <= 0:
        return 0
    rows = math.floor(value / y_max * height + 0.5)
    return min(max(rows, 0), height)


def render(sequence, width, height, y_max=None, marker=FILL_MARKER):
    """
    Render (index, entropy) pairs into a ``height`` x ``width`` ChartGrid.

    ``y_max`` defaults to the largest entropy in the sequence, or 0.0 for an
    empty one, in which case the chart is blank.
    """
    check_chart_size(width, height)
    check_y_max(y_max)

    values = [entry[1] for entry in sequence]
    if y_max is None:
        y_max = max(values) if values else 0.0

    columns = bucket_columns(values, width)
    heights = [bar_height(value, y_max, height) for value in columns]

    rows = []
    for row in range(height):
        # row 0 is the top line of the chart
        level = height - row
        rows.append([marker if bar >= level else BLANK for bar in heights])

    return ChartGrid(
        width=width,
        height=height,
        y_max=float(y_max),
        rows=rows,
        columns=columns,
        bar_heights=heights,
    )
