"""Chart rendering for entropy sequences."""

from .renderer import (
    ChartGrid,
    FILL_MARKER,
    check_chart_size,
    check_y_max,
    bar_height,
    bucket_bounds,
    bucket_columns,
    render
)
from .image import build_entropy_figure, save_entropy_plot

__all__ = [
    'ChartGrid',
    'FILL_MARKER',
    'check_chart_size',
    'check_y_max',
    'bar_height',
    'bucket_bounds',
    'bucket_columns',
    'render',
    'build_entropy_figure',
    'save_entropy_plot'
]
