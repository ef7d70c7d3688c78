"""Report generation functionality."""

from .report_generator import (
    format_summary,
    format_chart,
    format_edge_table,
    generate_text_report,
    generate_json_report,
    save_report
)

__all__ = [
    'format_summary',
    'format_chart',
    'format_edge_table',
    'generate_text_report',
    'generate_json_report',
    'save_report'
]
