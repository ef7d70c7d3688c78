"""
Creates analysis reports in different formats (text, JSON).
"""
import json
from datetime import datetime


def format_summary(analysis_results):
    """One line describing the input and its entropy statistics."""
    info = analysis_results['basic_info']
    summary = analysis_results['summary']
    return (
        f"{info.get('filename', '?')}: {info.get('file_size', 0)} bytes, "
        f"{summary.get('block_count', 0)} block(s) of {analysis_results['block_size']} bytes, "
        f"entropy min={summary.get('min_entropy', 0.0):.3f} "
        f"mean={summary.get('mean_entropy', 0.0):.3f} "
        f"max={summary.get('max_entropy', 0.0):.3f}, "
        f"file={summary.get('file_entropy', 0.0):.3f} bits/byte, "
        f"total={summary.get('total_entropy', 0.0):.1f} bits"
    )


def format_chart(grid, block_count=None):
    """Chart lines with a y axis on the left and the block range underneath."""
    top_label = f"{grid.y_max:.2f}"
    bottom_label = "0.00"
    label_width = max(len(top_label), len(bottom_label))

    lines = []
    for row, text in enumerate(grid.lines()):
        if row == 0:
            label = top_label
        elif row == grid.height - 1:
            label = bottom_label
        else:
            label = ""
        lines.append(f"{label:>{label_width}} |{text}")

    lines.append(" " * label_width + " +" + "-" * grid.width)
    if block_count is None:
        block_count = sum(1 for value in grid.columns if value is not None)
    last_block = max(block_count - 1, 0)
    footer = "block 0"
    end = f"block {last_block}"
    gap = max(grid.width - len(footer) - len(end), 1)
    lines.append(" " * (label_width + 2) + footer + " " * gap + end)
    return "\n".join(lines)


def format_edge_table(edges, block_size):
    """Tabulate rising/falling edges with their byte offsets."""
    if not edges:
        return "No edges detected"

    lines = [f"{'Block':>8}  {'Offset':>12}  {'Entropy':>8}  Edge"]
    lines.append("-" * 42)
    for edge in edges:
        offset = edge.block_index * block_size
        lines.append(
            f"{edge.block_index:>8}  0x{offset:010X}  {edge.entropy:>8.3f}  {edge.edge_type.value}"
        )
    return "\n".join(lines)


def generate_text_report(analysis_results, chart=None, show_summary=True, show_table=True):
    """Create a human-readable text report."""
    lines = []

    if show_summary:
        lines.append(format_summary(analysis_results))

    if chart is not None:
        lines.append("")
        lines.append(format_chart(chart, analysis_results['summary'].get('block_count')))

    if show_table:
        thresholds = analysis_results['thresholds']
        lines.append("")
        lines.append(f"=== EDGES (high={thresholds.high:.2f}, low={thresholds.low:.2f}) ===")
        lines.append(format_edge_table(analysis_results['edges'], analysis_results['block_size']))

    return "\n".join(lines).strip("\n")


def _serializable(analysis_results):
    block_size = analysis_results['block_size']
    thresholds = analysis_results['thresholds']
    return {
        'generated': datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
        'basic_info': analysis_results['basic_info'],
        'file_hashes': analysis_results['file_hashes'],
        'block_size': block_size,
        'thresholds': {'high': thresholds.high, 'low': thresholds.low},
        'summary': analysis_results['summary'],
        'blocks': [
            {'index': block.index, 'offset': block.offset, 'length': block.length, 'entropy': block.entropy}
            for block in analysis_results['blocks']
        ],
        'edges': [
            {
                'block_index': edge.block_index,
                'offset': edge.block_index * block_size,
                'type': edge.edge_type.value,
                'entropy': edge.entropy
            }
            for edge in analysis_results['edges']
        ],
        'regions': [
            {'start_block': start, 'end_block': end}
            for start, end in analysis_results['regions']
        ]
    }


def generate_json_report(analysis_results):
    """Create a JSON report with all the data."""
    return json.dumps(_serializable(analysis_results), indent=2, default=str)


def save_report(analysis_results, output_path, format_type='text', chart=None,
                show_summary=True, show_table=True):
    """Save a report to a file."""
    try:
        if format_type == 'json':
            content = generate_json_report(analysis_results)
        else:
            content = generate_text_report(
                analysis_results, chart=chart, show_summary=show_summary, show_table=show_table
            )

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
            f.write("\n")

        return True
    except OSError as e:
        print(f"Error saving report: {e}")
        return False
