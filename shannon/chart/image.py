"""
Saves the block entropy chart as an image file.
"""
from matplotlib.figure import Figure
from colorama import Fore, Style

from shannon.core.edges import EdgeType
from shannon.core.entropy import MAX_ENTROPY


def _bar_colors(values):
    colors = []
    for value in values:
        if value > 7.5:
            colors.append('red')
        elif value > 6.5:
            colors.append('orange')
        else:
            colors.append('green')
    return colors


def build_entropy_figure(sequence, edges=(), thresholds=None, y_max=None, title="Block Entropy"):
    """Build a matplotlib Figure with one bar per block."""
    indices = [entry[0] for entry in sequence]
    values = [entry[1] for entry in sequence]

    fig = Figure(figsize=(12, 4), dpi=100)
    axes = fig.add_subplot(111)
    axes.bar(indices, values, width=1.0, color=_bar_colors(values), alpha=0.7)

    if thresholds is not None:
        axes.axhline(y=thresholds.high, color='r', linestyle='--', alpha=0.5, label='High threshold')
        axes.axhline(y=thresholds.low, color='y', linestyle='--', alpha=0.5, label='Low threshold')

    for edge in edges:
        color = 'red' if edge.edge_type is EdgeType.RISING else 'blue'
        axes.axvline(x=edge.block_index, color=color, linestyle=':', alpha=0.8)

    top = y_max if y_max is not None and y_max > 0 else MAX_ENTROPY
    axes.set_ylim(0, top * 1.05)
    axes.set_xlabel('Block')
    axes.set_ylabel('Entropy (bits/byte)')
    axes.set_title(title)
    if thresholds is not None:
        axes.legend(loc='lower right')
    fig.tight_layout()
    return fig


def save_entropy_plot(sequence, output_path, edges=(), thresholds=None, y_max=None, title="Block Entropy"):
    """Render the entropy chart to ``output_path`` (format from the extension)."""
    try:
        fig = build_entropy_figure(sequence, edges, thresholds, y_max, title)
        fig.savefig(output_path)
        return True
    except (OSError, ValueError) as e:
        print(f"{Fore.RED}Error saving plot: {e}{Style.RESET_ALL}")
        return False
