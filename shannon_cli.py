#!/usr/bin/env python3
"""
Shannon CLI - block entropy chart and edge report for any file.
"""
import argparse
import os
import sys
from colorama import Fore, Style, init

from shannon.analyzer import EntropyAnalyzer
from shannon.config import (
    DEFAULT_BLOCK_SIZE, DEFAULT_WIDTH, DEFAULT_HEIGHT,
    DEFAULT_HIGH_THRESHOLD, DEFAULT_LOW_THRESHOLD, DEFAULT_WORKERS,
    resolve_thresholds
)
from shannon.chart import check_chart_size, check_y_max
from shannon.core import EdgeType, InvalidConfiguration, check_workers, get_entropy_color
from shannon.parsing import STDIN_PATH
from shannon.reporting import format_summary, format_chart, format_edge_table

init()


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="shannon",
        description="Shannon - block entropy chart and edge detector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shannon firmware.bin
  shannon sample.exe --block-size 256 --width 120 --height 30
  shannon packed.dll --high 7.2 --low 6.0 --absolute-thresholds --no-plot
  cat dump.raw | shannon - --report json --output dump.json
        """
    )

    parser.add_argument('input_file', help="File to analyze ('-' reads standard input)")
    parser.add_argument('--block-size', '-b', type=int, default=DEFAULT_BLOCK_SIZE,
                        help=f'Bytes per block (default: {DEFAULT_BLOCK_SIZE})')
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                        help=f'Chart width in columns (default: {DEFAULT_WIDTH})')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                        help=f'Chart height in rows (default: {DEFAULT_HEIGHT})')
    parser.add_argument('--y-max', '-y', type=float, default=None,
                        help='Top of the chart scale (default: highest block entropy)')
    parser.add_argument('--high', type=float, default=DEFAULT_HIGH_THRESHOLD,
                        help=f'Rising edge threshold as a fraction of 8 bits/byte, '
                             f'or bits/byte with --absolute-thresholds (default: {DEFAULT_HIGH_THRESHOLD})')
    parser.add_argument('--low', type=float, default=DEFAULT_LOW_THRESHOLD,
                        help=f'Falling edge threshold as a fraction of 8 bits/byte, '
                             f'or bits/byte with --absolute-thresholds (default: {DEFAULT_LOW_THRESHOLD})')
    parser.add_argument('--absolute-thresholds', action='store_true',
                        help='Treat --high/--low as bits/byte instead of fractions of 8')
    parser.add_argument('--workers', type=int, default=DEFAULT_WORKERS,
                        help=f'Threads used to measure blocks (default: {DEFAULT_WORKERS})')
    parser.add_argument('--stream', action='store_true',
                        help='Read the input block by block instead of all at once')
    parser.add_argument('--no-plot', action='store_true', help='Do not draw the chart')
    parser.add_argument('--no-summary', action='store_true', help='Do not print the summary line')
    parser.add_argument('--no-table', action='store_true', help='Do not print the edge table')
    parser.add_argument(
        '--report', '-r',
        choices=['text', 'json'],
        default='text',
        help='Report format (default: text)'
    )
    parser.add_argument('--output', '-o', help='Save report to file (default: print to console)')
    parser.add_argument('--plot-image', help='Also save the chart as an image (e.g. entropy.png)')
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show detailed progress information'
    )
    return parser


def print_console_report(analyzer, chart, args):
    """Print summary, chart and edge table with colors."""
    results = analyzer.results

    if not args.no_summary:
        color = get_entropy_color(results['summary']['max_entropy'])
        print(f"{color}{format_summary(results)}{Style.RESET_ALL}")

    if chart is not None:
        print(format_chart(chart, results['summary']['block_count']))

    if not args.no_table:
        thresholds = results['thresholds']
        print(f"\n{Fore.CYAN}=== EDGES (high={thresholds.high:.2f}, low={thresholds.low:.2f}) ==={Style.RESET_ALL}")
        table = format_edge_table(results['edges'], results['block_size']).splitlines()
        if not results['edges']:
            print(table[0])
            return
        print("\n".join(table[:2]))
        for edge, row in zip(results['edges'], table[2:]):
            color = Fore.RED if edge.edge_type is EdgeType.RISING else Fore.GREEN
            print(f"{color}{row}{Style.RESET_ALL}")


def run(args):
    if args.input_file != STDIN_PATH and not os.path.exists(args.input_file):
        print(f"{Fore.RED}[!] Error: File not found: {args.input_file}{Style.RESET_ALL}")
        return 1

    # the JSON report has no chart in it
    draw_chart = not args.no_plot and args.report == 'text'

    try:
        check_workers(args.workers)
        check_y_max(args.y_max)
        if draw_chart:
            check_chart_size(args.width, args.height)
    except InvalidConfiguration as e:
        print(f"{Fore.RED}[!] Invalid configuration: {e}{Style.RESET_ALL}")
        return 1

    if not args.absolute_thresholds and max(args.high, args.low) > 1.0:
        print(f"{Fore.YELLOW}[!] Warning: thresholds are fractions of 8 bits/byte; "
              f"use --absolute-thresholds for bits/byte values{Style.RESET_ALL}")

    thresholds = resolve_thresholds(args.high, args.low, absolute=args.absolute_thresholds)
    analyzer = EntropyAnalyzer(
        args.input_file,
        block_size=args.block_size,
        thresholds=thresholds,
        workers=args.workers,
        stream=args.stream,
        verbose=args.verbose
    )

    try:
        if not analyzer.run_full_analysis():
            print(f"{Fore.RED}[!] Analysis failed{Style.RESET_ALL}")
            return 1
        chart = None
        if draw_chart:
            chart = analyzer.render_chart(args.width, args.height, args.y_max)
    except InvalidConfiguration as e:
        print(f"{Fore.RED}[!] Invalid configuration: {e}{Style.RESET_ALL}")
        return 1

    if args.output:
        if args.verbose:
            print(f"{Fore.CYAN}[*] Saving {args.report} report to: {args.output}{Style.RESET_ALL}")
        if not analyzer.save_report(
            args.output, args.report, chart=chart,
            show_summary=not args.no_summary, show_table=not args.no_table
        ):
            print(f"{Fore.RED}[!] Failed to save report{Style.RESET_ALL}")
            return 1
        if args.verbose:
            print(f"{Fore.GREEN}[+] Report saved successfully!{Style.RESET_ALL}")
    elif args.report == 'json':
        print(analyzer.generate_report('json'))
    else:
        print_console_report(analyzer, chart, args)

    if args.plot_image:
        if not analyzer.save_plot(args.plot_image, args.y_max):
            print(f"{Fore.RED}[!] Failed to save plot image{Style.RESET_ALL}")
            return 1
        if args.verbose:
            print(f"{Fore.GREEN}[+] Plot saved to: {args.plot_image}{Style.RESET_ALL}")

    return 0


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}[!] Analysis interrupted by user{Style.RESET_ALL}")
        return 0


if __name__ == '__main__':
    sys.exit(main())
