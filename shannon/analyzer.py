"""
Main analyzer that coordinates scanning, edge detection and reporting.
"""
import hashlib
import numpy as np
from colorama import Fore, Style

from shannon.config import DEFAULT_BLOCK_SIZE, DEFAULT_THRESHOLDS, DEFAULT_WORKERS
from shannon.parsing import (
    read_input, open_input, get_basic_info, calculate_file_hashes, STDIN_PATH
)
from shannon.core import (
    entropy_from_histogram, byte_histogram, check_workers, scan, scan_stream,
    detect_edges, pair_regions
)
from shannon.chart import render, save_entropy_plot
from shannon.reporting import generate_text_report, generate_json_report, save_report


class _HashingReader:
    """Wraps a binary stream, hashing and counting bytes as they are read."""

    def __init__(self, stream):
        self.stream = stream
        self.size = 0
        self.counts = np.zeros(256, dtype=np.int64)
        self.hashers = {
            'md5': hashlib.md5(),
            'sha1': hashlib.sha1(),
            'sha256': hashlib.sha256()
        }

    def read(self, size=-1):
        chunk = self.stream.read(size)
        if chunk:
            self.size += len(chunk)
            self.counts += byte_histogram(chunk)
            for hasher in self.hashers.values():
                hasher.update(chunk)
        return chunk

    def hexdigests(self):
        return {name: hasher.hexdigest() for name, hasher in self.hashers.items()}


class EntropyAnalyzer:
    """Coordinates all analysis tasks for one input."""

    def __init__(self, file_path, block_size=DEFAULT_BLOCK_SIZE, thresholds=None,
                 workers=DEFAULT_WORKERS, stream=False, verbose=False):
        self.file_path = file_path
        self.block_size = block_size
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.workers = workers
        self.stream = stream
        self.verbose = verbose
        self._file_counts = np.zeros(256, dtype=np.int64)

        # Results storage
        self.results = {
            'basic_info': {},
            'file_hashes': {},
            'block_size': block_size,
            'blocks': [],
            'thresholds': self.thresholds,
            'edges': [],
            'regions': [],
            'summary': {}
        }

    def _status(self, message, color=Fore.GREEN):
        if self.verbose:
            print(f"{color}{message}{Style.RESET_ALL}")

    def run_full_analysis(self):
        """Execute all analysis steps. Returns False if the input can't be read."""
        self._status(f"[*] Starting analysis of {self.file_path}")

        if self.stream:
            if not self.scan_streaming():
                return False
        else:
            data = read_input(self.file_path)
            if data is None:
                return False
            self.analyze_basic_info(data)
            self.scan_blocks(data)

        self.detect_edges()
        self.summarize()

        self._status("[+] Analysis complete!")
        return True

    def analyze_basic_info(self, data):
        """Record name, size, hashes and whole-input entropy."""
        self.results['basic_info'] = get_basic_info(self.file_path, len(data))
        self.results['file_hashes'] = calculate_file_hashes(data)
        self._file_counts = byte_histogram(data)

    def scan_blocks(self, data):
        """Compute per-block entropy over an in-memory buffer."""
        self._status(f"[*] Scanning {len(data)} bytes in blocks of {self.block_size}", Fore.CYAN)
        self.results['blocks'] = scan(data, self.block_size, workers=self.workers)

    def scan_streaming(self):
        """Compute per-block entropy while reading the input incrementally."""
        self._status(f"[*] Streaming blocks of {self.block_size} bytes", Fore.CYAN)
        check_workers(self.workers)
        try:
            stream = open_input(self.file_path)
        except OSError as e:
            print(f"{Fore.RED}Error reading {self.file_path}: {e}{Style.RESET_ALL}")
            return False

        reader = _HashingReader(stream)
        try:
            self.results['blocks'] = list(scan_stream(reader, self.block_size))
        except OSError as e:
            print(f"{Fore.RED}Error reading {self.file_path}: {e}{Style.RESET_ALL}")
            return False
        finally:
            if self.file_path != STDIN_PATH:
                stream.close()

        self.results['basic_info'] = get_basic_info(self.file_path, reader.size)
        self.results['file_hashes'] = reader.hexdigests()
        self._file_counts = reader.counts
        return True

    def detect_edges(self):
        """Find rising/falling edges with the configured thresholds."""
        if not self.thresholds.is_ordered:
            print(f"{Fore.YELLOW}[!] Warning: high threshold ({self.thresholds.high:.2f}) is below "
                  f"low threshold ({self.thresholds.low:.2f}){Style.RESET_ALL}")
        edges = detect_edges(self.results['blocks'], self.thresholds.high, self.thresholds.low)
        self.results['edges'] = edges
        self.results['regions'] = pair_regions(edges, len(self.results['blocks']))
        self._status(f"[*] Found {len(edges)} edge(s)", Fore.CYAN)

    def summarize(self):
        """Aggregate statistics for the summary line."""
        values = [block.entropy for block in self.results['blocks']]
        file_size = self.results['basic_info'].get('file_size', 0)
        file_entropy = entropy_from_histogram(self._file_counts)

        self.results['summary'] = {
            'block_count': len(values),
            'min_entropy': min(values) if values else 0.0,
            'mean_entropy': sum(values) / len(values) if values else 0.0,
            'max_entropy': max(values) if values else 0.0,
            'file_entropy': file_entropy,
            'total_entropy': file_entropy * file_size
        }

    def render_chart(self, width, height, y_max=None):
        """Render the block entropies onto a character grid."""
        return render(self.results['blocks'], width, height, y_max)

    def generate_report(self, format_type='text', chart=None, show_summary=True, show_table=True):
        """Generate a report in the specified format."""
        if format_type == 'json':
            return generate_json_report(self.results)
        return generate_text_report(
            self.results, chart=chart, show_summary=show_summary, show_table=show_table
        )

    def save_report(self, output_path, format_type='text', chart=None, show_summary=True, show_table=True):
        """Save report to a file."""
        return save_report(
            self.results, output_path, format_type,
            chart=chart, show_summary=show_summary, show_table=show_table
        )

    def save_plot(self, output_path, y_max=None):
        """Save the entropy chart as an image."""
        title = f"Block Entropy - {self.results['basic_info'].get('filename', self.file_path)}"
        return save_entropy_plot(
            self.results['blocks'],
            output_path,
            edges=self.results['edges'],
            thresholds=self.thresholds,
            y_max=y_max,
            title=title
        )
