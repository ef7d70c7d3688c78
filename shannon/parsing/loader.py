"""
Reads the bytes to analyze from a file or standard input.
"""
import hashlib
import os
import sys
from colorama import Fore, Style, init

init()


STDIN_PATH = "-"


def read_input(file_path):
    """Read the whole input into memory. Returns None if it can't be read."""
    try:
        if file_path == STDIN_PATH:
            return sys.stdin.buffer.read()
        with open(file_path, 'rb') as f:
            return f.read()
    except OSError as e:
        print(f"{Fore.RED}Error reading {file_path}: {e}{Style.RESET_ALL}")
        return None


def open_input(file_path):
    """Binary stream for block-by-block reading."""
    if file_path == STDIN_PATH:
        return sys.stdin.buffer
    return open(file_path, 'rb')


def get_basic_info(file_path, file_size):
    """Name and size of what was analyzed."""
    return {
        'filename': '<stdin>' if file_path == STDIN_PATH else os.path.basename(file_path),
        'file_size': file_size
    }


def calculate_file_hashes(data):
    """Generate hash values for the input."""
    return {
        'md5': hashlib.md5(data).hexdigest(),
        'sha1': hashlib.sha1(data).hexdigest(),
        'sha256': hashlib.sha256(data).hexdigest()
    }
