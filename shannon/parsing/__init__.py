"""Input loading functionality."""

from .loader import (
    STDIN_PATH,
    read_input,
    open_input,
    get_basic_info,
    calculate_file_hashes
)

__all__ = [
    'STDIN_PATH',
    'read_input',
    'open_input',
    'get_basic_info',
    'calculate_file_hashes'
]
