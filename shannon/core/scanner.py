"""
Splits input into fixed-size blocks and measures the entropy of each one.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple

from shannon.core.entropy import entropy
from shannon.core.errors import InvalidConfiguration


class Block(NamedTuple):
    index: int
    offset: int
    data: memoryview


class BlockEntropy(NamedTuple):
    """One entry of an entropy sequence.

    The first two fields are the block index and its entropy, so an entry
    can stand in wherever an ``(index, entropy)`` pair is expected.
    """
    index: int
    entropy: float
    offset: int = 0
    length: int = 0


def _check_block_size(block_size):
    if isinstance(block_size, bool) or not isinstance(block_size, int):
        raise InvalidConfiguration(f"Block size must be an integer, got {block_size!r}")
    if block_size <= 0:
        raise InvalidConfiguration(f"Block size must be greater than 0, got {block_size}")


def check_workers(workers):
    """Reject worker counts that are not positive integers."""
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise InvalidConfiguration(f"Worker count must be a positive integer, got {workers!r}")


def iter_blocks(data, block_size):
    """Yield contiguous blocks of the buffer; the last one may be shorter."""
    _check_block_size(block_size)
    return _slice_blocks(data, block_size)


def _slice_blocks(data, block_size):
    view = memoryview(data).cast("B")
    for index, offset in enumerate(range(0, len(view), block_size)):
        yield Block(index, offset, view[offset:offset + block_size])


def _measure(block):
    return BlockEntropy(block.index, entropy(block.data), block.offset, len(block.data))


def scan(data, block_size, workers=1):
    """
    Compute the entropy of every block in the buffer.

    Returns a list of BlockEntropy in ascending block order. Blocks are
    independent, so with ``workers > 1`` they are measured on a thread pool
    and collected back in order.
    """
    _check_block_size(block_size)
    check_workers(workers)

    blocks = iter_blocks(data, block_size)
    if workers == 1:
        return [_measure(block) for block in blocks]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_measure, blocks))


def _read_block(stream, block_size):
    # pipes can hand back short reads before EOF
    chunks = []
    remaining = block_size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def scan_stream(stream, block_size):
    """
    Measure block entropy while reading a binary stream.

    Only one block is held in memory at a time. Yields the same values
    ``scan`` gives for the stream's whole contents.
    """
    _check_block_size(block_size)
    return _read_blocks(stream, block_size)


def _read_blocks(stream, block_size):
    index = 0
    offset = 0
    while True:
        chunk = _read_block(stream, block_size)
        if not chunk:
            break
        yield BlockEntropy(index, entropy(chunk), offset, len(chunk))
        index += 1
        offset += len(chunk)
