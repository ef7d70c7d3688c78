from pathlib import Path

import pytest


BLOCK = 1024
UNIFORM_BLOCK = bytes(range(256)) * (BLOCK // 256)


def layered_bytes():
    """Two zero blocks, two maximum-entropy blocks, two zero blocks."""
    return b"\x00" * (2 * BLOCK) + UNIFORM_BLOCK * 2 + b"\x00" * (2 * BLOCK)


@pytest.fixture()
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.bin"
    path.write_bytes(layered_bytes())
    return path


@pytest.fixture()
def out_dir(tmp_path: Path) -> Path:
    d = tmp_path / "out"
    d.mkdir(parents=True, exist_ok=True)
    return d
