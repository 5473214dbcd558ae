"""
Shared fixtures for scanning engine tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def app_dir(temp_dir) -> Path:
    """Application directory location (not created yet)."""
    return temp_dir / "app_dir"


@pytest.fixture
def test_tree(temp_dir) -> Path:
    """
    Creates a tree where every file is 4 bytes long:
    - "0000": randoFile, randoFile2, dir1/randoFile, dir1/randoFileOfAnotherName
    - "0001": randoFile1, randoFile3, dir1/randoFile1, dir1/randoFileOfAnotherName3
    - unique: randoFile7, randoFile8, dir1/randoFile9, dir1/randoFileOfAnotherName0
    """
    data_dir = temp_dir / "data"
    (data_dir / "dir1").mkdir(parents=True)

    contents = {
        "randoFile": "0000",
        "randoFile2": "0000",
        "dir1/randoFile": "0000",
        "dir1/randoFileOfAnotherName": "0000",
        "randoFile1": "0001",
        "randoFile3": "0001",
        "dir1/randoFile1": "0001",
        "dir1/randoFileOfAnotherName3": "0001",
        "randoFile7": "0002",
        "randoFile8": "0003",
        "dir1/randoFile9": "0004",
        "dir1/randoFileOfAnotherName0": "0005",
    }
    for name, text in contents.items():
        (data_dir / name).write_text(text)
    return data_dir


@pytest.fixture
def mixed_tree(temp_dir) -> Dict[str, Path]:
    """
    Files of several sizes:
    - dup_a / dup_b / sub/dup_c: 1KB of 'A'
    - same_size: 1KB of 'Z' (size collision, different contents)
    - big_a / big_b: 2KB of 'B'
    - unique: 1500 bytes
    - empty: 0 bytes
    """
    root = temp_dir / "mixed"
    (root / "sub").mkdir(parents=True)
    files = {
        "dup_a": root / "dup_a.txt",
        "dup_b": root / "dup_b.txt",
        "dup_c": root / "sub" / "dup_c.txt",
        "same_size": root / "same_size.txt",
        "big_a": root / "big_a.bin",
        "big_b": root / "sub" / "big_b.bin",
        "unique": root / "unique.txt",
        "empty": root / "empty.txt",
    }
    files["dup_a"].write_bytes(b"A" * 1024)
    files["dup_b"].write_bytes(b"A" * 1024)
    files["dup_c"].write_bytes(b"A" * 1024)
    files["same_size"].write_bytes(b"Z" * 1024)
    files["big_a"].write_bytes(b"B" * 2048)
    files["big_b"].write_bytes(b"B" * 2048)
    files["unique"].write_bytes(b"C" * 1500)
    files["empty"].write_bytes(b"")
    files["root"] = root
    return files
