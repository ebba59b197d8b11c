import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

TEST_DATA_DIR = os.path.join(os.path.dirname(__file__), "test_data", "input")


def format_atom_line(
    serial: int,
    x: float,
    y: float,
    z: float,
    name: str = " CA",
    resname: str = "ALA",
    chain: str = "A",
    resseq: int = 1,
    element: str = "C",
    record: str = "ATOM",
) -> str:
    """Build an 80-column PDB coordinate record (without line terminator)."""
    return (
        f"{record:<6}{serial:>5} {name:<4} {resname:>3} {chain:1}{resseq:>4}    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}{1.0:6.2f}{0.0:6.2f}          {element:>2}"
    )


@pytest.fixture
def atom_line():
    return format_atom_line


@pytest.fixture
def data_file():
    """Path of a file shipped in tests/test_data/input."""

    def _path(name: str) -> str:
        return os.path.join(TEST_DATA_DIR, name)

    return _path


@pytest.fixture
def write_pdb(tmp_path):
    """Write lines to a PDB file in a temporary directory and return its path."""

    def _write(lines, name="structure.pdb"):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines))
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """Drop handlers installed by the CLI so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("analyze_protein")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
