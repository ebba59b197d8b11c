# src/analyze_protein/infrastructure/readers/pdb_atom_reader.py
"""Reader for ATOM records of PDB-style structure files.

Only the coordinate columns of ``ATOM`` records are used. Each coordinate is
an 8-character field; x, y and z start at 0-based columns 30, 38 and 46.
"""

import logging
import math
import re
from typing import Iterable, Optional, Tuple

from ...core.domain.exceptions import (
    CoordinateParseError,
    EmptyFileError,
    FileOpenError,
    MalformedRecordError,
)
from ...core.domain.models.atom import AtomCollection, AtomCoordinate

logger = logging.getLogger(__name__)

ATOM_RECORD_PREFIX = "ATOM  "
MIN_RECORD_LENGTH = 60
COORDINATE_WIDTH = 8
COORDINATE_OFFSETS: Tuple[int, int, int] = (30, 38, 46)
DECIMAL_PATTERN = re.compile(
    r"(?P<mantissa>[+-]?(?:\d+\.?\d*|\.\d+))(?:[eE][+-]?\d+)?",
    re.ASCII,
)

# Single-byte encoding so character offsets equal byte offsets.
PDB_ENCODING = "latin-1"


def is_atom_record(line: str) -> bool:
    """Check whether a raw line is an atom record (exact, case-sensitive prefix)."""
    return line.startswith(ATOM_RECORD_PREFIX)


def parse_coordinate(
    field: str, path: Optional[str] = None, line_number: Optional[int] = None
) -> float:
    """
    Convert one fixed-width coordinate field to a float.

    Args:
        field: Raw field text, surrounding whitespace allowed
        path: File the field came from, for error reporting
        line_number: 1-based line number, for error reporting

    Returns:
        Coordinate value

    Raises:
        CoordinateParseError: If the field is blank, not plain decimal
            notation, or overflows or underflows
    """
    match = DECIMAL_PATTERN.fullmatch(field.strip())
    if match is None:
        raise CoordinateParseError(
            f"Error in coordinate conversion {field}",
            path=path,
            line_number=line_number,
        )

    value = float(match.group(0))
    # Overflow gives inf; underflow gives 0.0 from a nonzero mantissa.
    underflow = value == 0.0 and any(c in "123456789" for c in match.group("mantissa"))
    if not math.isfinite(value) or underflow:
        raise CoordinateParseError(
            f"Error in coordinate conversion {field}",
            path=path,
            line_number=line_number,
        )
    return value


def parse_atom_record(
    line: str, path: Optional[str] = None, line_number: Optional[int] = None
) -> AtomCoordinate:
    """
    Extract the x, y, z coordinates from an atom record.

    Args:
        line: Line already classified by ``is_atom_record``; a trailing line
            terminator is ignored
        path: File the line came from, for error reporting
        line_number: 1-based line number, for error reporting

    Returns:
        Parsed coordinate

    Raises:
        MalformedRecordError: If the record is 60 characters or shorter
        CoordinateParseError: If a coordinate field cannot be converted
    """
    record = line.rstrip("\r\n")
    if len(record) <= MIN_RECORD_LENGTH:
        raise MalformedRecordError(
            f"ATOM line is too short {len(record)} characters",
            path=path,
            line_number=line_number,
        )

    x, y, z = (
        parse_coordinate(
            record[offset : offset + COORDINATE_WIDTH], path, line_number
        )
        for offset in COORDINATE_OFFSETS
    )
    return AtomCoordinate(x, y, z)


def read_atom_records(
    lines: Iterable[str],
    source: Optional[str] = None,
    max_atoms: Optional[int] = None,
) -> AtomCollection:
    """
    Collect the coordinates of every atom record in a sequence of lines.

    Args:
        lines: Raw text lines, e.g. an open file
        source: Name of the input, stored on the collection
        max_atoms: Optional upper bound on the number of atom records

    Returns:
        Atom collection in input order; may be empty

    Raises:
        MalformedRecordError: On a short record or when ``max_atoms`` is exceeded
        CoordinateParseError: On an unparsable coordinate field
    """
    atoms = AtomCollection(source=source)
    line_count = 0

    for line_number, line in enumerate(lines, start=1):
        line_count = line_number
        if not is_atom_record(line):
            continue
        if max_atoms is not None and len(atoms) >= max_atoms:
            raise MalformedRecordError(
                f"More than {max_atoms} atoms in the file {source}",
                path=source,
                line_number=line_number,
            )
        atoms.append(parse_atom_record(line, source, line_number))

    logger.debug(f"Read {len(atoms)} atom records from {line_count} lines of {source}")
    return atoms


class PDBAtomReader:
    """Reads atom coordinates from structure files on disk."""

    def __init__(self, max_atoms: Optional[int] = None):
        """
        Initialize reader.

        Args:
            max_atoms: Optional upper bound on atom records per file
        """
        self.max_atoms = max_atoms

    def read(self, filepath: str) -> AtomCollection:
        """
        Read every atom record of a file.

        Raises:
            FileOpenError: If the file cannot be opened
            EmptyFileError: If reading fails before end of file
            MalformedRecordError: On a short record or too many atoms
            CoordinateParseError: On an unparsable coordinate field
        """
        try:
            handle = open(filepath, "r", encoding=PDB_ENCODING)
        except OSError as e:
            raise FileOpenError(f"Error opening file: {filepath}", path=filepath) from e

        with handle:
            try:
                return read_atom_records(handle, source=filepath, max_atoms=self.max_atoms)
            except OSError as e:
                raise EmptyFileError(
                    f"Error - 0 atoms were found in the file {filepath}",
                    path=filepath,
                ) from e
