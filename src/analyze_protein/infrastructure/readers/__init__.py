from .pdb_atom_reader import (
    PDBAtomReader,
    is_atom_record,
    parse_atom_record,
    parse_coordinate,
    read_atom_records,
)

__all__ = [
    "PDBAtomReader",
    "is_atom_record",
    "parse_atom_record",
    "parse_coordinate",
    "read_atom_records",
]
