"""Infrastructure layer: structure file readers and result writers."""

from .readers.pdb_atom_reader import PDBAtomReader
from .writers.summary_writer import save_statistics_to_csv

__all__ = [
    "PDBAtomReader",
    "save_statistics_to_csv",
]
