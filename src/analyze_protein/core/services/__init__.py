"""Core business logic services."""

from .atom_record_processor import AtomRecordProcessor

__all__ = [
    "AtomRecordProcessor",
]
