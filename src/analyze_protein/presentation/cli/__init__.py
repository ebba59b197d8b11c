"""Command-line interface modules."""

from .analyze_protein import main as analyze_protein_main

__all__ = [
    "analyze_protein_main",
]
