"""Command-line interfaces and other presentation layer components."""

from .cli.analyze_protein import main as analyze_protein_main

__all__ = [
    "analyze_protein_main",
]
