from .summary_writer import save_statistics_to_csv

__all__ = ["save_statistics_to_csv"]
