from .benchmarking import PerformanceStats, TimingStats, timer

__all__ = ["PerformanceStats", "TimingStats", "timer"]
