"""Read text and CSV files under a directory as entries and pass them to a processor that keeps entries resembling given keywords."""

__version__ = "0.1.0"