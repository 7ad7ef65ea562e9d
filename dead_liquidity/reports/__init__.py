"""Report sinks."""
from .csv_writer import CsvReportWriter

__all__ = ["CsvReportWriter"]
