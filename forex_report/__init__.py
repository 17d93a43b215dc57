"""Foreign-exchange rate report: fetch, average, and export."""

__version__ = "0.1.0"
