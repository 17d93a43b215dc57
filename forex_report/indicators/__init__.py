"""Aggregate statistics over observation series."""

from forex_report.indicators.aggregator import mean, format_rate

__all__ = ["mean", "format_rate"]
