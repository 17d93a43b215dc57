"""Data models for exchange-rate observations and reports."""

from forex_report.models.market_data import (
    AggregateResult,
    CurrencyPair,
    Observation,
    ObservationSeries,
    QueryParameters,
    Report,
)

__all__ = [
    "AggregateResult",
    "CurrencyPair",
    "Observation",
    "ObservationSeries",
    "QueryParameters",
    "Report",
]
