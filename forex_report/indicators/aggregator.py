"""Mean exchange rate over an observation series."""

from decimal import ROUND_HALF_UP, Decimal

from forex_report.errors import EmptySeriesError
from forex_report.models import AggregateResult, ObservationSeries


def mean(series: ObservationSeries) -> AggregateResult:
    """
    Arithmetic mean of the series rates.

    Summation is done in Decimal so the result carries no float rounding.

    Raises:
        EmptySeriesError: Series has no observations
    """
    count = len(series)
    if count == 0:
        raise EmptySeriesError(f"No observations for {series.pair.label}")

    total = sum(series.rates(), Decimal(0))
    return AggregateResult(mean=total / count, sample_count=count, pair=series.pair)


def format_rate(value: Decimal, places: int = 4) -> str:
    """Format a rate with a fixed number of decimals for display."""
    quantum = Decimal(1).scaleb(-places)
    return f"{value.quantize(quantum, rounding=ROUND_HALF_UP):f}"
