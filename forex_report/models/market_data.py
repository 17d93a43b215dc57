"""Data models for exchange-rate observations."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterator

import pandas as pd


REPORT_COLUMNS = ["Date", "Value", "Currency"]


@dataclass(frozen=True)
class CurrencyPair:
    """Ordered (base, target) currency pair."""

    base: str
    target: str

    def __post_init__(self) -> None:
        base = (self.base or "").strip().upper()
        target = (self.target or "").strip().upper()
        if not base or not target:
            raise ValueError("Base and target currency codes must be non-empty")
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "target", target)

    @property
    def series_key(self) -> str:
        """Series name used in the request path and response records."""
        return f"FX{self.base}{self.target}"

    @property
    def label(self) -> str:
        return f"{self.base} to {self.target}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Observation:
    """Single dated exchange-rate sample."""

    date: date
    rate: Decimal
    pair: CurrencyPair

    @property
    def currency(self) -> str:
        return self.pair.label


@dataclass(frozen=True)
class ObservationSeries:
    """Observations for one pair, in the order the API returned them."""

    pair: CurrencyPair
    observations: tuple[Observation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "observations", tuple(self.observations))

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.observations)

    def __getitem__(self, index: int) -> Observation:
        return self.observations[index]

    def rates(self) -> list[Decimal]:
        return [obs.rate for obs in self.observations]

    def to_frame(self) -> pd.DataFrame:
        """
        Tabular view of the series.

        Returns:
            DataFrame with string columns Date, Value and Currency, one row
            per observation in series order
        """
        rows = [
            (obs.date.isoformat(), str(obs.rate), obs.currency)
            for obs in self.observations
        ]
        return pd.DataFrame(rows, columns=REPORT_COLUMNS, dtype=str)


@dataclass(frozen=True)
class AggregateResult:
    """Mean rate over a series."""

    mean: Decimal
    sample_count: int
    pair: CurrencyPair

    def __post_init__(self) -> None:
        if self.sample_count <= 0:
            raise ValueError(
                f"Mean needs at least one observation, got sample count {self.sample_count}"
            )


@dataclass(frozen=True)
class Report:
    """Series plus its aggregate, as handed to the writers."""

    series: ObservationSeries
    aggregate: AggregateResult

    def __post_init__(self) -> None:
        if self.aggregate.pair != self.series.pair:
            raise ValueError(
                f"Aggregate pair {self.aggregate.pair} does not match series pair {self.series.pair}"
            )
        if self.aggregate.sample_count != len(self.series):
            raise ValueError(
                f"Aggregate sample count {self.aggregate.sample_count} "
                f"does not match series length {len(self.series)}"
            )

    @property
    def pair(self) -> CurrencyPair:
        return self.series.pair


@dataclass(frozen=True)
class QueryParameters:
    """Query string for an observations request.

    ``recent_weeks`` is passed through as given; the remote service decides
    whether it is valid.
    """

    recent_weeks: int | str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.recent_weeks is not None:
            params["recent_weeks"] = str(self.recent_weeks)
        params.update({key: str(value) for key, value in self.extra.items()})
        return params
