"""Exchange-rate observations client."""

import logging
import math
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from forex_report.config import Settings
from forex_report.errors import (
    HttpStatusError,
    MalformedResponseError,
    RemoteValidationError,
    TransportError,
)
from forex_report.models import CurrencyPair, Observation, ObservationSeries, QueryParameters


logger = logging.getLogger(__name__)

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
NUMERIC = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_date(raw: Any) -> date:
    if not isinstance(raw, str) or not ISO_DATE.fullmatch(raw):
        raise ValueError(f"date {raw!r} is not YYYY-MM-DD")
    return date.fromisoformat(raw)


def _parse_rate(raw: Any) -> Decimal:
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise ValueError(f"rate {raw!r} is not numeric")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise ValueError(f"rate {raw!r} is not finite")
    text = raw.strip() if isinstance(raw, str) else str(raw)
    if not NUMERIC.fullmatch(text):
        raise ValueError(f"rate {raw!r} is not numeric")
    try:
        rate = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"rate {raw!r} is not numeric") from None
    if not rate.is_finite():
        raise ValueError(f"rate {raw!r} is not finite")
    return rate


def parse_observations(payload: Any, pair: CurrencyPair) -> ObservationSeries:
    """
    Map a decoded response body to an observation series.

    Args:
        payload: Decoded JSON body of a 2xx response
        pair: Pair the request was made for

    Returns:
        Series in response order

    Raises:
        RemoteValidationError: Body carries an ``error`` field
        MalformedResponseError: Body or any record breaks the schema
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    if "error" in payload:
        error = payload["error"]
        if isinstance(error, dict):
            error = error.get("message", error)
        raise RemoteValidationError(str(error))

    records = payload.get("observations")
    if not isinstance(records, list):
        raise MalformedResponseError("Response has no 'observations' array")

    key = pair.series_key
    observations = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise MalformedResponseError(f"Observation {index} is not an object")
        value = record.get(key)
        if not isinstance(value, dict) or "v" not in value:
            raise MalformedResponseError(f"Observation {index} has no {key}.v field")
        try:
            observations.append(
                Observation(
                    date=_parse_date(record.get("d")),
                    rate=_parse_rate(value["v"]),
                    pair=pair,
                )
            )
        except ValueError as e:
            raise MalformedResponseError(f"Observation {index}: {e}") from e

    return ObservationSeries(pair=pair, observations=tuple(observations))


class RateClient:
    """Fetches exchange-rate observations over HTTP."""

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.settings.api_base_url,
                timeout=self.settings.request_timeout,
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RateClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _get(self, pair: CurrencyPair, query: QueryParameters | None) -> httpx.Response:
        path = f"/{pair.series_key}/json"
        params = (query or QueryParameters()).to_params()
        try:
            response = self.client.get(path, params=params)
        except httpx.TransportError as e:
            logger.error(f"Transport error fetching {pair.series_key}: {e}")
            raise TransportError(f"Failed to reach {path}: {e}") from e

        if not response.is_success:
            logger.error(f"HTTP error fetching {pair.series_key}: {response.status_code}")
            raise HttpStatusError(response.status_code, response.reason_phrase)
        return response

    def fetch_payload(
        self, pair: CurrencyPair, query: QueryParameters | None = None
    ) -> dict:
        """Fetch the raw decoded body, raising only on status or decode failure."""
        response = self._get(pair, query)
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response body is not JSON: {e}") from e
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )
        return payload

    def fetch(
        self, pair: CurrencyPair, query: QueryParameters | None = None
    ) -> ObservationSeries:
        """
        Fetch observations for a currency pair.

        Args:
            pair: Currency pair to request
            query: Optional query window (e.g. recent weeks)

        Returns:
            ObservationSeries in the order the API returned them
        """
        logger.info(f"Fetching {pair.series_key}...")
        series = parse_observations(self.fetch_payload(pair, query), pair)
        logger.info(f"  Received {len(series)} observations")
        return series
