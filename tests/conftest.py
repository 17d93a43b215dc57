"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Callable

import httpx
import pytest

from forex_report.config import Settings
from forex_report.data import RateClient
from forex_report.models import CurrencyPair, Observation, ObservationSeries

BASE_URL = "https://fx.test/valet/observations"


def _make_payload(pair: CurrencyPair, rates: list[str], start: date = date(2024, 1, 1)) -> dict:
    """Observations body in the remote API's shape, one week apart."""
    return {
        "observations": [
            {
                "d": (start + timedelta(weeks=i)).isoformat(),
                pair.series_key: {"v": rate},
            }
            for i, rate in enumerate(rates)
        ]
    }


@pytest.fixture
def cad_aud() -> CurrencyPair:
    return CurrencyPair("CAD", "AUD")


@pytest.fixture
def ten_week_rates() -> list[str]:
    """Ten rates summing to exactly 10.0."""
    return ["0.9512", "1.0488", "0.9800", "1.0200", "0.9900",
            "1.0100", "0.9750", "1.0250", "1.0000", "1.0000"]


@pytest.fixture
def sample_series(cad_aud, ten_week_rates) -> ObservationSeries:
    observations = tuple(
        Observation(date=date(2024, 1, 1) + timedelta(weeks=i), rate=Decimal(rate), pair=cad_aud)
        for i, rate in enumerate(ten_week_rates)
    )
    return ObservationSeries(pair=cad_aud, observations=observations)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(api_base_url=BASE_URL, request_timeout=5.0, reports_dir=tmp_path / "reports")


@pytest.fixture
def make_client(settings) -> Callable[[Callable[[httpx.Request], httpx.Response]], RateClient]:
    """Build a RateClient whose transport is served by a handler function."""
    created = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RateClient:
        http = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        created.append(http)
        return RateClient(settings, client=http)

    yield _make

    for http in created:
        http.close()


@pytest.fixture
def json_handler() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Handler factory returning a fixed status and JSON body, recording requests."""

    def _factory(body: Any = None, status_code: int = 200, requests: list | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, json=body)

        return handler

    return _factory


@pytest.fixture
def make_payload() -> Callable[..., dict]:
    return _make_payload
