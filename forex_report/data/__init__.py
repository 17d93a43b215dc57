"""Exchange-rate data fetching."""

from .rate_client import RateClient, parse_observations

__all__ = ["RateClient", "parse_observations"]
