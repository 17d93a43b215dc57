"""Configuration settings for the report pipeline."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable
import os

from dotenv import load_dotenv

from forex_report.models import CurrencyPair, QueryParameters


load_dotenv()


DEFAULT_API_BASE_URL = "https://www.bankofcanada.ca/valet/observations"
HTML_REPORT_FILENAME = "custom-report.html"


@dataclass
class Settings:
    """Application settings."""

    api_base_url: str = field(
        default_factory=lambda: os.getenv("FX_API_BASE_URL", DEFAULT_API_BASE_URL)
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("FX_API_TIMEOUT", "30"))
    )
    reports_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("FX_REPORTS_DIR", Path(__file__).parent.parent.parent / "reports")
        )
    )
    html_filename: str = HTML_REPORT_FILENAME

    def __post_init__(self) -> None:
        self.reports_dir = Path(self.reports_dir)
        self.api_base_url = self.api_base_url.rstrip("/")

    def validate(self) -> None:
        """Validate required settings."""
        if not self.api_base_url:
            raise ValueError("FX_API_BASE_URL must not be empty")
        if self.request_timeout <= 0:
            raise ValueError(
                f"FX_API_TIMEOUT must be positive, got {self.request_timeout}"
            )

    def csv_path(self, pair: CurrencyPair) -> Path:
        """Default CSV artifact location for a pair."""
        return self.reports_dir / f"forex_report_{pair.base}_{pair.target}.csv"

    @property
    def html_path(self) -> Path:
        return self.reports_dir / self.html_filename


@dataclass
class RunConfig:
    """Inputs for one pipeline run."""

    base: str
    target: str
    recent_weeks: int | str | None = None

    @property
    def pair(self) -> CurrencyPair:
        return CurrencyPair(self.base, self.target)

    @property
    def query(self) -> QueryParameters:
        return QueryParameters(recent_weeks=self.recent_weeks)


def prompt_run_config(
    base: str | None = None,
    target: str | None = None,
    recent_weeks: int | str | None = None,
    ask: Callable[[str], str] | None = None,
) -> RunConfig:
    """Fill in any missing run inputs by asking the user."""
    ask = ask or input
    if not base:
        base = ask("Enter the base currency (e.g., CAD, AUD, BRL, CNY, EUR, MXN): ")
    if not target:
        target = ask("Enter the target currency (e.g., CAD, AUD, BRL, CNY, EUR, MXN): ")
    if recent_weeks is None:
        recent_weeks = ask("Enter the number of recent weeks to fetch (e.g., 5, 10, 15): ")
    recent_weeks = str(recent_weeks).strip() or None
    return RunConfig(base=base.strip(), target=target.strip(), recent_weeks=recent_weeks)
