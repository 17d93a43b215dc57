"""Fetch, aggregate, and export an exchange-rate report."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from forex_report.config import RunConfig, Settings, prompt_run_config
from forex_report.data import RateClient
from forex_report.errors import ApiError, EmptySeriesError, ReportWriteError
from forex_report.indicators import format_rate, mean
from forex_report.models import Report
from forex_report.reports import write_csv, write_html


logger = logging.getLogger(__name__)


class Stage(str, Enum):
    FETCH = "fetch"
    AGGREGATE = "aggregate"
    WRITE_CSV = "write_csv"
    WRITE_HTML = "write_html"


@dataclass(frozen=True)
class Success:
    report: Report
    csv_path: Path
    html_path: Path

    ok = True


@dataclass(frozen=True)
class Failed:
    stage: Stage
    error: Exception

    ok = False


PipelineResult = Success | Failed


def run_pipeline(
    run_config: RunConfig,
    client: RateClient,
    settings: Settings | None = None,
    csv_path: Path | str | None = None,
    html_path: Path | str | None = None,
) -> PipelineResult:
    """
    Run one fetch -> aggregate -> write cycle.

    Stops at the first fetch or aggregation failure. Both writers are
    always attempted once a report exists; a writer failure does not undo
    the other artifact.

    Args:
        run_config: Currency pair and query window
        client: Open rate client, owned by the caller
        settings: Supplies default artifact paths
        csv_path: Overrides the CSV destination
        html_path: Overrides the HTML destination

    Returns:
        Success with the report and artifact paths, or Failed with the
        stage and the error it raised
    """
    settings = settings or client.settings
    pair = run_config.pair

    try:
        series = client.fetch(pair, run_config.query)
    except ApiError as e:
        return Failed(Stage.FETCH, e)

    try:
        aggregate = mean(series)
    except EmptySeriesError as e:
        logger.error(f"No observations to average for {pair.label}")
        return Failed(Stage.AGGREGATE, e)

    logger.info(f"Average exchange rate: {format_rate(aggregate.mean)} {pair.label}")
    report = Report(series=series, aggregate=aggregate)

    csv_target = Path(csv_path) if csv_path else settings.csv_path(pair)
    html_target = Path(html_path) if html_path else settings.html_path

    failures = []
    for stage, writer, target in (
        (Stage.WRITE_CSV, write_csv, csv_target),
        (Stage.WRITE_HTML, write_html, html_target),
    ):
        try:
            writer(report, target)
        except ReportWriteError as e:
            logger.error(f"{stage.value} failed: {e}")
            failures.append(Failed(stage, e))

    if failures:
        return failures[0]
    return Success(report=report, csv_path=csv_target, html_path=html_target)


def main() -> None:
    """CLI entry point."""
    import argparse
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Generate a foreign-exchange rate report")
    parser.add_argument("--base", type=str, help="Base currency code, e.g. CAD")
    parser.add_argument("--target", type=str, help="Target currency code, e.g. AUD")
    parser.add_argument("--weeks", type=str, help="Number of recent weeks to fetch")
    parser.add_argument("--csv", type=str, default=None, help="CSV output path")
    parser.add_argument("--html", type=str, default=None, help="HTML output path")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the raw API response and exit",
    )
    args = parser.parse_args()

    try:
        settings = Settings()
        run_config = prompt_run_config(args.base, args.target, args.weeks)
        pair = run_config.pair
        with RateClient(settings) as client:
            if args.raw:
                payload = client.fetch_payload(pair, run_config.query)
                print(json.dumps(payload, indent=2))
                return
            result = run_pipeline(run_config, client, settings, args.csv, args.html)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except ApiError as e:
        print(f"API error: {e}")
        sys.exit(1)

    if not result.ok:
        logger.error(f"Pipeline failed at {result.stage.value}: {result.error}")
        sys.exit(1)

    aggregate = result.report.aggregate
    print(f"\nAverage exchange rate: {format_rate(aggregate.mean)} {pair.label}")
    print(f"Observations: {aggregate.sample_count}")
    print(f"CSV report:  {result.csv_path}")
    print(f"HTML report: {result.html_path}")


if __name__ == "__main__":
    main()
