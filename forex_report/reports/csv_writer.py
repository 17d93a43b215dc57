"""CSV report artifact."""

from pathlib import Path

from forex_report.indicators import format_rate
from forex_report.models import Report
from forex_report.reports._files import replace_file


HEADER = "Date,Value and Currency"
TRAILER_PREFIX = "Average Exchange Rate:"


def render_csv(report: Report) -> str:
    """
    Render the CSV report body.

    Fields are joined without quoting; dates, numbers and currency codes
    never contain commas or quotes.
    """
    pair = report.pair
    lines = [HEADER]
    lines.extend(
        f"{obs.date.isoformat()}, {obs.rate} {obs.currency}" for obs in report.series
    )
    lines.append("")
    lines.append(
        f"{TRAILER_PREFIX} {format_rate(report.aggregate.mean)} {pair.label}"
    )
    return "\n".join(lines)


def write_csv(report: Report, destination: Path | str) -> Path:
    """Write the CSV report, overwriting destination."""
    return replace_file(destination, render_csv(report))


def read_csv(path: Path | str) -> list[tuple[str, str, str]]:
    """
    Read the data rows back from a CSV report.

    Returns:
        (date, value, currency) strings per row, in file order
    """
    rows = []
    text = Path(path).read_text(encoding="utf-8")
    for line in text.split("\n")[1:]:
        if not line or line.startswith(TRAILER_PREFIX):
            continue
        date_str, rest = line.split(", ", 1)
        value, currency = rest.split(" ", 1)
        rows.append((date_str, value, currency))
    return rows
