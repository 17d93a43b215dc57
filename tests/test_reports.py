"""Tests for the CSV and HTML report writers."""

import os
from decimal import Decimal

import pytest

from forex_report.errors import ReportWriteError
from forex_report.indicators import mean
from forex_report.models import Report
from forex_report.reports import read_csv, render_csv, render_html, write_csv, write_html


@pytest.fixture
def report(sample_series) -> Report:
    return Report(series=sample_series, aggregate=mean(sample_series))


class TestCsvReport:

    def test_layout(self, report):
        lines = render_csv(report).split("\n")
        assert lines[0] == "Date,Value and Currency"
        assert lines[1] == "2024-01-01, 0.9512 CAD to AUD"
        assert lines[-2] == ""
        assert lines[-1] == "Average Exchange Rate: 1.0000 CAD to AUD"

    def test_ten_rows_and_trailer(self, report, tmp_path):
        path = write_csv(report, tmp_path / "forex_report.csv")
        non_empty = [line for line in path.read_text(encoding="utf-8").split("\n") if line]
        assert len(non_empty) == 1 + 10 + 1
        assert non_empty[-1].startswith("Average Exchange Rate:")

    def test_round_trip(self, report, tmp_path):
        path = write_csv(report, tmp_path / "forex_report.csv")
        expected = [
            (obs.date.isoformat(), str(obs.rate), obs.currency) for obs in report.series
        ]
        assert read_csv(path) == expected

    def test_creates_missing_directory(self, report, tmp_path):
        path = write_csv(report, tmp_path / "nested" / "reports" / "out.csv")
        assert path.exists()

    def test_overwrites_existing(self, report, tmp_path):
        path = tmp_path / "out.csv"
        path.write_text("stale content that is longer than nothing\n" * 100)
        write_csv(report, path)
        assert path.read_text(encoding="utf-8") == render_csv(report)

    def test_idempotent(self, report, tmp_path):
        path = tmp_path / "out.csv"
        first = write_csv(report, path).read_bytes()
        second = write_csv(report, path).read_bytes()
        assert first == second

    def test_unwritable_destination(self, report, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")

        with pytest.raises(ReportWriteError) as exc_info:
            write_csv(report, blocker / "out.csv")

        assert isinstance(exc_info.value, OSError)

    def test_failed_write_keeps_previous_artifact(self, report, tmp_path, monkeypatch):
        path = write_csv(report, tmp_path / "out.csv")
        before = path.read_bytes()

        def failing_replace(src, dst):
            raise PermissionError("read-only")

        monkeypatch.setattr(os, "replace", failing_replace)
        with pytest.raises(ReportWriteError):
            write_csv(report, path)

        assert path.read_bytes() == before
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.csv"]


class TestHtmlReport:

    def test_contains_every_observation(self, report):
        html = render_html(report)
        assert html.startswith("<!DOCTYPE html>")
        for obs in report.series:
            assert f"<td>{obs.date.isoformat()}</td>" in html
            assert f"<td>{obs.rate}</td>" in html
        assert html.count("<td>CAD to AUD</td>") == 10

    def test_table_header(self, report):
        html = render_html(report)
        assert "<th>Date</th>" in html
        assert "<th>Value</th>" in html
        assert "<th>Currency</th>" in html

    def test_mean_line(self, report):
        html = render_html(report)
        assert "<h2>Average Exchange Rate</h2>" in html
        assert "<strong>Average Exchange Rate:</strong> 1.0000 CAD to AUD" in html

    def test_values_escaped(self, report, monkeypatch):
        frame = report.series.to_frame()
        frame.loc[0, "Value"] = "<script>"
        monkeypatch.setattr(type(report.series), "to_frame", lambda self: frame)
        html = render_html(report)
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_idempotent(self, report, tmp_path):
        path = tmp_path / "custom-report.html"
        first = write_html(report, path).read_bytes()
        second = write_html(report, path).read_bytes()
        assert first == second

    def test_full_precision_not_rendered(self, cad_aud, sample_series):
        aggregate = mean(sample_series)
        assert aggregate.mean == Decimal("1")
        html = render_html(Report(series=sample_series, aggregate=aggregate))
        assert "1.0000 CAD to AUD" in html
