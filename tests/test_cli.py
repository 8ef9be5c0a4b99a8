# tests/test_cli.py
"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest

from seocheck.cli import build_config, build_parser, main
from seocheck.models import ErrorReport, PresenceStatus, SiteReport


@pytest.fixture
def mock_analyzer():
    """Patch WebsiteAnalyzer in the CLI and logging setup."""
    with patch("seocheck.cli.WebsiteAnalyzer") as analyzer_class, \
            patch("seocheck.cli.setup_logging") as setup_logging:
        analyzer_class.setup_logging = setup_logging
        yield analyzer_class


class TestCli:
    """Test cases for the seocheck CLI."""

    def test_missing_url_is_usage_error(self, capsys):
        """Test running without a URL exits with a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
        assert "usage:" in capsys.readouterr().err

    def test_text_output(self, mock_analyzer, capsys):
        """Test the report is printed as text by default."""
        report = SiteReport(url="https://example.com", schema_markup=PresenceStatus.FOUND)
        mock_analyzer.return_value.analyze.return_value = report

        exit_code = main(["https://example.com"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert 'Schema Markup: ["Found"]' in out
        assert 'Broken Links: []' in out
        mock_analyzer.return_value.analyze.assert_called_once_with("https://example.com")
        mock_analyzer.return_value.fetcher.close.assert_called_once()

    def test_json_output(self, mock_analyzer, capsys):
        """Test the report is printed as JSON on request."""
        report = SiteReport(url="https://example.com")
        mock_analyzer.return_value.analyze.return_value = report

        main(["https://example.com", "--output", "json"])

        assert json.loads(capsys.readouterr().out) == report.to_dict()

    def test_fetch_failure_exit_code(self, mock_analyzer, capsys):
        """Test a failed fetch prints the error and exits with 1."""
        mock_analyzer.return_value.analyze.return_value = ErrorReport(url="https://x.invalid")

        exit_code = main(["https://x.invalid"])

        assert exit_code == 1
        assert capsys.readouterr().out.strip() == 'error: ["Failed to retrieve website content"]'

    def test_output_file(self, mock_analyzer, tmp_path, capsys):
        """Test the report is written to the output file."""
        mock_analyzer.return_value.analyze.return_value = SiteReport(url="https://example.com")
        output_file = tmp_path / "report.json"

        main(["https://example.com", "-o", "json", "-f", str(output_file)])

        assert capsys.readouterr().out == ""
        assert json.loads(output_file.read_text())["AMP"] == ["false"]

    def test_logging_configured_from_flags(self, mock_analyzer):
        """Test logging is set up from the command line flags."""
        mock_analyzer.return_value.analyze.return_value = SiteReport(url="https://example.com")

        main(["https://example.com", "--log-level", "DEBUG", "--log-file", "run.log"])

        mock_analyzer.setup_logging.assert_called_once_with(level="DEBUG", log_file="run.log")

    def test_thresholds_file_passed_to_analyzer(self, mock_analyzer, tmp_path):
        """Test the thresholds file reaches the analyzer."""
        mock_analyzer.return_value.analyze.return_value = SiteReport(url="https://example.com")
        path = tmp_path / "t.json"
        path.write_text('{"good_ms": 900}')

        main(["https://example.com", "--thresholds-file", str(path)])

        thresholds = mock_analyzer.call_args.kwargs["thresholds"]
        assert thresholds.good_ms == 900
        assert thresholds.moderate_ms == 4000


class TestBuildConfig:
    """Test cases for command-line overrides."""

    def test_flags_override_environment(self, monkeypatch):
        """Test command line flags win over the environment."""
        monkeypatch.setenv("TIMEOUT", "60")
        monkeypatch.setenv("MAX_CONCURRENT_REQUESTS", "8")
        args = build_parser().parse_args(
            ["https://example.com", "--timeout", "5", "--max-workers", "2"]
        )

        config = build_config(args)

        assert config.timeout == 5
        assert config.max_link_workers == 2

    def test_environment_used_without_flags(self, monkeypatch):
        """Test the environment applies when no flags are given."""
        monkeypatch.setenv("TIMEOUT", "60")
        args = build_parser().parse_args(["https://example.com"])

        assert build_config(args).timeout == 60
