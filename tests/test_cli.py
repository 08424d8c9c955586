"""Tests for the html-to-joomla command line."""

import json
import re
from unittest.mock import patch

import pytest

from html_to_joomla.cli import default_output_name, main
from html_to_joomla.fetcher import FetchResult
from html_to_joomla.models import PageRecord


@pytest.fixture
def html_file(tmp_path, scenario_html):
    path = tmp_path / "page.html"
    path.write_text(scenario_html, encoding="utf-8")
    return path


class TestMain:

    def test_prints_json_to_stdout(self, html_file, capsys):
        main([str(html_file)])

        result = json.loads(capsys.readouterr().out)
        assert result["joomla_version"] == "4.3+"
        assert len(result["builder"]["sections"]) == 3

    def test_writes_output_file(self, html_file, tmp_path, capsys):
        output = tmp_path / "out.json"

        main([str(html_file), str(output)])

        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"Output saved to: {output}" in captured.err
        result = json.loads(output.read_text(encoding="utf-8"))
        assert result["builder"]["sections"][-1]["props"]["style"] == "secondary"

    def test_non_ascii_is_kept(self, html_file, tmp_path):
        output = tmp_path / "out.json"
        main([str(html_file), str(output)])
        assert "© 2024" in output.read_text(encoding="utf-8")

    def test_download_uses_timestamped_name(self, html_file, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        main([str(html_file), "--download"])

        written = list(tmp_path.glob("joomla-config-*.json"))
        assert len(written) == 1
        assert "Output saved to: joomla-config-" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.html")])

        assert exc_info.value.code == 1
        assert "Error reading file" in capsys.readouterr().err

    def test_url_is_scraped_then_converted(self, scenario_html, capsys):
        record = PageRecord(html=scenario_html)
        with patch("html_to_joomla.cli.FirecrawlService") as mock_service:
            mock_service.return_value.scrape_website.return_value = FetchResult.ok(record)
            main(["https://example.com"])

        mock_service.return_value.scrape_website.assert_called_once_with("https://example.com")
        result = json.loads(capsys.readouterr().out)
        assert len(result["builder"]["sections"]) == 3

    def test_scrape_failure_exits(self, capsys):
        with patch("html_to_joomla.cli.FirecrawlService") as mock_service:
            mock_service.return_value.scrape_website.return_value = FetchResult.failure("API key not found")
            with pytest.raises(SystemExit) as exc_info:
                main(["https://example.com"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Scraping failed: API key not found" in captured.err

    def test_bad_config_file_exits(self, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text("[]", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["https://example.com", "-c", str(config)])

        assert exc_info.value.code == 1
        assert "Configuration error" in capsys.readouterr().err


def test_default_output_name():
    assert re.fullmatch(r"joomla-config-\d{13}\.json", default_output_name())
