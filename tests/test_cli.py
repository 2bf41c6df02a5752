"""Tests for the CLI module."""

import json
import math
from datetime import datetime
from unittest.mock import patch

import pytest

from magazine_catalog.cli import main


class TestCLI:
    """Tests for top-level CLI behaviour."""

    def test_no_command_prints_help(self, capsys):
        """Running without a command prints help and succeeds."""
        result = main([])

        assert result == 0
        assert "magazine-catalog" in capsys.readouterr().out


class TestCLIDemo:
    """Tests for the demo command."""

    def test_demo_report(self, capsys):
        """demo prints the human-readable report."""
        result = main(["demo", "--release-date", "2026-01-15"])

        out = capsys.readouterr().out
        assert result == 0
        assert "edition1 equals edition2: True" in out
        assert "edition1 is edition2: False" in out
        assert "Exception: Circulation cannot be negative." in out
        assert "Magazine: Modified Magazine, Frequency: Monthly" in out
        assert "Magazine: Magazine 1, Frequency: Monthly" in out
        assert "Circulation: 5000" in out
        assert "Article 1 (4.5)" in out

    def test_demo_prints_magazine_data_before_copy(self, capsys):
        """demo prints the magazine before the copy and modification blocks."""
        main(["demo", "--release-date", "2026-01-15"])

        out = capsys.readouterr().out
        data = out.split("Magazine Data:\n", 1)[1].splitlines()[0]
        assert data == (
            "Magazine: Magazine 1, Frequency: Monthly, "
            "Release Date: 2026-01-15 00:00:00, Circulation: 5000"
        )
        assert out.index("\nMagazine Data:") < out.index("Original Magazine Data:")

    def test_demo_editor_sections(self, capsys):
        """demo lists every editor under editors without articles."""
        main(["demo"])

        out = capsys.readouterr().out
        without = out.split("Editors without Articles:")[1]
        assert "Editor 1" in without
        assert "Editor 2" in without

    def test_demo_json(self, capsys):
        """demo --json prints the copied magazine as a JSON record."""
        result = main(["demo", "--json", "--release-date", "2026-01-15T10:00:00"])

        data = json.loads(capsys.readouterr().out)
        assert result == 0
        assert data["title"] == "Magazine 1"
        assert data["frequency"] == "Monthly"
        assert data["circulation"] == 5000
        assert datetime.fromisoformat(data["release_date"]) == datetime(2026, 1, 15, 10, 0)
        assert [e["name"] for e in data["editors"]] == ["Editor 1", "Editor 2"]

    def test_demo_json_zero_circulation(self, capsys):
        """demo --json keeps an infinite quality for a zero circulation."""
        result = main(["demo", "--json", "--circulation", "0"])

        data = json.loads(capsys.readouterr().out)
        assert result == 0
        assert data["circulation"] == 0
        assert data["quality"] == math.inf

    def test_demo_passes_config(self):
        """demo builds the Demo config from its options."""
        with patch("magazine_catalog.cli.Demo") as mock_demo_class:
            mock_demo_class.return_value.run.side_effect = RuntimeError("stop")
            with pytest.raises(RuntimeError):
                main([
                    "demo",
                    "--circulation", "300",
                    "--threshold", "3.5",
                    "--keyword", "News",
                ])

        config = mock_demo_class.call_args[0][0]
        assert config["circulation"] == 300
        assert config["rating_threshold"] == 3.5
        assert config["title_keyword"] == "News"
        assert "release_date" not in config

    def test_demo_negative_circulation_fails(self, caplog):
        """demo reports a model error and exits non-zero."""
        result = main(["demo", "--circulation", "-5"])

        assert result == 1
        assert "Demo failed: Circulation cannot be negative." in caplog.text
