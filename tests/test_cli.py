"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from wrkrdocs.cli import cli
from wrkrdocs.config import Config


class TestNavCommand:
    """Tests for the nav command."""

    def test_prints_tree(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["nav"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["items"][0]["title"] == "Start Here"
        assert "active" not in data["items"][0]

    def test_prints_active_flags(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["nav", "--path", "docs/faq/"])

        assert result.exit_code == 0
        start_here = json.loads(result.output)["items"][0]
        assert start_here["hasActiveChild"] is True
        faq = next(child for child in start_here["children"] if child["title"] == "FAQ")
        assert faq["active"] is True


class TestRoutesCommand:
    """Tests for the routes command."""

    def test_prints_unique_routes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["routes"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        hrefs = [route["href"] for route in data["routes"]]
        assert len(hrefs) == len(set(hrefs))
        assert "aliases" not in data

    def test_prints_aliases(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["routes", "--aliases"])

        assert result.exit_code == 0
        assert json.loads(result.output)["aliases"]["/docs"] == ["Docs Map", "Docs Home"]


class TestCanonicalCommand:
    """Tests for the canonical command."""

    def test_prints_urls(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wrkrdocs.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(cli, ["canonical", "/docs/", "docs/faq", "-c", str(config_file)])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "https://clyra-ai.github.io/wrkr/docs/",
            "https://clyra-ai.github.io/wrkr/docs/faq",
        ]

    def test_base_path_override(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wrkrdocs.toml"
        config_file.write_text("")

        runner = CliRunner()
        result = runner.invoke(
            cli, ["canonical", "/docs/", "-c", str(config_file), "--base-path", ""]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "https://clyra-ai.github.io/docs/"

    def test_fails_on_invalid_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wrkrdocs.toml"
        config_file.write_text('[site]\nbase_path = "wrkr"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["canonical", "/docs/", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Error: site.base_path must start with '/'" in result.output

    def test_fails_on_missing_config(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["canonical", "/docs/", "-c", str(tmp_path / "nonexistent.toml")]
        )

        assert result.exit_code != 0


class TestStructuredDataCommand:
    """Tests for the structured-data command."""

    def test_prints_both_descriptors(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["structured-data"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [d["@type"] for d in data] == ["SoftwareApplication", "FAQPage"]

    def test_prints_faq_only(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["structured-data", "--kind", "faq"])

        assert result.exit_code == 0
        assert json.loads(result.output)["@type"] == "FAQPage"


class TestServeCommand:
    """Tests for the serve command."""

    def test_dev_serves_without_base_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wrkrdocs.toml"
        config_file.write_text("[server]\nport = 3000\n")

        runner = CliRunner()
        with patch("wrkrdocs.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_file), "--dev"])

        assert result.exit_code == 0
        assert "Starting server on 127.0.0.1:3000" in result.output
        assert "Base path: none" in result.output
        config: Config = run_server.call_args.args[0]
        assert config.site.base_path == ""

    def test_overrides_applied(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wrkrdocs.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch("wrkrdocs.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                ["serve", "-c", str(config_file), "--port", "9000", "--base-path", "/preview/"],
            )

        assert result.exit_code == 0
        assert "Base path: /preview" in result.output
        config: Config = run_server.call_args.args[0]
        assert config.server.port == 9000
        assert config.site.base_path == "/preview"
