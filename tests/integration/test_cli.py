"""Integration tests for the folio CLI.

Tests complete command workflows through Typer's test runner: listing and
validating posts, building, rendering pages, and the comment commands.
"""

import json
from unittest.mock import patch

import pytest
import yaml
from typer.testing import CliRunner

from folio import __version__
from folio.app import app, register_commands
from folio.client import VerificationResult
from folio.exceptions import NotFoundError


register_commands()


@pytest.fixture
def runner(monkeypatch):
    for var in ("FOLIO_SITE_DIR", "FOLIO_THEME", "FOLIO_OUTPUT_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()


def invoke(runner, site_dir, *args):
    return runner.invoke(app, ["--site", str(site_dir), *args])


class TestGlobalOptions:
    """Tests for the top-level callback."""

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"folio {__version__}" in result.stdout

    def test_debug(self, runner, site_dir):
        """Test debug mode reports the site root."""
        result = invoke(runner, site_dir, "--debug", "posts", "validate")
        assert result.exit_code == 0
        assert "Debug mode enabled" in result.stdout


class TestPostsCommands:
    """Tests for the posts command group."""

    def test_list_json(self, runner, site_dir):
        """Test posts are listed newest first."""
        result = invoke(runner, site_dir, "-o", "json", "posts", "list")
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert [row["slug"] for row in rows] == ["calldata", "storage-packing"]
        assert rows[0]["published_at"] == "2022-06-26"

    def test_list_limit(self, runner, site_dir):
        result = invoke(runner, site_dir, "-o", "json", "posts", "list", "--limit", "1")
        assert [row["slug"] for row in json.loads(result.stdout)] == ["calldata"]

    def test_list_table(self, runner, site_dir):
        result = invoke(runner, site_dir, "-o", "table", "posts", "list")
        assert result.exit_code == 0
        assert "Calldata" in result.stdout

    def test_show_yaml(self, runner, site_dir):
        """Test show includes the raw body."""
        result = invoke(runner, site_dir, "-o", "yaml", "posts", "show", "storage-packing")
        assert result.exit_code == 0
        data = yaml.safe_load(result.stdout)
        assert data["title"] == "Packing storage"
        assert "# Slots" in data["body"]

    def test_show_html(self, runner, site_dir):
        result = invoke(runner, site_dir, "-o", "json", "posts", "show", "storage-packing", "--html")
        assert "<h1>Slots</h1>" in json.loads(result.stdout)["body"]

    def test_show_missing(self, runner, site_dir):
        result = invoke(runner, site_dir, "posts", "show", "nope")
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_validate_ok(self, runner, site_dir):
        result = invoke(runner, site_dir, "posts", "validate")
        assert result.exit_code == 0
        assert "2 posts valid" in result.stdout

    def test_validate_failure(self, runner, site_dir):
        """Test invalid documents fail validation with exit status 1."""
        (site_dir / "data" / "blog" / "broken.mdx").write_text("no header", encoding="utf-8")
        result = invoke(runner, site_dir, "posts", "validate")
        assert result.exit_code == 1
        assert "1 of 3 documents failed validation" in result.stdout
        assert "broken.mdx" in result.stdout


class TestBuildCommand:
    """Tests for the build command."""

    def test_build(self, runner, site_dir):
        result = invoke(runner, site_dir, "build")
        assert result.exit_code == 0
        assert "Built 2 posts" in result.stdout
        assert (site_dir / "public" / "blog" / "calldata" / "index.html").exists()

    def test_build_light_theme(self, runner, site_dir, tmp_path):
        out = tmp_path / "light"
        result = invoke(runner, site_dir, "--theme", "light", "build", "--out", str(out))
        assert result.exit_code == 0
        assert "#2D3748" in (out / "info" / "index.html").read_text(encoding="utf-8")

    def test_build_theme_from_environment(self, runner, site_dir, monkeypatch):
        monkeypatch.setenv("FOLIO_THEME", "light")
        result = invoke(runner, site_dir, "build")
        assert result.exit_code == 0
        assert "light theme" in result.stdout

    def test_build_dry_run(self, runner, site_dir):
        result = invoke(runner, site_dir, "--dry-run", "build")
        assert result.exit_code == 0
        assert "DRY RUN" in result.stdout
        assert not (site_dir / "public").exists()

    def test_build_clean_refuses_site_root(self, runner, site_dir):
        result = invoke(runner, site_dir, "build", "--out", str(site_dir), "--clean")
        assert result.exit_code == 1
        assert "Refusing to clean" in result.stdout
        assert (site_dir / "folio.toml").exists()
        assert (site_dir / "data" / "blog" / "calldata.mdx").exists()

    def test_build_invalid_theme(self, runner, site_dir):
        result = invoke(runner, site_dir, "--theme", "sepia", "build")
        assert result.exit_code == 1
        assert "Unknown theme mode" in result.stdout


class TestPagesCommands:
    """Tests for the pages command group."""

    @pytest.mark.parametrize("mode,color", [("light", "#2D3748"), ("dark", "#A0AEC0")])
    def test_info(self, runner, site_dir, mode, color):
        result = invoke(runner, site_dir, "--theme", mode, "pages", "info")
        assert result.exit_code == 0
        assert f'style="color: {color}"' in result.stdout

    def test_info_to_file(self, runner, site_dir, tmp_path):
        out = tmp_path / "info.html"
        result = invoke(runner, site_dir, "pages", "info", "--out", str(out))
        assert result.exit_code == 0
        assert "<title>Info - Luca Cespedes</title>" in out.read_text(encoding="utf-8")


class TestCommentsCommands:
    """Tests for the comments command group."""

    def test_show(self, runner, site_dir):
        result = invoke(runner, site_dir, "-o", "json", "comments", "show")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["theme"] == "dark"
        assert data["mapping"] == "pathname"

    def test_embed_ignores_theme(self, runner, site_dir):
        light = invoke(runner, site_dir, "--theme", "light", "comments", "embed")
        dark = invoke(runner, site_dir, "--theme", "dark", "comments", "embed")
        assert light.exit_code == 0
        assert light.stdout == dark.stdout
        assert 'data-theme="dark"' in light.stdout

    def test_verify_ok(self, runner, site_dir):
        result_data = VerificationResult(
            repo="melvnl/melvinliu.com",
            repo_id_matches=True,
            category_found=True,
            category_id_matches=True,
        )
        with patch("folio.cmds.comments.GiscusClient") as mock_client:
            mock_client.return_value.verify.return_value = result_data
            result = invoke(runner, site_dir, "-o", "json", "comments", "verify")

        assert result.exit_code == 0
        assert json.loads(result.stdout)["ok"] is True

    def test_verify_mismatch(self, runner, site_dir):
        result_data = VerificationResult(
            repo="melvnl/melvinliu.com",
            repo_id_matches=False,
            category_found=True,
            category_id_matches=True,
            remote_repo_id="R_other",
        )
        with patch("folio.cmds.comments.GiscusClient") as mock_client:
            mock_client.return_value.verify.return_value = result_data
            result = invoke(runner, site_dir, "-o", "json", "comments", "verify")

        assert result.exit_code == 1

    def test_verify_api_error(self, runner, site_dir):
        with patch("folio.cmds.comments.GiscusClient") as mock_client:
            mock_client.return_value.verify.side_effect = NotFoundError("Repository not found", status_code=404)
            result = invoke(runner, site_dir, "comments", "verify")

        assert result.exit_code == 1
        assert "Repository not found" in result.stdout

    def test_verify_dry_run(self, runner, site_dir):
        with patch("folio.cmds.comments.GiscusClient") as mock_client:
            result = invoke(runner, site_dir, "--dry-run", "comments", "verify")
        assert result.exit_code == 0
        mock_client.assert_not_called()

    def test_verify_negative_retries_rejected(self, runner, site_dir):
        with patch("folio.cmds.comments.GiscusClient") as mock_client:
            result = invoke(runner, site_dir, "comments", "verify", "--max-retries", "-1")
        assert result.exit_code == 2
        mock_client.assert_not_called()


class TestConfigCommands:
    """Tests for the config command group."""

    def test_init(self, runner, tmp_path):
        result = invoke(runner, tmp_path, "config", "init")
        assert result.exit_code == 0
        assert (tmp_path / "folio.toml").exists()

        again = invoke(runner, tmp_path, "config", "init")
        assert again.exit_code == 1
        assert "already exists" in again.stdout

    def test_show(self, runner, site_dir):
        result = invoke(runner, site_dir, "config", "show")
        assert result.exit_code == 0
        data = yaml.safe_load(result.stdout)
        assert data["title"] == "Test Blog"
        assert data["default_theme"] == "dark"
        assert data["comments"]["repo"] == "melvnl/melvinliu.com"

    def test_invalid_config(self, runner, tmp_path):
        (tmp_path / "folio.toml").write_text('[site]\ndefault_theme = "sepia"\n', encoding="utf-8")
        result = invoke(runner, tmp_path, "posts", "list")
        assert result.exit_code == 1
        assert "Configuration error" in result.stdout

    def test_site_not_a_table(self, runner, tmp_path):
        (tmp_path / "folio.toml").write_text('site = "oops"\n', encoding="utf-8")
        result = invoke(runner, tmp_path, "posts", "list")
        assert result.exit_code == 1
        assert "Configuration error" in result.stdout
        assert "Unexpected error" not in result.stdout
