"""Tests for browse and search commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from kitbag.cli.cli import cli
from tests.test_utils.builders import build_package_env


def test_browse_namespace(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["browse", "acme-tool"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "bundles/greeter" in result.output
    assert "Says hello" in result.output
    assert "triggers/pre-commit.sh" in result.output
    assert "Install with: kitbag install acme-tool:<path>" in result.output


def test_browse_all_repositories(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["browse"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "acme-tool" in result.output
    assert "snippets/review.md" in result.output


def test_browse_filters_by_type(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(
        cli, ["browse", "acme-tool", "-t", "triggers", "--json"], obj=env.ctx
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["repos"]["acme-tool"] == [
        {
            "name": "pre-commit",
            "path": "triggers/pre-commit.sh",
            "type": "trigger",
            "description": None,
        }
    ]


def test_browse_invalid_type(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["browse", "acme-tool", "--type", "agents"], obj=env.ctx)

    assert result.exit_code == 1
    assert "Error: Invalid type: agents" in result.output


def test_browse_unknown_namespace(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["browse", "nope"], obj=env.ctx)

    assert result.exit_code == 1
    assert "Error: Repository 'nope' not found" in result.output


def test_search(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)
    runner = CliRunner()

    found = runner.invoke(cli, ["search", "greet"], obj=env.ctx)
    missing = runner.invoke(cli, ["search", "zzz"], obj=env.ctx)
    as_json = runner.invoke(cli, ["search", "review", "--json"], obj=env.ctx)

    assert found.exit_code == 0, found.output
    assert "bundles/greeter" in found.output
    assert "No items matching 'zzz'." in missing.output
    data = json.loads(as_json.output)
    assert data["query"] == "review"
    assert [item["name"] for item in data["repos"]["acme-tool"]] == ["review"]
