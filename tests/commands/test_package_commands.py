"""Tests for install, uninstall, list, info and update commands."""

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from kitbag.cli.cli import cli
from tests.fakes.git import FakeGit
from tests.test_utils.builders import SHA_A, SHA_B, build_package_env


def _mirror(tmp_path: Path) -> Path:
    return tmp_path / "data" / "repos" / "acme-tool"


def test_install_prints_summary(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["install", "acme-tool:bundles/greeter"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "Installed acme-tool--greeter" in result.output
    assert f"main ({SHA_A[:8]})" in result.output
    assert "Files:     3" in result.output


def test_install_with_version_warns(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["install", "acme-tool:snippets/review.md@v2"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "Warning: version pinning is not supported" in result.output
    assert env.ctx.manager.get("acme-tool--review").version.sha == SHA_A


def test_install_with_version_warns_once(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    env = build_package_env(tmp_path)

    with caplog.at_level(logging.WARNING):
        result = CliRunner().invoke(
            cli, ["install", "acme-tool:snippets/review.md@v2"], obj=env.ctx
        )

    assert result.exit_code == 0, result.output
    warnings = [line for line in result.output.splitlines() if "v2" in line]
    assert warnings == [
        "Warning: version pinning is not supported; installing the current commit "
        "of acme-tool instead of 'v2'"
    ]
    assert [r for r in caplog.records if r.name.startswith("kitbag")] == []


def test_install_twice_fails(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)
    runner = CliRunner()
    runner.invoke(cli, ["install", "acme-tool:snippets/review.md"], obj=env.ctx)

    result = runner.invoke(cli, ["install", "acme-tool:snippets/review.md"], obj=env.ctx)

    assert result.exit_code == 1
    assert "Error: Package 'acme-tool--review' is already installed" in result.output


def test_install_invalid_spec(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["install", "no-colon"], obj=env.ctx)

    assert result.exit_code == 1
    assert "Error: Invalid install spec 'no-colon'" in result.output


def test_install_force_overwrites(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)
    dest = env.config.artifacts_dir / "snippets" / "acme-tool--review.md"
    dest.parent.mkdir(parents=True)
    dest.write_text("mine", encoding="utf-8")
    runner = CliRunner()

    refused = runner.invoke(cli, ["install", "acme-tool:snippets/review.md"], obj=env.ctx)
    forced = runner.invoke(
        cli, ["install", "acme-tool:snippets/review.md", "--force"], obj=env.ctx
    )

    assert refused.exit_code == 1
    assert forced.exit_code == 0, forced.output


def test_uninstall(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)
    env.ctx.manager.install("acme-tool:bundles/greeter")

    result = CliRunner().invoke(cli, ["uninstall", "acme-tool--greeter"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "Uninstalled acme-tool--greeter" in result.output
    assert "Removed 3 files" in result.output


def test_uninstall_unknown(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["uninstall", "acme-tool--nope"], obj=env.ctx)

    assert result.exit_code == 1
    assert "Error: Package 'acme-tool--nope' not found" in result.output


def test_list_empty(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["list"], obj=env.ctx)

    assert result.exit_code == 0
    assert "No packages installed." in result.output


def test_list_table_and_json(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)
    env.ctx.manager.install("acme-tool:triggers/pre-commit.sh")
    runner = CliRunner()

    table = runner.invoke(cli, ["list"], obj=env.ctx)
    as_json = runner.invoke(cli, ["list", "--json"], obj=env.ctx)

    assert "acme-tool--pre-commit" in table.output
    assert "trigger" in table.output
    data = json.loads(as_json.output)
    [package] = data["packages"]
    assert package["name"] == "acme-tool--pre-commit"
    assert package["type"] == "trigger"
    assert package["version"] == {"type": "commit", "sha": SHA_A, "ref": "main"}


def test_info(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)
    env.ctx.manager.install("acme-tool:snippets/review.md")
    runner = CliRunner()

    text = runner.invoke(cli, ["info", "acme-tool--review"], obj=env.ctx)
    as_json = runner.invoke(cli, ["info", "acme-tool--review", "--json"], obj=env.ctx)

    assert text.exit_code == 0, text.output
    assert "Original Name: review" in text.output
    assert "Source Path:   snippets/review.md" in text.output
    assert json.loads(as_json.output)["package"]["source_path"] == "snippets/review.md"


def test_update_reports_up_to_date(tmp_path: Path) -> None:
    mirror = _mirror(tmp_path)
    git = FakeGit(current_commits={mirror: SHA_A}, remote_commits={mirror: SHA_A})
    env = build_package_env(tmp_path, git=git)
    env.ctx.manager.install("acme-tool:snippets/review.md")

    result = CliRunner().invoke(cli, ["update"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "All packages are up to date." in result.output


def test_update_without_packages(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["update"], obj=env.ctx)

    assert "No packages to check." in result.output


def test_update_lists_then_applies(tmp_path: Path) -> None:
    mirror = _mirror(tmp_path)
    git = FakeGit(
        current_commits={mirror: SHA_A},
        remote_commits={mirror: SHA_B},
        diffs={(mirror, SHA_A, "origin/main"): ["snippets/review.md"]},
    )
    env = build_package_env(tmp_path, git=git)
    env.ctx.manager.install("acme-tool:snippets/review.md")
    runner = CliRunner()

    check = runner.invoke(cli, ["update"], obj=env.ctx)
    applied = runner.invoke(cli, ["update", "--apply"], obj=env.ctx)

    assert check.exit_code == 0, check.output
    assert "1 package(s) have updates available" in check.output
    assert "acme-tool--review" in check.output
    assert "1 files" in check.output
    assert "Run with --apply" in check.output
    assert applied.exit_code == 0, applied.output
    assert "Updated 1 of 1 packages." in applied.output
    assert env.ctx.manager.get("acme-tool--review").version.sha == SHA_B


def test_update_json(tmp_path: Path) -> None:
    mirror = _mirror(tmp_path)
    git = FakeGit(
        current_commits={mirror: SHA_A},
        remote_commits={mirror: SHA_B},
        diffs={(mirror, SHA_A, "origin/main"): ["snippets/review.md", "snippets/other.md"]},
    )
    env = build_package_env(tmp_path, git=git)
    env.ctx.manager.install("acme-tool:snippets/review.md")

    result = CliRunner().invoke(cli, ["update", "--json"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    [info] = data["updates"]
    assert info["has_update"] is True
    assert info["changed_files"] == ["snippets/review.md"]
    assert info["package"]["name"] == "acme-tool--review"
    assert data["failures"] == {}


def test_update_json_and_apply_conflict(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["update", "--json", "--apply"], obj=env.ctx)

    assert result.exit_code == 2
    assert "--json cannot be combined with --apply" in result.output


def test_update_unknown_name(tmp_path: Path) -> None:
    env = build_package_env(tmp_path)

    result = CliRunner().invoke(cli, ["update", "acme-tool--nope"], obj=env.ctx)

    assert result.exit_code == 1
    assert "Error: Package 'acme-tool--nope' not found" in result.output
