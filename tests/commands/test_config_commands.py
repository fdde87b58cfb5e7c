"""Tests for the config command group."""

from pathlib import Path

from click.testing import CliRunner

from kitbag.cli.cli import cli
from kitbag.context import KitbagContext
from tests.fakes.config import FakeConfigStore
from tests.test_utils.builders import config_in


def test_config_show(tmp_path: Path) -> None:
    config = config_in(tmp_path)
    ctx = KitbagContext.for_test(config=config)

    result = CliRunner().invoke(cli, ["config", "show"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "not created, using defaults" in result.output
    assert f"data_dir={config.data_dir}" in result.output
    assert "github_base_url=https://github.com" in result.output


def test_config_init_writes_file(tmp_path: Path) -> None:
    config = config_in(tmp_path)
    store = FakeConfigStore(config=config)
    ctx = KitbagContext.for_test(config=config, config_store=store)

    result = CliRunner().invoke(cli, ["config", "init"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.saved == [config]


def test_config_init_refuses_to_overwrite(tmp_path: Path) -> None:
    config = config_in(tmp_path)
    store = FakeConfigStore(config=config, exists=True)
    ctx = KitbagContext.for_test(config=config, config_store=store)
    runner = CliRunner()

    refused = runner.invoke(cli, ["config", "init"], obj=ctx)
    forced = runner.invoke(cli, ["config", "init", "--force"], obj=ctx)

    assert refused.exit_code == 1
    assert "Error: Config already exists" in refused.output
    assert forced.exit_code == 0
    assert store.saved == [config]
