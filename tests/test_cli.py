import json

import pytest
from click.testing import CliRunner

from siteconfig.cli import EXIT_MALFORMED_INPUT, EXIT_SCHEMA_VIOLATION, cli
from siteconfig.services.loader import dump_site_config


@pytest.fixture
def runner():
    return CliRunner()


def test_validate_ok(runner, tmp_path, site_config):
    path = tmp_path / "site.yaml"
    path.write_text(dump_site_config(site_config, "yaml"), encoding="utf-8")

    result = runner.invoke(cli, ["validate", str(path)])
    assert result.exit_code == 0
    assert "OK: Evan Schultz" in result.output


def test_validate_names_offending_field(runner, tmp_path, minimal_data):
    del minimal_data["postsPerPage"]
    path = tmp_path / "site.json"
    path.write_text(json.dumps(minimal_data), encoding="utf-8")

    result = runner.invoke(cli, ["validate", str(path)])
    assert result.exit_code == EXIT_SCHEMA_VIOLATION
    assert "postsPerPage" in result.output
    # reported once, by the command itself
    assert result.output.count("postsPerPage") == 1
    assert "Site config rejected" not in result.output


def test_validate_malformed_input(runner, tmp_path):
    path = tmp_path / "site.json"
    path.write_text("{not json", encoding="utf-8")

    result = runner.invoke(cli, ["validate", str(path)])
    assert result.exit_code == EXIT_MALFORMED_INPUT
    assert "Malformed input" in result.output


def test_validate_with_explicit_format(runner, tmp_path, site_config):
    path = tmp_path / "site.txt"
    path.write_text(dump_site_config(site_config, "toml"), encoding="utf-8")

    result = runner.invoke(cli, ["validate", "--format", "toml", str(path)])
    assert result.exit_code == 0


def test_show_converts_format(runner, tmp_path, site_config, site_data):
    path = tmp_path / "site.yaml"
    path.write_text(dump_site_config(site_config, "yaml"), encoding="utf-8")

    result = runner.invoke(cli, ["show", str(path), "-o", "json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == site_data


def test_validate_oversized_integer_is_malformed(runner, tmp_path):
    path = tmp_path / "site.json"
    path.write_text('{"postsPerPage": ' + "1" * 5000 + "}", encoding="utf-8")

    result = runner.invoke(cli, ["validate", str(path)])
    assert result.exit_code == EXIT_MALFORMED_INPUT
    assert "Malformed input" in result.output
