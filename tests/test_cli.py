"""
CLI commands (cli/__main__.py)
"""

import json

import pytest
from click.testing import CliRunner

from dbtypes import __version__
from dbtypes.cli.__main__ import cli


@pytest.fixture
def run(clean_env):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, list(args), obj={})

    return _run


class TestBackends:

    def test_lists_every_backend(self, run):
        result = run("backends")
        assert result.exit_code == 0
        for name in ("cassandra", "mongodb", "sql"):
            assert name in result.output


class TestTypes:

    def test_default_database_type(self, run):
        result = run("types")
        assert result.exit_code == 0
        assert "sql" in result.output
        assert "unique" in result.output

    def test_json(self, run):
        result = run("-d", "mongodb", "types", "--json")
        assert result.exit_code == 0
        entries = json.loads(result.output)
        assert {"value": "TextBlob", "name": "TextBlob"} in entries
        assert len(entries) == 14

    def test_database_type_from_config_file(self, run, clean_env):
        (clean_env / "gen.yaml").write_text("database_type: cassandra\n")
        result = run("--config", str(clean_env / "gen.yaml"), "types", "--json")
        assert result.exit_code == 0
        assert {"value": "UUID", "name": "UUID"} in json.loads(result.output)

    def test_unknown_database_type(self, run):
        result = run("-d", "redis", "types")
        assert result.exit_code == 1
        assert "CONFIG_INVALID" in result.output

    def test_missing_config_file(self, run, clean_env):
        result = run("--config", str(clean_env / "missing.yaml"), "types")
        assert result.exit_code == 2
        assert "does not exist" in result.output
        assert not isinstance(result.exception, FileNotFoundError)

    def test_malformed_config_file(self, run, clean_env):
        (clean_env / "broken.yaml").write_text("database_type: [unclosed\n")
        result = run("--config", str(clean_env / "broken.yaml"), "types")
        assert result.exit_code == 1
        assert "CONFIG_INVALID" in result.output
        assert "malformed YAML" in result.output

    def test_null_database_type(self, run, clean_env):
        (clean_env / "dbtypes.yaml").write_text("database_type: null\n")
        result = run("types")
        assert result.exit_code == 1
        assert "CONFIG_MISSING" in result.output


class TestValidations:

    def test_json(self, run):
        result = run("-d", "mongodb", "validations", "String", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output) == ["maxlength", "minlength", "pattern", "required"]

    def test_plain(self, run):
        result = run("-d", "mongodb", "validations", "Blob")
        assert result.exit_code == 0
        assert "maxbytes, minbytes, required" in result.output

    def test_unknown_type(self, run):
        result = run("-d", "mongodb", "validations", "NoTypeAtAll")
        assert result.exit_code == 1
        assert "WRONG_DATABASE_TYPE" in result.output


class TestCheck:

    def test_type_only(self, run):
        assert run("-d", "cassandra", "check", "UUID").exit_code == 0
        assert run("-d", "mongodb", "check", "UUID").exit_code == 1

    def test_supported_validation(self, run):
        result = run("-d", "mongodb", "check", "String", "required")
        assert result.exit_code == 0
        assert "supports required" in result.output

    def test_unsupported_validation(self, run):
        result = run("-d", "mongodb", "check", "String", "min")
        assert result.exit_code == 1
        assert "does not support min" in result.output

    def test_unknown_type_with_validation(self, run):
        result = run("-d", "mongodb", "check", "NoTypeAtAll", "required")
        assert result.exit_code == 1
        assert "WRONG_DATABASE_TYPE" in result.output


def test_version(run):
    result = run("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_documented_usage_runs(run):
    import dbtypes.cli

    lines = [
        line.strip() for line in dbtypes.cli.__doc__.splitlines()
        if line.startswith("    dbtypes ")
    ]
    assert lines
    for line in lines:
        result = run(*line.split()[1:])
        assert result.exit_code == 0, line
