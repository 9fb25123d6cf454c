"""Tests for the click CLI, run against a temporary data directory."""

from uuid import uuid4

import pytest
from click.testing import CliRunner

from registry.domain.model.identifier import EMPTY_ID
from registry.infrastructure.cli import exit_codes
from registry.infrastructure.cli.main import cli
from registry.infrastructure.config import get_settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("REGISTRY_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


def _add(runner, name):
    result = runner.invoke(cli, ["gender", "add", "--name", name])
    assert result.exit_code == exit_codes.SUCCESS, result.output
    return result.output.split("id=")[1].rstrip(")\n")


class TestGenderCommands:

    def test_add_then_show(self, runner):
        gender_id = _add(runner, "Female")

        result = runner.invoke(cli, ["gender", "show", "--id", gender_id])

        assert result.exit_code == exit_codes.SUCCESS
        assert "Female" in result.output

    def test_show_empty_id_is_not_found(self, runner):
        result = runner.invoke(cli, ["gender", "show", "--id", str(EMPTY_ID)])
        assert result.exit_code == exit_codes.NOT_FOUND
        assert "not found" in result.output

    def test_show_unknown_id_is_not_found(self, runner):
        result = runner.invoke(cli, ["gender", "show", "--id", str(uuid4())])
        assert result.exit_code == exit_codes.NOT_FOUND

    def test_show_with_corrupt_store_is_server_error(self, runner, tmp_path):
        (tmp_path / "genders.json").write_text("garbage", encoding="utf-8")

        result = runner.invoke(cli, ["gender", "show", "--id", str(uuid4())])

        assert result.exit_code == exit_codes.SERVER_ERROR
        assert "Server error (500)" in result.output
        assert "RepositoryError" in result.output

    def test_duplicate_add_rejected(self, runner):
        _add(runner, "Female")
        result = runner.invoke(cli, ["gender", "add", "--name", "female"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_list(self, runner):
        _add(runner, "Male")
        _add(runner, "Female")

        result = runner.invoke(cli, ["gender", "list"])

        assert result.exit_code == exit_codes.SUCCESS
        assert result.output.index("Female") < result.output.index("Male")

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["gender", "list"])
        assert "No genders registered." in result.output

    def test_list_with_malformed_store_is_clean_error(self, runner, tmp_path):
        (tmp_path / "genders.json").write_text('[{"id": 5, "name": "x"}]', encoding="utf-8")

        result = runner.invoke(cli, ["gender", "list"])

        assert result.exit_code == 1
        assert "Cannot read gender store" in result.output
