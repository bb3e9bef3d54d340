import json
import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from manage import cli, main
from resume_vault.app.models.experience_model import Experience
from resume_vault.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)


@pytest.fixture
def patched_session_local(session_factory, test_user):
    """Point the CLI at the in-memory database."""
    with patch("manage.get_session_local", return_value=session_factory):
        yield


def _write_input(tmp_path, payload):
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(payload))
    return str(path)


def test_init_db_success():
    """Test the init-db command creates the tables."""
    runner = CliRunner()
    with patch("manage.initialize_database") as mock_init:
        result = runner.invoke(cli, ["init-db"])
        assert result.exit_code == 0
        assert "Creating database tables..." in result.output
        assert "Database tables created." in result.output
        mock_init.assert_called_once()


def test_init_db_failure():
    """Test the init-db command reports errors and exits non-zero."""
    runner = CliRunner()
    with patch("manage.initialize_database", side_effect=RuntimeError("no db")):
        result = runner.invoke(cli, ["init-db"])
        assert result.exit_code == 1
        assert "An error occurred while creating tables: no db" in result.output


def test_create_resume_success(tmp_path, patched_session_local, db_session):
    """The created resume is echoed as JSON with children in input order."""
    path = _write_input(
        tmp_path,
        {
            "title": "Engineer",
            "experiences": [{"position": "A"}, {"position": "B"}],
        },
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["create-resume", "--user-id", "7", "--file", path])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["user_id"] == 7
    assert [e["position"] for e in data["experiences"]] == ["A", "B"]
    assert "education" not in data
    assert db_session.query(Experience).count() == 2


def test_create_resume_step_failure(tmp_path, patched_session_local, db_session):
    """A failing step is reported and nothing is stored."""
    path = _write_input(
        tmp_path,
        {"title": "X", "education": [{"school": "Y"}, {"school": ""}]},
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["create-resume", "--user-id", "7", "--file", path])

    assert result.exit_code == 1
    assert "Resume creation failed at step education[2]" in result.output
    assert db_session.query(DatabaseResume).count() == 0


def test_create_resume_invalid_json(tmp_path):
    path = tmp_path / "resume.json"
    path.write_text("{not json")
    runner = CliRunner()

    result = runner.invoke(cli, ["create-resume", "--user-id", "7", "--file", str(path)])

    assert result.exit_code == 1
    assert "Invalid JSON input" in result.output


def test_create_resume_missing_title(tmp_path):
    path = _write_input(tmp_path, {"description": "no title"})
    runner = CliRunner()

    result = runner.invoke(cli, ["create-resume", "--user-id", "7", "--file", path])

    assert result.exit_code == 1
    assert "Invalid resume input" in result.output


def test_create_resume_missing_user_id(tmp_path):
    path = _write_input(tmp_path, {"title": "Engineer"})
    runner = CliRunner()

    result = runner.invoke(cli, ["create-resume", "--file", path])

    assert result.exit_code != 0
    assert "Missing option" in result.output
    assert "--user-id" in result.output


def test_main():
    """Test that the main function calls the cli."""
    with patch("manage.cli") as mock_cli:
        main()
        mock_cli.assert_called_once()
