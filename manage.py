import json
import logging

import click
from pydantic import ValidationError

from resume_vault.app.api.routes.route_logic.resume_aggregate import (
    AggregateCreateFailure,
    ResumeAggregateCreateParams,
    create_resume_aggregate,
)
from resume_vault.app.database.database import get_session_local
from resume_vault.app.main import initialize_database


log = logging.getLogger(__name__)


@click.group()
def cli():
    """Management script for the Resume Vault application."""
    pass


@cli.command("init-db")
def init_db():
    """
    Create the database tables.

    Args:
        None

    Returns:
        None

    Notes:
        1. Calls `initialize_database`, which creates any missing tables.
        2. On success, prints a success message.
        3. On failure, prints an error message and exits with status 1.

    """
    _msg = "init_db starting"
    log.debug(_msg)
    click.echo("Creating database tables...")
    try:
        initialize_database()
    except Exception as e:
        _error_msg = f"An error occurred while creating tables: {e}"
        log.exception(_error_msg)
        raise click.ClickException(_error_msg) from e
    _success_msg = "Database tables created."
    click.echo(_success_msg)
    log.info(_success_msg)
    _msg = "init_db returning"
    log.debug(_msg)


@cli.command("create-resume")
@click.option("--user-id", required=True, type=int, help="Owner of the new resume.")
@click.option(
    "--file",
    "input_file",
    required=True,
    type=click.File("r"),
    help="JSON file holding the resume with its personal info and list children.",
)
def create_resume(user_id: int, input_file):
    """
    Create a resume and its children from a JSON file.

    Args:
        user_id (int): The owner of the new resume.
        input_file: The opened JSON file.

    Returns:
        None

    Notes:
        1. Reads the JSON document and overrides its user_id with the option value.
        2. Runs the aggregate creation in one transaction.
        3. Prints the created resume as JSON, or the failing step and its errors.
        4. Exits with status 1 when creation fails.

    """
    _msg = "create_resume starting"
    log.debug(_msg)
    try:
        payload = json.load(input_file)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e}") from e
    if not isinstance(payload, dict):
        raise click.ClickException("Invalid JSON input: expected an object")
    payload["user_id"] = user_id
    try:
        params = ResumeAggregateCreateParams(**payload)
    except ValidationError as e:
        raise click.ClickException(f"Invalid resume input: {e}") from e

    db_session_local = get_session_local()
    db = db_session_local()
    try:
        result = create_resume_aggregate(db=db, params=params)
    finally:
        db.close()

    if isinstance(result, AggregateCreateFailure):
        _error_msg = (
            f"Resume creation failed at step {result.step_id.label}: "
            f"{json.dumps(result.field_errors)}"
        )
        log.warning(_error_msg)
        raise click.ClickException(_error_msg)

    click.echo(result.resume.model_dump_json(exclude_none=True, indent=2))
    _msg = "create_resume returning"
    log.debug(_msg)


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
