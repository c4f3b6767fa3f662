import logging
import subprocess

import click

from resume_builder.app.api.routes.route_logic import user_crud
from resume_builder.app.database.database import get_session_local

log = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Management script for the Resume Builder application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _run_alembic(command: list[str], success_msg: str) -> None:
    """Run an alembic command, reporting the outcome on the console and in the log.

    Args:
        command (list[str]): The full command line, starting with "alembic".
        success_msg (str): Printed when the command exits with status 0.

    Notes:
        1. A non-zero exit status or a missing alembic executable is reported
           as an error and the CLI exits with status 1.

    """
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError as e:
        _error_msg = f"Alembic failed: {e}"
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
        raise SystemExit(1)
    except FileNotFoundError:
        _error_msg = "Error: 'alembic' command not found. Make sure Alembic is installed and in your PATH."
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
        raise SystemExit(1)
    click.echo(success_msg)
    log.info(success_msg)


@cli.command("generate-migration")
@click.option(
    "-m",
    "--message",
    required=True,
    help="A short message describing the migration.",
)
def generate_migration(message: str):
    """
    Generate a new database migration script.

    This command wraps 'alembic revision --autogenerate'.
    """
    click.echo("Generating new migration...")
    _run_alembic(
        ["alembic", "revision", "--autogenerate", "-m", message],
        f"Successfully generated new migration: {message}",
    )


@cli.command("apply-migrations")
def apply_migrations():
    """
    Apply all pending migrations to the database.

    This command wraps 'alembic upgrade head'.
    """
    click.echo("Applying database migrations...")
    _run_alembic(["alembic", "upgrade", "head"], "Successfully applied all migrations.")


@cli.command("create-user")
@click.option("--email", required=True, help="Login email of the new user.")
@click.option("--first-name", required=True, help="Given name of the new user.")
@click.option("--last-name", required=True, help="Family name of the new user.")
@click.option(
    "--password",
    required=True,
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password for the new user.",
)
def create_user(email: str, first_name: str, last_name: str, password: str):
    """
    Create a user account from the command line.

    Notes:
        1. Refuses an email that is already registered.
        2. Stores a bcrypt hash of the password.

    """
    click.echo(f"Creating user '{email}'...")

    db = get_session_local()()
    try:
        if user_crud.get_user_by_email(db, email):
            _error_msg = f"A user with email '{email}' already exists."
            click.echo(_error_msg, err=True)
            raise SystemExit(1)
        user = user_crud.create_user(
            db,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
        )
        click.echo(f"User '{user.email}' created with id {user.id}.")
    finally:
        db.close()


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
