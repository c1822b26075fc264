from __future__ import annotations

import click
from flask.cli import with_appcontext

from .errors import DrawError
from .extensions import db
from .services import roster


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the participants table and its constraints if missing."""
    db.create_all()
    click.echo("Database ready.")


@click.command("seed-roster")
@click.argument("names_file", type=click.File("r", encoding="utf-8"))
@click.confirmation_option(prompt="This drops the roster and every saved choice. Continue?")
@with_appcontext
def seed_roster_command(names_file):
    """Replace the roster with the names in NAMES_FILE (one per line or comma separated)."""
    try:
        count = roster.replace_all(roster.parse_names(names_file.read()))
    except DrawError as e:
        raise click.ClickException(e.message) from e
    click.echo(f"Seeded {count} participants.")
