# equine/cli.py
import click
from flask.cli import with_appcontext

from .services import store


@click.command("purge-carts")
@with_appcontext
def purge_carts():
    """Delete carts not written within CART_TTL_SECONDS."""
    purged = store.purge_expired_carts()
    click.echo(f"Purged {purged} expired cart(s)")


def register_cli(app):
    app.cli.add_command(purge_carts)
