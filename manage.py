#!/usr/bin/env python3
"""
Fight Picks Management CLI

Operator commands for inspecting the proxy configuration and the remote backend.
"""

import click

from app import create_app
from app.services.pick_backend import BackendError

app = create_app()


@click.group()
def cli():
    """Fight Picks Management CLI"""
    pass


@cli.command()
def status():
    """Show application status"""
    lockout = app.extensions["lockout"]

    click.echo("🥊 Fight Picks Proxy Status")
    click.echo("=" * 40)
    click.echo(f"🌐 Remote backend: {app.config['REMOTE_SCRIPT_URL']}")
    click.echo(f"⏱️  Timeout: {app.config.get('REMOTE_TIMEOUT') or 'network default'}")
    click.echo(f"🔒 Lockout: {lockout.lockout_at.isoformat()}")
    if lockout.is_locked():
        click.echo("❌ Picks: locked")
    else:
        click.echo("✅ Picks: open")


@cli.command("ping-backend")
def ping_backend():
    """Fetch the fight card from the remote backend"""
    try:
        fights = app.extensions["pick_backend"].fetch_fights()
    except BackendError as e:
        click.echo(f"❌ Backend: Error - {str(e)}")
        raise SystemExit(1)

    count = len(fights) if isinstance(fights, list) else "?"
    click.echo(f"✅ Backend: Connected ({count} fights on the card)")


if __name__ == "__main__":
    cli()
