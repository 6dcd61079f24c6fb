# Auth/manage_users.py
import getpass
import json

import typer
from tabulate import tabulate

from errors import SehYaatriError
from Storage.database import open_stores

cli = typer.Typer(help="SehYaatri owner accounts and feedback")


@cli.command()
def add(
    email: str = typer.Argument(...),
    name: str = typer.Option("", help="Display name"),
):
    """Create an owner account."""
    pwd = getpass.getpass("Password: ")
    credentials, _ = open_stores()
    try:
        account = credentials.signup(email, pwd, name)
    except SehYaatriError as e:
        typer.echo(f"❌ {e.message}"); raise typer.Exit(1)
    typer.echo(f"✅ Created #{account.id}")


@cli.command("list")
def list_accounts():
    """List all accounts (id, email, name, role)."""
    credentials, _ = open_stores()
    rows = [(a.id, a.email, a.name, a.role) for a in credentials.accounts.list_all()]
    typer.echo(tabulate(rows, headers=["id", "email", "name", "role"]))


@cli.command()
def feedback():
    """Dump all feedback as JSON, newest first."""
    _, store = open_stores()
    typer.echo(json.dumps([r.public() for r in store.list_all()], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
