# Client/cli.py
import click
import typer
from tabulate import tabulate

from Client.api import ApiClient, ApiError
from Client.auth_screen import AuthScreen
from Client.token_store import TokenStore
from Feedback.wizard import (ISSUE_FIELDS, RATING_FIELDS, REQUIRED_RATINGS, TEXT_FIELDS,
                             FeedbackWizard, Stage)

cli = typer.Typer(help="SehYaatri client")
feedback_cli = typer.Typer(help="Feedback")
cli.add_typer(feedback_cli, name="feedback")


def _screen() -> AuthScreen:
    return AuthScreen(ApiClient(), TokenStore())


def _authenticate(mode: str, email: str, password: str, name: str = ""):
    screen = _screen()
    screen.set_mode(mode)
    screen.email, screen.password, screen.name = email, password, name
    if not screen.submit():
        typer.echo(f"❌ {screen.error}")
        raise typer.Exit(1)
    typer.echo("✅ Signed in")
    typer.echo(f"Feedback: {screen.feedback_link}")


@cli.command()
def login(
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True),
):
    """Sign in as owner."""
    _authenticate("login", email, password)


@cli.command()
def signup(
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
    name: str = typer.Option("", prompt=True),
):
    """Create an owner account."""
    _authenticate("signup", email, password, name)


@cli.command()
def logout():
    """Forget the stored token."""
    _screen().sign_out()
    typer.echo("Signed out")


@cli.command()
def status():
    screen = _screen()
    if screen.authenticated:
        typer.echo(f"Signed in. Feedback: {screen.feedback_link}")
    else:
        typer.echo("Not signed in")


# ─── feedback ──────────────────────────────────────────────────────────────
def _fill_stage(wizard: FeedbackWizard) -> None:
    t = wizard.labels()
    stage = wizard.stage
    typer.echo(f"\n[{wizard.step}/{wizard.total_steps}] {t[stage]}")
    for name in RATING_FIELDS[stage]:
        required = name in REQUIRED_RATINGS
        low = 1 if required else 0
        current = getattr(wizard.draft, name)
        value = typer.prompt(
            f"{t[name]}{' *' if required else ''} ({low}-5)",
            default=current if current >= low else None,
            type=click.IntRange(low, 5),
        )
        if value:
            wizard.set_rating(name, value)
    if stage in ISSUE_FIELDS:
        name = ISSUE_FIELDS[stage]
        options = t[name]
        for i, issue in enumerate(options, 1):
            mark = "x" if issue in getattr(wizard.draft, name) else " "
            typer.echo(f"  [{mark}] {i}. {issue}")
        picked = typer.prompt("Toggle issues (e.g. 1,3)", default="", show_default=False)
        for part in picked.replace(" ", "").split(","):
            if part.isdigit() and 1 <= int(part) <= len(options):
                wizard.toggle_issue(name, options[int(part) - 1])
    text_field = TEXT_FIELDS[stage]
    label = t["contact_email"] if text_field == "contact_email" else t["comments"]
    wizard.set_text(text_field, typer.prompt(label, default=getattr(wizard.draft, text_field),
                                             show_default=False))


@feedback_cli.command("submit")
def submit_feedback(lang: str = typer.Option("en", help="en | hi")):
    """Walk through the feedback form and send it."""
    api = ApiClient()
    wizard = FeedbackWizard(lang)
    while not wizard.submitted:
        _fill_stage(wizard)
        if wizard.stage is not Stage.CONTACT:
            wizard.next()
            continue
        d = wizard.draft
        typer.echo(f"\n⭐ {d.website_rating}/5  ⭐ {d.ai_rating}/5  "
                   f"⭐ {d.overall_experience}/5  ⭐ {d.recommendation}/5")
        choice = typer.prompt("[s]ubmit, [b]ack, [q]uit", default="s")
        if choice == "q":
            wizard.close()
            raise typer.Exit(0)
        if choice == "b":
            wizard.back()
            continue
        if not wizard.submit(api.submit_feedback):
            typer.echo(f"❌ {wizard.error or 'Required ratings missing'}")
    typer.echo(f"🎉 {wizard.labels()['thank_you']}")


@feedback_cli.command("list")
def list_feedback():
    """Show all feedback, newest first (owner only)."""
    screen = _screen()
    if not screen.authenticated:
        typer.echo("❌ Not signed in"); raise typer.Exit(1)
    try:
        rows = screen.api.list_feedback(screen.token)
    except ApiError as e:
        typer.echo(f"❌ {e.message}"); raise typer.Exit(1)
    table = []
    for r in rows:
        data = r["data"] if isinstance(r["data"], dict) else {}
        table.append((r["id"], r["createdAt"], r["userEmail"] or "-",
                      data.get("websiteRating"), data.get("aiRating"),
                      data.get("overallExperience"), data.get("recommendation")))
    typer.echo(tabulate(table, headers=["id", "created", "email", "web", "ai", "overall", "recommend"]))


if __name__ == "__main__":
    cli()
