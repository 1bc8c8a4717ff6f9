from __future__ import annotations

import asyncio
from typing import Optional

import typer

from linguista_security.app.logging import setup_logging
from linguista_security.exceptions import BreachCheckError
from linguista_security.security.breach import check_breach
from linguista_security.security.strength import evaluate

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Password security checks.")

def _password_option():
    return typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        help="Password to check (prompted with hidden input when omitted).",
    )


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="plain or json"),
):
    setup_logging(level=log_level, fmt=log_format)


@app.command("strength")
def strength_cmd(password: str = _password_option()):
    """Score a password locally; no network access."""
    result = evaluate(password)
    typer.echo(f"Score: {result.score}/5 ({result.label})")
    for item in result.feedback:
        typer.echo(f"  - {item}")
    if not result.is_strong:
        raise typer.Exit(code=1)
    typer.echo("Password is strong.")


@app.command("breach")
def breach_cmd(password: str = _password_option()):
    """Look the password up in the breach corpus (only a hash prefix is sent)."""
    try:
        result = asyncio.run(check_breach(password))
    except BreachCheckError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=3)
    if result.is_leaked:
        typer.echo(f"This password has appeared in data breaches ({result.count} times).")
        raise typer.Exit(code=2)
    typer.echo("Password not found in known breaches.")


if __name__ == "__main__":  # pragma: no cover
    app()
