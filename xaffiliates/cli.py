"""Command-line interface for xaffiliates."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from xaffiliates import AffiliatesConfig, DashboardService, XAffiliatesError, save_json, to_json, __version__
from xaffiliates.config import LogFormat
from xaffiliates.logging import configure_logging

app = typer.Typer(
    name="xaffiliates",
    help="Find the X accounts affiliated with your organization",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"xaffiliates version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """xaffiliates - X organization affiliates finder."""
    pass


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
):
    """Run the web app."""
    import uvicorn

    from xaffiliates.api import create_app

    config = AffiliatesConfig()
    uvicorn.run(
        create_app(config),
        host=host or config.host,
        port=port or config.port,
    )


@app.command()
def whoami(
    token: str = typer.Option(..., "--token", "-t", envvar="XAFFILIATES_TOKEN", help="User access token"),
):
    """Show your profile and organization affiliation."""
    config = AffiliatesConfig(log_format=LogFormat.JSON, log_level="WARNING")
    configure_logging(config)

    async def run():
        async with DashboardService(config) as service:
            return await service.resolve(token)

    try:
        user, org_user_id = asyncio.run(run())
    except XAffiliatesError as e:
        console.print(f"[red]Failed to fetch profile: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"@{user.username}", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("Name", user.name)
    table.add_row("Bio", user.description or "-")
    if user.public_metrics:
        table.add_row("Followers", f"{user.public_metrics.followers_count:,}")
        table.add_row("Following", f"{user.public_metrics.following_count:,}")
        table.add_row("Posts", f"{user.public_metrics.tweet_count:,}")
    if user.affiliation:
        table.add_row("Affiliation", user.affiliation.description or "-")
    table.add_row("Organization ID", org_user_id or "-")

    console.print(table)


@app.command()
def affiliates(
    token: str = typer.Option(..., "--token", "-t", envvar="XAFFILIATES_TOKEN", help="User access token"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save dashboard data as JSON"
    ),
    max_pages: Optional[int] = typer.Option(
        None, "--max-pages", min=1, help="Stop after this many pages"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print dashboard data as JSON instead of a table"
    ),
):
    """List everyone affiliated with your organization."""
    config = AffiliatesConfig(
        log_format=LogFormat.JSON,
        log_level="CRITICAL" if as_json else "WARNING",
        max_affiliate_pages=max_pages,
    )
    configure_logging(config)

    async def run():
        async with DashboardService(config) as service:
            return await service.load(token)

    try:
        data = asyncio.run(run())
    except XAffiliatesError as e:
        console.print(f"[red]Failed to fetch profile: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(to_json(data))
        if output:
            save_json(data, output)
        return

    if not data.org_user_id:
        console.print(f"@{data.user.username} has no organization affiliation")
        raise typer.Exit(1)

    if data.affiliates_error:
        console.print(f"[yellow]Could not list affiliates: {data.affiliates_error}[/yellow]")

    table = Table(title=f"Affiliates of {data.org_user_id}")
    table.add_column("Username")
    table.add_column("Name")
    table.add_column("Followers", justify="right")

    for user in data.affiliates:
        followers = user.public_metrics.followers_count if user.public_metrics else 0
        table.add_row(f"@{user.username}", user.name, f"{followers:,}")

    console.print(table)
    console.print(f"\n[bold]{len(data.affiliates)} affiliates[/bold]")

    if output:
        save_json(data, output)
        console.print(f"[dim]Saved to {output}[/dim]")


if __name__ == "__main__":
    app()
