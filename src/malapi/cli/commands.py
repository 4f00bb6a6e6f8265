"""CLI commands for malapi.

- ``anime`` / ``manga``: search by title and print the results as a table.
- ``login``: run the OAuth2 authorization code flow and save the token.

Credentials come from the environment (see ``.env.example``). The default
result count can be set with ``[cli] limit`` in the config file or
``MALAPI_CLI_LIMIT``.
"""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from rich.markup import escape
from rich.table import Table

from malapi.auth.credentials import Credentials
from malapi.auth.oauth import OAuthClient, RedirectResponse
from malapi.cli import app, console
from malapi.clients.anime import AnimeApiClient
from malapi.clients.manga import MangaApiClient
from malapi.errors import MalApiError
from malapi.queries.anime import GetAnimeList
from malapi.queries.manga import GetMangaList
from malapi.utils.config import resolve_setting

DEFAULT_LIMIT = 10


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


LimitOption = Annotated[
    int | None,
    typer.Option("--limit", "-l", help="Number of results to show (1-100)."),
]
FieldsOption = Annotated[
    str | None,
    typer.Option(
        "--fields",
        "-f",
        help="Comma-separated extra fields to request and show, e.g. mean,rank.",
    ),
]


def _split_fields(fields: str | None) -> list[str]:
    if not fields:
        return []
    return [token.strip() for token in fields.split(",") if token.strip()]


def _cell(value: Any) -> str:  # noqa: ANN401
    if value is None:
        return "-"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, list):
        return ", ".join(getattr(item, "name", None) or str(item) for item in value)
    return str(value)


def _render(title: str, nodes: list[Any], extra: list[str]) -> None:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Title", style="bold")
    for name in extra:
        table.add_column(name)
    for node in nodes:
        row = [str(node.id), node.title or "-"]
        row.extend(_cell(getattr(node, name, None)) for name in extra)
        table.add_row(*row)
    console.print(table)


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[red]Error: {escape(str(exc))}[/red]")
    raise typer.Exit(ExitCode.ERROR)


@app.command()
def anime(
    query: Annotated[str, typer.Argument(help="Title to search for.")],
    limit: LimitOption = None,
    fields: FieldsOption = None,
) -> None:
    """Search anime by title."""
    extra = _split_fields(fields)
    try:
        built = (
            GetAnimeList(query)
            .fields("id", "title", *extra)
            .limit(resolve_setting("cli.limit", default=DEFAULT_LIMIT, cli_value=limit))
            .build()
        )
        client = AnimeApiClient(Credentials.from_env())
        with console.status("[cyan]Searching anime...", spinner="dots"):
            result = asyncio.run(client.get_anime_list(built))
    except MalApiError as exc:
        _fail(exc)
    if not result.data:
        console.print("[yellow]No anime found.[/yellow]")
        return
    _render(f"Anime matching '{query}'", [entry.node for entry in result.data], extra)


@app.command()
def manga(
    query: Annotated[str, typer.Argument(help="Title to search for.")],
    limit: LimitOption = None,
    fields: FieldsOption = None,
) -> None:
    """Search manga by title."""
    extra = _split_fields(fields)
    try:
        built = (
            GetMangaList(query)
            .fields("id", "title", *extra)
            .limit(resolve_setting("cli.limit", default=DEFAULT_LIMIT, cli_value=limit))
            .build()
        )
        client = MangaApiClient(Credentials.from_env())
        with console.status("[cyan]Searching manga...", spinner="dots"):
            result = asyncio.run(client.get_manga_list(built))
    except MalApiError as exc:
        _fail(exc)
    if not result.data:
        console.print("[yellow]No manga found.[/yellow]")
        return
    _render(f"Manga matching '{query}'", [entry.node for entry in result.data], extra)


@app.command()
def login(
    write: Annotated[
        bool, typer.Option("--write", help="Also request permission to edit lists.")
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where to save the token file."),
    ] = None,
) -> None:
    """Authorize with MyAnimeList and save the access token."""
    try:
        oauth = OAuthClient.from_env()
        request = oauth.generate_auth_url(write=write)
        console.print("Open this URL in your browser and approve access:")
        console.print(request.url, soft_wrap=True)
        redirect = typer.prompt("Paste the URL you were redirected to")
        response = RedirectResponse.from_url(redirect)
        token = asyncio.run(oauth.authenticate(request, response))
        path = token.save(output)
    except MalApiError as exc:
        _fail(exc)
    console.print(f"[green]Token saved to {path}[/green]")
