from typing import Annotated

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text
from typer import Exit, Option, Typer

from .config import resolve_page_size, resolve_source
from .formatters import category_label, format_metric, rank_style
from .log import setup_logging
from .sources import SourceError, load_snapshot
from .view import ALL, ContractViolation, LeaderboardSession, LeaderboardView

app = Typer(help="Follower-count leaderboard in the terminal.")

BROWSE_HELP = (
    "[bold]n[/] next page, [bold]p[/] previous page, [bold]g <page>[/] go to page, "
    "[bold]c <region>[/] select region, [bold]a[/] all regions, [bold]q[/] quit"
)


def build_session(
    source: str | None = None,
    *,
    page_size: int | None = None,
    strict: bool = False,
) -> LeaderboardSession:
    """Load the configured dataset into a fresh session."""
    snapshot = load_snapshot(
        resolve_source(source), fallback="raise" if strict else "sample"
    )
    session = LeaderboardSession(page_size=resolve_page_size(page_size))
    session.replace_snapshot(snapshot)
    return session


def render_view(console: Console, view: LeaderboardView) -> None:
    title = f"Follower ranking: {category_label(view.selected_category)}"
    if view.is_empty:
        console.print(
            Panel(
                "No accounts found for this region.",
                title=title,
                title_align="left",
                border_style="bold red",
            )
        )
        return

    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Account", no_wrap=True)
    table.add_column("Followers", justify="right")
    table.add_column("Store")
    table.add_column("Region")
    table.add_column("Popularity", justify="right")

    for row in view.visible:
        entity = row.entity
        profile_url = entity.payload.get("profile_url")
        account = Text(
            f"@{entity.display_name}",
            style=Style(link=profile_url) if profile_url else "",
        )
        popularity = entity.payload.get("popularity")
        table.add_row(
            Text(str(row.rank), style=rank_style(row.rank)),
            account,
            format_metric(entity.metric_value),
            Text(str(entity.payload.get("store_name", ""))),
            Text(entity.category or "-"),
            "" if popularity is None else str(popularity),
        )
    console.print(table)

    if view.show_pagination:
        console.print(f"Page {view.effective_page}/{view.total_pages}")


def _fail(console: Console, exc: Exception) -> None:
    console.print(f"[bold red]Error:[/] {exc}")
    raise Exit(code=1)


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        Option("--log-level", help="Log level (defaults to RANKBOARD_LOG_LEVEL or INFO)."),
    ] = None,
) -> None:
    setup_logging(level=log_level, app_name="cli", force=True)


@app.command()
def show(
    category: Annotated[
        str,
        Option("--category", "-c", help="Region to show; 'all' shows every account."),
    ] = ALL,
    page: Annotated[int, Option("--page", "-p", min=1, help="1-based page number.")] = 1,
    page_size: Annotated[
        int | None, Option("--page-size", min=1, help="Accounts per page.")
    ] = None,
    source: Annotated[
        str | None,
        Option("--source", "-s", help="Dataset URL or JSON file (defaults to RANKBOARD_SOURCE)."),
    ] = None,
    strict: Annotated[
        bool, Option("--strict", help="Fail instead of falling back to sample data.")
    ] = False,
) -> None:
    """Show one page of the leaderboard."""
    console = Console()
    try:
        session = build_session(source, page_size=page_size, strict=strict)
    except (SourceError, ContractViolation) as exc:
        _fail(console, exc)

    session.category_selected(category)
    view = session.page_requested(page)
    if view.effective_page != page:
        console.print(
            f"[yellow]Page {page} is out of range, showing page {view.effective_page}.[/]"
        )
    render_view(console, view)


@app.command()
def categories(
    source: Annotated[
        str | None,
        Option("--source", "-s", help="Dataset URL or JSON file (defaults to RANKBOARD_SOURCE)."),
    ] = None,
    strict: Annotated[
        bool, Option("--strict", help="Fail instead of falling back to sample data.")
    ] = False,
) -> None:
    """List the selectable regions in the order they appear in the data."""
    console = Console()
    try:
        session = build_session(source, strict=strict)
    except (SourceError, ContractViolation) as exc:
        _fail(console, exc)

    for value in session.view().available_categories:
        console.print(f"- {value}")


def handle_command(session: LeaderboardSession, command: str) -> LeaderboardView | None:
    """
    Apply one browse command to the session.

    Returns the new view, or None when the command is "q". Raises ValueError
    for anything it does not understand.
    """
    verb, _, argument = command.strip().partition(" ")
    verb = verb.lower()
    argument = argument.strip()
    if verb == "q":
        return None
    if verb == "n":
        return session.next_page()
    if verb == "p":
        return session.previous_page()
    if verb == "a":
        return session.category_selected(ALL)
    if verb == "c":
        if not argument:
            raise ValueError("`c` needs a region name")
        if argument not in session.view().available_categories:
            raise ValueError(f"Unknown region: {argument}")
        return session.category_selected(argument)
    if verb == "g":
        try:
            page = int(argument)
        except ValueError:
            raise ValueError(f"`g` needs a page number, got {argument!r}") from None
        if page < 1:
            raise ValueError("Page numbers start at 1")
        return session.page_requested(page)
    raise ValueError(f"Unknown command: {command.strip()!r}")


@app.command()
def browse(
    page_size: Annotated[
        int | None, Option("--page-size", min=1, help="Accounts per page.")
    ] = None,
    source: Annotated[
        str | None,
        Option("--source", "-s", help="Dataset URL or JSON file (defaults to RANKBOARD_SOURCE)."),
    ] = None,
    strict: Annotated[
        bool, Option("--strict", help="Fail instead of falling back to sample data.")
    ] = False,
) -> None:
    """Page through the leaderboard interactively."""
    console = Console()
    try:
        session = build_session(source, page_size=page_size, strict=strict)
    except (SourceError, ContractViolation) as exc:
        _fail(console, exc)

    view = session.view()
    while True:
        render_view(console, view)
        regions = ", ".join(view.available_categories)
        console.print(f"[bold]Regions:[/] {regions}")
        console.print(BROWSE_HELP)
        answer = console.input("[bold cyan]Command:[/] ")
        while answer.strip() == "":
            console.print("[bold red]You need to enter a command[/]\n")
            answer = console.input("[bold cyan]Command:[/] ")
        try:
            next_view = handle_command(session, answer)
        except ValueError as exc:
            console.print(f"[bold red]{exc}[/]")
            continue
        if next_view is None:
            break
        view = next_view


@app.command()
def serve(
    host: Annotated[str, Option("--host", help="Interface to bind.")] = "127.0.0.1",
    port: Annotated[int, Option("--port", help="Port to listen on.")] = 8000,
) -> None:
    """Serve the leaderboard JSON API."""
    from .server import run_server

    run_server(host=host, port=port)
