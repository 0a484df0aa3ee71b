"""Command line entry point: ``os-list details`` and ``os-list vulnerabilities``."""
import asyncio
import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from os_list.application.projector import ProjectionOptions
from os_list.application.reports import DetailsReport, RepositoryReport, VulnerabilitiesReport
from os_list.config import Settings
from os_list.domain.exceptions import FetchException, InvalidInputException
from os_list.domain.fields import parse_field_option, resolve
from os_list.domain.models import QueryParameters
from os_list.infrastructure.github_client import GitHubGraphQLClient
from os_list.infrastructure.renderer import TableRenderer

app = typer.Typer(
    name="os-list",
    help="Fetch details and vulnerabilities for the repositories of a GitHub user or organization.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

TOKEN_HELP = "GitHub authentication token. Should be of the format 'ghp_....'"
OWNER_HELP = "User for which you want to fetch the data of. For example: infinum"
TOPIC_HELP = "Set the topic based on which you want to search for. For example: open-source"
COUNT_HELP = "Set the number of repos to fetch. Default is 10"
CURSOR_HELP = (
    "Used if you want to paginate results. Usually the last cursor ID from the results. "
    "See: https://graphql.org/learn/pagination/#pagination-and-edges for more information"
)


def setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging with RichHandler."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def build_parameters(token: str, owner: str, topic: Optional[str], count: int, cursor: Optional[str]) -> QueryParameters:
    """
    Validates the command arguments.

    Raises:
        InvalidInputException: When the token or owner is empty or count is not positive.
    """
    if not token or not token.strip():
        raise InvalidInputException("GitHub token empty")

    if not owner or not owner.strip():
        raise InvalidInputException("GitHub user/org empty")

    try:
        return QueryParameters(owner=owner, topic=topic or None, count=count, cursor=cursor or None)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        raise InvalidInputException(f"Invalid arguments: {errors}") from e


def run_report(report: RepositoryReport, params: QueryParameters) -> None:
    try:
        projection = asyncio.run(report.run(params))
    except FetchException as e:
        logger.debug("Fetch failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if projection.is_empty:
        console.print("[yellow]Warning: Query returned no repositories.[/yellow]")

    console.print(f"[green]Total number of repositories found for {escape(params.owner)}: {projection.total_count}[/green]")
    TableRenderer(console).render(report.headers, projection.rows, report.widths, report.separate_rows)


def _fail(error: InvalidInputException) -> typer.Exit:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    return typer.Exit(1)


@app.command()
def details(
    token: str = typer.Argument(..., help=TOKEN_HELP),
    owner: str = typer.Argument(..., help=OWNER_HELP),
    topic: Optional[str] = typer.Argument(None, help=TOPIC_HELP),
    count: int = typer.Argument(10, help=COUNT_HELP),
    cursor: Optional[str] = typer.Argument(None, help=CURSOR_HELP),
    fields: Optional[str] = typer.Option(
        None,
        "--fields",
        help="Choose which fields to show. For example --fields=name,description,license. Default is all",
    ),
    words: int = typer.Option(10, "--words", min=0, help="Number of description words to show"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Fetches the details of the repositories of a user or organization."""
    settings = Settings.from_env()
    setup_logging(settings, verbose)

    try:
        params = build_parameters(token, owner, topic, count, cursor)
        selected = resolve(parse_field_option(fields))
    except InvalidInputException as e:
        raise _fail(e) from e

    client = GitHubGraphQLClient(token=token, api_url=settings.api_url, timeout=settings.request_timeout)
    report = DetailsReport(client, selected, options=ProjectionOptions(description_words=words))
    run_report(report, params)


@app.command()
def vulnerabilities(
    token: str = typer.Argument(..., help=TOKEN_HELP),
    owner: str = typer.Argument(..., help=OWNER_HELP),
    topic: Optional[str] = typer.Argument(None, help=TOPIC_HELP),
    count: int = typer.Argument(10, help=COUNT_HELP),
    cursor: Optional[str] = typer.Argument(None, help=CURSOR_HELP),
    full: bool = typer.Option(False, "--full", help="Use to display full description"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Fetches the vulnerability alerts of the repositories of a user or organization."""
    settings = Settings.from_env()
    setup_logging(settings, verbose)

    try:
        params = build_parameters(token, owner, topic, count, cursor)
    except InvalidInputException as e:
        raise _fail(e) from e

    client = GitHubGraphQLClient(token=token, api_url=settings.api_url, timeout=settings.request_timeout)
    report = VulnerabilitiesReport(client, options=ProjectionOptions(full=full))
    run_report(report, params)


if __name__ == "__main__":
    app()
