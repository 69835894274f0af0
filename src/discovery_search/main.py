"""Main CLI entry point for discovery search.

Loads discovery documents from disk into an in-memory search index and runs
queries, keyword completion and vocabulary listings against it.
"""

import json
import sys
import time
import traceback
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import click

from . import __version__
from .config.exceptions import ConfigurationError
from .config.logging import configure_logging, get_logger, log_performance
from .config.settings import Settings, load_settings
from .discovery.loader import load_directory, load_service
from .exceptions import DiscoveryDocumentError
from .search.search_manager import SearchManager
from .search.search_result import SearchResult
from .search.search_result_index import SearchResultIndex
from .search.suggestions import KeywordCompletionSuggestOracle

logger = get_logger(__name__)


class CLIError(Exception):
    """Base CLI error with user-friendly messages."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)


def handle_cli_error(error: Exception, ctx: Optional[click.Context] = None):
    """Print a user-facing error message and exit with status 1."""
    if isinstance(error, CLIError):
        click.echo(f"Error: {error.message}", err=True)
        if error.suggestion:
            click.echo(f"Suggestion: {error.suggestion}", err=True)
    elif isinstance(error, ConfigurationError):
        click.echo(f"Configuration error: {error}", err=True)
    else:
        verbose = bool(ctx and ctx.obj and ctx.obj.get("verbose"))
        click.echo(f"Unexpected error: {error}", err=True)
        if verbose:
            click.echo(traceback.format_exc(), err=True)
        else:
            click.echo("Run with --verbose for detailed error information", err=True)

    sys.exit(1)


@dataclass
class LoadedIndex:
    """An index built from documents on disk, with its completion oracle."""

    index: SearchResultIndex
    oracle: KeywordCompletionSuggestOracle
    manager: SearchManager
    failures: List[Tuple[str, str]]


def build_index(documents: Tuple[str, ...], directory: Optional[str] = None) -> LoadedIndex:
    """Load documents and index them, skipping documents that fail to load.

    Raises:
        CLIError: If nothing at all could be loaded
    """
    oracle = KeywordCompletionSuggestOracle()
    index = SearchResultIndex(keyword_callback=oracle)
    manager = SearchManager(index)
    failures: List[Tuple[str, str]] = []

    start_time = time.time()

    if directory:
        try:
            manager.directory_loaded(load_directory(directory))
        except DiscoveryDocumentError as e:
            failures.append((directory, str(e)))

    loaded = 0
    for path in documents:
        try:
            service = load_service(path)
        except DiscoveryDocumentError as e:
            failures.append((path, str(e)))
            continue
        manager.service_loaded(service)
        loaded += 1

    if not loaded and not index.vocabulary:
        raise CLIError(
            "No documents could be indexed",
            "Check that each --document is a valid discovery document",
        )

    log_performance(
        logger,
        "build_index",
        (time.time() - start_time) * 1000,
        documents=loaded,
        keywords=len(index),
    )
    return LoadedIndex(index=index, oracle=oracle, manager=manager, failures=failures)


def _report_failures(failures: List[Tuple[str, str]], quiet: bool) -> None:
    if quiet:
        return
    for path, message in failures:
        click.echo(f"Warning: skipped {path}: {message}", err=True)


def _result_to_dict(result: SearchResult) -> Dict[str, Any]:
    data = {
        "kind": result.kind.value,
        "id": result.result_id,
        "label": result.label,
        "service": result.service.name,
        "version": result.service.version,
        "title": result.service.display_title(),
    }
    if result.method is not None:
        data["method"] = result.method.id
        data["description"] = result.method.description
    else:
        data["description"] = result.service.description
    return data


def _settings(ctx: click.Context) -> Settings:
    return ctx.obj["settings"]


documents_option = click.option(
    "--document",
    "-d",
    "documents",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Discovery document to index (JSON or YAML); repeatable",
)


@click.group()
@click.version_option(version=__version__, prog_name="discovery-search")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with detailed logging",
)
@click.option(
    "--quiet", "-q", is_flag=True, help="Enable quiet mode with minimal output"
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Configuration file path (YAML format)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, config: Optional[str]):
    """Full-text search over API discovery documents.

    Indexes service and method descriptions in memory and answers free-text
    queries. Every query word must match; results are not ranked.

    \b
    Examples:
      discovery-search search "url shorten" -d urlshortener.json
      discovery-search suggest "insert resp" -d calendar.json
      discovery-search keywords -d calendar.json
    """
    if verbose and quiet:
        raise click.BadParameter("Cannot use both --verbose and --quiet options")

    ctx.ensure_object(dict)
    try:
        settings = load_settings(config)
    except ConfigurationError as e:
        handle_cli_error(e, ctx)

    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    else:
        level = settings.logging.level

    configure_logging(
        level=level,
        log_file=settings.get_log_file_path(),
        json_logs=settings.logging.json_format,
    )

    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


@cli.command()
@click.argument("query")
@documents_option
@click.option(
    "--directory",
    type=click.Path(exists=True, dir_okay=False),
    help="API directory listing to index alongside the documents",
)
@click.option("--limit", "-l", type=int, help="Maximum results to display")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    documents: Tuple[str, ...],
    directory: Optional[str],
    limit: Optional[int],
    output_format: str,
):
    """Search services and methods matching every word of QUERY."""
    try:
        if not documents and not directory:
            raise CLIError(
                "Nothing to search", "Pass at least one --document or --directory"
            )

        loaded = build_index(documents, directory)
        _report_failures(loaded.failures, ctx.obj["quiet"])

        limit = limit or _settings(ctx).search.max_results
        results = sorted(loaded.index.search(query), key=lambda r: r.result_id)
        shown = results[:limit]

        if output_format == "json":
            click.echo(
                json.dumps(
                    {
                        "query": query,
                        "total": len(results),
                        "results": [_result_to_dict(result) for result in shown],
                    },
                    indent=2,
                )
            )
            return

        if not results:
            click.echo(f"No results for '{query}'")
            return

        for result in shown:
            click.echo(f"[{result.kind.value}] {result.label} ({result.result_id})")
        if len(results) > len(shown):
            click.echo(f"... {len(results) - len(shown)} more")
    except CLIError as e:
        handle_cli_error(e, ctx)


@cli.command()
@click.argument("partial_query")
@documents_option
@click.option("--limit", "-l", type=int, help="Maximum completions to display")
@click.pass_context
def suggest(
    ctx: click.Context,
    partial_query: str,
    documents: Tuple[str, ...],
    limit: Optional[int],
):
    """Complete the last word of PARTIAL_QUERY from indexed keywords."""
    try:
        if not documents:
            raise CLIError("Nothing to search", "Pass at least one --document")

        loaded = build_index(documents)
        _report_failures(loaded.failures, ctx.obj["quiet"])

        limit = limit or _settings(ctx).search.suggestion_limit
        for suggestion in loaded.oracle.suggest(partial_query, limit=limit):
            click.echo(suggestion.replacement)
    except CLIError as e:
        handle_cli_error(e, ctx)


@cli.command()
@documents_option
@click.pass_context
def keywords(ctx: click.Context, documents: Tuple[str, ...]):
    """List every keyword indexed from the given documents."""
    try:
        if not documents:
            raise CLIError("Nothing to index", "Pass at least one --document")

        loaded = build_index(documents)
        _report_failures(loaded.failures, ctx.obj["quiet"])

        for keyword in loaded.oracle.keywords:
            click.echo(keyword)
    except CLIError as e:
        handle_cli_error(e, ctx)


if __name__ == "__main__":
    cli()
