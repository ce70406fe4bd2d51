from __future__ import annotations

import sys
from typing import Optional

import typer

from solr_indexer.config import Settings, get_settings
from solr_indexer.domain.errors import IndexerError
from solr_indexer.driver import SolrIndexJob
from solr_indexer.host import parse_job_args
from solr_indexer.pipeline.fetcher import RecordFetcher
from solr_indexer.pipeline.query import build_query
from solr_indexer.pipeline.submitter import IndexSubmitter
from solr_indexer.utils.logging import configure_logging

app = typer.Typer(help="Index database records into Apache Solr.")


def _build_job(settings: Settings, debug: bool) -> SolrIndexJob:
    return SolrIndexJob(
        fetcher=RecordFetcher(
            connect_timeout=settings.db_connect_timeout_seconds,
            statement_timeout_ms=settings.db_statement_timeout_ms,
        ),
        submitter=IndexSubmitter(timeout=settings.http_timeout_seconds),
        debug=debug,
    )


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    password = "***" if settings.source_password else ""
    typer.echo(
        f"SOURCE={settings.source_user}:{password}@{settings.source_dsn} | "
        f"table={settings.source_tb} fields={settings.source_fields} "
        f"id_field={settings.source_id_field}"
    )
    typer.echo(
        f"INDEX={settings.index_endpoint} | http_timeout={settings.http_timeout_seconds}s "
        f"db_connect_timeout={settings.db_connect_timeout_seconds}s "
        f"statement_timeout={settings.db_statement_timeout_ms}ms"
    )


@app.command()
def query() -> None:
    """
    Print the SQL generated from the configured table, fields and id column.
    """
    settings = get_settings()
    typer.echo(build_query(settings.source_tb, settings.source_fields, settings.source_id_field))


@app.command()
def index(
    record_id: Optional[str] = typer.Option(
        None,
        "--id",
        "-i",
        help="Primary key of the record to index.",
    ),
    args_xml: Optional[str] = typer.Option(
        None,
        "--args-xml",
        help="Job arguments as XML, e.g. '<params><id>42</id></params>'.",
    ),
    debug: Optional[bool] = typer.Option(
        None,
        "--debug/--no-debug",
        help="Log the generated SQL and XML (default from settings).",
    ),
) -> None:
    """
    Index a single record, as a worker would for one job.
    """
    settings = get_settings()
    effective_debug = settings.debug if debug is None else debug
    configure_logging(
        level="DEBUG" if effective_debug else settings.log_level, json_logs=settings.log_json
    )

    if args_xml is not None:
        try:
            job_args = parse_job_args(args_xml)
        except IndexerError as exc:
            typer.echo(f"FAILED [{exc.kind.value}]: {exc.message}", err=True)
            raise typer.Exit(code=1)
    elif record_id is not None:
        job_args = {"id": record_id}
    else:
        typer.echo("Either --id or --args-xml is required.", err=True)
        raise typer.Exit(code=2)

    outcome = _build_job(settings, effective_debug).run(job_args, settings.service_config())
    if not outcome.success:
        kind = outcome.kind.value if outcome.kind else "unknown"
        typer.echo(f"FAILED [{kind}]: {outcome.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"OK: {outcome.message}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
