from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..api import create_app
from ..config import AppConfig, dump_config
from ..core import MinifyService
from ..errors import MinifyError, describe_error
from ..settings import get_settings, prepare_config

console = Console()

app = typer.Typer(help="Local JavaScript minification toolkit")


def _load_config(path: Path | None) -> AppConfig:
    return prepare_config(get_settings(), path)


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", help="Port to listen on"),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    import uvicorn

    cfg = _load_config(config)
    if host is not None:
        cfg.api.host = host
    if port is not None:
        cfg.api.port = port
    configure_logging()
    console.print("Server started. Listening...")
    console.print(f"Go to: localhost:{cfg.api.port}/?file=C:\\path\\to\\file.js", markup=False)
    console.print(f"Or:    localhost:{cfg.api.port}/?folder=C:\\path\\to\\folder", markup=False)
    uvicorn.run(create_app(cfg), host=cfg.api.host, port=cfg.api.port, log_config=None)


@app.command("file")
def minify_file(
    path: Path,
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    cfg = _load_config(config)
    service = MinifyService(cfg)
    try:
        result = service.minify_file(path)
    except MinifyError as exc:
        console.print(f"[red]Minification failed[/red]: {exc.code}", markup=True)
        console.print(describe_error(exc), markup=False)
        raise typer.Exit(1) from exc
    typer.echo(result.content or "")


@app.command()
def folder(
    path: Path,
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
    parallel: int | None = typer.Option(None, "--parallel", min=1, help="Parallel workers"),
) -> None:
    cfg = _load_config(config)
    service = MinifyService(cfg)
    try:
        report = service.minify_folder(path, parallelism=parallel)
    except MinifyError as exc:
        console.print(f"[red]Folder minification failed[/red]: {exc.code}")
        console.print(describe_error(exc), markup=False)
        raise typer.Exit(1) from exc
    table = Table(title="Folder summary")
    table.add_column("Source")
    table.add_column("Output")
    table.add_column("Status")
    for result in report.results:
        status = "[green]ok[/green]" if result.success else f"[red]{escape(result.error or '')}[/red]"
        table.add_row(str(result.source), str(result.output), status)
    console.print(table)
    console.print(
        f"Processed {report.total} files: "
        f"{len(report.succeeded)} succeeded, {len(report.failed)} failed."
    )


@app.command("show-config")
def show_config(
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    typer.echo(dump_config(_load_config(config)))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
