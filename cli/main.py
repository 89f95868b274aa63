"""Article Reader CLI: read pages from the terminal or run the HTTP service.

Usage:
    python cli/main.py --help

Commands:
    read   → render one URL and print its title and text
    serve  → run the FastAPI app under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from article_reader.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from article_reader.api.responses import CONTENT_SUCCESS_MESSAGE, ServiceResponse
from article_reader.config import settings
from article_reader.logging_config import configure_logging
from article_reader.reader import read_article
from article_reader.scraper.fallback import FirecrawlClient

app = typer.Typer(
    name="article-reader",
    help="Article Reader CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override LOG_LEVEL (DEBUG gives console output)."
    ),
) -> None:
    configure_logging(log_level or settings.log_level, stream=sys.stderr)


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------
@app.command("read")
def read(
    url: str = typer.Argument(..., help="URL of the page to read."),
    as_json: bool = typer.Option(
        False, "--json", help="Print the same JSON envelope the HTTP API returns."
    ),
) -> None:
    """Render a URL and print its title and visible text."""
    fallback = FirecrawlClient.from_settings(settings)
    try:
        result = read_article(url, fallback=fallback)
    except Exception as exc:
        message = f"Error fetching content: {exc}"
        if as_json:
            envelope = ServiceResponse.failed(message, status_code=500)
            typer.echo(json.dumps(envelope.model_dump(mode="json", by_alias=True), indent=2))
        else:
            typer.echo(f"[read] {message}", err=True)
        raise typer.Exit(1)

    if as_json:
        envelope = ServiceResponse.ok(CONTENT_SUCCESS_MESSAGE, result.payload_dict())
        typer.echo(json.dumps(envelope.model_dump(mode="json", by_alias=True), indent=2))
        return

    payload = result.payload_dict()
    if result.source == "fallback":
        if not isinstance(payload, dict):
            payload = {}
        typer.echo("[read] Challenge page detected, content supplied by Firecrawl.")
        metadata = payload.get("metadata") or {}
        title = metadata.get("title") or payload.get("title")
        text = payload.get("markdown") or payload.get("content") or ""
    else:
        title = payload["title"]
        text = payload["content"]

    typer.echo(f"[read] Title  : {title or '(none)'}")
    typer.echo(f"[read] Words  : {len(text.split())}")
    typer.echo("")
    typer.echo(text)


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: HOST or 127.0.0.1)."),
    port: Optional[int] = typer.Option(None, help="Port (default: PORT or 8080)."),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "article_reader.api.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
