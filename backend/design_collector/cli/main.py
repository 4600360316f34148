"""CLI entrypoint for the design collector."""

from __future__ import annotations

import json
import os
from typing import Optional

import requests
import typer

app = typer.Typer(name="design-collector", help="Design collector command-line interface")

DEFAULT_HOST = "http://127.0.0.1:3847"


def _resolve_host(override: Optional[str]) -> str:
    if override:
        return override.rstrip('/')
    env_host = os.environ.get("DCOL_HOST_URL")
    if env_host:
        return env_host.rstrip('/')
    return DEFAULT_HOST


def _request(method: str, path: str, host: Optional[str] = None, timeout: float = 120, **kwargs) -> requests.Response:
    base = _resolve_host(host)
    url = f"{base}{path}"
    try:
        resp = requests.request(method, url, timeout=timeout, **kwargs)
    except requests.ConnectionError:
        typer.echo(f"Host not running at {base}. Start it with: design-collector serve", err=True)
        raise typer.Exit(code=1)
    if not resp.ok:
        try:
            detail = resp.json()
        except ValueError:
            detail = resp.text
        typer.echo(f"Request failed ({resp.status_code}): {detail}", err=True)
        raise typer.Exit(code=1)
    return resp


def _echo(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (defaults to settings)"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port (defaults to settings)"),
) -> None:
    """Run the local host server."""
    import uvicorn

    from design_collector.core.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "design_collector.app:app",
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


@app.command()
def health(
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Check that the host server is up."""
    resp = _request("GET", "/health", host=host, timeout=2)
    _echo(resp.json())


@app.command()
def extract(
    url: str = typer.Argument(..., help="Page to capture"),
    submit: bool = typer.Option(False, "--submit", help="Also analyze and store the snapshot"),
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Capture a design snapshot, optionally submitting it for analysis."""
    resp = _request("POST", "/extract", host=host, json={"url": url})
    payload = resp.json()
    if not payload.get("success"):
        typer.echo(f"Extraction failed: {payload.get('error')}", err=True)
        raise typer.Exit(code=1)
    if not submit:
        _echo(payload["data"])
        return
    analyzed = _request("POST", "/analyze", host=host, json=payload["data"])
    _echo(analyzed.json())


@app.command("list")
def list_designs(
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """List collected designs, newest first."""
    resp = _request("GET", "/list", host=host)
    _echo(resp.json()["designs"])


@app.command()
def delete(
    record_id: str = typer.Argument(..., help="Design ID"),
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Delete a collected design."""
    resp = _request("POST", "/delete", host=host, json={"id": record_id})
    payload = resp.json()
    _echo(payload)
    if not payload.get("success"):
        raise typer.Exit(code=1)


@app.command()
def stats(
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Show row counts per data table."""
    resp = _request("GET", "/data", host=host)
    _echo(resp.json())


if __name__ == "__main__":
    app()
