"""AEO auditor CLI — entry-point for audits and FAQ generation.

Usage:
    python cli/main.py --help

Commands:
    audit   → score a page (URL or local HTML file)
    jsonld  → print the heuristic FAQPage JSON-LD
    faqs    → generate FAQs through the FAQ service
    serve   → run the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from aeo_auditor.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from aeo_auditor.audit.meta import faq_markdown, faq_script_tag
from aeo_auditor.audit.models import Report
from aeo_auditor.audit.report import make_faq_json_ld
from aeo_auditor.config import settings
from aeo_auditor.session import AuditMode, AuditSession
from cli.rendering import render_report

app = typer.Typer(
    name="aeo",
    help="AEO readiness auditor CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging.")) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level.upper())


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _run_session(url: str, html_file: Optional[Path], proxy: Optional[str]) -> AuditSession:
    """Audit the given input; exits with code 1 on failure."""
    html = ""
    if html_file is not None:
        try:
            html = html_file.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            typer.echo(f"❌ Cannot read {html_file}: {exc}", err=True)
            raise typer.Exit(code=1)

    session = AuditSession()
    mode = AuditMode.HTML if html_file is not None else AuditMode.FETCH
    session.analyze(url=url, html=html, mode=mode, proxy=proxy)
    if session.report is None:
        typer.echo(f"❌ {session.error}", err=True)
        raise typer.Exit(code=1)
    return session


_URL_OPT = typer.Option("", "--url", help="Page URL (bare domains accepted).")
_FILE_OPT = typer.Option(
    None, "--html-file", help="Local HTML file to audit (most accurate).", exists=False
)
_PROXY_OPT = typer.Option(
    None, "--proxy", help="HTML/CORS proxy ('' for none); defaults to HTML_PROXY."
)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("audit")
def audit(
    url: str = _URL_OPT,
    html_file: Optional[Path] = _FILE_OPT,
    proxy: Optional[str] = _PROXY_OPT,
    as_json: bool = typer.Option(False, "--json", help="Print the full JSON report."),
) -> None:
    """Audit a page and print its AEO readiness score and recommendations."""
    report: Report = _run_session(url, html_file, proxy).report  # type: ignore[assignment]
    if as_json:
        typer.echo(report.to_json())
    else:
        typer.echo(render_report(report))


@app.command("jsonld")
def jsonld(
    url: str = _URL_OPT,
    html_file: Optional[Path] = _FILE_OPT,
    proxy: Optional[str] = _PROXY_OPT,
    script_tag: bool = typer.Option(False, "--script-tag", help="Wrap in a <script> tag."),
) -> None:
    """Print the FAQPage JSON-LD suggested from the page's headings."""
    report: Report = _run_session(url, html_file, proxy).report  # type: ignore[assignment]
    typer.echo(faq_script_tag(report.faq_json_ld) if script_tag else report.faq_json_ld)


@app.command("faqs")
def faqs(
    url: str = _URL_OPT,
    html_file: Optional[Path] = _FILE_OPT,
    proxy: Optional[str] = _PROXY_OPT,
    endpoint: Optional[str] = typer.Option(
        None, "--endpoint", help="FAQ service URL; defaults to FAQ_API_URL."
    ),
) -> None:
    """Generate FAQs for a page through the FAQ generation service."""
    session = _run_session(url, html_file, proxy)
    items = session.generate_ai_faqs(endpoint=endpoint)
    if session.ai_error:
        typer.echo(f"❌ {session.ai_error}", err=True)
        raise typer.Exit(code=1)
    if not items:
        typer.echo("[faqs] The service returned no FAQs.")
        return
    typer.echo(faq_markdown(items))
    typer.echo(make_faq_json_ld(items))


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(4000, help="Bind port."),
) -> None:
    """Run the HTTP API (audit + FAQ generation) under uvicorn."""
    import uvicorn

    typer.echo(f"[serve] AEO API listening on http://{host}:{port}")
    uvicorn.run("aeo_auditor.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
