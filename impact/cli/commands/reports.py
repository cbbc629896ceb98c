"""Report commands."""

import os
import sys
from typing import Any

import cyclopts
import httpx

from impact.cli.console import funding_progress, get_console

app = cyclopts.App(name="reports", help="Browse reports and record funding")


def get_server_url() -> str:
    """Get server URL from environment."""
    return os.environ.get("IMPACT_SERVER", "http://localhost:8000")


def _request(method: str, path: str, **kwargs: Any) -> Any:
    """Call the API and return decoded JSON, exiting with a message on failure."""
    console = get_console()
    server_url = get_server_url()

    try:
        response = httpx.request(method, f"{server_url}/api/v1{path}", timeout=60.0, **kwargs)
        response.raise_for_status()
        return response.json()
    except httpx.ConnectError:
        console.error(
            f"Could not connect to server at {server_url}",
            hint="Is the server running? Start it with: impact serve",
        )
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        message = e.response.text
        try:
            message = e.response.json().get("message", message)
        except ValueError:
            pass
        console.error(f"Server error: {e.response.status_code} - {message}")
        sys.exit(1)


@app.command(name="list")
def list_reports() -> None:
    """List all reports with their funding progress."""
    console = get_console()
    data = _request("GET", "/reports")

    rows = [
        {
            "slug": report.get("slug"),
            "title": report.get("title"),
            "category": report.get("category"),
            "state": report.get("state"),
            "funding": funding_progress(
                report.get("fundedSoFar") or 0, report.get("totalCost") or 0
            ),
        }
        for report in data.get("reports", [])
    ]
    if not rows:
        console.warning("No reports found")
        return

    console.table(
        rows,
        [
            ("slug", "Slug"),
            ("title", "Title"),
            ("category", "Category"),
            ("state", "State"),
            ("funding", "Funding"),
        ],
        title=f"{len(rows)} report{'s' if len(rows) != 1 else ''}",
    )


@app.command
def show(slug: str, /) -> None:
    """Show a single report.

    Args:
        slug: Report slug as shown by 'impact reports list'.
    """
    get_console().report_detail(_request("GET", f"/reports/{slug}"))


@app.command
def fund(hypercert_id: str, amount: float, /) -> None:
    """Add a funding contribution to a report.

    Args:
        hypercert_id: Hypercert (claim) id of the report.
        amount: Amount to add to the funded total.
    """
    console = get_console()
    data = _request("POST", f"/reports/{hypercert_id}/funding", json={"amount": amount})

    if data.get("fundedSoFar") is None:
        console.warning(f"No cached report for hypercert {hypercert_id}; nothing updated")
        return
    console.success(f"Funded so far for {hypercert_id}: {data['fundedSoFar']:,.2f}")
