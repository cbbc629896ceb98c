"""Main CLI application using Cyclopts.

Apart from ``serve``, the CLI is a thin HTTP client that talks to a running
server via its REST API.
"""

import cyclopts

from impact.cli.commands import reports, serve

app = cyclopts.App(
    name="impact",
    help="Impact Reports - CLI",
)

app.command(serve.app, name="serve")
app.command(reports.app, name="reports")
