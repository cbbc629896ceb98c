"""Run the API server in the foreground."""

import cyclopts
import logfire
import uvicorn

app = cyclopts.App(name="serve", help="Run the API server")


@app.default
def serve(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the impact reports API under uvicorn.

    Args:
        host: Host to bind to.
        port: Port to listen on.
    """
    # Logfire must be configured before the app instruments FastAPI/httpx
    logfire.configure(send_to_logfire="if-token-present")
    uvicorn.run(
        "impact.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_config=None,  # configure_logging owns the root logger
    )
