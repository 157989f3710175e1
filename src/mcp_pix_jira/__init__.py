import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "1.0.0"

from .logging_config import DEFAULT_LOGGER_NAME, log_operation, setup_logger

STARTUP_HINTS = {
    "Configuration validation failed": (
        "Tip: Make sure you have created a .env file with the required variables.\n"
        "   Copy .env.example to .env and fill in your JIRA credentials."
    ),
    "Authentication failed": (
        "Tip: Check that your JIRA_EMAIL and JIRA_API_TOKEN are correct.\n"
        "   You can generate a new API token at: "
        "https://id.atlassian.com/manage-profile/security/api-tokens"
    ),
    "Failed to connect": (
        "Tip: Verify that JIRA_BASE_URL is correct and accessible.\n"
        "   Expected format: https://YOURWORKSPACE.atlassian.net"
    ),
}


def startup_hint(error_message: str) -> str | None:
    """Return the troubleshooting hint matching a startup error, if any."""
    for marker, hint in STARTUP_HINTS.items():
        if marker in error_message:
            return hint
    return None


def _find_startup_error(exc: BaseException) -> BaseException:
    # anyio task groups wrap lifespan failures in exception groups
    while isinstance(exc, BaseExceptionGroup) and len(exc.exceptions) == 1:
        exc = exc.exceptions[0]
    return exc


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE or Streamable HTTP transport",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to for SSE or Streamable HTTP transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="JIRA URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="JIRA account email")
@click.option("--jira-token", help="JIRA API token")
@click.option(
    "--custom-fields-mode",
    type=click.Choice(["allowlist", "generic"]),
    help="Show the configured Pix custom fields (allowlist) or every custom field (generic)",
)
@click.option(
    "--skip-connection-test",
    is_flag=True,
    default=False,
    help="Start without checking the JIRA credentials",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_email: str | None,
    jira_token: str | None,
    custom_fields_mode: str | None,
    skip_connection_test: bool,
) -> None:
    """MCP Pix JIRA Server - JIRA issue retrieval and ticket analysis for MCP.

    Exposes the get_issue and analyze_ticket tools, and the analyze_ticket
    prompt, for JIRA Cloud.
    """
    # Load environment variables from file if specified, otherwise try default .env
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    try:
        logger = setup_logger(
            name=DEFAULT_LOGGER_NAME,
            level=logging_level,
            log_to_file=log_to_file,
            log_dir=log_dir,
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # Set environment variables from command line arguments if provided
    if jira_url:
        os.environ["JIRA_BASE_URL"] = jira_url
    if jira_email:
        os.environ["JIRA_EMAIL"] = jira_email
    if jira_token:
        os.environ["JIRA_API_TOKEN"] = jira_token
    if custom_fields_mode:
        os.environ["JIRA_CUSTOM_FIELDS_MODE"] = custom_fields_mode
    if log_dir:
        os.environ["LOG_DIR"] = log_dir
    if skip_connection_test:
        os.environ["JIRA_SKIP_CONNECTION_TEST"] = "true"

    from .jira.config import JiraConfig
    from .servers import main_mcp

    try:
        with log_operation(logger, "application_startup", app_version=__version__):
            # Fail fast on configuration before opening the transport
            JiraConfig.from_env()
            logger.info(
                f"Starting MCP Pix JIRA v{__version__} with {transport} transport"
            )

        run_kwargs: dict = {"transport": transport}
        if transport != "stdio":
            run_kwargs.update({"host": host, "port": port})
        asyncio.run(main_mcp.run_async(**run_kwargs))
    except KeyboardInterrupt:
        logger.info("Received interrupt, shutting down...")
    except Exception as e:
        error = _find_startup_error(e)
        logger.error(f"Failed to start MCP Pix JIRA server: {error}")
        click.echo(f"\nError: {error}\n", err=True)
        hint = startup_hint(str(error))
        if hint:
            click.echo(f"{hint}\n", err=True)
        sys.exit(1)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
