import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv

from mcp_jira.utils.logging import setup_logging

__version__ = "0.1.0"

TRUTHY = ("true", "1", "yes")

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("MCP_VERBOSE", "").lower() in TRUTHY:
    logging_level = logging.DEBUG

# Set up logging using the utility function
logger = setup_logging(logging_level)


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
    help="Transport type (stdio, sse, or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE or Streamable HTTP transport",
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to for SSE or Streamable HTTP transport (default: 127.0.0.1)",
)
@click.option(
    "--path",
    default="/mcp",
    help="Path for Streamable HTTP transport (e.g., /mcp).",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-username", help="Jira account email used for authentication")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (rejects add_comment and create_issue)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    path: str | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool,
    read_only: bool,
) -> None:
    """MCP Jira Server - Jira issue tools for MCP

    Exposes get_issue, search_issues, add_comment and create_issue,
    authenticating to Jira with an account email and API token.
    """
    # Logging level logic
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        if os.getenv("MCP_VERY_VERBOSE", "false").lower() in TRUTHY or (
            os.getenv("DEBUG") == "1"
        ):
            current_logging_level = logging.DEBUG
        elif os.getenv("MCP_VERBOSE", "false").lower() in TRUTHY:
            current_logging_level = logging.INFO
        else:
            current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    def was_option_provided(ctx: click.Context, param_name: str) -> bool:
        return (
            ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT_MAP
            and ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT
        )

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Transport precedence
    final_transport = os.getenv("TRANSPORT", "stdio").lower()
    if click_ctx and was_option_provided(click_ctx, "transport"):
        final_transport = transport
    if final_transport not in ["stdio", "sse", "streamable-http"]:
        logger.warning(
            f"Invalid transport '{final_transport}' from env/default, using 'stdio'."
        )
        final_transport = "stdio"
    logger.debug(f"Final transport determined: {final_transport}")

    # Port precedence
    final_port = 8000
    if os.getenv("PORT", "").isdigit():
        final_port = int(os.environ["PORT"])
    if click_ctx and was_option_provided(click_ctx, "port"):
        final_port = port

    # Host precedence
    final_host = os.getenv("HOST", "127.0.0.1")
    if click_ctx and was_option_provided(click_ctx, "host"):
        final_host = host

    # Path precedence
    final_path: str | None = os.getenv("STREAMABLE_HTTP_PATH", None)
    if click_ctx and was_option_provided(click_ctx, "path"):
        final_path = path

    # Set env vars for downstream config
    if click_ctx and was_option_provided(click_ctx, "jira_url"):
        os.environ["JIRA_INSTANCE_URL"] = jira_url
    if click_ctx and was_option_provided(click_ctx, "jira_username"):
        os.environ["JIRA_USER_EMAIL"] = jira_username
    if click_ctx and was_option_provided(click_ctx, "jira_token"):
        os.environ["JIRA_API_TOKEN"] = jira_token
    if click_ctx and was_option_provided(click_ctx, "jira_ssl_verify"):
        os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()
    if click_ctx and was_option_provided(click_ctx, "read_only"):
        os.environ["READ_ONLY_MODE"] = str(read_only).lower()

    from mcp_jira.exceptions import MCPJiraConfigurationError
    from mcp_jira.jira import JiraConfig, JiraFetcher
    from mcp_jira.servers import create_server
    from mcp_jira.utils.io import is_read_only_mode

    try:
        jira_config = JiraConfig.from_env()
    except MCPJiraConfigurationError as e:
        logger.error(f"Invalid Jira configuration: {e}")
        sys.exit(1)

    jira = JiraFetcher(config=jira_config)
    server = create_server(jira, read_only=is_read_only_mode())

    run_kwargs = {
        "transport": final_transport,
    }

    if final_transport == "stdio":
        logger.info("Starting server with STDIO transport.")
    else:
        run_kwargs["host"] = final_host
        run_kwargs["port"] = final_port
        run_kwargs["log_level"] = logging.getLevelName(current_logging_level).lower()
        if final_path is not None:
            run_kwargs["path"] = final_path
        logger.info(
            f"Starting server with {final_transport.upper()} transport on http://{final_host}:{final_port}{final_path or ''}"
        )

    try:
        asyncio.run(server.run_async(**run_kwargs))
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")
    except Exception as e:
        logger.error(f"Server failed: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
