#!/usr/bin/env python3
"""
GitHub MCP Server - Main Entry Point

A Model Context Protocol server that exposes GitHub operations
(repositories, branches, files, issues, commits and search) as tools.

Usage:
    python main.py [--env-file .env] [--log-level DEBUG] [--transport stdio]

Environment Variables (required):
    GITHUB_PERSONAL_ACCESS_TOKEN - GitHub personal access token
                                   (GITHUB_TOKEN is accepted as a fallback)

Optional Environment Variables:
    GITHUB_API_URL - REST API root (default: https://api.github.com)
    GITHUB_TIMEOUT - Request timeout in seconds (default: 30)
    DEFAULT_PER_PAGE - Page size when a tool gets none (default: 30)
    LOG_LEVEL - Logging level (DEBUG, INFO, WARNING, ERROR)
    MCP_SERVER_NAME - Name announced to MCP clients (default: github)
"""

import argparse
import os
import sys
from pathlib import Path
from loguru import logger

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from github_mcp_server import GitHubMCPServer, __version__


def setup_logging(log_level: str = "INFO") -> None:
    """Setup Loguru-based logging on stderr; stdout carries the MCP protocol."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
    )
    logger.info(f"Log level set to {log_level.upper()}")


def parse_arguments() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="GitHub MCP Server",
        epilog="""
Examples:
    python main.py                      # Use default .env file
    python main.py --env-file prod.env  # Use custom environment file
    python main.py --log-level DEBUG    # Enable debug logging
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to environment file (default: .env in current directory)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: LOG_LEVEL or INFO)"
    )

    parser.add_argument(
        "--transport",
        type=str,
        default="stdio",
        choices=["stdio", "sse"],
        help="MCP transport protocol (default: stdio)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"GitHub MCP Server {__version__}"
    )

    return parser.parse_args()


def print_banner() -> None:
    """Print server banner with key information."""
    banner = f"""
╔══════════════════════════════════════════════════════════════════════════╗
║                        GitHub MCP Server v{__version__:<31}║
║                                                                          ║
║  Repositories, branches, files, issues, commits and search as MCP tools  ║
╚══════════════════════════════════════════════════════════════════════════╝
    """
    print(banner, file=sys.stderr)


def main() -> None:
    """Main entry point for the GitHub MCP Server."""
    try:
        args = parse_arguments()
        setup_logging(args.log_level)
        print_banner()

        logger.info(f"Initializing GitHub MCP Server v{__version__}")
        try:
            server = GitHubMCPServer(env_file=args.env_file)
        except Exception as e:
            logger.error(f"Server initialization failed: {e}")
            logger.error("Please check your environment variables and configuration")
            sys.exit(1)

        logger.info("Server is now ready to accept MCP connections")
        server.run(transport=args.transport)

    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")

    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
