"""
GitHub MCP Server

Model Context Protocol server exposing GitHub repository, branch, file,
issue, commit and search operations as tools using FastMCP.
"""

import sys
from typing import Any, Dict, Optional
from loguru import logger

from mcp.server.fastmcp import FastMCP

from .client import GitHubClient
from .config import Config
from .exceptions import ConfigurationError, GitHubMCPError
from .services import (
    RepositoryService,
    BranchService,
    FileService,
    IssueService,
    CommitService,
    SearchService,
)
from .tools import (
    register_repository_tools,
    register_branch_tools,
    register_file_tools,
    register_issue_tools,
    register_commit_tools,
    register_search_tools,
)


class GitHubMCPServer:
    """Main MCP server class wiring configuration, client, services and tools."""

    def __init__(
        self,
        env_file: Optional[str] = None,
        config: Optional[Config] = None,
        client: Optional[GitHubClient] = None
    ):
        """
        Initialize the GitHub MCP server.

        Args:
            env_file: Optional path to environment file
            config: Pre-built configuration; loaded from the environment when omitted
            client: Pre-built GitHub client; created from the configured token when omitted
        """
        self.config = config or self._load_config(env_file)
        self.mcp = FastMCP(self.config.server_name)
        self.client = client or GitHubClient(
            self.config.github_token,
            base_url=self.config.github_api_url,
            timeout=self.config.request_timeout,
        )
        self.services: Dict[str, Any] = {}

        self._initialize_services()
        self._register_tools()
        logger.info(f"GitHub MCP Server '{self.config.server_name}' initialized")

    @staticmethod
    def _load_config(env_file: Optional[str]) -> Config:
        try:
            config = Config(env_file)
            logger.info("Configuration loaded successfully")
            return config
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e.message}")
            for var in e.details.get("missing_variables", []):
                logger.error(f"  - {var}")
            sys.exit(1)

    def _initialize_services(self) -> None:
        """Initialize all services around the shared client."""
        per_page = self.config.default_per_page
        self.services["repository"] = RepositoryService(self.client, per_page)
        self.services["branch"] = BranchService(self.client, per_page)
        self.services["file"] = FileService(self.client)
        self.services["issue"] = IssueService(self.client, per_page)
        self.services["commit"] = CommitService(self.client, per_page)
        self.services["search"] = SearchService(self.client, per_page)
        logger.debug(f"Initialized services: {', '.join(self.services)}")

    def _register_tools(self) -> None:
        """Register all MCP tools with the server."""
        try:
            register_repository_tools(self.mcp, self.services["repository"])
            register_branch_tools(self.mcp, self.services["branch"])
            register_file_tools(self.mcp, self.services["file"])
            register_issue_tools(self.mcp, self.services["issue"])
            register_commit_tools(self.mcp, self.services["commit"])
            register_search_tools(self.mcp, self.services["search"])
            logger.info("All MCP tools registered successfully")
        except Exception as e:
            logger.error(f"Tool registration failed: {e}")
            raise GitHubMCPError(f"Failed to register tools: {e}", cause=e)

    def run(self, transport: str = "stdio") -> None:
        """
        Run the MCP server.

        Args:
            transport: Transport protocol ("stdio" or "sse")
        """
        logger.info(f"Starting GitHub MCP Server with {transport} transport")
        self.mcp.run(transport=transport)
