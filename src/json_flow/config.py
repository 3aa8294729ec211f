"""
Configuration module for JSON Flow.

Handles environment variables and default settings for the
command-line interface and the MCP server.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class FlowConfig:
    """Configuration settings for JSON Flow."""

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # Logging
    log_level: str = "INFO"

    # Output settings
    indent_json_output: int = 2
    verbose_output: bool = False

    @classmethod
    def from_env(cls) -> "FlowConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            log_level=os.getenv("JSON_FLOW_LOG_LEVEL", _defaults.log_level).upper(),
            indent_json_output=int(os.getenv("JSON_FLOW_INDENT", str(_defaults.indent_json_output))),
            verbose_output=os.getenv("JSON_FLOW_VERBOSE_OUTPUT", str(_defaults.verbose_output).lower()).lower() == "true",
        )

    @property
    def effective_log_level(self) -> str:
        """Log level to configure; verbose output forces DEBUG."""
        return "DEBUG" if self.verbose_output else self.log_level


config = FlowConfig.from_env()


def get_config() -> FlowConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FlowConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
