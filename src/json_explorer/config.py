#path: src/json_explorer/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any
import yaml
from pathlib import Path

ALL_TOOLS = ["json-explore", "json-query"]


class Settings(BaseSettings):
    ENV: str = "dev"
    MCP_TRANSPORT: str = "stdio"
    MCP_HOST: str = "0.0.0.0"
    MCP_PORT: int = 8013
    CONFIG_PATH: str = "config/explorer.yaml"

    # json-explore defaults
    DEFAULT_VERBOSITY: int = 4
    LIST_DISPLAY_LIMIT: int = 5
    OBJECT_DISPLAY_LIMIT: int = 6
    CHAR_DISPLAY_LIMIT: int = 200

    # json-query defaults
    QUERY_DEFAULT_LIMIT: int = 20
    QUERY_MIN_LIMIT: int = 10
    QUERY_OVERFETCH: int = 5

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def load_config(self) -> dict[str, Any]:
        p = Path(self.CONFIG_PATH)
        if not p.exists():
            return {"version": 1}
        with p.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {"version": 1}

    def get_enabled_mcp_tools(self) -> list[str]:
        """
        Get list of enabled MCP tools from configuration.

        Returns:
            List of enabled tool names. Defaults to all tools if not configured.
        """
        config = self.load_config()
        mcp_config = config.get("mcp", {}) or {}
        return mcp_config.get("enabled_tools", list(ALL_TOOLS))


settings = Settings()
