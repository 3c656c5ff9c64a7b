"""
Configuration settings for Icon Search Service
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Service
    service_name: str = "icon-search-service"
    service_version: str = "0.1.0"
    log_level: str = "INFO"
    log_stream: str = Field(
        default="stdout",
        description="stdout or stderr (the stdio MCP server forces stderr)",
    )

    # Symbol Source Configuration
    symbol_source_type: str = "manifest"  # manifest, module, static
    symbol_manifest_path: str = Field(
        default="",
        description="JSON manifest of exported icon names per library (empty = bundled manifest)",
    )
    symbol_module_package: str = Field(
        default="",
        description="Python package whose submodules export icon symbols, one per library prefix",
    )

    # Search
    search_result_cap: int = 100
    default_search_limit: int = 20
    default_library_icon_limit: int = 50
    priority_prefixes: list[str] = ["fa", "md", "ai", "bs", "hi", "io5", "fi"]

    # API
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3333, validation_alias=AliasChoices("api_port", "port"))
    api_reload: bool = False

    # MCP
    mcp_transport: str = Field(
        default="stdio",
        description="stdio, or sse to serve MCP over HTTP (GET /sse + POST /messages/) on the API port",
    )

    @property
    def api_base_url(self) -> str:
        """Base URL of the HTTP API as seen from the local host"""
        host = "localhost" if self.api_host in ("0.0.0.0", "") else self.api_host
        return f"http://{host}:{self.api_port}"

    @property
    def mcp_sse_url(self) -> str:
        """Event stream endpoint of the MCP server over HTTP"""
        return f"{self.api_base_url}/sse"


# Global settings instance
settings = Settings()
