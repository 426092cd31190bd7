"""
Centralized configuration management for shapegraph.

Settings are read from environment variables (prefix ``SHAPEGRAPH_``) and an
optional ``.env`` file, with defaults suitable for local use.
"""

from functools import lru_cache
from typing import Optional, Dict, Any
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationError


XPDL_21_NAMESPACE = "http://www.wfmc.org/2008/XPDL2.1"


class Settings(BaseSettings):
    """
    Centralized settings for shapegraph.

    Uses Pydantic for validation and type safety.
    """

    # === Application Settings ===
    app_name: str = Field(default="shapegraph", description="Application name, written as the ToolId of exported XPDL graphics")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    # === Import Settings ===
    strict_references: bool = Field(
        default=True,
        description="Fail imports on outgoing/target references to unknown resource ids",
    )

    # === Export Settings ===
    json_indent: Optional[int] = Field(default=2, description="Indentation for exported JSON")
    xml_encoding: str = Field(default="UTF-8", description="Encoding declared in exported XML")
    xml_pretty_print: bool = Field(default=True, description="Indent exported XML")
    xpdl_namespace: str = Field(
        default=XPDL_21_NAMESPACE,
        description="Namespace for exported XPDL elements (empty for none)",
    )

    # === Logging Configuration ===
    @property
    def logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return {
            'level': self.log_level,
            'file': self.log_file,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator('json_indent')
    @classmethod
    def validate_json_indent(cls, v):
        if v is not None and v < 0:
            raise ValueError("JSON indent cannot be negative")
        return v

    model_config = {
        "env_prefix": "SHAPEGRAPH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def xpdl_namespace_or_none(self) -> Optional[str]:
        """XPDL namespace, or None when exporting unqualified elements."""
        return self.xpdl_namespace or None


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once per application lifecycle.

    Raises:
        ConfigurationError: If an environment value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid shapegraph settings: {e}") from e
