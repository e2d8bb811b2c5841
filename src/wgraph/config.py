import logging
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Configuration-related error."""
    pass


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    format: str = (
        "%(asctime)-20s %(name)-40s "
        "%(levelname)-8s: %(message)s"
    )


class GraphSettings(BaseModel):
    default_capacity: int = Field(
        50,
        ge=1,
        description="Vertex capacity used when a graph is built without an explicit one.",
    )
    log_mutations: bool = Field(
        False,
        description="Log every vertex/edge mutation at DEBUG level.",
    )


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class AppSettings(BaseSettings):
    """
    Canonical configuration for wgraph.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables
    3. .env and .env.local
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="WGRAPH_",  # WGRAPH_LOGGING__LEVEL, WGRAPH_GRAPH__DEFAULT_CAPACITY, ...
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    app_name: str = "wgraph"

    logging: LoggingSettings = LoggingSettings()
    graph: GraphSettings = GraphSettings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence (handy in tests).
    """
    return AppSettings(**overrides)


def configure_logging(settings: Optional[AppSettings] = None) -> logging.Logger:
    """
    Apply the logging section to the ``wgraph`` logger hierarchy.

    A stream handler is attached once; calling this again only updates
    level and format.
    """
    if settings is None:
        settings = get_settings()

    level = logging.getLevelName(settings.logging.level)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level {settings.logging.level!r}")

    root = logging.getLogger("wgraph")
    root.setLevel(level)

    formatter = logging.Formatter(settings.logging.format)
    handler = next(
        (h for h in root.handlers if getattr(h, "_wgraph_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._wgraph_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    handler.setFormatter(formatter)

    return root
