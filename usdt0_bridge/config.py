from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Treat a blank or non-positive timeout as "no deadline"."""

        super().model_post_init(__context)

        if self.bridge_timeout_seconds is not None and self.bridge_timeout_seconds <= 0:
            object.__setattr__(self, "bridge_timeout_seconds", None)

    log_level: str = Field(default="INFO", description="Logging level")

    # JSON-RPC transport
    rpc_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout applied to each JSON-RPC request",
    )

    # Bridge defaults
    bridge_timeout_seconds: Optional[float] = Field(
        default=120.0,
        description="Deadline for the read-only part of a bridge or quote operation",
    )
    bridge_max_fee: Optional[int] = Field(
        default=None,
        ge=0,
        description="Fallback ceiling for fee + bridge fee when the protocol config sets none",
        validation_alias=AliasChoices("bridge_max_fee", "USDT0_BRIDGE_MAX_FEE"),
    )

    @property
    def has_bridge_max_fee(self) -> bool:
        return self.bridge_max_fee is not None


# Global settings instance
settings = Settings()
