# (c) Copyright Datacraft, 2026
"""Application settings configuration."""
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from siteqc.core.types import EventType, ParseFailurePolicy


DEFAULT_REQUIRED_DOCUMENT_TYPES: dict[EventType, list[str]] = {
	EventType.DRILLING: ["Drilling Log"],
	EventType.GWMS: ["Groundwater Monitoring"],
	EventType.SV_SAMPLING: ["Soil Sample Analysis"],
	EventType.SURVEY: ["Site Survey Report"],
	EventType.PVV: [],
	EventType.EXCAVATION: [],
}


class Settings(BaseSettings):
	db_url: str = "sqlite+aiosqlite:///./siteqc.db"
	db_echo: bool = False
	log_config: Path | None = None
	log_level: str = "INFO"
	api_prefix: str = "/api/v1"
	cors_origins: list[str] = ["*"]

	# Pagination
	default_page_size: int = Field(gt=0, default=50)
	max_page_size: int = Field(gt=0, default=200)

	# Evaluation policy
	numeric_equality: bool = True
	case_sensitive_contains: bool = True
	parse_failure: ParseFailurePolicy = ParseFailurePolicy.MISSING

	# Document type names each event type requires
	required_document_types: dict[EventType, list[str]] = Field(
		default_factory=lambda: {
			key: list(value) for key, value in DEFAULT_REQUIRED_DOCUMENT_TYPES.items()
		}
	)

	@computed_field
	@property
	def async_db_url(self) -> str:
		url = self.db_url
		if "postgresql+psycopg://" in url:
			return url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
		elif url.startswith("postgresql://"):
			return url.replace("postgresql://", "postgresql+asyncpg://", 1)
		elif url.startswith("sqlite:///"):
			return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
		return url

	model_config = SettingsConfigDict(
		env_prefix='sqc_',
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)


_settings: Settings | None = None


def get_settings() -> Settings:
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings
