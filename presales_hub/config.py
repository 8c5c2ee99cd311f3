"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from presales_hub.llm_providers import GeminiModel, LLMProvider, OpenAIModel

logger = logging.getLogger(__name__)


class LLMConfig(BaseModel):
    """Chat-completion call parameters."""

    default_provider: str = LLMProvider.OPENAI.value
    temperature: float = 0.2
    timeout_seconds: float | None = None  # None keeps httpx's default
    openai_base_url: str = "https://api.openai.com/v1"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai"


class QuestionBankConfig(BaseModel):
    """Discovery question aggregation and brief history limits."""

    recent_question_limit: int = 30
    history_default_limit: int = 20
    history_max_limit: int = 100


class Settings(BaseSettings):
    """Main configuration class."""

    environment: str = "development"
    log_level: str = "INFO"
    config_path: Path = Field(
        default=Path("config.yaml"),
        validation_alias=AliasChoices("PRESALES_CONFIG_PATH", "config_path"),
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    static_dir: Path = Path("dist")
    allowed_origins: str = Field(
        default="http://localhost:5173,http://localhost:3001",
        description="Comma-separated list of allowed CORS origins",
        validate_default=True,
    )

    # API Keys
    openai_api_key: str = ""
    gemini_api_key: str = ""
    logfire_token: str = ""

    # Models
    openai_model: str = Field(
        default=OpenAIModel.GPT_4O_MINI.value,
        validation_alias=AliasChoices("BRIEF_MODEL", "OPENAI_MODEL", "openai_model"),
    )
    gemini_model: str = GeminiModel.GEMINI_2_5_FLASH.value

    # MongoDB
    mongo_uri: str = ""
    mongo_db_name: str = "intelligence_hub_db"
    mongo_collection_brief: str = "brief"
    mongo_collection_discovery_questions: str = "discovery_questions"

    # Nested configuration sections
    llm: LLMConfig = Field(default_factory=LLMConfig)
    question_bank: QuestionBankConfig = Field(default_factory=QuestionBankConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> list[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    def get_api_key(self, env_name: str) -> str:
        """Look up an API key by its environment variable name (e.g. OPENAI_API_KEY)."""
        return getattr(self, env_name.lower(), "") or ""

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration."""
        config_path = self.config_path

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}. Using defaults.")
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in ["llm", "question_bank"]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    section_dict = section.model_dump()
                    section_dict.update(yaml_config[section_name] or {})
                    setattr(self, section_name, section.__class__(**section_dict))

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
