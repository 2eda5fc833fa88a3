import logging
from typing import List, Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator

logger = logging.getLogger("config")


class Settings(BaseSettings):
    """
    Application settings for the OpenAI provider and the Supabase store
    """

    # OpenAI API
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE: float = 0.4
    OPENAI_MAX_RETRIES: int = 2
    OPENAI_TIMEOUT_SECONDS: float = 120.0

    # Supabase Configuration
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    STORE_BACKEND: Literal["supabase", "memory"] = "supabase"

    # Application Settings
    APP_NAME: str = "EduMarketer"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Pydantic v2 configuration
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @field_validator('OPENAI_API_KEY')
    @classmethod
    def validate_openai_key(cls, v: str) -> str:
        """Validate OpenAI API key (empty means not configured)"""
        if not v:
            return v
        if len(v) < 20:
            raise ValueError("Invalid OPENAI_API_KEY (too short)")
        if not v.startswith('sk-'):
            raise ValueError("OPENAI_API_KEY should start with 'sk-'")
        return v

    @field_validator('SUPABASE_URL')
    @classmethod
    def validate_supabase_url(cls, v: str) -> str:
        """Validate Supabase URL"""
        if v and not v.startswith(('http://', 'https://')):
            raise ValueError("SUPABASE_URL must start with http:// or https://")
        return v

    @field_validator('SUPABASE_KEY')
    @classmethod
    def validate_supabase_key(cls, v: str) -> str:
        """Validate Supabase key"""
        if v and len(v) < 20:
            raise ValueError("Invalid SUPABASE_KEY (too short)")
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    def mask_secret(self, secret: str) -> str:
        """Mask secret for logging (show first 8 and last 4 chars)"""
        if not secret or len(secret) < 16:
            return "***"
        return f"{secret[:8]}...{secret[-4:]}"

    def log_summary(self) -> None:
        logger.info("=" * 80)
        logger.info(f"{self.APP_NAME} - Configuration Loaded")
        logger.info("=" * 80)
        logger.info(f"OpenAI API Key: {self.mask_secret(self.OPENAI_API_KEY)}")
        logger.info(f"OpenAI Model: {self.OPENAI_MODEL}")
        logger.info(f"Store backend: {self.STORE_BACKEND}")
        if self.STORE_BACKEND == "supabase":
            logger.info(f"Supabase URL: {self.SUPABASE_URL}")
            logger.info(f"Supabase Key: {self.mask_secret(self.SUPABASE_KEY)}")
        logger.info(f"Debug Mode: {self.DEBUG}")
        logger.info("=" * 80)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the settings singleton, loading .env on first use
    """
    global _settings

    if _settings is None:
        try:
            _settings = Settings()
        except Exception as e:
            logger.error(f"Configuration initialization failed: {e}")
            raise
    return _settings
