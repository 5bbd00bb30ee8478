from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from places_brief.core.errors import ConfigurationError

class Settings(BaseSettings):
    # Google Places (New) Configuration
    GOOGLE_PLACES_API_KEY: Optional[str] = None
    PLACES_TIMEOUT: float = 30.0

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    # LLM Provider Selection
    LLM_PROVIDER: str = "openai"  # Options: openai, mistral, anthropic, groq
    LLM_TIMEOUT: float = 30.0
    LLM_TEMPERATURE: float = 0.2

    # OpenAI Configuration
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Mistral Configuration
    MISTRAL_API_KEY: Optional[str] = None
    MISTRAL_MODEL: str = "mistral-small-latest"

    # Anthropic Configuration
    ANTHROPIC_API_KEY: Optional[str] = None
    ANTHROPIC_MODEL: str = "claude-3-haiku-20240307"

    # Groq Configuration
    GROQ_API_KEY: Optional[str] = None
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def provider_name(self) -> str:
        provider = self.LLM_PROVIDER.lower()
        if provider not in ("openai", "mistral", "anthropic", "groq"):
            return "openai"
        return provider

    @property
    def llm_key_name(self) -> str:
        return f"{self.provider_name.upper()}_API_KEY"

    def require_secrets(self, summarize: bool = True) -> None:
        """
        Fails fast when a secret needed for this run is absent.
        The places key is always required; the LLM key only when summarizing.
        """
        missing = []
        if not self.GOOGLE_PLACES_API_KEY:
            missing.append("GOOGLE_PLACES_API_KEY")
        if summarize and not getattr(self, self.llm_key_name):
            missing.append(self.llm_key_name)

        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

settings = Settings()
