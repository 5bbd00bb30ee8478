import logging
from places_brief.core.config import Settings, settings as default_settings
from places_brief.core.logger import logs
from places_brief.core.llm_providers import (
    BaseLLMProvider,
    OpenAIProvider,
    MistralProvider,
    AnthropicProvider,
    GroqProvider
)

PROVIDERS = {
    "openai": (OpenAIProvider, "OPENAI_API_KEY", "OPENAI_MODEL"),
    "mistral": (MistralProvider, "MISTRAL_API_KEY", "MISTRAL_MODEL"),
    "anthropic": (AnthropicProvider, "ANTHROPIC_API_KEY", "ANTHROPIC_MODEL"),
    "groq": (GroqProvider, "GROQ_API_KEY", "GROQ_MODEL"),
}

class LLMService:
    def __init__(self, settings: Settings = None, provider: BaseLLMProvider = None):
        self.settings = settings or default_settings
        self.provider = provider or self._initialize_provider()
        logs.log(logging.INFO, f"LLM Provider initialized: {self.provider.get_provider_name()}")

    def _initialize_provider(self) -> BaseLLMProvider:
        """Initialize the selected LLM provider based on settings"""
        provider = self.settings.LLM_PROVIDER.lower()

        if provider not in PROVIDERS:
            logs.log(logging.WARNING, f"Unknown provider '{provider}', defaulting to OpenAI")
            provider = "openai"

        provider_cls, key_name, model_name = PROVIDERS[provider]
        return provider_cls(
            api_key=getattr(self.settings, key_name),
            model=getattr(self.settings, model_name)
        )

    async def call_tool(self, system_prompt: str, user_prompt: str, tool: dict) -> str:
        """Sends one system + user exchange and forces the model to answer through `tool`."""
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ]
        return await self.provider.call_tool(
            messages,
            tool,
            temperature=self.settings.LLM_TEMPERATURE,
            timeout=self.settings.LLM_TIMEOUT
        )
