"""
LLM Provider Implementations
Supports multiple LLM providers with a unified forced tool-call interface.
"""
import httpx
import json
import logging
from abc import ABC, abstractmethod
from places_brief.core.logger import logs

class BaseLLMProvider(ABC):
    """Base class for all LLM providers"""

    def __init__(self, api_key: str, model: str, transport: httpx.AsyncBaseTransport = None):
        self.api_key = api_key
        self.model = model
        self.transport = transport

    @abstractmethod
    async def call_tool(self, messages: list, tool: dict, temperature: float = 0.2, timeout: float = 30.0) -> str:
        """
        Forces the model to call `tool` and returns the call's arguments as JSON text.
        `tool` is a {"name", "description", "parameters"} declaration.
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the name of the provider"""
        pass

    async def _post(self, payload: dict, timeout: float) -> dict:
        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(
                    self.base_url,
                    json=payload,
                    headers=self.headers,
                    timeout=timeout
                )
                response.raise_for_status()
                return response.json()
            except Exception as e:
                logs.log(logging.ERROR, f"{self.get_provider_name()} API error: {str(e)}")
                raise


class OpenAICompatibleProvider(BaseLLMProvider):
    """Chat-completions style API with function tools (OpenAI, Mistral, Groq)"""

    base_url: str

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

    def build_payload(self, messages: list, tool: dict, temperature: float) -> dict:
        return {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "response_format": {"type": "json_object"},
            "tools": [{"type": "function", "function": tool}],
            "tool_choice": {"type": "function", "function": {"name": tool["name"]}}
        }

    async def call_tool(self, messages: list, tool: dict, temperature: float = 0.2, timeout: float = 30.0) -> str:
        data = await self._post(self.build_payload(messages, tool, temperature), timeout)

        tool_calls = data["choices"][0]["message"].get("tool_calls") or []
        for call in tool_calls:
            if call["function"]["name"] == tool["name"]:
                return call["function"]["arguments"]

        raise ValueError(f"{self.get_provider_name()} response has no '{tool['name']}' tool call")


class OpenAIProvider(OpenAICompatibleProvider):
    """OpenAI Provider (GPT-4o, GPT-4, etc.)"""

    base_url = "https://api.openai.com/v1/chat/completions"

    def get_provider_name(self) -> str:
        return "OpenAI"


class MistralProvider(OpenAICompatibleProvider):
    """Mistral AI Provider"""

    base_url = "https://api.mistral.ai/v1/chat/completions"

    def get_provider_name(self) -> str:
        return "Mistral AI"


class GroqProvider(OpenAICompatibleProvider):
    """Groq Provider (Fast inference with Llama, Mixtral, etc.)"""

    base_url = "https://api.groq.com/openai/v1/chat/completions"

    def get_provider_name(self) -> str:
        return "Groq"


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude Provider"""

    base_url = "https://api.anthropic.com/v1/messages"

    @property
    def headers(self) -> dict:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": "2023-06-01",
            "Content-Type": "application/json"
        }

    def build_payload(self, messages: list, tool: dict, temperature: float) -> dict:
        # Convert OpenAI-style messages to Anthropic format
        # Extract system message if present
        system_message = None
        converted_messages = []

        for msg in messages:
            if msg["role"] == "system":
                system_message = msg["content"]
            else:
                converted_messages.append({
                    "role": msg["role"],
                    "content": msg["content"]
                })

        payload = {
            "model": self.model,
            "messages": converted_messages,
            "temperature": temperature,
            "max_tokens": 1024,
            "tools": [{
                "name": tool["name"],
                "description": tool["description"],
                "input_schema": tool["parameters"]
            }],
            "tool_choice": {"type": "tool", "name": tool["name"]}
        }

        if system_message:
            payload["system"] = system_message

        return payload

    async def call_tool(self, messages: list, tool: dict, temperature: float = 0.2, timeout: float = 30.0) -> str:
        data = await self._post(self.build_payload(messages, tool, temperature), timeout)

        for block in data.get("content", []):
            if block.get("type") == "tool_use" and block.get("name") == tool["name"]:
                return json.dumps(block["input"])

        raise ValueError(f"Anthropic response has no '{tool['name']}' tool_use block")

    def get_provider_name(self) -> str:
        return "Anthropic Claude"
