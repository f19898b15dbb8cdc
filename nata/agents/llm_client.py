"""Unified async LLM client over OpenAI-compatible endpoints."""

from typing import Optional

from openai import AsyncOpenAI

from nata.config import settings


class LLMClient:
    """Async chat client - Gemini by default, Ollama/Groq/OpenAI on request."""

    PROVIDERS = {
        "gemini": {
            "base_url": "https://generativelanguage.googleapis.com/v1beta/openai/",
            "model": "gemini-2.0-flash",
            "api_key": None
        },
        "ollama": {
            "base_url": "http://localhost:11434/v1",
            "model": "llama3:latest",
            "api_key": "ollama"
        },
        "groq": {
            "base_url": "https://api.groq.com/openai/v1",
            "model": "llama-3.1-8b-instant",
            "api_key": None
        },
        "openai": {
            "base_url": "https://api.openai.com/v1",
            "model": "gpt-4o-mini",
            "api_key": None
        }
    }

    def __init__(self, provider: str = "gemini", model: Optional[str] = None,
                 timeout: Optional[float] = None):
        if provider not in self.PROVIDERS:
            raise ValueError(f"Unknown LLM provider: {provider!r}")
        self.provider = provider
        config = self.PROVIDERS[provider]

        api_key = config["api_key"]
        if provider == "gemini":
            api_key = settings.google_api_key
        elif provider == "groq":
            api_key = settings.groq_api_key
        elif provider == "openai":
            api_key = settings.openai_api_key

        # Retries are owned by the caller, which also bounds the total wait.
        self.client = AsyncOpenAI(
            base_url=config["base_url"],
            api_key=api_key or "not-needed",
            timeout=timeout,
            max_retries=0
        )
        self.model = model or config["model"]

    async def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: float = 0.1,
        max_tokens: int = 200
    ) -> dict:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens
            )

            return {
                "success": True,
                "text": response.choices[0].message.content,
                "provider": self.provider,
                "model": self.model
            }

        except Exception as e:
            return {"success": False, "error": str(e)}
