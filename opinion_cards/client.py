"""Anthropic API client abstraction for PRD summarization."""
import asyncio
import logging
from typing import Protocol

import anthropic
from anthropic import AsyncAnthropic

from .config import Settings, load_settings
from .errors import SummarizationError
from .prompts import PRD_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class Summarizer(Protocol):
    """Turns a prompt into generated text, or raises SummarizationError."""

    async def summarize(self, prompt: str) -> str:
        ...


class AnthropicSummarizer:
    """Single-shot wrapper around the Anthropic Messages API.

    One request per call and no retries: retry policy belongs to the
    caller. Every failure mode comes out as SummarizationError.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: AsyncAnthropic | None = None,
        system_prompt: str = PRD_SYSTEM_PROMPT
    ):
        self.settings = settings or load_settings()
        if client is None:
            if not self.settings.api_key:
                raise ValueError("ANTHROPIC_API_KEY environment variable is required")
            client = AsyncAnthropic(api_key=self.settings.api_key)
        self.client = client
        self.model = self.settings.model
        self.max_tokens = self.settings.max_tokens
        self.timeout = self.settings.timeout
        self.system_prompt = system_prompt

    async def summarize(self, prompt: str) -> str:
        logger.debug("Requesting summary from %s (%d prompt chars)", self.model, len(prompt))
        try:
            response = await asyncio.wait_for(
                self.client.messages.create(
                    model=self.model,
                    max_tokens=self.max_tokens,
                    system=self.system_prompt,
                    messages=[{"role": "user", "content": prompt}]
                ),
                timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise SummarizationError(f"timed out after {self.timeout:g}s") from e
        except anthropic.APIStatusError as e:
            raise SummarizationError(f"API returned status {e.status_code}: {e.message}") from e
        except anthropic.APIError as e:
            raise SummarizationError(f"API request failed: {e.message}") from e

        text = "".join(
            getattr(block, "text", "") for block in response.content
            if getattr(block, "type", None) == "text"
        ).strip()
        if not text:
            raise SummarizationError("empty response from summarization service")
        return text
