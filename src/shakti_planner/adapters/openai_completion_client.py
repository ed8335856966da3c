"""OpenAI-compatible chat completion client with forced tool calls."""

import logging
from dataclasses import dataclass

import httpx
import openai
from openai import AsyncOpenAI

from shakti_planner.errors import (
    ConfigurationError,
    QuotaExceededError,
    RateLimitedError,
    TransportError,
    UpstreamError,
)
from shakti_planner.services.completions import (
    CompletionClient,
    RawCompletion,
    ToolSchema,
)
from shakti_planner.services.prompts import PromptPair

logger = logging.getLogger(__name__)

HTTP_PAYMENT_REQUIRED = 402


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by an OpenAI-compatible chat completions API."""

    client: AsyncOpenAI | None
    model: str

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        *,
        api_key: str | None,
        base_url: str,
        model: str,
        timeout_seconds: float | None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "OpenAICompletionClient":
        """Create a client. Without an API key every call fails fast."""
        if not api_key:
            return cls(client=None, model=model)
        client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
            max_retries=0,
            http_client=http_client,
        )
        return cls(client=client, model=model)

    async def complete(self, prompt: PromptPair, tool: ToolSchema) -> RawCompletion:
        """Send one chat completion request forcing the given tool."""
        if self.client is None:
            raise ConfigurationError("Completion API key not configured")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": prompt.system},
                    {"role": "user", "content": prompt.user},
                ],
                tools=[tool.tool_definition()],
                tool_choice=tool.tool_choice(),
            )
        except openai.RateLimitError as exc:
            logger.warning(
                "Completion endpoint rate limited", extra={"tool": tool.name}
            )
            raise RateLimitedError() from exc
        except openai.APIStatusError as exc:
            if exc.status_code == HTTP_PAYMENT_REQUIRED:
                logger.warning(
                    "Completion endpoint requires payment", extra={"tool": tool.name}
                )
                raise QuotaExceededError() from exc
            body = exc.response.text
            logger.error(
                "AI gateway error",
                extra={"tool": tool.name, "status_code": exc.status_code, "body": body},
            )
            raise UpstreamError(exc.status_code, body) from exc
        except openai.APIConnectionError as exc:
            logger.exception(
                "Completion endpoint unreachable", extra={"tool": tool.name}
            )
            raise TransportError(
                f"Could not reach the completion endpoint: {exc}"
            ) from exc
        return response.model_dump()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self.client is not None:
            await self.client.close()
