from __future__ import annotations

from enum import Enum
from typing import Any, List

import httpx
from pydantic import BaseModel, Field, ValidationError

from src.core.constants import AppSettings
from src.core.exceptions import UpstreamError


class Endpoint(Enum):
    """Completion API endpoint paths"""

    COMPLETIONS = "/completions"


class CompletionChoice(BaseModel):
    """A single generated completion"""

    text: str


class CompletionPayload(BaseModel):
    """Subset of the completion API response that the proxy relies on"""

    choices: List[CompletionChoice] = Field(..., min_length=1)


class CompletionClient:
    """
    Async client for a text completion API.

    One outbound call per prompt, bearer authentication, bounded timeout.
    Every failure is reported as UpstreamError; nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = AppSettings.OPENAI_BASE_URL,
        model: str = AppSettings.COMPLETION_MODEL.value,
        max_tokens: int = AppSettings.COMPLETION_MAX_TOKENS,
        timeout: float = AppSettings.UPSTREAM_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = httpx.Timeout(timeout)

        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            transport=transport,
        )

    async def complete(self, prompt: str) -> str:
        """
        Return the first generated completion for prompt, whitespace-trimmed.

        Raises:
            UpstreamError: On network errors, timeouts, non-2xx responses
                or a response body without choices[0].text
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "max_tokens": self.max_tokens,
        }

        try:
            response = await self._http_client.post(
                Endpoint.COMPLETIONS.value, json=payload)
            response.raise_for_status()
            completion = CompletionPayload.model_validate(response.json())

        except httpx.TimeoutException as e:
            raise UpstreamError("Completion request timed out") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Completion request failed: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Completion request failed: {e}") from e
        except (ValidationError, ValueError) as e:
            raise UpstreamError(
                "Invalid completion payload received from server") from e

        return completion.choices[0].text.strip()

    async def aclose(self) -> None:
        """Close underlying HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> 'CompletionClient':
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
