"""
Adapter: AI chat-completion gateway.

Implements ChatCompletionPort over an OpenAI-compatible
`/chat/completions` endpoint using httpx.
"""

import logging
from typing import Any, Optional

import httpx

from app.domain.operations.errors import (
    AICreditsExhaustedError,
    AIGatewayError,
    AIRateLimitedError,
)
from app.domain.operations.ports import ChatCompletionPort

logger = logging.getLogger(__name__)


class ChatCompletionAdapter(ChatCompletionPort):
    """Calls the AI gateway and returns the first choice's text.

    Args:
        url: Full URL of the chat-completions endpoint.
        api_key: Bearer token for the gateway.
        model: Model identifier sent with every request.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        url: str,
        api_key: Optional[str],
        model: str,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.3,
        max_tokens: Optional[int] = None,
    ) -> str:
        if not self._api_key:
            raise AIGatewayError("API key is not configured")

        payload: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.post(
                    self._url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                )
        except httpx.HTTPError as exc:
            logger.error("AI gateway request failed: %s", exc)
            raise AIGatewayError(str(exc)) from exc

        if resp.status_code == 429:
            raise AIRateLimitedError()
        if resp.status_code == 402:
            raise AICreditsExhaustedError()
        if resp.is_error:
            logger.error("AI gateway returned HTTP %d", resp.status_code)
            raise AIGatewayError(f"HTTP {resp.status_code}", resp.status_code)

        try:
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise AIGatewayError("unexpected response shape") from exc
        return (content or "").strip()
