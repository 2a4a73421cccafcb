"""HTTP client for the Anthropic Messages API."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import requests

from .config import ExtractConfig, load_config
from .constants import ANTHROPIC_VERSION, MESSAGES_ENDPOINT
from .errors import (
    ExtractAPIError,
    ExtractError,
    ExtractNetworkError,
    ExtractRateLimitError,
    ExtractTimeoutError,
)

logger = logging.getLogger(__name__)


class AnthropicClient:
    def __init__(
        self,
        config: Optional[ExtractConfig] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.config = config or load_config()
        self.base_url = self.config.api_host
        self.model = model or self.config.model
        self.timeout = timeout or self.config.timeout_seconds
        self.retry_attempts = max(1, self.config.retry_attempts)
        self.retry_delay = max(0.0, self.config.retry_delay_seconds)

    def create_message(self, prompt: str) -> str:
        payload = {
            "model": self.model,
            "max_tokens": self.config.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        data = self._request("POST", MESSAGES_ENDPOINT, payload)
        return _first_text_block(data)

    def _request(self, method: str, endpoint: str, payload: dict[str, Any] | None) -> dict[str, Any]:
        url = f"{self.base_url}{endpoint}"
        headers = {
            "x-api-key": self.config.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

        last_error: ExtractError | None = None

        for attempt in range(1, self.retry_attempts + 1):
            try:
                response = requests.request(
                    method,
                    url,
                    headers=headers,
                    json=payload,
                    timeout=self.timeout,
                )
            except requests.Timeout as exc:
                last_error = ExtractTimeoutError("Request timeout", timeout=self.timeout)
                if not self._should_retry(last_error, attempt):
                    raise last_error from exc
                self._wait(attempt, last_error)
                continue
            except requests.RequestException as exc:
                last_error = ExtractNetworkError("Network connection failed", exc)
                if not self._should_retry(last_error, attempt):
                    raise last_error from exc
                self._wait(attempt, last_error)
                continue

            if not response.ok:
                last_error = self._http_error(response)
                if not self._should_retry(last_error, attempt):
                    raise last_error
                self._wait(attempt, last_error)
                continue

            try:
                return response.json()
            except ValueError as exc:
                raise ExtractAPIError("Invalid JSON response from API", response=response.text) from exc

        if last_error:
            raise last_error
        raise ExtractError("Unknown error occurred")

    def _wait(self, attempt: int, error: ExtractError) -> None:
        delay = self.retry_delay * attempt
        logger.warning("Attempt %d/%d failed (%s), retrying in %.1fs", attempt, self.retry_attempts, error.message, delay)
        time.sleep(delay)

    def _http_error(self, response: requests.Response) -> ExtractError:
        status_code = response.status_code
        message = _error_message(response)
        if status_code == 401:
            return ExtractAPIError("Unauthorized: Invalid API key", status_code)
        if status_code == 403:
            return ExtractAPIError("Forbidden: Access denied", status_code)
        if status_code == 404:
            return ExtractAPIError("Not found: Invalid endpoint or model", status_code)
        if status_code == 429:
            retry_after = response.headers.get("retry-after")
            return ExtractRateLimitError(
                "Rate limit exceeded",
                int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        if status_code >= 500:
            return ExtractAPIError("Internal server error", status_code)
        return ExtractAPIError(message, status_code)

    def _should_retry(self, error: ExtractError, attempt: int) -> bool:
        if attempt >= self.retry_attempts:
            return False
        if isinstance(error, (ExtractNetworkError, ExtractTimeoutError)):
            return True
        if isinstance(error, ExtractAPIError) and error.status_code and 500 <= error.status_code < 600:
            return True
        return False


def _error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text.strip() or response.reason
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return response.text.strip() or response.reason


def _first_text_block(data: dict[str, Any]) -> str:
    for block in data.get("content") or []:
        if isinstance(block, dict) and block.get("type") == "text":
            return str(block.get("text", ""))
    raise ExtractAPIError("Response contained no text content", response=data)
