# bookmind/llm_client.py — chat completions over an OpenAI-compatible HTTP API
import logging
from typing import Any, Dict

import requests

from .errors import ApiError, EmptyResponseError, ParseError, TransportError
from .settings import Settings

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def build_request(
    model: str,
    system_prompt: str,
    user_prompt: str,
    max_tokens: int,
    temperature: float,
) -> Dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        "max_tokens": max_tokens,
        "temperature": temperature,
        "stream": False,
    }


def _api_error(err: Any) -> ApiError:
    if isinstance(err, dict):
        code = err.get("code")
        return ApiError(
            str(err.get("message") or "unknown error"),
            error_type=err.get("type"),
            code=str(code) if code is not None else None,
        )
    return ApiError(str(err))


class CompletionClient:
    """One synchronous, non-streaming completion per call. No retries."""

    def __init__(self, api_key: str, model: str, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, s: Settings) -> "CompletionClient":
        return cls(api_key=s.api_key, model=s.model, base_url=s.base_url, timeout=s.timeout)

    def complete(self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float) -> str:
        body = build_request(self.model, system_prompt, user_prompt, max_tokens, temperature)
        try:
            r = requests.post(
                f"{self.base_url}/chat/completions",
                json=body,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.warning("completion request failed: %s", e)
            raise TransportError(f"failed to make request: {e}") from e

        try:
            data = r.json()
        except ValueError as e:
            raise ParseError(f"failed to parse response (HTTP {r.status_code})") from e
        if not isinstance(data, dict):
            raise ParseError(f"unexpected response payload: {type(data).__name__}")

        if data.get("error") is not None:
            err = _api_error(data["error"])
            log.warning("completion API error: %s", err.message)
            raise err
        if not r.ok:
            raise ApiError(f"HTTP {r.status_code}", code=str(r.status_code))

        choices = data.get("choices") or []
        if not choices:
            raise EmptyResponseError("no response from completion service")

        try:
            content = choices[0]["message"]["content"]
        except (KeyError, TypeError, IndexError) as e:
            raise ParseError("completion choice has no message content") from e
        if not isinstance(content, str):
            raise ParseError("completion content is not text")
        return content
