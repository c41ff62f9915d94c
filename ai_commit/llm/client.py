"""Chat-completion client.

Sends a single POST to the configured endpoint. There are no retries: a
failed request surfaces as a typed LLMError and the run is aborted.
"""

import os
from dataclasses import dataclass
from typing import Optional

import httpx

from ai_commit import __version__
from ai_commit.config import API_KEY_ENV_VAR
from ai_commit.llm.exceptions import AuthError, HttpStatusError, NetworkError
from ai_commit.llm.parsing import extract_message, parse_response
from ai_commit.llm.prompts import build_request_body
from ai_commit.settings import Settings


@dataclass
class GenerationResult:
    """Result from a generation call, including token usage."""

    message: str
    model: str
    input_tokens: int
    output_tokens: int


def get_api_key(settings: Settings) -> str:
    """Get the API key from settings, falling back to the environment.

    Returns:
        The API key string.

    Raises:
        AuthError: If neither config.toml nor AI_COMMIT_API_KEY provides a key.
    """
    api_key = settings.api_key or os.environ.get(API_KEY_ENV_VAR)
    if not api_key:
        raise AuthError(
            "API key not set. Please run `ai-commit config set-api-key <YOUR_KEY>` "
            f"or set the {API_KEY_ENV_VAR} environment variable."
        )
    return api_key


class ChatCompletionClient:
    """Client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        """Initialize the client.

        Args:
            settings: Effective settings (url, model, timeout, API key).
            transport: Optional httpx transport, used to substitute the network
                in tests.
        """
        self.settings = settings
        self.transport = transport

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "User-Agent": f"ai-commit/{__version__}",
        }

    def generate(self, diff: str) -> GenerationResult:
        """Generate a commit message for the given diff.

        Args:
            diff: The staged diff.

        Returns:
            A GenerationResult with the message and token usage.

        Raises:
            AuthError: If no API key is available (checked before sending).
            NetworkError: If the request cannot be sent or times out.
            HttpStatusError: If the response status is not 2xx.
            ParseError: If the response body is not a chat-completion payload.
        """
        api_key = get_api_key(self.settings)
        body = build_request_body(diff, self.settings)

        try:
            with httpx.Client(
                timeout=self.settings.timeout,
                transport=self.transport,
            ) as client:
                response = client.post(
                    self.settings.url,
                    headers=self.build_headers(api_key),
                    json=body,
                )
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"Request to {self.settings.url} timed out after {self.settings.timeout}s: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to send request to {self.settings.url}: {e}") from e

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.text)

        parsed = parse_response(response.text)
        message = extract_message(parsed)

        usage = parsed.usage
        return GenerationResult(
            message=message,
            model=self.settings.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
