"""Message generator module for ai-commit.

This module turns a staged diff into a commit message by calling an
OpenAI-compatible chat-completion endpoint.
"""

from typing import Optional

import httpx
from dotenv import load_dotenv

from ai_commit.llm.client import ChatCompletionClient, GenerationResult, get_api_key
from ai_commit.llm.exceptions import (
    AuthError,
    HttpStatusError,
    LLMError,
    NetworkError,
    ParseError,
)
from ai_commit.llm.parsing import parse_completion
from ai_commit.llm.prompts import build_messages, build_request_body
from ai_commit.settings import Settings

# Load environment variables from .env file
load_dotenv()


def generate(
    diff: str,
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> GenerationResult:
    """Generate a commit message from the staged diff.

    This is the main entry point for generating commit messages.

    Args:
        diff: The staged diff text.
        settings: Effective settings (stored settings merged with overrides).
        transport: Optional httpx transport for tests.

    Returns:
        A GenerationResult containing the message and token usage.

    Raises:
        AuthError: If the API key is not set.
        NetworkError: If the request cannot be sent.
        HttpStatusError: If the endpoint returns a non-2xx status.
        ParseError: If the response cannot be parsed.
    """
    return ChatCompletionClient(settings, transport=transport).generate(diff)


def generate_commit_message(
    diff: str,
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """Generate a commit message and return only its text."""
    return generate(diff, settings, transport=transport).message


# Export commonly used items
__all__ = [
    "AuthError",
    "ChatCompletionClient",
    "GenerationResult",
    "HttpStatusError",
    "LLMError",
    "NetworkError",
    "ParseError",
    "build_messages",
    "build_request_body",
    "generate",
    "generate_commit_message",
    "get_api_key",
    "parse_completion",
]
