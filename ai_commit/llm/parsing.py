"""Response parsing for chat-completion payloads."""

import json
from typing import Optional

from pydantic import BaseModel, ValidationError

from ai_commit.llm.exceptions import ParseError


class ChatMessage(BaseModel):
    role: Optional[str] = None
    content: str


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0


class ChatCompletionResponse(BaseModel):
    """The subset of a chat-completion response that ai-commit reads.

    Unknown fields (id, created, finish_reason, ...) are ignored.
    """

    choices: list[ChatChoice]
    usage: Optional[ChatUsage] = None


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapping the whole message, if present.

    Args:
        text: The raw message content.

    Returns:
        The content without the surrounding fence, stripped of whitespace.
    """
    cleaned = text.strip()

    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        # Remove first line (``` or ```text)
        lines = lines[1:]
        # Remove last line if it's ```
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines).strip()

    return cleaned


def parse_response(raw_body: str) -> ChatCompletionResponse:
    """Parse and validate a chat-completion response body.

    Args:
        raw_body: The HTTP response body.

    Returns:
        The validated response.

    Raises:
        ParseError: If the body is not JSON, lacks choices[].message.content,
            or has no choices at all.
    """
    try:
        payload = json.loads(raw_body)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Failed to parse JSON response: {e}\nRaw response: {raw_body}"
        ) from e

    try:
        response = ChatCompletionResponse.model_validate(payload)
    except ValidationError as e:
        raise ParseError(
            f"API response does not match the expected chat-completion shape.\n"
            f"Error: {e}\n"
            f"Raw response: {raw_body}"
        ) from e

    if not response.choices:
        raise ParseError("API response is empty.")

    return response


def extract_message(response: ChatCompletionResponse) -> str:
    """Get the commit message text from the first choice.

    Raises:
        ParseError: If the message is empty.
    """
    message = strip_code_fences(response.choices[0].message.content)
    if not message:
        raise ParseError("API response contains an empty message.")
    return message


def parse_completion(raw_body: str) -> str:
    """Extract the commit message text from a chat-completion response body."""
    return extract_message(parse_response(raw_body))
