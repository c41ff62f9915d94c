"""Prompt construction for chat-completion requests."""

from ai_commit.settings import Settings

# System prompt; {language} and {instructions} are filled per request
SYSTEM_PROMPT_TEMPLATE = (
    "You are a helpful assistant that generates commit messages in {language}. "
    "The user will provide a git diff, and you should generate a concise and "
    "informative commit message. {instructions}"
)

# Used when the user has not configured a custom prompt
DEFAULT_INSTRUCTIONS = (
    "Follow the Conventional Commits format (e.g. \"feat: add login endpoint\"). "
    "Write the subject line in imperative mood, at most 72 characters, "
    "optionally followed by a blank line and a short body. "
    "Only describe changes shown in the diff. "
    "Output only the commit message as plain text, without markdown fences or commentary."
)

USER_PROMPT_TEMPLATE = """Here is the git diff:
```
{diff}
```"""


def build_system_prompt(settings: Settings) -> str:
    """Build the system prompt from the configured language and prompt."""
    instructions = settings.prompt or DEFAULT_INSTRUCTIONS
    return SYSTEM_PROMPT_TEMPLATE.format(
        language=settings.language,
        instructions=instructions,
    ).strip()


def build_user_prompt(diff: str) -> str:
    """Embed the staged diff in the user prompt."""
    return USER_PROMPT_TEMPLATE.format(diff=diff)


def build_messages(diff: str, settings: Settings) -> list[dict[str, str]]:
    """Build the role-tagged message list for a chat-completion request.

    Args:
        diff: The staged diff.
        settings: Effective settings for this run.

    Returns:
        A system message followed by a user message.
    """
    return [
        {"role": "system", "content": build_system_prompt(settings)},
        {"role": "user", "content": build_user_prompt(diff)},
    ]


def build_request_body(diff: str, settings: Settings) -> dict:
    """Build the JSON body for the chat-completion POST."""
    return {
        "model": settings.model,
        "messages": build_messages(diff, settings),
    }
