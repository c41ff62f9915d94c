"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import httpx
import pytest

from ai_commit.runner import CommandResult, RecordingRunner
from ai_commit.settings import Settings


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point the config directory at a temp dir and clear key/editor env vars."""
    config_dir = tmp_path / "ai-commit-config"
    monkeypatch.setenv("AI_COMMIT_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("AI_COMMIT_API_KEY", raising=False)
    for var in ("GIT_EDITOR", "VISUAL", "EDITOR"):
        monkeypatch.delenv(var, raising=False)
    return config_dir


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings():
    """Settings with an API key and otherwise default values."""
    return Settings(api_key="sk-x", model="gpt-3.5-turbo", language="en")


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/foo.py b/foo.py
index 1234567..abcdefg 100644
--- a/foo.py
+++ b/foo.py
@@ -1,2 +1,5 @@
 def main():
     pass
+
+def foo():
+    return True
"""


@pytest.fixture
def completion_payload():
    """Build a chat-completion response payload."""

    def _build(content="feat: add foo()", usage=True):
        payload = {
            "id": "chatcmpl-123",
            "object": "chat.completion",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }
        if usage:
            payload["usage"] = {"prompt_tokens": 120, "completion_tokens": 8, "total_tokens": 128}
        return payload

    return _build


@pytest.fixture
def mock_transport():
    """Build an httpx.MockTransport that records requests.

    Returns a factory taking either a JSON payload, raw text, or an exception
    to raise. The returned transport has a ``requests`` list attribute.
    """

    def _build(status_code=200, json_body=None, text=None, error=None):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error(f"simulated {error.__name__}", request=request)
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, text=text or "")

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return _build


@pytest.fixture
def fake_runner():
    """A RecordingRunner with a staged diff and repo root scripted."""

    def _build(diff="+ added foo()", repo_root="/tmp/repo", extra=None):
        responses = {
            ("git", "rev-parse"): CommandResult(["git", "rev-parse"], 0, repo_root + "\n"),
            ("git", "diff"): CommandResult(["git", "diff", "--staged"], 0, diff),
        }
        responses.update(extra or {})
        return RecordingRunner(responses=responses)

    return _build
